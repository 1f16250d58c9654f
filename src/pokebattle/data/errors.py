"""Custom exceptions for catalog access."""


class CatalogError(Exception):
    """Base exception for the catalog layer."""


class CatalogTransportError(CatalogError):
    """Raised when the catalog can not be reached or read."""


class CatalogFormatError(CatalogError):
    """Raised when a catalog record is missing fields or has the wrong shape."""


class CombatantLookupError(LookupError):
    """Raised when a combatant can not be fetched for the given id."""

    def __init__(self, combatant_id: int, reason: str = "") -> None:
        self.combatant_id = combatant_id
        self.reason = reason
        message = f"Failed to fetch combatant with id {combatant_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
