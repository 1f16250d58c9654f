"""Service-layer exceptions."""


class InvalidOperationError(Exception):
    """Raised when an operation is not valid in the current battle phase."""


class InvalidStateError(ValueError):
    """Raised when a battle state breaks one of its invariants."""
