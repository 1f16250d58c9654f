"""Data layer: catalog access and file helpers."""

from .errors import CatalogError, CatalogFormatError, CatalogTransportError, CombatantLookupError
from .paths import get_catalog_path, get_package_data_dir

__all__ = [
    "CatalogError",
    "CatalogFormatError",
    "CatalogTransportError",
    "CombatantLookupError",
    "get_catalog_path",
    "get_package_data_dir",
]
