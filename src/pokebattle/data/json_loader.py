"""Low-level JSON helpers for catalogs."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import CatalogFormatError, CatalogTransportError


def load_json(path: Path) -> object:
    """Load JSON from disk and raise a catalog error on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CatalogTransportError(f"Catalog file not found: {path}") from exc
    except OSError as exc:
        raise CatalogTransportError(f"Unable to read catalog file: {path}") from exc
    return decode_json(text, str(path))


def decode_json(text: str | bytes, source: str) -> object:
    """Decode a JSON document, naming the source in the error."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CatalogFormatError(f"Invalid JSON from {source}: {exc}") from exc
