"""Remote creature catalog served over HTTP (PokeAPI layout)."""
from __future__ import annotations

import logging
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from pokebattle.data.catalogs.base import parse_catalog_record
from pokebattle.data.errors import CatalogTransportError
from pokebattle.data.json_loader import decode_json
from pokebattle.domain.battle_models import Combatant

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://pokeapi.co/api/v2/pokemon"
DEFAULT_TIMEOUT_SECONDS = 10.0


class HttpCatalog:
    """Fetches creature records with one GET per id."""

    def __init__(self, base_url: str = DEFAULT_CATALOG_URL, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds

    def url_for(self, combatant_id: int) -> str:
        return f"{self._base_url}/{combatant_id}"

    def get_record(self, combatant_id: int) -> Combatant:
        url = self.url_for(combatant_id)
        logger.debug("GET %s", url)
        try:
            request = Request(url, headers={"Accept": "application/json"})
            with urlopen(request, timeout=self._timeout) as response:
                body = response.read()
        except HTTPError as exc:
            raise CatalogTransportError(f"{url} returned HTTP {exc.code}") from exc
        except (URLError, HTTPException, OSError, ValueError) as exc:
            raise CatalogTransportError(f"Unable to reach {url}: {exc}") from exc
        return parse_catalog_record(combatant_id, decode_json(body, url))
