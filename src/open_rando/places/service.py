"""Free-text place search backed by a Nominatim instance."""

import logging

import requests
from pydantic import TypeAdapter, ValidationError

from open_rando.config import Settings
from open_rando.exceptions import ProviderError
from open_rando.http import get_json
from open_rando.places.schemas import Place

logger = logging.getLogger(__name__)

PROVIDER_NAME = "nominatim"
MIN_QUERY_LENGTH = 2
MAX_RESULTS = 5

_places_adapter = TypeAdapter(list[Place])


class GeocodeService:
    """Looks up places matching a free-text query."""

    def __init__(self, settings: Settings, session: requests.Session) -> None:
        self._settings = settings
        self._session = session

    def search(self, query: str | None) -> list[Place]:
        """Search for up to five places matching ``query``.

        Queries shorter than two characters return no results without
        contacting the provider.

        Raises:
            ProviderError: If the provider call fails or the body is malformed.
        """
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        data = get_json(
            self._session,
            PROVIDER_NAME,
            f"{self._settings.nominatim_base_url}/search",
            params={"format": "json", "addressdetails": 1, "limit": MAX_RESULTS, "q": query},
            headers={
                "User-Agent": self._settings.user_agent,
                "Accept-Language": self._settings.accept_language,
            },
            timeout=self._settings.request_timeout_seconds,
        )

        try:
            places = _places_adapter.validate_python(data)
        except ValidationError as exc:
            raise ProviderError(PROVIDER_NAME, "malformed search response") from exc

        logger.debug("Geocode lookup", extra={"query": query, "results": len(places)})
        return places[:MAX_RESULTS]
