"""
Overpass API client.

Looks up the tags of a single OpenStreetMap element.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from config import get_overpass_url
from core.exceptions import ExternalServiceException
from core.http.request import request_json
from core.http.session import get_session
from related_features.parsers import parse_overpass_tags
from related_features.queries import build_overpass_query

if TYPE_CHECKING:
    from related_features.elements import ElementRef

logger = logging.getLogger(__name__)


class OverpassClient:
    def __init__(self, base_url: str | None = None) -> None:
        self._url = base_url or get_overpass_url()

    async def interpret(self, query: str) -> dict[str, Any]:
        """Run an Overpass QL query and return the decoded JSON document."""
        session = await get_session()
        data = await request_json(
            self._url,
            session=session,
            params={"data": query},
            service_name="Overpass",
        )
        if not isinstance(data, dict):
            msg = "Overpass error: unexpected response"
            raise ExternalServiceException(msg, {"url": self._url})
        return data

    async def fetch_tags(self, element: ElementRef) -> dict[str, str] | None:
        """
        Fetch the tags of ``element``.

        Returns None when the element is unknown or carries no tags; transport
        and HTTP failures raise.
        """
        payload = await self.interpret(build_overpass_query(element))
        tags = parse_overpass_tags(payload)
        if tags is None:
            logger.debug("Overpass returned no tags for %s", element)
        return tags
