"""Wikidata Query Service (SPARQL) client."""

from __future__ import annotations

import logging
from typing import Any

from config import get_wikidata_sparql_url
from core.exceptions import ExternalServiceException
from core.http.request import request_json
from core.http.session import get_session
from related_features.parsers import parse_sparql_bindings

logger = logging.getLogger(__name__)


class WikidataClient:
    def __init__(self, endpoint: str | None = None) -> None:
        self._endpoint = endpoint or get_wikidata_sparql_url()

    async def query(self, sparql: str) -> list[dict[str, Any]]:
        """
        Execute a SELECT query and return its result bindings in order.

        The query text travels percent-encoded in the ``query`` parameter.
        """
        session = await get_session()
        data = await request_json(
            self._endpoint,
            session=session,
            params={"format": "json", "query": sparql},
            headers={"Accept": "application/sparql-results+json"},
            service_name="Wikidata query",
        )
        bindings = parse_sparql_bindings(data)
        if bindings is None:
            msg = "Wikidata query error: unexpected response"
            raise ExternalServiceException(msg, {"url": self._endpoint})
        logger.debug("Wikidata query returned %d bindings", len(bindings))
        return bindings
