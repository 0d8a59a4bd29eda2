"""HTTP client utilities and session management."""

from core.http.overpass import OverpassClient
from core.http.request import request_json
from core.http.session import cleanup_session, get_session
from core.http.wikidata import WikidataClient

__all__ = [
    "OverpassClient",
    "WikidataClient",
    "cleanup_session",
    "get_session",
    "request_json",
]
