"""Global constants for the core package."""

from typing import Final

# HTTP Client Constants
HTTP_CONNECTION_LIMIT: Final[int] = 10
HTTP_TIMEOUT_CONNECT: Final[float] = 10.0
HTTP_TIMEOUT_SOCK_READ: Final[float] = 30.0
HTTP_TIMEOUT_TOTAL: Final[float] = 60.0

# Public endpoints
DEFAULT_OVERPASS_URL: Final[str] = "https://overpass-api.de/api/interpreter"
DEFAULT_WIKIDATA_SPARQL_URL: Final[str] = (
    "https://query.wikidata.org/bigdata/namespace/wdq/sparql"
)
DEFAULT_USER_AGENT: Final[str] = "Roebling/1.0"

# Universal label language, always last in the fallback list
FALLBACK_LANGUAGE: Final[str] = "en"
