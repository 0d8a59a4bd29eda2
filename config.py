"""Centralized configuration for environment variables and external APIs.

This module is the single source of truth for configuration used across the
application. Import getters from here rather than calling os.getenv directly
in multiple places.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from core.constants import (
    DEFAULT_OVERPASS_URL,
    DEFAULT_USER_AGENT,
    DEFAULT_WIKIDATA_SPARQL_URL,
)

# Load environment variables from .env if present
load_dotenv()


def _env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def get_overpass_url() -> str:
    """Overpass interpreter endpoint used for tag lookups."""
    return (_env("OVERPASS_URL") or DEFAULT_OVERPASS_URL).rstrip("/")


def get_wikidata_sparql_url() -> str:
    """Wikidata Query Service SPARQL endpoint."""
    return (_env("WIKIDATA_SPARQL_URL") or DEFAULT_WIKIDATA_SPARQL_URL).rstrip("/")


def get_user_agent() -> str:
    return _env("ROEBLING_USER_AGENT") or DEFAULT_USER_AGENT


def get_default_languages() -> list[str]:
    """
    Label languages used when a caller does not supply any.

    ROEBLING_LANGUAGES holds comma-separated locale identifiers (``de-CH,fr``);
    the result always ends with the universal fallback language.
    """
    from related_features.queries import preferred_languages

    raw = _env("ROEBLING_LANGUAGES") or ""
    return preferred_languages(raw.split(","))


def get_log_level() -> str:
    return (_env("LOG_LEVEL") or "INFO").upper()


__all__ = [
    "get_default_languages",
    "get_log_level",
    "get_overpass_url",
    "get_user_agent",
    "get_wikidata_sparql_url",
]
