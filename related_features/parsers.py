"""
Parsers for Overpass and SPARQL JSON responses.

Both services leave out keys freely, so every lookup tolerates absence and
wrong types; the parsers return None (or skip the item) rather than raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from related_features.queries import IMAGE_VARIABLE, LABEL_VARIABLE


def parse_overpass_tags(payload: Any) -> dict[str, str] | None:
    """
    Tags of the first element of an Overpass ``[out:json]`` response.

    Shape: ``{"elements": [{"type": ..., "id": ..., "tags": {...}}, ...]}``.
    """
    if not isinstance(payload, Mapping):
        return None
    elements = payload.get("elements")
    if not isinstance(elements, list) or not elements:
        return None
    first = elements[0]
    if not isinstance(first, Mapping):
        return None
    tags = first.get("tags")
    if not isinstance(tags, Mapping):
        return None
    if not all(isinstance(k, str) and isinstance(v, str) for k, v in tags.items()):
        return None
    return dict(tags)


def parse_sparql_bindings(payload: Any) -> list[dict[str, Any]] | None:
    """Rows of a SPARQL JSON result, ``{"results": {"bindings": [...]}}``."""
    if not isinstance(payload, Mapping):
        return None
    results = payload.get("results")
    if not isinstance(results, Mapping):
        return None
    bindings = results.get("bindings")
    if not isinstance(bindings, list):
        return None
    return [dict(row) for row in bindings if isinstance(row, Mapping)]


def binding_value(binding: Mapping[str, Any], variable: str) -> str | None:
    term = binding.get(variable)
    if not isinstance(term, Mapping):
        return None
    value = term.get("value")
    return value if isinstance(value, str) else None


def extract_label(
    bindings: list[dict[str, Any]],
    variable: str = LABEL_VARIABLE,
) -> str | None:
    """Value of ``variable`` in the first row that binds it."""
    for binding in bindings:
        value = binding_value(binding, variable)
        if value is not None:
            return value
    return None


def extract_image_values(
    bindings: list[dict[str, Any]],
    variable: str = IMAGE_VARIABLE,
) -> list[str]:
    """Values of ``variable`` in row order; rows without it are skipped."""
    values = []
    for binding in bindings:
        value = binding_value(binding, variable)
        if value is not None:
            values.append(value)
    return values
