"""Mapbox Streets style layers whose features are worth resolving.

These are all the Mapbox Streets v9 layers that draw from the ``road`` source
layer and start with ``bridge-``. Bridges are far more likely than ordinary
roads to carry ``wikidata`` tags pointing at items that have an architect.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

BRIDGE_LAYERS: frozenset[str] = frozenset(
    {
        "bridge-aerialway",
        "bridge-construction",
        "bridge-motorway",
        "bridge-motorway_link",
        "bridge-motorway_link-case",
        "bridge-motorway-case",
        "bridge-oneway-arrows-motorway",
        "bridge-oneway-arrows-other",
        "bridge-oneway-arrows-trunk",
        "bridge-path",
        "bridge-path-bg",
        "bridge-pedestrian",
        "bridge-pedestrian-case",
        "bridge-primary",
        "bridge-primary-case",
        "bridge-rail",
        "bridge-rail-tracks",
        "bridge-secondary-tertiary",
        "bridge-secondary-tertiary-case",
        "bridge-service-link-track",
        "bridge-service-link-track-case",
        "bridge-street",
        "bridge-street_limited",
        "bridge-street_limited-case",
        "bridge-street_limited-low",
        "bridge-street-case",
        "bridge-street-low",
        "bridge-trunk",
        "bridge-trunk_link",
        "bridge-trunk_link-case",
        "bridge-trunk-case",
    },
)


@dataclass(frozen=True)
class MapFeature:
    """A rendered feature returned by the map's hit test."""

    identifier: Any
    layer: str


def is_bridge_layer(layer: str | None) -> bool:
    return bool(layer) and layer in BRIDGE_LAYERS


def select_bridge_feature(features: Iterable[MapFeature]) -> MapFeature | None:
    """Return the first bridge feature that has an identifier."""
    for feature in features:
        if feature.identifier is None:
            continue
        if is_bridge_layer(feature.layer):
            return feature
    return None
