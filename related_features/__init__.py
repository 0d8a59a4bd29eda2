"""
Related Features Package.

Resolves a tapped bridge on the map into images of other structures by the
same architect, using Overpass for OSM tags and the Wikidata Query Service
for the related items. The service and API modules are imported by path
(``related_features.service``, ``related_features.api``).
"""

from .elements import (
    ElementRef,
    NodeRef,
    RelationRef,
    WayRef,
    decode_feature_identifier,
    encode_feature_identifier,
    to_overpass,
)
from .layers import BRIDGE_LAYERS, MapFeature, is_bridge_layer, select_bridge_feature
from .parsers import (
    extract_image_values,
    extract_label,
    parse_overpass_tags,
    parse_sparql_bindings,
)
from .queries import (
    build_overpass_query,
    build_wikidata_query,
    is_wikidata_item_id,
    languages_from_accept_language,
    preferred_languages,
)
from .urls import normalize_image_url, normalize_image_urls

__all__ = [
    "BRIDGE_LAYERS",
    "ElementRef",
    "MapFeature",
    "NodeRef",
    "RelationRef",
    "WayRef",
    "build_overpass_query",
    "build_wikidata_query",
    "decode_feature_identifier",
    "encode_feature_identifier",
    "extract_image_values",
    "extract_label",
    "is_bridge_layer",
    "is_wikidata_item_id",
    "languages_from_accept_language",
    "normalize_image_url",
    "normalize_image_urls",
    "parse_overpass_tags",
    "parse_sparql_bindings",
    "preferred_languages",
    "to_overpass",
]
