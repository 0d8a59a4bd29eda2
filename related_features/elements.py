"""
OpenStreetMap element references decoded from Mapbox Streets feature ids.

In OpenStreetMap the same number can be a node, way or relation id, so an
element reference always carries its kind. Mapbox Streets packs the kind into
the last decimal digit of the vector tile feature id::

    feature_id = osm_id * 10 + tag

    tag 0       node
    tag 1, 2    way (2: derived geometry, e.g. a label point)
    tag 3, 4    relation (4: derived geometry)

Tags 5-9 are not assigned, and a feature id of 0 means Mapbox unioned several
OSM features into one, so neither maps to a single element.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.exceptions import ValidationException


def _require_positive(kind: str, identifier: int) -> None:
    if isinstance(identifier, bool) or not isinstance(identifier, int):
        msg = f"{kind} id must be an integer"
        raise ValidationException(msg, {"id": identifier})
    if identifier <= 0:
        msg = f"{kind} id must be positive"
        raise ValidationException(msg, {"id": identifier})


@dataclass(frozen=True, slots=True)
class NodeRef:
    id: int

    def __post_init__(self) -> None:
        _require_positive("node", self.id)

    def __str__(self) -> str:
        return f"node({self.id})"


@dataclass(frozen=True, slots=True)
class WayRef:
    id: int

    def __post_init__(self) -> None:
        _require_positive("way", self.id)

    def __str__(self) -> str:
        return f"way({self.id})"


@dataclass(frozen=True, slots=True)
class RelationRef:
    id: int

    def __post_init__(self) -> None:
        _require_positive("relation", self.id)

    def __str__(self) -> str:
        return f"relation({self.id})"


ElementRef = NodeRef | WayRef | RelationRef

_NODE_TAGS = (0,)
_WAY_TAGS = (1, 2)
_RELATION_TAGS = (3, 4)


def decode_feature_identifier(feature_id: object) -> ElementRef | None:
    """
    Decode a Mapbox Streets feature id into an element reference.

    Returns None for anything that does not name exactly one element: ids
    that are not integers, ``0`` and negative ids, unassigned tags, and ids
    whose element part would be zero.
    """
    if isinstance(feature_id, bool) or not isinstance(feature_id, int):
        return None
    if feature_id <= 0:
        return None

    identifier, tag = divmod(feature_id, 10)
    if identifier == 0:
        return None
    if tag in _NODE_TAGS:
        return NodeRef(identifier)
    if tag in _WAY_TAGS:
        return WayRef(identifier)
    if tag in _RELATION_TAGS:
        return RelationRef(identifier)
    return None


def encode_feature_identifier(element: ElementRef, *, derived: bool = False) -> int:
    """
    Encode an element reference as a Mapbox Streets feature id.

    ``derived`` selects the second tag of ways and relations; nodes only
    have one.
    """
    if isinstance(element, NodeRef):
        tag = _NODE_TAGS[0]
    elif isinstance(element, WayRef):
        tag = _WAY_TAGS[1 if derived else 0]
    elif isinstance(element, RelationRef):
        tag = _RELATION_TAGS[1 if derived else 0]
    else:
        msg = "Unsupported element reference"
        raise ValidationException(msg, {"element": repr(element)})
    return element.id * 10 + tag


def to_overpass(element: ElementRef) -> str:
    """Overpass QL id filter for ``element``, e.g. ``way(5)``."""
    return str(element)
