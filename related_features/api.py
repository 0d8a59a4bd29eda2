"""
Related features API.

Exposes the related-features chain to a map client: hand over the feature
id (or the hit-test result) of a tapped bridge and get back the architect's
name and images of the architect's other works. "Nothing to show" is a
regular 200 response with no label and no images.
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Header, Query
from pydantic import BaseModel, Field

from core.api import api_route
from related_features.elements import decode_feature_identifier
from related_features.layers import MapFeature, is_bridge_layer, select_bridge_feature
from related_features.queries import languages_from_accept_language
from related_features.service import RelatedFeaturesService, RelatedImages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/related-features", tags=["related-features"])


class RelatedFeaturesResponse(BaseModel):
    feature_id: int | None = None
    element: str | None = None
    label: str | None = None
    images: list[str] = Field(default_factory=list)


class FeaturePayload(BaseModel):
    identifier: Any = None
    layer: str


class SelectFeatureRequest(BaseModel):
    """Hit-test result for a long press, topmost feature first."""

    features: list[FeaturePayload]
    lang: list[str] = Field(default_factory=list)


def _languages(lang: list[str] | None, accept_language: str | None) -> list[str]:
    if lang:
        return lang
    return languages_from_accept_language(accept_language)


async def _related_features_response(
    feature_id: Any,
    languages: list[str],
) -> RelatedFeaturesResponse:
    element = decode_feature_identifier(feature_id)
    service = RelatedFeaturesService()
    result: RelatedImages = await service.find_related_images(
        feature_id,
        languages=languages or None,
    )
    return RelatedFeaturesResponse(
        feature_id=feature_id if isinstance(feature_id, int) else None,
        element=str(element) if element is not None else None,
        label=result.label,
        images=list(result.image_urls),
    )


@router.get("/{feature_id}", response_model=RelatedFeaturesResponse)
@api_route(logger)
async def get_related_features(
    feature_id: int,
    layer: Annotated[
        str | None,
        Query(description="Style layer the feature was rendered in"),
    ] = None,
    lang: Annotated[
        list[str] | None,
        Query(description="Preferred label languages, best first"),
    ] = None,
    accept_language: Annotated[str | None, Header()] = None,
):
    """
    Resolve a Mapbox Streets feature id into related images.

    Args:
        feature_id: Composite feature id from the vector tiles
        layer: Optional style layer id; features outside bridge layers are ignored
        lang: Optional label languages, falls back to Accept-Language

    Returns:
        Architect label and normalized image links
    """
    if layer is not None and not is_bridge_layer(layer):
        logger.debug("Ignoring feature %s in non-bridge layer %s", feature_id, layer)
        return RelatedFeaturesResponse(feature_id=feature_id)

    return await _related_features_response(
        feature_id,
        _languages(lang, accept_language),
    )


@router.post("/select", response_model=RelatedFeaturesResponse)
@api_route(logger)
async def select_related_features(
    request: SelectFeatureRequest,
    accept_language: Annotated[str | None, Header()] = None,
):
    """Pick the first bridge feature from a hit test and resolve it."""
    feature = select_bridge_feature(
        MapFeature(identifier=item.identifier, layer=item.layer)
        for item in request.features
    )
    if feature is None:
        return RelatedFeaturesResponse()

    return await _related_features_response(
        feature.identifier,
        _languages(request.lang, accept_language),
    )
