"""
Related-features query chain.

Turns a tapped map feature into the images of structures sharing its
architect:

    feature id -> OSM element -> Overpass tags -> wikidata item
               -> Wikidata Query Service -> (architect label, image links)

Every failure along the way (undecodable id, network or HTTP error, missing
tag, empty result) means "nothing to show" and ends the chain quietly.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from config import get_default_languages
from core.exceptions import RoeblingException
from core.http.overpass import OverpassClient
from core.http.wikidata import WikidataClient
from related_features.elements import decode_feature_identifier
from related_features.parsers import extract_image_values, extract_label
from related_features.queries import (
    WIKIDATA_TAG,
    build_wikidata_query,
    is_wikidata_item_id,
    preferred_languages,
)
from related_features.urls import normalize_image_urls

logger = logging.getLogger(__name__)

_CHAIN_ERRORS = (RoeblingException, aiohttp.ClientError, asyncio.TimeoutError)


@dataclass(frozen=True)
class RelatedImages:
    """Result handed to the presentation layer."""

    label: str | None = None
    image_urls: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> RelatedImages:
        return cls()


def _always_current() -> bool:
    return True


class RelatedFeaturesService:
    def __init__(
        self,
        overpass: OverpassClient | None = None,
        wikidata: WikidataClient | None = None,
        languages: Sequence[str] | None = None,
    ) -> None:
        self._overpass = overpass or OverpassClient()
        self._wikidata = wikidata or WikidataClient()
        self._languages = list(languages) if languages else None

    def _languages_for(self, languages: Sequence[str] | None) -> list[str]:
        if languages:
            return preferred_languages(languages)
        if self._languages:
            return preferred_languages(self._languages)
        return get_default_languages()

    async def resolve(
        self,
        feature_id: object,
        *,
        languages: Sequence[str] | None = None,
        is_current: Callable[[], bool] | None = None,
    ) -> RelatedImages | None:
        """
        Run the chain for one feature id.

        Returns None when there is nothing to show. ``is_current`` is polled
        after every network call; once it reports False the chain stops
        without producing a result.
        """
        is_current = is_current or _always_current

        element = decode_feature_identifier(feature_id)
        if element is None:
            logger.debug("Feature %r does not map to a single OSM element", feature_id)
            return None

        try:
            tags = await self._overpass.fetch_tags(element)
        except _CHAIN_ERRORS as e:
            logger.warning("Tag lookup failed for %s: %s", element, e)
            return None
        if not is_current():
            logger.debug("Chain for %s superseded after tag lookup", element)
            return None
        if tags is None:
            return None

        wikidata_id = tags.get(WIKIDATA_TAG)
        if not is_wikidata_item_id(wikidata_id):
            logger.debug("%s has no usable wikidata tag: %r", element, wikidata_id)
            return None

        query = build_wikidata_query(wikidata_id, self._languages_for(languages))
        try:
            bindings = await self._wikidata.query(query)
        except _CHAIN_ERRORS as e:
            logger.warning("Wikidata query failed for %s: %s", wikidata_id, e)
            return None
        if not is_current():
            logger.debug("Chain for %s superseded after Wikidata query", element)
            return None

        result = RelatedImages(
            label=extract_label(bindings),
            image_urls=tuple(normalize_image_urls(extract_image_values(bindings))),
        )
        logger.info(
            "Resolved %s (%s) to %d related images",
            element,
            wikidata_id,
            len(result.image_urls),
        )
        return result

    async def find_related_images(
        self,
        feature_id: object,
        *,
        languages: Sequence[str] | None = None,
    ) -> RelatedImages:
        """Like :meth:`resolve`, with "nothing to show" as an empty result."""
        result = await self.resolve(feature_id, languages=languages)
        return result if result is not None else RelatedImages.empty()


class RelatedFeaturesSession:
    """
    Runs chains for one interaction source, newest wins.

    Starting a chain cancels the one still in flight, and a chain only
    delivers to ``on_result`` while it is the latest generation.
    """

    def __init__(
        self,
        service: RelatedFeaturesService,
        on_result: Callable[[RelatedImages], Any],
    ) -> None:
        self._service = service
        self._on_result = on_result
        self._generation = 0
        self._task: asyncio.Task | None = None

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    def show_related_features(
        self,
        feature_id: object,
        languages: Sequence[str] | None = None,
    ) -> asyncio.Task:
        """Start a chain for ``feature_id``; must be called on the event loop."""
        self.cancel()
        generation = self._generation

        def is_current() -> bool:
            return generation == self._generation

        self._task = asyncio.create_task(
            self._run(feature_id, languages, is_current),
            name=f"related-features-{generation}",
        )
        return self._task

    async def _run(
        self,
        feature_id: object,
        languages: Sequence[str] | None,
        is_current: Callable[[], bool],
    ) -> RelatedImages | None:
        result = await self._service.resolve(
            feature_id,
            languages=languages,
            is_current=is_current,
        )
        if result is None or not is_current():
            return None
        self._on_result(result)
        return result

    def cancel(self) -> None:
        """Cancel the in-flight chain, if any, and retire its generation."""
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> RelatedImages | None:
        """Wait for the in-flight chain; None if it was superseded or empty."""
        task = self._task
        if task is None:
            return None
        await asyncio.wait({task})
        if task.cancelled():
            return None
        return task.result()
