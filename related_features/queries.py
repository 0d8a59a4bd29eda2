"""
Query builders for the two remote services.

Overpass gets an Overpass QL program that prints one element; the Wikidata
Query Service gets a SPARQL SELECT listing the images of every item that
shares a property value (by default the architect) with the bridge's item.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from core.constants import FALLBACK_LANGUAGE
from core.exceptions import ValidationException

if TYPE_CHECKING:
    from related_features.elements import ElementRef

WIKIDATA_TAG = "wikidata"
ARCHITECT_PROPERTY = "P84"
IMAGE_PROPERTY = "P18"
IMAGE_VARIABLE = "pic"
LABEL_VARIABLE = "architectLabel"

_ITEM_ID_RE = re.compile(r"^Q[1-9][0-9]*$")
_PROPERTY_ID_RE = re.compile(r"^P[1-9][0-9]*$")
_LANGUAGE_RE = re.compile(r"^[a-z]{2,8}$")


def build_overpass_query(element: ElementRef) -> str:
    return f"[out:json];{element};out;"


def is_wikidata_item_id(value: object) -> bool:
    """True for Wikidata item ids such as ``Q42``."""
    return isinstance(value, str) and bool(_ITEM_ID_RE.match(value))


def preferred_languages(locales: Iterable[str]) -> list[str]:
    """
    Reduce locale identifiers to a label language fallback list.

    ``["de-CH", "fr", "de"]`` becomes ``["de", "fr", "en"]``: region and
    script subtags are dropped, repeats collapse onto their first position and
    English always comes last as the universal fallback, so ``["en-US", "de"]``
    becomes ``["de", "en"]``.
    """
    languages: list[str] = []
    for locale in locales:
        if not locale:
            continue
        primary = locale.strip().replace("_", "-").split("-", 1)[0].strip().lower()
        if (
            _LANGUAGE_RE.match(primary)
            and primary != FALLBACK_LANGUAGE
            and primary not in languages
        ):
            languages.append(primary)
    languages.append(FALLBACK_LANGUAGE)
    return languages


def languages_from_accept_language(header: str | None) -> list[str]:
    """Locale identifiers from an Accept-Language header, best first."""
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip()
        if not tag or tag == "*":
            continue
        quality = 1.0
        for param in params.split(";"):
            name, _, value = param.strip().partition("=")
            if name.strip().lower() != "q":
                continue
            try:
                quality = float(value)
            except ValueError:
                quality = 1.0
        if quality <= 0:
            continue
        weighted.append((-quality, index, tag))

    weighted.sort()
    return [tag for _, _, tag in weighted]


def build_wikidata_query(
    wikidata_id: str,
    languages: Sequence[str],
    *,
    relation_property: str = ARCHITECT_PROPERTY,
    image_property: str = IMAGE_PROPERTY,
    label_variable: str = LABEL_VARIABLE,
) -> str:
    """
    SPARQL for the images of items sharing ``relation_property`` with
    ``wikidata_id``, plus the label of the shared value.
    """
    if not is_wikidata_item_id(wikidata_id):
        msg = "Invalid Wikidata item id"
        raise ValidationException(msg, {"wikidata_id": wikidata_id})
    for prop in (relation_property, image_property):
        if not _PROPERTY_ID_RE.match(prop):
            msg = "Invalid Wikidata property id"
            raise ValidationException(msg, {"property": prop})
    if not label_variable.isidentifier():
        msg = "Invalid SPARQL variable name"
        raise ValidationException(msg, {"variable": label_variable})

    for language in languages:
        if not _LANGUAGE_RE.match(language):
            msg = "Invalid label language"
            raise ValidationException(msg, {"language": language})

    language_list = ",".join(languages) or FALLBACK_LANGUAGE
    return (
        f"SELECT ?{IMAGE_VARIABLE} ?{label_variable} WHERE {{ "
        f"wd:{wikidata_id} wdt:{relation_property} ?architect . "
        f"?item wdt:{relation_property} ?architect . "
        f"?item wdt:{image_property} ?{IMAGE_VARIABLE} . "
        f'SERVICE wikibase:label {{ bd:serviceParam wikibase:language "{language_list}". }} '
        f"}}"
    )
