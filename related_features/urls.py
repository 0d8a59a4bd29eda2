"""Image link normalization."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from yarl import URL

logger = logging.getLogger(__name__)


def normalize_image_url(raw: object) -> str | None:
    """
    Upgrade an image link to https.

    Returns None for values that are not absolute URLs; schemes other than
    ``http`` are kept as they are.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        # Keep the link's own percent-encoding; only the scheme may change.
        url = URL(raw.strip(), encoded=True)
    except (TypeError, ValueError):
        return None
    if not url.absolute or not url.scheme:
        return None
    if url.scheme == "http":
        url = url.with_scheme("https")
    return str(url)


def normalize_image_urls(values: Iterable[object]) -> list[str]:
    """Normalize each link independently, dropping the ones that fail."""
    normalized = []
    for value in values:
        url = normalize_image_url(value)
        if url is None:
            logger.debug("Skipping unusable image link: %r", value)
            continue
        normalized.append(url)
    return normalized
