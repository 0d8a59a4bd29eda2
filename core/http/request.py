"""
Shared HTTP request helper for the Overpass and Wikidata clients.

Keeps JSON response handling and error mapping consistent across both
services.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from core.exceptions import ExternalServiceException, RateLimitException

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER = 5


def _retry_after_seconds(value: str | None) -> int:
    # Retry-After may also be an HTTP-date; only the delay-seconds form is used.
    if value is None:
        return DEFAULT_RETRY_AFTER
    try:
        return max(int(value.strip()), 0)
    except ValueError:
        return DEFAULT_RETRY_AFTER


async def request_json(
    url: str,
    *,
    session: Any,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    expected_status: int | Iterable[int] = 200,
    service_name: str = "Service",
    timeout: Any | None = None,
) -> Any:
    """
    Issue a GET request and decode its JSON body.

    Raises:
        RateLimitException: the service answered 429.
        ExternalServiceException: any other unexpected status, or a body that
            is not JSON.
    """
    if isinstance(expected_status, int):
        expected = {expected_status}
    else:
        expected = set(expected_status)

    request_kwargs: dict[str, Any] = {"params": params, "headers": headers}
    if timeout is not None:
        request_kwargs["timeout"] = timeout

    async with session.get(url, **request_kwargs) as response:
        if response.status == 429:
            retry_after = _retry_after_seconds(response.headers.get("Retry-After"))
            msg = f"{service_name} error: 429"
            raise RateLimitException(
                msg,
                {
                    "status": 429,
                    "retry_after": retry_after,
                    "url": str(getattr(response, "url", url)),
                },
            )
        if response.status not in expected:
            body = await response.text()
            msg = f"{service_name} error: {response.status}"
            raise ExternalServiceException(
                msg,
                {
                    "status": response.status,
                    "body": body,
                    "url": str(getattr(response, "url", url)),
                },
            )
        try:
            # Overpass labels some JSON replies text/plain; skip the type check.
            return await response.json(content_type=None)
        except (aiohttp.ContentTypeError, ValueError) as exc:
            msg = f"{service_name} error: invalid JSON"
            raise ExternalServiceException(msg, {"url": url}) from exc
