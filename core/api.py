"""API utilities for FastAPI route handling."""

import functools
import logging
from collections.abc import Callable

from fastapi import HTTPException, status

from core.exceptions import (
    ExternalServiceException,
    RateLimitException,
    RoeblingException,
    ValidationException,
)


def api_route(logger: logging.Logger):
    """
    Decorator for FastAPI endpoints that provides standardized error handling.

    - Re-raises HTTPException instances as-is
    - Maps application exceptions to HTTP status codes
    - Logs and converts other exceptions to 500 HTTPException

    Usage:
        @router.get("/api/example")
        @api_route(logger)
        async def my_endpoint():
            ...
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except ValidationException as e:
                logger.warning("Validation error in %s: %s", func.__name__, e.message)
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail=e.message,
                ) from e
            except RateLimitException as e:
                logger.warning(
                    "Rate limit exceeded in %s: %s",
                    func.__name__,
                    e.message,
                )
                raise HTTPException(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    detail=e.message,
                ) from e
            except ExternalServiceException as e:
                logger.exception(
                    "External service error in %s: %s",
                    func.__name__,
                    e.message,
                )
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail=f"External service error: {e.message}",
                ) from e
            except RoeblingException as e:
                logger.exception(
                    "Application error in %s: %s",
                    func.__name__,
                    e.message,
                )
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=e.message,
                ) from e
            except Exception as e:
                logger.exception("Unexpected error in %s", func.__name__)
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=str(e),
                ) from e

        return wrapper

    return decorator
