"""
Thumbnail error handling utilities.

Provides the exception handler that renders ThumbnailStudioException as the
JSON error body, and a decorator that turns any other failure inside a
thumbnail endpoint into UnexpectedServerError.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import Request
from fastapi.responses import JSONResponse

from thumbnail_studio.core.exceptions import (
    ThumbnailStudioException,
    UnexpectedServerError,
)
from thumbnail_studio.models.common import ErrorResponse
from thumbnail_studio.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(exc: ThumbnailStudioException) -> JSONResponse:
    """
    Build the JSON response for a domain exception.

    Args:
        exc: Domain exception

    Returns:
        JSONResponse: Body {error, detail?, providerMessage?, model?}
    """
    body = ErrorResponse.model_validate(exc.to_payload())
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
    )


async def thumbnail_studio_exception_handler(
    request: Request,
    exc: ThumbnailStudioException,
) -> JSONResponse:
    """FastAPI exception handler for ThumbnailStudioException."""
    log_with_context(
        logger,
        logging.WARNING if exc.status_code < 500 else logging.ERROR,
        f"{request.method} {request.url.path} failed: {exc.message}",
        status_code=exc.status_code,
        detail=exc.detail,
        **exc.details,
    )
    return error_response(exc)


def handle_thumbnail_errors(func: F) -> F:
    """
    Decorator mapping unknown failures to UnexpectedServerError.

    Domain exceptions propagate unchanged to the registered exception
    handler; anything else is logged with its traceback and wrapped.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ThumbnailStudioException:
            raise

        except Exception as e:
            log_exception_with_context(
                logger,
                f"Unexpected failure in {func.__name__}",
                e,
            )
            raise UnexpectedServerError(str(e) or type(e).__name__) from e

    return wrapper  # type: ignore


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """FastAPI fallback handler rendering any uncaught error as UnexpectedServerError."""
    log_exception_with_context(
        logger,
        f"{request.method} {request.url.path} raised {type(exc).__name__}",
        exc,
    )
    return error_response(UnexpectedServerError(str(exc) or type(exc).__name__))
