"""Translation of service and upstream errors into HTTP responses."""

from fastapi import HTTPException
import structlog

from .exceptions import ExternalServiceError, NotFoundError, ValidationError
from .riot_api.errors import RiotAPIError

logger = structlog.get_logger(__name__)

UPSTREAM_NOT_FOUND = 404


def to_http_exception(error: Exception, operation: str, **context) -> HTTPException:
    """
    Map an exception raised while serving a request to an ``HTTPException``.

    Validation problems become 400, missing players or data 404, upstream
    failures 502 and anything unexpected 500 with a generic message.

    :param error: The exception caught by the router
    :param operation: Short name of the endpoint, used in logs
    :param context: Extra key-value pairs for the log event
    """
    if isinstance(error, HTTPException):
        return error

    if isinstance(error, ValidationError):
        return HTTPException(status_code=400, detail=error.message)

    if isinstance(error, NotFoundError):
        return HTTPException(status_code=404, detail=error.message)

    if isinstance(error, RiotAPIError):
        if error.status_code == UPSTREAM_NOT_FOUND:
            return HTTPException(status_code=404, detail="Resource not found")
        logger.error(
            f"{operation}_upstream_failed",
            error=str(error),
            status_code=error.status_code,
            **context,
        )
        return HTTPException(
            status_code=502, detail=f"Upstream Riot API error: {error.message}"
        )

    if isinstance(error, ExternalServiceError):
        logger.error(f"{operation}_upstream_failed", error=str(error), **context)
        return HTTPException(status_code=502, detail=error.message)

    logger.error(f"{operation}_failed", error=str(error), exc_info=True, **context)
    return HTTPException(status_code=500, detail="Internal server error")
