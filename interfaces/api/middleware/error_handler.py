"""Error handling decorator mapping use case results onto HTTP responses."""

import functools
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, TypeVar

import structlog
from fastapi import HTTPException, status
from returns.result import Failure, Success

from domain.exceptions import InfrastructureError
from interfaces.api.routes.helpers import _map_app_error_to_http_exception

if TYPE_CHECKING:
    from typing import Any

logger = structlog.get_logger()

T_co = TypeVar("T_co")


def handle_use_case_errors(
    func: Callable[..., Awaitable[T_co]],
) -> Callable[..., Awaitable[T_co]]:
    """Unwrap a use case Result returned by an endpoint.

    Success values are returned as the response body. Failure values become
    HTTP errors according to their category. Infrastructure errors that escape
    a use case are reported as 503; anything else as 500.
    """

    @functools.wraps(func)
    async def wrapper(*args: "Any", **kwargs: "Any") -> T_co:  # noqa: ANN401
        try:
            result = await func(*args, **kwargs)
        except HTTPException:
            raise
        except InfrastructureError as exc:
            logger.exception("storage_unavailable", error=str(exc), endpoint=func.__name__)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Storage temporarily unavailable",
            ) from exc
        except Exception as exc:
            logger.exception(
                "unhandled_endpoint_error",
                error_type=type(exc).__name__,
                endpoint=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            ) from exc

        match result:
            case Success():
                return result.unwrap()
            case Failure():
                raise _map_app_error_to_http_exception(result.failure()) from None
            case _:
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail="Unexpected result type",
                )

    return wrapper
