"""Global error handling middleware."""

import traceback
from typing import Any

import structlog
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import RequestResponseEndpoint

from fashion_assistant.core.errors import ProvisioningError

logger = structlog.get_logger(__name__)


class APIError(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}


class NotFoundError(APIError):
    """Resource not found error."""

    def __init__(self, resource: str, resource_id: str) -> None:
        super().__init__(
            message=f"{resource} '{resource_id}' not found",
            status_code=404,
            error_code="NOT_FOUND",
            details={"resource": resource, "id": resource_id},
        )


class ConflictError(APIError):
    """Resource conflict error."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
        )


def _error_response(status_code: int, code: str, message: str, details: dict[str, Any]) -> Response:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details,
            }
        },
    )


async def error_handler_middleware(
    request: Request,
    call_next: RequestResponseEndpoint,
) -> Response:
    """Handle errors globally and return consistent error responses."""
    try:
        return await call_next(request)
    except APIError as e:
        logger.warning(
            "API error occurred",
            error_code=e.error_code,
            message=e.message,
            status_code=e.status_code,
            path=request.url.path,
        )
        return _error_response(e.status_code, e.error_code, e.message, e.details)
    except ProvisioningError as e:
        logger.error(
            "Provisioning failed",
            error_code=e.error_code,
            message=e.message,
            path=request.url.path,
        )
        return _error_response(503, e.error_code, e.message, e.details)
    except Exception as e:
        logger.exception(
            "Unexpected error occurred",
            error=str(e),
            path=request.url.path,
            traceback=traceback.format_exc(),
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred", {})
