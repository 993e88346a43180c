"""
API Error Handling

Standardized error handling for the API.
"""

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from api.models.responses import ErrorResponse, ErrorDetail
from core.schemas.errors import DigestException, ErrorCodes


# Digest error code -> HTTP status
_STATUS_BY_CODE = {
    ErrorCodes.INVALID_INPUT: 400,
    ErrorCodes.INVALID_ARGUMENT: 400,
    ErrorCodes.ALGORITHM_UNAVAILABLE: 500,
}


class APIError(Exception):
    """Base API error with structured response."""
    
    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)
    
    @classmethod
    def from_exception(cls, exc: DigestException) -> "APIError":
        """Map a digest utility exception onto an API error."""
        return cls(
            code=exc.code,
            message=exc.message,
            status_code=_STATUS_BY_CODE.get(exc.code, 500),
            details=exc.details,
        )
    
    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code=self.code,
                message=self.message,
                details=self.details,
            ),
        )


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle APIError exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(),
    )


async def digest_error_handler(request: Request, exc: DigestException) -> JSONResponse:
    """Handle digest utility exceptions that escape a route."""
    return await api_error_handler(request, APIError.from_exception(exc))


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            ok=False,
            error=ErrorDetail(
                code="INTERNAL_ERROR",
                message="An unexpected error occurred",
                details={"type": type(exc).__name__},
            ),
        ).model_dump(),
    )
