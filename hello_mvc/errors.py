"""
Error Handlers

Binding failures become 400 responses, the same way a missing or
malformed request parameter does:
- BindingError -> 400 with the parameter name and raw value
- RequestValidationError -> 400 with field-level details
- Exception (catch-all) -> 500, never leaks internal details

HTTPException keeps FastAPI's default handler (404, 405, 406, 415).
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class BindingError(Exception):
    """A raw request value could not be converted to the target type."""

    code = "BINDING_ERROR"

    def __init__(self, field: str, value, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(self._message())

    def _message(self) -> str:
        return f"Failed to convert '{self.field}' value {self.value!r} to {self.expected}"

    def to_response(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": str(self),
                "details": [
                    {"field": self.field, "message": f"expected {self.expected}", "type": "binding"}
                ],
            }
        }


class MissingParameterError(BindingError):
    """A required request parameter is absent."""

    code = "MISSING_PARAMETER"

    def __init__(self, field: str, expected: str = "str"):
        super().__init__(field, None, expected)

    def _message(self) -> str:
        return f"Required request parameter '{self.field}' for method parameter type {self.expected} is not present"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(BindingError)
    async def binding_error_handler(request: Request, exc: BindingError):
        logger.warning(
            f"Binding error on {request.url.path}: {exc}",
            extra={"path": request.url.path, "error_code": exc.code},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=exc.to_response(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "error_code": "VALIDATION_ERROR"},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                }
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        }
    }
