"""Interface layer errors."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from sitehost.domain.value import ErrorCategory

SIGNUP_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorCategory.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCategory.INFRASTRUCTURE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class InterfaceError(Exception):
    """Base interface error, rendered as ``{"detail": ...}``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(str(detail))


class SignupRejectedError(InterfaceError):
    """A signup that ended in a SignupError."""

    def __init__(self, category: ErrorCategory, detail: dict) -> None:
        self.status_code = SIGNUP_STATUS[category]
        super().__init__(detail)


async def interface_error_handler(
    request: Request, exc: InterfaceError
) -> JSONResponse:
    """Render interface errors as JSON."""
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


def register_error_handlers(app: FastAPI) -> None:
    """Register interface error handlers on the app."""
    app.add_exception_handler(InterfaceError, interface_error_handler)
