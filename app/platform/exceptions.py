from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.platform.logger import get_logger
from app.platform.response import api_response
from app.platform.schemas import FieldError

logger = get_logger(__name__)


def _field_name(loc) -> str:
    # ("body", "firstName") -> "firstName"
    parts = [str(p) for p in loc if p not in ("body", "query", "form")]
    return ".".join(parts) or "body"


def _error_message(err) -> str:
    msg = err.get("msg", "Invalid value")
    return msg.removeprefix("Value error, ")


def add_exception_handlers(app):
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return api_response(message=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            FieldError(field=_field_name(err.get("loc", ())), message=_error_message(err))
            for err in exc.errors()
        ]
        return api_response(
            message="Validation failed",
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            data={"errors": errors},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return api_response(
            message="Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
