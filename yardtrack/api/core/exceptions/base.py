"""Global exception handlers for the FastAPI application."""

import math
import traceback

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from yardtrack.utils.logger import get_logger

logger = get_logger(__name__)


class YardTrackException(Exception):
    """Base exception for YardTrack API with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        return {
            "message_code": self.message_code,
            "message": self.message,
            "details": self.details,
        }


class InsufficientTrainingDataException(YardTrackException):
    """Raised when there are too few measurements to fit the distance model."""

    def __init__(self, sample_count: int, min_samples: int):
        self.sample_count = sample_count
        self.min_samples = min_samples
        super().__init__(
            MessageCode.INSUFFICIENT_TRAINING_DATA,
            status.HTTP_400_BAD_REQUEST,
            {
                "description": f"At least {min_samples} measurements are required",
                "sample_count": sample_count,
                "min_samples": min_samples,
            },
        )


class InvalidNumericInputException(YardTrackException):
    """Raised when a coordinate or distance is missing or not finite."""

    def __init__(self, description: str, **details):
        super().__init__(
            MessageCode.INVALID_NUMERIC_INPUT,
            422,
            {"description": description, **details},
        )


def _serializable_errors(exc: RequestValidationError | ValidationError) -> list:
    try:
        serializable_errors = []
        for error in exc.errors():
            error_dict = dict(error)
            if "input" in error_dict and hasattr(error_dict["input"], "isoformat"):
                error_dict["input"] = error_dict["input"].isoformat()
            # NaN and infinity are not valid JSON
            if isinstance(error_dict.get("input"), float) and not math.isfinite(
                error_dict["input"]
            ):
                error_dict["input"] = str(error_dict["input"])
            # ctx may carry the raw exception instance
            if "ctx" in error_dict:
                error_dict["ctx"] = {k: str(v) for k, v in error_dict["ctx"].items()}
            serializable_errors.append(error_dict)
        return serializable_errors
    except Exception:
        return [{"msg": "Validation error occurred", "type": "validation_error"}]


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(YardTrackException)
    async def yardtrack_exception_handler(
        request: Request, exc: YardTrackException
    ) -> JSONResponse:
        """Handle custom YardTrack exceptions."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"YardTrack exception: {exc.message_code.value}",
            path=request.url.path,
            method=request.method,
            message_code=exc.message_code.value,
            details=exc.details,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        """Handle FastAPI HTTP exceptions."""
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "message_code": _code_for_status(exc.status_code),
                "message": str(exc.detail),
                "details": {"description": "HTTP exception occurred"},
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle Starlette HTTP exceptions (unknown routes, bad methods)."""
        logger.warning(
            f"Starlette HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "message_code": _code_for_status(exc.status_code),
                "message": str(exc.detail),
                "details": {"description": "HTTP exception occurred"},
            },
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        logger.warning(
            "Validation error occurred",
            path=request.url.path,
            method=request.method,
        )

        return JSONResponse(
            status_code=422,
            content={
                "message_code": MessageCode.INVALID_INPUT,
                "message": get_default_message(MessageCode.INVALID_INPUT),
                "details": {
                    "description": "Request validation failed",
                    "validation_errors": _serializable_errors(exc),
                },
            },
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_exception_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors."""
        logger.warning(
            "Pydantic validation error occurred",
            path=request.url.path,
            method=request.method,
        )

        return JSONResponse(
            status_code=422,
            content={
                "message_code": MessageCode.VALIDATION_ERROR,
                "message": get_default_message(MessageCode.VALIDATION_ERROR),
                "details": {
                    "validation_errors": _serializable_errors(exc),
                },
            },
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request, exc: SQLAlchemyError
    ) -> JSONResponse:
        """Handle SQLAlchemy database errors."""
        logger.error(
            f"Database error: {str(exc)}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
        )

        if isinstance(exc, IntegrityError):
            return JSONResponse(
                status_code=status.HTTP_409_CONFLICT,
                content={
                    "message_code": MessageCode.BAD_REQUEST,
                    "message": "Data integrity constraint violated",
                    "details": {"database_error": "Constraint violation"},
                },
            )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message_code": MessageCode.INTERNAL_ERROR,
                "message": "Database error occurred",
                "details": {"database_error": "Internal database error"},
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        if isinstance(exc, YardTrackException):
            return await yardtrack_exception_handler(request, exc)

        logger.error(
            f"Unhandled exception: {str(exc)}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message_code": MessageCode.INTERNAL_ERROR,
                "message": "Internal server error",
                "details": {"error_type": type(exc).__name__},
            },
        )


def _code_for_status(status_code: int) -> MessageCode:
    if status_code == status.HTTP_404_NOT_FOUND:
        return MessageCode.NOT_FOUND
    if status_code == status.HTTP_401_UNAUTHORIZED:
        return MessageCode.UNAUTHORIZED
    if status_code == status.HTTP_403_FORBIDDEN:
        return MessageCode.FORBIDDEN
    if status_code < 500:
        return MessageCode.BAD_REQUEST
    return MessageCode.INTERNAL_SERVER_ERROR
