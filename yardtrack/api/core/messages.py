"""Centralized message codes and default messages for API responses."""

from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel


class MessageCode(str, Enum):
    """Centralized message codes for API responses."""

    # Success codes
    SUCCESS = "SUCCESS"
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"

    # Authentication & Authorization
    AUTH_REQUIRED = "AUTH_REQUIRED"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    USER_REGISTERED = "USER_REGISTERED"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"

    # Users
    USER_CREATED = "USER_CREATED"
    USER_UPDATED = "USER_UPDATED"
    USER_DELETED = "USER_DELETED"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Yards
    YARD_CREATED = "YARD_CREATED"
    YARD_UPDATED = "YARD_UPDATED"
    YARD_DELETED = "YARD_DELETED"
    YARD_NOT_FOUND = "YARD_NOT_FOUND"

    # Motorcycles
    MOTORCYCLE_CREATED = "MOTORCYCLE_CREATED"
    MOTORCYCLE_UPDATED = "MOTORCYCLE_UPDATED"
    MOTORCYCLE_DELETED = "MOTORCYCLE_DELETED"
    MOTORCYCLE_NOT_FOUND = "MOTORCYCLE_NOT_FOUND"
    PLATE_ALREADY_REGISTERED = "PLATE_ALREADY_REGISTERED"

    # Positions
    POSITION_CREATED = "POSITION_CREATED"
    POSITION_UPDATED = "POSITION_UPDATED"
    POSITION_DELETED = "POSITION_DELETED"
    POSITION_NOT_FOUND = "POSITION_NOT_FOUND"

    # Markers
    FIXED_MARKER_CREATED = "FIXED_MARKER_CREATED"
    FIXED_MARKER_DELETED = "FIXED_MARKER_DELETED"
    FIXED_MARKER_NOT_FOUND = "FIXED_MARKER_NOT_FOUND"
    MOBILE_MARKER_CREATED = "MOBILE_MARKER_CREATED"
    MOBILE_MARKER_UPDATED = "MOBILE_MARKER_UPDATED"
    MOBILE_MARKER_DELETED = "MOBILE_MARKER_DELETED"
    MOBILE_MARKER_NOT_FOUND = "MOBILE_MARKER_NOT_FOUND"

    # Measurements
    MEASUREMENT_CREATED = "MEASUREMENT_CREATED"
    MEASUREMENT_NOT_FOUND = "MEASUREMENT_NOT_FOUND"

    # Prediction
    PREDICTION_COMPLETED = "PREDICTION_COMPLETED"
    INSUFFICIENT_TRAINING_DATA = "INSUFFICIENT_TRAINING_DATA"
    INVALID_NUMERIC_INPUT = "INVALID_NUMERIC_INPUT"
    PREDICTION_FAILED = "PREDICTION_FAILED"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"


# Default messages for each message code
DEFAULT_MESSAGES = {
    # Success messages
    MessageCode.SUCCESS: "Operation completed successfully",
    MessageCode.CREATED: "Resource created successfully",
    MessageCode.UPDATED: "Resource updated successfully",
    MessageCode.DELETED: "Resource deleted successfully",
    # Authentication & Authorization
    MessageCode.AUTH_REQUIRED: "Authentication required",
    MessageCode.UNAUTHORIZED: "Authentication required",
    MessageCode.FORBIDDEN: "Access denied",
    MessageCode.INVALID_TOKEN: "Invalid authentication token",
    MessageCode.INVALID_CREDENTIALS: "Invalid email or password",
    MessageCode.USER_REGISTERED: "User registered successfully",
    MessageCode.LOGIN_SUCCESS: "Login successful",
    MessageCode.EMAIL_ALREADY_REGISTERED: "Email is already registered",
    # Users
    MessageCode.USER_CREATED: "User created successfully",
    MessageCode.USER_UPDATED: "User updated successfully",
    MessageCode.USER_DELETED: "User deleted successfully",
    MessageCode.USER_NOT_FOUND: "User not found",
    # Yards
    MessageCode.YARD_CREATED: "Yard created successfully",
    MessageCode.YARD_UPDATED: "Yard updated successfully",
    MessageCode.YARD_DELETED: "Yard deleted successfully",
    MessageCode.YARD_NOT_FOUND: "Yard not found",
    # Motorcycles
    MessageCode.MOTORCYCLE_CREATED: "Motorcycle created successfully",
    MessageCode.MOTORCYCLE_UPDATED: "Motorcycle updated successfully",
    MessageCode.MOTORCYCLE_DELETED: "Motorcycle deleted successfully",
    MessageCode.MOTORCYCLE_NOT_FOUND: "Motorcycle not found",
    MessageCode.PLATE_ALREADY_REGISTERED: "Plate is already registered",
    # Positions
    MessageCode.POSITION_CREATED: "Position created successfully",
    MessageCode.POSITION_UPDATED: "Position updated successfully",
    MessageCode.POSITION_DELETED: "Position deleted successfully",
    MessageCode.POSITION_NOT_FOUND: "Position not found",
    # Markers
    MessageCode.FIXED_MARKER_CREATED: "Fixed marker created successfully",
    MessageCode.FIXED_MARKER_DELETED: "Fixed marker deleted successfully",
    MessageCode.FIXED_MARKER_NOT_FOUND: "Fixed marker not found",
    MessageCode.MOBILE_MARKER_CREATED: "Mobile marker created successfully",
    MessageCode.MOBILE_MARKER_UPDATED: "Mobile marker updated successfully",
    MessageCode.MOBILE_MARKER_DELETED: "Mobile marker deleted successfully",
    MessageCode.MOBILE_MARKER_NOT_FOUND: "Mobile marker not found",
    # Measurements
    MessageCode.MEASUREMENT_CREATED: "Measurement created successfully",
    MessageCode.MEASUREMENT_NOT_FOUND: "Measurement not found",
    # Prediction
    MessageCode.PREDICTION_COMPLETED: "Distance prediction completed",
    MessageCode.INSUFFICIENT_TRAINING_DATA: "Not enough measurements to train the distance model",
    MessageCode.INVALID_NUMERIC_INPUT: "Coordinates or distances are not finite numbers",
    MessageCode.PREDICTION_FAILED: "Prediction failed",
    # Validation errors
    MessageCode.VALIDATION_ERROR: "Validation failed",
    MessageCode.INVALID_INPUT: "Invalid input provided",
    MessageCode.PAYLOAD_TOO_LARGE: "Request payload too large",
    # Generic errors
    MessageCode.INTERNAL_ERROR: "Internal server error",
    MessageCode.INTERNAL_SERVER_ERROR: "Internal server error",
    MessageCode.RESOURCE_NOT_FOUND: "Resource not found",
    MessageCode.BAD_REQUEST: "Bad request",
    MessageCode.NOT_FOUND: "Resource not found",
}

T = TypeVar("T")


class PaginationInfo(BaseModel):
    """Common pagination information."""

    total: int
    page: int
    size: int
    total_pages: int
    has_more: bool


class Paginated(BaseModel, Generic[T]):
    """Generic paginated response wrapper."""

    items: list[T]
    pagination: PaginationInfo


class APIResponse(BaseModel, Generic[T]):
    """Base API response model with consistent structure and proper typing."""

    message_code: MessageCode
    message: str
    data: T | None = None

    @classmethod
    def success(
        cls,
        message_code: MessageCode = MessageCode.SUCCESS,
        message: str | None = None,
        data: T | None = None,
    ) -> "APIResponse[T]":
        """Create a success response."""
        return cls(
            message_code=message_code,
            message=message or DEFAULT_MESSAGES.get(message_code, "Success"),
            data=data,
        )


def get_default_message(message_code: MessageCode) -> str:
    """Get default message for a message code."""
    return DEFAULT_MESSAGES.get(message_code, "Operation completed")
