"""Custom exception classes for SwabBooker."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class SwabBookerError(Exception):
    """Base exception for SwabBooker."""

    def __init__(
        self, message: str, recoverable: bool = False, details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize SwabBooker error.

        Args:
            message: Error message
            recoverable: Whether the error is recoverable with retry
            details: Additional error details
        """
        self.message = message
        self.recoverable = recoverable
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "recoverable": self.recoverable,
            "details": self.details,
            "timestamp": self.timestamp,
        }


# Configuration Errors
class ConfigurationError(SwabBookerError):
    """Configuration error occurred."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, recoverable=False, details=details)


# Booking API Errors
class ApiError(SwabBookerError):
    """Base class for booking API errors."""

    def __init__(
        self,
        message: str = "Booking API error occurred",
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        details = dict(details or {})
        if path is not None:
            details.setdefault("path", path)
        super().__init__(message, recoverable=False, details=details)


class ResponseParseError(ApiError):
    """Response body could not be parsed as JSON."""

    def __init__(self, path: str, reason: str, status: Optional[int] = None):
        """
        Initialize response parse error.

        Args:
            path: Requested API path
            reason: Underlying parser error message
            status: HTTP status of the unparsable response
        """
        self.reason = reason
        self.status = status
        super().__init__(
            f"Failed to parse response for {path}: {reason}",
            path=path,
            details={"reason": reason, "status": status},
        )


class HttpStatusError(ApiError):
    """Response status was not a success (>= 300)."""

    def __init__(self, status: int, path: str, body: Any):
        """
        Initialize HTTP status error.

        Args:
            status: HTTP status code
            path: Requested API path
            body: Parsed response body
        """
        self.status = status
        self.body = body
        super().__init__(
            f"Http error for {path}: [{status}]: {body}",
            path=path,
            details={"status": status, "body": body},
        )


class ResponseShapeError(ApiError):
    """Response JSON does not have the expected shape."""

    def __init__(self, message: str = "Unexpected response shape", path: Optional[str] = None):
        super().__init__(message, path=path)


# Prompt Errors
class PromptError(SwabBookerError):
    """Interactive prompt failed."""

    def __init__(self, message: str = "Prompt failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, recoverable=False, details=details)


class NoOptionsAvailableError(PromptError):
    """A choice prompt was asked with nothing to choose from."""

    def __init__(self, question: str):
        self.question = question
        super().__init__(
            f"No options available for: {question}",
            details={"question": question},
        )
