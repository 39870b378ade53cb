"""Domain error codes for the event_tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_PARAMETER = "INVALID_PARAMETER"
    QUERY_FAILED = "QUERY_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidParameterError(DomainError):
    """Raised when a request parameter is missing or out of range."""

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_PARAMETER, message=message)
        self.parameter = parameter


class QueryFailedError(DomainError):
    """Raised when the store round-trip fails for any reason."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.QUERY_FAILED, message=message)
