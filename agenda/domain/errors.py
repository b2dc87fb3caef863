"""Domain error codes for the agenda module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_DATE = "INVALID_DATE"
    EVENT_SAVE_FAILED = "EVENT_SAVE_FAILED"
    EVENT_FETCH_FAILED = "EVENT_FETCH_FAILED"
    OCCURRENCE_FETCH_FAILED = "OCCURRENCE_FETCH_FAILED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidDateError(DomainError):
    """Raised when a requested calendar day cannot be parsed."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format",
        )


class EventSaveError(DomainError):
    """Raised when an event and its occurrences could not be stored."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_SAVE_FAILED,
            message="Could not save event",
        )


class OccurrenceFetchError(DomainError):
    """Raised when occurrences could not be read back."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.OCCURRENCE_FETCH_FAILED,
            message="Could not fetch occurrences",
        )


class EventFetchError(DomainError):
    """Raised when events could not be read back."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FETCH_FAILED,
            message="Could not fetch events",
        )
