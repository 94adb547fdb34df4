"""Domain error codes for the seasons module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    SEASON_NOT_FOUND = "SEASON_NOT_FOUND"
    SEASON_ALREADY_EXISTS = "SEASON_ALREADY_EXISTS"
    INVALID_SEASON_NAME = "INVALID_SEASON_NAME"
    INVALID_COLOR = "INVALID_COLOR"
    INVALID_YEAR = "INVALID_YEAR"
    INVALID_DATE = "INVALID_DATE"
    INVALID_RANGE = "INVALID_RANGE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class SeasonNotFoundError(DomainError):
    """Raised when a season id is absent from the collection or store."""

    def __init__(self, season_id: str) -> None:
        super().__init__(
            code=ErrorCode.SEASON_NOT_FOUND,
            message="Season not found",
        )
        self.season_id = season_id


class SeasonAlreadyExistsError(DomainError):
    """Raised when creating a season whose derived id is already taken."""

    def __init__(self, season_id: str) -> None:
        super().__init__(
            code=ErrorCode.SEASON_ALREADY_EXISTS,
            message="Season already exists",
        )
        self.season_id = season_id


class InvalidSeasonNameError(DomainError):
    """Raised when a season name slugifies to nothing."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SEASON_NAME,
            message="Season name is required",
        )


class InvalidColorError(DomainError):
    """Raised when a color is not a #RRGGBB hex string."""

    def __init__(self, color: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_COLOR,
            message="Color must be a #RRGGBB hex string",
        )
        self.color = color


class InvalidYearError(DomainError):
    """Raised when a year is outside the supported calendar window."""

    def __init__(self, year: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_YEAR,
            message="Year is out of range",
        )
        self.year = year


class InvalidDateError(DomainError):
    """Raised when a date string is malformed or not a calendar day."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message=f"Invalid date {value!r}, expected YYYY-MM-DD",
        )
        self.value = value


class InvalidRangeError(DomainError):
    """Raised when a date range is reversed, unparsable or too long."""

    def __init__(self, start: str, end: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_RANGE,
            message=f"Invalid date range {start}..{end}: {reason}",
        )
        self.start = start
        self.end = end
