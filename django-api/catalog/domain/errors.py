"""Domain error codes for the catalog module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_CINEMA_ID = "INVALID_CINEMA_ID"
    INVALID_MOVIE_ID = "INVALID_MOVIE_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidCinemaIdError(DomainError):
    """Raised when a cinema ID is invalid."""

    def __init__(self, raw_value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CINEMA_ID,
            message="Invalid cinema ID format",
        )
        self.raw_value = raw_value


class InvalidMovieIdError(DomainError):
    """Raised when a movie ID is invalid."""

    def __init__(self, raw_value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MOVIE_ID,
            message="Invalid movie ID format",
        )
        self.raw_value = raw_value
