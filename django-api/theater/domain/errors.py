"""Domain error codes for the theater module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    UNRECOGNIZED_CATEGORY = "UNRECOGNIZED_CATEGORY"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY,
            message=f"Play not found: {play_id}",
        )
        self.play_id = play_id


class UnrecognizedCategoryError(DomainError):
    """Raised when a play's category has no pricing formula."""

    def __init__(self, category: str) -> None:
        super().__init__(
            code=ErrorCode.UNRECOGNIZED_CATEGORY,
            message=f"Unrecognized play category: {category}",
        )
        self.category = category
