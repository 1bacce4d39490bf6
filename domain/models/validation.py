"""
Validation outcome types for exercise entries.

Validation failures are values, not exceptions: the validator returns a
ValidationResult and the caller decides whether to block the commit and
how to show the message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ValidationErrorCode(str, Enum):
    """
    Reasons an entry is not complete enough to commit.

    - MISSING_EXERCISE: No primary exercise could be resolved
    - EMPTY_COLLECTION: Sets/members are missing or hold no exercise
    - INCOMPLETE_PAIR: One of the two required exercises of a pair is empty
    """

    MISSING_EXERCISE = "missing_exercise"
    EMPTY_COLLECTION = "empty_collection"
    INCOMPLETE_PAIR = "incomplete_pair"


@dataclass(frozen=True)
class EntryValidationError:
    """A single blocking validation failure, ready for user-facing display."""

    code: ValidationErrorCode
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one entry."""

    error: Optional[EntryValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def code(self) -> Optional[ValidationErrorCode]:
        return self.error.code if self.error else None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def failure(cls, code: ValidationErrorCode, message: str) -> "ValidationResult":
        return cls(error=EntryValidationError(code=code, message=message))
