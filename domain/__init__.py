"""
Domain layer for workout template exercise entries.

This package contains pure domain models, services and converters that are
independent of infrastructure concerns (database, API, external services).
"""

from domain.models import (
    CommonFields,
    ExerciseEntry,
    ExerciseReference,
    ValidationErrorCode,
    ValidationResult,
    VariantTag,
)

__all__ = [
    "CommonFields",
    "ExerciseEntry",
    "ExerciseReference",
    "ValidationErrorCode",
    "ValidationResult",
    "VariantTag",
]
