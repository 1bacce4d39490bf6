"""
Commit-time validation of exercise entries.

Decides whether an entry is complete enough to be committed to a template.
Numeric ranges are not enforced here (a drop percentage of 150 is kept as
entered); only missing exercise references block a commit.

Validation is synchronous, has no side effects and never mutates the entry.
"""

from typing import Optional

from pydantic import BaseModel

from domain.models import (
    CircuitPayload,
    ExerciseEntry,
    GiantSetPayload,
    PreExhaustionPayload,
    SupersetPayload,
    TabataPayload,
    ValidationErrorCode,
    ValidationResult,
    VariantTag,
    payload_tag,
)
from domain.services.primary_exercise import resolve_primary_exercise_id


def _present(exercise_id: Optional[str]) -> bool:
    return bool(exercise_id and exercise_id.strip())


def validate_payload(payload: BaseModel, primary_exercise_id: Optional[str] = None) -> ValidationResult:
    """
    Validate a variant payload together with the entry's stored primary id.

    Args:
        payload: Variant payload to check.
        primary_exercise_id: The entry's stored primary exercise id
            (exercise A of a superset, the isolation exercise of a
            pre-exhaustion pair, the exercise of simple variants).

    Returns:
        ValidationResult; `ok` is False with the blocking reason otherwise.
    """
    label = payload_tag(payload).label

    if isinstance(payload, (TabataPayload, CircuitPayload)):
        if not payload.sets:
            return ValidationResult.failure(
                ValidationErrorCode.EMPTY_COLLECTION,
                f"Add at least one {label} set with exercises",
            )
        if not any(step_set.steps for step_set in payload.sets):
            return ValidationResult.failure(
                ValidationErrorCode.EMPTY_COLLECTION,
                f"Add exercises to your {label} sets",
            )
        if resolve_primary_exercise_id(payload) is None:
            return ValidationResult.failure(
                ValidationErrorCode.MISSING_EXERCISE,
                f"Select an exercise in at least one {label} step",
            )
        return ValidationResult.success()

    if isinstance(payload, GiantSetPayload):
        if not payload.members or resolve_primary_exercise_id(payload) is None:
            return ValidationResult.failure(
                ValidationErrorCode.EMPTY_COLLECTION,
                "Select at least one exercise for your Giant Set",
            )
        return ValidationResult.success()

    if isinstance(payload, SupersetPayload):
        if not (_present(primary_exercise_id) and _present(payload.second_exercise_id)):
            return ValidationResult.failure(
                ValidationErrorCode.INCOMPLETE_PAIR,
                "Select both exercises for your Superset",
            )
        return ValidationResult.success()

    if isinstance(payload, PreExhaustionPayload):
        if not (_present(primary_exercise_id) and _present(payload.compound_exercise_id)):
            return ValidationResult.failure(
                ValidationErrorCode.INCOMPLETE_PAIR,
                "Select both the isolation and the compound exercise",
            )
        return ValidationResult.success()

    if resolve_primary_exercise_id(payload, primary_exercise_id) is None:
        return ValidationResult.failure(
            ValidationErrorCode.MISSING_EXERCISE,
            "Select an exercise" if payload_tag(payload) == VariantTag.STRAIGHT_SET
            else f"Select an exercise for this {label}",
        )
    return ValidationResult.success()


def validate_entry(entry: ExerciseEntry) -> ValidationResult:
    """Validate a full entry. See validate_payload."""
    return validate_payload(entry.payload, entry.common.primary_exercise_id)
