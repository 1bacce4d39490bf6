"""
Domain models for workout template exercise entries.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core concepts:
- ExerciseEntry: One exercise line of a template (common columns + payload)
- VariantPayload: One payload model per training protocol (VariantTag)
- ExerciseReference: Read-only catalog exercise (id, name, description)
- ValidationResult: Outcome of checking an entry before commit

Usage:
    >>> from domain.models import CommonFields, ExerciseEntry, SupersetPayload

    >>> entry = ExerciseEntry(
    ...     id="temp-1",
    ...     order_index=1,
    ...     common=CommonFields(primary_exercise_id="bench-press", sets=3, reps="10"),
    ...     payload=SupersetPayload(second_exercise_id="barbell-row", reps_b="10"),
    ... )

    >>> # Serialize to JSON
    >>> json_str = entry.model_dump_json(indent=2)

    >>> # Deserialize from JSON (the payload type is chosen by variant_tag)
    >>> entry = ExerciseEntry.model_validate_json(json_str)
"""

from domain.models.entry import (
    TEMP_ID_PREFIX,
    CommonFields,
    ExerciseEntry,
    is_temp_id,
    new_temp_id,
)
from domain.models.payloads import (
    PAYLOAD_TYPES,
    AmrapPayload,
    CircuitPayload,
    CircuitSet,
    CircuitStep,
    ClusterSetPayload,
    DropSetPayload,
    EmomPayload,
    ForTimePayload,
    GiantSetMember,
    GiantSetPayload,
    PreExhaustionPayload,
    RestPausePayload,
    StraightSetPayload,
    SupersetPayload,
    TabataPayload,
    TabataSet,
    TabataStep,
    VariantPayload,
    empty_payload,
    payload_field_names,
    payload_for,
    payload_tag,
    payload_type,
)
from domain.models.reference import ExerciseReference
from domain.models.tempo import Tempo, parse_tempo
from domain.models.validation import (
    EntryValidationError,
    ValidationErrorCode,
    ValidationResult,
)
from domain.models.variant import EmomMode, VariantTag

__all__ = [
    # Main entities
    "ExerciseEntry",
    "CommonFields",
    "ExerciseReference",
    "Tempo",
    # Payloads
    "VariantPayload",
    "StraightSetPayload",
    "SupersetPayload",
    "GiantSetPayload",
    "GiantSetMember",
    "DropSetPayload",
    "ClusterSetPayload",
    "RestPausePayload",
    "PreExhaustionPayload",
    "AmrapPayload",
    "EmomPayload",
    "TabataPayload",
    "TabataSet",
    "TabataStep",
    "CircuitPayload",
    "CircuitSet",
    "CircuitStep",
    "ForTimePayload",
    "PAYLOAD_TYPES",
    "payload_for",
    "payload_type",
    "payload_tag",
    "payload_field_names",
    "empty_payload",
    # Enums
    "VariantTag",
    "EmomMode",
    "ValidationErrorCode",
    # Validation
    "ValidationResult",
    "EntryValidationError",
    # Helpers
    "TEMP_ID_PREFIX",
    "new_temp_id",
    "is_temp_id",
    "parse_tempo",
]
