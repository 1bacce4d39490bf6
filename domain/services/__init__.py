"""
Pure domain services for exercise entries.

- primary_exercise: derive the canonical primary exercise id
- normalizer: raw editor values -> canonical typed values
- validator: decide whether an entry can be committed

All functions are pure: no I/O, no mutation of their inputs.
"""

from domain.services.normalizer import (
    COMMON_FIELD_NAMES,
    normalize_common,
    normalize_entry,
    normalize_int,
    normalize_list,
    normalize_model_fields,
    normalize_optional_id,
    normalize_payload,
    normalize_str,
)
from domain.services.primary_exercise import (
    is_composite,
    referenced_exercise_ids,
    resolve_entry_primary,
    resolve_primary_exercise_id,
)
from domain.services.validator import validate_entry, validate_payload

__all__ = [
    "COMMON_FIELD_NAMES",
    "normalize_common",
    "normalize_entry",
    "normalize_int",
    "normalize_list",
    "normalize_model_fields",
    "normalize_optional_id",
    "normalize_payload",
    "normalize_str",
    "is_composite",
    "referenced_exercise_ids",
    "resolve_entry_primary",
    "resolve_primary_exercise_id",
    "validate_entry",
    "validate_payload",
]
