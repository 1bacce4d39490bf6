"""
Legacy JSON-in-notes decoding.

Before entries had structured variant columns, the editor stored every
variant parameter as a JSON object inside the free-text notes column, using
the editor's historical field names (tabata_sets, emom_duration, ...).
Some clients also wrote camelCase keys. This module detects such notes and
maps their keys onto the canonical field names.

Detection is a parse attempt: notes that parse as a JSON *object* are
legacy-encoded; anything else (invalid JSON, or JSON that is a number,
string, list or null) is genuine free text. A free-text note that happens
to be a JSON object will be misread; there is no version flag to tell.
"""

import json
import re
from typing import Any, Dict, List, Mapping, Optional

from domain.models import VariantTag

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

# Historical editor field names -> canonical field names (top level only).
LEGACY_KEY_ALIASES: Dict[str, str] = {
    "exercise_type": "variant_tag",
    "exercise_id": "primary_exercise_id",
    "isolation_exercise_id": "primary_exercise_id",
    "superset_exercise_id": "second_exercise_id",
    "superset_reps": "reps_b",
    "reps_a": "reps",
    "giant_set_exercises": "members",
    "amrap_duration": "amrap_duration_minutes",
    "emom_duration": "duration_minutes",
    "emom_mode": "mode",
    "emom_reps": "reps_per_minute",
    "time_cap": "time_cap_minutes",
}

# Step-set lists were stored under variant-specific keys.
LEGACY_SET_KEYS: Dict[VariantTag, List[str]] = {
    VariantTag.TABATA: ["tabata_sets", "circuit_sets"],
    VariantTag.CIRCUIT: ["circuit_sets", "tabata_sets"],
}


def to_snake_case(key: str) -> str:
    """
    Convert a camelCase key to snake_case; snake_case keys are unchanged.

    Examples:
        >>> to_snake_case("workSeconds")
        'work_seconds'
        >>> to_snake_case("rest_after")
        'rest_after'
    """
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def _snake_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {to_snake_case(str(k)): _snake_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_snake_keys(item) for item in value]
    return value


def parse_legacy_notes(notes: Any) -> Optional[Dict[str, Any]]:
    """
    Return the legacy-encoded object held in `notes`, or None for free text.

    Examples:
        >>> parse_legacy_notes('{"variantTag": "amrap"}')
        {'variantTag': 'amrap'}
        >>> parse_legacy_notes("go heavy today") is None
        True
        >>> parse_legacy_notes("7") is None
        True
    """
    if isinstance(notes, Mapping):
        return dict(notes)
    if not isinstance(notes, str) or not notes.strip():
        return None
    try:
        parsed = json.loads(notes)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def canonicalize_legacy_keys(obj: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map a legacy object's keys onto canonical field names.

    camelCase keys become snake_case at every level; historical top-level
    names are then renamed via LEGACY_KEY_ALIASES. When both a historical
    and a canonical key are present, the canonical one wins.
    """
    snake = _snake_keys(obj)
    result: Dict[str, Any] = {}
    for key, value in snake.items():
        canonical = LEGACY_KEY_ALIASES.get(key)
        if canonical is None:
            result[key] = value
        elif canonical not in snake:
            result.setdefault(canonical, value)
    return result


def extract_step_sets(obj: Mapping[str, Any], variant_tag: VariantTag) -> Optional[List[Any]]:
    """
    Pick the step-set list of a tabata/circuit legacy object.

    Tries the historical keys for the variant first, then a list-valued
    `sets`. Set-level historical keys are renamed: `exercises` -> `steps`,
    and for tabata `rest_between_sets` -> `rest_after`.
    """
    candidates = [obj.get(key) for key in LEGACY_SET_KEYS.get(variant_tag, [])]
    candidates.append(obj.get("sets"))
    raw_sets = next((c for c in candidates if isinstance(c, list)), None)
    if raw_sets is None:
        return None
    return [_canonical_set(item, variant_tag) for item in raw_sets]


def _canonical_set(item: Any, variant_tag: VariantTag) -> Any:
    if not isinstance(item, Mapping):
        return item
    step_set = dict(item)
    if "steps" not in step_set and "exercises" in step_set:
        step_set["steps"] = step_set.pop("exercises")
    if variant_tag == VariantTag.TABATA and "rest_after" not in step_set:
        if "rest_between_sets" in step_set:
            step_set["rest_after"] = step_set.pop("rest_between_sets")
    return step_set
