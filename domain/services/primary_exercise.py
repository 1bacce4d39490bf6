"""
Canonical primary-exercise resolution.

Every entry is represented in list views by a single exercise id. For simple
variants that id is stored directly on the entry. For composite variants it
is derived from the nested structure:

- giant_set: first member with a non-empty exercise id
- tabata / circuit: first step with a non-empty exercise id, scanning sets
  in order and steps in order within each set

The derived id is only a display/filter handle. The nested references stay
the source of truth for how the entry is performed.
"""

from typing import Iterator, List, Optional

from pydantic import BaseModel

from domain.models import (
    CircuitPayload,
    ExerciseEntry,
    GiantSetPayload,
    PreExhaustionPayload,
    SupersetPayload,
    TabataPayload,
)


def _present(exercise_id: Optional[str]) -> bool:
    return bool(exercise_id and exercise_id.strip())


def _nested_exercise_ids(payload: BaseModel) -> Iterator[str]:
    """Yield nested exercise ids of composite payloads in traversal order."""
    if isinstance(payload, GiantSetPayload):
        for member in payload.members:
            yield member.exercise_id
    elif isinstance(payload, (TabataPayload, CircuitPayload)):
        for step_set in payload.sets:
            for step in step_set.steps:
                yield step.exercise_id


def is_composite(payload: BaseModel) -> bool:
    """True when the primary exercise is derived from nested structure."""
    return isinstance(payload, (GiantSetPayload, TabataPayload, CircuitPayload))


def resolve_primary_exercise_id(
    payload: BaseModel,
    stored_exercise_id: Optional[str] = None,
) -> Optional[str]:
    """
    Derive the primary exercise id of an entry.

    Args:
        payload: Variant payload of the entry.
        stored_exercise_id: The entry's stored primary exercise id. Used for
            simple variants; ignored for composite ones.

    Returns:
        The primary exercise id, or None if none can be found.

    Examples:
        >>> from domain.models import TabataPayload, TabataSet, TabataStep
        >>> payload = TabataPayload(sets=[
        ...     TabataSet(steps=[]),
        ...     TabataSet(steps=[TabataStep(exercise_id="ex-7")]),
        ... ])
        >>> resolve_primary_exercise_id(payload)
        'ex-7'
    """
    if is_composite(payload):
        for exercise_id in _nested_exercise_ids(payload):
            if _present(exercise_id):
                return exercise_id
        return None
    return stored_exercise_id if _present(stored_exercise_id) else None


def resolve_entry_primary(entry: ExerciseEntry) -> Optional[str]:
    """Primary exercise id of a full entry."""
    return resolve_primary_exercise_id(entry.payload, entry.common.primary_exercise_id)


def referenced_exercise_ids(entry: ExerciseEntry) -> List[str]:
    """
    Every exercise id an entry refers to, de-duplicated, in display order.

    Used to batch catalog lookups when rendering a template.
    """
    candidates: List[Optional[str]] = []
    if not is_composite(entry.payload):
        candidates.append(entry.common.primary_exercise_id)
    if isinstance(entry.payload, SupersetPayload):
        candidates.append(entry.payload.second_exercise_id)
    elif isinstance(entry.payload, PreExhaustionPayload):
        candidates.append(entry.payload.compound_exercise_id)
    candidates.extend(_nested_exercise_ids(entry.payload))

    seen = set()
    result: List[str] = []
    for exercise_id in candidates:
        if _present(exercise_id) and exercise_id not in seen:
            seen.add(exercise_id)
            result.append(exercise_id)
    return result
