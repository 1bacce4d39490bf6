"""
Converters: Database row format <-> domain ExerciseEntry.

Provides bidirectional conversion between Supabase rows and the canonical
ExerciseEntry domain model.

Database schema (workout_template_exercises table):
- id: UUID (absent on insert for unsaved entries)
- template_id: Owning workout template
- exercise_id: Primary exercise id (nullable)
- order_index: 1-based position in the template
- sets, rest_seconds, rir: Nullable integers
- reps, tempo: Nullable text
- variant_tag: Training protocol (defaults to straight_set)
- details: JSONB, pruned variant-specific attributes
- notes: Text. Older rows may hold a JSON object with the variant data
  (see domain.converters.legacy_notes)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel

from domain.converters.legacy_notes import (
    canonicalize_legacy_keys,
    extract_step_sets,
    parse_legacy_notes,
)
from domain.models import ExerciseEntry, VariantTag, new_temp_id
from domain.services.normalizer import (
    COMMON_FIELD_NAMES,
    normalize_common,
    normalize_int,
    normalize_payload,
)

logger = logging.getLogger(__name__)

# Entry common fields -> fixed storage columns.
COMMON_COLUMNS: Dict[str, str] = {
    "primary_exercise_id": "exercise_id",
    "sets": "sets",
    "reps": "reps",
    "rest_seconds": "rest_seconds",
    "rir": "rir",
    "tempo": "tempo",
    "notes": "notes",
}


class DecodePath(str, Enum):
    """Which encoding a row was decoded from."""

    STRUCTURED = "structured"
    LEGACY_JSON = "legacy_json"
    PLAIN_TEXT = "plain_text"


@dataclass(frozen=True)
class DecodedRecord:
    """A decoded entry plus the path the decoder took."""

    entry: ExerciseEntry
    path: DecodePath


# =============================================================================
# Serialization
# =============================================================================


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and len(value) == 0)


def prune_details(details: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Drop keys whose value is None, '' or an empty list.

    Pruning is idempotent: prune_details(prune_details(d)) == prune_details(d).

    Examples:
        >>> prune_details({"rounds": 8, "sets": [], "mode": None, "reps_b": ""})
        {'rounds': 8}
    """
    return {key: value for key, value in details.items() if not _is_empty(value)}


def serialize_details(payload: BaseModel) -> Dict[str, Any]:
    """Variant-specific attributes of a payload as a pruned details bag."""
    raw = payload.model_dump(mode="json", exclude={"variant_tag"}, exclude_none=True)
    return prune_details(raw)


def serialize_entry(entry: ExerciseEntry) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Split an entry into fixed common columns and its details bag.

    Returns:
        (common_columns, details). Common columns are always present, with
        None for unset values; empty reps/tempo are stored as NULL.
    """
    common = entry.common
    columns: Dict[str, Any] = {
        "exercise_id": common.primary_exercise_id,
        "order_index": entry.order_index,
        "sets": common.sets,
        "reps": common.reps or None,
        "rest_seconds": common.rest_seconds,
        "rir": common.rir,
        "tempo": common.tempo or None,
        "variant_tag": entry.variant_tag.value,
        "notes": common.notes,
    }
    return columns, serialize_details(entry.payload)


def entry_to_db_row(entry: ExerciseEntry, template_id: str) -> Dict[str, Any]:
    """
    Convert a domain ExerciseEntry to database row format.

    Temporary client-side ids are left out so the database assigns a
    durable id on insert.

    Examples:
        >>> from domain.models import CommonFields
        >>> entry = ExerciseEntry(
        ...     id="temp-1",
        ...     order_index=1,
        ...     common=CommonFields(primary_exercise_id="squat", sets=5, reps="5"),
        ... )
        >>> row = entry_to_db_row(entry, "tpl-1")
        >>> row["variant_tag"], row["details"], "id" in row
        ('straight_set', {}, False)
    """
    columns, details = serialize_entry(entry)
    row: Dict[str, Any] = {"template_id": template_id, **columns, "details": details}
    if entry.is_persisted:
        row["id"] = entry.id
    return row


def entries_to_db_rows(entries: Iterable[ExerciseEntry], template_id: str) -> List[Dict[str, Any]]:
    return [entry_to_db_row(entry, template_id) for entry in entries]


# =============================================================================
# Deserialization
# =============================================================================


def _common_from_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    return {field: row.get(column) for field, column in COMMON_COLUMNS.items()}


def _order_index_from_row(row: Mapping[str, Any]) -> int:
    order_index = normalize_int(row.get("order_index"), "order_index")
    if order_index is None or order_index < 1:
        logger.warning("Row %s has invalid order_index %r, using 1", row.get("id"), row.get("order_index"))
        return 1
    return order_index


def _split_legacy_object(
    legacy: Mapping[str, Any],
    common_raw: Dict[str, Any],
    fallback_tag: Optional[VariantTag],
) -> Tuple[VariantTag, Dict[str, Any], Dict[str, Any]]:
    """Merge a legacy object over the row's columns; legacy keys win."""
    canonical = canonicalize_legacy_keys(legacy)
    tag = VariantTag.parse(canonical.get("variant_tag")) or fallback_tag or VariantTag.STRAIGHT_SET

    merged = dict(common_raw)
    for field in COMMON_FIELD_NAMES:
        if field == "notes" or field not in canonical:
            continue
        value = canonical[field]
        # A list under `sets` is a tabata/circuit step-set list, not a count.
        if field == "sets" and isinstance(value, list):
            continue
        merged[field] = value
    # Tabata rest used to be stored as a top-level `rest_after`.
    if tag == VariantTag.TABATA and "rest_seconds" not in canonical and "rest_after" in canonical:
        merged["rest_seconds"] = canonical["rest_after"]
    notes = canonical.get("notes")
    merged["notes"] = notes if isinstance(notes, str) else ""

    payload_raw = dict(canonical)
    if tag.has_step_sets:
        step_sets = extract_step_sets(canonical, tag)
        if step_sets is None:
            payload_raw.pop("sets", None)
        else:
            payload_raw["sets"] = step_sets
    return tag, merged, payload_raw


def decode_db_row(row: Mapping[str, Any]) -> DecodedRecord:
    """
    Decode a database row, reporting which encoding it used.

    1. Structured: a known `variant_tag` plus a `details` object.
    2. Legacy JSON: `notes` parses as a JSON object; its keys are merged
       over the row's columns and its own `notes` key becomes the notes.
    3. Plain text: `notes` is kept verbatim; the variant is the row's tag
       if it has a known one, otherwise straight_set.
    """
    row_id = row.get("id")
    entry_id = str(row_id) if row_id else new_temp_id()
    order_index = _order_index_from_row(row)
    common_raw = _common_from_row(row)

    stored_tag = VariantTag.parse(row.get("variant_tag"))
    if row.get("variant_tag") and stored_tag is None:
        logger.warning("Row %s has unknown variant_tag %r", row_id, row.get("variant_tag"))

    details = row.get("details")
    if stored_tag is not None and isinstance(details, Mapping):
        tag, payload_raw, path = stored_tag, dict(details), DecodePath.STRUCTURED
    else:
        legacy = parse_legacy_notes(row.get("notes"))
        if legacy is not None:
            tag, common_raw, payload_raw = _split_legacy_object(legacy, common_raw, stored_tag)
            path = DecodePath.LEGACY_JSON
        else:
            tag = stored_tag or VariantTag.STRAIGHT_SET
            payload_raw = dict(details) if isinstance(details, Mapping) else {}
            path = DecodePath.PLAIN_TEXT
        logger.info("Parse recovery: row %s decoded via %s", row_id, path.value)

    entry = ExerciseEntry(
        id=entry_id,
        order_index=order_index,
        common=normalize_common(common_raw),
        payload=normalize_payload(tag, payload_raw),
    )
    return DecodedRecord(entry=entry, path=path)


def db_row_to_entry(row: Mapping[str, Any]) -> ExerciseEntry:
    """
    Convert a database row to a domain ExerciseEntry.

    Examples:
        >>> entry = db_row_to_entry({
        ...     "id": "e-1",
        ...     "order_index": 1,
        ...     "notes": "go heavy today",
        ... })
        >>> entry.variant_tag.value, entry.common.notes
        ('straight_set', 'go heavy today')
    """
    return decode_db_row(row).entry


def db_rows_to_entries(rows: Iterable[Mapping[str, Any]]) -> List[ExerciseEntry]:
    """Decode rows and sort them by order_index (ties by id)."""
    entries = [db_row_to_entry(row) for row in rows]
    return sorted(entries, key=lambda e: (e.order_index, e.id))
