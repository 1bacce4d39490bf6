"""
Domain converters between persisted rows and the canonical ExerciseEntry.

This module provides pure converter functions:

- entry_to_db_row: ExerciseEntry -> row for workout_template_exercises
- db_row_to_entry: Row (structured, legacy JSON-in-notes or plain) -> ExerciseEntry
- serialize_entry: ExerciseEntry -> (common columns, details bag)
- prune_details: Drop empty values from a details bag

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import entry_to_db_row, db_row_to_entry

    >>> row = entry_to_db_row(entry, template_id="tpl-123")
    >>> entry = db_row_to_entry(row)
"""

from domain.converters.db_converters import (
    COMMON_COLUMNS,
    DecodedRecord,
    DecodePath,
    db_row_to_entry,
    db_rows_to_entries,
    decode_db_row,
    entries_to_db_rows,
    entry_to_db_row,
    prune_details,
    serialize_details,
    serialize_entry,
)
from domain.converters.legacy_notes import (
    LEGACY_KEY_ALIASES,
    canonicalize_legacy_keys,
    parse_legacy_notes,
)

__all__ = [
    "COMMON_COLUMNS",
    "DecodedRecord",
    "DecodePath",
    "db_row_to_entry",
    "db_rows_to_entries",
    "decode_db_row",
    "entries_to_db_rows",
    "entry_to_db_row",
    "prune_details",
    "serialize_details",
    "serialize_entry",
    "LEGACY_KEY_ALIASES",
    "canonicalize_legacy_keys",
    "parse_legacy_notes",
]
