"""
Entry-list editor state machine.

Owns the ordered list of committed entries of one template and at most one
in-progress draft:

    IDLE --begin_add--> ADDING --commit ok / cancel--> IDLE
    IDLE --begin_edit--> EDITING(id) --commit ok / cancel--> IDLE

A commit normalizes the draft, validates it, resolves the primary exercise
and then appends (ADDING, order_index = N + 1) or replaces in place
(EDITING, same id and order_index). A failed validation leaves both the
list and the draft untouched so the user can correct it.

Delete and move are list operations that require IDLE; both renumber the
remaining entries to 1..N in their relative order.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple

from domain.models import (
    EntryValidationError,
    ExerciseEntry,
    VariantTag,
    new_temp_id,
    payload_field_names,
)
from domain.services import (
    COMMON_FIELD_NAMES,
    normalize_entry,
    resolve_entry_primary,
    validate_entry,
)

logger = logging.getLogger(__name__)


class EditorMode(str, Enum):
    IDLE = "idle"
    ADDING = "adding"
    EDITING = "editing"


class EditorStateError(Exception):
    """Raised when an operation is not allowed in the editor's current state."""


class UnknownFieldError(KeyError):
    """Raised when a draft field does not exist for the selected variant."""


class OrderIndexError(ValueError):
    """Raised when entries do not carry order_index 1..N exactly once."""


def ensure_contiguous_order(entries: Iterable[ExerciseEntry]) -> None:
    """
    Check that order_index values are exactly 1..N.

    Raises:
        OrderIndexError: On gaps or duplicates.
    """
    indexes = sorted(entry.order_index for entry in entries)
    expected = list(range(1, len(indexes) + 1))
    if indexes != expected:
        raise OrderIndexError(f"order_index values must be 1..{len(indexes)}, got {indexes}")


def renumber(entries: Iterable[ExerciseEntry]) -> List[ExerciseEntry]:
    """Assign order_index 1..N following the given order."""
    return [
        entry if entry.order_index == position else entry.with_order_index(position)
        for position, entry in enumerate(entries, start=1)
    ]


@dataclass
class EntryDraft:
    """
    Raw, editable values of the entry being added or edited.

    Holds the common values and the payload values of exactly one variant.
    Switching the variant discards the previous variant's values.
    """

    variant_tag: VariantTag = VariantTag.STRAIGHT_SET
    common: Dict[str, Any] = field(default_factory=dict)
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_entry(cls, entry: ExerciseEntry) -> "EntryDraft":
        """Pre-populate a draft from a committed entry."""
        return cls(
            variant_tag=entry.variant_tag,
            common=entry.common.model_dump(),
            fields=entry.payload.model_dump(exclude={"variant_tag"}),
        )

    def select_variant(self, variant_tag: VariantTag) -> None:
        tag = VariantTag(variant_tag)
        if tag != self.variant_tag:
            self.variant_tag = tag
            self.fields = {}

    def set_common(self, name: str, value: Any) -> None:
        if name not in COMMON_FIELD_NAMES:
            raise UnknownFieldError(name)
        self.common[name] = value

    def set_field(self, name: str, value: Any) -> None:
        if name not in payload_field_names(self.variant_tag):
            raise UnknownFieldError(f"{name} is not a {self.variant_tag.value} field")
        self.fields[name] = value

    def update(self, **values: Any) -> None:
        """
        Set several values at once, routing each to payload or common.

        A name the selected variant defines goes to the payload, so a
        tabata or circuit `sets` list is never read as the common set count.
        """
        payload_names = payload_field_names(self.variant_tag)
        for name, value in values.items():
            if name in payload_names:
                self.set_field(name, value)
            else:
                self.set_common(name, value)


@dataclass
class CommitResult:
    """Result of committing the current draft."""

    success: bool
    entry: Optional[ExerciseEntry] = None
    error: Optional[EntryValidationError] = None


class EntryListEditor:
    """
    Add/edit/commit/cancel lifecycle for the entries of one template.

    Usage:
        >>> editor = EntryListEditor()
        >>> draft = editor.begin_add(VariantTag.AMRAP)
        >>> draft.update(primary_exercise_id="burpee", amrap_duration_minutes="12")
        >>> result = editor.commit()
        >>> result.success, result.entry.order_index
        (True, 1)
    """

    def __init__(self, entries: Iterable[ExerciseEntry] = ()) -> None:
        """
        Initialize with already committed entries (e.g. loaded from storage).

        Entries are sorted by order_index and renumbered to 1..N.
        """
        ordered = sorted(entries, key=lambda e: (e.order_index, e.id))
        self._entries: List[ExerciseEntry] = renumber(ordered)
        self._mode = EditorMode.IDLE
        self._draft: Optional[EntryDraft] = None
        self._editing_id: Optional[str] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def entries(self) -> Tuple[ExerciseEntry, ...]:
        return tuple(self._entries)

    @property
    def mode(self) -> EditorMode:
        return self._mode

    @property
    def draft(self) -> Optional[EntryDraft]:
        return self._draft

    @property
    def editing_id(self) -> Optional[str]:
        return self._editing_id

    @property
    def is_idle(self) -> bool:
        return self._mode == EditorMode.IDLE

    def get(self, entry_id: str) -> ExerciseEntry:
        """
        Raises:
            EditorStateError: If no entry has this id.
        """
        return self._entries[self._index_of(entry_id)]

    def _index_of(self, entry_id: str) -> int:
        for i, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return i
        raise EditorStateError(f"No entry with id {entry_id}")

    def _require_idle(self, operation: str) -> None:
        if not self.is_idle:
            raise EditorStateError(f"Cannot {operation} while {self._mode.value}")

    def _reset(self) -> None:
        self._mode = EditorMode.IDLE
        self._draft = None
        self._editing_id = None

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def begin_add(self, variant_tag: VariantTag = VariantTag.STRAIGHT_SET) -> EntryDraft:
        """Open a blank draft for a new entry (IDLE -> ADDING)."""
        self._require_idle("start adding")
        self._draft = EntryDraft(variant_tag=VariantTag(variant_tag))
        self._mode = EditorMode.ADDING
        return self._draft

    def begin_edit(self, entry_id: str) -> EntryDraft:
        """Open a draft pre-filled from an entry (IDLE -> EDITING)."""
        self._require_idle("start editing")
        entry = self.get(entry_id)
        self._draft = EntryDraft.from_entry(entry)
        self._editing_id = entry.id
        self._mode = EditorMode.EDITING
        return self._draft

    def cancel(self) -> None:
        """Discard the draft and return to IDLE. The list is unchanged."""
        if self._mode != EditorMode.IDLE:
            logger.debug("Discarding %s draft", self._mode.value)
        self._reset()

    def commit(self) -> CommitResult:
        """
        Normalize, validate and commit the draft.

        Returns:
            CommitResult. On validation failure the editor stays in its
            current state and the list is unchanged.

        Raises:
            EditorStateError: If there is no open draft.
        """
        if self._draft is None or self._mode == EditorMode.IDLE:
            raise EditorStateError("Nothing to commit")

        if self._mode == EditorMode.ADDING:
            entry_id, order_index = new_temp_id(), len(self._entries) + 1
        else:
            existing = self.get(self._editing_id)
            entry_id, order_index = existing.id, existing.order_index

        draft = self._draft
        entry = normalize_entry(entry_id, order_index, draft.variant_tag, draft.common, draft.fields)

        result = validate_entry(entry)
        if not result.ok:
            logger.info("Entry commit blocked (%s): %s", result.error.code.value, result.error.message)
            return CommitResult(success=False, error=result.error)

        entry = entry.with_primary_exercise_id(resolve_entry_primary(entry))

        if self._mode == EditorMode.ADDING:
            self._entries.append(entry)
        else:
            self._entries[self._index_of(entry_id)] = entry

        logger.debug("Committed %s entry %s at position %d", entry.variant_tag.value, entry.id, order_index)
        self._reset()
        return CommitResult(success=True, entry=entry)

    # -------------------------------------------------------------------------
    # List operations
    # -------------------------------------------------------------------------

    def delete(self, entry_id: str) -> ExerciseEntry:
        """Remove an entry and renumber the rest to 1..N-1."""
        self._require_idle("delete")
        removed = self._entries.pop(self._index_of(entry_id))
        self._entries = renumber(self._entries)
        return removed

    def move(self, entry_id: str, new_position: int) -> None:
        """Move an entry to a 1-based position (clamped) and renumber."""
        self._require_idle("reorder")
        entry = self._entries.pop(self._index_of(entry_id))
        index = min(max(new_position, 1), len(self._entries) + 1) - 1
        self._entries.insert(index, entry)
        self._entries = renumber(self._entries)

    def replace_all(self, entries: Iterable[ExerciseEntry]) -> None:
        """Swap in a new committed list, e.g. the saved entries with durable ids."""
        self._require_idle("replace entries")
        ordered = sorted(entries, key=lambda e: (e.order_index, e.id))
        self._entries = renumber(ordered)
