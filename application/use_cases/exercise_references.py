"""
Exercise reference resolution.

Entries store bare exercise ids. The resolver looks the ids up in the
exercise catalog so editors and summaries can show names. Unknown ids are
not an error: a catalog exercise may have been removed after an entry was
saved.
"""

import logging
from typing import Dict, Iterable, List, Optional

from application.ports import ExerciseCatalog
from domain.models import ExerciseEntry, ExerciseReference
from domain.services import resolve_entry_primary

logger = logging.getLogger(__name__)


class ExerciseReferenceResolver:
    """
    Resolve exercise ids against the catalog, memoising lookups.

    The cache lives as long as the resolver; create one per request or
    editing session.

    Usage:
        >>> resolver = ExerciseReferenceResolver(catalog=catalog)
        >>> resolver.resolve("ex-1")
        ExerciseReference(id='ex-1', name='Back Squat', description='')
        >>> resolver.describe(entry)
        'Back Squat'
    """

    def __init__(self, catalog: ExerciseCatalog) -> None:
        self._catalog = catalog
        self._cache: Dict[str, Optional[ExerciseReference]] = {}

    def resolve(self, exercise_id: Optional[str]) -> Optional[ExerciseReference]:
        """
        Look up one exercise id.

        Returns:
            ExerciseReference, or None for empty or unknown ids
        """
        if not exercise_id or not exercise_id.strip():
            return None
        if exercise_id in self._cache:
            return self._cache[exercise_id]

        row = self._catalog.get_by_id(exercise_id)
        reference = ExerciseReference.from_row(row) if row else None
        if reference is None:
            logger.debug("Exercise %s not found in catalog", exercise_id)
        self._cache[exercise_id] = reference
        return reference

    def resolve_many(self, exercise_ids: Iterable[Optional[str]]) -> List[ExerciseReference]:
        """Resolve ids in order, skipping duplicates and unknown ids."""
        seen = set()
        references: List[ExerciseReference] = []
        for exercise_id in exercise_ids:
            if not exercise_id or exercise_id in seen:
                continue
            seen.add(exercise_id)
            reference = self.resolve(exercise_id)
            if reference is not None:
                references.append(reference)
        return references

    def describe(self, entry: ExerciseEntry) -> str:
        """
        Display label for an entry's primary exercise.

        Falls back to the raw id when the catalog has no such exercise,
        and to the variant label when the entry has no primary exercise.
        """
        primary = resolve_entry_primary(entry)
        if not primary:
            return entry.variant_tag.label
        reference = self.resolve(primary)
        if reference is not None and reference.name:
            return reference.name
        return primary

    def clear(self) -> None:
        self._cache.clear()
