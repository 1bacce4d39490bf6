"""
SaveTemplateEntries Use Case.

Persists the committed entry list of a workout template. The stored rows
of the template are replaced as a whole, so the saved list is exactly the
editor's list in the editor's order.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from application.ports import TemplateExerciseRepository
from application.use_cases.entry_list_editor import OrderIndexError, ensure_contiguous_order
from domain.converters import db_rows_to_entries, entries_to_db_rows
from domain.models import ExerciseEntry
from domain.services import validate_entry

logger = logging.getLogger(__name__)


@dataclass
class SaveTemplateEntriesResult:
    """Result of the SaveTemplateEntries use case execution."""

    success: bool
    entries: List[ExerciseEntry] = field(default_factory=list)
    error: Optional[str] = None
    validation_errors: List[str] = field(default_factory=list)


class SaveTemplateEntriesUseCase:
    """
    Use case for saving the exercise entries of a template.

    Orchestrates the following workflow:
    1. Check order_index is contiguous 1..N
    2. Re-validate every entry
    3. Serialize entries to rows
    4. Replace the template's rows via repository
    5. Decode the stored rows (now carrying durable ids)

    Usage:
        >>> use_case = SaveTemplateEntriesUseCase(template_exercise_repo=repo)
        >>> result = use_case.execute("tpl-123", editor.entries)
        >>> if result.success:
        ...     editor.replace_all(result.entries)
    """

    def __init__(self, template_exercise_repo: TemplateExerciseRepository) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            template_exercise_repo: Repository for template exercise rows
        """
        self._repo = template_exercise_repo

    def execute(
        self,
        template_id: str,
        entries: Sequence[ExerciseEntry],
    ) -> SaveTemplateEntriesResult:
        """
        Execute the save workflow.

        Args:
            template_id: Workout template ID
            entries: Committed entries in any order

        Returns:
            SaveTemplateEntriesResult with the stored entries sorted by order_index
        """
        try:
            ensure_contiguous_order(entries)
        except OrderIndexError as e:
            logger.warning("Rejecting save for template %s: %s", template_id, e)
            return SaveTemplateEntriesResult(
                success=False,
                error="Entries must be numbered 1..N",
                validation_errors=[str(e)],
            )

        validation_errors = self._validate(entries)
        if validation_errors:
            logger.warning(f"Template entry validation failed: {validation_errors}")
            return SaveTemplateEntriesResult(
                success=False,
                error="Entry validation failed",
                validation_errors=validation_errors,
            )

        ordered = sorted(entries, key=lambda e: e.order_index)
        rows = entries_to_db_rows(ordered, template_id)
        logger.info("Saving %d entries for template %s", len(rows), template_id)

        try:
            saved_rows = self._repo.replace_for_template(template_id, rows)
        except Exception as e:
            logger.exception(f"SaveTemplateEntries failed for template {template_id}: {e}")
            return SaveTemplateEntriesResult(success=False, error=str(e))

        saved = db_rows_to_entries(saved_rows)
        logger.info("Template %s saved with %d entries", template_id, len(saved))
        return SaveTemplateEntriesResult(success=True, entries=saved)

    def _validate(self, entries: Sequence[ExerciseEntry]) -> List[str]:
        errors: List[str] = []
        for entry in entries:
            result = validate_entry(entry)
            if not result.ok:
                errors.append(f"Entry {entry.order_index}: {result.error.message}")
        return errors
