"""
DuplicateTemplateEntries Use Case.

Copies every exercise entry of one template to another. The copies get new
durable ids from the backend; variant data and order are preserved. Legacy
rows of the source are written back in the structured encoding.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import TemplateExerciseRepository
from domain.converters import db_rows_to_entries, entries_to_db_rows
from domain.models import ExerciseEntry, new_temp_id

logger = logging.getLogger(__name__)


@dataclass
class DuplicateTemplateEntriesResult:
    """Result of the DuplicateTemplateEntries use case execution."""

    success: bool
    entries: List[ExerciseEntry] = field(default_factory=list)
    error: Optional[str] = None


class DuplicateTemplateEntriesUseCase:
    """
    Use case for duplicating template entries.

    Usage:
        >>> use_case = DuplicateTemplateEntriesUseCase(template_exercise_repo=repo)
        >>> result = use_case.execute(source_template_id="tpl-1", target_template_id="tpl-2")
    """

    def __init__(self, template_exercise_repo: TemplateExerciseRepository) -> None:
        self._repo = template_exercise_repo

    def execute(
        self,
        source_template_id: str,
        target_template_id: str,
    ) -> DuplicateTemplateEntriesResult:
        """
        Args:
            source_template_id: Template to copy from
            target_template_id: Template to copy into (its rows are replaced)

        Returns:
            DuplicateTemplateEntriesResult with the target's stored entries
        """
        if source_template_id == target_template_id:
            return DuplicateTemplateEntriesResult(
                success=False,
                error="Source and target template must differ",
            )

        try:
            source = db_rows_to_entries(self._repo.list_for_template(source_template_id))
            copies = [
                entry.with_id(new_temp_id()).with_order_index(position)
                for position, entry in enumerate(source, start=1)
            ]
            saved_rows = self._repo.replace_for_template(
                target_template_id,
                entries_to_db_rows(copies, target_template_id),
            )
        except Exception as e:
            logger.exception(
                f"DuplicateTemplateEntries failed ({source_template_id} -> {target_template_id}): {e}"
            )
            return DuplicateTemplateEntriesResult(success=False, error=str(e))

        logger.info(
            "Copied %d entries from template %s to %s",
            len(copies),
            source_template_id,
            target_template_id,
        )
        return DuplicateTemplateEntriesResult(success=True, entries=db_rows_to_entries(saved_rows))
