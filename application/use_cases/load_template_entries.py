"""
LoadTemplateEntries Use Case.

Reads the stored rows of a template and decodes them into entries,
whatever encoding each row was written with.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.ports import TemplateExerciseRepository
from domain.converters import DecodePath, decode_db_row
from domain.models import ExerciseEntry

logger = logging.getLogger(__name__)


@dataclass
class LoadTemplateEntriesResult:
    """Result of the LoadTemplateEntries use case execution."""

    success: bool
    entries: List[ExerciseEntry] = field(default_factory=list)
    legacy_count: int = 0
    error: Optional[str] = None


class LoadTemplateEntriesUseCase:
    """
    Use case for loading the exercise entries of a template.

    Entries come back sorted by order_index, ties broken by id.
    `legacy_count` reports how many rows were decoded from JSON-in-notes.
    """

    def __init__(self, template_exercise_repo: TemplateExerciseRepository) -> None:
        self._repo = template_exercise_repo

    def execute(self, template_id: str) -> LoadTemplateEntriesResult:
        try:
            rows = self._repo.list_for_template(template_id)
            decoded = [decode_db_row(row) for row in rows]
        except Exception as e:
            logger.exception(f"LoadTemplateEntries failed for template {template_id}: {e}")
            return LoadTemplateEntriesResult(success=False, error=str(e))

        legacy_count = sum(1 for d in decoded if d.path == DecodePath.LEGACY_JSON)
        if legacy_count:
            logger.info("Template %s: %d entries decoded from legacy notes", template_id, legacy_count)

        entries = sorted((d.entry for d in decoded), key=lambda e: (e.order_index, e.id))
        return LoadTemplateEntriesResult(success=True, entries=entries, legacy_count=legacy_count)
