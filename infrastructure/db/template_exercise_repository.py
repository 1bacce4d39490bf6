"""
Supabase implementation of TemplateExerciseRepository.

This module provides the concrete Supabase implementation for the exercise
rows of workout templates. Rows are stored as produced by
domain.converters.entry_to_db_row.
"""
import logging
from typing import Any, Dict, List, Sequence, Tuple

from supabase import Client

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "workout_template_exercises"


class SupabaseTemplateExerciseRepository:
    """
    Supabase implementation of TemplateExerciseRepository protocol.

    All Supabase query logic for template exercise rows is encapsulated
    here. The client is injected via constructor for testability.
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the template exercises table
        """
        self._client = client
        self._table = table

    def list_for_template(self, template_id: str) -> List[Dict[str, Any]]:
        """Get every exercise row of a template, ordered by order_index."""
        try:
            result = (
                self._client.table(self._table)
                .select("*")
                .eq("template_id", template_id)
                .order("order_index")
                .execute()
            )
            return result.data or []
        except Exception as e:
            logger.error(f"Failed to list exercises for template {template_id}: {e}")
            return []

    def replace_for_template(
        self,
        template_id: str,
        rows: Sequence[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """
        Replace all exercise rows of a template.

        Backend errors propagate to the caller.
        """
        for row in rows:
            if row.get("template_id") != template_id:
                raise ValueError(f"Row for template {row.get('template_id')} passed to {template_id}")

        logger.info(f"Replacing exercises of template {template_id} with {len(rows)} row(s)")
        self._client.table(self._table).delete().eq("template_id", template_id).execute()
        if not rows:
            return []

        result = self._client.table(self._table).insert(list(rows)).execute()
        saved = result.data or []
        if len(saved) != len(rows):
            logger.warning(
                f"Template {template_id}: inserted {len(rows)} row(s) but backend returned {len(saved)}"
            )
        return saved

    def delete(self, entry_id: str) -> bool:
        """Delete a single exercise row."""
        try:
            result = self._client.table(self._table).delete().eq("id", entry_id).execute()
            deleted_count = len(result.data) if result.data else 0
            if deleted_count == 0:
                logger.warning(f"No template exercise found with id {entry_id} (0 rows deleted)")
                return False
            return True
        except Exception as e:
            logger.error(f"Failed to delete template exercise {entry_id}: {e}")
            return False

    def reorder(
        self,
        template_id: str,
        positions: Sequence[Tuple[str, int]],
    ) -> bool:
        """Update order_index of existing rows of a template."""
        try:
            updated = 0
            for entry_id, order_index in positions:
                result = (
                    self._client.table(self._table)
                    .update({"order_index": order_index})
                    .eq("id", entry_id)
                    .eq("template_id", template_id)
                    .execute()
                )
                if result.data:
                    updated += 1
            if updated != len(positions):
                logger.warning(
                    f"Template {template_id}: reordered {updated} of {len(positions)} row(s)"
                )
            return updated == len(positions)
        except Exception as e:
            logger.error(f"Failed to reorder exercises of template {template_id}: {e}")
            return False
