"""
Template Exercise Repository Interface (Port).

This module defines the abstract interface for persisting the exercise
entries of workout templates. Implementations may use Supabase, in-memory
storage, or other backends.

Rows exchanged through this port use the storage shape produced by
domain.converters.entry_to_db_row.
"""
from typing import Any, Dict, List, Protocol, Sequence, Tuple


class TemplateExerciseRepository(Protocol):
    """
    Abstract interface for template exercise persistence.

    The repository stores opaque rows; it does not interpret variant data
    and does not assign order_index (the entry editor does).
    """

    def list_for_template(self, template_id: str) -> List[Dict[str, Any]]:
        """
        Get every exercise row of a template.

        Args:
            template_id: Workout template ID

        Returns:
            Rows in storage order (callers sort by order_index)
        """
        ...

    def replace_for_template(
        self,
        template_id: str,
        rows: Sequence[Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """
        Replace all exercise rows of a template.

        Deletes existing rows of the template and inserts `rows`. Rows
        without an `id` receive a durable id from the backend.

        Args:
            template_id: Workout template ID
            rows: Rows to store, already carrying order_index

        Returns:
            Stored rows including their durable ids

        Raises:
            Exception: Backend errors are propagated so callers can report
                a failed save without assuming a partial write succeeded.
        """
        ...

    def delete(self, entry_id: str) -> bool:
        """
        Delete a single exercise row.

        Args:
            entry_id: Row ID

        Returns:
            True if deleted, False if not found or on failure
        """
        ...

    def reorder(
        self,
        template_id: str,
        positions: Sequence[Tuple[str, int]],
    ) -> bool:
        """
        Update order_index of existing rows.

        Args:
            template_id: Workout template ID
            positions: (entry_id, order_index) pairs

        Returns:
            True if every row was updated
        """
        ...
