"""
Exercise Catalog Interface (Port).

This module defines the read-only interface to the exercise library that
entries reference by id. Implementations may use Supabase or other backends.
"""
from typing import Any, Dict, List, Optional, Protocol


class ExerciseCatalog(Protocol):
    """
    Abstract interface for looking up catalog exercises.

    The catalog is reference data: entries store only exercise ids and
    resolve name/description through this port when displaying.
    """

    def get_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        """
        Get an exercise by its id.

        Args:
            exercise_id: Catalog exercise id

        Returns:
            Exercise dictionary (id, name, description, ...) or None if not found
        """
        ...

    def get_all(self, limit: int = 500) -> List[Dict[str, Any]]:
        """
        Get exercises from the catalog.

        Args:
            limit: Maximum number of exercises to return

        Returns:
            List of exercise dictionaries ordered by name
        """
        ...
