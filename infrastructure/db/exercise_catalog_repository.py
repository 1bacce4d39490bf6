"""
Supabase implementation of ExerciseCatalog.

This module provides the concrete Supabase implementation for reading the
exercise library that template entries reference by id.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "exercises"


class SupabaseExerciseCatalog:
    """
    Supabase implementation of ExerciseCatalog protocol.

    Exercises found by id are cached for the lifetime of the instance;
    misses are not cached so newly added exercises show up.
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
            table: Name of the exercises table
        """
        self._client = client
        self._table = table
        self._exercises_cache: Dict[str, Dict[str, Any]] = {}

    def get_all(self, limit: int = 500) -> List[Dict[str, Any]]:
        """
        Get exercises ordered by name.

        Args:
            limit: Maximum number of exercises to return

        Returns:
            List of exercise dictionaries
        """
        try:
            result = self._client.table(self._table).select("*").order("name").limit(limit).execute()
            exercises = result.data or []
            for exercise in exercises:
                self._cache_result(exercise)
            return exercises
        except Exception:
            logger.exception("Error fetching all exercises")
            return []

    def get_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        """
        Get an exercise by its id.

        Args:
            exercise_id: Catalog exercise id

        Returns:
            Exercise dictionary or None if not found
        """
        cached = self._exercises_cache.get(exercise_id)
        if cached is not None:
            return cached

        try:
            result = self._client.table(self._table).select("*").eq("id", exercise_id).execute()
            if result.data:
                self._cache_result(result.data[0])
                return result.data[0]
            return None
        except Exception:
            logger.exception(f"Error fetching exercise by id {exercise_id}")
            return None

    def _cache_result(self, exercise: Dict[str, Any]) -> None:
        if exercise and exercise.get("id"):
            self._exercises_cache[str(exercise["id"])] = exercise
