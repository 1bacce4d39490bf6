"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository
interfaces defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseExerciseCatalog,
        SupabaseTemplateExerciseRepository,
    )

    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    template_exercise_repo = SupabaseTemplateExerciseRepository(client)
    exercise_catalog = SupabaseExerciseCatalog(client)
"""

from infrastructure.db.exercise_catalog_repository import SupabaseExerciseCatalog
from infrastructure.db.template_exercise_repository import SupabaseTemplateExerciseRepository

__all__ = [
    "SupabaseExerciseCatalog",
    "SupabaseTemplateExerciseRepository",
]
