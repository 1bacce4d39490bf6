"""
Infrastructure layer for workout template exercise entries.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

from infrastructure.db import (
    SupabaseExerciseCatalog,
    SupabaseTemplateExerciseRepository,
)

__all__ = [
    "SupabaseExerciseCatalog",
    "SupabaseTemplateExerciseRepository",
]
