"""
API package for the workout template exercises service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_duplicate_entries_use_case,
    get_exercise_catalog,
    get_load_entries_use_case,
    get_reference_resolver,
    get_save_entries_use_case,
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_template_exercise_repo,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_template_exercise_repo",
    "get_exercise_catalog",
    # Use cases
    "get_load_entries_use_case",
    "get_save_entries_use_case",
    "get_duplicate_entries_use_case",
    "get_reference_resolver",
]
