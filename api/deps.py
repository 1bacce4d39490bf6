"""
FastAPI Dependency Providers.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and use case providers create new instances per-request

Usage in routers:
    from api.deps import get_load_entries_use_case
    from application.use_cases import LoadTemplateEntriesUseCase

    @router.get("/templates/{template_id}/exercises")
    def list_entries(
        template_id: str,
        use_case: LoadTemplateEntriesUseCase = Depends(get_load_entries_use_case),
    ):
        return use_case.execute(template_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_template_exercise_repo] = lambda: FakeTemplateExerciseRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import ExerciseCatalog, TemplateExerciseRepository

# Concrete implementations
from infrastructure import SupabaseExerciseCatalog, SupabaseTemplateExerciseRepository

from application.use_cases import (
    DuplicateTemplateEntriesUseCase,
    ExerciseReferenceResolver,
    LoadTemplateEntriesUseCase,
    SaveTemplateEntriesUseCase,
)
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_template_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> TemplateExerciseRepository:
    """Get the template exercise repository bound to the configured table."""
    return SupabaseTemplateExerciseRepository(client, table=settings.template_exercises_table)


def get_exercise_catalog(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> ExerciseCatalog:
    """Get the exercise catalog bound to the configured table."""
    return SupabaseExerciseCatalog(client, table=settings.exercises_table)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_load_entries_use_case(
    repo: TemplateExerciseRepository = Depends(get_template_exercise_repo),
) -> LoadTemplateEntriesUseCase:
    return LoadTemplateEntriesUseCase(template_exercise_repo=repo)


def get_save_entries_use_case(
    repo: TemplateExerciseRepository = Depends(get_template_exercise_repo),
) -> SaveTemplateEntriesUseCase:
    return SaveTemplateEntriesUseCase(template_exercise_repo=repo)


def get_duplicate_entries_use_case(
    repo: TemplateExerciseRepository = Depends(get_template_exercise_repo),
) -> DuplicateTemplateEntriesUseCase:
    return DuplicateTemplateEntriesUseCase(template_exercise_repo=repo)


def get_reference_resolver(
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> ExerciseReferenceResolver:
    """A resolver per request, so its cache never outlives the request."""
    return ExerciseReferenceResolver(catalog=catalog)
