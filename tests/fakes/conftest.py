"""
Test Fixtures and Helpers for Fake Repositories.

This module provides pytest fixtures and helper functions for overriding
FastAPI dependencies with fake repository implementations.

Usage:
    from tests.fakes.conftest import override_dependency, reset_overrides

    def test_something(app):
        reset_overrides(app)
        override_dependency(app, get_template_exercise_repo, FakeTemplateExerciseRepository())

        # Test code here...

        reset_overrides(app)
"""

from typing import Any, Callable

import pytest
from fastapi import FastAPI

from application.ports import ExerciseCatalog, TemplateExerciseRepository

# Type for repository dependency getters
RepoGetter = Callable[..., Any]


# =============================================================================
# Reset and Override Functions
# =============================================================================


def reset_overrides(app: FastAPI) -> None:
    """Reset all FastAPI dependency overrides of `app`."""
    app.dependency_overrides.clear()


def override_dependency(
    app: FastAPI,
    getter: RepoGetter,
    implementation: Any,
) -> None:
    """
    Override a FastAPI dependency with a fake implementation.

    Args:
        app: Application whose dependency is overridden
        getter: The dependency getter function (e.g., get_template_exercise_repo)
        implementation: The fake implementation instance or factory

    Example:
        repo = FakeTemplateExerciseRepository()
        override_dependency(app, get_template_exercise_repo, repo)
    """
    # Handle both direct instances and factory functions
    if callable(implementation) and not isinstance(implementation, type) and not hasattr(implementation, "reset"):
        app.dependency_overrides[getter] = implementation
    else:
        app.dependency_overrides[getter] = lambda: implementation


# =============================================================================
# Convenience Fixtures for Common Repositories
# =============================================================================


@pytest.fixture
def fake_template_exercise_repo() -> TemplateExerciseRepository:
    """
    Fixture providing a fresh FakeTemplateExerciseRepository.

    Returns:
        A new FakeTemplateExerciseRepository instance
    """
    from tests.fakes import FakeTemplateExerciseRepository
    return FakeTemplateExerciseRepository()


@pytest.fixture
def fake_exercise_catalog() -> ExerciseCatalog:
    """
    Fixture providing a FakeExerciseCatalog with default exercises.

    Returns:
        A new FakeExerciseCatalog instance
    """
    from tests.fakes import FakeExerciseCatalog
    return FakeExerciseCatalog()
