"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeTemplateExerciseRepository, create_template_exercise_repo

    # Direct instantiation
    repo = FakeTemplateExerciseRepository()
    repo.seed([{"id": "e1", "template_id": "tpl-1", "order_index": 1}])

    # Factory function with pre-populated data
    repo = create_template_exercise_repo(template_id="tpl-1", num_entries=3)
"""
from typing import Any, Dict, List

from tests.fakes.exercise_catalog import FakeExerciseCatalog
from tests.fakes.template_exercise_repository import FakeTemplateExerciseRepository


# =============================================================================
# Factory Functions
# =============================================================================


def make_straight_set_row(
    template_id: str,
    order_index: int,
    exercise_id: str = "barbell-back-squat",
    **overrides: Any,
) -> Dict[str, Any]:
    """Build a stored straight-set row in the structured encoding."""
    row: Dict[str, Any] = {
        "id": f"{template_id}-e{order_index}",
        "template_id": template_id,
        "exercise_id": exercise_id,
        "order_index": order_index,
        "sets": 3,
        "reps": "10",
        "rest_seconds": 90,
        "rir": None,
        "tempo": None,
        "variant_tag": "straight_set",
        "details": {},
        "notes": "",
    }
    row.update(overrides)
    return row


def create_template_exercise_repo(
    *,
    template_id: str = "tpl-1",
    num_entries: int = 0,
) -> FakeTemplateExerciseRepository:
    """
    Create a FakeTemplateExerciseRepository with optional straight-set rows.

    Args:
        template_id: Template the generated rows belong to
        num_entries: Number of rows to generate (order_index 1..N)
    """
    repo = FakeTemplateExerciseRepository()
    rows: List[Dict[str, Any]] = [
        make_straight_set_row(template_id, i) for i in range(1, num_entries + 1)
    ]
    repo.seed(rows)
    return repo


def create_exercise_catalog() -> FakeExerciseCatalog:
    """Create a FakeExerciseCatalog with default exercises."""
    return FakeExerciseCatalog()


__all__ = [
    "FakeExerciseCatalog",
    "FakeTemplateExerciseRepository",
    "create_exercise_catalog",
    "create_template_exercise_repo",
    "make_straight_set_row",
]
