"""
Repository Interfaces (Ports) for the template exercise service.

This package defines abstract interfaces that decouple domain logic from
infrastructure (database, external services). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the domain needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import TemplateExerciseRepository

    class TemplateService:
        def __init__(self, repo: TemplateExerciseRepository):
            self.repo = repo

        def load(self, template_id):
            return self.repo.list_for_template(template_id)
"""

# Template exercise persistence
from application.ports.template_exercise_repository import TemplateExerciseRepository

# Exercise catalog (read-only reference data)
from application.ports.exercise_catalog import ExerciseCatalog

__all__ = [
    "TemplateExerciseRepository",
    "ExerciseCatalog",
]
