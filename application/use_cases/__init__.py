"""
Application use cases for workout template exercise entries.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters.

- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result dataclasses, not API responses

Usage:
    from application.use_cases import (
        EntryListEditor,
        LoadTemplateEntriesUseCase,
        SaveTemplateEntriesUseCase,
    )
"""

from application.use_cases.duplicate_template_entries import (
    DuplicateTemplateEntriesResult,
    DuplicateTemplateEntriesUseCase,
)
from application.use_cases.entry_list_editor import (
    CommitResult,
    EditorMode,
    EditorStateError,
    EntryDraft,
    EntryListEditor,
    OrderIndexError,
    UnknownFieldError,
    ensure_contiguous_order,
    renumber,
)
from application.use_cases.exercise_references import ExerciseReferenceResolver
from application.use_cases.load_template_entries import (
    LoadTemplateEntriesResult,
    LoadTemplateEntriesUseCase,
)
from application.use_cases.save_template_entries import (
    SaveTemplateEntriesResult,
    SaveTemplateEntriesUseCase,
)

__all__ = [
    "CommitResult",
    "EditorMode",
    "EditorStateError",
    "EntryDraft",
    "EntryListEditor",
    "OrderIndexError",
    "UnknownFieldError",
    "ensure_contiguous_order",
    "renumber",
    "ExerciseReferenceResolver",
    "DuplicateTemplateEntriesResult",
    "DuplicateTemplateEntriesUseCase",
    "LoadTemplateEntriesResult",
    "LoadTemplateEntriesUseCase",
    "SaveTemplateEntriesResult",
    "SaveTemplateEntriesUseCase",
]
