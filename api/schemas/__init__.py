"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- template_exercises: Template entry, validation and catalog models
"""

from api.schemas.template_exercises import (
    DuplicateEntriesRequest,
    EntryListResponse,
    EntryRequest,
    EntryResponse,
    ExerciseResponse,
    SaveEntriesRequest,
    ValidateEntryRequest,
    ValidateEntryResponse,
)

__all__ = [
    "DuplicateEntriesRequest",
    "EntryListResponse",
    "EntryRequest",
    "EntryResponse",
    "ExerciseResponse",
    "SaveEntriesRequest",
    "ValidateEntryRequest",
    "ValidateEntryResponse",
]
