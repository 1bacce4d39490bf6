"""
Pydantic models for the template exercises API.

Entries travel as three parts: the variant tag, the common values and the
variant-specific fields. Request values are raw editor values; they are
normalized before validation, so numbers may arrive as text.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from domain.models import ExerciseEntry, ExerciseReference, ValidationResult


class EntryRequest(BaseModel):
    """One entry as sent by a client."""
    id: Optional[str] = Field(None, description="Durable id; omitted for new entries")
    order_index: int = Field(..., description="1-based position within the template")
    variant_tag: str = Field("straight_set", description="Training protocol")
    common: Dict[str, Any] = Field(default_factory=dict)
    fields: Dict[str, Any] = Field(default_factory=dict)


class SaveEntriesRequest(BaseModel):
    """Full replacement of a template's entries."""
    entries: List[EntryRequest] = Field(default_factory=list)


class DuplicateEntriesRequest(BaseModel):
    """Copy a template's entries into another template."""
    target_template_id: str = Field(..., min_length=1)


class ValidateEntryRequest(BaseModel):
    """A draft entry to check without saving it."""
    variant_tag: str = Field("straight_set", description="Training protocol")
    common: Dict[str, Any] = Field(default_factory=dict)
    fields: Dict[str, Any] = Field(default_factory=dict)


class EntryResponse(BaseModel):
    """One stored entry."""
    id: str
    order_index: int
    variant_tag: str
    label: str
    common: Dict[str, Any]
    fields: Dict[str, Any]

    @classmethod
    def from_entry(cls, entry: ExerciseEntry) -> "EntryResponse":
        return cls(
            id=entry.id,
            order_index=entry.order_index,
            variant_tag=entry.variant_tag.value,
            label=entry.variant_tag.label,
            common=entry.common.model_dump(mode="json"),
            fields=entry.payload.model_dump(mode="json", exclude={"variant_tag"}),
        )


class EntryListResponse(BaseModel):
    """Entries of one template, sorted by order_index."""
    template_id: str
    entries: List[EntryResponse]
    count: int
    legacy_count: int = 0


class ValidateEntryResponse(BaseModel):
    """Outcome of validating a draft entry."""
    valid: bool
    error_code: Optional[str] = None
    message: Optional[str] = None
    primary_exercise_id: Optional[str] = None

    @classmethod
    def from_result(
        cls,
        result: ValidationResult,
        primary_exercise_id: Optional[str],
    ) -> "ValidateEntryResponse":
        if result.ok:
            return cls(valid=True, primary_exercise_id=primary_exercise_id)
        return cls(
            valid=False,
            error_code=result.error.code.value,
            message=result.error.message,
            primary_exercise_id=primary_exercise_id,
        )


class ExerciseResponse(BaseModel):
    """A catalog exercise."""
    id: str
    name: str = ""
    description: str = ""

    @classmethod
    def from_reference(cls, reference: ExerciseReference) -> "ExerciseResponse":
        return cls(id=reference.id, name=reference.name, description=reference.description)
