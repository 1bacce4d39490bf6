"""
Template exercises router.

This router provides endpoints for:
- Loading the entries of a workout template
- Replacing the entries of a template
- Copying entries from one template to another
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from api.deps import (
    get_duplicate_entries_use_case,
    get_load_entries_use_case,
    get_save_entries_use_case,
)
from api.schemas import (
    DuplicateEntriesRequest,
    EntryListResponse,
    EntryRequest,
    EntryResponse,
    SaveEntriesRequest,
)
from application.use_cases import (
    DuplicateTemplateEntriesUseCase,
    LoadTemplateEntriesUseCase,
    SaveTemplateEntriesUseCase,
)
from domain.models import ExerciseEntry, VariantTag, new_temp_id
from domain.services import normalize_entry, resolve_entry_primary

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/templates",
    tags=["Template Exercises"],
)


# =============================================================================
# Helpers
# =============================================================================


def parse_variant_tag(value: str) -> VariantTag:
    """Parse a client-supplied variant tag, rejecting unknown values with 422."""
    tag = VariantTag.parse(value)
    if tag is None:
        raise HTTPException(status_code=422, detail=f"Unknown variant_tag '{value}'")
    return tag


def _entry_from_request(request: EntryRequest) -> ExerciseEntry:
    if request.order_index < 1:
        raise HTTPException(status_code=422, detail="order_index must be 1 or greater")
    entry = normalize_entry(
        request.id or new_temp_id(),
        request.order_index,
        parse_variant_tag(request.variant_tag),
        request.common,
        request.fields,
    )
    return entry.with_primary_exercise_id(resolve_entry_primary(entry))


def _list_response(template_id: str, entries: List[ExerciseEntry], legacy_count: int = 0) -> EntryListResponse:
    return EntryListResponse(
        template_id=template_id,
        entries=[EntryResponse.from_entry(e) for e in entries],
        count=len(entries),
        legacy_count=legacy_count,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/{template_id}/exercises", response_model=EntryListResponse)
def list_template_exercises(
    template_id: str = Path(..., min_length=1),
    use_case: LoadTemplateEntriesUseCase = Depends(get_load_entries_use_case),
) -> EntryListResponse:
    """
    Get the entries of a template sorted by order_index.

    Rows stored in the legacy JSON-in-notes encoding are decoded too;
    `legacy_count` reports how many.
    """
    result = use_case.execute(template_id)
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Failed to load entries")
    return _list_response(template_id, result.entries, result.legacy_count)


@router.put("/{template_id}/exercises", response_model=EntryListResponse)
def save_template_exercises(
    request: SaveEntriesRequest,
    template_id: str = Path(..., min_length=1),
    use_case: SaveTemplateEntriesUseCase = Depends(get_save_entries_use_case),
) -> EntryListResponse:
    """
    Replace the entries of a template.

    Entries must be numbered 1..N and each must pass commit validation.
    The response carries the stored entries with their durable ids.
    """
    entries = [_entry_from_request(item) for item in request.entries]
    result = use_case.execute(template_id, entries)
    if not result.success:
        if result.validation_errors:
            raise HTTPException(
                status_code=422,
                detail={"error": result.error, "validation_errors": result.validation_errors},
            )
        raise HTTPException(status_code=500, detail=result.error or "Failed to save entries")
    return _list_response(template_id, result.entries)


@router.post("/{template_id}/exercises/duplicate", response_model=EntryListResponse)
def duplicate_template_exercises(
    request: DuplicateEntriesRequest,
    template_id: str = Path(..., min_length=1),
    use_case: DuplicateTemplateEntriesUseCase = Depends(get_duplicate_entries_use_case),
) -> EntryListResponse:
    """Copy every entry of this template into `target_template_id`."""
    if request.target_template_id == template_id:
        raise HTTPException(status_code=422, detail="Source and target template must differ")
    result = use_case.execute(template_id, request.target_template_id)
    if not result.success:
        raise HTTPException(status_code=500, detail=result.error or "Failed to duplicate entries")
    return _list_response(request.target_template_id, result.entries)
