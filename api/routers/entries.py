"""
Exercise entry validation router.

Lets clients run commit-time validation on a draft entry without saving it.
The draft is normalized first, so the response reflects exactly what a
commit would decide.
"""
from fastapi import APIRouter

from api.routers.template_exercises import parse_variant_tag
from api.schemas import ValidateEntryRequest, ValidateEntryResponse
from domain.models import new_temp_id
from domain.services import normalize_entry, resolve_entry_primary, validate_entry

router = APIRouter(
    prefix="/exercise-entries",
    tags=["Exercise Entries"],
)


@router.post("/validate", response_model=ValidateEntryResponse)
def validate_exercise_entry(request: ValidateEntryRequest) -> ValidateEntryResponse:
    """
    Validate a draft entry.

    Returns `valid` with the resolved primary exercise id, or the blocking
    error code and message.
    """
    entry = normalize_entry(
        new_temp_id(),
        1,
        parse_variant_tag(request.variant_tag),
        request.common,
        request.fields,
    )
    return ValidateEntryResponse.from_result(validate_entry(entry), resolve_entry_primary(entry))
