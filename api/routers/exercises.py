"""
Exercises router for catalog lookup.

Entries reference catalog exercises by id; these endpoints expose the
catalog so clients can show names and pick exercises.
"""
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel

from api.deps import get_exercise_catalog, get_reference_resolver
from api.schemas import ExerciseResponse
from application.ports import ExerciseCatalog
from application.use_cases import ExerciseReferenceResolver
from domain.models import ExerciseReference

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


class ExerciseListResponse(BaseModel):
    """Response model for list of exercises."""
    exercises: List[ExerciseResponse]
    count: int


@router.get("/{exercise_id}", response_model=ExerciseResponse)
def get_exercise(
    exercise_id: str = Path(..., min_length=1, max_length=100),
    resolver: ExerciseReferenceResolver = Depends(get_reference_resolver),
) -> ExerciseResponse:
    """Get a catalog exercise by id."""
    reference = resolver.resolve(exercise_id)
    if reference is None:
        raise HTTPException(status_code=404, detail=f"Exercise '{exercise_id}' not found")
    return ExerciseResponse.from_reference(reference)


@router.get("", response_model=ExerciseListResponse)
def list_exercises(
    limit: int = Query(50, ge=1, le=500, description="Maximum results to return"),
    catalog: ExerciseCatalog = Depends(get_exercise_catalog),
) -> ExerciseListResponse:
    """List catalog exercises ordered by name."""
    references = [ExerciseReference.from_row(row) for row in catalog.get_all(limit=limit) if row.get("id")]
    return ExerciseListResponse(
        exercises=[ExerciseResponse.from_reference(r) for r in references],
        count=len(references),
    )
