"""
Exercise reference value object.

References are owned by the exercise catalog. Entries only store the id;
name and description are looked up on demand for display.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class ExerciseReference(BaseModel):
    """
    Read-only view of a catalog exercise.

    Examples:
        >>> ref = ExerciseReference.from_row({"id": "ex-1", "name": "Back Squat"})
        >>> ref.description
        ''
    """

    id: str = Field(..., min_length=1, description="Opaque catalog id")
    name: str = Field(default="", description="Display name")
    description: str = Field(default="", description="Catalog description")

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "ExerciseReference":
        """Build a reference from a catalog row, tolerating null columns."""
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            description=row.get("description") or "",
        )

    def __str__(self) -> str:
        return self.name or self.id

    model_config = {"frozen": True}
