"""
Exercise entry aggregate.

An entry is one exercise line in a workout template: common columns shared
by every protocol plus exactly one variant payload. The entry's variant tag
is read from its payload, so the two can never disagree.
"""

import uuid
from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.payloads import StraightSetPayload, VariantPayload, camel_alias, payload_tag
from domain.models.tempo import Tempo, parse_tempo
from domain.models.variant import VariantTag

# Client-side ids carry this prefix until the entry is persisted.
TEMP_ID_PREFIX = "temp-"


def new_temp_id() -> str:
    """Generate a temporary entry id for an unsaved entry."""
    return f"{TEMP_ID_PREFIX}{uuid.uuid4().hex}"


def is_temp_id(entry_id: Optional[str]) -> bool:
    return not entry_id or entry_id.startswith(TEMP_ID_PREFIX)


class CommonFields(BaseModel):
    """
    Columns stored uniformly for every variant.

    Not every variant uses every field (tempo and RIR mean nothing for a
    tabata, for example), but they exist on every entry so storage stays
    one row shape. Numeric fields are either None or a non-negative int.
    """

    primary_exercise_id: Optional[str] = Field(
        default=None, description="Primary exercise id used for list display and filtering"
    )
    sets: Optional[int] = Field(default=None, ge=0)
    reps: str = Field(default="", description="Reps as entered (e.g. '10', '8-12', 'AMRAP')")
    rest_seconds: Optional[int] = Field(default=None, ge=0)
    rir: Optional[int] = Field(default=None, ge=0, description="Reps in reserve")
    tempo: str = Field(default="", description="Tempo notation or free label")
    notes: str = Field(default="", description="Coach notes")

    model_config = {"frozen": True, "alias_generator": camel_alias, "populate_by_name": True}


class ExerciseEntry(BaseModel):
    """
    One committed exercise entry of a workout template.

    Examples:
        >>> from domain.models import AmrapPayload
        >>> entry = ExerciseEntry(
        ...     id="temp-1",
        ...     order_index=1,
        ...     common=CommonFields(primary_exercise_id="burpee"),
        ...     payload=AmrapPayload(amrap_duration_minutes=10),
        ... )
        >>> entry.variant_tag
        <VariantTag.AMRAP: 'amrap'>
    """

    id: str = Field(..., min_length=1, description="Temporary or durable entry id")
    order_index: int = Field(..., ge=1, description="1-based position within the template")
    common: CommonFields = Field(default_factory=CommonFields)
    payload: VariantPayload = Field(default_factory=StraightSetPayload)

    @property
    def variant_tag(self) -> VariantTag:
        return payload_tag(self.payload)

    @property
    def primary_exercise_id(self) -> Optional[str]:
        return self.common.primary_exercise_id

    @property
    def is_persisted(self) -> bool:
        """True once the entry carries a durable (non-temporary) id."""
        return not is_temp_id(self.id)

    @property
    def parsed_tempo(self) -> Optional[Tempo]:
        """Structured tempo for straight sets, None for free labels or other variants."""
        if self.variant_tag != VariantTag.STRAIGHT_SET:
            return None
        return parse_tempo(self.common.tempo)

    def with_id(self, entry_id: str) -> "ExerciseEntry":
        return self.model_copy(update={"id": entry_id})

    def with_order_index(self, order_index: int) -> "ExerciseEntry":
        return self.model_copy(update={"order_index": order_index})

    def with_primary_exercise_id(self, exercise_id: Optional[str]) -> "ExerciseEntry":
        common = self.common.model_copy(update={"primary_exercise_id": exercise_id})
        return self.model_copy(update={"common": common})

    def __str__(self) -> str:
        """Human-readable summary, e.g. '#2 Superset squat 4x8'."""
        parts: List[str] = [f"#{self.order_index}", self.variant_tag.label]
        if self.common.primary_exercise_id:
            parts.append(self.common.primary_exercise_id)
        if self.common.sets and self.common.reps:
            parts.append(f"{self.common.sets}x{self.common.reps}")
        elif self.common.sets:
            parts.append(f"{self.common.sets} sets")
        return " ".join(parts)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "temp-3f2a",
                    "order_index": 1,
                    "common": {
                        "primary_exercise_id": "barbell-back-squat",
                        "sets": 4,
                        "reps": "8",
                        "rest_seconds": 120,
                        "rir": 2,
                        "tempo": "3-1-1-0",
                    },
                    "payload": {"variant_tag": "straight_set"},
                },
                {
                    "id": "7c1e0d5a-1111-4b7e-9d0a-2f8f6a0c9e11",
                    "order_index": 2,
                    "common": {"primary_exercise_id": "burpee", "rest_seconds": 10},
                    "payload": {
                        "variant_tag": "tabata",
                        "work_seconds": 20,
                        "rounds": 8,
                        "sets": [{"steps": [{"exercise_id": "burpee"}]}],
                    },
                },
            ]
        },
    }
