"""
Variant payload value objects.

Each training protocol has its own payload model holding only the
parameters that protocol defines. The parameters shared by most variants
(sets, reps, rest, RIR, tempo, primary exercise) live in CommonFields on
the entry, not here.

The payload union is discriminated on `variant_tag`, so a payload can only
ever be one protocol's shape:

    >>> payload = payload_for(VariantTag.AMRAP, amrap_duration_minutes=12)
    >>> payload_tag(payload)
    <VariantTag.AMRAP: 'amrap'>
    >>> payload.model_dump(exclude={"variant_tag"})
    {'amrap_duration_minutes': 12}
"""

from typing import Annotated, Any, Dict, FrozenSet, List, Literal, Optional, Type, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from domain.models.variant import EmomMode, VariantTag


def camel_alias(name: str) -> str:
    """camelCase alias for a field; the `variant_tag` discriminator keeps its name."""
    return name if name == "variant_tag" else to_camel(name)


_FROZEN = {
    "frozen": True,
    "extra": "ignore",
    "alias_generator": camel_alias,
    "populate_by_name": True,
}


# =============================================================================
# Nested structures
# =============================================================================


class GiantSetMember(BaseModel):
    """One exercise inside a giant set, performed back-to-back with the others."""

    exercise_id: str = Field(default="", description="Catalog exercise id")
    reps: str = Field(default="", description="Reps for this member (free text, e.g. '10' or '8-12')")
    sets: Optional[int] = Field(default=None, ge=0, description="Optional per-member set count")

    model_config = _FROZEN


class TabataStep(BaseModel):
    """A single exercise slot in a tabata set. Timing comes from the payload."""

    exercise_id: str = Field(default="", description="Catalog exercise id")

    model_config = _FROZEN


class TabataSet(BaseModel):
    """Ordered steps performed as one tabata set."""

    steps: List[TabataStep] = Field(default_factory=list)
    rest_after: Optional[int] = Field(
        default=None, ge=0, description="Rest in seconds after this set (overrides the global rest)"
    )

    model_config = _FROZEN


class CircuitStep(BaseModel):
    """A single timed station in a circuit set."""

    exercise_id: str = Field(default="", description="Catalog exercise id")
    work_seconds: Optional[int] = Field(default=None, ge=0)
    rest_after: Optional[int] = Field(default=None, ge=0, description="Rest in seconds after this step")

    model_config = _FROZEN


class CircuitSet(BaseModel):
    """Ordered stations performed as one circuit set."""

    steps: List[CircuitStep] = Field(default_factory=list)
    rest_between_sets: Optional[int] = Field(default=None, ge=0)

    model_config = _FROZEN


# =============================================================================
# Payloads, one per variant
# =============================================================================


class StraightSetPayload(BaseModel):
    """Straight sets carry everything in the common columns."""

    variant_tag: Literal["straight_set"] = "straight_set"

    model_config = _FROZEN


class SupersetPayload(BaseModel):
    """
    Superset: exercise A (the entry's primary exercise, common reps) followed
    by exercise B with its own reps.
    """

    variant_tag: Literal["superset"] = "superset"
    second_exercise_id: str = ""
    reps_b: str = ""

    model_config = _FROZEN


class GiantSetPayload(BaseModel):
    """Giant set: an ordered list of members."""

    variant_tag: Literal["giant_set"] = "giant_set"
    members: List[GiantSetMember] = Field(default_factory=list)

    model_config = _FROZEN


class DropSetPayload(BaseModel):
    """Drop set: load reduction per drop and the reps performed after dropping."""

    variant_tag: Literal["drop_set"] = "drop_set"
    # 10-100 is the intended range; values outside it are kept as entered.
    drop_percentage: Optional[int] = Field(default=None, ge=0)
    drop_set_reps: str = ""

    model_config = _FROZEN


class ClusterSetPayload(BaseModel):
    variant_tag: Literal["cluster_set"] = "cluster_set"
    cluster_reps: Optional[int] = Field(default=None, ge=0)
    clusters_per_set: Optional[int] = Field(default=None, ge=0)
    intra_cluster_rest: Optional[int] = Field(default=None, ge=0, description="Seconds between clusters")

    model_config = _FROZEN


class RestPausePayload(BaseModel):
    variant_tag: Literal["rest_pause"] = "rest_pause"
    rest_pause_duration: Optional[int] = Field(default=None, ge=0, description="Seconds per pause")
    max_rest_pauses: Optional[int] = Field(default=None, ge=0)

    model_config = _FROZEN


class PreExhaustionPayload(BaseModel):
    """
    Pre-exhaustion: the isolation exercise is the entry's primary exercise,
    the compound exercise follows immediately.
    """

    variant_tag: Literal["pre_exhaustion"] = "pre_exhaustion"
    compound_exercise_id: str = ""
    isolation_reps: str = ""
    compound_reps: str = ""

    model_config = _FROZEN


class AmrapPayload(BaseModel):
    variant_tag: Literal["amrap"] = "amrap"
    amrap_duration_minutes: Optional[int] = Field(default=None, ge=0)

    model_config = _FROZEN


class EmomPayload(BaseModel):
    """
    EMOM: time-based minutes prescribe work seconds, rep-based minutes
    prescribe reps per minute.
    """

    variant_tag: Literal["emom"] = "emom"
    mode: Optional[EmomMode] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    work_seconds: Optional[int] = Field(default=None, ge=0)
    reps_per_minute: Optional[int] = Field(default=None, ge=0)

    model_config = _FROZEN


class TabataPayload(BaseModel):
    """Tabata: global work interval and rounds over ordered sets of steps."""

    variant_tag: Literal["tabata"] = "tabata"
    work_seconds: Optional[int] = Field(default=None, ge=0)
    rounds: Optional[int] = Field(default=None, ge=0)
    sets: List[TabataSet] = Field(default_factory=list)

    model_config = _FROZEN


class CircuitPayload(BaseModel):
    """Circuit: rounds over ordered sets of individually timed steps."""

    variant_tag: Literal["circuit"] = "circuit"
    rounds: Optional[int] = Field(default=None, ge=0)
    sets: List[CircuitSet] = Field(default_factory=list)

    model_config = _FROZEN


class ForTimePayload(BaseModel):
    variant_tag: Literal["for_time"] = "for_time"
    target_reps: Optional[int] = Field(default=None, ge=0)
    time_cap_minutes: Optional[int] = Field(default=None, ge=0)

    model_config = _FROZEN


VariantPayload = Annotated[
    Union[
        StraightSetPayload,
        SupersetPayload,
        GiantSetPayload,
        DropSetPayload,
        ClusterSetPayload,
        RestPausePayload,
        PreExhaustionPayload,
        AmrapPayload,
        EmomPayload,
        TabataPayload,
        CircuitPayload,
        ForTimePayload,
    ],
    Field(discriminator="variant_tag"),
]

PAYLOAD_TYPES: Dict[VariantTag, Type[BaseModel]] = {
    VariantTag.STRAIGHT_SET: StraightSetPayload,
    VariantTag.SUPERSET: SupersetPayload,
    VariantTag.GIANT_SET: GiantSetPayload,
    VariantTag.DROP_SET: DropSetPayload,
    VariantTag.CLUSTER_SET: ClusterSetPayload,
    VariantTag.REST_PAUSE: RestPausePayload,
    VariantTag.PRE_EXHAUSTION: PreExhaustionPayload,
    VariantTag.AMRAP: AmrapPayload,
    VariantTag.EMOM: EmomPayload,
    VariantTag.TABATA: TabataPayload,
    VariantTag.CIRCUIT: CircuitPayload,
    VariantTag.FOR_TIME: ForTimePayload,
}


def payload_type(variant_tag: VariantTag) -> Type[BaseModel]:
    """Get the payload model class for a variant."""
    return PAYLOAD_TYPES[VariantTag(variant_tag)]


def payload_field_names(variant_tag: VariantTag) -> FrozenSet[str]:
    """
    Names of the variant-specific fields of a payload.

    The discriminator itself is excluded.
    """
    fields = payload_type(variant_tag).model_fields
    return frozenset(name for name in fields if name != "variant_tag")


def payload_for(variant_tag: VariantTag, /, **fields: Any) -> Any:
    """
    Build the payload matching `variant_tag`.

    This is the only constructor callers need: it guarantees the payload
    type and its tag agree. A `variant_tag` key among `fields` is ignored,
    as are unknown keys. Fields may be given by name or camelCase alias.

    Raises:
        ValueError: If `variant_tag` is not a known variant.
        pydantic.ValidationError: If a field value has the wrong shape.
    """
    tag = VariantTag(variant_tag)
    fields.pop("variant_tag", None)
    return PAYLOAD_TYPES[tag](**fields)


def empty_payload(variant_tag: VariantTag) -> Any:
    """Blank payload for a variant (every field unset)."""
    return payload_for(variant_tag)


def payload_tag(payload: BaseModel) -> VariantTag:
    """Variant tag of a payload instance."""
    return VariantTag(payload.variant_tag)
