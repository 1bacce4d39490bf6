"""
Variant tags for exercise entries.

Every entry in a workout template follows exactly one training protocol.
The tag decides which payload model carries the protocol's parameters and
how the primary exercise reference is derived.
"""

from enum import Enum
from typing import Optional


class VariantTag(str, Enum):
    """
    Training-protocol shapes supported by a template exercise entry.

    - STRAIGHT_SET: Classic sets x reps with rest, RIR and tempo
    - SUPERSET: Two exercises back-to-back (A then B), then rest
    - GIANT_SET: Three or more exercises back-to-back
    - DROP_SET: Work set followed by reduced-load drops
    - CLUSTER_SET: Sets broken into short clusters with intra-cluster rest
    - REST_PAUSE: Set to failure, short pauses, continue
    - PRE_EXHAUSTION: Isolation exercise immediately before a compound one
    - AMRAP: As many reps/rounds as possible in a fixed time
    - EMOM: Every minute on the minute
    - TABATA: Fixed work/rest intervals over sets of exercises
    - CIRCUIT: Rounds through sets of timed steps
    - FOR_TIME: Target reps completed as fast as possible under a cap
    """

    STRAIGHT_SET = "straight_set"
    SUPERSET = "superset"
    GIANT_SET = "giant_set"
    DROP_SET = "drop_set"
    CLUSTER_SET = "cluster_set"
    REST_PAUSE = "rest_pause"
    PRE_EXHAUSTION = "pre_exhaustion"
    AMRAP = "amrap"
    EMOM = "emom"
    TABATA = "tabata"
    CIRCUIT = "circuit"
    FOR_TIME = "for_time"

    @property
    def label(self) -> str:
        """Human-readable name, e.g. 'Rest-Pause' or 'EMOM'."""
        return _LABELS[self]

    @property
    def has_step_sets(self) -> bool:
        """True for variants whose exercises live in sets of steps."""
        return self in (VariantTag.TABATA, VariantTag.CIRCUIT)

    @property
    def is_paired(self) -> bool:
        """True for variants that require two explicit exercise ids."""
        return self in (VariantTag.SUPERSET, VariantTag.PRE_EXHAUSTION)

    @classmethod
    def parse(cls, value: object) -> Optional["VariantTag"]:
        """
        Parse a stored tag value.

        Returns None for missing, empty or unknown values instead of raising,
        so callers can decide on their own default.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


_LABELS = {
    VariantTag.STRAIGHT_SET: "Straight Set",
    VariantTag.SUPERSET: "Superset",
    VariantTag.GIANT_SET: "Giant Set",
    VariantTag.DROP_SET: "Drop Set",
    VariantTag.CLUSTER_SET: "Cluster Set",
    VariantTag.REST_PAUSE: "Rest-Pause",
    VariantTag.PRE_EXHAUSTION: "Pre-Exhaustion",
    VariantTag.AMRAP: "AMRAP",
    VariantTag.EMOM: "EMOM",
    VariantTag.TABATA: "Tabata",
    VariantTag.CIRCUIT: "Circuit",
    VariantTag.FOR_TIME: "For Time",
}


class EmomMode(str, Enum):
    """How each EMOM minute is prescribed."""

    TIME_BASED = "time_based"
    REP_BASED = "rep_based"
