"""
Tempo value object.

Tempo is written as four phase durations in seconds joined by '-':
eccentric, bottom pause, concentric, top pause (e.g. '3-1-2-0').
Anything else entered in the tempo field is a free label and is kept
as text without further checks.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field

_TEMPO_PATTERN = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*-\s*(\d+)\s*-\s*(\d+)\s*$")


class Tempo(BaseModel):
    """
    Parsed four-phase tempo.

    Examples:
        >>> parse_tempo("3-1-2-0")
        Tempo(eccentric=3, bottom_pause=1, concentric=2, top_pause=0)
        >>> parse_tempo("slow and controlled") is None
        True
    """

    eccentric: int = Field(..., ge=0)
    bottom_pause: int = Field(..., ge=0)
    concentric: int = Field(..., ge=0)
    top_pause: int = Field(..., ge=0)

    @property
    def seconds_per_rep(self) -> int:
        """Total time under tension for a single rep."""
        return self.eccentric + self.bottom_pause + self.concentric + self.top_pause

    def __str__(self) -> str:
        return f"{self.eccentric}-{self.bottom_pause}-{self.concentric}-{self.top_pause}"

    model_config = {"frozen": True}


def parse_tempo(text: Optional[str]) -> Optional[Tempo]:
    """
    Parse tempo notation.

    Returns:
        Tempo when `text` is four integers joined by '-', None otherwise.
    """
    if not text:
        return None
    match = _TEMPO_PATTERN.match(text)
    if match is None:
        return None
    eccentric, bottom, concentric, top = (int(g) for g in match.groups())
    return Tempo(
        eccentric=eccentric,
        bottom_pause=bottom,
        concentric=concentric,
        top_pause=top,
    )
