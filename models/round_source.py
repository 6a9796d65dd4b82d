"""Which part of a round a score represents.

A nine-hole number can come from two very different places: a round that
was only ever played over nine holes, or one half of an eighteen-hole
round. `resolve_source` makes that decision once so callers branch on the
variant instead of re-checking `holes_played` everywhere.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict


class HoleSelection(str, Enum):
    """Which holes of a round to summarize."""
    ALL = "all"
    FRONT_NINE = "front9"
    BACK_NINE = "back9"

    @property
    def hole_range(self) -> range:
        if self is HoleSelection.FRONT_NINE:
            return range(1, 10)
        if self is HoleSelection.BACK_NINE:
            return range(10, 19)
        return range(1, 19)

    @property
    def short_label(self) -> str:
        return {"all": "18", "front9": "Front 9", "back9": "Back 9"}[self.value]


class _SourceBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class FullRound(_SourceBase):
    """All eighteen holes of an eighteen-hole round."""
    kind: Literal["full_18"] = "full_18"

    @property
    def holes_counted(self) -> int:
        return 18

    @property
    def label(self) -> str:
        return "18 Holes"


class FullNineHoleRound(_SourceBase):
    """A round played over nine holes; a nine filter has nothing to slice."""
    kind: Literal["full_9"] = "full_9"
    requested: HoleSelection = HoleSelection.ALL

    @property
    def holes_counted(self) -> int:
        return 9

    @property
    def label(self) -> str:
        if self.requested is HoleSelection.ALL:
            return "9 Holes"
        return f"{self.requested.short_label} Only"


class NineHoleSliceOf18(_SourceBase):
    """The front or back nine cut out of an eighteen-hole round."""
    kind: Literal["slice_of_18"] = "slice_of_18"
    half: Literal[HoleSelection.FRONT_NINE, HoleSelection.BACK_NINE]

    @property
    def holes_counted(self) -> int:
        return 9

    @property
    def label(self) -> str:
        return f"{self.half.short_label} (from 18)"


RoundSource = Union[FullRound, FullNineHoleRound, NineHoleSliceOf18]


def resolve_source(holes_played: int, selection: Optional[HoleSelection] = None) -> RoundSource:
    """Pick the source variant for a round viewed under `selection`."""
    selection = HoleSelection(selection or HoleSelection.ALL)
    if holes_played == 9:
        return FullNineHoleRound(requested=selection)
    if selection is HoleSelection.ALL:
        return FullRound()
    return NineHoleSliceOf18(half=selection)
