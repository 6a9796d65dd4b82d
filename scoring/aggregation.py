"""Front nine, back nine and full-round summaries.

Holes are picked by their hole number, never by list position, and only
played holes count. A selection with no played holes yields None rather
than a zero total so it cannot drag down averages or top a leaderboard.
"""

from typing import Iterable, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from models.hole_score import HoleScore
from models.round import Round
from models.round_source import HoleSelection, RoundSource


class HoleAggregate(NamedTuple):
    strokes: int
    par: int
    to_par: int
    hole_count: int


class NineSplit(NamedTuple):
    front: Optional[HoleAggregate]
    back: Optional[HoleAggregate]
    total: Optional[HoleAggregate]


class RoundSlice(BaseModel):
    """A round's totals under a hole selection, with where they came from."""
    model_config = ConfigDict(frozen=True)

    round_id: Optional[str] = None
    source: RoundSource
    strokes: int
    par: Optional[int] = None
    to_par: int
    hole_count: int

    @property
    def label(self) -> str:
        return self.source.label


def aggregate(
    hole_scores: Iterable[HoleScore], selection: HoleSelection = HoleSelection.ALL
) -> Optional[HoleAggregate]:
    """Sum strokes and par over the played holes in `selection`."""
    hole_range = HoleSelection(selection).hole_range
    chosen = [hs for hs in hole_scores if hs.is_played() and hs.hole_number in hole_range]
    if not chosen:
        return None
    strokes = sum(hs.strokes for hs in chosen)
    par = sum(hs.par for hs in chosen)
    return HoleAggregate(strokes=strokes, par=par, to_par=strokes - par, hole_count=len(chosen))


def split_nines(hole_scores: Iterable[HoleScore]) -> NineSplit:
    """Front, back and total summaries in one pass for scorecard display."""
    hole_scores = list(hole_scores)
    return NineSplit(
        front=aggregate(hole_scores, HoleSelection.FRONT_NINE),
        back=aggregate(hole_scores, HoleSelection.BACK_NINE),
        total=aggregate(hole_scores, HoleSelection.ALL),
    )


def aggregate_round(
    round_obj: Round, selection: HoleSelection = HoleSelection.ALL
) -> Optional[RoundSlice]:
    """Totals for a round under `selection`, or None if it has nothing there.

    A nine-hole round is returned whole under any selection. An
    eighteen-hole round is cut down to the requested nine. Rounds saved
    without hole detail fall back to their stored totals when no slicing
    is needed.
    """
    selection = HoleSelection(selection)
    source = round_obj.source(selection)
    slicing = source.kind == "slice_of_18"

    if round_obj.played_holes():
        summary = aggregate(round_obj.hole_scores, selection if slicing else HoleSelection.ALL)
        if summary is None:
            return None
        return RoundSlice(
            round_id=round_obj.id,
            source=source,
            strokes=summary.strokes,
            par=summary.par,
            to_par=summary.to_par,
            hole_count=summary.hole_count,
        )

    if slicing or not round_obj.is_complete():
        return None
    return RoundSlice(
        round_id=round_obj.id,
        source=source,
        strokes=round_obj.gross_score,
        par=round_obj.gross_score - round_obj.to_par_gross,
        to_par=round_obj.to_par_gross,
        hole_count=source.holes_counted,
    )
