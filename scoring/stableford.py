"""Stableford points.

Each played hole scores points against its net par (par plus any handicap
strokes received on that hole):

    strokes vs net par   points
    -2 or better         4
    -1                   3
     0                   2
    +1                   1
    +2 or worse          0

Net points need to know which holes receive strokes. That allocation comes
from each hole's stroke index; without one for every played hole there is
no honest way to spread the strokes, so net points are left as None.
"""

import logging
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional

from models.hole_score import HoleScore
from models.round import Round

from .handicap import course_handicap
from .net import handicap_for_holes

logger = logging.getLogger(__name__)


class StablefordResult(NamedTuple):
    gross: int
    net: Optional[int]


def hole_points(strokes: int, net_par: int) -> int:
    """Points for one hole."""
    diff = strokes - net_par
    if diff <= -2:
        return 4
    if diff == -1:
        return 3
    if diff == 0:
        return 2
    if diff == 1:
        return 1
    return 0


def allocate_handicap_strokes(
    course_handicap_strokes: int, hole_scores: Iterable[HoleScore]
) -> Optional[Dict[int, int]]:
    """Spread a course handicap over holes by stroke index, hardest first.

    Every hole gets `course_handicap // n` strokes and the hardest
    `course_handicap % n` holes one more, where n is the number of holes.
    Returns None when any hole lacks a stroke index or the handicap is
    negative.
    """
    holes: List[HoleScore] = list(hole_scores)
    if course_handicap_strokes < 0 or not holes:
        return None
    if any(hs.stroke_index is None for hs in holes):
        return None

    base, extra = divmod(course_handicap_strokes, len(holes))
    ordered = sorted(holes, key=lambda hs: (hs.stroke_index, hs.hole_number))
    received = {hs.hole_number: base for hs in holes}
    for hs in ordered[:extra]:
        received[hs.hole_number] += 1
    return received


def score_stableford(
    hole_scores: Iterable[HoleScore],
    handicap_strokes: Optional[Mapping[int, int]] = None,
) -> StablefordResult:
    """Gross and net Stableford totals; net is None without an allocation."""
    gross = 0
    net = 0 if handicap_strokes is not None else None
    for hs in hole_scores:
        if not hs.is_played():
            continue
        gross += hole_points(hs.strokes, hs.par)
        if net is not None:
            net += hole_points(hs.strokes, hs.par + handicap_strokes.get(hs.hole_number, 0))
    return StablefordResult(gross=gross, net=net)


def apply_stableford(round_obj: Round, handicap_index: Optional[float] = None) -> Round:
    """Copy of the round with Stableford totals filled in where missing.

    Strokes are allocated from the round's tee slope, scaled to the number
    of holes the round covers.
    """
    if round_obj.stableford_gross is not None and round_obj.stableford_net is not None:
        return round_obj

    allocation = None
    if handicap_index is not None:
        holes_counted = round_obj.source().holes_counted
        strokes = course_handicap(
            handicap_for_holes(handicap_index, holes_counted), round_obj.tee_slope
        )
        allocation = allocate_handicap_strokes(strokes, round_obj.hole_scores)
        if allocation is None:
            logger.debug("Round %s has no stroke indexes; net Stableford left empty", round_obj.id)

    result = score_stableford(round_obj.hole_scores, allocation)
    updates = {}
    if round_obj.stableford_gross is None:
        updates["stableford_gross"] = result.gross
    if round_obj.stableford_net is None and result.net is not None:
        updates["stableford_net"] = result.net
    return round_obj.model_copy(update=updates)
