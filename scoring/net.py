"""Gross to net conversions.

The converter only subtracts. Whether a nine-hole score should be matched
against half the handicap is decided by the caller through
`handicap_for_holes`, since only the caller knows what the score covers.
"""

import logging
import math
from typing import Optional, Union

from models.round import Round

logger = logging.getLogger(__name__)

Number = Union[int, float]

DEFAULT_TO_PAR_FLOOR = -36


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from negative infinity, e.g. 2.5 -> 3 and -2.5 -> -2."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _handicap_or_zero(handicap: Optional[Number]) -> float:
    return float(handicap) if handicap is not None else 0.0


def handicap_for_holes(handicap: Optional[Number], holes_counted: int) -> float:
    """Share of the handicap that applies to a score over `holes_counted` holes."""
    value = _handicap_or_zero(handicap)
    if holes_counted == 9:
        return value / 2
    return value


def net_score(gross: int, handicap: Optional[Number]) -> int:
    """Gross minus handicap, rounded to a whole stroke and never below zero."""
    return max(0, int(round_half_up(gross - _handicap_or_zero(handicap))))


def net_to_par(to_par_gross: int, handicap: Optional[Number]) -> int:
    """To-par minus handicap. Not floored; see `clamp_to_par_for_display`."""
    return int(round_half_up(to_par_gross - _handicap_or_zero(handicap)))


def clamp_to_par_for_display(to_par: int, floor: int = DEFAULT_TO_PAR_FLOOR) -> int:
    return max(floor, to_par)


def apply_net_scores(round_obj: Round, handicap_index: Optional[Number]) -> Round:
    """Copy of the round with net score and net to-par filled in where missing.

    Precomputed values on the round are kept as they are.
    """
    if round_obj.net_score is not None and round_obj.to_par_net is not None:
        return round_obj

    handicap = handicap_for_holes(handicap_index, round_obj.source().holes_counted)
    updates = {}
    if round_obj.net_score is None:
        updates["net_score"] = net_score(round_obj.gross_score, handicap)
    if round_obj.to_par_net is None:
        updates["to_par_net"] = net_to_par(round_obj.to_par_gross, handicap)
    logger.debug("Round %s net values with handicap %.1f: %s", round_obj.id, handicap, updates)
    return round_obj.model_copy(update=updates)
