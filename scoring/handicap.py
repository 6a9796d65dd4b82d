"""Handicap index from a player's round history.

A simplified take on the World Handicap System: average the best few
to-par differentials, scaled by 0.96. How many differentials count depends
on how many eligible rounds the player has:

    rounds   best used
    20+      8
    15-19    6
    10-14    4
    5-9      3
    <5       none, no index yet
"""

import logging
from typing import Iterable, Optional

from models.handicap import PlayerHandicapState
from models.round import DEFAULT_TEE_SLOPE, Round

from .differentials import select_differentials
from .net import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_ROUNDS = 5
HANDICAP_MULTIPLIER = 0.96

# (minimum eligible rounds, differentials used), highest threshold first
SCORES_TO_USE_TABLE = (
    (20, 8),
    (15, 6),
    (10, 4),
    (5, 3),
)


def scores_to_use(eligible_count: int) -> int:
    """Number of best differentials averaged for `eligible_count` rounds."""
    for minimum, used in SCORES_TO_USE_TABLE:
        if eligible_count >= minimum:
            return used
    return 0


def compute_handicap(
    rounds: Iterable[Round],
    required_rounds: int = DEFAULT_REQUIRED_ROUNDS,
    exclude_incomplete: bool = True,
    multiplier: float = HANDICAP_MULTIPLIER,
) -> PlayerHandicapState:
    """Compute a player's handicap state from their full round history."""
    differentials = select_differentials(rounds, exclude_incomplete=exclude_incomplete)
    eligible = len(differentials)
    rounds_needed = max(0, required_rounds - eligible)

    used = scores_to_use(eligible)
    if used == 0:
        return PlayerHandicapState(
            handicap_index=0.0,
            rounds_needed_for_handicap=rounds_needed,
            rounds_used=0,
            eligible_rounds=eligible,
        )

    best = differentials[:used]
    average = sum(best) / len(best)
    handicap_index = max(0.0, round_half_up(average * multiplier, 1))
    logger.debug(
        "Handicap from %d eligible rounds, best %d %s, average %.2f -> %.1f",
        eligible, used, best, average, handicap_index,
    )
    return PlayerHandicapState(
        handicap_index=handicap_index,
        rounds_needed_for_handicap=rounds_needed,
        rounds_used=used,
        eligible_rounds=eligible,
    )


def course_handicap(handicap_index: Optional[float], slope: Optional[int] = None) -> int:
    """Strokes a player receives over eighteen holes on a tee of the given slope."""
    if not handicap_index:
        return 0
    slope = slope or DEFAULT_TEE_SLOPE
    return int(round_half_up(handicap_index * (slope / DEFAULT_TEE_SLOPE)))
