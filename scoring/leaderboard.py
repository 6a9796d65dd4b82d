"""Course leaderboards.

Rounds are reduced to one score under the chosen metric, then ranked.
Stroke-play metrics rank low-to-high, Stableford metrics high-to-low.
Ranks are always 1..n with no shared places; equal scores are ordered by
the earlier round date, then by their order in the pool.
"""

import logging
from datetime import date
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from models.leaderboard import LeaderboardEntry, ScoredRound
from models.round import Round
from models.round_source import HoleSelection

from .aggregation import aggregate_round
from .handicap import course_handicap
from .net import handicap_for_holes, net_score
from .stableford import allocate_handicap_strokes, score_stableford

logger = logging.getLogger(__name__)


class LeaderboardMetric(str, Enum):
    """Which score a leaderboard ranks on."""
    GROSS = "gross"
    NET = "net"
    STABLEFORD_GROSS = "stableford-gross"
    STABLEFORD_NET = "stableford-net"

    @property
    def higher_is_better(self) -> bool:
        return self in (LeaderboardMetric.STABLEFORD_GROSS, LeaderboardMetric.STABLEFORD_NET)


def filter_rounds(
    rounds: Iterable[Round],
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    tee_name: Optional[str] = None,
    holes_played: Optional[int] = None,
) -> List[Round]:
    """Keep rounds inside the date range, on the tee and of the round type given."""
    results: List[Round] = []
    for round_obj in rounds:
        if date_from and (round_obj.date is None or round_obj.date < date_from):
            continue
        if date_to and (round_obj.date is None or round_obj.date > date_to):
            continue
        if tee_name and (round_obj.tee_name or "").lower() != tee_name.lower():
            continue
        if holes_played and round_obj.holes_played != holes_played:
            continue
        results.append(round_obj)
    return results


def _metric_score(
    round_obj: Round,
    metric: LeaderboardMetric,
    selection: HoleSelection,
    handicap_index: Optional[float],
) -> Optional[int]:
    piece = aggregate_round(round_obj, selection)
    if piece is None:
        return None
    handicap = handicap_for_holes(handicap_index, piece.source.holes_counted)

    if metric is LeaderboardMetric.GROSS:
        return piece.strokes
    if metric is LeaderboardMetric.NET:
        # Precomputed net only describes the whole round
        if selection is HoleSelection.ALL and round_obj.net_score is not None:
            return round_obj.net_score
        return net_score(piece.strokes, handicap)

    holes = [
        hs for hs in round_obj.hole_scores
        if piece.source.kind != "slice_of_18" or hs.hole_number in selection.hole_range
    ]
    if metric is LeaderboardMetric.STABLEFORD_GROSS:
        if selection is HoleSelection.ALL and round_obj.stableford_gross is not None:
            return round_obj.stableford_gross
        if not holes:
            return None
        return score_stableford(holes).gross

    if selection is HoleSelection.ALL and round_obj.stableford_net is not None:
        return round_obj.stableford_net
    allocation = allocate_handicap_strokes(
        course_handicap(handicap, round_obj.tee_slope), holes
    )
    if allocation is None:
        return None
    return score_stableford(holes, allocation).net


def build_pool(
    rounds: Iterable[Round],
    metric: LeaderboardMetric,
    handicaps: Optional[Mapping[str, float]] = None,
    selection: HoleSelection = HoleSelection.ALL,
    player_names: Optional[Mapping[str, str]] = None,
) -> List[ScoredRound]:
    """Score each round under `metric`, dropping rounds with no usable score.

    `handicaps` maps player id to handicap index; players missing from it
    play off zero.
    """
    metric = LeaderboardMetric(metric)
    selection = HoleSelection(selection)
    handicaps = handicaps or {}
    player_names = player_names or {}

    pool: List[ScoredRound] = []
    for round_obj in rounds:
        score = _metric_score(round_obj, metric, selection, handicaps.get(round_obj.player_id))
        if score is None:
            logger.debug("Round %s has no %s score for %s", round_obj.id, metric.value, selection.value)
            continue
        pool.append(
            ScoredRound(
                round_id=round_obj.id,
                player_id=round_obj.player_id,
                player_name=player_names.get(round_obj.player_id),
                display_score=score,
                date=round_obj.date,
                tee_name=round_obj.tee_name,
                holes_played_label=round_obj.source(selection).label,
            )
        )
    return pool


def rank(pool: Sequence[ScoredRound], metric: LeaderboardMetric) -> List[LeaderboardEntry]:
    """Sort the pool for `metric` and number it 1..n."""
    metric = LeaderboardMetric(metric)
    sign = -1 if metric.higher_is_better else 1
    ordered = sorted(
        enumerate(pool),
        key=lambda item: (
            sign * item[1].display_score,
            item[1].date is None,
            item[1].date or date.min,
            item[0],
        ),
    )
    return [
        LeaderboardEntry(**scored.model_dump(exclude={"rank"}), rank=position)
        for position, (_, scored) in enumerate(ordered, start=1)
    ]


def best_round_for_player(
    entries: Sequence[ScoredRound], player_id: str, metric: LeaderboardMetric
) -> Optional[ScoredRound]:
    """The player's best entry under `metric`, or None if they have none.

    Passing ranked entries keeps the rank; the earliest best wins ties.
    """
    metric = LeaderboardMetric(metric)
    best: Optional[ScoredRound] = None
    for entry in entries:
        if entry.player_id != player_id:
            continue
        if best is None:
            best = entry
        elif metric.higher_is_better and entry.display_score > best.display_score:
            best = entry
        elif not metric.higher_is_better and entry.display_score < best.display_score:
            best = entry
    return best


def paginate(entries: Sequence[LeaderboardEntry], page: int = 1, per_page: int = 10) -> Dict[str, object]:
    """Slice a ranked list for display, with the page count."""
    per_page = max(1, per_page)
    total_pages = max(1, -(-len(entries) // per_page))
    page = min(max(1, page), total_pages)
    start = (page - 1) * per_page
    return {
        "entries": list(entries[start:start + per_page]),
        "page": page,
        "total_pages": total_pages,
    }
