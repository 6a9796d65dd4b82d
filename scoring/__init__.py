from .aggregation import (
    HoleAggregate,
    NineSplit,
    RoundSlice,
    aggregate,
    aggregate_round,
    split_nines,
)
from .differentials import eligible_rounds, select_differentials
from .handicap import compute_handicap, course_handicap, scores_to_use
from .leaderboard import (
    LeaderboardMetric,
    best_round_for_player,
    build_pool,
    filter_rounds,
    paginate,
    rank,
)
from .net import (
    apply_net_scores,
    clamp_to_par_for_display,
    handicap_for_holes,
    net_score,
    net_to_par,
)
from .stableford import (
    StablefordResult,
    allocate_handicap_strokes,
    apply_stableford,
    hole_points,
    score_stableford,
)

__all__ = [
    "HoleAggregate",
    "NineSplit",
    "RoundSlice",
    "aggregate",
    "aggregate_round",
    "split_nines",
    "eligible_rounds",
    "select_differentials",
    "compute_handicap",
    "course_handicap",
    "scores_to_use",
    "LeaderboardMetric",
    "best_round_for_player",
    "build_pool",
    "filter_rounds",
    "paginate",
    "rank",
    "apply_net_scores",
    "clamp_to_par_for_display",
    "handicap_for_holes",
    "net_score",
    "net_to_par",
    "StablefordResult",
    "allocate_handicap_strokes",
    "apply_stableford",
    "hole_points",
    "score_stableford",
]
