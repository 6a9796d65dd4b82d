from .stats import (
    handicap_progression,
    player_stats,
    potential_best_score,
    round_summary,
    score_trend,
    score_type_distribution_per_round,
    scoring_by_par,
)

__all__ = [
    "round_summary",
    "score_trend",
    "handicap_progression",
    "scoring_by_par",
    "score_type_distribution_per_round",
    "potential_best_score",
    "player_stats",
]
