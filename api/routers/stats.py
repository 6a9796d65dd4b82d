"""Stats/dashboard API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from analytics import (
    handicap_progression,
    player_stats,
    potential_best_score,
    round_summary,
    score_trend,
    score_type_distribution_per_round,
    scoring_by_par,
)
from api.dependencies import get_db, get_settings
from api.routers.handicap import handicap_from_rounds
from api.schemas import DashboardResponse
from config import ScoringSettings
from database.db_manager import DatabaseManager
from scoring import apply_net_scores

router = APIRouter()


@router.get("/dashboard/{player_id}", response_model=DashboardResponse)
async def get_dashboard(
    player_id: str,
    db: DatabaseManager = Depends(get_db),
    settings: ScoringSettings = Depends(get_settings),
):
    all_rounds = await db.rounds.get_rounds_for_player(player_id)
    handicap = handicap_from_rounds(all_rounds, settings)
    with_net = [apply_net_scores(r, handicap.handicap_index) for r in all_rounds]

    recent = all_rounds[:5]
    return DashboardResponse(
        handicap=handicap,
        stats=player_stats(with_net, handicap),
        recent_rounds=[{"round_id": r.id, **round_summary(r)} for r in recent],
        score_trend=score_trend(all_rounds),
        handicap_progression=handicap_progression(all_rounds, settings.required_rounds),
        scoring_by_par=scoring_by_par(all_rounds),
        score_types=score_type_distribution_per_round(recent),
    )


@router.get("/potential-best/{player_id}/{course_id}")
async def get_potential_best(player_id: str, course_id: str, db: DatabaseManager = Depends(get_db)):
    """Best score on every hole of a course across the player's rounds there."""
    rounds = await db.rounds.get_rounds_for_player(player_id)
    result = potential_best_score([r for r in rounds if r.course_id == course_id])
    if result is None:
        raise HTTPException(404, "No rounds at this course")
    return result
