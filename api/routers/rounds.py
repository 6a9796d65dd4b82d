"""Round scorecard endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from api.dependencies import get_db, get_settings
from api.routers.handicap import player_handicap
from api.schemas import NineSummary, ScorecardResponse
from config import ScoringSettings
from database.db_manager import DatabaseManager
from database.exceptions import NotFoundError
from models import CourseMetadataRepository, Round
from scoring import (
    apply_net_scores,
    apply_stableford,
    clamp_to_par_for_display,
    handicap_for_holes,
    split_nines,
)

router = APIRouter()


def _nine(summary) -> Optional[NineSummary]:
    return NineSummary(**summary._asdict()) if summary else None


async def with_course_metadata(
    courses: CourseMetadataRepository, course_id: Optional[str], rounds: List[Round]
) -> List[Round]:
    """Fill missing stroke indexes and tee ratings from the course, looked up once."""
    if not course_id:
        return rounds
    metadata = await courses.get_course_metadata(course_id)
    return [r.with_course_metadata(metadata) for r in rounds]


@router.get("/{round_id}/scorecard", response_model=ScorecardResponse)
async def get_scorecard(
    round_id: str,
    handicap: Optional[float] = Query(None, ge=-10, le=54),
    db: DatabaseManager = Depends(get_db),
    settings: ScoringSettings = Depends(get_settings),
):
    """A round with net and Stableford values merged in.

    Without an explicit `handicap`, the player's current index is used.
    """
    try:
        round_ = await db.rounds.require_round(round_id)
    except NotFoundError:
        raise HTTPException(404, "Round not found")

    if handicap is None and round_.player_id:
        state = await player_handicap(db, settings, round_.player_id)
        handicap = state.handicap_index

    [round_] = await with_course_metadata(db.courses, round_.course_id, [round_])

    scored = apply_stableford(apply_net_scores(round_, handicap), handicap)
    split = split_nines(scored.hole_scores)
    return ScorecardResponse(
        round=scored,
        handicap_applied=handicap_for_holes(handicap, scored.source().holes_counted),
        to_par_net_display=clamp_to_par_for_display(
            scored.to_par_net, settings.net_to_par_display_floor
        ) if scored.to_par_net is not None else None,
        front_nine=_nine(split.front),
        back_nine=_nine(split.back),
        total=_nine(split.total),
    )
