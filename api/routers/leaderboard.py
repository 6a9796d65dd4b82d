"""Course leaderboard endpoints."""

import asyncio
import logging
from datetime import date
from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_db, get_settings
from api.routers.handicap import player_handicap
from api.routers.rounds import with_course_metadata
from api.schemas import LeaderboardResponse
from config import ScoringSettings
from database.db_manager import DatabaseManager
from models import HoleSelection
from scoring import (
    LeaderboardMetric,
    best_round_for_player,
    build_pool,
    filter_rounds,
    paginate,
    rank,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{course_id}", response_model=LeaderboardResponse)
async def get_leaderboard(
    course_id: str,
    metric: LeaderboardMetric = LeaderboardMetric.GROSS,
    selection: HoleSelection = HoleSelection.ALL,
    tee: Optional[str] = None,
    holes: Optional[int] = Query(None, description="Only rounds played over 9 or 18 holes"),
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    player_id: Optional[str] = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(10, ge=1, le=100),
    db: DatabaseManager = Depends(get_db),
    settings: ScoringSettings = Depends(get_settings),
):
    rounds = await db.rounds.get_course_pool(
        course_id, date_from=date_from, date_to=date_to, tee_name=tee
    )
    rounds = filter_rounds(rounds, holes_played=holes if holes in (9, 18) else None)
    rounds = await with_course_metadata(db.courses, course_id, rounds)

    players = sorted({r.player_id for r in rounds if r.player_id})
    handicaps: Dict[str, float] = {}
    if metric in (LeaderboardMetric.NET, LeaderboardMetric.STABLEFORD_NET):
        states = await asyncio.gather(
            *(player_handicap(db, settings, pid) for pid in players)
        )
        handicaps = {pid: state.handicap_index for pid, state in zip(players, states)}
    names = await db.rounds.get_player_names(players)

    entries = rank(build_pool(rounds, metric, handicaps, selection, names), metric)
    logger.info(
        "Leaderboard %s (%s, %s): %d of %d rounds ranked",
        course_id, metric.value, selection.value, len(entries), len(rounds),
    )
    page_data = paginate(entries, page, per_page)
    return LeaderboardResponse(
        course_id=course_id,
        metric=metric.value,
        selection=selection.value,
        total_entries=len(entries),
        page=page_data["page"],
        total_pages=page_data["total_pages"],
        entries=page_data["entries"],
        player_best=best_round_for_player(entries, player_id, metric) if player_id else None,
    )
