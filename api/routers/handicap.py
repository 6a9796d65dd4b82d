"""Handicap API endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from api.dependencies import get_db, get_settings
from config import ScoringSettings
from database.db_manager import DatabaseManager
from models import PlayerHandicapState, Round
from scoring import compute_handicap

router = APIRouter()


def handicap_from_rounds(rounds: List[Round], settings: ScoringSettings) -> PlayerHandicapState:
    return compute_handicap(
        rounds,
        required_rounds=settings.required_rounds,
        exclude_incomplete=settings.exclude_incomplete_rounds,
        multiplier=settings.handicap_multiplier,
    )


async def player_handicap(
    db: DatabaseManager, settings: ScoringSettings, player_id: str
) -> PlayerHandicapState:
    """Recompute a player's handicap from their full history."""
    rounds = await db.rounds.get_rounds_for_player(player_id)
    return handicap_from_rounds(rounds, settings)


@router.get("/{player_id}", response_model=PlayerHandicapState)
async def get_handicap(
    player_id: str,
    db: DatabaseManager = Depends(get_db),
    settings: ScoringSettings = Depends(get_settings),
):
    return await player_handicap(db, settings, player_id)
