from datetime import date as date_type
from typing import Optional, Union

from .base import DerivedGolfModel


class ScoredRound(DerivedGolfModel):
    """A round reduced to the single number a leaderboard ranks on."""
    round_id: Optional[str] = None
    player_id: Optional[str] = None
    player_name: Optional[str] = None
    display_score: Union[int, float]
    date: Optional[date_type] = None
    tee_name: Optional[str] = None
    holes_played_label: str = "18 Holes"


class LeaderboardEntry(ScoredRound):
    """A ranked leaderboard row."""
    rank: int
