"""API-specific response models for scorecards, leaderboards and dashboards."""

from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from models import LeaderboardEntry, PlayerHandicapState, Round


class NineSummary(BaseModel):
    """Strokes and par over a run of holes."""
    strokes: int
    par: int
    to_par: int
    hole_count: int


class ScorecardResponse(BaseModel):
    """A round with its net and Stableford values filled in."""
    round: Round
    handicap_applied: float
    to_par_net_display: Optional[int] = None
    front_nine: Optional[NineSummary] = None
    back_nine: Optional[NineSummary] = None
    total: Optional[NineSummary] = None


class LeaderboardResponse(BaseModel):
    """One page of a course leaderboard plus the requesting player's best."""
    course_id: str
    metric: str
    selection: str
    total_entries: int
    page: int
    total_pages: int
    entries: List[LeaderboardEntry]
    player_best: Optional[LeaderboardEntry] = None


class DashboardResponse(BaseModel):
    """Aggregated stats for the dashboard page."""
    handicap: PlayerHandicapState
    stats: Dict[str, Any]
    recent_rounds: List[Dict[str, Any]]
    score_trend: List[Dict[str, Any]]
    handicap_progression: List[Dict[str, Any]]
    scoring_by_par: List[Dict[str, Any]]
    score_types: List[Dict[str, Any]]
