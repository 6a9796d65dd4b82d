from .base import BaseGolfModel, DerivedGolfModel
from .course import (
    CourseMetadata,
    CourseMetadataRepository,
    HoleMetadata,
    TeeMetadata,
)
from .handicap import PlayerHandicapState
from .hole_score import HoleScore
from .leaderboard import LeaderboardEntry, ScoredRound
from .round import DEFAULT_TEE_RATING, DEFAULT_TEE_SLOPE, Round
from .round_source import (
    FullNineHoleRound,
    FullRound,
    HoleSelection,
    NineHoleSliceOf18,
    RoundSource,
    resolve_source,
)

__all__ = [
    "BaseGolfModel",
    "DerivedGolfModel",
    "CourseMetadata",
    "CourseMetadataRepository",
    "HoleMetadata",
    "TeeMetadata",
    "PlayerHandicapState",
    "HoleScore",
    "LeaderboardEntry",
    "ScoredRound",
    "DEFAULT_TEE_RATING",
    "DEFAULT_TEE_SLOPE",
    "Round",
    "FullNineHoleRound",
    "FullRound",
    "HoleSelection",
    "NineHoleSliceOf18",
    "RoundSource",
    "resolve_source",
]
