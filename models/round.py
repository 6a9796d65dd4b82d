from datetime import date as date_type
from pydantic import Field, field_validator, model_validator
from typing import List, Literal, Optional, TYPE_CHECKING

from .base import BaseGolfModel
from .hole_score import HoleScore
from .round_source import HoleSelection, RoundSource, resolve_source

if TYPE_CHECKING:
    from .course import CourseMetadata

DEFAULT_TEE_RATING = 72.0
DEFAULT_TEE_SLOPE = 113


class Round(BaseGolfModel):
    """One completed scoring session for a player."""
    id: Optional[str] = None
    player_id: Optional[str] = None
    course_id: Optional[str] = None
    date: Optional[date_type] = None
    holes_played: Literal[9, 18] = 18
    gross_score: int = 0  # 0 or less marks an incomplete round
    to_par_gross: int = 0
    hole_scores: List[HoleScore] = Field(default_factory=list)

    # Precomputed values; derived by the scoring engine when absent
    net_score: Optional[int] = None
    to_par_net: Optional[int] = None
    stableford_gross: Optional[int] = None
    stableford_net: Optional[int] = None

    tee_name: Optional[str] = None
    tee_rating: float = DEFAULT_TEE_RATING
    tee_slope: int = Field(DEFAULT_TEE_SLOPE, ge=55, le=155)

    @field_validator('tee_rating', mode='before')
    @classmethod
    def default_tee_rating(cls, v):
        # Stored 0 means "not recorded", same as None
        return v or DEFAULT_TEE_RATING

    @field_validator('tee_slope', mode='before')
    @classmethod
    def default_tee_slope(cls, v):
        return v or DEFAULT_TEE_SLOPE

    @field_validator('hole_scores')
    @classmethod
    def validate_unique_holes(cls, v):
        seen = set()
        for hs in v:
            if hs.hole_number in seen:
                raise ValueError(f"Hole {hs.hole_number} appears more than once")
            seen.add(hs.hole_number)
        return v

    @model_validator(mode='after')
    def validate_to_par(self):
        # to_par_gross must agree with the hole-by-hole par when both are known
        if self.gross_score > 0 and self.played_holes():
            expected = self.gross_score - self.total_par()
            if self.to_par_gross != expected:
                raise ValueError(
                    f"to_par_gross {self.to_par_gross} does not match "
                    f"gross {self.gross_score} minus par {self.total_par()}"
                )
        return self

    @classmethod
    def from_hole_scores(cls, hole_scores: List[HoleScore], **kwargs) -> "Round":
        """Build a round whose gross and to-par totals come from its holes."""
        played = [hs for hs in hole_scores if hs.is_played()]
        gross = sum(hs.strokes for hs in played)
        par = sum(hs.par for hs in played)
        kwargs.setdefault("holes_played", 9 if 0 < len(hole_scores) <= 9 else 18)
        return cls(hole_scores=hole_scores, gross_score=gross, to_par_gross=gross - par, **kwargs)

    def is_complete(self) -> bool:
        return self.gross_score > 0

    def played_holes(self) -> List[HoleScore]:
        """Hole scores with recorded strokes, ordered by hole number."""
        return sorted(
            (hs for hs in self.hole_scores if hs.is_played()),
            key=lambda hs: hs.hole_number,
        )

    def total_par(self) -> int:
        """Par over the holes actually played."""
        return sum(hs.par for hs in self.played_holes())

    def get_hole_score(self, hole_number: int) -> Optional[HoleScore]:
        """Get score for a specific hole by its number, not its position."""
        for hs in self.hole_scores:
            if hs.hole_number == hole_number:
                return hs
        return None

    def source(self, selection: Optional[HoleSelection] = None) -> RoundSource:
        return resolve_source(self.holes_played, selection)

    def with_course_metadata(self, metadata: Optional["CourseMetadata"]) -> "Round":
        """Copy of this round with missing stroke indexes and tee ratings filled in."""
        if metadata is None:
            return self
        updates = {}
        tee = metadata.get_tee(self.tee_name) if self.tee_name else None
        if tee is not None:
            if tee.rating is not None and self.tee_rating == DEFAULT_TEE_RATING:
                updates["tee_rating"] = tee.rating
            if tee.slope is not None and self.tee_slope == DEFAULT_TEE_SLOPE:
                updates["tee_slope"] = tee.slope

        hole_scores = []
        for hs in self.hole_scores:
            hole = metadata.get_hole(hs.hole_number)
            if hs.stroke_index is None and hole is not None and hole.stroke_index is not None:
                hs = hs.model_copy(update={"stroke_index": hole.stroke_index})
            hole_scores.append(hs)
        updates["hole_scores"] = hole_scores
        return self.model_copy(update=updates)
