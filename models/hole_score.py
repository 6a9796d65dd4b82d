from pydantic import Field, model_validator
from typing import Optional

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """A player's result on a single hole.

    `strokes` of None or 0 means the hole was not played; such holes are
    left out of every total.
    """

    hole_number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    strokes: Optional[int] = Field(None, ge=0, le=20)
    putts: Optional[int] = Field(None, ge=0, le=10)
    green_in_regulation: Optional[bool] = None
    penalties: Optional[int] = Field(None, ge=0, le=10)
    stroke_index: Optional[int] = Field(None, ge=1, le=18)  # 1 = hardest hole

    @model_validator(mode='after')
    def validate_score_consistency(self):
        # Putts cannot exceed strokes
        if self.putts is not None and self.is_played():
            if self.putts > self.strokes:
                raise ValueError(f"Putts ({self.putts}) cannot exceed strokes ({self.strokes})")
        return self

    def is_played(self) -> bool:
        return bool(self.strokes)

    def to_par(self) -> Optional[int]:
        """Calculate score relative to par (+2, -1, etc.)."""
        if not self.is_played():
            return None
        return self.strokes - self.par

    def get_score_type(self) -> Optional[str]:
        """Get the name for this score (eagle, birdie, par, bogey, etc.)."""
        relative = self.to_par()
        if relative is None:
            return None

        score_names = {
            -2: "eagle",
            -1: "birdie",
            0: "par",
            1: "bogey",
            2: "double bogey",
            3: "triple bogey",
        }
        if relative <= -3:
            return "albatross"
        if relative >= 4:
            return "quadruple bogey+"
        return score_names[relative]
