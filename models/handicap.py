from pydantic import Field, computed_field

from .base import DerivedGolfModel


class PlayerHandicapState(DerivedGolfModel):
    """A player's handicap as of their current round history.

    Always recomputed from the full history and replaced wholesale.
    """
    handicap_index: float = 0.0
    rounds_needed_for_handicap: int = Field(0, ge=0)
    rounds_used: int = Field(0, ge=0)
    eligible_rounds: int = Field(0, ge=0)

    @computed_field
    @property
    def is_valid(self) -> bool:
        return self.rounds_needed_for_handicap == 0
