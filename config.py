"""Environment-driven settings for the scoring engine and its API."""

import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class ScoringSettings(BaseModel):
    """Knobs for handicap and net-score policy."""
    required_rounds: int = Field(5, ge=1)
    handicap_multiplier: float = Field(0.96, gt=0, le=1)
    net_to_par_display_floor: int = -36
    exclude_incomplete_rounds: bool = True
    database_url: Optional[str] = None
    log_level: str = "INFO"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])


def load_settings() -> ScoringSettings:
    """Read settings from the environment (and a .env file if present)."""
    origins = os.environ.get("CORS_ORIGINS")
    return ScoringSettings(
        required_rounds=int(os.environ.get("HANDICAP_REQUIRED_ROUNDS", "5")),
        handicap_multiplier=float(os.environ.get("HANDICAP_MULTIPLIER", "0.96")),
        net_to_par_display_floor=int(os.environ.get("NET_TO_PAR_DISPLAY_FLOOR", "-36")),
        exclude_incomplete_rounds=_env_bool("EXCLUDE_INCOMPLETE_ROUNDS", True),
        database_url=os.environ.get("DATABASE_URL"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()]
        if origins else ["http://localhost:5173"],
    )
