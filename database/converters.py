"""Conversion between asyncpg rows and the scoring engine's models.

Hole scores are stored as a JSON array on the round row. Anything that
does not parse into valid hole scores is dropped here with a warning so
the engine only ever sees clean, numeric input.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from models import CourseMetadata, HoleMetadata, HoleScore, Round, TeeMetadata

logger = logging.getLogger(__name__)


# ================================================================
# Hole scores (JSON)
# ================================================================

def hole_score_from_json(item: Dict[str, Any]) -> HoleScore:
    """One stored hole record -> HoleScore. Raises ValidationError if malformed."""
    gir = item.get("greenInRegulation", item.get("green_in_regulation"))
    return HoleScore(
        hole_number=item.get("hole", item.get("hole_number")),
        par=item.get("par"),
        strokes=item.get("strokes") or None,
        putts=item.get("putts"),
        green_in_regulation=gir,
        penalties=item.get("penalties"),
        stroke_index=item.get("handicap", item.get("stroke_index")),
    )


def parse_hole_scores(raw: Any) -> List[HoleScore]:
    """Stored hole_scores (JSON text or list) -> HoleScores, never raising.

    Unparseable input yields []. Individual bad or repeated holes are skipped.
    """
    if raw is None:
        return []
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning("Could not parse hole_scores JSON; treating round as having no holes")
            return []
    if not isinstance(raw, list):
        logger.warning("hole_scores is not a list (%s); ignoring", type(raw).__name__)
        return []

    scores: List[HoleScore] = []
    seen = set()
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Skipping hole record that is not an object: %r", item)
            continue
        try:
            hs = hole_score_from_json(item)
        except ValidationError as e:
            logger.warning("Skipping invalid hole record %r: %s", item, e.errors()[0]["msg"])
            continue
        if hs.hole_number in seen:
            logger.warning("Skipping repeated hole %d", hs.hole_number)
            continue
        seen.add(hs.hole_number)
        scores.append(hs)
    return sorted(scores, key=lambda hs: hs.hole_number)


# ================================================================
# Row -> Model (reads)
# ================================================================

def _optional_str(value) -> Optional[str]:
    return str(value) if value is not None else None


def round_from_row(row) -> Round:
    """rounds row -> Round model.

    If the stored to-par total disagrees with the hole data, the hole data
    is dropped and the stored totals are kept.
    """
    fields = dict(
        id=_optional_str(row["id"]),
        player_id=_optional_str(row["user_id"]),
        course_id=_optional_str(row["course_id"]),
        date=row["date"],
        holes_played=row["holes_played"] or 18,
        gross_score=row["gross_score"] or 0,
        to_par_gross=row["to_par_gross"] or 0,
        net_score=row["net_score"],
        to_par_net=row["to_par_net"],
        stableford_gross=row["stableford_gross"],
        stableford_net=row["stableford_net"],
        tee_name=row["tee_name"],
        tee_rating=float(row["tee_rating"]) if row["tee_rating"] is not None else None,
        tee_slope=row["tee_slope"],
    )
    hole_scores = parse_hole_scores(row["hole_scores"])
    try:
        return Round(hole_scores=hole_scores, **fields)
    except ValidationError as e:
        if not hole_scores:
            raise
        logger.warning("Round %s hole data inconsistent (%s); using stored totals", fields["id"], e.errors()[0]["msg"])
        return Round(**fields)


def player_name_from_row(row) -> str:
    """profiles row -> display name: username, else first and last name."""
    if row["username"]:
        return row["username"]
    full = f"{row['first_name'] or ''} {row['last_name'] or ''}".strip()
    return full or "Unknown Player"


def course_metadata_from_rows(course_row, tee_rows: list, hole_rows: list) -> CourseMetadata:
    """courses row + course_tees rows + course_holes rows -> CourseMetadata."""
    return CourseMetadata(
        id=str(course_row["id"]),
        name=course_row["name"],
        tees=[
            TeeMetadata(
                name=r["name"],
                rating=float(r["rating"]) if r["rating"] is not None else None,
                slope=r["slope"],
            )
            for r in tee_rows
        ],
        holes=sorted(
            [
                HoleMetadata(number=r["hole_number"], par=r["par"], stroke_index=r["stroke_index"])
                for r in hole_rows
            ],
            key=lambda h: h.number,
        ),
    )
