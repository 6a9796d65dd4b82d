"""Read access to rounds and player profiles."""

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional
from uuid import UUID

import asyncpg

from models import Round
from database.converters import player_name_from_row, round_from_row
from database.exceptions import DatabaseError, NotFoundError

logger = logging.getLogger(__name__)

_ROUND_COLUMNS = """id, user_id, course_id, date, holes_played, gross_score,
    to_par_gross, net_score, to_par_net, stableford_gross, stableford_net,
    hole_scores, tee_name, tee_rating, tee_slope"""


def _as_uuid(value: str) -> Optional[UUID]:
    try:
        return UUID(value)
    except ValueError:
        return None


class RoundRepositoryDB:
    """Async queries over rounds for handicap and leaderboard use."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_round(self, round_id: str) -> Optional[Round]:
        """Get a single round, or None if it does not exist."""
        uid = _as_uuid(round_id)
        if uid is None:
            return None
        async with self._pool.acquire() as conn:
            row = await conn.fetchrow(
                f"SELECT {_ROUND_COLUMNS} FROM rounds WHERE id = $1", uid
            )
        return round_from_row(row) if row else None

    async def require_round(self, round_id: str) -> Round:
        """Like get_round, but raises NotFoundError when missing."""
        round_ = await self.get_round(round_id)
        if round_ is None:
            raise NotFoundError(f"Round {round_id} not found")
        return round_

    async def get_rounds_for_player(self, player_id: str) -> List[Round]:
        """A player's full round history across all courses, newest first."""
        uid = _as_uuid(player_id)
        if uid is None:
            return []
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    f"""SELECT {_ROUND_COLUMNS} FROM rounds
                        WHERE user_id = $1
                        ORDER BY date DESC NULLS LAST""",
                    uid,
                )
        except asyncpg.PostgresError as e:
            raise DatabaseError(str(e)) from e
        return [round_from_row(r) for r in rows]

    async def get_course_pool(
        self,
        course_id: str,
        *,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
        tee_name: Optional[str] = None,
    ) -> List[Round]:
        """Every player's rounds at a course, optionally narrowed by date and tee."""
        uid = _as_uuid(course_id)
        if uid is None:
            return []
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    f"""SELECT {_ROUND_COLUMNS} FROM rounds
                        WHERE course_id = $1
                          AND ($2::date IS NULL OR date >= $2)
                          AND ($3::date IS NULL OR date <= $3)
                          AND ($4::text IS NULL OR LOWER(tee_name) = LOWER($4))
                        ORDER BY date ASC NULLS LAST""",
                    uid, date_from, date_to, tee_name,
                )
        except asyncpg.PostgresError as e:
            raise DatabaseError(str(e)) from e
        logger.debug("Course %s pool: %d rounds", course_id, len(rows))
        return [round_from_row(r) for r in rows]

    async def get_player_names(self, player_ids: Iterable[str]) -> Dict[str, str]:
        """Display names for the given players; unknown ids are left out."""
        uids = [u for u in (_as_uuid(p) for p in set(player_ids) if p) if u is not None]
        if not uids:
            return {}
        async with self._pool.acquire() as conn:
            rows = await conn.fetch(
                """SELECT id, username, first_name, last_name FROM profiles
                   WHERE id = ANY($1::uuid[])""",
                uids,
            )
        return {str(r["id"]): player_name_from_row(r) for r in rows}
