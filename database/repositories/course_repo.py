"""Course tee and hole metadata lookups."""

from typing import Optional
from uuid import UUID

import asyncpg

from models import CourseMetadata
from database.converters import course_metadata_from_rows


class CourseRepositoryDB:
    """Satisfies `CourseMetadataRepository` against Postgres."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    async def get_course_metadata(self, course_id: str) -> Optional[CourseMetadata]:
        try:
            uid = UUID(course_id)
        except ValueError:
            return None
        async with self._pool.acquire() as conn:
            course_row = await conn.fetchrow(
                "SELECT id, name FROM courses WHERE id = $1", uid
            )
            if not course_row:
                return None
            tee_rows = await conn.fetch(
                "SELECT name, rating, slope FROM course_tees WHERE course_id = $1 ORDER BY name",
                uid,
            )
            hole_rows = await conn.fetch(
                """SELECT hole_number, par, stroke_index FROM course_holes
                   WHERE course_id = $1 ORDER BY hole_number""",
                uid,
            )
        return course_metadata_from_rows(course_row, tee_rows, hole_rows)
