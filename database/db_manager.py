import asyncpg

from database.repositories import CourseRepositoryDB, RoundRepositoryDB
from models import CourseMetadataRepository


class DatabaseManager:
    """Bundles the repositories that share one connection pool."""

    def __init__(self, pool: asyncpg.Pool):
        self.rounds = RoundRepositoryDB(pool)
        self.courses: CourseMetadataRepository = CourseRepositoryDB(pool)
