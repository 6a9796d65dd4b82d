from database.connection import DatabasePool, db
from database.db_manager import DatabaseManager
from database.repositories import CourseRepositoryDB, RoundRepositoryDB
from database.exceptions import DatabaseError, NotFoundError

__all__ = [
    "DatabasePool",
    "db",
    "DatabaseManager",
    "CourseRepositoryDB",
    "RoundRepositoryDB",
    "DatabaseError",
    "NotFoundError",
]
