from database.repositories.course_repo import CourseRepositoryDB
from database.repositories.round_repo import RoundRepositoryDB

__all__ = ["CourseRepositoryDB", "RoundRepositoryDB"]
