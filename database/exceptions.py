class DatabaseError(Exception):
    """Base for all round-store errors."""


class NotFoundError(DatabaseError):
    """Entity not found."""
