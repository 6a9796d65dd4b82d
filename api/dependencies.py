from fastapi import Request

from config import ScoringSettings
from database.db_manager import DatabaseManager


def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency that provides the DatabaseManager."""
    return request.app.state.db_manager


def get_settings(request: Request) -> ScoringSettings:
    """FastAPI dependency that provides the loaded settings."""
    return request.app.state.settings
