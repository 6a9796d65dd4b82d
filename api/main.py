"""FastAPI application for the handicap and scoring engine."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import ScoringSettings, load_settings
from database.connection import db
from database.db_manager import DatabaseManager


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize DB pool on startup, close on shutdown."""
    await db.initialize(dsn=app.state.settings.database_url)
    app.state.db_manager = DatabaseManager(db.pool)
    yield
    await db.close()


def create_app(settings: Optional[ScoringSettings] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Golf Handicap & Scoring API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import handicap, leaderboard, rounds, stats
    app.include_router(handicap.router, prefix="/api/handicap", tags=["handicap"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])
    app.include_router(leaderboard.router, prefix="/api/leaderboard", tags=["leaderboard"])
    app.include_router(stats.router, prefix="/api/stats", tags=["stats"])

    @app.get("/api/health")
    async def health():
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
