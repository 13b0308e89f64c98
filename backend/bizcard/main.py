"""Bizcard API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BizcardError / AuthenticationError → JSON responses
    - CORS configured from settings (not hardcoded)
    - The id codec is built once from settings and stored on app.state
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Codec built at import rather than in lifespan so ASGI test clients
      (which skip lifespan) see the same wiring
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import bizcard.infrastructure.database as db_module
from bizcard.api.error_handlers import register_error_handlers
from bizcard.api.routes import account, health, master_data
from bizcard.config import get_settings
from bizcard.core.id_codec import build_id_codec
from bizcard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = db_module.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Bizcard API started")
    yield
    await manager.dispose()
    logger.info("Bizcard API shutting down")


app = FastAPI(title="Bizcard API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.state.id_codec = build_id_codec(
    settings.id_codec_scheme,
    settings.id_codec_secret,
    min_length=settings.id_codec_min_length,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(master_data.router)
app.include_router(account.router)

register_error_handlers(app)
