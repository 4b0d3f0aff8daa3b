"""Aqua Stark API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers keep every response inside the envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
    - Shutdown state (GracefulShutdown) and chain state (DojoClient) are objects owned
      by the app / runner, not module flags

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - DojoClient created with the app (app.state) so request dependencies work even
      when the lifespan is not run (ASGI test transport); lifespan only initializes it
    - run() drives uvicorn through ManagedServer so SIGTERM/SIGINT go to GracefulShutdown
"""

import asyncio
import logging
import sys
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aqua_stark import __version__
from aqua_stark.api.error_handlers import register_error_handlers
from aqua_stark.api.routes import decorations, fish, health, players, sync, tanks
from aqua_stark.config import get_settings
from aqua_stark.infrastructure.database import close_db, init_db
from aqua_stark.infrastructure.dojo_client import DojoClient
from aqua_stark.infrastructure.observability import setup_logging
from aqua_stark.infrastructure.server_banner import display_server_banner
from aqua_stark.infrastructure.shutdown import GracefulShutdown, ManagedServer, serve

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    app.state.dojo_client.initialize()
    app.state.start_time = time.monotonic()
    display_server_banner(settings)
    yield
    logger.info("Aqua Stark API shutting down")
    await close_db()


settings = get_settings()

app = FastAPI(
    title="Aqua Stark Backend API", version=__version__, lifespan=lifespan,
)
app.state.dojo_client = DojoClient(settings)
app.state.start_time = time.monotonic()

# CORS: empty CORS_ORIGIN reflects any origin
_origins = settings.cors_origin_list
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_origin_regex=None if _origins else ".*",
    allow_credentials=settings.cors_credentials,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(players.router)
app.include_router(tanks.router)
app.include_router(fish.router)
app.include_router(decorations.router)
app.include_router(sync.router)


def run() -> None:
    """Console entry point: serve until SIGTERM/SIGINT, then drain and exit."""
    config = uvicorn.Config(
        app, host="0.0.0.0", port=settings.port, log_config=None,
    )
    server = ManagedServer(config)
    shutdown = GracefulShutdown(settings.shutdown_timeout)
    try:
        exit_code = asyncio.run(serve(server, shutdown))
    except Exception:
        logger.error("Failed to start server", exc_info=True)
        exit_code = 1
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
