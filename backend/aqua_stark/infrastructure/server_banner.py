"""Server Banner: startup status display, emitted through the logger."""

import logging
from datetime import datetime

from aqua_stark.config import Settings

logger = logging.getLogger(__name__)

ENDPOINTS = (
    ("GET ", "/health", "Health check"),
    ("GET ", "/api", "API info"),
    ("GET ", "/api/players/{address}", "Player profile"),
    ("GET ", "/api/tank/{id}", "Tank with fish"),
    ("GET ", "/api/fish/{id}", "Fish details"),
    ("GET ", "/api/decoration/{id}", "Decoration details"),
)


def render_server_banner(settings: Settings, started_at: datetime | None = None) -> str:
    if settings.is_development:
        status = "RUNNING"
    elif settings.is_production:
        status = "PRODUCTION"
    else:
        status = "STARTING"
    started_at = started_at or datetime.now()
    endpoints = "\n".join(
        f"   • {method} {path:<26}{label}" for method, path, label in ENDPOINTS
    )
    return (
        "\n"
        "🐟  AQUA STARK BACKEND API  🐠\n"
        "\n"
        f"🚀  Server Status:     {status}\n"
        f"🌐  Environment:       {settings.environment.upper()}\n"
        f"🔌  Port:              {settings.port}\n"
        f"📍  Local URL:         http://localhost:{settings.port}\n"
        f"🌍  Network URL:       http://0.0.0.0:{settings.port}\n"
        "\n"
        "📋  Available Endpoints:\n"
        f"{endpoints}\n"
        "\n"
        f"⏰  Started at:        {started_at:%Y-%m-%d %H:%M:%S}\n"
    )


def display_server_banner(settings: Settings) -> None:
    logger.info(render_server_banner(settings))
    if settings.is_development:
        logger.info("Development mode: auto-reload available via uvicorn --reload")
