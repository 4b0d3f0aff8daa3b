"""Structured Logging: one JSON object per line, tagged with the game entities involved.

Invariants:
    - Every line carries timestamp, level, logger, message and the service name
    - Domain extras (tx_hash, entity_type, entity_id, error_type, path, signal) are
      copied only when a call site passed them
    - setup_logging is idempotent: calling it again replaces the handler it installed

Design Decisions:
    - Stdlib logging + a small formatter, no logging framework dependency
    - uvicorn's access log and SQLAlchemy's engine log are capped at WARNING;
      request outcomes are already logged by the envelope layer
"""

import json
import logging
from datetime import datetime, timezone

SERVICE_NAME = "aqua-stark-api"

DOMAIN_FIELDS = (
    "tx_hash", "entity_type", "entity_id", "error_type", "path", "signal",
)
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine")
TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "service": SERVICE_NAME,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({
            key: getattr(record, key)
            for key in DOMAIN_FIELDS
            if getattr(record, key, None) is not None
        })
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class _AquaStarkHandler(logging.StreamHandler):
    """Marker type so setup_logging can find and replace its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, _AquaStarkHandler)]:
        root.removeHandler(existing)

    handler = _AquaStarkHandler()
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return handler
