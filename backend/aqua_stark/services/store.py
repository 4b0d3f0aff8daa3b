"""Store error translation shared by every service."""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError

from aqua_stark.core.errors import InternalError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors():
    """Re-raise any SQLAlchemy failure as InternalError carrying the store's message."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}")
        raise InternalError(f"Database error: {e}") from e
