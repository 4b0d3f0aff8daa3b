"""Envelope Responses: turn an envelope dict into the HTTP response.

Invariants:
    - Error envelopes use error.code as the HTTP status
    - Serialization (Pydantic models, datetimes) happens here, once
"""

import logging

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from aqua_stark.core.responses import is_error_response

logger = logging.getLogger(__name__)


def respond(
    envelope: dict, status_code: int = status.HTTP_200_OK, path: str | None = None,
) -> JSONResponse:
    if is_error_response(envelope):
        error = envelope["error"]
        status_code = error["code"]
        log = logger.error if status_code >= 500 else logger.warning
        log(
            f"{error['type']}: {error['message']}",
            extra={"error_type": error["type"], "path": path},
        )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(envelope))
