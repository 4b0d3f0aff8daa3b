"""Response Envelope: the only two ways a response body is ever built.

Invariants:
    - Success: {"success": True, "data": <data>, "message": str}
    - Failure: {"success": False, "error": {"type": str, "message": str, "code": int}}
    - Builders are pure: no IO, no mutation of their inputs, same input -> equal output
    - A non-exception value is never echoed back to the caller

Design Decisions:
    - Plain dicts over Pydantic models: the envelope wraps arbitrary data by reference,
      serialization happens once at the HTTP edge (jsonable_encoder)
    - Classification by match on the taxonomy base class, then Exception, then anything
"""

from typing import Any

from aqua_stark.core.errors import AquaStarkError, ErrorType

DEFAULT_SUCCESS_MESSAGE = "Operation successful"
UNKNOWN_ERROR_MESSAGE = "An unexpected error occurred"


def build_success(data: Any, message: str = DEFAULT_SUCCESS_MESSAGE) -> dict:
    """Wrap data in a success envelope."""
    return {"success": True, "data": data, "message": message}


def build_error(error: object) -> dict:
    """Classify any raised (or otherwise produced) value into an error envelope."""
    match error:
        case AquaStarkError():
            record = error.to_record()
        case Exception():
            record = {
                "type": ErrorType.INTERNAL.value,
                "message": str(error),
                "code": ErrorType.INTERNAL.http_status,
            }
        case _:
            record = {
                "type": ErrorType.UNKNOWN.value,
                "message": UNKNOWN_ERROR_MESSAGE,
                "code": ErrorType.UNKNOWN.http_status,
            }
    return {"success": False, "error": record}


def is_success_response(response: dict) -> bool:
    return response.get("success") is True


def is_error_response(response: dict) -> bool:
    return response.get("success") is False
