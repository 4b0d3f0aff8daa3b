"""Error Taxonomy: closed set of error kinds for every Aqua Stark failure mode.

Invariants:
    - ErrorType is the discriminant; every member maps to exactly one HTTP status
    - Every service-layer failure is an AquaStarkError (Validation, NotFound,
      OnChain, Internal); UnknownError is only ever produced by the envelope builder
    - to_record() yields the wire error record {type, message, code}

Design Decisions:
    - code is derived from error_type, never passed separately: a kind can not
      drift from its status
    - OnChainError keeps tx_hash for diagnostics but never puts it on the wire
"""

from enum import Enum


class ErrorType(str, Enum):
    """Machine-readable error tags, as they appear in error.type."""
    VALIDATION = "ValidationError"
    NOT_FOUND = "NotFoundError"
    ON_CHAIN = "OnChainError"
    INTERNAL = "InternalError"
    UNKNOWN = "UnknownError"

    @property
    def http_status(self) -> int:
        return _HTTP_STATUS[self]


_HTTP_STATUS = {
    ErrorType.VALIDATION: 400,
    ErrorType.NOT_FOUND: 404,
    ErrorType.ON_CHAIN: 500,
    ErrorType.INTERNAL: 500,
    ErrorType.UNKNOWN: 500,
}


class AquaStarkError(Exception):
    """Base exception for all taxonomy errors."""

    error_type: ErrorType = ErrorType.INTERNAL

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def type(self) -> str:
        return self.error_type.value

    @property
    def code(self) -> int:
        return self.error_type.http_status

    def to_record(self) -> dict:
        return {"type": self.type, "message": self.message, "code": self.code}


class ValidationError(AquaStarkError):
    """Caller-supplied input failed a format or presence check."""
    error_type = ErrorType.VALIDATION


class NotFoundError(AquaStarkError):
    """A lookup by key yielded no record."""
    error_type = ErrorType.NOT_FOUND


class OnChainError(AquaStarkError):
    """A blockchain operation failed."""
    error_type = ErrorType.ON_CHAIN

    def __init__(self, message: str, tx_hash: str | None = None):
        super().__init__(message)
        self.tx_hash = tx_hash


class InternalError(AquaStarkError):
    """Unexpected internal fault, e.g. store connectivity."""
    error_type = ErrorType.INTERNAL
