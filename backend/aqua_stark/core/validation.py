"""Input Validation: format and presence checks shared by services and controllers.

Invariants:
    - Every check either returns the normalized value or raises ValidationError
    - No check touches the store

Design Decisions:
    - Regexes compiled once at import
    - parse_id is shape coercion for controllers; require_positive_id is the service rule
"""

import re

from aqua_stark.core.domain_types import Address, TxHash
from aqua_stark.core.errors import ValidationError

STARKNET_ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{63,64}$")
TX_HASH_PATTERN = re.compile(r"^0x[a-fA-F0-9]{64}$")
MAX_ID = 2**31 - 1  # INTEGER primary keys


def require_address(address: str | None) -> Address:
    """Return the trimmed address or raise ValidationError."""
    if not address or not address.strip():
        raise ValidationError("Address is required")
    trimmed = address.strip()
    if not STARKNET_ADDRESS_PATTERN.match(trimmed):
        raise ValidationError("Invalid Starknet address format")
    return Address(trimmed)


def require_tx_hash(tx_hash: str | None) -> TxHash:
    if not tx_hash or not tx_hash.strip():
        raise ValidationError("Transaction hash is required")
    trimmed = tx_hash.strip()
    if not TX_HASH_PATTERN.match(trimmed):
        raise ValidationError("Invalid transaction hash format")
    return TxHash(trimmed)


def require_positive_id(value: object, label: str) -> int:
    """Ids are ints in 1..MAX_ID; bool is rejected even though it subclasses int."""
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= MAX_ID:
        raise ValidationError(f"Invalid {label} ID")
    return value


def parse_id(raw: str, label: str) -> int:
    """Parse a path parameter into an int id, or raise ValidationError."""
    try:
        return int(raw.strip(), 10)
    except (ValueError, AttributeError):
        raise ValidationError(f"Invalid {label} ID format")
