"""Input Validation: address, tx hash and id checks.

Tests:
    - 0x + 63/64 hex chars accepted (mixed case, surrounding whitespace trimmed)
    - Empty/whitespace -> "Address is required"; everything else malformed ->
      "Invalid Starknet address format"
    - parse_id rejects non-numeric path values with an "ID format" message
"""

import pytest

from aqua_stark.core.errors import ValidationError
from aqua_stark.core.validation import (
    MAX_ID, parse_id, require_address, require_positive_id, require_tx_hash,
)

VALID_64 = "0x" + "aB3" * 21 + "c"
VALID_63 = "0x" + "1" * 63


@pytest.mark.parametrize("address", [VALID_64, VALID_63, "0x" + "F" * 64])
def test_require_address_accepts_valid(address):
    assert require_address(address) == address


def test_require_address_trims():
    assert require_address(f"  {VALID_64}\n") == VALID_64


@pytest.mark.parametrize("address", ["", "   ", None])
def test_require_address_missing(address):
    with pytest.raises(ValidationError, match="Address is required"):
        require_address(address)


@pytest.mark.parametrize("address", [
    "0x" + "a" * 62,           # too short
    "0x" + "a" * 65,           # too long
    "a" * 64,                  # no prefix
    "0X" + "a" * 64,           # uppercase prefix
    "0x" + "g" * 64,           # not hex
    "0x" + "a" * 32 + " " + "a" * 31,
])
def test_require_address_invalid_format(address):
    with pytest.raises(ValidationError, match="Invalid Starknet address format"):
        require_address(address)


def test_require_tx_hash():
    tx = "0x" + "0" * 64
    assert require_tx_hash(tx) == tx
    with pytest.raises(ValidationError, match="Invalid transaction hash format"):
        require_tx_hash("0x" + "0" * 63)
    with pytest.raises(ValidationError, match="Transaction hash is required"):
        require_tx_hash("")


@pytest.mark.parametrize("raw, expected", [("1", 1), (" 42 ", 42), ("-3", -3)])
def test_parse_id_numeric(raw, expected):
    assert parse_id(raw, "tank") == expected


@pytest.mark.parametrize("raw", ["abc", "", "1.5", "12abc"])
def test_parse_id_rejects_non_numeric(raw):
    with pytest.raises(ValidationError, match="Invalid tank ID format"):
        parse_id(raw, "tank")


@pytest.mark.parametrize("value", [0, -1, True, "3", None, 1.0, 2**31, 10**20])
def test_require_positive_id_rejects(value):
    with pytest.raises(ValidationError, match="Invalid fish ID"):
        require_positive_id(value, "fish")


def test_require_positive_id_accepts():
    assert require_positive_id(7, "fish") == 7


def test_require_positive_id_upper_bound():
    assert require_positive_id(MAX_ID, "tank") == MAX_ID
    with pytest.raises(ValidationError, match="Invalid tank ID"):
        require_positive_id(MAX_ID + 1, "tank")
