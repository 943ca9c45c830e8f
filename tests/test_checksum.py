"""
Unit tests for the base-36 Luhn checksum.

Run with: python -m pytest tests/test_checksum.py -v
"""

import pytest

from tracking.base36 import ALPHABET
from tracking.checksum import compute_check_character, verify
from tracking.errors import InvalidCharacterError


@pytest.mark.parametrize("payload, expected", [
    ("0", "0"),
    ("1", "Y"),
    ("TP1REDX00000001", "T"),
])
def test_compute_check_character(payload, expected):
    assert compute_check_character(payload) == expected


def test_verify_accepts_generated_check_character():
    for payload in ("1", "Z", "TP1REDX00000001", "TP1ACME0000ZZZZ", "AB9XXXX00000000"):
        assert verify(payload + compute_check_character(payload))


def test_verify_every_check_character_is_unique():
    """Exactly one trailing character makes a payload valid."""
    payload = "TP1REDX00000042"
    valid = [c for c in ALPHABET if verify(payload + c)]
    assert valid == [compute_check_character(payload)]


def test_verify_rejects_empty():
    assert verify("") is False


@pytest.mark.parametrize("identifier", ["tp1redx00000001t", "TP1-REDX", "TP1REDX 0000001T"])
def test_verify_rejects_undecodable_characters(identifier):
    assert verify(identifier) is False


def test_compute_rejects_undecodable_characters():
    with pytest.raises(InvalidCharacterError):
        compute_check_character("TP1.EDX00000001")


def test_verify_detects_adjacent_transposition():
    payload = "TP1REDX00000012"
    identifier = payload + compute_check_character(payload)
    swapped = identifier[:13] + identifier[14] + identifier[13] + identifier[15]
    assert swapped != identifier
    assert not verify(swapped)
