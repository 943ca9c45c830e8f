"""
Unit tests for tracking value objects.

Run with: python -m pytest tests/test_identifiers.py -v
"""

from dataclasses import FrozenInstanceError

import pytest

from tracking.errors import (
    InvalidIdentifierShapeError,
    InvalidShipperCodeError,
    InvalidVersionError,
    TrackingError,
)
from tracking.identifiers import ShipperCode, TrackingIdentifier, VersionTag, parse_version_tag


@pytest.mark.parametrize("raw", ["TP1", "TP9", "AB0"])
def test_parse_version_tag(raw):
    tag = parse_version_tag(raw)
    assert isinstance(tag, VersionTag)
    assert str(tag) == raw


@pytest.mark.parametrize("raw", ["tp1", "Tp1", "TP", "TPP", "TP10", "1TP", "T-1", "", None])
def test_parse_version_tag_rejects(raw):
    with pytest.raises(InvalidVersionError) as excinfo:
        parse_version_tag(raw)
    assert excinfo.value.error_code == "INVALID_VERSION"


def test_shipper_code_valid():
    assert ShipperCode("RE0X").value == "RE0X"


@pytest.mark.parametrize("raw", ["", None, "ABC", "ABCDE", "A.BC", "abcd", "AB C"])
def test_shipper_code_rejects(raw):
    with pytest.raises(InvalidShipperCodeError):
        ShipperCode(raw)


@pytest.mark.parametrize("raw", ["TP1REDX000000011", "A", "123"])
def test_tracking_identifier_shape(raw):
    assert str(TrackingIdentifier(raw)) == raw
    assert len(TrackingIdentifier(raw)) == len(raw)


@pytest.mark.parametrize("raw", ["", "TP1REDX0000000111", "tp1redx", "TP1-REDX", None])
def test_tracking_identifier_rejects(raw):
    with pytest.raises(InvalidIdentifierShapeError):
        TrackingIdentifier(raw)


def test_value_objects_are_immutable():
    tag = VersionTag("TP1")
    with pytest.raises(FrozenInstanceError):
        tag.value = "TP2"


def test_value_equality():
    assert ShipperCode("REDX") == ShipperCode("REDX")
    assert TrackingIdentifier("TP1") != TrackingIdentifier("TP2")


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        VersionTag("bad")
    assert issubclass(InvalidShipperCodeError, TrackingError)
