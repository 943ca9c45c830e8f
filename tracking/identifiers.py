"""
Tracking Number Value Objects

Immutable, self-validating values used by the codec:
- VersionTag: structural format marker (e.g. "TP1")
- ShipperCode: 4-character customer code (e.g. "REDX")
- TrackingIdentifier: the final tracking number string

Construction always validates; an instance that exists is well-formed.
"""

import re
from dataclasses import dataclass

from tracking.base36 import is_base36
from tracking.errors import (
    InvalidIdentifierShapeError,
    InvalidShipperCodeError,
    InvalidVersionError,
)
from tracking.shipper import SHIPPER_CODE_LENGTH

VERSION_PATTERN = re.compile(r"[A-Z]{2}[0-9]")
TRACKING_NUMBER_PATTERN = re.compile(r"[A-Z0-9]{1,16}")


@dataclass(frozen=True)
class VersionTag:
    """Two uppercase letters followed by one digit, e.g. TP1."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not VERSION_PATTERN.fullmatch(self.value):
            raise InvalidVersionError(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ShipperCode:
    """Exactly 4 base-36 characters."""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidShipperCodeError("Shipper code cannot be null or empty")
        if len(self.value) != SHIPPER_CODE_LENGTH:
            raise InvalidShipperCodeError(
                f"Shipper code length must be {SHIPPER_CODE_LENGTH}, but was {len(self.value)}"
            )
        if not is_base36(self.value):
            bad = next(char for char in self.value if not is_base36(char))
            raise InvalidShipperCodeError(f"Shipper code contains invalid character: {bad!r}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TrackingIdentifier:
    """
    A tracking number string.

    The shape check accepts 1 to 16 uppercase alphanumeric characters even
    though generated identifiers are always 16 long, so shorter identifiers
    from earlier numbering schemes can still be wrapped and validated.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not TRACKING_NUMBER_PATTERN.fullmatch(self.value):
            raise InvalidIdentifierShapeError(self.value)

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)


def parse_version_tag(raw: str) -> VersionTag:
    """
    Parse a configured version string.

    Args:
        raw: Version text such as "TP1"

    Returns:
        VersionTag

    Raises:
        InvalidVersionError: If raw is not two uppercase letters and a digit
    """
    return VersionTag(raw)
