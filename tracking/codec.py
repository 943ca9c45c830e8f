"""
Tracking Number Generation and Validation

Builds tracking numbers with the layout:

    [0:3)   version tag      e.g. "TP1"
    [3:7)   shipper code     4 base-36 characters
    [7:15)  sequence         base-36, left-zero-padded to 8 characters
    [15:16) check character  base-36 Luhn checksum (see tracking.checksum)

Example: version TP1, shipper REDX, sequence 1 -> "TP1REDX00000001T"

Generation is a pure function of (version, shipper code, sequence). The
sequence value comes from an external source; two calls with the same
sequence value produce the same tracking number.
"""

import logging
from typing import Any, Dict, Optional, Tuple, Union

from tracking.base36 import BASE, encode
from tracking.checksum import compute_check_character, verify
from tracking.errors import (
    InvalidIdentifierShapeError,
    SequenceOverflowError,
    TrackingError,
)
from tracking.identifiers import ShipperCode, TrackingIdentifier, VersionTag

logger = logging.getLogger(__name__)

SEQUENCE_LENGTH = 8
MAX_SEQUENCE = BASE ** SEQUENCE_LENGTH - 1
TRACKING_NUMBER_LENGTH = 3 + 4 + SEQUENCE_LENGTH + 1


def _as_version(version: Union[VersionTag, str]) -> VersionTag:
    return version if isinstance(version, VersionTag) else VersionTag(version)


def _as_shipper_code(shipper_code: Union[ShipperCode, str]) -> ShipperCode:
    return shipper_code if isinstance(shipper_code, ShipperCode) else ShipperCode(shipper_code)


def pad_sequence(sequence: int) -> str:
    """
    Encode a sequence value as exactly 8 base-36 characters.

    Raises:
        InvalidInputError: If sequence is negative or not an integer
        SequenceOverflowError: If sequence >= 36**8
    """
    raw = encode(sequence)
    if len(raw) > SEQUENCE_LENGTH:
        raise SequenceOverflowError(
            f"Generated base-36 sequence ({raw}) is too long for allocated space of "
            f"{SEQUENCE_LENGTH} characters. Max sequence value exceeded for this length."
        )
    return raw.rjust(SEQUENCE_LENGTH, "0")


def generate_tracking_number(
    version: Union[VersionTag, str],
    shipper_code: Union[ShipperCode, str],
    sequence: int
) -> TrackingIdentifier:
    """
    Generate a tracking number.

    Args:
        version: Version tag (VersionTag or its string form)
        shipper_code: Shipper code (ShipperCode or its string form)
        sequence: Non-negative sequence value from the sequence source

    Returns:
        16-character TrackingIdentifier

    Raises:
        InvalidVersionError: Version is not two letters and a digit
        InvalidShipperCodeError: Shipper code is empty, not 4 long or not base-36
        InvalidInputError: Sequence is negative or not an integer
        SequenceOverflowError: Sequence does not fit in 8 base-36 characters

    Example:
        >>> str(generate_tracking_number("TP1", "REDX", 1))
        'TP1REDX00000001T'
    """
    version_tag = _as_version(version)
    shipper = _as_shipper_code(shipper_code)
    padded = pad_sequence(sequence)

    payload = f"{version_tag.value}{shipper.value}{padded}"
    tracking_number = TrackingIdentifier(payload + compute_check_character(payload))

    logger.debug("Generated tracking number %s from sequence %s", tracking_number, sequence)
    return tracking_number


def validate_tracking_number(identifier: Optional[Union[TrackingIdentifier, str]]) -> bool:
    """
    Check the checksum of a tracking number.

    Only the check character is tested; version, shipper code and sequence
    are not re-parsed. Mismatches return False rather than raising.
    """
    if identifier is None:
        return False
    return verify(str(identifier))


def split_tracking_number(identifier: Union[TrackingIdentifier, str]) -> Dict[str, Any]:
    """
    Break a 16-character tracking number into its parts.

    Args:
        identifier: Tracking number, e.g. "TP1REDX00000001T"

    Returns:
        Dict with version, shipper_code, sequence (int) and check_character

    Raises:
        InvalidIdentifierShapeError: If identifier is not a well-shaped
            16-character tracking number

    Example:
        >>> split_tracking_number("TP1REDX00000001T")["sequence"]
        1
    """
    text = str(identifier)
    TrackingIdentifier(text)
    if len(text) != TRACKING_NUMBER_LENGTH:
        raise InvalidIdentifierShapeError(text)

    return {
        "version": text[0:3],
        "shipper_code": text[3:7],
        "sequence": int(text[7:15], BASE),
        "check_character": text[15],
    }


def validate_generation_inputs(
    version: Union[VersionTag, str],
    shipper_code: Union[ShipperCode, str],
    sequence: int
) -> Tuple[bool, str]:
    """
    Check generation inputs without raising.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    try:
        _as_version(version)
        _as_shipper_code(shipper_code)
        pad_sequence(sequence)
    except TrackingError as e:
        return False, f"{e.error_code}: {e}"
    return True, ""


class TrackingNumberGenerator:
    """
    Generates tracking numbers for one configured version tag.

    The version is fixed at construction and shared by every call; the
    generator holds no other state and is safe to share between threads.
    """

    def __init__(self, version: Union[VersionTag, str]):
        self.version = _as_version(version)

    def next_tracking_number(
        self,
        shipper_code: Union[ShipperCode, str],
        sequence: int
    ) -> TrackingIdentifier:
        return generate_tracking_number(self.version, shipper_code, sequence)

    def validate(self, identifier: Optional[Union[TrackingIdentifier, str]]) -> bool:
        return validate_tracking_number(identifier)

    def __repr__(self) -> str:
        return f"TrackingNumberGenerator(version={self.version.value!r})"


# Self-test
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    tracking_number = generate_tracking_number("TP1", "REDX", 1)
    print(f"Generated tracking number: {tracking_number}")
    print(f"Valid: {validate_tracking_number(tracking_number)}")
    print(f"Parts: {split_tracking_number(tracking_number)}")
