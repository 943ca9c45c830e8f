"""
Shipment tracking number codec
"""

from .base36 import ALPHABET, decode_digit, encode
from .checksum import compute_check_character, verify
from .codec import (
    TrackingNumberGenerator,
    generate_tracking_number,
    split_tracking_number,
    validate_generation_inputs,
    validate_tracking_number,
)
from .errors import (
    InvalidCharacterError,
    InvalidIdentifierShapeError,
    InvalidInputError,
    InvalidShipperCodeError,
    InvalidVersionError,
    SequenceOverflowError,
    TrackingError,
)
from .identifiers import ShipperCode, TrackingIdentifier, VersionTag, parse_version_tag
from .shipper import derive_shipper_code

__all__ = [
    "ALPHABET",
    "encode",
    "decode_digit",
    "compute_check_character",
    "verify",
    "TrackingNumberGenerator",
    "generate_tracking_number",
    "validate_tracking_number",
    "split_tracking_number",
    "validate_generation_inputs",
    "TrackingError",
    "InvalidInputError",
    "InvalidCharacterError",
    "InvalidShipperCodeError",
    "InvalidVersionError",
    "SequenceOverflowError",
    "InvalidIdentifierShapeError",
    "VersionTag",
    "ShipperCode",
    "TrackingIdentifier",
    "parse_version_tag",
    "derive_shipper_code",
]
