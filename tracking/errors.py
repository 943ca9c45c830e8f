"""
Tracking Number Errors

Every failure raised by the tracking package derives from TrackingError,
which is a ValueError so callers that only care about "bad input" can catch
that. Each class carries an error_code string that a transport layer can map
to its own responses (e.g. HTTP 400 for INVALID_SHIPPER_CODE).

Checksum mismatches are NOT errors: validate_tracking_number() returns False.
"""

from typing import Optional


class TrackingError(ValueError):
    """Base class for tracking number failures."""

    error_code = "TRACKING_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        if error_code is not None:
            self.error_code = error_code


# Codec

class InvalidInputError(TrackingError):
    """A numeric input was negative or not an integer."""

    error_code = "INVALID_INPUT"


class InvalidCharacterError(TrackingError):
    """A character outside the base-36 alphabet was presented."""

    error_code = "INVALID_CHARACTER"

    def __init__(self, character: str):
        super().__init__(f"Invalid character for base-36: {character!r}")
        self.character = character


class InvalidShipperCodeError(TrackingError):
    error_code = "INVALID_SHIPPER_CODE"


class InvalidVersionError(TrackingError):
    error_code = "INVALID_VERSION"

    def __init__(self, version):
        super().__init__(
            f"Invalid tracking number version: {version!r}. "
            "It must be two uppercase letters followed by a single digit (e.g. TP1, TP2)."
        )
        self.version = version


class SequenceOverflowError(TrackingError):
    """The base-36 sequence does not fit in its fixed-width slot."""

    error_code = "SEQUENCE_OVERFLOW"


class InvalidIdentifierShapeError(TrackingError):
    error_code = "INVALID_TRACKING_NUMBER"

    def __init__(self, identifier):
        super().__init__(
            f"Invalid tracking number: {identifier!r}. "
            "It must be uppercase alphanumeric and up to 16 characters long."
        )
        self.identifier = identifier


# Issuing service

class SequenceSourceError(TrackingError):
    """The sequence source failed to hand out a value."""

    error_code = "SEQUENCE_ERROR"


class InvalidCountryCodeError(TrackingError):
    error_code = "INVALID_COUNTRY_CODE"


class InvalidWeightError(TrackingError):
    error_code = "INVALID_WEIGHT"


class InvalidCustomerIdError(TrackingError):
    error_code = "INVALID_CUSTOMER_ID"


class InvalidCustomerNameError(TrackingError):
    error_code = "INVALID_CUSTOMER_NAME"
