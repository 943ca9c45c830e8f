"""
Shipper Code Derivation

Maps a customer's slug (kebab-case display name) to the 4-character shipper
code embedded in every tracking number.

The mapping is lossy: "acme-corporation" and "acme-logistics" both become
"ACME". Uniqueness of a tracking number comes from its sequence value, never
from the shipper code.
"""

from typing import Optional

SHIPPER_CODE_LENGTH = 4
FILLER = "X"
UNKNOWN_SHIPPER = FILLER * SHIPPER_CODE_LENGTH


def derive_shipper_code(slug: Optional[str]) -> str:
    """
    Derive a shipper code from a customer slug.

    Steps:
    1. Missing or empty slug -> "XXXX"
    2. Strip hyphens and uppercase
    3. Keep the first 4 characters, or right-pad with "X" up to 4

    Characters are not checked against the base-36 alphabet here. A slug such
    as "a.b-co" yields "A.BC", which the codec then rejects with
    InvalidShipperCodeError.

    Args:
        slug: Customer name in slug-case/kebab-case (may be None)

    Returns:
        4-character shipper code string

    Examples:
        >>> derive_shipper_code("acme-corporation")
        'ACME'
        >>> derive_shipper_code("ab")
        'ABXX'
        >>> derive_shipper_code(None)
        'XXXX'
    """
    if not slug:
        return UNKNOWN_SHIPPER

    code = slug.replace("-", "").upper()
    return code[:SHIPPER_CODE_LENGTH].ljust(SHIPPER_CODE_LENGTH, FILLER)
