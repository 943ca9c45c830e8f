"""
Base-36 Luhn Checksum

A single trailing check character lets a scanner catch common transcription
errors (one wrong character, most adjacent transpositions) without a lookup.
The algorithm is the Luhn mod-10 scheme generalised to base 36.

Algorithm (generation, over the payload WITHOUT the check character):
1. Walk the payload from right to left, position 0 = rightmost character
2. Double the value at even positions; a doubled value >= 36 becomes
   (value // 36) + (value % 36), the base-36 "sum of digits"
3. Sum everything
4. Check value = (36 - sum mod 36) mod 36

Verification walks the FULL identifier (check character included) and doubles
at ODD positions. Appending the check character shifts every payload position
by one, so the two parities describe the same weighting. Identifiers already
issued depend on this exact bookkeeping; keep the two loops as they are.
"""

from tracking.base36 import ALPHABET, BASE, decode_digit
from tracking.errors import InvalidCharacterError


def _double(value: int) -> int:
    value *= 2
    if value >= BASE:
        value = (value // BASE) + (value % BASE)
    return value


def compute_check_character(payload: str) -> str:
    """
    Calculate the check character for a tracking number payload.

    Args:
        payload: Base-36 string without a check character

    Returns:
        Single base-36 check character

    Raises:
        InvalidCharacterError: If the payload holds a non base-36 character

    Example:
        >>> compute_check_character("TP1REDX00000001")
        'T'
    """
    total = 0
    for i, char in enumerate(reversed(payload)):
        value = decode_digit(char)
        if i % 2 == 0:
            value = _double(value)
        total += value
    return ALPHABET[(BASE - (total % BASE)) % BASE]


def verify(identifier: str) -> bool:
    """
    Validate the trailing check character of an identifier.

    Args:
        identifier: Full identifier including its check character

    Returns:
        True if the weighted sum is divisible by 36, False otherwise
        (including for empty input or undecodable characters)
    """
    if not identifier:
        return False

    total = 0
    for i, char in enumerate(reversed(identifier)):
        try:
            value = decode_digit(char)
        except InvalidCharacterError:
            return False
        if i % 2 == 1:
            value = _double(value)
        total += value
    return total % BASE == 0
