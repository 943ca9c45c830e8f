"""
Base-36 Conversion

Converts between non-negative integers and base-36 strings using the
alphabet 0-9 then A-Z. Lookups are case-sensitive: lowercase letters are
not part of the alphabet.
"""

from tracking.errors import InvalidCharacterError, InvalidInputError

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(ALPHABET)

_DIGIT_VALUES = {char: index for index, char in enumerate(ALPHABET)}


def encode(n: int) -> str:
    """
    Convert a non-negative integer to its base-36 representation.

    Args:
        n: Non-negative integer

    Returns:
        Base-36 string, most significant symbol first, no leading zeros

    Raises:
        InvalidInputError: If n is negative or not an integer

    Example:
        >>> encode(0)
        '0'
        >>> encode(1295)
        'ZZ'
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInputError(f"Base-36 input must be an integer, got {type(n).__name__}")
    if n < 0:
        raise InvalidInputError("Input number must be non-negative for base-36 conversion.")
    if n == 0:
        return ALPHABET[0]

    symbols = []
    while n:
        n, remainder = divmod(n, BASE)
        symbols.append(ALPHABET[remainder])
    return "".join(reversed(symbols))


def decode_digit(c: str) -> int:
    """
    Return the value (0-35) of a single base-36 character.

    Raises:
        InvalidCharacterError: If c is not exactly one alphabet symbol
    """
    try:
        return _DIGIT_VALUES[c]
    except (KeyError, TypeError):
        raise InvalidCharacterError(c) from None


def is_base36(text: str) -> bool:
    """True if every character of text is a base-36 symbol (empty text is True)."""
    return all(char in _DIGIT_VALUES for char in text)
