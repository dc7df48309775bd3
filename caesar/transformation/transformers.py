"""
Cipher Transformers - Transform Layer

The Caesar rotation itself. Only ASCII letters move; every other character,
including non-ASCII letters, is copied through in place.
"""

import string

from .schemas import ALPHABET_SIZE, DEFAULT_SHIFT, Direction
from .validators import validate_shift
import logging

logger = logging.getLogger(__name__)


def effective_shift(shift: int, direction: Direction) -> int:
    """
    Compute the forward rotation for a shift and direction

    Decrypting by n is encrypting by (26 - n) mod 26.

    Args:
        shift: Non-negative rotation amount
        direction: Encrypt or decrypt

    Returns:
        int: Forward rotation in [0, 25]
    """
    offset = validate_shift(shift) % ALPHABET_SIZE
    if direction is Direction.DECRYPT:
        offset = (ALPHABET_SIZE - offset) % ALPHABET_SIZE
    return offset


def shift_char(char: str, offset: int) -> str:
    """Rotate one character within its case, leaving non-letters alone"""
    if char in string.ascii_uppercase:
        anchor = ord("A")
    elif char in string.ascii_lowercase:
        anchor = ord("a")
    else:
        return char
    return chr((ord(char) - anchor + offset) % ALPHABET_SIZE + anchor)


def transform(
    text: str,
    shift: int = DEFAULT_SHIFT,
    direction: Direction = Direction.ENCRYPT,
) -> str:
    """
    Apply the Caesar cipher to a phrase

    Args:
        text: Phrase to transform
        shift: Non-negative rotation amount (reduced modulo 26)
        direction: Encrypt or decrypt

    Returns:
        str: Transformed phrase, same length as text

    Raises:
        ValueError: If shift is negative or not an integer
    """
    offset = effective_shift(shift, direction)
    logger.debug(
        f"Transforming {len(text)} chars ({direction.name.lower()}, shift={shift}, offset={offset})"
    )
    return "".join(shift_char(char, offset) for char in text)


def encrypt(text: str, shift: int = DEFAULT_SHIFT) -> str:
    return transform(text, shift, Direction.ENCRYPT)


def decrypt(text: str, shift: int = DEFAULT_SHIFT) -> str:
    return transform(text, shift, Direction.DECRYPT)
