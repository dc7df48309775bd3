"""
Input Validators - Transform Layer

Pure functions turning raw prompt text into validated cipher parameters.
Each parser raises ValueError on input it cannot accept; the caller decides
whether to re-prompt.
"""

from .schemas import DEFAULT_PHRASE, DEFAULT_SHIFT, Direction
import logging

logger = logging.getLogger(__name__)


def validate_shift(shift: int) -> int:
    """
    Validate a shift amount

    Any non-negative integer is accepted; it is reduced modulo the alphabet
    size when applied.

    Args:
        shift: Rotation amount

    Returns:
        int: The shift, unchanged

    Raises:
        ValueError: If shift is not a non-negative integer
    """
    if isinstance(shift, bool) or not isinstance(shift, int):
        raise ValueError(f"Shift must be an integer, got {shift!r}")
    if shift < 0:
        raise ValueError(f"Shift must not be negative, got {shift}")
    return shift


def parse_phrase(raw: str) -> str:
    """Trim the phrase, falling back to the default when blank"""
    phrase = raw.strip()
    return phrase if phrase else DEFAULT_PHRASE


def parse_shift(raw: str) -> int:
    """
    Parse a shift typed by the user

    Args:
        raw: Text as read from the prompt

    Returns:
        int: DEFAULT_SHIFT for blank input, otherwise the parsed shift

    Raises:
        ValueError: If the text is not an unsigned decimal integer
    """
    text = raw.strip()
    if not text:
        return DEFAULT_SHIFT

    digits = text[1:] if text.startswith("+") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"Not a valid shift: {raw!r}")

    return validate_shift(int(digits))


def parse_direction(raw: str) -> Direction:
    """
    Parse an encrypt/decrypt answer from its first letter

    Args:
        raw: Text as read from the prompt ("", "e", "D", "decrypt", ...)

    Returns:
        Direction: ENCRYPT for blank input, otherwise the matching direction

    Raises:
        ValueError: If the first letter is neither 'e' nor 'd'
    """
    text = raw.strip()
    if not text:
        return Direction.ENCRYPT

    first = text[0].lower()
    for direction in Direction:
        if direction.value == first:
            return direction

    raise ValueError(f"Not a valid direction: {raw!r}")
