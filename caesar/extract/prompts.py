"""
Interactive Prompts - Extract Layer

Asks for the phrase, shift and direction. Parsing lives in the transform
layer; this module only loops until the parser accepts what was typed.
"""

from typing import Callable

from caesar.transformation.schemas import Direction
from caesar.transformation.validators import (
    parse_direction,
    parse_phrase,
    parse_shift,
)
import logging

logger = logging.getLogger(__name__)

PHRASE_PROMPT = "Enter your phrase [Hello, world!]: "
SHIFT_PROMPT = "Enter your shift [13]: "
DIRECTION_PROMPT = "Are you encrypting or decrypting? [E/d]: "
INVALID_SHIFT_MESSAGE = "Please enter a valid number."

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class InputReadError(Exception):
    """Raised when a prompt cannot read a line of input"""


class InputClosedError(InputReadError, EOFError):
    """Raised when the input stream ends while a prompt is waiting"""


def read_line(prompt: str, what: str, input_fn: InputFn = input) -> str:
    """
    Read one line of input

    Args:
        prompt: Text shown to the user
        what: Description of the value, used in the error message
        input_fn: Function used to read the line

    Returns:
        str: The line as typed, without the trailing newline

    Raises:
        InputClosedError: If the input stream is closed
        InputReadError: If the stream cannot be read or decoded
    """
    try:
        return input_fn(prompt)
    except EOFError as e:
        raise InputClosedError(f"Failed to read {what}: input stream closed") from e
    except (UnicodeDecodeError, OSError) as e:
        raise InputReadError(f"Failed to read {what}: {e}") from e


def prompt_phrase(input_fn: InputFn = input) -> str:
    """Ask for the phrase to transform"""
    phrase = parse_phrase(read_line(PHRASE_PROMPT, "phrase", input_fn))
    logger.debug(f"Phrase accepted ({len(phrase)} chars)")
    return phrase


def prompt_shift(input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    """Ask for the shift until a non-negative integer (or nothing) is entered"""
    while True:
        raw = read_line(SHIFT_PROMPT, "shift", input_fn)
        try:
            shift = parse_shift(raw)
        except ValueError as e:
            logger.debug(f"Rejected shift: {e}")
            output_fn(INVALID_SHIFT_MESSAGE)
            continue

        logger.debug(f"Shift accepted: {shift}")
        return shift


def prompt_direction(input_fn: InputFn = input) -> Direction:
    """Ask whether to encrypt or decrypt until 'e', 'd' or nothing is entered"""
    while True:
        raw = read_line(DIRECTION_PROMPT, "direction", input_fn)
        try:
            direction = parse_direction(raw)
        except ValueError as e:
            logger.debug(f"Rejected direction: {e}")
            continue

        logger.debug(f"Direction accepted: {direction.name}")
        return direction
