"""
Transformation Layer Schemas

Shared types and defaults for the cipher.
"""

from dataclasses import dataclass
from enum import Enum

ALPHABET_SIZE = 26

DEFAULT_PHRASE = "Hello, world!"
DEFAULT_SHIFT = 13


class Direction(Enum):
    ENCRYPT = "e"
    DECRYPT = "d"


@dataclass(frozen=True)
class CipherRequest:
    """Everything needed to run the cipher once"""

    phrase: str = DEFAULT_PHRASE
    shift: int = DEFAULT_SHIFT
    direction: Direction = Direction.ENCRYPT


@dataclass(frozen=True)
class CipherResult:
    original: str
    processed: str
    shift: int
    direction: Direction
