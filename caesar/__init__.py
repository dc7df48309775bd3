"""
Caesar Cipher

Rotates the letters of a phrase by a fixed shift, leaving everything else alone.
"""

from caesar.transformation.schemas import Direction
from caesar.transformation.transformers import decrypt, encrypt, transform

__all__ = ["Direction", "decrypt", "encrypt", "transform"]
