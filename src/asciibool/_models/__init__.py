"""Matcher implementations for byte and byte-sequence tokens."""

from .base import BooleanTokenMatcher
from .byte import AsciiBytePair
from .sequence import AsciiBytesPair


__all__ = ["BooleanTokenMatcher", "AsciiBytePair", "AsciiBytesPair"]
