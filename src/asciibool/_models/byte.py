"""Single-byte boolean matcher."""

from dataclasses import dataclass, replace
from typing import Self, override

from .base import BooleanTokenMatcher
from .._fold import ascii_lower, ascii_upper
from ..types import Byte, ByteLike

# false value of a presence pair, never expected as real input
PRESENCE_SENTINEL: Byte = 0


def _as_byte(value: ByteLike) -> Byte:
    """Accept an int or a one-byte ``bytes`` and return the int."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise TypeError(f"expected a single byte, got {value!r}")
        return value[0]
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value}")
    return value


@dataclass(frozen=True, slots=True)
class AsciiBytePair(BooleanTokenMatcher[Byte]):
    """
    Matcher for a single byte against a configured true/false byte pair.

    Nothing enforces ``true_value != false_value``; when both are equal the
    shared byte always converts to ``True``.
    """

    true_value: Byte = ord("1")
    false_value: Byte = ord("0")

    def __post_init__(self) -> None:
        # normalise b"x" style arguments to ints
        object.__setattr__(self, "true_value", _as_byte(self.true_value))
        object.__setattr__(self, "false_value", _as_byte(self.false_value))

    # Named constructors
    # ---------------------------------------------------------------------------

    @classmethod
    def default(cls) -> Self:
        """Return the ``'1'`` / ``'0'`` pair."""
        return cls()

    @classmethod
    def new_yn(cls) -> Self:
        return cls(ord("y"), ord("n"))

    @classmethod
    def new_tf(cls) -> Self:
        return cls(ord("t"), ord("f"))

    @classmethod
    def new_ox(cls) -> Self:
        return cls(ord("o"), ord("x"))

    @classmethod
    def new_custom(cls, true_value: ByteLike, false_value: ByteLike) -> Self:
        """Return a pair with arbitrary true and false bytes."""
        return cls(true_value, false_value)

    @classmethod
    def new_from_true_value(cls, true_value: ByteLike) -> Self:
        """
        Return a presence pair.

        The false value is the zero byte, so ``convert(0)`` is ``False`` and
        any byte other than ``true_value`` or 0 is rejected.
        """
        return cls(true_value, PRESENCE_SENTINEL)

    @classmethod
    def new_o(cls) -> Self:
        return cls.new_from_true_value(ord("o"))

    @classmethod
    def new_o_capital(cls) -> Self:
        return cls.new_from_true_value(ord("O"))

    @classmethod
    def new_x(cls) -> Self:
        return cls.new_from_true_value(ord("x"))

    @classmethod
    def new_x_capital(cls) -> Self:
        return cls.new_from_true_value(ord("X"))

    # Case transforms
    # ---------------------------------------------------------------------------

    def into_lower(self) -> Self:
        """Return a copy with both bytes ASCII-lowercased."""
        return replace(
            self,
            true_value=ascii_lower(self.true_value),
            false_value=ascii_lower(self.false_value),
        )

    def into_upper(self) -> Self:
        """Return a copy with both bytes ASCII-uppercased."""
        return replace(
            self,
            true_value=ascii_upper(self.true_value),
            false_value=ascii_upper(self.false_value),
        )

    # Conversion
    # ---------------------------------------------------------------------------

    @override
    def convert(self, token: Byte) -> bool:
        """
        Classify a single byte.

        :param token: Byte value to classify.
        :returns: ``True`` for the true byte, ``False`` for the false byte.
        :raises InvalidInputError: If ``token`` equals neither configured byte.
        """
        return self._classify(token, self.true_value, self.false_value)

    @override
    def _lower(self, token: Byte) -> Byte:
        return ascii_lower(token)

    def convert_ascii_char(self, token: str) -> bool:
        """
        Narrow a one-character string to a byte and classify it.

        :param token: A single character.
        :raises InvalidInputError: If ``token`` is not one character with a
                                   code point in 0..255, or the resulting byte
                                   matches neither configured value.
        """
        if len(token) != 1 or ord(token) > 0xFF:
            raise self._invalid_input(token, show_value=True)
        return self.convert(ord(token))

    def convert_ascii_char_lower(self, token: str) -> bool:
        """
        Lowercase ``token`` with ``str.lower`` then call ``convert_ascii_char``.

        Errors from a failed narrowing show the character as passed in, not
        its lowered form (``"\u0130".lower()`` is two characters).
        """
        lowered = token.lower()
        if len(lowered) != 1 or ord(lowered) > 0xFF:
            raise self._invalid_input(token, show_value=True)
        return self.convert_ascii_char(lowered)
