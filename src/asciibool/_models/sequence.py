"""Byte-sequence boolean matcher for multi-character tokens."""

from dataclasses import dataclass, replace
from typing import Self, override

from .base import BooleanTokenMatcher
from .._fold import ascii_lower_seq, ascii_upper_seq
from ..types import ByteSeq, ByteSeqLike

# false value of a presence pair
PRESENCE_SENTINEL: ByteSeq = b""


def _as_seq(token: ByteSeqLike) -> ByteSeq:
    """Copy a bytes-like token to ``bytes``, refusing ints."""
    # bytes(n) would build n zero bytes
    if isinstance(token, int):
        raise TypeError(f"expected a bytes-like token, got {token!r}")
    return bytes(token)


@dataclass(frozen=True, slots=True)
class AsciiBytesPair(BooleanTokenMatcher[ByteSeq]):
    """
    Matcher for a short token against a configured true/false sequence pair.

    Matching is exact: a token of any other length, including the empty
    token when it is not the configured false value, is rejected.
    """

    true_value: ByteSeq = b"true"
    false_value: ByteSeq = b"false"

    def __post_init__(self) -> None:
        # store immutable copies of bytearray / memoryview arguments
        object.__setattr__(self, "true_value", bytes(self.true_value))
        object.__setattr__(self, "false_value", bytes(self.false_value))

    # Named constructors
    # ---------------------------------------------------------------------------

    @classmethod
    def default(cls) -> Self:
        """Return the ``true`` / ``false`` pair."""
        return cls()

    @classmethod
    def new_true_false(cls) -> Self:
        """Same as ``default``."""
        return cls.default()

    @classmethod
    def new_yes_no(cls) -> Self:
        return cls(b"yes", b"no")

    @classmethod
    def new_y_n(cls) -> Self:
        return cls(b"y", b"n")

    @classmethod
    def new_o_x(cls) -> Self:
        return cls(b"o", b"x")

    @classmethod
    def new_t_f(cls) -> Self:
        return cls(b"t", b"f")

    @classmethod
    def new_on_off(cls) -> Self:
        return cls(b"on", b"off")

    @classmethod
    def new_yes_no_capitalised(cls) -> Self:
        return cls(b"Yes", b"No")

    @classmethod
    def new_on_off_capitalised(cls) -> Self:
        return cls(b"On", b"Off")

    @classmethod
    def new_true_false_capitalised(cls) -> Self:
        return cls(b"True", b"False")

    @classmethod
    def new_custom(cls, true_value: ByteSeqLike, false_value: ByteSeqLike) -> Self:
        """Return a pair with arbitrary true and false tokens."""
        return cls(true_value, false_value)

    @classmethod
    def new_from_true_value(cls, true_value: ByteSeqLike) -> Self:
        """
        Return a presence pair whose false value is the empty token.

        ``convert(b"")`` is ``False``; every token other than ``true_value``
        and the empty one is rejected.
        """
        return cls(true_value, PRESENCE_SENTINEL)

    @classmethod
    def new_o(cls) -> Self:
        return cls.new_from_true_value(b"o")

    @classmethod
    def new_o_capital(cls) -> Self:
        return cls.new_from_true_value(b"O")

    @classmethod
    def new_x(cls) -> Self:
        return cls.new_from_true_value(b"x")

    @classmethod
    def new_x_capital(cls) -> Self:
        return cls.new_from_true_value(b"X")

    # Case transforms
    # ---------------------------------------------------------------------------

    def into_lower(self) -> Self:
        """Return a copy with both tokens ASCII-lowercased."""
        return replace(
            self,
            true_value=ascii_lower_seq(self.true_value),
            false_value=ascii_lower_seq(self.false_value),
        )

    def into_upper(self) -> Self:
        """Return a copy with both tokens ASCII-uppercased."""
        return replace(
            self,
            true_value=ascii_upper_seq(self.true_value),
            false_value=ascii_upper_seq(self.false_value),
        )

    # Conversion
    # ---------------------------------------------------------------------------

    @override
    def convert(self, token: ByteSeqLike) -> bool:
        """
        Classify a token by exact sequence equality.

        :param token: Token bytes; ``bytearray`` and ``memoryview`` are accepted.
        :returns: ``True`` for the true token, ``False`` for the false token.
        :raises InvalidInputError: If ``token`` equals neither configured token.
        """
        return self._classify(_as_seq(token), self.true_value, self.false_value)

    @override
    def _lower(self, token: ByteSeqLike) -> ByteSeq:
        return ascii_lower_seq(_as_seq(token))

    def convert_ascii_str(self, token: str) -> bool:
        """
        Encode ``token`` as ASCII and classify it.

        :raises InvalidInputError: If ``token`` contains non-ASCII characters or
                                   matches neither configured token.
        """
        try:
            raw = token.encode("ascii")
        except UnicodeEncodeError:
            raise self._invalid_input(token, show_value=True) from None
        return self.convert(raw)

    def convert_ascii_str_lower(self, token: str) -> bool:
        """Lowercase ``token`` with ``str.lower`` then call ``convert_ascii_str``."""
        return self.convert_ascii_str(token.lower())
