"""
Parse textual pair notation such as ``"yes/no"`` or ``"On|Off"``.

A notation is a true token, optionally followed by a separator (``/``, ``|``
or ``,``) and a false token. A missing or empty false token builds a
presence pair: ``"x"`` and ``"x/"`` both mean "x is true, absence is false".
"""

import logging
from typing import Final

import regex as re

from ._models.byte import AsciiBytePair
from ._models.sequence import AsciiBytesPair
from .errors import NotationError

log = logging.getLogger(__name__)

SEPARATORS: Final[str] = "/|,"

_PAIR_PATTERN = re.compile(
    r"(?P<true>[^\s/|,]+)(?:(?P<sep>[/|,])(?P<false>[^\s/|,]*))?"
)
_NON_ASCII = re.compile(r"[^\p{ASCII}]")


def _split(notation: str) -> tuple[bytes, bytes | None]:
    """Split notation into encoded true and false tokens (``None`` for presence)."""
    text = notation.strip()

    if _NON_ASCII.search(text):
        raise NotationError("tokens must be ASCII", notation=notation)

    match = _PAIR_PATTERN.fullmatch(text)
    if match is None:
        raise NotationError(
            f"expected 'true{SEPARATORS[0]}false' or a single token",
            notation=notation,
        )

    true_tok = match["true"].encode("ascii")
    # "x" and "x/" are both presence notations
    false_tok = match["false"].encode("ascii") if match["false"] else None
    return true_tok, false_tok


def parse_bytes_pair(notation: str) -> AsciiBytesPair:
    """
    Build a byte-sequence matcher from notation.

    :param notation: e.g. ``"yes/no"``, ``"On|Off"``, ``"x"``.
    :raises NotationError: If the notation is empty, non-ASCII, contains
                           whitespace inside a token, or has extra separators.
    """
    true_tok, false_tok = _split(notation)
    log.debug(f"parsed sequence notation {notation!r}")
    if false_tok is None:
        return AsciiBytesPair.new_from_true_value(true_tok)
    return AsciiBytesPair.new_custom(true_tok, false_tok)


def parse_byte_pair(notation: str) -> AsciiBytePair:
    """
    Build a single-byte matcher from notation.

    :param notation: e.g. ``"y/n"``, ``"1,0"``, ``"X"``.
    :raises NotationError: If the notation is malformed or a token is longer
                           than one byte.
    """
    true_tok, false_tok = _split(notation)
    if len(true_tok) != 1 or (false_tok is not None and len(false_tok) != 1):
        raise NotationError("byte notation tokens must be one byte", notation=notation)
    log.debug(f"parsed byte notation {notation!r}")
    if false_tok is None:
        return AsciiBytePair.new_from_true_value(true_tok)
    return AsciiBytePair.new_custom(true_tok, false_tok)


__all__ = ["SEPARATORS", "parse_bytes_pair", "parse_byte_pair"]
