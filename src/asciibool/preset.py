"""Named presets for building matchers from configuration."""

import logging
from collections.abc import Callable
from enum import Enum
from typing import Final, Literal

from ._models.byte import AsciiBytePair
from ._models.sequence import AsciiBytesPair
from .errors import PresetError

log = logging.getLogger(__name__)


class BytePreset(str, Enum):
    """Single-byte presets, keyed by the name of their constructor."""

    DEFAULT = "default"
    YN = "yn"
    TF = "tf"
    OX = "ox"
    O = "o"
    O_CAPITAL = "O"
    X = "x"
    X_CAPITAL = "X"

    @classmethod
    def get(cls, name: str) -> "BytePreset":
        """Get preset by value (case-sensitive, since ``o`` and ``O`` differ)."""
        try:
            return cls(name)
        except ValueError:
            raise PresetError(
                "unknown byte preset",
                invalid_name=name,
                available=[p.value for p in cls],
            ) from None


class SequencePreset(str, Enum):
    """Byte-sequence presets, keyed by the tokens they match."""

    TRUE_FALSE = "true-false"
    TRUE_FALSE_CAPITALISED = "True-False"
    YES_NO = "yes-no"
    YES_NO_CAPITALISED = "Yes-No"
    Y_N = "y-n"
    O_X = "o-x"
    T_F = "t-f"
    ON_OFF = "on-off"
    ON_OFF_CAPITALISED = "On-Off"
    O = "o"
    O_CAPITAL = "O"
    X = "x"
    X_CAPITAL = "X"

    @classmethod
    def get(cls, name: str) -> "SequencePreset":
        """Get preset by value; ``"default"`` is an alias of ``true-false``."""
        if name == "default":
            return cls.TRUE_FALSE
        try:
            return cls(name)
        except ValueError:
            raise PresetError(
                "unknown sequence preset",
                invalid_name=name,
                available=[p.value for p in cls],
            ) from None


_BYTE_PRESETS: Final[dict[BytePreset, Callable[[], AsciiBytePair]]] = {
    BytePreset.DEFAULT: AsciiBytePair.default,
    BytePreset.YN: AsciiBytePair.new_yn,
    BytePreset.TF: AsciiBytePair.new_tf,
    BytePreset.OX: AsciiBytePair.new_ox,
    BytePreset.O: AsciiBytePair.new_o,
    BytePreset.O_CAPITAL: AsciiBytePair.new_o_capital,
    BytePreset.X: AsciiBytePair.new_x,
    BytePreset.X_CAPITAL: AsciiBytePair.new_x_capital,
}

_SEQUENCE_PRESETS: Final[dict[SequencePreset, Callable[[], AsciiBytesPair]]] = {
    SequencePreset.TRUE_FALSE: AsciiBytesPair.new_true_false,
    SequencePreset.TRUE_FALSE_CAPITALISED: AsciiBytesPair.new_true_false_capitalised,
    SequencePreset.YES_NO: AsciiBytesPair.new_yes_no,
    SequencePreset.YES_NO_CAPITALISED: AsciiBytesPair.new_yes_no_capitalised,
    SequencePreset.Y_N: AsciiBytesPair.new_y_n,
    SequencePreset.O_X: AsciiBytesPair.new_o_x,
    SequencePreset.T_F: AsciiBytesPair.new_t_f,
    SequencePreset.ON_OFF: AsciiBytesPair.new_on_off,
    SequencePreset.ON_OFF_CAPITALISED: AsciiBytesPair.new_on_off_capitalised,
    SequencePreset.O: AsciiBytesPair.new_o,
    SequencePreset.O_CAPITAL: AsciiBytesPair.new_o_capital,
    SequencePreset.X: AsciiBytesPair.new_x,
    SequencePreset.X_CAPITAL: AsciiBytesPair.new_x_capital,
}

PresetKind = Literal["byte", "sequence"]


def list_presets(kind: PresetKind = "sequence") -> list[str]:
    """Return available preset names for the given matcher kind."""
    match kind:
        case "byte":
            return [p.value for p in BytePreset]
        case "sequence":
            return [p.value for p in SequencePreset]
        case _:
            raise PresetError(
                "unknown preset kind",
                invalid_name=kind,
                available=["byte", "sequence"],
            )


def get_byte_pair(name: str | BytePreset = BytePreset.DEFAULT) -> AsciiBytePair:
    """
    Create a single-byte matcher from a preset name.

    :param name: Preset name, e.g. "yn", "tf" or "X".
    :return: Configured matcher.
    :raises PresetError: If the name is not a registered byte preset.

    .. code-block:: python

        pair = get_byte_pair("yn")
        pair.convert(ord("y"))  # True
    """
    preset = BytePreset.get(name)
    log.debug(f"building byte pair from preset {preset.value!r}")
    return _BYTE_PRESETS[preset]()


def get_bytes_pair(
    name: str | SequencePreset = SequencePreset.TRUE_FALSE,
    *,
    case_insensitive: bool = False,
) -> AsciiBytesPair:
    """
    Create a byte-sequence matcher from a preset name.

    :param name: Preset name, e.g. "yes-no", "On-Off" or "default".
    :param case_insensitive: Lowercase the configured tokens so the result
                             pairs with ``convert_lower``.
    :return: Configured matcher.
    :raises PresetError: If the name is not a registered sequence preset.

    .. code-block:: python

        pair = get_bytes_pair("on-off")
        pair.convert(b"off")  # False
    """
    preset = SequencePreset.get(name)
    log.debug(f"building sequence pair from preset {preset.value!r}")
    pair = _SEQUENCE_PRESETS[preset]()
    if case_insensitive:
        pair = pair.into_lower()
    return pair


__all__ = [
    "BytePreset",
    "SequencePreset",
    "PresetKind",
    "list_presets",
    "get_byte_pair",
    "get_bytes_pair",
]
