"""asciibool: interpret fixed ASCII tokens as booleans."""

from ._models.base import BooleanTokenMatcher
from ._models.byte import AsciiBytePair
from ._models.sequence import AsciiBytesPair
from ._trace import disable_trace, enable_trace
from .errors import AsciiBoolError, InvalidInputError, NotationError, PresetError
from .notation import parse_byte_pair, parse_bytes_pair
from .preset import (
    BytePreset,
    SequencePreset,
    get_byte_pair,
    get_bytes_pair,
    list_presets,
)

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("asciibool")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "BooleanTokenMatcher",
    "AsciiBytePair",
    "AsciiBytesPair",
    "BytePreset",
    "SequencePreset",
    "AsciiBoolError",
    "InvalidInputError",
    "PresetError",
    "NotationError",
    "get_byte_pair",
    "get_bytes_pair",
    "list_presets",
    "parse_byte_pair",
    "parse_bytes_pair",
    "enable_trace",
    "disable_trace",
]
