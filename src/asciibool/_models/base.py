"""
Base matcher interface shared by the byte and byte-sequence matchers.
"""

import logging
from abc import ABC, abstractmethod

from .._sanitise import render_value
from .._trace import _is_enabled
from ..errors import INVALID_REPRESENTATION, InvalidInputError

log = logging.getLogger(__name__)


class BooleanTokenMatcher[T](ABC):
    """
    Abstract base class for boolean token matchers.

    Subclasses hold a configured true/false pair and implement ``convert``,
    the single comparison primitive. Case-insensitive matching is layered on
    top through ``convert_lower``.
    """

    __slots__ = ()

    @abstractmethod
    def convert(self, token: T) -> bool:
        """
        Classify ``token`` as true, false, or invalid.

        :raises InvalidInputError: If ``token`` matches neither configured value.
        """
        ...

    @abstractmethod
    def _lower(self, token: T) -> T:
        """Return ``token`` with ASCII letters lowercased."""
        ...

    def convert_lower(self, token: T) -> bool:
        """Lowercase ``token`` (ASCII only) before calling ``convert``."""
        return self.convert(self._lower(token))

    def _classify(self, token: T, true_value: T, false_value: T) -> bool:
        """Three-way equality check used by ``convert`` implementations."""
        if token == true_value:
            return True
        if token == false_value:
            return False
        raise self._invalid_input(token)

    def _invalid_input(
        self, value: object = None, *, show_value: bool = False
    ) -> InvalidInputError:
        """
        Build the error raised for a rejected token.

        :param value: The rejected input, attached to the error as context.
        :param show_value: Append ``value`` to the message. Used only when the
                           input could not be narrowed to the matcher's unit.
        """
        if _is_enabled():
            log.debug(
                f"{self.__class__.__name__} rejected {render_value(value)!r} "
                f"(pair: {self!r})"
            )
        message = INVALID_REPRESENTATION
        if show_value:
            message = f"{INVALID_REPRESENTATION}: {value}"
        return InvalidInputError(message, value=value)
