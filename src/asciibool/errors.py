"""Custom exception hierarchy for asciibool errors."""

INVALID_REPRESENTATION = "Invalid boolean representation"


class AsciiBoolError(Exception):
    """Base exception for all asciibool errors."""


class InvalidInputError(AsciiBoolError, ValueError):
    """Raised when a token matches neither configured true nor false value."""

    def __init__(
        self, message: str = INVALID_REPRESENTATION, *, value: object = None
    ) -> None:
        """Keep the offending value as context; the message is left as given."""
        super().__init__(message)
        self.value = value


class PresetError(AsciiBoolError, KeyError):
    """Raised when a preset name is not registered."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name is not None:
            extra += f"(available: {available}) (got {invalid_name!r}) "
        super().__init__(message + extra)
        self.invalid_name = invalid_name
        self.available = available

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class NotationError(AsciiBoolError, ValueError):
    """Raised when a textual pair notation cannot be parsed."""

    def __init__(self, message: str, *, notation: str | None = None) -> None:
        """
        Initialize NotationError with the rejected notation.

        Args:
            message: Error message.
            notation: The notation string that failed to parse.
        """
        extra = " "
        if notation is not None:
            extra += f"(notation: {notation!r}) "
        super().__init__(message + extra)
        self.notation = notation
