"""Errors raised while decoding UUID v7 timestamps."""


class UUIDv7Error(ValueError):
    """Base class: the input is not a usable UUID v7."""


class InvalidInputError(UUIDv7Error):
    """Input is not a string, or is empty."""


class FormatError(UUIDv7Error):
    """Input without hyphens is not exactly 32 hex characters."""


class VersionMismatchError(UUIDv7Error):
    """Version nibble is present but is not 7."""

    def __init__(self, nibble: str):
        self.nibble = nibble
        super().__init__(
            f"expected UUID v7 (version nibble = 7), got version nibble = {nibble}"
        )


class PrecisionError(UUIDv7Error):
    """Extracted millisecond count is not an exact 48-bit value."""


class DateRangeError(UUIDv7Error):
    """Millisecond count is past the latest date `datetime` can hold."""
