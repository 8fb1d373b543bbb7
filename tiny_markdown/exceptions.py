"""Package-specific exception types."""

from __future__ import annotations


class SourceError(ValueError):
    """Base class for input-acquisition errors.

    Represents errors encountered while collecting the text to render.
    """


class InputTooLargeError(SourceError):
    """Raised when the input exceeds the configured maximum size.

    Args:
        origin: Human-readable name of the input (a path or ``"stdin"``).
        limit: Maximum allowed size in bytes.
    """

    def __init__(self, origin: str, limit: int):
        self.origin = origin
        self.limit = limit
        super().__init__(f"{origin} exceeds the maximum allowed size of {limit} bytes.")


class SourceDecodeError(SourceError):
    """Raised when the input is not valid UTF-8.

    Args:
        origin: Human-readable name of the input.
        reason: Description of the decoding failure.
    """

    def __init__(self, origin: str, reason: str):
        self.origin = origin
        self.reason = reason
        super().__init__(f"Invalid UTF-8 sequence in {origin}: {reason}")
