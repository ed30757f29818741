"""Error types for bible-reader.

None of these are fatal: they are shown on the status line and the
navigator falls back to the last list the user fully entered.
"""

from typing import Optional


class ReaderError(Exception):
    """Base class for all navigator errors."""


class FetchError(ReaderError):
    """A verse lookup failed."""


class TransportError(FetchError):
    """Network failure or timeout while talking to the lookup service."""


class BadStatus(FetchError):
    """The lookup service answered with a non-success status code."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"API returned status {status_code}")


class ParseError(FetchError):
    """The lookup service sent a payload that could not be decoded."""


class NotFound(FetchError):
    """Well-formed but empty answer: no reference and no text."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"verse not found: {reference}")


class InvalidSelection(ReaderError):
    """A list payload does not match the current navigation level."""

    def __init__(self, level: str, payload: Optional[object] = None) -> None:
        self.level = level
        self.payload = payload
        kind = type(payload).__name__ if payload is not None else "nothing"
        super().__init__(f"invalid {level.lower()} data: got {kind}")
