"""Remote verse lookup backend."""

from bible_reader.backend.bible_api import VerseFetcher, format_reference, parse_response

__all__ = [
    "VerseFetcher",
    "format_reference",
    "parse_response",
]
