"""Data types for bible-reader."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from bible_reader.data.canon import Book, Testament


@dataclass(frozen=True)
class Chapter:
    """A chapter number with its approximate verse count."""

    number: int
    verses: int


@dataclass(frozen=True)
class Verse:
    """A verse number. The text is fetched on demand."""

    number: int


@dataclass(frozen=True)
class VerseEntry:
    """A single verse as returned by the lookup service."""

    book_id: str
    book_name: str
    chapter: int
    verse: int
    text: str

    @property
    def reference(self) -> str:
        """Return formatted reference string."""
        return f"{self.book_name} {self.chapter}:{self.verse}"


@dataclass(frozen=True)
class FetchResult:
    """Verse lookup result: either verse entries or a free-text body."""

    reference: str = ""
    translation_id: str = ""
    translation_name: str = ""
    verses: Tuple[VerseEntry, ...] = ()
    text: str = ""
    translation_note: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        """Check if neither a reference nor a body came back."""
        return not self.reference and not self.text


# Payload carried by a selectable list item, one variant per list level
Selection = Union[Testament, Book, Chapter, Verse]
