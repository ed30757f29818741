"""Data types and Bible metadata."""

from bible_reader.data.types import Chapter, Verse, VerseEntry, FetchResult, Selection
from bible_reader.data.canon import (
    Book,
    Testament,
    BOOK_ORDER,
    OLD_TESTAMENT,
    NEW_TESTAMENT,
    approx_verse_count,
    chapter_count,
    get_book,
    testaments,
)

__all__ = [
    "Chapter",
    "Verse",
    "VerseEntry",
    "FetchResult",
    "Selection",
    "Book",
    "Testament",
    "BOOK_ORDER",
    "OLD_TESTAMENT",
    "NEW_TESTAMENT",
    "approx_verse_count",
    "chapter_count",
    "get_book",
    "testaments",
]
