"""Bible canon metadata - testaments, books, chapters, verses."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Book:
    """A Bible book and its chapter count."""

    name: str
    chapters: int


@dataclass(frozen=True)
class Testament:
    """A testament: an ordered group of books."""

    name: str
    description: str
    books: Tuple[Book, ...]


OLD_TESTAMENT = Testament(
    "Old Testament",
    "39 books from Genesis to Malachi",
    (
        Book("Genesis", 50), Book("Exodus", 40), Book("Leviticus", 27),
        Book("Numbers", 36), Book("Deuteronomy", 34), Book("Joshua", 24),
        Book("Judges", 21), Book("Ruth", 4), Book("1 Samuel", 31),
        Book("2 Samuel", 24), Book("1 Kings", 22), Book("2 Kings", 25),
        Book("1 Chronicles", 29), Book("2 Chronicles", 36), Book("Ezra", 10),
        Book("Nehemiah", 13), Book("Esther", 10), Book("Job", 42),
        Book("Psalms", 150), Book("Proverbs", 31), Book("Ecclesiastes", 12),
        Book("Song of Solomon", 8), Book("Isaiah", 66), Book("Jeremiah", 52),
        Book("Lamentations", 5), Book("Ezekiel", 48), Book("Daniel", 12),
        Book("Hosea", 14), Book("Joel", 3), Book("Amos", 9),
        Book("Obadiah", 1), Book("Jonah", 4), Book("Micah", 7),
        Book("Nahum", 3), Book("Habakkuk", 3), Book("Zephaniah", 3),
        Book("Haggai", 2), Book("Zechariah", 14), Book("Malachi", 4),
    ),
)

NEW_TESTAMENT = Testament(
    "New Testament",
    "27 books from Matthew to Revelation",
    (
        Book("Matthew", 28), Book("Mark", 16), Book("Luke", 24),
        Book("John", 21), Book("Acts", 28), Book("Romans", 16),
        Book("1 Corinthians", 16), Book("2 Corinthians", 13), Book("Galatians", 6),
        Book("Ephesians", 6), Book("Philippians", 4), Book("Colossians", 4),
        Book("1 Thessalonians", 5), Book("2 Thessalonians", 3), Book("1 Timothy", 6),
        Book("2 Timothy", 4), Book("Titus", 3), Book("Philemon", 1),
        Book("Hebrews", 13), Book("James", 5), Book("1 Peter", 5),
        Book("2 Peter", 3), Book("1 John", 5), Book("2 John", 1),
        Book("3 John", 1), Book("Jude", 1), Book("Revelation", 22),
    ),
)

_TESTAMENTS: Tuple[Testament, ...] = (OLD_TESTAMENT, NEW_TESTAMENT)

# Book order list
BOOK_ORDER: List[str] = [book.name for t in _TESTAMENTS for book in t.books]

# Lookup tables
_BOOK_BY_NAME: Dict[str, Book] = {book.name: book for t in _TESTAMENTS for book in t.books}

# Verse counts for chapters where the default estimate is known to be off
VERSE_COUNT_OVERRIDES: Dict[Tuple[str, int], int] = {
    ("Genesis", 1): 31,
    ("Genesis", 2): 25,
    ("Genesis", 3): 24,
    ("Genesis", 50): 26,
    ("Exodus", 20): 26,
    ("Ruth", 1): 22,
    ("Ruth", 2): 23,
    ("Ruth", 3): 18,
    ("Ruth", 4): 22,
    ("Psalms", 1): 6,
    ("Psalms", 23): 6,
    ("Psalms", 117): 2,
    ("Psalms", 119): 176,
    ("Psalms", 150): 6,
    ("Proverbs", 31): 31,
    ("Isaiah", 53): 12,
    ("Obadiah", 1): 21,
    ("Jonah", 1): 17,
    ("Jonah", 2): 10,
    ("Jonah", 3): 10,
    ("Jonah", 4): 11,
    ("Matthew", 5): 48,
    ("Matthew", 28): 20,
    ("John", 1): 51,
    ("John", 3): 36,
    ("John", 11): 57,
    ("John", 21): 25,
    ("Acts", 2): 47,
    ("Romans", 8): 39,
    ("1 Corinthians", 13): 13,
    ("Philemon", 1): 25,
    ("2 John", 1): 13,
    ("3 John", 1): 14,
    ("Jude", 1): 25,
    ("Revelation", 22): 21,
}

# Typical chapter length per book, used when no override exists
_BOOK_DEFAULTS: Dict[str, int] = {
    "Psalms": 16,
    "Proverbs": 30,
    "Song of Solomon": 15,
    "Lamentations": 22,
}

DEFAULT_VERSE_COUNT = 30


def testaments() -> Sequence[Testament]:
    """Return the two testaments in canonical order."""
    return _TESTAMENTS


def get_book(name: str) -> Optional[Book]:
    """Get a Book by name."""
    return _BOOK_BY_NAME.get(name)


def chapter_count(book: Union[Book, str]) -> int:
    """Return the number of chapters in a book, 0 if unknown."""
    if isinstance(book, Book):
        return book.chapters
    found = _BOOK_BY_NAME.get(book)
    return found.chapters if found else 0


def approx_verse_count(book: str, chapter: int) -> int:
    """Return the estimated verse count for a chapter.

    Not authoritative, but stable: verse traversal uses it as the upper
    bound of a chapter.
    """
    override = VERSE_COUNT_OVERRIDES.get((book, chapter))
    if override:
        return override
    return _BOOK_DEFAULTS.get(book, DEFAULT_VERSE_COUNT)