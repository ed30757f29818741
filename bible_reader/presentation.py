"""Selectable list contents for each navigation level.

Lists are rebuilt from scratch on every transition by the pure builders
below; nothing is cached between levels.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from bible_reader.backend.bible_api import format_reference
from bible_reader.data.canon import Book, Testament, approx_verse_count, testaments
from bible_reader.data.types import Chapter, Selection, Verse
from bible_reader.navigation import NavigationLevel, NavigationState


@dataclass(frozen=True)
class ListEntry:
    """One selectable item: what is shown and what selecting it yields."""

    title: str
    description: str
    payload: Selection


@dataclass(frozen=True)
class ListSpec:
    """A titled list of entries for one level."""

    title: str
    entries: Tuple[ListEntry, ...]
    filterable: bool = False


def testament_list() -> ListSpec:
    entries = tuple(
        ListEntry(t.name, t.description, t) for t in testaments()
    )
    return ListSpec("Select Testament", entries)


def book_list(testament: Testament) -> ListSpec:
    entries = tuple(
        ListEntry(book.name, f"{book.chapters} chapters", book)
        for book in testament.books
    )
    return ListSpec(f"Select Book from {testament.name}", entries, filterable=True)


def chapter_list(book: Book) -> ListSpec:
    entries = []
    for number in range(1, book.chapters + 1):
        verses = approx_verse_count(book.name, number)
        entries.append(ListEntry(
            f"Chapter {number}", f"~{verses} verses", Chapter(number, verses)
        ))
    return ListSpec(f"Select Chapter from {book.name}", tuple(entries))


def verse_list(book: Book, chapter: int) -> ListSpec:
    entries = tuple(
        ListEntry(f"Verse {number}", format_reference(book.name, chapter, number), Verse(number))
        for number in range(1, approx_verse_count(book.name, chapter) + 1)
    )
    return ListSpec(f"Select Verse from {book.name} Chapter {chapter}", entries)


def filter_entries(entries: Sequence[ListEntry], query: str) -> List[ListEntry]:
    """Filter entries by title, prefix matches first, list order kept."""
    needle = query.strip().lower()
    if not needle:
        return list(entries)

    matches: List[Tuple[int, int, ListEntry]] = []
    for idx, entry in enumerate(entries):
        title = entry.title.lower()
        if title.startswith(needle):
            matches.append((0, idx, entry))
        elif needle in title:
            matches.append((1, idx, entry))

    matches.sort(key=lambda item: (item[0], item[1]))
    return [entry for _, _, entry in matches]


def build_list(state: NavigationState) -> ListSpec:
    """Return the list for the state's level.

    Raises:
        ValueError: in the reading level, which shows no list
    """
    level = state.level
    if level is NavigationLevel.TESTAMENT:
        return testament_list()
    if level is NavigationLevel.BOOK and state.testament is not None:
        return book_list(state.testament)
    if level is NavigationLevel.CHAPTER and state.book is not None:
        return chapter_list(state.book)
    if level is NavigationLevel.VERSE and state.book is not None and state.chapter is not None:
        return verse_list(state.book, state.chapter)
    raise ValueError(f"no list for {level.name.lower()} level")
