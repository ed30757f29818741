"""Navigation state machine: testament -> book -> chapter -> verse -> reading.

State is an immutable snapshot. Every handler takes the current snapshot
and returns a Transition: the next snapshot plus at most one effect for
the app to carry out (a verse fetch, or exiting the program).
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple, Union

from bible_reader.backend.bible_api import format_reference
from bible_reader.data.canon import Book, Testament, approx_verse_count
from bible_reader.data.types import Chapter, FetchResult, Selection, Verse
from bible_reader.errors import FetchError, InvalidSelection, ReaderError

logger = logging.getLogger(__name__)


class NavigationLevel(Enum):
    """Where the user is in the hierarchy. The value is the breadcrumb depth."""

    TESTAMENT = 0
    BOOK = 1
    CHAPTER = 2
    VERSE = 3
    READING = 4

    @property
    def depth(self) -> int:
        return self.value


@dataclass(frozen=True)
class FetchRequest:
    """Effect: look up a reference like "Genesis 1:1"."""

    reference: str


@dataclass(frozen=True)
class ExitRequest:
    """Effect: leave the program."""


Effect = Union[FetchRequest, ExitRequest]


@dataclass(frozen=True)
class NavigationState:
    """Snapshot of the navigator.

    ``testament``, ``book``, ``chapter`` and ``verse`` are only set once the
    level that chooses them has been passed; deeper fields are None.
    ``content`` is the result currently shown in the reader.
    """

    level: NavigationLevel = NavigationLevel.TESTAMENT
    breadcrumb: Tuple[str, ...] = ()
    testament: Optional[Testament] = None
    book: Optional[Book] = None
    chapter: Optional[int] = None
    verse: Optional[int] = None
    loading: bool = False
    error: Optional[ReaderError] = None
    content: Optional[FetchResult] = None

    @property
    def reference(self) -> Optional[str]:
        """Lookup reference for the selected verse, if one is selected."""
        if self.book is None or self.chapter is None or self.verse is None:
            return None
        return format_reference(self.book.name, self.chapter, self.verse)

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None


@dataclass(frozen=True)
class Transition:
    """Result of handling one event."""

    state: NavigationState
    effect: Optional[Effect] = None


def initial_state() -> NavigationState:
    """Return the starting snapshot: testament list, empty breadcrumb."""
    return NavigationState()


def build_breadcrumb(
    depth: int,
    testament: Optional[Testament],
    book: Optional[Book],
    chapter: Optional[int],
    verse: Optional[int],
) -> Tuple[str, ...]:
    """Return the first ``depth`` labels of the selection path."""
    labels = []
    if depth >= 1 and testament is not None:
        labels.append(testament.name)
    if depth >= 2 and book is not None:
        labels.append(book.name)
    if depth >= 3 and chapter is not None:
        labels.append(f"Chapter {chapter}")
    if depth >= 4 and verse is not None:
        labels.append(f"Verse {verse}")
    return tuple(labels[:depth])


def _enter(state: NavigationState, level: NavigationLevel, **fields) -> NavigationState:
    """Move to ``level``, dropping selections deeper than it.

    The breadcrumb is rebuilt from the remaining selection so both always
    change together.
    """
    depth = level.depth
    merged = replace(state, **fields)
    testament = merged.testament if depth >= 1 else None
    book = merged.book if depth >= 2 else None
    chapter = merged.chapter if depth >= 3 else None
    verse = merged.verse if depth >= 4 else None
    return replace(
        merged,
        level=level,
        testament=testament,
        book=book,
        chapter=chapter,
        verse=verse,
        breadcrumb=build_breadcrumb(depth, testament, book, chapter, verse),
        error=None,
    )


def _request_verse(state: NavigationState, chapter: int, verse: int) -> Transition:
    """Select a verse and start loading it; the level stays as it is."""
    if state.book is None:
        return Transition(state)
    breadcrumb = build_breadcrumb(
        NavigationLevel.READING.depth, state.testament, state.book, chapter, verse
    )
    loading = replace(
        state,
        chapter=chapter,
        verse=verse,
        breadcrumb=breadcrumb,
        loading=True,
        error=None,
    )
    reference = format_reference(state.book.name, chapter, verse)
    logger.debug("Requesting %s", reference)
    return Transition(loading, FetchRequest(reference))


def _invalid(state: NavigationState, payload: object) -> Transition:
    error = InvalidSelection(state.level.name, payload)
    logger.warning("%s", error)
    return Transition(replace(state, error=error))


def select(state: NavigationState, payload: Optional[Selection]) -> Transition:
    """Handle confirming a list item at the current level."""
    if state.loading or state.level is NavigationLevel.READING:
        return Transition(state)

    level = state.level
    if level is NavigationLevel.TESTAMENT:
        if not isinstance(payload, Testament):
            return _invalid(state, payload)
        return Transition(_enter(state, NavigationLevel.BOOK, testament=payload))

    if level is NavigationLevel.BOOK:
        if not isinstance(payload, Book):
            return _invalid(state, payload)
        return Transition(_enter(state, NavigationLevel.CHAPTER, book=payload))

    if level is NavigationLevel.CHAPTER:
        if not isinstance(payload, Chapter):
            return _invalid(state, payload)
        return Transition(_enter(state, NavigationLevel.VERSE, chapter=payload.number))

    if not isinstance(payload, Verse):
        return _invalid(state, payload)
    if state.chapter is None:
        return Transition(state)
    return _request_verse(state, state.chapter, payload.number)


def back(state: NavigationState) -> Transition:
    """Go up one level; from the testament list, ask to exit."""
    if state.loading:
        return Transition(state)

    if state.level is NavigationLevel.TESTAMENT:
        return Transition(state, ExitRequest())

    target = NavigationLevel(state.level.value - 1)
    return Transition(_enter(state, target))


def navigate_verse(state: NavigationState, direction: int) -> Transition:
    """Step to the previous (-1) or next (+1) verse while reading.

    Crosses chapter boundaries within a book using the approximate verse
    count as the chapter length. At either end of the book this is a no-op.
    """
    if state.loading or state.level is not NavigationLevel.READING:
        return Transition(state)
    if state.book is None or state.chapter is None or state.verse is None:
        return Transition(state)

    book = state.book
    chapter = state.chapter
    verse = state.verse + direction
    max_verses = approx_verse_count(book.name, chapter)

    if verse < 1:
        if chapter <= 1:
            return Transition(state)
        chapter -= 1
        verse = approx_verse_count(book.name, chapter)
    elif verse > max_verses:
        if chapter >= book.chapters:
            return Transition(state)
        chapter += 1
        verse = 1

    return _request_verse(state, chapter, verse)


def fetch_succeeded(state: NavigationState, result: FetchResult) -> Transition:
    """Show a fetched result in the reader."""
    if not state.loading:
        return Transition(state)
    return Transition(replace(
        state,
        level=NavigationLevel.READING,
        loading=False,
        content=result,
        error=None,
    ))


def fetch_failed(state: NavigationState, error: FetchError) -> Transition:
    """Fall back to the verse list with the error visible.

    The breadcrumb keeps the attempted reference so the user can see what
    failed, then retry or go back.
    """
    if not state.loading:
        return Transition(state)
    logger.info("Fetch failed for %s: %s", state.reference, error)
    return Transition(replace(
        state,
        level=NavigationLevel.VERSE,
        loading=False,
        error=error,
    ))
