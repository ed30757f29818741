"""Tests for list building and an end-to-end lookup."""

import asyncio
import io

import httpx
import pytest
from rich.console import Console

from bible_reader.backend.bible_api import VerseFetcher
from bible_reader.data.canon import NEW_TESTAMENT, OLD_TESTAMENT, get_book
from bible_reader.data.types import Chapter, FetchResult, Verse
from bible_reader.errors import BadStatus, FetchError
from bible_reader.formatting import format_result
from bible_reader.navigation import (
    NavigationLevel,
    NavigationState,
    fetch_failed,
    fetch_succeeded,
    initial_state,
    select,
)
from bible_reader.presentation import (
    book_list,
    build_list,
    chapter_list,
    filter_entries,
    verse_list,
)


class TestBuildList:
    """Test the per-level list builders."""

    def test_testament_list(self):
        spec = build_list(initial_state())
        assert spec.title == "Select Testament"
        assert [e.title for e in spec.entries] == ["Old Testament", "New Testament"]
        assert spec.entries[0].description == "39 books from Genesis to Malachi"
        assert spec.entries[0].payload == OLD_TESTAMENT
        assert not spec.filterable

    def test_book_list(self):
        spec = book_list(OLD_TESTAMENT)
        assert spec.title == "Select Book from Old Testament"
        assert len(spec.entries) == 39
        assert spec.entries[0].title == "Genesis"
        assert spec.entries[0].description == "50 chapters"
        assert spec.filterable

    def test_chapter_list(self):
        spec = chapter_list(get_book("Psalms"))
        assert spec.title == "Select Chapter from Psalms"
        assert len(spec.entries) == 150
        assert spec.entries[118].title == "Chapter 119"
        assert spec.entries[118].description == "~176 verses"
        assert spec.entries[118].payload == Chapter(119, 176)

    def test_verse_list(self):
        spec = verse_list(get_book("Genesis"), 1)
        assert spec.title == "Select Verse from Genesis Chapter 1"
        assert len(spec.entries) == 31
        assert spec.entries[-1].title == "Verse 31"
        assert spec.entries[-1].description == "Genesis 1:31"
        assert spec.entries[-1].payload == Verse(31)

    def test_build_follows_state(self):
        state = select(initial_state(), NEW_TESTAMENT).state
        assert build_list(state).title == "Select Book from New Testament"
        state = select(state, get_book("Mark")).state
        assert len(build_list(state).entries) == 16

    def test_rebuilt_not_shared(self):
        """Each call builds a fresh list."""
        state = initial_state()
        assert build_list(state) == build_list(state)
        assert build_list(state) is not build_list(state)

    def test_no_list_while_reading(self):
        state = select(initial_state(), OLD_TESTAMENT).state
        state = select(state, get_book("Genesis")).state
        state = select(state, Chapter(1, 31)).state
        state = select(state, Verse(1)).state
        state = fetch_succeeded(state, FetchResult(reference="Genesis 1:1")).state
        with pytest.raises(ValueError):
            build_list(state)

    def test_missing_selection_raises(self):
        """A level whose selection is unset has no list to show."""
        with pytest.raises(ValueError):
            build_list(NavigationState(level=NavigationLevel.BOOK))
        with pytest.raises(ValueError):
            build_list(NavigationState(level=NavigationLevel.VERSE, book=get_book("Ruth")))


class TestFilterEntries:
    """Test book-list filtering."""

    def test_prefix_first(self):
        entries = book_list(NEW_TESTAMENT).entries
        titles = [e.title for e in filter_entries(entries, "jo")]
        assert titles[0] == "John"
        assert "1 John" in titles
        assert "Matthew" not in titles

    def test_empty_query(self):
        entries = book_list(NEW_TESTAMENT).entries
        assert filter_entries(entries, "  ") == list(entries)

    def test_case_insensitive(self):
        entries = book_list(OLD_TESTAMENT).entries
        assert [e.title for e in filter_entries(entries, "GEN")] == ["Genesis"]


def _walk_to_genesis_1_1():
    state = select(initial_state(), OLD_TESTAMENT).state
    state = select(state, get_book("Genesis")).state
    state = select(state, Chapter(1, 31)).state
    return select(state, Verse(1))


def _run(fetcher, transition):
    """Carry out a transition's fetch effect like the app's worker does."""
    async def go():
        try:
            result = await fetcher.fetch(transition.effect.reference)
        except FetchError as exc:
            return fetch_failed(transition.state, exc)
        return fetch_succeeded(transition.state, result)

    return asyncio.run(go())


class TestEndToEnd:
    """Select down to a verse, fetch it, render it."""

    def test_genesis_1_1(self):
        payload = {
            "reference": "Genesis 1:1",
            "verses": [{"book_id": "GEN", "book_name": "Genesis", "chapter": 1,
                        "verse": 1, "text": "In the beginning..."}],
            "text": "In the beginning...",
            "translation_id": "kjv",
            "translation_name": "King James Version",
            "translation_note": "Public Domain",
        }
        fetcher = VerseFetcher(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
        )
        transition = _walk_to_genesis_1_1()
        assert transition.effect.reference == "Genesis 1:1"

        state = _run(fetcher, transition).state
        assert state.level is NavigationLevel.READING

        console = Console(width=120, file=io.StringIO(), record=True, color_system=None)
        console.print(format_result(state.content, 80))
        out = console.export_text()
        assert out.count("╭") == 1
        assert "1 In the beginning..." in out

    def test_server_error(self):
        fetcher = VerseFetcher(
            transport=httpx.MockTransport(lambda request: httpx.Response(500))
        )
        state = _run(fetcher, _walk_to_genesis_1_1()).state
        assert state.level is NavigationLevel.VERSE
        assert isinstance(state.error, BadStatus)
        assert "500" in state.error_message
