"""Tests for the bible-api.com fetcher."""

import asyncio

import httpx
import pytest

from bible_reader.backend.bible_api import VerseFetcher, format_reference, parse_response
from bible_reader.errors import BadStatus, FetchError, NotFound, ParseError, TransportError

GENESIS_1_1 = {
    "reference": "Genesis 1:1",
    "verses": [
        {
            "book_id": "GEN",
            "book_name": "Genesis",
            "chapter": 1,
            "verse": 1,
            "text": "In the beginning God created the heaven and the earth.\n",
        }
    ],
    "text": "In the beginning God created the heaven and the earth.\n",
    "translation_id": "kjv",
    "translation_name": "King James Version",
    "translation_note": "Public Domain",
}


def _fetcher(handler):
    return VerseFetcher(transport=httpx.MockTransport(handler))


def _fetch(fetcher, reference):
    return asyncio.run(fetcher.fetch(reference))


class TestVerseFetcher:
    """Test VerseFetcher against a mocked transport."""

    def test_defaults(self):
        fetcher = VerseFetcher()
        assert fetcher.base_url == "https://bible-api.com"
        assert fetcher.translation == "kjv"
        assert fetcher.timeout == 10.0

    def test_build_url(self):
        fetcher = VerseFetcher()
        assert fetcher.build_url("John 3:16") == "https://bible-api.com/John%203%3A16"

    def test_success(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json=GENESIS_1_1)

        result = _fetch(_fetcher(handler), "Genesis 1:1")

        assert result.reference == "Genesis 1:1"
        assert result.translation_name == "King James Version"
        assert result.translation_note == "Public Domain"
        assert len(result.verses) == 1
        assert result.verses[0].book_id == "GEN"
        assert result.verses[0].verse == 1

        request = seen[0]
        assert request.method == "GET"
        assert request.url.host == "bible-api.com"
        assert request.url.path == "/Genesis 1:1"
        assert request.url.params["translation"] == "kjv"

    def test_bad_status(self):
        fetcher = _fetcher(lambda request: httpx.Response(500, text="oops"))
        with pytest.raises(BadStatus) as excinfo:
            _fetch(fetcher, "Genesis 1:1")
        assert excinfo.value.status_code == 500
        assert "500" in str(excinfo.value)

    def test_not_found_status_is_bad_status(self):
        fetcher = _fetcher(lambda request: httpx.Response(404, json={"error": "not found"}))
        with pytest.raises(BadStatus):
            _fetch(fetcher, "Genesis 99:1")

    def test_invalid_json(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(ParseError):
            _fetch(fetcher, "Genesis 1:1")

    def test_non_object_json(self):
        fetcher = _fetcher(lambda request: httpx.Response(200, json=[1, 2, 3]))
        with pytest.raises(ParseError):
            _fetch(fetcher, "Genesis 1:1")

    def test_empty_payload_is_not_found(self):
        fetcher = _fetcher(
            lambda request: httpx.Response(200, json={"reference": "", "text": "", "verses": []})
        )
        with pytest.raises(NotFound) as excinfo:
            _fetch(fetcher, "Genesis 1:99")
        assert "Genesis 1:99" in str(excinfo.value)

    def test_timeout_is_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(TransportError):
            _fetch(_fetcher(handler), "Genesis 1:1")

    def test_connect_error_is_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as excinfo:
            _fetch(_fetcher(handler), "Genesis 1:1")
        assert isinstance(excinfo.value, FetchError)

    def test_corrupt_content_encoding_is_parse_error(self):
        """A body that fails to decompress is reported, not raised raw."""
        fetcher = _fetcher(
            lambda request: httpx.Response(
                200, headers={"Content-Encoding": "gzip"}, content=b"not gzip"
            )
        )
        with pytest.raises(ParseError):
            _fetch(fetcher, "Genesis 1:1")

    def test_other_request_error_is_transport_error(self):
        def handler(request):
            raise httpx.TooManyRedirects("redirect loop", request=request)

        with pytest.raises(TransportError):
            _fetch(_fetcher(handler), "Genesis 1:1")


class TestParseResponse:
    """Test payload decoding."""

    def test_text_only_payload(self):
        result = parse_response({"reference": "Psalms 23", "text": "The LORD is my shepherd"})
        assert result.verses == ()
        assert result.text == "The LORD is my shepherd"
        assert result.translation_note is None

    def test_null_fields_are_missing(self):
        result = parse_response({"reference": "Jude 1:1", "verses": None, "translation_note": None})
        assert result.verses == ()
        assert result.translation_note is None

    def test_numeric_book_id_rejected(self):
        payload = dict(GENESIS_1_1, verses=[dict(GENESIS_1_1["verses"][0], book_id=1)])
        with pytest.raises(ParseError):
            parse_response(payload)

    def test_verse_entry_must_be_object(self):
        with pytest.raises(ParseError):
            parse_response({"reference": "Genesis 1:1", "verses": ["x"]})


class TestFormatReference:
    """Test reference strings."""

    def test_format(self):
        assert format_reference("1 John", 4, 8) == "1 John 4:8"
