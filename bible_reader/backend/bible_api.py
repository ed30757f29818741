"""bible-api.com client for verse lookups."""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from bible_reader.config import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_TRANSLATION
from bible_reader.data.types import FetchResult, VerseEntry
from bible_reader.errors import BadStatus, NotFound, ParseError, TransportError

logger = logging.getLogger(__name__)


def format_reference(book: str, chapter: int, verse: int) -> str:
    """Return a lookup reference like "John 3:16"."""
    return f"{book} {chapter}:{verse}"


def _field(obj: Dict[str, Any], key: str, kind: type, default: Any) -> Any:
    """Read a typed field from a JSON object; null counts as missing."""
    value = obj.get(key)
    if value is None:
        return default
    if not isinstance(value, kind) or isinstance(value, bool):
        raise ParseError(
            f"failed to parse response: field {key!r} should be {kind.__name__}"
        )
    return value


def parse_response(payload: Any) -> FetchResult:
    """Turn a decoded JSON payload into a FetchResult.

    Raises:
        ParseError: if the payload does not have the expected shape
    """
    if not isinstance(payload, dict):
        raise ParseError("failed to parse response: expected a JSON object")

    raw_verses = _field(payload, "verses", list, [])
    verses: List[VerseEntry] = []
    for raw in raw_verses:
        if not isinstance(raw, dict):
            raise ParseError("failed to parse response: verse entry is not an object")
        verses.append(VerseEntry(
            book_id=_field(raw, "book_id", str, ""),
            book_name=_field(raw, "book_name", str, ""),
            chapter=_field(raw, "chapter", int, 0),
            verse=_field(raw, "verse", int, 0),
            text=_field(raw, "text", str, ""),
        ))

    note = _field(payload, "translation_note", str, "")
    return FetchResult(
        reference=_field(payload, "reference", str, ""),
        translation_id=_field(payload, "translation_id", str, ""),
        translation_name=_field(payload, "translation_name", str, ""),
        verses=tuple(verses),
        text=_field(payload, "text", str, ""),
        translation_note=note or None,
    )


class VerseFetcher:
    """Async client for the bible-api.com lookup service.

    Every call is a single request with a fixed timeout. Failures are
    raised as FetchError subclasses and never retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        translation: str = DEFAULT_TRANSLATION,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the fetcher.

        Args:
            base_url: Root URL of the lookup service
            translation: Translation id sent with every request
            timeout: Per-request budget in seconds
            transport: Optional httpx transport (for testing)
        """
        self.base_url = base_url.rstrip("/")
        self.translation = translation
        self.timeout = timeout
        self._transport = transport

    def build_url(self, reference: str) -> str:
        """Return the request URL (without query) for a reference."""
        return f"{self.base_url}/{quote(reference.strip(), safe='')}"

    async def fetch(self, reference: str) -> FetchResult:
        """Look up a reference such as "Genesis 1:1".

        Returns:
            The parsed FetchResult

        Raises:
            TransportError: network failure or timeout
            BadStatus: non-200 response
            ParseError: malformed payload
            NotFound: empty reference and text
        """
        url = self.build_url(reference)
        params = {"translation": self.translation}
        logger.info("Fetching %s", reference)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.warning("Timed out fetching %s", reference)
            raise TransportError(f"failed to fetch verse: timed out after {self.timeout:g}s") from exc
        except httpx.TransportError as exc:
            logger.warning("Transport error fetching %s: %s", reference, exc)
            raise TransportError(f"failed to fetch verse: {exc}") from exc
        except httpx.DecodingError as exc:
            logger.warning("Undecodable response for %s: %s", reference, exc)
            raise ParseError(f"failed to read response: {exc}") from exc
        except httpx.RequestError as exc:
            logger.warning("Request failed for %s: %s", reference, exc)
            raise TransportError(f"failed to fetch verse: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            logger.warning("Lookup for %s returned %d", reference, response.status_code)
            raise BadStatus(response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(f"failed to parse response: {exc}") from exc

        result = parse_response(payload)
        if result.is_empty:
            raise NotFound(reference)

        logger.debug("Fetched %s (%d verses)", result.reference, len(result.verses))
        return result
