"""Main Textual application for bible-reader."""

import logging
from pathlib import Path
from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from bible_reader.backend import VerseFetcher
from bible_reader.config import Config, get_config
from bible_reader.errors import FetchError
from bible_reader.navigation import (
    ExitRequest,
    FetchRequest,
    NavigationLevel,
    NavigationState,
    Transition,
    back,
    fetch_failed,
    fetch_succeeded,
    initial_state,
    navigate_verse,
    select,
)
from bible_reader.presentation import build_list
from bible_reader.widgets import BreadcrumbBar, ReaderView, SelectionList, StatusLine

logger = logging.getLogger(__name__)

LIST_BANNER = "📖 Bible CLI Reader"
READING_BANNER = "📖 Bible Reader"


def _needs_new_list(old: NavigationState, new: NavigationState) -> bool:
    """Check if the list pane must be rebuilt after a transition."""
    if new.level is NavigationLevel.READING:
        return False
    return (
        old.level is not new.level
        or old.testament != new.testament
        or old.book != new.book
        or old.chapter != new.chapter
    )


class BibleReaderApp(App):
    """Testament/book/chapter/verse navigator backed by bible-api.com."""

    TITLE = "Bible Reader"
    CSS_PATH = Path(__file__).parent / "styles" / "app.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=False, priority=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("escape", "back", "Back", show=False),
        Binding("backspace", "back", "Back", show=False),
        Binding("p", "prev_verse", "Prev verse", show=False),
        Binding("n", "next_verse", "Next verse", show=False),
        Binding("slash", "filter", "Filter", show=False),
    ]

    def __init__(
        self,
        config: Optional[Config] = None,
        fetcher: Optional[VerseFetcher] = None,
    ) -> None:
        super().__init__()

        self._config = config or get_config()
        self._fetcher = fetcher or VerseFetcher(
            self._config.api_base_url,
            self._config.translation,
            self._config.timeout,
        )
        self._state = initial_state()

    @property
    def state(self) -> NavigationState:
        """The current navigation snapshot."""
        return self._state

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Static(LIST_BANNER, id="title-banner")
        yield BreadcrumbBar(id="breadcrumb")
        yield SelectionList(id="selection")
        yield ReaderView(id="reader")
        yield StatusLine(id="status-line")

    def on_mount(self) -> None:
        """Show the testament list."""
        self._render_state(rebuild_list=True)

    # ==================== Actions ====================

    def action_back(self) -> None:
        """Go up one level (exits from the testament list)."""
        self._apply(back(self._state))

    def action_prev_verse(self) -> None:
        """Step to the previous verse while reading."""
        self._apply(navigate_verse(self._state, -1))

    def action_next_verse(self) -> None:
        """Step to the next verse while reading."""
        self._apply(navigate_verse(self._state, 1))

    def action_filter(self) -> None:
        """Open the filter box on lists that support it."""
        if self._state.loading or self._state.level is NavigationLevel.READING:
            return
        self.query_one("#selection", SelectionList).open_filter()

    def on_selection_list_chosen(self, message: SelectionList.Chosen) -> None:
        """Handle a confirmed list item."""
        self._apply(select(self._state, message.payload))

    # ==================== State handling ====================

    def _apply(self, transition: Transition) -> None:
        """Install the next snapshot and carry out its effect."""
        old = self._state
        self._state = transition.state
        effect = transition.effect

        if isinstance(effect, ExitRequest):
            self.exit()
            return

        if isinstance(effect, FetchRequest):
            self._fetch_verse(effect.reference)

        if self._state is not old:
            self._render_state(rebuild_list=_needs_new_list(old, self._state))

    @work(exclusive=True)
    async def _fetch_verse(self, reference: str) -> None:
        """Run a lookup off the input path and feed the outcome back."""
        try:
            result = await self._fetcher.fetch(reference)
        except FetchError as exc:
            self._apply(fetch_failed(self._state, exc))
        else:
            self._apply(fetch_succeeded(self._state, result))

    def _render_state(self, rebuild_list: bool = False) -> None:
        """Paint the current snapshot."""
        state = self._state
        reading = state.level is NavigationLevel.READING

        self.query_one("#title-banner", Static).update(
            READING_BANNER if reading else LIST_BANNER
        )
        self.query_one("#breadcrumb", BreadcrumbBar).set_labels(state.breadcrumb)
        self.query_one("#status-line", StatusLine).set_status(
            loading=state.loading,
            error=state.error_message,
            reading=reading,
        )

        selection = self.query_one("#selection", SelectionList)
        reader = self.query_one("#reader", ReaderView)
        selection.display = not reading
        reader.display = reading

        if reading:
            reader.show_result(state.content)
            reader.focus()
        elif rebuild_list:
            selection.show(build_list(state))
