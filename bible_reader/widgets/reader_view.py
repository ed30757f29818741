"""Scrollable pane showing a fetched passage."""

from typing import Optional

from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Static

from bible_reader.data.types import FetchResult
from bible_reader.formatting import format_result


class ReaderView(VerticalScroll):
    """Reader pane; reflows its content whenever its width changes."""

    DEFAULT_CSS = """
    ReaderView {
        height: 1fr;
        padding: 0 1;
    }

    ReaderView > #reader-content {
        width: auto;
    }
    """

    BINDINGS = [
        Binding("j", "scroll_down", "Scroll down", show=False),
        Binding("k", "scroll_up", "Scroll up", show=False),
    ]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._result: Optional[FetchResult] = None
        self._rendered_width = 0

    @property
    def result(self) -> Optional[FetchResult]:
        return self._result

    def compose(self):
        yield Static("", id="reader-content")

    def show_result(self, result: Optional[FetchResult]) -> None:
        """Display a new result, scrolled to the top."""
        if result is self._result:
            return
        self._result = result
        self._render_content(force=True)
        self.scroll_home(animate=False)

    def on_resize(self, event) -> None:
        """Reflow for the new width."""
        self._render_content()

    def _target_width(self) -> int:
        width = self.scrollable_content_region.width
        if width <= 0:
            width = self.app.size.width - 4
        return width

    def _render_content(self, force: bool = False) -> None:
        width = self._target_width()
        if not force and width == self._rendered_width:
            return
        self._rendered_width = width

        content = self.query_one("#reader-content", Static)
        if self._result is None:
            content.update("")
        else:
            content.update(format_result(self._result, width))
