"""Status line: loading spinner, last error, or key hints."""

from typing import Optional

from rich.spinner import Spinner
from rich.text import Text
from textual.timer import Timer
from textual.widgets import Static


LIST_HINTS = [
    ("enter", "select"),
    ("/", "filter"),
    ("backspace", "back"),
    ("q", "quit"),
]

READING_HINTS = [
    ("j/k", "scroll"),
    ("p/n", "prev/next verse"),
    ("backspace", "back"),
    ("q", "quit"),
]


class StatusLine(Static):
    """Status line showing loading state, errors and keybinding hints."""

    DEFAULT_CSS = """
    StatusLine {
        dock: bottom;
        height: 1;
        padding: 0 1;
        color: #626262;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._loading = False
        self._error: Optional[str] = None
        self._reading = False
        self._spinner = Spinner("dots", text=" Loading...", style="#FF5FAF")
        self._timer: Optional[Timer] = None

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    def set_status(
        self,
        loading: bool = False,
        error: Optional[str] = None,
        reading: bool = False,
    ) -> None:
        """Update what the line shows."""
        self._loading = loading
        self._error = error
        self._reading = reading

        if loading and self._timer is None:
            self._timer = self.set_interval(1 / 12, self.refresh)
        elif not loading and self._timer is not None:
            self._timer.stop()
            self._timer = None

        self._update()

    def _update(self) -> None:
        if self._loading:
            self.update(self._spinner)
            return

        if self._error:
            self.update(Text(f"Error: {self._error}", style="bold #FF0000"))
            return

        text = Text()
        hints = READING_HINTS if self._reading else LIST_HINTS
        for i, (key, desc) in enumerate(hints):
            if i > 0:
                text.append(" • ", style="dim")
            text.append(key, style="bold")
            text.append(f": {desc}")
        self.update(text)
