"""Breadcrumb trail widget."""

from typing import Sequence, Tuple

from rich.text import Text
from textual.widgets import Static

from bible_reader.formatting import format_breadcrumb


class BreadcrumbBar(Static):
    """One-line trail of the current navigation path."""

    DEFAULT_CSS = """
    BreadcrumbBar {
        height: auto;
        padding: 0 1;
        color: #FFA500;
        text-style: bold;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._labels: Tuple[str, ...] = ()

    def set_labels(self, labels: Sequence[str]) -> None:
        """Set the breadcrumb labels."""
        self._labels = tuple(labels)
        self._update()

    def on_resize(self, event) -> None:
        self._update()

    def _update(self) -> None:
        width = self.size.width or self.app.size.width
        self.display = bool(self._labels)
        self.update(Text(format_breadcrumb(self._labels, width)))
