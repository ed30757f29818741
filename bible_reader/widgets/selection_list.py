"""Titled, optionally filterable list of testaments, books, chapters or verses."""

from typing import List, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Input, ListItem, ListView, Static

from bible_reader.data.types import Selection
from bible_reader.presentation import ListEntry, ListSpec, filter_entries


class SelectionList(Widget):
    """Widget showing one navigation level as a selectable list."""

    DEFAULT_CSS = """
    SelectionList {
        height: 1fr;
        margin: 1 2;
    }

    SelectionList > .list-title {
        height: 1;
        padding: 0 1;
        background: #7D56F4;
        color: #FAFAFA;
        text-style: bold;
        width: auto;
        margin-bottom: 1;
    }

    SelectionList > .list-filter {
        height: 3;
        margin-bottom: 1;
    }

    SelectionList > .list-items {
        height: 1fr;
    }
    """

    class Chosen(Message):
        """Message sent when an item is confirmed."""

        def __init__(self, payload: Selection) -> None:
            self.payload = payload
            super().__init__()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._spec: Optional[ListSpec] = None
        self._filtered: List[ListEntry] = []

    @property
    def entries(self) -> List[ListEntry]:
        """Entries currently shown (after filtering)."""
        return self._filtered

    def compose(self) -> ComposeResult:
        yield Static("", classes="list-title", id="list-title")
        yield Input(placeholder="Filter...", classes="list-filter", id="list-filter")
        yield ListView(classes="list-items", id="list-items")

    def on_mount(self) -> None:
        """Filter box stays hidden until asked for."""
        self.query_one("#list-filter", Input).display = False

    def show(self, spec: ListSpec) -> None:
        """Replace the list with a freshly built one."""
        self._spec = spec
        self.query_one("#list-title", Static).update(spec.title)
        inp = self.query_one("#list-filter", Input)
        inp.value = ""
        inp.display = False
        self._filtered = list(spec.entries)
        self._update_list()
        self.query_one("#list-items", ListView).focus()

    @property
    def filtering(self) -> bool:
        return bool(self.query_one("#list-filter", Input).display)

    def open_filter(self) -> bool:
        """Show the filter box if this list allows filtering."""
        if self._spec is None or not self._spec.filterable:
            return False
        inp = self.query_one("#list-filter", Input)
        inp.display = True
        inp.focus()
        return True

    def close_filter(self) -> None:
        """Hide the filter box and show every entry again."""
        inp = self.query_one("#list-filter", Input)
        inp.value = ""
        inp.display = False
        if self._spec is not None:
            self._filtered = list(self._spec.entries)
            self._update_list()
        self.query_one("#list-items", ListView).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Handle input changes for filtering."""
        if self._spec is None:
            return
        self._filtered = filter_entries(self._spec.entries, event.value)
        self._update_list()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the filter box."""
        event.stop()
        self._select_current()

    def on_key(self, event) -> None:
        """Handle key events."""
        if not self.filtering:
            return

        key = event.key
        if key == "escape":
            event.stop()
            event.prevent_default()
            self.close_filter()
        elif key == "down":
            event.stop()
            lst = self.query_one("#list-items", ListView)
            if lst.index is not None and lst.index < len(self._filtered) - 1:
                lst.index += 1
        elif key == "up":
            event.stop()
            lst = self.query_one("#list-items", ListView)
            if lst.index is not None and lst.index > 0:
                lst.index -= 1

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle list item selection."""
        event.stop()
        self._select_current()

    def _update_list(self) -> None:
        lst = self.query_one("#list-items", ListView)
        lst.clear()

        for entry in self._filtered:
            text = Text()
            text.append(entry.title, style="bold")
            text.append("\n")
            text.append(entry.description, style="dim")
            lst.append(ListItem(Static(text)))

        if self._filtered:
            lst.index = 0

    def _select_current(self) -> None:
        lst = self.query_one("#list-items", ListView)
        if lst.index is not None and lst.index < len(self._filtered):
            self.post_message(self.Chosen(self._filtered[lst.index].payload))
