"""Textual widgets for bible-reader."""

from bible_reader.widgets.breadcrumb_bar import BreadcrumbBar
from bible_reader.widgets.reader_view import ReaderView
from bible_reader.widgets.selection_list import SelectionList
from bible_reader.widgets.status_line import StatusLine

__all__ = [
    "BreadcrumbBar",
    "ReaderView",
    "SelectionList",
    "StatusLine",
]
