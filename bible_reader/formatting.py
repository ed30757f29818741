"""Word wrapping and verse layout for the reader pane."""

from typing import List, Sequence

from rich import box
from rich.cells import cell_len, set_cell_size
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from bible_reader.data.types import FetchResult

# Border (2) plus horizontal padding (2 + 2) around each verse block
DECORATION_WIDTH = 6
MIN_TEXT_WIDTH = 40

BREADCRUMB_MARKER = "📍 "
BREADCRUMB_SEPARATOR = " > "

REFERENCE_STYLE = "bold underline #FFFF00"
VERSE_STYLE = "#04B575"
NOTE_STYLE = "#626262"


def text_width(target_width: int) -> int:
    """Return the usable text width inside a verse block."""
    return max(target_width - DECORATION_WIDTH, MIN_TEXT_WIDTH)


def wrap_text(text: str, width: int) -> str:
    """Greedy word wrap on whitespace.

    Lines never exceed ``width`` unless a single word is longer, in which
    case that word sits alone on its line. Words are never split.
    """
    if width <= 0:
        return text

    words = text.split()
    if not words:
        return text

    lines: List[str] = []
    current = ""
    for word in words:
        if current and len(current) + 1 + len(word) > width:
            lines.append(current)
            current = ""
        current = f"{current} {word}" if current else word

    if current:
        lines.append(current)
    return "\n".join(lines)


def _verse_block(body: str, width: int) -> Panel:
    return Panel(
        Text(wrap_text(body, width), style=VERSE_STYLE),
        box=box.ROUNDED,
        padding=(1, 2),
        width=width + DECORATION_WIDTH,
        border_style=VERSE_STYLE,
    )


def format_result(result: FetchResult, target_width: int) -> Group:
    """Render a lookup result for a pane ``target_width`` columns wide.

    Pure: the same inputs always produce the same renderable, so the
    reader can call it again on every resize.
    """
    width = text_width(target_width)
    parts: List[RenderableType] = []

    if result.reference:
        parts.append(Text(wrap_text(result.reference, width), style=REFERENCE_STYLE))
        parts.append(Text(""))

    if result.translation_name:
        parts.append(Text(wrap_text(f"Translation: {result.translation_name}", width)))
        parts.append(Text(""))

    if result.verses:
        for entry in result.verses:
            parts.append(_verse_block(f"{entry.verse} {entry.text}", width))
            parts.append(Text(""))
    elif result.text:
        parts.append(_verse_block(result.text, width))
        parts.append(Text(""))

    if result.translation_note:
        parts.append(Text(wrap_text(f"Note: {result.translation_note}", width), style=NOTE_STYLE))

    return Group(*parts)


def format_breadcrumb(labels: Sequence[str], width: int) -> str:
    """Join breadcrumb labels, truncating with "..." to fit ``width``."""
    if not labels:
        return ""

    text = BREADCRUMB_MARKER + BREADCRUMB_SEPARATOR.join(labels)
    limit = width - 4
    if cell_len(text) > limit:
        text = set_cell_size(text, max(limit - 3, 0)) + "..."
    return text
