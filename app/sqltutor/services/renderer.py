"""
Purpose: Turn transcript entries into console text.
Tables are drawn as a fixed-width grid like the MySQL client; only the
display is truncated, the stored result stays complete.
"""

from __future__ import annotations
from typing import Iterable

from ..models import Cell, EntryKind, ResultEntry, TableData, TranscriptEntry
from ..state import SessionState

PRIMARY_PROMPT = "mysql> "
CONTINUATION_PROMPT = "    -> "
NULL_TOKEN = "NULL"
DISPLAY_ROW_LIMIT = 25
MIN_COLUMN_WIDTH = 4


def cell_text(value: Cell) -> str:
    return NULL_TOKEN if value is None else str(value)


def column_widths(table: TableData, min_width: int = MIN_COLUMN_WIDTH) -> list[int]:
    widths = []
    for i, col in enumerate(table.columns):
        longest = max((len(cell_text(row[i])) for row in table.rows), default=0)
        widths.append(max(len(col), longest, min_width))
    return widths


def render_table(
    table: TableData,
    *,
    max_rows: int = DISPLAY_ROW_LIMIT,
    min_width: int = MIN_COLUMN_WIDTH,
) -> str:
    widths = column_widths(table, min_width)
    separator = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def _line(cells: Iterable[str]) -> str:
        return "|" + "|".join(f" {c.ljust(w)} " for c, w in zip(cells, widths)) + "|"

    lines = [separator, _line(table.columns), separator]
    for row in table.rows[:max_rows]:
        lines.append(_line(cell_text(v) for v in row))
    lines.append(separator)

    hidden = len(table.rows) - max_rows
    if hidden > 0:
        lines.append(f"... and {hidden} more rows")
    return "\n".join(lines)


def render_entry(
    entry: TranscriptEntry,
    *,
    max_rows: int = DISPLAY_ROW_LIMIT,
    min_width: int = MIN_COLUMN_WIDTH,
) -> str:
    if entry.kind == EntryKind.INPUT:
        return PRIMARY_PROMPT + entry.text
    if entry.kind == EntryKind.CONTINUATION:
        return CONTINUATION_PROMPT + entry.text
    if isinstance(entry, ResultEntry):
        grid = render_table(entry.table, max_rows=max_rows, min_width=min_width)
        return f"{grid}\n{entry.text}"
    return entry.text


def render_transcript(entries: Iterable[TranscriptEntry], **kwargs) -> str:
    return "\n".join(render_entry(e, **kwargs) for e in entries)


def prompt_for(state: SessionState) -> str:
    """Prompt shown in front of the line currently being typed."""
    return CONTINUATION_PROMPT if state.is_multiline else PRIMARY_PROMPT


def echo_lines(lines: list[str]) -> list[tuple[EntryKind, str]]:
    """
    Physical lines of a submitted statement as transcript entries: the first
    line with the primary prompt, later non-empty lines as continuations.
    """
    out: list[tuple[EntryKind, str]] = []
    for idx, line in enumerate(lines):
        if idx == 0:
            out.append((EntryKind.INPUT, line))
        elif line:
            out.append((EntryKind.CONTINUATION, line))
    return out


def render_pending(state: SessionState) -> str:
    """Lines already committed to the statement still being typed."""
    return "\n".join(
        (PRIMARY_PROMPT if idx == 0 else CONTINUATION_PROMPT) + line
        for idx, line in enumerate(state.line_buffer)
    )
