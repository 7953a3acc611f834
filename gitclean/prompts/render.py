"""Render helpers for the spell-checked prompt line.

Stateless: styled display text for a set of findings, and the cursor
arithmetic needed to put the terminal cursor back where the user is editing
after a (possibly wrapped) line has been written.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from gitclean import output
from gitclean.output import Colors, strip_ansi
from gitclean.spelling import SpellFinding

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL_WIDTH = 80

CSI = '\033['
ERASE_LINE = f'{CSI}2K'


def highlight(text: str, findings: Iterable[SpellFinding], style: str = 'misspelled',
              enabled: bool | None = None) -> str:
    """Wrap each finding's span in style sequences.

    Findings are applied from the highest start offset down, so inserting
    escape codes never shifts a span that has not been processed yet.
    Out-of-range spans are clipped and overlapping spans skipped.
    """
    if enabled is None:
        enabled = output.COLORS_ENABLED
    codes = ''.join(output.style_codes(style))
    findings = list(findings)
    if not findings or not enabled or not codes:
        return text

    result = text
    boundary = len(text)
    for finding in sorted(findings, key=lambda f: f.span.start, reverse=True):
        start = min(max(finding.span.start, 0), len(text))
        end = min(max(finding.span.end, start), len(text))
        if (start, end) != (finding.span.start, finding.span.end):
            logger.debug("Clipped finding %r span %s to (%d, %d)", finding.word, finding.span, start, end)
        if end > boundary:
            logger.debug("Skipping overlapping finding %r at %s", finding.word, finding.span)
            continue
        if start == end:
            continue
        result = f"{result[:start]}{codes}{result[start:end]}{Colors.RESET}{result[end:]}"
        boundary = start
    return result


@dataclass(frozen=True)
class CursorMove:
    """How to get from the end of the written text back to the edit cursor.

    direction is "none" (cursor at end), "left" (same row, move left by
    columns) or "up" (move up rows_up rows, then to absolute column columns).
    """
    rows_up: int
    columns: int
    direction: str
    line_count: int
    cursor_row: int

    def to_ansi(self) -> str:
        if self.direction == 'up':
            right = f"{CSI}{self.columns}C" if self.columns else ''
            return f"{CSI}{self.rows_up}A\r{right}"
        if self.direction == 'left':
            return f"{CSI}{self.columns}D"
        return ''


def _safe_width(terminal_width: int | None) -> int:
    if not terminal_width or terminal_width <= 0:
        return DEFAULT_TERMINAL_WIDTH
    return terminal_width


def compute_cursor_move(prompt_prefix_len: int, text_len: int, cursor_index: int,
                        terminal_width: int | None) -> CursorMove:
    width = _safe_width(terminal_width)
    text_len = max(text_len, 0)
    cursor_index = min(max(cursor_index, 0), text_len)

    end_row, end_col = divmod(prompt_prefix_len + text_len, width)
    cursor_row, cursor_col = divmod(prompt_prefix_len + cursor_index, width)
    line_count = end_row + 1

    if cursor_index == text_len:
        return CursorMove(0, 0, 'none', line_count, cursor_row)
    if cursor_row < end_row:
        return CursorMove(end_row - cursor_row, cursor_col, 'up', line_count, cursor_row)
    return CursorMove(0, end_col - cursor_col, 'left', line_count, cursor_row)


def wrap_fixup(prompt_prefix_len: int, text_len: int, terminal_width: int | None) -> str:
    """Settle the cursor on the next row when the text exactly fills a row.

    Terminals defer the wrap after the last column; writing a space and a
    carriage return forces the cursor to column 0 of the row below.
    """
    total = prompt_prefix_len + text_len
    if total and total % _safe_width(terminal_width) == 0:
        return ' \r'
    return ''


def erase_lines(count: int) -> str:
    """Erase count rows, bottom-up, ending at column 0 of the top row."""
    if count <= 0:
        return ''
    parts = []
    for i in range(count):
        parts.append(ERASE_LINE)
        if i < count - 1:
            parts.append(f"{CSI}1A")
    parts.append('\r')
    return ''.join(parts)


def cursor_down(rows: int) -> str:
    return f"{CSI}{rows}B" if rows > 0 else ''


__all__ = [
    "DEFAULT_TERMINAL_WIDTH",
    "CursorMove",
    "highlight",
    "strip_ansi",
    "compute_cursor_move",
    "wrap_fixup",
    "erase_lines",
    "cursor_down",
]
