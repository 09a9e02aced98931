"""Frame rendering for the pager: highlighted text rows plus a status row."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .text_view import TextView

DEFAULT_STYLE = "monokai"
RESET = "\033[0m"
CLEAR_EOL = "\033[K"
REVERSE = "\033[7m"
DIM = "\033[2m"


@lru_cache(maxsize=16)
def _formatter_for_style(style: str) -> TerminalFormatter:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = DEFAULT_STYLE
    return TerminalFormatter(style=style)


def colorize_lines(source: str, path: Path, style: str = DEFAULT_STYLE) -> list[str]:
    """Highlight ``source`` and return one ANSI-colored string per line."""
    try:
        lexer = get_lexer_for_filename(path.name, source, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    rendered = highlight(source, lexer, _formatter_for_style(style))
    colored = rendered.split("\n")
    plain_count = len(source.split("\n"))
    # pygments appends a trailing newline when the source lacks one.
    return colored[:plain_count]


def fold_label(view: TextView, start: int, end: int) -> str:
    text = view.lines[start - 1].strip()
    return f"+-- {end - start + 1} lines: {text}"


def status_text(view: TextView, moving: bool, message: str = "") -> str:
    parts = [f"{view.current_line()}/{view.last_line()}"]
    if moving:
        parts.append("scrolling")
    if message:
        parts.append(message)
    return "  ".join(parts)


def render_frame(
    view: TextView,
    display_lines: list[str],
    width: int,
    *,
    moving: bool = False,
    message: str = "",
) -> str:
    """Build one full-screen frame; long rows are clipped by the terminal."""
    out = ["\033[H"]
    gutter = len(str(view.last_line()))
    rows = view.visible_lines()
    for line in rows:
        number = f"{DIM}{line:>{gutter}}{RESET} "
        fold_end = view.fold_end_of(line)
        if fold_end is not None:
            body = f"{DIM}{fold_label(view, line, fold_end)}{RESET}"
        else:
            body = display_lines[line - 1] if line - 1 < len(display_lines) else ""
        if line == view.current_line():
            number = f"{REVERSE}{line:>{gutter}}{RESET} "
        out.append(f"{number}{body}{RESET}{CLEAR_EOL}\r\n")
    for _ in range(view.window_height() - len(rows)):
        out.append(f"~{CLEAR_EOL}\r\n")
    status = status_text(view, moving, message)[: max(1, width)]
    out.append(f"{REVERSE}{status.ljust(max(1, width))}{RESET}")
    return "".join(out)
