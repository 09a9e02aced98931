"""Interactive pager loop hosting the animation engine.

The loop waits for input no longer than the next timer deadline, so periodic
animation ticks keep firing while no key is pressed. Blocking jumps redraw
through the view's yield hook.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..commands import ScrollCommands
from ..engine.animator import SmoothScroller
from ..engine.settings import SettingsProvider
from ..input import read_key
from ..jumps.planner import JumpPlanner
from ..view.render import colorize_lines, render_frame
from ..view.text_view import TextView
from .keys import PagerKeyHandler
from .scheduler import TickScheduler
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass
class PagerSession:
    """Everything one pager view needs, wired together."""

    view: TextView
    scroller: SmoothScroller
    keys: PagerKeyHandler
    display_lines: list[str]


def build_session(
    source: str,
    path: Path,
    *,
    style: str,
    no_color: bool,
    height: int,
    settings: SettingsProvider,
    scheduler: TickScheduler | None = None,
) -> PagerSession:
    """Create the view, engine, and key handler for ``source``."""
    lines = source.splitlines()
    view = TextView(lines, height=height, scheduler=scheduler)
    scroller = SmoothScroller(view, settings)
    keys = PagerKeyHandler(view, ScrollCommands(scroller), JumpPlanner(scroller))
    display_lines = lines if no_color else colorize_lines(source, path, style)
    return PagerSession(view=view, scroller=scroller, keys=keys, display_lines=display_lines)


def run_main_loop(
    session: PagerSession,
    terminal: TerminalController,
    stdin_fd: int,
    *,
    read: Callable[..., str] = read_key,
    terminal_size: Callable[..., os.terminal_size] = shutil.get_terminal_size,
) -> None:
    """Run the pager until the quit key is pressed."""
    view = session.view
    scheduler = view.scheduler
    width = 80

    def draw() -> None:
        if not view.dirty:
            return
        view.dirty = False
        terminal.write(
            render_frame(view, session.display_lines, width, moving=session.scroller.is_moving)
        )

    view.on_yield = draw
    view.on_alert = terminal.bell

    with terminal.raw_mode():
        while not session.keys.quit_requested:
            term = terminal_size((80, 24))
            if term.columns != width or term.lines - 1 != view.window_height():
                width = term.columns
                view.resize(max(1, term.lines - 1))
            draw()
            timeout = scheduler.time_until_next()
            key = read(stdin_fd, timeout_ms=None if timeout is None else int(timeout * 1000))
            if key:
                session.keys.handle(key)
                view.dirty = True
            scheduler.run_due()
    session.scroller.stop()


def run_pager(
    source: str,
    path: Path,
    style: str,
    no_color: bool,
    settings: SettingsProvider,
) -> None:
    """Page ``source`` interactively, or print it when not attached to a tty."""
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        sys.stdout.write(source)
        return
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    term = shutil.get_terminal_size((80, 24))
    session = build_session(
        source,
        path,
        style=style,
        no_color=no_color,
        height=max(1, term.lines - 1),
        settings=settings,
    )
    logger.info("paging %s (%d lines)", path, session.view.last_line())
    run_main_loop(session, TerminalController(stdin_fd, stdout_fd), stdin_fd)
