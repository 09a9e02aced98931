"""Jump-list primitives: line locations and bounded back/forward history.

This module has no view concerns; it only stores where jumps started.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_JUMP_HISTORY = 100


@dataclass(frozen=True)
class LineLocation:
    """Cursor location inside one buffer."""

    line: int = 1
    column: int = 0

    def normalized(self) -> LineLocation:
        """Return a variant with a 1-based line and non-negative column."""
        return LineLocation(line=max(1, self.line), column=max(0, self.column))


class LineJumpHistory:
    """Bounded back/forward stacks for line jumps.

    Adjacent duplicate locations are suppressed to avoid no-op navigation steps.
    """

    def __init__(self, max_entries: int = MAX_JUMP_HISTORY) -> None:
        self.max_entries = max(1, max_entries)
        self.back: list[LineLocation] = []
        self.forward: list[LineLocation] = []

    def _append_unique(self, stack: list[LineLocation], location: LineLocation) -> None:
        """Append a normalized location unless it duplicates the stack tail."""
        location = location.normalized()
        if stack and stack[-1] == location:
            return
        stack.append(location)
        overflow = len(stack) - self.max_entries
        if overflow > 0:
            del stack[:overflow]

    def record(self, origin: LineLocation) -> None:
        """Push a new origin onto back stack and clear forward history."""
        self._append_unique(self.back, origin)
        self.forward.clear()

    def go_back(self, current: LineLocation) -> LineLocation | None:
        """Pop next back target and push current location onto forward stack."""
        current = current.normalized()
        while self.back and self.back[-1] == current:
            self.back.pop()
        if not self.back:
            return None
        target = self.back.pop()
        self._append_unique(self.forward, current)
        return target

    def go_forward(self, current: LineLocation) -> LineLocation | None:
        """Pop next forward target and push current location onto back stack."""
        current = current.normalized()
        while self.forward and self.forward[-1] == current:
            self.forward.pop()
        if not self.forward:
            return None
        target = self.forward.pop()
        self._append_unique(self.back, current)
        return target
