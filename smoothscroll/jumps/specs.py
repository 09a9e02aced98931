"""Named cursor jumps, one variant per way of resolving the target line."""

from __future__ import annotations

from dataclasses import dataclass

from ..engine.host import HostSurface


@dataclass(frozen=True)
class LineJump:
    """Go to the counted line, defaulting to the first line (``gg``)."""

    snap_to_first_non_blank: bool = True
    record_jump: bool = True

    def target_line(self, host: HostSurface, count: int | None) -> int:
        return count if count else 1


@dataclass(frozen=True)
class EndJump:
    """Go to the counted line, defaulting to the buffer end (``G``)."""

    snap_to_first_non_blank: bool = True
    record_jump: bool = True

    def target_line(self, host: HostSurface, count: int | None) -> int:
        return count if count else host.last_line()


@dataclass(frozen=True)
class RelativeJump:
    """Move ``count`` lines (default one) away from the current line."""

    direction: int = 1
    snap_to_first_non_blank: bool = True
    record_jump: bool = False

    def target_line(self, host: HostSurface, count: int | None) -> int:
        return host.current_line() + self.direction * (count if count else 1)


JumpSpec = LineJump | EndJump | RelativeJump

JUMP_SPECS: dict[str, JumpSpec] = {
    "gg": LineJump(),
    "G": EndJump(),
    "+": RelativeJump(direction=1),
    "-": RelativeJump(direction=-1),
}


def lookup_jump(name: str) -> JumpSpec | None:
    return JUMP_SPECS.get(name)
