"""Draws container stats as boxed bar charts in the terminal."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from .data import DockerStats
from .utils import (
    Color,
    balanced_split,
    fill_on_even,
    filler,
    paint,
    parse_byte,
    perc_to_float,
    scale_between,
    usize_to_status,
)

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"
EXIT_HINT = "Press Ctrl+C to exit"
WAITING_MESSAGE = "Waiting for container stats..."

_LABEL_WIDTH = 18
_TRAFFIC_MARGIN = 11


def _truncate(value: float) -> int:
    """Convert a bar length to an int, saturating at zero like an unsigned cast."""
    if not math.isfinite(value) or value <= 0:
        return 0
    return int(value)


@dataclass(frozen=True)
class StatsDisplay:
    """Renders a frame of charts for a list of containers."""

    width: int
    compact: bool = False
    full: bool = False

    def render(self, containers: Sequence[DockerStats]) -> str:
        """Return the text of one frame, without the screen-clearing prefix."""
        if not containers:
            return f"{WAITING_MESSAGE}\n{EXIT_HINT}\n"

        peak = 100.0
        for stats in containers:
            for value in (perc_to_float(stats.mem_perc), perc_to_float(stats.cpu_perc)):
                if value > peak:
                    peak = value

        lines: list[str] = []
        last = len(containers) - 1
        for index, stats in enumerate(containers):
            lines.extend(self._container_lines(stats, index == 0, index == last, peak))
        lines.append(EXIT_HINT)
        return "\n".join(lines) + "\n"

    def print_stats(self, containers: Sequence[DockerStats]) -> None:
        """Clear the screen and draw the current frame."""
        sys.stdout.write(CLEAR_SCREEN + self.render(containers))
        sys.stdout.flush()

    def _container_lines(
        self, stats: DockerStats, first: bool, last: bool, peak: float
    ) -> list[str]:
        width = self.width
        name = stats.name
        lines: list[str] = []

        if not self.compact or first:
            lines.append(f"┌─ {name} {filler('─', width, len(name) + 5)}┐")
        else:
            lines.append(f"├─ {name} {fill_on_even('─', width, len(name) + 5)}┤")

        mem_perc = perc_to_float(stats.mem_perc)
        cpu_perc = perc_to_float(stats.cpu_perc)

        cpu_room = width - _LABEL_WIDTH
        cpu_scaled = _truncate(cpu_perc * (cpu_room / peak))
        cpu_padding = filler(" ", 7, len(stats.cpu_perc))
        cpu_status = usize_to_status(cpu_scaled, width)
        cpu_fill = paint(filler("░", width, cpu_scaled + _LABEL_WIDTH), Color.DIMMED)
        lines.append(f"│ CPU | {cpu_padding}{stats.cpu_perc} {cpu_status}{cpu_fill} │")

        usage_len = len(stats.mem_usage) + 1
        mem_room = width - (_LABEL_WIDTH + usage_len)
        mem_scaled = _truncate(mem_perc * (mem_room / peak))
        mem_padding = filler(" ", 7, len(stats.mem_perc))
        mem_status = usize_to_status(mem_scaled, mem_room)
        mem_fill = paint(
            filler("░", width, mem_scaled + _LABEL_WIDTH + usage_len), Color.DIMMED
        )
        lines.append(
            f"│ RAM | {mem_padding}{stats.mem_perc} {mem_status}{mem_fill} "
            f"{stats.mem_usage} │"
        )

        if self.full:
            lines.extend(self._full_lines(stats))

        if not self.compact or last:
            lines.append(f"└{filler('─', width, 2)}┘")
        return lines

    def _full_lines(self, stats: DockerStats) -> list[str]:
        width = self.width
        lines = [f"│{paint(fill_on_even('─', width, 2), Color.DIMMED)}│"]
        gap = paint("░", Color.DIMMED)

        net = self._parse_pair(stats.net_io)
        if net is not None:
            received = paint(filler("▒", width - _TRAFFIC_MARGIN, net[0]), Color.GREEN)
            sent = paint(filler("▒", width - _TRAFFIC_MARGIN, net[1]), Color.RED)
            lines.append(f"│ NET | {received}{gap}{sent} │")

        block = self._parse_pair(stats.block_io)
        if block is not None:
            read = paint(filler("▒", block[0], 0), Color.WHITE)
            written = paint(filler("▒", block[1], 0), Color.BLACK)
            lines.append(f"│  IO | {read}{gap}{written} │")
        return lines

    def _parse_pair(self, text: str) -> Optional[list[int]]:
        """Scale an ``"in / out"`` pair of sizes; None when a size is unreadable."""
        parts = text.split(" / ")
        if len(parts) != 2:
            return balanced_split(self.width - _TRAFFIC_MARGIN)
        try:
            sizes = [parse_byte(part) for part in parts]
            scaled = scale_between(sizes, 1, self.width - 12)
        except ValueError:
            return None
        return scaled if scaled is not None else balanced_split(self.width - _TRAFFIC_MARGIN)