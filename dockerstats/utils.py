"""Small helpers for building the stats command and drawing chart pieces."""

from __future__ import annotations

import re
import shutil
from decimal import ROUND_CEILING, Decimal
from enum import Enum
from typing import Iterable, Optional, Sequence

DEFAULT_TERMINAL_WIDTH = 80

_RESET = "\x1b[0m"


class Color(Enum):
    """Terminal styles used by the charts, valued by their SGR code."""

    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    WHITE = "37"
    DIMMED = "2"


def paint(text: str, color: Color) -> str:
    """Wrap ``text`` in the ANSI escape codes for ``color``."""
    return f"\x1b[{color.value}m{text}{_RESET}"


def build_command(containers: Optional[Iterable[str]] = None) -> list[str]:
    """Return the ``docker`` arguments that stream stats as JSON."""
    command = ["stats", "--format", "json"]
    if containers:
        command.extend(containers)
    return command


def get_terminal_width() -> int:
    """Return the current terminal width, or 80 when it cannot be found."""
    columns = shutil.get_terminal_size(fallback=(DEFAULT_TERMINAL_WIDTH, 24)).columns
    return columns if columns > 0 else DEFAULT_TERMINAL_WIDTH


def filler(char: str, max_size: int, used: int) -> str:
    """Repeat ``char`` to fill what is left of ``max_size`` after ``used``."""
    if max_size == 0 or max_size <= used:
        return ""
    return char * (max_size - used)


def fill_on_even(char: str, size: int, length: int) -> str:
    """Fill the space left after ``length`` with ``char`` on even slots and blanks between."""
    if size == 0 or size <= length:
        return ""
    return "".join(char if i % 2 == 0 else " " for i in range(size - length))


def perc_to_float(perc: str) -> float:
    """Parse a percentage such as ``"12.5%"``; anything else gives 0.0."""
    if not perc.endswith("%"):
        return 0.0
    try:
        return float(perc[:-1])
    except ValueError:
        return 0.0


def usize_to_status(perc: int, max_size: int) -> str:
    """Draw a bar of ``perc`` blocks, coloured by how full it is relative to ``max_size``."""
    fill = filler("█", perc, 0)
    if perc < max_size // 2:
        return paint(fill, Color.GREEN)
    if perc < max_size - max_size // 4:
        return paint(fill, Color.YELLOW)
    return paint(fill, Color.RED)


def balanced_split(value: int) -> list[int]:
    """Split ``value`` into two halves, the second taking any remainder."""
    half = value // 2
    return [half, half + value % 2]


def scale_between(nums: Sequence[int], floor: int, ceil: int) -> Optional[list[int]]:
    """Scale ``nums`` linearly onto ``floor``..``ceil``.

    Returns None when there are no numbers or all are equal.
    """
    if not nums:
        return None
    low, high = min(nums), max(nums)
    if low == high:
        return None
    if ceil < floor:
        raise ValueError(f"ceil ({ceil}) is below floor ({floor})")
    span = ceil - floor
    return [span * (num - low) // (high - low) + floor for num in nums]


_BYTE_PATTERN = re.compile(
    r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*([kmgtpezy]?)(i?)(b?)\s*$", re.IGNORECASE
)
_PREFIXES = "kmgtpezy"


def parse_byte(text: str) -> int:
    """Parse a size such as ``"1.2kB"``, ``"5MiB"`` or ``"0B"`` into bytes.

    Unit letters are case-insensitive and a trailing ``b`` always means bytes.
    """
    match = _BYTE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"invalid byte size: {text!r}")
    number, prefix, binary, _ = match.groups()
    if binary and not prefix:
        raise ValueError(f"invalid byte size: {text!r}")
    value = Decimal(number)
    if prefix:
        base = 1024 if binary else 1000
        value *= Decimal(base) ** (_PREFIXES.index(prefix.lower()) + 1)
    return int(value.to_integral_value(rounding=ROUND_CEILING))