"""Strips terminal escape sequences from streamed docker output."""

from __future__ import annotations

from typing import Optional

SCREEN_CLEAR = "\x1b[J\x1b[H"
CURSOR_HOME = "\x1b[H"
ERASE_LINE = "\x1b[K"


class EscapeSequenceCleaner:
    """Turns raw docker stats lines into complete JSON objects."""

    def __init__(self) -> None:
        self._partial = ""

    def process_line(self, line: str) -> Optional[str]:
        """Return the cleaned JSON text for ``line``, or None if none is ready yet."""
        if line.startswith(SCREEN_CLEAR):
            line = line.replace(SCREEN_CLEAR, "")
            if not line:
                return None

        if line.startswith(CURSOR_HOME):
            line = line.replace(CURSOR_HOME, "")
            if not line:
                return None

        if line.endswith(ERASE_LINE):
            line = line.replace(ERASE_LINE, "").strip()

        if not line.strip():
            return None

        opens = line.startswith("{")
        if not opens and self._partial:
            line, self._partial = self._partial + line, ""
        elif opens and not line.endswith("}"):
            self._partial = line
            return None
        elif self._partial:
            line, self._partial = self._partial + line, ""

        if not (line.startswith("{") and line.endswith("}")):
            return None
        return line

    @staticmethod
    def is_screen_clear_event(line: str) -> bool:
        """Tell whether ``line`` starts a fresh screen of stats."""
        return line.startswith(SCREEN_CLEAR)