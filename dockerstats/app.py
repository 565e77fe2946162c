"""Runs docker stats in the background and redraws the charts."""

from __future__ import annotations

import queue
import signal
import subprocess
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, Optional, Sequence

from .cli import parse_args
from .data import DockerStats
from .display import StatsDisplay
from .error import AppError, DockerNotRunning, JsonParseError, TerminalError, from_os_error
from .escape import EscapeSequenceCleaner
from .utils import build_command, get_terminal_width

HEARTBEAT_TIMEOUT = 3.0
REFRESH_INTERVAL = 0.1


class _Closed:
    def __repr__(self) -> str:
        return "HEARTBEAT_CLOSED"


HEARTBEAT_CLOSED = _Closed()
"""Put on the heartbeat queue when the reader stops."""


class ContainerTable:
    """Thread-safe list of the latest stats, one entry per container name."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[DockerStats] = []

    def update(self, stats: DockerStats) -> None:
        """Replace the entry with the same name, or append a new one."""
        with self._lock:
            for position, existing in enumerate(self._entries):
                if existing.name == stats.name:
                    self._entries[position] = stats
                    return
            self._entries.append(stats)

    def clear(self) -> None:
        """Forget every container."""
        with self._lock:
            self._entries.clear()

    def snapshot(self) -> list[DockerStats]:
        """Return a copy of the current entries."""
        with self._lock:
            return list(self._entries)


def consume_lines(
    lines: Iterable[str],
    table: ContainerTable,
    heartbeat: "queue.Queue[object]",
    stop_event: threading.Event,
) -> None:
    """Feed raw docker output lines into ``table`` until they end or a stop is requested."""
    cleaner = EscapeSequenceCleaner()
    for line in lines:
        if stop_event.is_set():
            break
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]

        heartbeat.put(None)

        if EscapeSequenceCleaner.is_screen_clear_event(line):
            table.clear()

        clean = cleaner.process_line(line)
        if clean is None:
            continue
        try:
            stats = DockerStats.from_json(clean)
        except JsonParseError as exc:
            print(f"Warning: Failed to parse JSON: {exc.detail}", file=sys.stderr)
            continue
        table.update(stats)


def docker_stats_reader(
    command: Sequence[str],
    table: ContainerTable,
    heartbeat: "queue.Queue[object]",
    stop_event: threading.Event,
) -> None:
    """Run ``docker`` with ``command`` and keep ``table`` up to date from its output."""
    try:
        try:
            process = subprocess.Popen(
                ["docker", *command],
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as exc:
            raise from_os_error(exc) from exc

        if process.stdout is None:
            raise TerminalError("Failed to get stdout from docker command")

        try:
            consume_lines(process.stdout, table, heartbeat, stop_event)
        except OSError as exc:
            process.kill()
            raise from_os_error(exc) from exc

        if stop_event.is_set():
            process.terminate()
        try:
            returncode = process.wait()
        except OSError as exc:
            raise from_os_error(exc) from exc
    finally:
        heartbeat.put(HEARTBEAT_CLOSED)

    if stop_event.is_set():
        return
    if returncode != 0:
        raise DockerNotRunning()


def display_loop(
    heartbeat: "queue.Queue[object]",
    table: ContainerTable,
    display: StatsDisplay,
    stop_event: threading.Event,
) -> None:
    """Redraw the charts until stopped or the reader goes away."""
    last_beat = time.monotonic()
    while not stop_event.is_set():
        try:
            beat = heartbeat.get_nowait()
        except queue.Empty:
            if time.monotonic() - last_beat > HEARTBEAT_TIMEOUT:
                table.clear()
                last_beat = time.monotonic()
        else:
            if beat is HEARTBEAT_CLOSED:
                break
            last_beat = time.monotonic()

        display.print_stats(table.snapshot())
        stop_event.wait(REFRESH_INTERVAL)


_NOT_INSTALLED = object()


def _install_sigint(stop_event: threading.Event) -> object:
    def handle(signum: int, frame: object) -> None:
        print("\nReceived Ctrl+C, shutting down gracefully...")
        stop_event.set()

    try:
        return signal.signal(signal.SIGINT, handle)
    except (ValueError, OSError) as exc:
        print(f"Warning: Failed to setup signal handling: {exc}", file=sys.stderr)
        return _NOT_INSTALLED


def run_app(argv: Optional[Sequence[str]] = None) -> None:
    """Parse arguments, start the reader and display threads and wait for both."""
    args = parse_args(argv)
    display = StatsDisplay(get_terminal_width(), args.compact, args.full)

    print("Starting Docker stats monitor...")
    print("Press Ctrl+C to exit")

    table = ContainerTable()
    heartbeat: "queue.Queue[object]" = queue.Queue()
    stop_event = threading.Event()
    previous = _install_sigint(stop_event)

    try:
        with ThreadPoolExecutor(max_workers=2) as pool:
            display_future = pool.submit(display_loop, heartbeat, table, display, stop_event)
            reader_future = pool.submit(
                docker_stats_reader, build_command(args.containers), table, heartbeat, stop_event
            )
            reader_error = reader_future.exception()
            display_error = display_future.exception()
    finally:
        if previous is not _NOT_INSTALLED:
            signal.signal(signal.SIGINT, previous)

    if reader_error is None and display_error is None:
        print("Application shut down successfully")
        return
    if isinstance(reader_error, AppError):
        raise reader_error
    if reader_error is not None and display_error is None:
        raise TerminalError("Reader thread panicked") from reader_error
    if reader_error is None:
        raise TerminalError("Display thread panicked") from display_error
    raise TerminalError("Both threads panicked") from reader_error


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of ``ds``; returns the process exit status."""
    try:
        run_app(argv)
    except AppError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0