"""Errors raised while monitoring containers."""

from __future__ import annotations

import errno


class AppError(Exception):
    """Base class for every error the monitor reports."""


class DockerNotFound(AppError):
    """The docker executable could not be found."""

    def __init__(self) -> None:
        super().__init__("Docker command not found. Please install Docker.")


class DockerNotRunning(AppError):
    """The docker daemon did not answer."""

    def __init__(self) -> None:
        super().__init__("Docker daemon is not running. Please start Docker.")


class JsonParseError(AppError):
    """A stats line could not be decoded."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse Docker stats: {detail}")


class AppIOError(AppError):
    """Any other operating-system error."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"IO error: {error}")


class TerminalError(AppError):
    """A failure around the terminal or the worker threads."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Terminal error: {detail}")


def from_os_error(err: OSError) -> AppError:
    """Map an operating-system error onto the matching application error."""
    if isinstance(err, FileNotFoundError) or err.errno == errno.ENOENT:
        return DockerNotFound()
    if isinstance(err, ConnectionRefusedError) or err.errno == errno.ECONNREFUSED:
        return DockerNotRunning()
    return AppIOError(err)