import errno

import pytest

from dockerstats.error import (
    AppError,
    AppIOError,
    DockerNotFound,
    DockerNotRunning,
    JsonParseError,
    TerminalError,
    from_os_error,
)

NOT_FOUND_MESSAGE = "Docker command not found. Please install Docker."
NOT_RUNNING_MESSAGE = "Docker daemon is not running. Please start Docker."


def test_display_docker_not_found():
    assert str(DockerNotFound()) == NOT_FOUND_MESSAGE


def test_display_docker_not_running():
    assert str(DockerNotRunning()) == NOT_RUNNING_MESSAGE


def test_display_json_parse_error():
    error = JsonParseError("invalid syntax")
    assert str(error) == "Failed to parse Docker stats: invalid syntax"
    assert error.detail == "invalid syntax"


def test_display_terminal_error():
    assert str(TerminalError("terminal size unknown")) == "Terminal error: terminal size unknown"


def test_display_io_error():
    inner = OSError("disk gone")
    error = AppIOError(inner)
    assert str(error) == "IO error: disk gone"
    assert error.error is inner


def test_convert_io_error_not_found():
    result = from_os_error(FileNotFoundError("docker command not found"))
    assert type(result) is DockerNotFound
    assert str(result) == NOT_FOUND_MESSAGE


def test_convert_not_found_by_errno():
    result = from_os_error(OSError(errno.ENOENT, "missing"))
    assert type(result) is DockerNotFound
    assert str(result) == NOT_FOUND_MESSAGE


def test_convert_io_error_connection_refused():
    result = from_os_error(ConnectionRefusedError("connection refused"))
    assert type(result) is DockerNotRunning
    assert str(result) == NOT_RUNNING_MESSAGE


def test_convert_generic_io_error():
    source = PermissionError("permission denied")
    result = from_os_error(source)
    assert type(result) is AppIOError
    assert result.error is source
    assert str(result) == "IO error: permission denied"


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (DockerNotFound(), NOT_FOUND_MESSAGE),
        (DockerNotRunning(), NOT_RUNNING_MESSAGE),
        (JsonParseError("x"), "Failed to parse Docker stats: x"),
        (AppIOError(OSError("x")), "IO error: x"),
        (TerminalError("x"), "Terminal error: x"),
    ],
)
def test_all_errors_share_base(error, message):
    with pytest.raises(AppError) as caught:
        raise error
    assert caught.value is error
    assert str(caught.value) == message