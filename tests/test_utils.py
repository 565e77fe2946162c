import pytest

from dockerstats.utils import (
    Color,
    balanced_split,
    build_command,
    fill_on_even,
    filler,
    get_terminal_width,
    paint,
    parse_byte,
    perc_to_float,
    scale_between,
    usize_to_status,
)


def test_paint_wraps_in_escape_codes():
    assert paint("ab", Color.RED) == "\x1b[31mab\x1b[0m"
    assert paint("x", Color.DIMMED) == "\x1b[2mx\x1b[0m"


@pytest.mark.parametrize(
    "perc, expected",
    [
        (0, paint("", Color.GREEN)),
        (4, paint("████", Color.GREEN)),
        (5, paint("█████", Color.YELLOW)),
        (7, paint("███████", Color.YELLOW)),
        (8, paint("████████", Color.RED)),
        (10, paint("██████████", Color.RED)),
    ],
)
def test_usize_to_status(perc, expected):
    assert usize_to_status(perc, 10) == expected


def test_scale_between_equal_values():
    assert scale_between([0, 0], 1, 10) is None


def test_scale_between_empty():
    assert scale_between([], 1, 10) is None


def test_scale_between_common_cases():
    assert scale_between([1, 2], 1, 10) == [1, 10]
    assert scale_between([1, 2, 3], 1, 10) == [1, 5, 10]


def test_scale_between_squished():
    assert scale_between([1, 2], 1, 1) == [1, 1]
    assert scale_between([1, 3, 2], 1, 1) == [1, 1, 1]


def test_scale_between_inverted_range():
    with pytest.raises(ValueError):
        scale_between([1, 2], 10, 1)


def test_fill_on_even_pitfalls():
    assert fill_on_even("-", 0, 0) == ""
    assert fill_on_even("-", 0, 5) == ""


def test_fill_on_even_common():
    assert fill_on_even("-", 5, 0) == "- - -"
    assert fill_on_even("-", 5, 1) == "- - "


def test_filler():
    assert filler("─", 5, 2) == "───"
    assert filler("x", 0, 0) == ""
    assert filler("x", 3, 3) == ""
    assert filler("x", 3, 7) == ""


def test_perc_to_float():
    assert perc_to_float("10") == 0.0
    assert perc_to_float("10%") == 10.0
    assert perc_to_float("9237%") == 9237.0
    assert perc_to_float("abc%") == 0.0
    assert perc_to_float("25.5%") == 25.5


def test_balanced_split():
    assert balanced_split(0) == [0, 0]
    assert balanced_split(1) == [0, 1]
    assert balanced_split(2) == [1, 1]
    assert balanced_split(3) == [1, 2]


def test_get_terminal_width_positive():
    assert get_terminal_width() > 0


def test_get_terminal_width_follows_columns(monkeypatch):
    monkeypatch.setenv("COLUMNS", "123")
    assert get_terminal_width() == 123


def test_build_command():
    assert build_command() == ["stats", "--format", "json"]
    assert build_command(["web", "db"]) == ["stats", "--format", "json", "web", "db"]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0B", 0),
        ("1.2kB", 1200),
        ("10kB", 10000),
        ("5kb", 5000),
        ("1KiB", 1024),
        ("2MB", 2_000_000),
        ("1TB", 10**12),
        ("500 GB", 500 * 10**9),
        ("42", 42),
    ],
)
def test_parse_byte(text, expected):
    assert parse_byte(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1.2XB", "-5B", "1iB"])
def test_parse_byte_invalid(text):
    with pytest.raises(ValueError):
        parse_byte(text)