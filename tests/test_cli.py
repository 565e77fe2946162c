import pytest

from dockerstats.cli import build_parser, parse_args


def test_defaults():
    args = parse_args([])
    assert args.containers == []
    assert args.compact is False
    assert args.full is False


def test_short_flags_and_containers():
    args = parse_args(["-c", "-f", "web", "db"])
    assert args.containers == ["web", "db"]
    assert args.compact is True
    assert args.full is True


def test_long_flags():
    args = parse_args(["--compact", "web"])
    assert args.compact is True
    assert args.full is False
    assert args.containers == ["web"]


def test_unknown_flag_is_rejected():
    with pytest.raises(SystemExit):
        parse_args(["--bogus"])


def test_parser_name():
    assert build_parser().prog == "ds"