"""Unit tests for the argument parser module in dircombine CLI."""

from pathlib import Path

import pytest

from dircombine.cli.argparser import create_parser, parse_ignore_patterns, validate_args


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ()),
        ("", ("",)),
        ("target", ("target",)),
        ("target,.git,node_modules", ("target", ".git", "node_modules")),
        ("a,,b,", ("a", "", "b", "")),
        ("sub,", ("sub", "")),
        (" a , b", (" a ", " b")),
    ],
)
def test_parse_ignore_patterns(value, expected):
    assert parse_ignore_patterns(value) == expected


def test_parser_required_arguments():
    args = create_parser().parse_args(["-i", "proj", "-o", "out.txt"])
    assert args.input == "proj"
    assert args.output == Path("out.txt")
    assert args.ignore == ()
    assert args.exclude == []


def test_parser_long_options():
    args = create_parser().parse_args(
        ["--input", "proj", "--output", "out/all.txt", "--ignore", "sub,.git", "--exclude", ".gitignore"]
    )
    assert args.input == "proj"
    assert args.output == Path("out/all.txt")
    assert args.ignore == ("sub", ".git")
    assert args.exclude == [Path(".gitignore")]


def test_parser_repeated_exclude():
    args = create_parser().parse_args(["-i", "p", "-o", "o", "-x", "a", "-e", "one", "-e", "two"])
    assert args.ignore == ("a",)
    assert args.exclude == [Path("one"), Path("two")]


@pytest.mark.parametrize("argv", [[], ["-i", "proj"], ["-o", "out.txt"]])
def test_parser_missing_required(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser().parse_args(argv)
    assert exc_info.value.code == 2
    assert "required" in capsys.readouterr().err


def test_parser_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser().parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("dircombine ")


def test_validate_args_output_is_directory(tmp_path):
    args = create_parser().parse_args(["-i", str(tmp_path), "-o", str(tmp_path)])
    with pytest.raises(ValueError, match="is a directory"):
        validate_args(args)


def test_validate_args_ok(tmp_path):
    args = create_parser().parse_args(["-i", str(tmp_path), "-o", str(tmp_path / "out.txt")])
    validate_args(args)


@pytest.mark.parametrize("raw", ["./proj", "proj/", "proj//sub"])
def test_parser_keeps_input_text(raw):
    args = create_parser().parse_args(["-i", raw, "-o", "out.txt"])
    assert args.input == raw


def test_parser_ignore_keeps_empty_fragment():
    args = create_parser().parse_args(["-i", "p", "-o", "o", "-x", "sub,"])
    assert args.ignore == ("sub", "")
