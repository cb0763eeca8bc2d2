"""Unit tests for the argument parser module in gtree CLI."""

from pathlib import Path

import pytest

from gtree import __version__
from gtree.cli.argparser import create_parser, parse_args


def test_defaults():
    args, rest = parse_args(create_parser(), [])
    assert args.output is None
    assert args.report is False
    assert args.verbose is False
    assert rest == []


def test_tree_flags_are_left_over_in_order():
    args, rest = parse_args(create_parser(), ["-L", "2", "-a", "src", "--noreport"])
    assert rest == ["-L", "2", "-a", "src", "--noreport"]


def test_own_options_mixed_with_tree_flags():
    args, rest = parse_args(create_parser(), ["-r", "-L2", "-o", "tree.txt", "src", "-v"])
    assert args.report is True
    assert args.verbose is True
    assert args.output == Path("tree.txt")
    assert rest == ["-L2", "src"]


def test_long_options():
    args, rest = parse_args(create_parser(), ["--report", "--output", "out.txt", "--all"])
    assert args.report is True
    assert args.output == Path("out.txt")
    assert rest == ["--all"]


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        parse_args(create_parser(), ["--version"])
    assert excinfo.value.code == 0
    assert f"gtree {__version__}" in capsys.readouterr().out


def test_output_requires_value():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(create_parser(), ["-o"])
    assert excinfo.value.code == 2
