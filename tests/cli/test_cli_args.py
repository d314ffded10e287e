"""Unit tests for the argument parser module in project-tree CLI."""

from pathlib import Path

import pytest

from project_tree.cli.argparser import comma_separated, create_parser


@pytest.mark.parametrize(
    "value, expected",
    [
        ("cache", ["cache"]),
        ("cache,dist", ["cache", "dist"]),
        (" .js , .ts ", [".js", ".ts"]),
        (",,.js,,", [".js"]),
        ("", []),
    ],
)
def test_comma_separated(value, expected):
    assert comma_separated(value) == expected


def test_defaults():
    args = create_parser().parse_args([])
    assert args.path == Path(".")
    assert args.output == Path("project_structure.md")
    assert args.ignore == []
    assert args.ignore_ext == []
    assert args.only_ext == []
    assert args.dirs_only is False


def test_all_options():
    args = create_parser().parse_args(
        [
            "--path",
            "src",
            "--output",
            "docs/tree.md",
            "--ignore",
            "cache, fixtures",
            "--ignore-ext",
            ".log",
            "--only-ext",
            ".py,.pyi",
            "--dirs-only",
        ]
    )
    assert args.path == Path("src")
    assert args.output == Path("docs/tree.md")
    assert args.ignore == ["cache", "fixtures"]
    assert args.ignore_ext == [".log"]
    assert args.only_ext == [".py", ".pyi"]
    assert args.dirs_only is True


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        create_parser().parse_args(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("project-tree ")


def test_unknown_option_exits_with_usage_error():
    with pytest.raises(SystemExit) as exc_info:
        create_parser().parse_args(["--bogus"])
    assert exc_info.value.code == 2
