"""Unit tests for the ignore-file reader."""

import pytest

from project_tree.io.ignore_file import IGNORE_FILE_NAME, read_ignore_file


def test_ignore_file_name():
    assert IGNORE_FILE_NAME == ".projectignore"


def test_reads_rules_in_order(tmp_path):
    ignore_file = tmp_path / IGNORE_FILE_NAME
    ignore_file.write_text("fixtures\nsnapshots\n")
    assert read_ignore_file(ignore_file) == ["fixtures", "snapshots"]


def test_skips_comments_and_blank_lines(tmp_path):
    ignore_file = tmp_path / IGNORE_FILE_NAME
    ignore_file.write_text("# generated folders\n\n   \nfixtures\n  # indented comment\n")
    assert read_ignore_file(ignore_file) == ["fixtures"]


def test_strips_whitespace_and_crlf(tmp_path):
    ignore_file = tmp_path / IGNORE_FILE_NAME
    ignore_file.write_bytes(b"  fixtures  \r\nsnapshots\r\n")
    assert read_ignore_file(ignore_file) == ["fixtures", "snapshots"]


def test_keeps_names_containing_hash(tmp_path):
    ignore_file = tmp_path / IGNORE_FILE_NAME
    ignore_file.write_text("c#-project\n")
    assert read_ignore_file(ignore_file) == ["c#-project"]


def test_empty_file(tmp_path):
    ignore_file = tmp_path / IGNORE_FILE_NAME
    ignore_file.write_text("")
    assert read_ignore_file(ignore_file) == []


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ignore_file(tmp_path / IGNORE_FILE_NAME)
