"""Tests for custom exceptions."""

import pytest

from project_tree.exceptions import (
    InvalidRuleError,
    OutputPathError,
    OutputPermissionError,
    ParentMissingError,
    ProjectTreeError,
    RootAccessError,
    RootNotADirectoryError,
    RootNotFoundError,
    RootPermissionError,
    TraversalError,
    WriteError,
)


class TestRootPathErrors:
    """Test the root validation exceptions."""

    @pytest.mark.parametrize(
        "error, builtin, message",
        [
            (RootNotFoundError("/p"), FileNotFoundError, "Directory does not exist: /p"),
            (RootNotADirectoryError("/p"), NotADirectoryError, "Path is not a directory: /p"),
            (RootPermissionError("/p"), PermissionError, "Permission denied accessing directory: /p"),
            (RootAccessError("/p", "Input/output error"), OSError, "Failed to access directory /p: Input/output error"),
        ],
    )
    def test_message_and_builtin(self, error, builtin, message):
        assert str(error) == message
        assert error.path == "/p"
        assert isinstance(error, builtin)
        assert isinstance(error, ProjectTreeError)


class TestOutputPathError:
    def test_missing_directory(self):
        error = OutputPathError("/no/dir")
        assert str(error) == "Output directory does not exist: /no/dir"
        assert error.path == "/no/dir"

    def test_inaccessible_directory(self):
        error = OutputPathError("/locked", "Permission denied")
        assert str(error) == "Cannot access output directory /locked: Permission denied"


class TestInvalidRuleError:
    def test_lists_every_entry(self):
        error = InvalidRuleError("ignore extensions", ["js", ".a/b"], "must start with '.'")
        assert error.rule_kind == "ignore extensions"
        assert error.entries == ["js", ".a/b"]
        assert str(error) == "Invalid ignore extensions (must start with '.'): js, .a/b"

    def test_is_value_error(self):
        assert isinstance(InvalidRuleError("only extensions", [""], "x"), ValueError)


class TestWriteErrors:
    def test_permission(self):
        error = OutputPermissionError("/out.md")
        assert str(error) == "Permission denied writing to /out.md"
        assert isinstance(error, WriteError)
        assert isinstance(error, PermissionError)

    def test_parent_missing(self):
        error = ParentMissingError("/gone/out.md")
        assert str(error) == "Cannot write to /gone/out.md: Parent directory does not exist"
        assert isinstance(error, WriteError)
        assert isinstance(error, FileNotFoundError)

    def test_default_message(self):
        assert str(WriteError("/out.md")) == "Failed to write output file /out.md"


def test_traversal_error():
    error = TraversalError("/proj/src", "Input/output error")
    assert str(error) == "Failed to read directory /proj/src: Input/output error"
    assert error.path == "/proj/src"
    assert isinstance(error, OSError)
