"""Exception hierarchy for project-tree.

Every error raised by the library derives from :class:`ProjectTreeError`. Errors
that have a natural built-in counterpart also derive from it, so callers can
catch either ``RootNotFoundError`` or plain ``FileNotFoundError``.
"""

from typing import Sequence

from project_tree.types import PathType


class ProjectTreeError(Exception):
    """Base class for all project-tree errors."""

    pass


class RootPathError(ProjectTreeError, OSError):
    """
    Exception raised when the root directory fails validation.

    Attributes:
        path (str): The root path that failed validation.

    Example:
        >>> error = RootPathError("/missing", "Directory does not exist: /missing")
        >>> error.path
        '/missing'
    """

    def __init__(self, path: PathType, message: str) -> None:
        """
        Initialize the exception with the offending path and a message.

        Args:
            path (PathType): The root path that failed validation.
            message (str): Human-readable description naming the path.
        """
        self.path = str(path)
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class RootNotFoundError(RootPathError, FileNotFoundError):
    """
    Exception raised when the root directory does not exist.

    Example:
        >>> str(RootNotFoundError("/missing"))
        'Directory does not exist: /missing'
    """

    def __init__(self, path: PathType) -> None:
        super().__init__(path, f"Directory does not exist: {path}")


class RootNotADirectoryError(RootPathError, NotADirectoryError):
    """
    Exception raised when the root path names something other than a directory.

    Example:
        >>> str(RootNotADirectoryError("/etc/hosts"))
        'Path is not a directory: /etc/hosts'
    """

    def __init__(self, path: PathType) -> None:
        super().__init__(path, f"Path is not a directory: {path}")


class RootPermissionError(RootPathError, PermissionError):
    """Exception raised when access to the root directory is denied."""

    def __init__(self, path: PathType) -> None:
        super().__init__(path, f"Permission denied accessing directory: {path}")


class RootAccessError(RootPathError):
    """Exception raised for any other I/O failure while validating the root directory."""

    def __init__(self, path: PathType, reason: str) -> None:
        super().__init__(path, f"Failed to access directory {path}: {reason}")


class OutputPathError(ProjectTreeError, OSError):
    """
    Exception raised when the parent directory of the output file is unusable.

    Attributes:
        path (str): The resolved parent directory of the output file.

    Example:
        >>> str(OutputPathError("/no/such/dir"))
        'Output directory does not exist: /no/such/dir'
    """

    def __init__(self, path: PathType, reason: str = "") -> None:
        """
        Initialize the exception with the resolved parent directory.

        Args:
            path (PathType): The parent directory that was checked.
            reason (str, optional): Why the directory cannot be used. When empty,
                the directory is reported as missing.
        """
        self.path = str(path)
        if reason:
            self.message = f"Cannot access output directory {path}: {reason}"
        else:
            self.message = f"Output directory does not exist: {path}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidRuleError(ProjectTreeError, ValueError):
    """
    Exception raised when one or more filter rules are malformed.

    All offending entries are reported together rather than failing on the first.

    Attributes:
        rule_kind (str): Human-readable label of the rule list, e.g. "ignore extensions".
        entries (list[str]): Every entry that failed validation, in input order.

    Example:
        >>> error = InvalidRuleError("ignore directories", ["a/b", ""], "must be simple names, no paths")
        >>> error.entries
        ['a/b', '']
        >>> str(error)
        'Invalid ignore directories (must be simple names, no paths): a/b, '
    """

    def __init__(self, rule_kind: str, entries: Sequence[str], requirement: str) -> None:
        self.rule_kind = rule_kind
        self.entries = list(entries)
        super().__init__(f"Invalid {rule_kind} ({requirement}): {', '.join(self.entries)}")


class TraversalError(ProjectTreeError, OSError):
    """
    Exception raised when a directory listing fails for a reason that cannot be
    rendered as a marker line.

    Attributes:
        path (str): The directory whose listing failed.
    """

    def __init__(self, path: PathType, reason: str) -> None:
        self.path = str(path)
        self.message = f"Failed to read directory {path}: {reason}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class WriteError(ProjectTreeError, OSError):
    """
    Exception raised when the rendered outline cannot be written.

    Attributes:
        path (str): The output file that could not be written.
    """

    def __init__(self, path: PathType, message: str = "") -> None:
        self.path = str(path)
        self.message = message or f"Failed to write output file {path}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class OutputPermissionError(WriteError, PermissionError):
    """Exception raised when writing the output file is not permitted."""

    def __init__(self, path: PathType) -> None:
        super().__init__(path, f"Permission denied writing to {path}")


class ParentMissingError(WriteError, FileNotFoundError):
    """Exception raised when the output file's parent directory vanished before writing."""

    def __init__(self, path: PathType) -> None:
        super().__init__(path, f"Cannot write to {path}: Parent directory does not exist")
