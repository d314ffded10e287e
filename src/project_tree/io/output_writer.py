"""Single-shot output writing for rendered outlines."""

import logging
from pathlib import Path
from typing import Sequence

from project_tree.exceptions import OutputPermissionError, ParentMissingError, WriteError
from project_tree.types import PathType

logger = logging.getLogger(__name__)


def write_lines(lines: Sequence[str], destination: PathType) -> None:
    """Write an outline to a file in one operation.

    Lines are joined with a single ``\\n`` and no trailing newline is added. The
    text is encoded as UTF-8 before the destination is opened. Names that the
    filesystem reported as undecodable bytes are written back as those same
    bytes. Line endings are written verbatim on every platform.

    Args:
        lines: The rendered outline.
        destination: The file to create or overwrite.

    Raises:
        OutputPermissionError: If the file cannot be opened for writing.
        ParentMissingError: If the parent directory does not exist.
        WriteError: For any other I/O failure, or text that cannot be encoded.
            The destination is left untouched when encoding fails.
    """
    path = Path(destination)
    try:
        data = "\n".join(lines).encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as e:
        raise WriteError(path, f"Failed to write output file {path}: {e.reason}")

    try:
        with open(path, "wb") as f:
            f.write(data)
    except PermissionError:
        raise OutputPermissionError(path)
    except FileNotFoundError:
        raise ParentMissingError(path)
    except OSError as e:
        raise WriteError(path, f"Failed to write output file {path}: {e.strerror or e}")

    logger.debug("Wrote %d lines to %s", len(lines), path)
