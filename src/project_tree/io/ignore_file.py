"""Reader for per-root ignore files."""

from pathlib import Path
from typing import List

from project_tree.types import PathType

IGNORE_FILE_NAME = ".projectignore"


def read_ignore_file(path: PathType) -> List[str]:
    """Read directory-name rules from an ignore file.

    The file holds one rule per line. Surrounding whitespace is stripped, and blank
    lines and lines starting with ``#`` are skipped.

    Args:
        path: Path to the ignore file.

    Returns:
        The rules in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file exists but cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.

    Example:
        >>> import os
        >>> import tempfile
        >>> with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        ...     _ = f.write('# generated\\n\\nfixtures\\n  snapshots  \\n')
        >>> read_ignore_file(f.name)
        ['fixtures', 'snapshots']
        >>> os.unlink(f.name)
    """
    with open(Path(path), "r", encoding="utf-8") as f:
        lines = f.read().splitlines()

    rules = []
    for line in lines:
        rule = line.strip()
        if rule and not rule.startswith("#"):
            rules.append(rule)
    return rules
