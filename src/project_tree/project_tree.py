"""One-call entry point that resolves, renders, and writes a project outline."""

import logging
from typing import List, Sequence

from project_tree.config import DEFAULT_INDENT, DEFAULT_OUTPUT_FILE, resolve_config
from project_tree.file_system_tree.file_system_tree import FileSystemTree
from project_tree.io.output_writer import write_lines
from project_tree.types import PathType

logger = logging.getLogger(__name__)


def generate_project_tree(
    root_path: PathType = ".",
    output_path: PathType = DEFAULT_OUTPUT_FILE,
    *,
    ignored_dirs: Sequence[str] = (),
    ignore_extensions: Sequence[str] = (),
    only_extensions: Sequence[str] = (),
    dirs_only: bool = False,
    indent: str = DEFAULT_INDENT,
) -> List[str]:
    """Render the outline of ``root_path`` and write it to ``output_path``.

    The outline is rendered completely before the output file is opened, so a
    failed run never leaves a partial file behind.

    Args:
        root_path: Directory to render.
        output_path: File to write the outline to.
        ignored_dirs: Extra directory names to hide.
        ignore_extensions: File extensions to hide.
        only_extensions: File extensions to show exclusively.
        dirs_only: Hide all files.
        indent: Per-level indentation string.

    Returns:
        The lines that were written.

    Raises:
        ProjectTreeError: Any configuration, traversal, or write failure. See
            :func:`project_tree.config.resolve_config` and
            :func:`project_tree.io.output_writer.write_lines` for the specific types.

    Example:
        >>> lines = generate_project_tree("test-dir", "out.md", ignored_dirs=["cache"])  # doctest: +SKIP
        >>> lines  # doctest: +SKIP
        ['test-dir/', '├── src/', '│   └── app.js', '├── package.json', '└── README.md']
    """
    config = resolve_config(
        root_path,
        output_path,
        ignored_dirs=ignored_dirs,
        ignore_extensions=ignore_extensions,
        only_extensions=only_extensions,
        dirs_only=dirs_only,
        indent=indent,
    )

    tree = FileSystemTree(config)
    lines = list(tree.stream_tree_representation())
    logger.debug(
        "Rendered %d directories and %d files under %s",
        tree.get_directory_count(),
        tree.get_file_count(),
        config.root_path,
    )

    write_lines(lines, config.output_path)
    logger.info("Project structure has been written to %s", output_path)
    return lines
