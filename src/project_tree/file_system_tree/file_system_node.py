"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file, a directory, or a marker in the filesystem tree.

    Extends anytree.Node with flags for directories and for marker nodes. A marker
    node stands in for the contents of a directory that could not be listed; its
    name is the marker text, e.g. ``[Permission Denied]``.

    Attributes:
        name (str): The name of the file or directory (just the basename), or the
            marker text for marker nodes.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory.
        is_marker (bool): True if this node replaces an unreadable directory's contents.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root)
        >>> child.is_dir
        False
        >>> child.depth
        1
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        is_marker: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir
        self.is_marker = is_marker
