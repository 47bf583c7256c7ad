"""
fsdfs Core: Tree Model.

This module provides the minimal in-memory tree that the classifier and the
resolver operate on:
- File: a leaf with a path
- Folder: a path and an ordered tuple of children

Paths are slash-separated and relative. A Folder owns its children; there are
no parent references. Trees usually come from an external filesystem walker
through the dictionary contract handled by node_from_dict().

Example:
    >>> root = node_from_dict({
    ...     "path": "src",
    ...     "type": "folder",
    ...     "children": [{"path": "src/shared", "type": "folder", "children": []}],
    ... })
    >>> root.children[0].name
    'shared'
"""

import posixpath
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Mapping, Sequence, Tuple, Union

from fsdfs.core.constants import NodeType
from fsdfs.core.validators import MalformedTreeError


def normalize_path(path: str) -> str:
    """Normalize a slash-separated path.

    Backslashes become slashes, redundant `.` and `..` segments are removed.
    """
    return posixpath.normpath(path.replace("\\", "/"))


def path_name(path: str) -> str:
    """Basename of a path, ignoring trailing slashes (`src/shared/` -> `shared`)."""
    return posixpath.basename(path.rstrip("/"))


def path_stem(path: str) -> str:
    """Basename without its last extension (`index.client.ts` -> `index.client`)."""
    return posixpath.splitext(path_name(path))[0]


@dataclass(frozen=True)
class File:
    """A file in the tree.

    Attributes:
        path: Slash-separated relative path (e.g., "src/shared/ui/index.ts")
    """

    path: str

    @property
    def type(self) -> NodeType:
        return "file"

    @property
    def is_file(self) -> bool:
        return True

    @property
    def is_folder(self) -> bool:
        return False

    @property
    def name(self) -> str:
        """Basename of the path."""
        return path_name(self.path)

    @property
    def stem(self) -> str:
        """Basename without its last extension."""
        return path_stem(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": self.path, "type": self.type}


@dataclass(frozen=True)
class Folder:
    """A folder in the tree.

    Attributes:
        path: Slash-separated relative path (e.g., "src/shared")
        children: Ordered child nodes
    """

    path: str
    children: Tuple["FileSystemNode", ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @property
    def type(self) -> NodeType:
        return "folder"

    @property
    def is_file(self) -> bool:
        return False

    @property
    def is_folder(self) -> bool:
        return True

    @property
    def name(self) -> str:
        """Basename of the path."""
        return path_name(self.path)

    @property
    def stem(self) -> str:
        """Basename without its last extension."""
        return path_stem(self.path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "type": self.type,
            "children": [child.to_dict() for child in self.children],
        }


FileSystemNode = Union[File, Folder]


def node_from_dict(data: Mapping[str, Any]) -> FileSystemNode:
    """Build a tree from the `{path, type, children?}` dictionary contract.

    Args:
        data: Node dictionary as produced by a filesystem walker

    Returns:
        File or Folder with its children built recursively

    Raises:
        MalformedTreeError: If a node is missing its path or has an unknown type
    """
    if not isinstance(data, Mapping):
        raise MalformedTreeError(f"Tree node must be a mapping: {data!r}")

    path = data.get("path")
    if not isinstance(path, str):
        raise MalformedTreeError(f"Tree node must have a string 'path': {data!r}")

    node_type = data.get("type")
    if node_type == "file":
        return File(path)

    if node_type == "folder":
        children = data.get("children", [])
        if not isinstance(children, Sequence) or isinstance(children, str):
            raise MalformedTreeError(f"Folder children must be a list: {path}", path)
        return Folder(path, tuple(node_from_dict(child) for child in children))

    raise MalformedTreeError(f"Unknown node type {node_type!r} for {path}", path)


def walk(node: FileSystemNode) -> Iterator[FileSystemNode]:
    """Yield a node and all of its descendants, depth-first in child order."""
    yield node
    if node.is_folder:
        for child in node.children:
            yield from walk(child)


def tree_file_exists(root: FileSystemNode) -> Callable[[str], bool]:
    """Create an existence probe backed by the files of a tree.

    Useful to resolve imports against a virtual tree instead of the disk.

    Args:
        root: Root of the tree

    Returns:
        Predicate returning True for the normalized path of any File in the tree
    """
    files = frozenset(normalize_path(node.path) for node in walk(root) if node.is_file)

    def file_exists(path: str) -> bool:
        return normalize_path(path) in files

    return file_exists
