"""Hierarchical path nodes.

A PathNode is one path segment plus the node it was discovered under.
Input paths become depth-0 roots; every directory entry found while
listing a root becomes a child one level deeper. The full filesystem
path is rebuilt on demand by walking back to the root.
"""

import os
from dataclasses import dataclass

SEPARATOR = "/"
_CURRENT_DIR_PREFIX = "./"


def strip_trailing_separators(path: str) -> str:
    """Remove redundant trailing separators.

    The first character is never removed, so "/" and "///" both
    become "/".
    """
    end = len(path)
    while end > 1 and path[end - 1] == SEPARATOR:
        end -= 1
    return path[:end]


def strip_current_dir_prefix(path: str) -> str:
    """Remove leading "./" markers.

    Separators directly following a marker go with it, so ".//a" and
    "././a" both become "a". A path made only of markers collapses
    to ".".
    """
    while path.startswith(_CURRENT_DIR_PREFIX):
        path = path[len(_CURRENT_DIR_PREFIX) :].lstrip(SEPARATOR)
    return path or "."


@dataclass(frozen=True, slots=True)
class PathNode:
    """A path segment linked to the node it was found under.

    Attributes:
        segment: A single path component, or the whole input path for a root.
        parent: Node this one was discovered under (None for roots).
        depth: Enumeration hops from the input path (0 for roots).
    """

    segment: str
    parent: "PathNode | None" = None
    depth: int = 0

    def __post_init__(self) -> None:
        if not self.segment:
            msg = "Path segment cannot be empty"
            raise ValueError(msg)
        if self.depth < 0:
            msg = f"Depth must be non-negative, got {self.depth}"
            raise ValueError(msg)
        if (self.parent is None) != (self.depth == 0):
            msg = "Only depth-0 nodes may be without a parent"
            raise ValueError(msg)
        if self.parent is not None and self.depth != self.parent.depth + 1:
            msg = f"Child depth must be {self.parent.depth + 1}, got {self.depth}"
            raise ValueError(msg)

    @classmethod
    def create(cls, path: str) -> "PathNode":
        """Create a depth-0 node for a user-supplied path.

        Raises:
            ValueError: If the path is empty.
        """
        if not path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        return cls(segment=strip_trailing_separators(path))

    def create_child(self, leaf: str) -> "PathNode":
        """Create a node for an entry found inside this one.

        Raises:
            ValueError: If the leaf name is empty.
        """
        if not leaf:
            msg = "Leaf name cannot be empty"
            raise ValueError(msg)
        segment = strip_current_dir_prefix(strip_trailing_separators(leaf))
        return PathNode(segment=segment, parent=self, depth=self.depth + 1)

    def resolve_path(self) -> str:
        """Join the segments from the root down to this node."""
        segments: list[str] = []
        node: PathNode | None = self
        while node is not None:
            segments.append(node.segment)
            node = node.parent

        path = segments.pop()
        while segments:
            segment = segments.pop()
            path = path + segment if path.endswith(SEPARATOR) else path + SEPARATOR + segment
        return strip_trailing_separators(path)

    @property
    def full_path(self) -> str:
        return self.resolve_path()

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    def is_file_by_probe(self) -> bool:
        """Whether the resolved path is a regular file (links followed)."""
        return os.path.isfile(self.resolve_path())

    def display_path(self) -> str:
        """Path as shown in listings.

        Roots show the input path without any leading "./"; discovered
        entries show only their final component, since the section they
        are listed under already names the directory.
        """
        path = self.resolve_path()
        if self.depth > 0:
            return os.path.basename(path) or path
        return strip_current_dir_prefix(path)
