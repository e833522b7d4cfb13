"""Traversal of the input collection.

Each input path becomes a depth-0 PathNode. Files (and anything else
that cannot be enumerated) are rendered directly; directories have
their immediate children listed, one level deep. Failures are isolated
per entry: they are reported and the traversal moves on.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum

from lsinfo.listing.collection import PathCollection
from lsinfo.listing.metadata import probe_entry
from lsinfo.listing.node import PathNode
from lsinfo.listing.renderer import EntryRenderer
from lsinfo.utils.formatting import print_error

logger = logging.getLogger(__name__)

_PSEUDO_ENTRIES = frozenset({".", ".."})


class DisplayMode(str, Enum):
    """How an entry is rendered.

    Attributes:
        BRIEF: One tabular row.
        DETAIL: Multi-line report with every piece of metadata.
    """

    BRIEF = "brief"
    DETAIL = "detail"


def select_display_mode(collection_size: int, depth: int) -> DisplayMode:
    """Detail only for the sole input path, rendered as itself."""
    if collection_size == 1 and depth == 0:
        return DisplayMode.DETAIL
    return DisplayMode.BRIEF


@dataclass(frozen=True, slots=True)
class ListingOptions:
    """Options for a traversal run.

    Attributes:
        recursive: Requested recursive listing. Recursion is not
            implemented: directories found while listing are still shown
            as single rows and never descended into.
    """

    recursive: bool = False


@dataclass(frozen=True, slots=True)
class EntryFailure:
    """An entry that could not be listed.

    Attributes:
        path: Path as it was resolved when the failure happened.
        error: Human-readable reason.
    """

    path: str
    error: str


@dataclass(slots=True)
class TraversalResult:
    """Outcome of a traversal run.

    Attributes:
        rendered: Number of entries printed.
        failures: Entries that could not be listed.
        recursion_candidates: Directories a recursive listing would have
            descended into (only collected when recursion was requested).
    """

    rendered: int = 0
    failures: list[EntryFailure] = field(default_factory=list)
    recursion_candidates: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures


def _describe_error(error: OSError) -> str:
    return error.strerror or str(error)


class TraversalEngine:
    """Lists every path of a PathCollection through a renderer.

    Args:
        renderer: Output target for entries and section labels.
    """

    def __init__(self, renderer: EntryRenderer | None = None) -> None:
        self._renderer = renderer or EntryRenderer()

    def run(
        self,
        collection: PathCollection,
        options: ListingOptions | None = None,
    ) -> TraversalResult:
        """List all paths in collection order.

        Args:
            collection: Sorted input paths.
            options: Traversal options.

        Returns:
            TraversalResult with counts and per-entry failures.
        """
        options = options or ListingOptions()
        result = TraversalResult()
        total = collection.size()

        if options.recursive:
            logger.info("Recursive listing is not implemented, listing one level only")

        for index in range(total):
            path = collection.path_at(index)
            try:
                root = PathNode.create(path)
            except ValueError as e:
                self._report(result, path, str(e))
                continue

            if root.is_file_by_probe() or not os.path.isdir(root.resolve_path()):
                self._list_entry(root, total, result)
            else:
                self._list_directory(root, total, options, result)

        logger.debug(
            "Listed %d entries with %d failure(s)", result.rendered, len(result.failures)
        )
        return result

    def _list_entry(self, node: PathNode, total: int, result: TraversalResult) -> None:
        path = node.resolve_path()
        try:
            meta = probe_entry(path)
        except OSError as e:
            self._report(result, path, _describe_error(e))
            return

        try:
            if select_display_mode(total, node.depth) == DisplayMode.DETAIL:
                self._renderer.render_detail(node, meta)
            else:
                self._renderer.render_brief(node, meta)
        except (OSError, ValueError) as e:
            self._report(result, path, f"cannot display entry: {e}")
            return
        result.rendered += 1

    def _list_directory(
        self,
        directory: PathNode,
        total: int,
        options: ListingOptions,
        result: TraversalResult,
    ) -> None:
        path = directory.resolve_path()
        try:
            children = self._read_children(path)
        except OSError as e:
            self._report(result, path, f"cannot list directory: {_describe_error(e)}")
            return

        if total > 1:
            self._renderer.render_section_label(path)

        for name, is_dir in children:
            if name in _PSEUDO_ENTRIES:
                continue
            try:
                child = directory.create_child(name)
            except ValueError as e:
                self._report(result, f"{path}/{name}", str(e))
                continue

            if options.recursive and is_dir:
                # TODO: descend into child once recursive listing is implemented
                result.recursion_candidates.append(child.resolve_path())
                logger.debug("Not descending into %s", child.resolve_path())

            self._list_entry(child, total, result)

    @staticmethod
    def _read_children(path: str) -> list[tuple[str, bool]]:
        """Names in a directory, sorted bytewise, with a no-follow is-dir flag.

        The directory handle is closed before any child is processed.
        """
        children: list[tuple[str, bool]] = []
        with os.scandir(path) as entries:
            for entry in entries:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                children.append((entry.name, is_dir))
        children.sort(key=lambda child: os.fsencode(child[0]))
        return children

    @staticmethod
    def _report(result: TraversalResult, path: str, message: str) -> None:
        logger.debug("Failed to list %s: %s", path, message)
        result.failures.append(EntryFailure(path=path, error=message))
        print_error(f"{path}: {message}")
