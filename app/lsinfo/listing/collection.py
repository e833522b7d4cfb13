"""Collection of user-supplied input paths.

Paths are split into a file bucket and a directory bucket when they are
added. A single combined index addresses both: indices below the file
count select files, the rest select directories.
"""

import logging
import os
from collections.abc import Iterable, Iterator, Sequence

from lsinfo.utils.formatting import print_error

logger = logging.getLogger(__name__)

DEFAULT_PATH = "."


class PathCollection:
    """Input paths partitioned into files and everything else.

    Membership is decided once, at insertion, by a regular-file probe
    that follows links. Directories, symlinks to directories, special
    files and paths that do not exist all land in the directory bucket.
    """

    def __init__(self) -> None:
        self._files: list[str] = []
        self._directories: list[str] = []

    @classmethod
    def from_arguments(cls, paths: Iterable[str] | None) -> "PathCollection":
        """Build a sorted collection from command-line paths.

        An empty argument list means the current directory. Arguments that
        cannot be used are reported and skipped.
        """
        collection = cls()
        for path in paths or (DEFAULT_PATH,):
            try:
                collection.add_path(path)
            except ValueError as e:
                logger.debug("Skipping input path %r: %s", path, e)
                print_error(f"{path!r}: {e}")
        collection.sort()
        return collection

    @property
    def files(self) -> Sequence[str]:
        return tuple(self._files)

    @property
    def directories(self) -> Sequence[str]:
        return tuple(self._directories)

    def add_path(self, path: str) -> None:
        """Append a path to the bucket it belongs to.

        Raises:
            ValueError: If the path is empty.
        """
        if not path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if os.path.isfile(path):
            self._files.append(path)
        else:
            self._directories.append(path)
        logger.debug("Collected input path %s", path)

    def sort(self) -> None:
        """Sort each bucket in ascending byte order."""
        self._files.sort(key=os.fsencode)
        self._directories.sort(key=os.fsencode)

    def size(self) -> int:
        return len(self._files) + len(self._directories)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[str]:
        yield from self._files
        yield from self._directories

    def _locate(self, index: int) -> tuple[list[str], int]:
        """Map a combined index to (bucket, index within bucket).

        Raises:
            IndexError: If index is outside [0, size()).
        """
        if not 0 <= index < self.size():
            msg = f"Path index {index} out of range for {self.size()} path(s)"
            raise IndexError(msg)
        if index < len(self._files):
            return self._files, index
        return self._directories, index - len(self._files)

    def path_at(self, index: int) -> str:
        """Return the path at a combined index.

        Raises:
            IndexError: If index is outside [0, size()).
        """
        bucket, local = self._locate(index)
        return bucket[local]
