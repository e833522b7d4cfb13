"""Per-entry metadata derived from stat results.

EntryMetadata is built at render time and never stored; the probe that
produces it is link-aware, so a symlink is described as a link while
any other entry is described by what it resolves to.
"""

import grp
import os
import pwd
import stat
from dataclasses import dataclass

from lsinfo.listing.classifier import EntryType, type_tag

UNREADABLE_LINK_TARGET = "?"


@dataclass(frozen=True, slots=True)
class EntryMetadata:
    """Immutable snapshot of one entry's stat information.

    Attributes:
        entry_type: Classified file type.
        mode: Permission bits (rwx for owner, group and other).
        size_bytes: Size in bytes, not recursive for directories.
        mtime: Last modification time (POSIX timestamp).
        atime: Last access time (POSIX timestamp).
        ctime: Last status change time (POSIX timestamp).
        uid: Owning user id.
        gid: Owning group id.
        link_target: Target of a symbolic link, "?" if unreadable, None otherwise.
    """

    entry_type: EntryType
    mode: int
    size_bytes: int
    mtime: float
    atime: float
    ctime: float
    uid: int
    gid: int
    link_target: str | None = None

    @classmethod
    def from_stat(cls, st: os.stat_result, link_target: str | None = None) -> "EntryMetadata":
        return cls(
            entry_type=type_tag(st.st_mode),
            mode=stat.S_IMODE(st.st_mode) & 0o777,
            size_bytes=st.st_size,
            mtime=st.st_mtime,
            atime=st.st_atime,
            ctime=st.st_ctime,
            uid=st.st_uid,
            gid=st.st_gid,
            link_target=link_target,
        )

    @property
    def is_symlink(self) -> bool:
        return self.entry_type == EntryType.SYMLINK


def probe_entry(path: str) -> EntryMetadata:
    """Stat an entry the way listings describe it.

    The entry is first examined without following links. Anything that
    is not a symlink is then re-examined through the link chain so size
    and type reflect the real target. A symlink keeps its own stat
    result and carries its target string instead.

    Raises:
        OSError: If the entry cannot be examined.
    """
    st = os.lstat(path)
    if not stat.S_ISLNK(st.st_mode):
        return EntryMetadata.from_stat(os.stat(path))

    try:
        target = os.readlink(path)
    except OSError:
        target = UNREADABLE_LINK_TARGET
    return EntryMetadata.from_stat(st, link_target=target)


def owner_name(uid: int) -> str:
    """User name for a uid, or the uid itself if it has no entry."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_name(gid: int) -> str:
    """Group name for a gid, or the gid itself if it has no entry."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)
