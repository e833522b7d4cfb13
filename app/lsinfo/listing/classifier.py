"""Entry classification from raw stat mode bits.

Maps the file-type bits of ``st_mode`` to a one-character tag, a human
description and a theme style, and turns permission bits into phrases.
"""

import stat
from enum import Enum


class EntryType(str, Enum):
    """Type of filesystem entry, valued by its listing tag.

    Attributes:
        BLOCK_DEVICE: Block device.
        CHAR_DEVICE: Character device.
        DIRECTORY: Directory.
        FIFO: Named pipe.
        SYMLINK: Symbolic link (only seen when links are not followed).
        FILE: Regular file.
        SOCKET: Unix domain socket.
        UNKNOWN: Any other file-type bit pattern.
    """

    BLOCK_DEVICE = "b"
    CHAR_DEVICE = "c"
    DIRECTORY = "d"
    FIFO = "p"
    SYMLINK = "l"
    FILE = "f"
    SOCKET = "s"
    UNKNOWN = "?"


_MODE_TYPES: dict[int, EntryType] = {
    stat.S_IFBLK: EntryType.BLOCK_DEVICE,
    stat.S_IFCHR: EntryType.CHAR_DEVICE,
    stat.S_IFDIR: EntryType.DIRECTORY,
    stat.S_IFIFO: EntryType.FIFO,
    stat.S_IFLNK: EntryType.SYMLINK,
    stat.S_IFREG: EntryType.FILE,
    stat.S_IFSOCK: EntryType.SOCKET,
}

TYPE_DESCRIPTIONS: dict[EntryType, str] = {
    EntryType.BLOCK_DEVICE: "Block Device",
    EntryType.CHAR_DEVICE: "Character Device",
    EntryType.DIRECTORY: "Directory",
    EntryType.FIFO: "Fifo Pipe File",
    EntryType.SYMLINK: "Symlink File",
    EntryType.FILE: "Regular File",
    EntryType.SOCKET: "Socket",
    EntryType.UNKNOWN: "Unknown",
}

# Theme style names, see lsinfo.core.theme.ThemeColors
TYPE_STYLES: dict[EntryType, str] = {
    EntryType.BLOCK_DEVICE: "entry_block_device",
    EntryType.CHAR_DEVICE: "entry_char_device",
    EntryType.DIRECTORY: "entry_directory",
    EntryType.FIFO: "entry_fifo",
    EntryType.SYMLINK: "entry_symlink",
    EntryType.FILE: "entry_file",
    EntryType.SOCKET: "entry_socket",
    EntryType.UNKNOWN: "entry_unknown",
}

# Bit 0 first: execute, write, read
_PERMISSION_NAMES: tuple[str, ...] = ("Executable", "Writable", "Readable")


def type_tag(mode: int) -> EntryType:
    """Classify raw mode bits. Unrecognized patterns map to UNKNOWN."""
    return _MODE_TYPES.get(stat.S_IFMT(mode), EntryType.UNKNOWN)


def type_description(tag: EntryType) -> str:
    return TYPE_DESCRIPTIONS.get(tag, TYPE_DESCRIPTIONS[EntryType.UNKNOWN])


def display_color(tag: EntryType) -> str:
    """Theme style used to print entries of this type."""
    return TYPE_STYLES.get(tag, TYPE_STYLES[EntryType.UNKNOWN])


def permission_phrase(bits: int) -> str:
    """Describe a 3-bit rwx mask, e.g. 0o5 -> "Executable, Readable".

    Returns an empty string when no bit is set.
    """
    return ", ".join(name for i, name in enumerate(_PERMISSION_NAMES) if bits & (1 << i))


def permission_slices(mode: int) -> tuple[int, int, int]:
    """Split mode bits into (owner, group, other) rwx masks."""
    return (
        (mode & stat.S_IRWXU) >> 6,
        (mode & stat.S_IRWXG) >> 3,
        mode & stat.S_IRWXO,
    )


def permission_octal(mode: int) -> str:
    """Three-digit octal form of the rwx bits, e.g. "644"."""
    return f"{mode & 0o777:03o}"
