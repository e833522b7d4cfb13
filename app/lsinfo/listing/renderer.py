"""Rich output for listed entries.

Two shapes are produced: a one-line brief row used for listings, and a
labeled multi-line detail report used when a single file is inspected.
"""

import os

from rich.console import Console
from rich.markup import escape

from lsinfo.core.config import ListingConfig
from lsinfo.listing.classifier import (
    display_color,
    permission_octal,
    permission_phrase,
    permission_slices,
    type_description,
)
from lsinfo.listing.metadata import EntryMetadata, group_name, owner_name
from lsinfo.listing.node import PathNode
from lsinfo.utils.formatting import format_size, format_timestamp, printable

DETAIL_SEPARATOR = "-" * 29


def _text(text: str) -> str:
    return escape(printable(text))


class EntryRenderer:
    """Prints entries to a Rich console.

    Args:
        console: Console to print to. Defaults to the shared stdout console.
        config: Listing configuration (time format, color).
    """

    def __init__(self, console: Console | None = None, config: ListingConfig | None = None) -> None:
        if console is None:
            from lsinfo.utils.formatting import console as default_console

            console = default_console
        self._console = console
        self._config = config or ListingConfig()

    def _print(self, markup: str) -> None:
        self._console.print(markup, soft_wrap=True, highlight=False)

    def _styled(self, text: str, style: str) -> str:
        if not self._config.color:
            return _text(text)
        return f"[{style}]{_text(text)}[/]"

    def _time(self, timestamp: float, width: int = 0) -> str:
        return escape(format_timestamp(timestamp, self._config.time_format).ljust(width))

    def brief_row(self, node: PathNode, meta: EntryMetadata) -> str:
        """Build the markup for one brief listing row."""
        path = self._styled(node.display_path(), display_color(meta.entry_type))
        link = f" -> {_text(meta.link_target)}" if meta.link_target is not None else ""
        return (
            f"| {meta.entry_type.value}-{permission_octal(meta.mode)} "
            f"{self._time(meta.mtime, 21)} "
            f"{format_size(meta.size_bytes):>10} "
            f"{path}{link}"
        )

    def render_brief(self, node: PathNode, meta: EntryMetadata) -> None:
        self._print(self.brief_row(node, meta))

    def render_detail(self, node: PathNode, meta: EntryMetadata) -> None:
        """Print the full report for a single entry."""
        display = node.display_path()
        full_path = os.path.realpath(node.resolve_path())
        owner, group, other = permission_slices(meta.mode)

        lines = [
            self._styled(f"Information for '{display}'", "header"),
            self._styled(DETAIL_SEPARATOR, "muted"),
            f"Owner: {_text(owner_name(meta.uid))}",
            f"Group: {_text(group_name(meta.gid))}",
            f"Type: {type_description(meta.entry_type)}",
            f"Full path: {self._styled(full_path, display_color(meta.entry_type))}",
        ]
        if meta.link_target is not None:
            lines.append(f"Link: {_text(meta.link_target)}")
        lines += [
            f"Size: {format_size(meta.size_bytes)}",
            f"Date Modified: {self._time(meta.mtime)}",
            f"Date Access: {self._time(meta.atime)}",
            f"Date Metadata Changed: {self._time(meta.ctime)}",
            "Permissions:",
            f"  Owner: {permission_phrase(owner)}",
            f"  Group: {permission_phrase(group)}",
            f"  Other: {permission_phrase(other)}",
        ]
        for line in lines:
            self._print(line)

    def render_section_label(self, path: str) -> None:
        """Print the blank line and "<path>:" heading above a directory listing."""
        self._print("")
        self._print(self._styled(f"{path}:", "header"))
