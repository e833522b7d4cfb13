"""Directory listing module.

This module provides the path model, entry classification, input
collection, traversal engine and renderer for listing filesystem
entries.
"""

from lsinfo.listing.classifier import EntryType
from lsinfo.listing.collection import PathCollection
from lsinfo.listing.metadata import EntryMetadata, probe_entry
from lsinfo.listing.node import PathNode
from lsinfo.listing.renderer import EntryRenderer
from lsinfo.listing.traversal import (
    DisplayMode,
    EntryFailure,
    ListingOptions,
    TraversalEngine,
    TraversalResult,
    select_display_mode,
)

__all__ = [
    "DisplayMode",
    "EntryFailure",
    "EntryMetadata",
    "EntryRenderer",
    "EntryType",
    "ListingOptions",
    "PathCollection",
    "PathNode",
    "TraversalEngine",
    "TraversalResult",
    "probe_entry",
    "select_display_mode",
]
