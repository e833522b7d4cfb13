"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import io
from pathlib import Path

import pytest
from lsinfo.core.config import ListingConfig
from lsinfo.core.theme import get_theme
from lsinfo.listing.renderer import EntryRenderer
from rich.console import Console


@pytest.fixture
def listing_tree(tmp_path: Path) -> Path:
    """Directory containing b.txt, a.txt and the subdirectory z."""
    root = tmp_path / "tree"
    root.mkdir()
    (root / "b.txt").write_text("bravo")
    (root / "a.txt").write_text("alpha")
    (root / "z").mkdir()
    return root


@pytest.fixture
def output() -> io.StringIO:
    """Buffer receiving renderer output."""
    return io.StringIO()


@pytest.fixture
def capture_console(output: io.StringIO) -> Console:
    """Themed console writing plain text into the output buffer."""
    return Console(
        file=output,
        theme=get_theme(),
        width=200,
        emoji=False,
        highlight=False,
    )


@pytest.fixture
def renderer(capture_console: Console) -> EntryRenderer:
    """Renderer printing to the capture console with default settings."""
    return EntryRenderer(console=capture_console, config=ListingConfig())
