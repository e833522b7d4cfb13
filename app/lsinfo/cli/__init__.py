"""CLI package for lsinfo.

This package contains the Typer application.
"""

from lsinfo.cli.main import app

__all__ = ["app"]
