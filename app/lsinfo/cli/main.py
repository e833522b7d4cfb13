"""Main CLI application entry point.

Defines the Typer application: a single command that lists the given
paths, or the current directory when none are given.
"""

from typing import Annotated

import typer

from lsinfo import __version__
from lsinfo.core.config import ConfigError, ListingConfig, load_config
from lsinfo.core.log import configure_logging
from lsinfo.listing.collection import PathCollection
from lsinfo.listing.renderer import EntryRenderer
from lsinfo.listing.traversal import ListingOptions, TraversalEngine
from lsinfo.utils.formatting import console, print_warning

BRIEF_DESCRIPTION = "lists directory"

ENTRY_LEGEND = (
    "[bold]Entry types:[/bold]\n\n"
    "  b - block device\n\n"
    "  c - char device\n\n"
    "  d - directory\n\n"
    "  p - fifo pipe\n\n"
    "  l - symbolic link file\n\n"
    "  f - regular file\n\n"
    "  s - socket\n\n"
    "  ? - unknown\n\n"
    "[bold]Permissions:[/bold] <owner><group><other>"
)

app = typer.Typer(
    name="lsinfo",
    help="List files and directories with their metadata.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"lsinfo version {__version__}")
        raise typer.Exit()


def brief_description_callback(value: bool) -> None:
    """Print the one-line tool description and exit."""
    if value:
        typer.echo(BRIEF_DESCRIPTION)
        raise typer.Exit()


def _load_config(no_color: bool) -> ListingConfig:
    try:
        config = load_config()
    except ConfigError as e:
        print_warning(f"{e}. Using default settings.")
        config = ListingConfig()
    if no_color:
        config = config.model_copy(update={"color": False})
    return config


@app.command(epilog=ENTRY_LEGEND)
def main(
    paths: Annotated[
        list[str] | None,
        typer.Argument(
            help="Paths to list. Defaults to the current directory.",
            show_default=False,
        ),
    ] = None,
    recursive: Annotated[
        bool,
        typer.Option(
            "--recursive",
            "-r",
            help="Recursive listing (not implemented yet, lists one level).",
        ),
    ] = False,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Do not color entry paths."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    brief_description: Annotated[
        bool | None,
        typer.Option(
            "--brief-description",
            callback=brief_description_callback,
            is_eager=True,
            hidden=True,
        ),
    ] = None,
) -> None:
    """List files and directories with their metadata.

    A single file is shown as a detailed report; everything else is
    listed one row per entry.
    """
    configure_logging(verbose)
    config = _load_config(no_color)

    if recursive:
        print_warning("Recursive listing is not implemented yet; listing one level only.")

    collection = PathCollection.from_arguments(paths)
    engine = TraversalEngine(EntryRenderer(console=console, config=config))
    engine.run(collection, ListingOptions(recursive=recursive))


if __name__ == "__main__":
    app()
