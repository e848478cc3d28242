"""
EPR CLI - Main entry point.

Commands:
    epr event search    - Search for event objects
    epr version         - Show the CLI version
"""

import logging

import typer

from ..config import get_settings
from ..errors import EprError
from .commands import event

app = typer.Typer(
    name="epr",
    help="EPR CLI - Query the Event Provenance Registry.",
    no_args_is_help=True,
)

# Register command groups
app.add_typer(event.app, name="event", help="Work with event objects.")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr."
    ),
):
    """
    Configure logging for all commands.
    """
    if verbose:
        level = "DEBUG"
    else:
        try:
            level = get_settings().log_level
        except EprError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def version():
    """
    Show the EPR CLI version.
    """
    from epr import __version__
    typer.echo(f"EPR CLI v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
