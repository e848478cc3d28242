"""
epr event - Commands for event objects.
"""

from typing import Optional

import typer

from ...config import get_settings
from ...errors import EprError
from ...search import DEFAULT_FIELDS, SearchOptions, run_search

app = typer.Typer(no_args_is_help=True)


@app.callback()
def event():
    """
    Work with event objects.
    """


@app.command(name="search", help="Searches for event objects.")
def search_events(
    id: str = typer.Option("", "--id", help="Id for the event"),
    fields: str = typer.Option(
        DEFAULT_FIELDS,
        "--fields",
        help="Space delimited list of fields, or 'all' for all user fields",
    ),
    jsonpath: str = typer.Option("", "--jsonpath", help="JSONPath expression to apply to output"),
    url: Optional[str] = typer.Option(
        None, "--url", help="EPR base url [default: $EPR_URL or http://localhost:8042]"
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="do a dry run of the command"),
    no_indent: bool = typer.Option(False, "--no-indent", help="do not indent the JSON output"),
):
    """
    Search the registry for events and print them as JSON.
    """
    try:
        settings = get_settings()
        options = SearchOptions(
            id=id,
            fields=fields,
            jsonpath=jsonpath,
            url=url or settings.url,
            dry_run=dry_run,
            no_indent=no_indent,
            timeout=settings.timeout,
        )
        output = run_search(options)
    except EprError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(output, nl=False)
