"""
Event search pipeline.

resolve fields -> build filter -> compile projection -> (dry run preview)
-> search -> format. Every stage raises on failure; nothing is retried and
no partial output is produced.
"""
import logging
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_URL
from .output import compile_jsonpath, format_results
from .registry.client import RegistryClient, SearchClient
from .schema import EVENT_SCHEMA, describe_fields, describe_types, resolve_fields

logger = logging.getLogger(__name__)

DEFAULT_FIELDS = "id name version multipass"


class SearchOptions(BaseModel):
    """Inputs of one ``event search`` invocation."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", description="Event id to filter on; empty means no filter.")
    fields: str = Field(
        default=DEFAULT_FIELDS,
        description="Space delimited list of fields, or 'all'."
    )
    jsonpath: str = Field(default="", description="JSONPath expression applied to output.")
    url: str = Field(default=DEFAULT_URL, description="Registry base URL.")
    dry_run: bool = Field(default=False, description="Preview the request without sending it.")
    no_indent: bool = Field(default=False, description="Emit compact JSON.")
    timeout: float = Field(default=30.0, description="HTTP request timeout in seconds.")


def build_filter(id: str = "", **extra: Optional[str]) -> Dict[str, Any]:
    """
    Assemble search filters, leaving out empty ones.

    An empty value means "no filter", which the service treats differently
    from filtering on an empty string.
    """
    params: Dict[str, Any] = {}
    if id:
        params["id"] = id
    for key, value in extra.items():
        if value:
            params[key] = value
    return params


def render_preview(options: SearchOptions, fields: Iterable[str]) -> str:
    """Describe the request a search would send, one item per line."""
    lines = [
        f"ID: {options.id}",
        f"Fields: {describe_fields(fields)}",
        f"Types: {describe_types(fields, EVENT_SCHEMA)}",
        f"URL: {options.url}",
    ]
    if options.jsonpath:
        lines.append(f"JSONPath: {options.jsonpath}")
    return "\n".join(lines) + "\n"


def run_search(options: SearchOptions, client: Optional[SearchClient] = None) -> str:
    """
    Run an event search and render its output.

    Args:
        options: Search inputs
        client: Search client to use; a RegistryClient for ``options.url``
            is created (and closed) when omitted

    Returns:
        Text to print: the dry run preview or the rendered JSON
    """
    fields = resolve_fields(options.fields, EVENT_SCHEMA)
    params = build_filter(id=options.id)
    path = compile_jsonpath(options.jsonpath)

    if options.dry_run:
        logger.debug("Dry run, skipping event search")
        return render_preview(options, fields)

    if client is None:
        with RegistryClient(options.url, timeout=options.timeout) as registry:
            events = registry.search_events(params, fields)
    else:
        events = client.search_events(params, fields)

    return format_results(events, jsonpath=path, compact=options.no_indent)
