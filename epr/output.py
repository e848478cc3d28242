"""
Rendering of search results: optional JSONPath projection, then JSON.
"""
import json
from typing import Any, Optional, Sequence, Union

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse
from jsonpath_ng.jsonpath import JSONPath

from .errors import EncodeError, ProjectionError

INDENT = 2


def compile_jsonpath(expr: Optional[str]) -> Optional[JSONPath]:
    """
    Parse a JSONPath expression.

    Returns None for an empty expression.

    Raises:
        ProjectionError: If the expression is not valid JSONPath
    """
    if not expr:
        return None
    try:
        return parse(expr)
    except JSONPathError as e:
        raise ProjectionError(f"invalid jsonpath {expr!r}: {e}") from e


def project(data: Any, path: JSONPath) -> Any:
    """
    Apply a compiled JSONPath to data.

    A single match yields the matched value, several matches yield the list
    of values, and no match yields an empty list.
    """
    values = [match.value for match in path.find(data)]
    if len(values) == 1:
        return values[0]
    return values


def to_json(data: Any, compact: bool = False) -> str:
    """
    Serialize data to JSON followed by a newline.

    Raises:
        EncodeError: If data holds a value JSON cannot represent
    """
    try:
        if compact:
            content = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        else:
            content = json.dumps(data, indent=INDENT, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"could not encode results: {e}") from e
    return content + "\n"


def format_results(
    results: Sequence[Any],
    jsonpath: Union[str, JSONPath, None] = None,
    compact: bool = False,
) -> str:
    """
    Render search results.

    Args:
        results: Events as returned by the registry
        jsonpath: Optional JSONPath (string or compiled) applied to the
            result list before serialization
        compact: Emit single-line JSON instead of 2-space indented JSON

    Returns:
        The rendered JSON, newline terminated
    """
    data: Any = list(results)
    if isinstance(jsonpath, str):
        jsonpath = compile_jsonpath(jsonpath)
    if jsonpath is not None:
        data = project(data, jsonpath)
    return to_json(data, compact=compact)
