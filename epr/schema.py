"""
Declared attribute registry for registry entities and field selection.

Field selection names which Event attributes the registry should return.
Names are checked against a statically declared schema so that a typo is
rejected locally, before any request is sent.
"""
from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, List, Mapping, Sequence, Union

from .errors import UnknownFieldError


ALL_FIELDS = "all"


class FieldSchema:
    """
    Immutable mapping of attribute name to value type for one entity.

    Usage:
        schema = FieldSchema("Widget", {"id": str, "size": int})
        "id" in schema          # True
        schema.names()          # frozenset({"id", "size"})
    """

    def __init__(self, name: str, fields: Mapping[str, type]):
        self.name = name
        self._fields = MappingProxyType(dict(fields))

    @property
    def fields(self) -> Mapping[str, type]:
        return self._fields

    def names(self) -> FrozenSet[str]:
        return frozenset(self._fields)

    def type_of(self, field: str) -> type:
        if field not in self._fields:
            raise UnknownFieldError([field])
        return self._fields[field]

    def __contains__(self, field: object) -> bool:
        return field in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldSchema({self.name!r}, {sorted(self._fields)!r})"


EVENT_SCHEMA = FieldSchema(
    "Event",
    {
        "id": str,
        "name": str,
        "version": str,
        "release": str,
        "platform_id": str,
        "package": str,
        "description": str,
        "payload": dict,
        "success": bool,
        "multipass": bool,
        "event_receiver_id": str,
        "created_at": str,
    },
)


def split_fields(requested: Union[str, Sequence[str]]) -> List[str]:
    """Flatten a whitespace-delimited string or list of strings into names."""
    if isinstance(requested, str):
        return requested.split()
    names = []
    for item in requested:
        names.extend(item.split())
    return names


def resolve_fields(
    requested: Union[str, Sequence[str]],
    schema: FieldSchema = EVENT_SCHEMA,
) -> FrozenSet[str]:
    """
    Validate or expand a field selection against a schema.

    Args:
        requested: Field names, either as a whitespace-delimited string or a
            sequence; the single name ``all`` selects every declared attribute
        schema: Schema the names must belong to

    Returns:
        The selected field names

    Raises:
        UnknownFieldError: If any name is not declared by the schema (all
            offending names are reported) or nothing was requested
    """
    names = split_fields(requested)
    if not names:
        raise UnknownFieldError([], message="no fields requested")

    if names == [ALL_FIELDS]:
        return schema.names()

    unknown = [name for name in names if name not in schema]
    if unknown:
        raise UnknownFieldError(unknown)
    return frozenset(names)


def describe_fields(fields: Iterable[str]) -> str:
    """Render a field selection in a stable order."""
    return " ".join(sorted(fields))



def describe_types(fields: Iterable[str], schema: FieldSchema = EVENT_SCHEMA) -> str:
    """Render each selected field with its declared value type, e.g. ``id:str``."""
    return " ".join(f"{name}:{schema.type_of(name).__name__}" for name in sorted(fields))
