"""
Pydantic DTOs for the registry's GraphQL search endpoint.

Event records themselves are kept as plain mappings so that key order and
user-defined fields survive untouched; only the envelope is modeled here.
"""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BaseDTO(BaseModel):
    """
    Base configuration for all DTOs.

    Unknown keys sent by the service are ignored.
    """
    model_config = ConfigDict(extra="ignore")


class GraphQLRequest(BaseDTO):
    """A GraphQL query and its variables."""
    query: str = Field(..., description="GraphQL query document.")
    variables: Dict[str, Any] = Field(
        default_factory=dict,
        description="Values for the variables declared by the query."
    )


class GraphQLError(BaseDTO):
    """A single entry of a GraphQL ``errors`` list."""
    message: str = Field(..., description="Human-readable error message.")
    path: Optional[List[Any]] = Field(
        default=None,
        description="Path of the response field that failed, if any."
    )


class EventSearchData(BaseDTO):
    """The ``data`` member of an event search response."""
    events: List[Dict[str, Any]] = Field(
        ...,
        description="Matching events, in the order returned by the service."
    )


class EventSearchResponse(BaseDTO):
    """Response envelope of an event search."""
    data: Optional[EventSearchData] = Field(
        default=None,
        description="Query result; absent when the query failed."
    )
    errors: Optional[List[GraphQLError]] = Field(
        default=None,
        description="GraphQL errors reported by the service."
    )
