"""
Client library for searching the Event Provenance Registry.

The registry exposes its query surface over GraphQL; this client sends a
single request per search and returns the matching events as plain mappings.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Protocol

import httpx
from pydantic import ValidationError

from ..errors import DecodeError, ServiceError, TransportError
from ..models import EventSearchResponse, GraphQLRequest
from ..schema import describe_fields

logger = logging.getLogger(__name__)

GRAPHQL_PATH = "/api/v1/graphql/query"

EVENT_SEARCH_QUERY = "query ($obj: FindEventInput!){events(event: $obj) {%s}}"


class SearchClient(Protocol):
    """Anything that can run an event search."""

    def search_events(
        self, params: Mapping[str, Any], fields: Iterable[str]
    ) -> List[Dict[str, Any]]:
        ...


def build_event_query(params: Mapping[str, Any], fields: Iterable[str]) -> GraphQLRequest:
    """Build the GraphQL request for an event search."""
    return GraphQLRequest(
        query=EVENT_SEARCH_QUERY % describe_fields(fields),
        variables={"obj": dict(params)},
    )


class RegistryClient:
    """
    Client for the Event Provenance Registry API.

    Usage:
        with RegistryClient("http://localhost:8042") as client:
            events = client.search_events({"id": "e1"}, {"id", "name"})
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        """
        Initialize the registry client.

        Args:
            base_url: Base URL of the registry service (e.g., "http://localhost:8042")
            timeout: HTTP request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(timeout=timeout)

    @property
    def graphql_endpoint(self) -> str:
        return f"{self.base_url}{GRAPHQL_PATH}"

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def search_events(
        self, params: Mapping[str, Any], fields: Iterable[str]
    ) -> List[Dict[str, Any]]:
        """
        Search for events.

        Args:
            params: Filter values keyed by event attribute (e.g. {"id": "e1"})
            fields: Event attributes to return for each match

        Returns:
            Matching events, in the order returned by the service

        Raises:
            TransportError: If the service could not be reached
            ServiceError: If the service answered with a failure
            DecodeError: If the response is not a valid search result
        """
        request = build_event_query(params, fields)
        logger.debug(f"Searching events at {self.graphql_endpoint}: {request.query}")

        try:
            response = self._client.post(
                self.graphql_endpoint,
                json=request.model_dump(),
            )
        except (httpx.TransportError, httpx.InvalidURL) as e:
            logger.error(f"Event search failed: {e}")
            raise TransportError(f"could not reach {self.base_url}: {e}") from e

        if not response.is_success:
            logger.error(f"Event search returned HTTP {response.status_code}")
            raise ServiceError(
                f"registry returned HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
                payload=response.text,
            )

        try:
            result = EventSearchResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise DecodeError(f"invalid search response: {e}") from e

        if result.errors:
            messages = "; ".join(error.message for error in result.errors)
            logger.error(f"Event search failed: {messages}")
            raise ServiceError(
                f"registry error: {messages}",
                status_code=response.status_code,
                payload=[error.model_dump() for error in result.errors],
            )
        if result.data is None:
            raise DecodeError("search response carries no data")

        logger.debug(f"Event search returned {len(result.data.events)} event(s)")
        return result.data.events
