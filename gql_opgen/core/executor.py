"""Transport for sending generated documents to a GraphQL endpoint.

Handles HTTP communication, error handling, and response parsing. Builders
never perform I/O themselves; this module is the seam where their output
is handed to the network.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

import httpx

from .errors import GraphQLResponseError
from .query_builder import OperationCatalog

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Protocol for anything that can execute a GraphQL document."""

    async def send(
        self,
        document: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send the document and return the 'data' portion of the response."""
        ...


class HttpTransport:
    """Posts GraphQL documents over HTTP with httpx.

    Examples:
        transport = HttpTransport(url, headers={"Authorization": f"Bearer {token}"})
    """

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        *,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize the transport.

        Args:
            url: GraphQL endpoint URL
            headers: Extra request headers, e.g. for authentication
            timeout: Request timeout in seconds
            client: Preconfigured client to use instead of creating one
        """
        self.url = url
        self.timeout = timeout
        self._headers = {"Content-Type": "application/json", **(headers or {})}
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=self._headers,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def send(
        self,
        document: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a raw GraphQL document.

        Raises:
            GraphQLResponseError: If the response contains errors
            httpx.HTTPStatusError: If the server answers with an error status
        """
        client = await self._get_client()

        payload: dict[str, Any] = {"query": document}
        if variables:
            payload["variables"] = variables

        response = await client.post(self.url, json=payload, headers=self._headers)
        response.raise_for_status()

        result = response.json()

        if result.get("errors"):
            error_messages = "; ".join(e.get("message", str(e)) for e in result["errors"])
            raise GraphQLResponseError(f"GraphQL errors: {error_messages}", result["errors"])

        return result.get("data") or {}


class GraphQLExecutor:
    """Runs catalog operations through a transport.

    Examples:
        executor = GraphQLExecutor(catalog, HttpTransport(url))
        blocks = await executor.execute("listBlocks", {"paging": {"size": 10}})
    """

    def __init__(self, catalog: OperationCatalog, transport: Transport):
        self.catalog = catalog
        self.transport = transport

    async def execute(
        self,
        name: str,
        values: Mapping[str, Any] | None = None,
        *,
        ignore_fields: Sequence[str] | None = None,
    ) -> Any:
        """Build the named operation and return its result field.

        Raises:
            KeyError: If the catalog has no such operation
        """
        builder = self.catalog.get(name)
        document = builder(values, ignore_fields=ignore_fields)
        logger.debug("Executing %s %s", builder.operation_type, name)
        data = await self.transport.send(document)
        return data.get(name)
