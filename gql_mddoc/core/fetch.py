"""Fetches an introspection result from a GraphQL endpoint.

Handles HTTP communication and GraphQL error responses. Decoding is left to
the decoder.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

import httpx
from graphql import get_introspection_query

from .auth import Auth, NoAuth
from .errors import IntrospectionError

logger = logging.getLogger(__name__)

INTROSPECTION_QUERY = get_introspection_query(descriptions=True)


class IntrospectionClient:
    """Runs the introspection query against an endpoint.

    Examples:
        async with IntrospectionClient(url, auth=BearerAuth(token)) as client:
            payload = await client.fetch()
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (implements Auth protocol)
            timeout: Request timeout in seconds
            transport: Optional httpx transport, mainly for tests
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth or NoAuth()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            headers.update(self._auth.get_headers())

            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "IntrospectionClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def fetch(self) -> dict[str, Any]:
        """Execute the introspection query.

        Returns:
            The full response body, i.e. ``{"data": {"__schema": ...}}``

        Raises:
            httpx.HTTPError: On transport errors or non-2xx responses
            IntrospectionError: If the response contains errors and no data
        """
        client = await self._get_client()

        logger.debug("Posting introspection query to %s", self.url)
        response = await client.post(
            self.url,
            json={"query": INTROSPECTION_QUERY, "operationName": "IntrospectionQuery"},
        )
        response.raise_for_status()

        result = response.json()
        if not isinstance(result, Mapping):
            raise IntrospectionError(f"Response body is not a JSON object: {type(result).__name__}", [])

        errors = result.get("errors")
        if errors and not result.get("data"):
            if not isinstance(errors, list):
                errors = [errors]
            error_messages = "; ".join(
                e.get("message", str(e)) if isinstance(e, Mapping) else str(e) for e in errors
            )
            raise IntrospectionError(f"GraphQL errors: {error_messages}", errors)

        return result


def fetch_introspection(
    url: str,
    auth: Auth | None = None,
    *,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """Synchronous wrapper around IntrospectionClient.fetch()."""

    async def _fetch() -> dict[str, Any]:
        async with IntrospectionClient(url, auth, timeout=timeout, transport=transport) as client:
            return await client.fetch()

    return asyncio.run(_fetch())
