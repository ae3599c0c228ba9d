"""Authentication handlers for introspection requests.

Provides pluggable authentication via the Auth protocol.
"""

from typing import Dict, Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Example:
        class TenantAuth:
            def __init__(self, token: str, tenant: str):
                self.token = token
                self.tenant = tenant

            def get_headers(self) -> dict[str, str]:
                return {
                    "Authorization": f"Bearer {self.token}",
                    "X-Tenant-ID": self.tenant,
                }
    """

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in requests."""
        ...


class BearerAuth:
    """Bearer token authentication.

    Args:
        token: The bearer token
    """

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """Custom headers authentication.

    Args:
        headers: Dictionary of headers to include

    Example:
        auth = HeaderAuth.from_strings(["X-API-Key: key123"])
    """

    def __init__(self, headers: Dict[str, str]):
        self._headers = headers

    @classmethod
    def from_strings(cls, headers: list[str]) -> "HeaderAuth":
        """Build from "Name: value" strings, as given on the command line."""
        return cls(dict(parse_header(h) for h in headers))

    def get_headers(self) -> Dict[str, str]:
        return self._headers.copy()


class CombinedAuth:
    """Merges headers of several handlers; later handlers win."""

    def __init__(self, *handlers: Auth):
        self.handlers = handlers

    def get_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        for handler in self.handlers:
            headers.update(handler.get_headers())
        return headers


class NoAuth:
    """No authentication (for public APIs or testing)."""

    def get_headers(self) -> Dict[str, str]:
        return {}


def parse_header(header: str) -> tuple[str, str]:
    """Split a "Name: value" header string at the first colon.

    Raises:
        ValueError: If there is no colon or the name is empty.
    """
    name, sep, value = header.partition(":")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Invalid header {header!r}, expected 'Name: value'")
    return name, value.strip()
