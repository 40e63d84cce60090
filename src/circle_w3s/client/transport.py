"""Pooled asynchronous HTTP transport.

:class:`Transport` owns one :class:`httpx.AsyncClient` for the lifetime of
a facade, so connections are reused across calls. It sends a
:class:`~circle_w3s.client.request.RequestDescriptor` and returns the raw
status and body bytes; it does not interpret either. Any failure before a
complete response is obtained (connect, TLS, timeout, protocol, redirect
limits, or a body that cannot be content-decoded) is raised as
:class:`~circle_w3s.exceptions.TransportError`. There is no retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from circle_w3s.client.request import RequestDescriptor
from circle_w3s.exceptions import TransportError


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of one HTTP response."""

    status_code: int
    body: bytes


class Transport:
    """Sends request descriptors over a shared connection pool.

    Args:
        base_url: Service root; request paths are appended to it.
        timeout: Per-call timeout in seconds, applied to connect, read,
            write and pool acquisition.
        verify_ssl: Whether to verify TLS certificates.
        transport: Optional :class:`httpx.AsyncBaseTransport` (e.g.
            :class:`httpx.MockTransport` or :class:`httpx.ASGITransport`)
            used instead of the network.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(timeout),
            verify=verify_ssl,
            follow_redirects=False,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def send(self, descriptor: RequestDescriptor) -> RawResponse:
        """Send one request and return its raw response.

        Raises:
            TransportError: If no HTTP response was obtained.
        """
        try:
            response = await self._client.request(
                descriptor.method,
                descriptor.path,
                params=dict(descriptor.query) or None,
                headers=dict(descriptor.headers),
                json=descriptor.body,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request timed out: {type(exc).__name__}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Request failed: {type(exc).__name__}: {exc}") from exc
        return RawResponse(status_code=response.status_code, body=response.content)

    async def aclose(self) -> None:
        """Close the connection pool."""
        await self._client.aclose()
