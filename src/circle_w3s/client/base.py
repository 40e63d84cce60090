"""Shared core of the service facades.

:class:`BaseClient` composes the credential, the
:class:`~circle_w3s.client.request.RequestBuilder`, the pooled
:class:`~circle_w3s.client.transport.Transport` and the response
classifier. Each service facade subclasses it and adds one method per
remote operation, each a thin call to :meth:`BaseClient._call` with a
module-level :class:`~circle_w3s.client.request.Endpoint`.

A facade holds no mutable per-call state and is safe to share between
concurrent tasks. Cancelling one in-flight call does not affect the others.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar, Union

import httpx
from pydantic import BaseModel, SecretStr

from circle_w3s.auth.credential import Credential, UserToken
from circle_w3s.client.pagination import PageCursor
from circle_w3s.client.request import Endpoint, PathSegment, RequestBuilder
from circle_w3s.client.response import ApiResult, InvalidParam, TransportFailure, classify
from circle_w3s.client.transport import Transport
from circle_w3s.exceptions import InvalidParamError, TransportError
from circle_w3s.models import DEFAULT_BASE_URL, ClientConfig

logger = logging.getLogger(__name__)

ClientT = TypeVar("ClientT", bound="BaseClient")


class BaseClient:
    """Base class for the W3S service facades.

    Args:
        api_key: Primary API key. An empty key raises
            :class:`~circle_w3s.exceptions.InvalidParamError`.
        base_url: Service root, e.g. a local mock server.
        timeout: Per-call timeout in seconds.
        verify_ssl: Whether to verify TLS certificates.
        transport: Optional :class:`httpx.AsyncBaseTransport` used instead
            of the network.

    Example::

        async with DeveloperWalletsClient(api_key) as client:
            result = await client.get_wallet("w-1")
    """

    def __init__(
        self,
        api_key: Union[str, SecretStr, Credential],
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        credential = api_key if isinstance(api_key, Credential) else Credential(api_key)
        if not base_url or not base_url.strip():
            raise InvalidParamError("base_url must not be empty")
        self._builder = RequestBuilder(credential)
        self._transport = Transport(
            base_url,
            timeout=timeout,
            verify_ssl=verify_ssl,
            transport=transport,
        )

    @classmethod
    def from_config(
        cls: type[ClientT],
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> ClientT:
        """Construct the facade from a :class:`~circle_w3s.models.ClientConfig`."""
        return cls(
            config.api_key,
            config.base_url,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self.base_url!r}, api_key=<redacted>)"

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    async def __aenter__(self: ClientT) -> ClientT:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release pooled connections. The facade cannot be used afterwards."""
        await self._transport.aclose()

    # ------------------------------------------------------------------ #
    # Dispatch
    # ------------------------------------------------------------------ #

    async def _call(
        self,
        endpoint: Endpoint,
        *path_params: PathSegment,
        params: Optional[BaseModel] = None,
        cursor: Optional[PageCursor] = None,
        body: Optional[BaseModel] = None,
        user_token: Optional[Union[str, UserToken]] = None,
    ) -> ApiResult:
        """Build, send and classify one call to ``endpoint``."""
        # 1. Build
        try:
            descriptor = self._builder.build(
                endpoint,
                path_params,
                params=params,
                cursor=cursor,
                body=body,
                user_token=user_token,
            )
        except InvalidParamError as exc:
            logger.debug("%s rejected locally: %s", endpoint.name, exc.message)
            return InvalidParam(exc.message)

        # 2. Send
        logger.debug(
            "%s %s %s (%s)", descriptor.method, descriptor.path, descriptor.request_id, endpoint.name,
        )
        try:
            raw = await self._transport.send(descriptor)
        except TransportError as exc:
            logger.warning("%s failed before a response: %s", endpoint.name, exc.message)
            return TransportFailure(cause=exc.message, request_id=descriptor.request_id)

        # 3. Classify
        result = classify(raw.status_code, raw.body, endpoint.response, descriptor.request_id)
        logger.debug(
            "%s -> HTTP %d %s (%s)",
            endpoint.name, raw.status_code, type(result).__name__, descriptor.request_id,
        )
        return result
