"""Request/response core shared by every circle_w3s facade.

Classes:
    :class:`BaseClient` -- facade base composing the pieces below.
    :class:`RequestBuilder` / :class:`RequestDescriptor` / :class:`Endpoint`
        -- request construction.
    :class:`Transport` -- pooled :class:`httpx.AsyncClient` wrapper.
    :class:`PageCursor` -- cursor pagination query fragment.
    :class:`Success`, :class:`ApiFailure`, :class:`DecodeFailure`,
    :class:`TransportFailure`, :class:`InvalidParam` -- call results.
"""

from circle_w3s.client.base import BaseClient
from circle_w3s.client.pagination import PageCursor
from circle_w3s.client.request import Endpoint, RequestBuilder, RequestDescriptor
from circle_w3s.client.response import (
    ApiFailure,
    ApiResult,
    DecodeFailure,
    InvalidParam,
    Success,
    TransportFailure,
    classify,
)
from circle_w3s.client.transport import RawResponse, Transport

__all__ = [
    "ApiFailure",
    "ApiResult",
    "BaseClient",
    "DecodeFailure",
    "Endpoint",
    "InvalidParam",
    "PageCursor",
    "RawResponse",
    "RequestBuilder",
    "RequestDescriptor",
    "Success",
    "Transport",
    "TransportFailure",
    "classify",
]
