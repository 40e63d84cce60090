"""Request construction: endpoints, descriptors, and the request builder.

A facade method names an :class:`Endpoint` and hands its typed arguments to
:meth:`RequestBuilder.build`, which produces an immutable
:class:`RequestDescriptor` ready for the transport. The builder:

1. Percent-encodes path segments into the endpoint's path template.
2. Encodes the query model (absent fields omitted, enums as wire tokens,
   lists comma-joined, booleans as ``true``/``false``) and appends the
   pagination cursor.
3. Serialises the body model, generating a fresh ``idempotencyKey`` for
   bodies that carry one and were not given a caller key.
4. Attaches ``Authorization``, a fresh ``X-Request-Id``, ``X-User-Token`` for
   session-scoped endpoints, and ``Content-Type`` for body-carrying calls.

Caller input that cannot be sent raises
:class:`~circle_w3s.exceptions.InvalidParamError` before anything reaches
the network.
"""

from __future__ import annotations

import enum
import string
import uuid
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union
from urllib.parse import quote

from pydantic import BaseModel

from circle_w3s.auth.credential import Credential, UserToken
from circle_w3s.client.pagination import PageCursor
from circle_w3s.exceptions import InvalidParamError
from circle_w3s.models import HTTPMethod

HEADER_AUTHORIZATION = "Authorization"
HEADER_REQUEST_ID = "X-Request-Id"
HEADER_USER_TOKEN = "X-User-Token"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"

JSON_MEDIA_TYPE = "application/json"
IDEMPOTENCY_FIELD = "idempotency_key"

_SECRET_HEADERS = frozenset({HEADER_AUTHORIZATION, HEADER_USER_TOKEN})

PathSegment = Union[str, enum.Enum]


def new_request_id() -> str:
    """Return a fresh ``X-Request-Id`` value (UUID v4)."""
    return str(uuid.uuid4())


def new_idempotency_key() -> str:
    """Return a fresh body ``idempotencyKey`` value (UUID v4)."""
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Endpoint:
    """One remote operation.

    Args:
        name: Operation name, used in log records.
        method: HTTP method.
        path: Path template with one ``{}`` per path segment,
            e.g. ``/v1/w3s/wallets/{}``.
        response: Model the success-range body is decoded into.
        session: Whether the call needs an ``X-User-Token``.
    """

    name: str
    method: HTTPMethod
    path: str
    response: type[BaseModel]
    session: bool = False

    @property
    def arity(self) -> int:
        """Number of path segments the template expects."""
        return sum(1 for _, name, _, _ in string.Formatter().parse(self.path) if name is not None)


@dataclass(frozen=True)
class RequestDescriptor:
    """Immutable description of one HTTP request.

    ``query`` and ``headers`` are read-only mappings. The descriptor's
    ``repr()`` never includes credential header values.
    """

    method: str
    path: str
    query: Mapping[str, str] = field(default_factory=dict)
    body: Optional[Any] = None
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def request_id(self) -> str:
        return self.headers.get(HEADER_REQUEST_ID, "")

    def __repr__(self) -> str:
        shown = {
            name: ("<redacted>" if name in _SECRET_HEADERS else value)
            for name, value in self.headers.items()
        }
        return (
            f"RequestDescriptor(method={self.method!r}, path={self.path!r}, "
            f"query={dict(self.query)!r}, has_body={self.body is not None}, headers={shown!r})"
        )


class RequestBuilder:
    """Assembles :class:`RequestDescriptor` objects for one credential.

    The builder holds no per-call state and may be shared by concurrent
    calls.
    """

    def __init__(self, credential: Credential):
        self._credential = credential

    def build(
        self,
        endpoint: Endpoint,
        path_params: Sequence[PathSegment] = (),
        params: Optional[BaseModel] = None,
        cursor: Optional[PageCursor] = None,
        body: Optional[BaseModel] = None,
        user_token: Optional[Union[str, UserToken]] = None,
    ) -> RequestDescriptor:
        """Build the request for ``endpoint``.

        Raises:
            InvalidParamError: For a wrong number of path segments, an empty
                segment, an empty required field, an invalid page size, or a
                session-scoped call without a user token.
        """
        path = render_path(endpoint, path_params)

        query: dict[str, str] = {}
        if params is not None:
            check_required(params)
            query.update(encode_query(params))
        if cursor is not None:
            query.update(cursor.to_query())

        payload: Optional[dict[str, Any]] = None
        if body is not None:
            check_required(body)
            payload = encode_body(body)

        headers = {
            HEADER_AUTHORIZATION: self._credential.authorization(),
            HEADER_REQUEST_ID: new_request_id(),
            HEADER_ACCEPT: JSON_MEDIA_TYPE,
        }
        if endpoint.session:
            token = _as_user_token(user_token, endpoint)
            headers[HEADER_USER_TOKEN] = token.header_value()
        if payload is not None:
            headers[HEADER_CONTENT_TYPE] = JSON_MEDIA_TYPE

        return RequestDescriptor(
            method=endpoint.method.value,
            path=path,
            query=query,
            body=payload,
            headers=headers,
        )


# ------------------------------------------------------------------ #
# Encoding helpers
# ------------------------------------------------------------------ #


def render_path(endpoint: Endpoint, segments: Sequence[PathSegment]) -> str:
    """Fill the endpoint's path template with percent-encoded segments."""
    if len(segments) != endpoint.arity:
        raise InvalidParamError(
            f"{endpoint.name} expects {endpoint.arity} path segment(s), got {len(segments)}"
        )
    encoded = []
    for segment in segments:
        value = segment.value if isinstance(segment, enum.Enum) else segment
        if not isinstance(value, str) or not value.strip():
            raise InvalidParamError(f"{endpoint.name}: path segment must be a non-empty string")
        encoded.append(quote(value, safe=""))
    return endpoint.path.format(*encoded)


def encode_query(params: BaseModel) -> dict[str, str]:
    """Encode a query model into wire names and string values.

    Fields that are ``None`` and empty optional lists are omitted.
    """
    query: dict[str, str] = {}
    for name, value in params.model_dump(mode="json", by_alias=True, exclude_none=True).items():
        if isinstance(value, list):
            if not value:
                continue
            query[name] = ",".join(_scalar(item) for item in value)
        else:
            query[name] = _scalar(value)
    return query


def encode_body(body: BaseModel) -> dict[str, Any]:
    """Serialise a body model, adding a fresh idempotency key when it has none.

    The caller's model is not modified, so sending the same model twice
    produces two different generated keys.
    """
    payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    fields = type(body).model_fields
    if IDEMPOTENCY_FIELD in fields and getattr(body, IDEMPOTENCY_FIELD) is None:
        wire_name = fields[IDEMPOTENCY_FIELD].alias or IDEMPOTENCY_FIELD
        payload[wire_name] = new_idempotency_key()
    return payload


def check_required(model: BaseModel) -> None:
    """Reject required string fields that are blank and required lists that are empty."""
    for name, info in type(model).model_fields.items():
        if not info.is_required():
            continue
        value = getattr(model, name)
        if isinstance(value, str) and not value.strip():
            raise InvalidParamError(f"{type(model).__name__}.{name} must not be empty")
        if isinstance(value, (list, tuple)) and not value:
            raise InvalidParamError(f"{type(model).__name__}.{name} must not be empty")


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _as_user_token(user_token: Optional[Union[str, UserToken]], endpoint: Endpoint) -> UserToken:
    if user_token is None:
        raise InvalidParamError(f"{endpoint.name} requires a user token")
    if isinstance(user_token, UserToken):
        return user_token
    return UserToken(user_token)
