"""API results and the response classifier.

Every facade call yields exactly one result variant:

- :class:`Success` -- success-range status, body decoded into the payload model.
- :class:`ApiFailure` -- error-range status; ``code``/``message`` from the
  ``{code, message}`` body, or the HTTP status and a generic message.
- :class:`DecodeFailure` -- success-range status, body did not match the model.
- :class:`TransportFailure` -- no response obtained.
- :class:`InvalidParam` -- input rejected before anything was sent.

Results are plain values. ``result.ok`` tells success from failure, and
``result.unwrap()`` returns the payload or raises the matching
:mod:`~circle_w3s.exceptions` error, for callers that prefer exceptions.

Example::

    result = await client.get_wallet("w-1")
    if isinstance(result, ApiFailure) and result.code == 156001:
        ...
    wallet = result.unwrap().data.wallet
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Generic, NoReturn, TypeVar, Union

from pydantic import BaseModel, ValidationError

from circle_w3s.exceptions import (
    ApiError,
    DecodeError,
    InvalidParamError,
    TransportError,
)
from circle_w3s.models import ApiErrorBody

T = TypeVar("T", bound=BaseModel)


@dataclass(frozen=True)
class Success(Generic[T]):
    payload: T
    status_code: int
    request_id: str = ""

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.payload


@dataclass(frozen=True)
class ApiFailure:
    """The service rejected the request."""

    code: int
    message: str
    status_code: int
    request_id: str = ""

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise ApiError(self.code, self.message, self.status_code, self.request_id or None)


@dataclass(frozen=True)
class DecodeFailure:
    """The service accepted the request but the body was not the expected shape."""

    cause: str
    status_code: int
    request_id: str = ""

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise DecodeError(self.cause)


@dataclass(frozen=True)
class TransportFailure:
    """The service could not be reached or did not answer in time."""

    cause: str
    request_id: str = ""

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise TransportError(self.cause)


@dataclass(frozen=True)
class InvalidParam:
    """Caller input was rejected locally; nothing was sent."""

    message: str

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise InvalidParamError(self.message)


ApiResult = Union[Success[T], ApiFailure, DecodeFailure, TransportFailure, InvalidParam]


def classify(
    status_code: int,
    body: bytes,
    payload_type: type[T],
    request_id: str = "",
) -> Union[Success[T], ApiFailure, DecodeFailure]:
    """Map a raw status and body to a result variant.

    Args:
        status_code: HTTP status of the response.
        body: Raw response body.
        payload_type: Model a success-range body must validate against.
        request_id: ``X-Request-Id`` of the call, carried into the result.
    """
    if 200 <= status_code < 300:
        try:
            payload = payload_type.model_validate_json(body)
        except ValidationError as exc:
            return DecodeFailure(
                cause=f"{payload_type.__name__}: {_summarise(exc)}",
                status_code=status_code,
                request_id=request_id,
            )
        return Success(payload=payload, status_code=status_code, request_id=request_id)

    try:
        error = ApiErrorBody.model_validate_json(body)
    except ValidationError:
        return ApiFailure(
            code=status_code,
            message=_generic_message(status_code),
            status_code=status_code,
            request_id=request_id,
        )
    return ApiFailure(
        code=error.code,
        message=error.message,
        status_code=status_code,
        request_id=request_id,
    )


def _generic_message(status_code: int) -> str:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        return f"HTTP {status_code}"
    return f"HTTP {status_code} {phrase}"


def _summarise(exc: ValidationError) -> str:
    """First few validation errors as ``loc: msg`` pairs, without input values."""
    parts = []
    for error in exc.errors(include_input=False)[:3]:
        loc = ".".join(str(part) for part in error["loc"]) or "<body>"
        parts.append(f"{loc}: {error['msg']}")
    extra = exc.error_count() - len(parts)
    if extra > 0:
        parts.append(f"and {extra} more")
    return "; ".join(parts)
