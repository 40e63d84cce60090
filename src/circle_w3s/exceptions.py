"""Exception hierarchy for circle_w3s.

Facade methods report failures as :mod:`~circle_w3s.client.response` result
variants rather than raising. Each variant's ``unwrap()`` converts it into
one of the exceptions below, so callers that prefer ``try``/``except`` can
catch :class:`CircleError` and branch on the subclass.

Subclass hierarchy::

    CircleError
    +-- InvalidParamError   (rejected locally, nothing sent)
    +-- TransportError      (no HTTP response obtained)
    +-- ApiError            (error-range status from the service)
    +-- DecodeError         (success status, unexpected payload shape)
    +-- ConfigError         (environment / config resolution)
"""

from __future__ import annotations

from typing import Optional


class CircleError(Exception):
    """Base exception for all circle_w3s errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidParamError(CircleError):
    """Raised when caller input is rejected before any network activity."""


class TransportError(CircleError):
    """Raised when no interpretable HTTP response was obtained (timeout, refused, TLS)."""


class ApiError(CircleError):
    """Raised when the service answers with an error-range status.

    Args:
        code: The service error code from the ``{code, message}`` body, or the
            HTTP status when the body was not a structured error.
        message: The service message, or a generic one derived from the status.
        status_code: The HTTP status of the response.
        request_id: The ``X-Request-Id`` sent with the failing call, if known.
    """

    def __init__(
        self,
        code: int,
        message: str,
        status_code: Optional[int] = None,
        request_id: Optional[str] = None,
    ):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message
        self.status_code = status_code
        self.request_id = request_id


class DecodeError(CircleError):
    """Raised when a success-range body does not match the expected payload."""


class ConfigError(CircleError):
    """Raised for missing or malformed client configuration."""
