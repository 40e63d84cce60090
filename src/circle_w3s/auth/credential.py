"""Secret holders for the primary API key and per-session user tokens.

Both types wrap :class:`pydantic.SecretStr` and expose no accessor other
than the header value they produce. ``repr()``/``str()`` are redacted,
attribute assignment is blocked after construction, equality falls back to
identity and pickling is refused, so a secret cannot leak through logging,
tracebacks, or serialisation by accident.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import SecretStr

from circle_w3s.exceptions import InvalidParamError


class _Secret:
    """Immutable, non-printable wrapper around one secret string."""

    __slots__ = ("_value",)

    _label = "secret"

    def __init__(self, value: Union[str, SecretStr]):
        raw = value.get_secret_value() if isinstance(value, SecretStr) else value
        if not isinstance(raw, str) or not raw.strip():
            raise InvalidParamError(f"{self._label} must be a non-empty string")
        if raw != raw.strip():
            raise InvalidParamError(f"{self._label} must not have surrounding whitespace")
        object.__setattr__(self, "_value", SecretStr(raw))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted>)"

    __str__ = __repr__

    def __format__(self, format_spec: str) -> str:
        return repr(self)

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    def __reduce__(self) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be serialised")

    def __copy__(self) -> _Secret:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Secret:
        return self


class Credential(_Secret):
    """Primary API key, held for the lifetime of a facade.

    The key is sent exactly as given; one with leading or trailing
    whitespace is rejected rather than trimmed.

    Example::

        cred = Credential("TEST_API_KEY:abc:def")
        headers = {"Authorization": cred.authorization()}
    """

    __slots__ = ()

    _label = "API key"

    def authorization(self) -> str:
        """Return the ``Authorization`` header value (``Bearer <key>``)."""
        return f"Bearer {self._value.get_secret_value()}"


class UserToken(_Secret):
    """Short-lived end-user session token, supplied per call."""

    __slots__ = ()

    _label = "user token"

    def header_value(self) -> str:
        """Return the ``X-User-Token`` header value."""
        return self._value.get_secret_value()
