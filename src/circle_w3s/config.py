"""Environment-backed configuration for circle_w3s facades.

The client core never reads the environment. This module is the optional
layer above it that turns process environment variables into a
:class:`~circle_w3s.models.ClientConfig`:

* ``CIRCLE_API_KEY`` -- primary API key (required unless
  ``CIRCLE_API_KEY_FILE`` is set).
* ``CIRCLE_API_KEY_FILE`` -- path to a file holding the API key.
* ``CIRCLE_BASE_URL`` -- service root, defaults to the production endpoint.
* ``CIRCLE_TIMEOUT`` -- per-call timeout in seconds.
* ``CIRCLE_VERIFY_SSL`` -- ``true``/``false``.

Example::

    config = load_config()
    async with ComplianceClient.from_config(config) as client:
        ...
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

from pydantic import ValidationError

from circle_w3s.exceptions import ConfigError
from circle_w3s.models import DEFAULT_BASE_URL, ClientConfig

ENV_API_KEY = "CIRCLE_API_KEY"
ENV_API_KEY_FILE = "CIRCLE_API_KEY_FILE"
ENV_BASE_URL = "CIRCLE_BASE_URL"
ENV_TIMEOUT = "CIRCLE_TIMEOUT"
ENV_VERIFY_SSL = "CIRCLE_VERIFY_SSL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def load_config(environ: Optional[Mapping[str, str]] = None) -> ClientConfig:
    """Build a :class:`ClientConfig` from environment variables.

    Args:
        environ: Mapping to read from. Defaults to :data:`os.environ`.

    Returns:
        The validated client configuration.

    Raises:
        ConfigError: If no API key is available or a value cannot be parsed.
    """
    env = os.environ if environ is None else environ

    values: dict[str, object] = {
        "api_key": _resolve_api_key(env),
        "base_url": env.get(ENV_BASE_URL) or DEFAULT_BASE_URL,
    }

    timeout = env.get(ENV_TIMEOUT)
    if timeout:
        try:
            values["timeout"] = float(timeout)
        except ValueError as exc:
            raise ConfigError(f"{ENV_TIMEOUT} must be a number of seconds, got {timeout!r}") from exc

    verify = env.get(ENV_VERIFY_SSL)
    if verify:
        values["verify_ssl"] = _parse_bool(ENV_VERIFY_SSL, verify)

    try:
        return ClientConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid client configuration: {exc}") from exc


def _resolve_api_key(env: Mapping[str, str]) -> str:
    """Read the API key from the environment, falling back to a key file."""
    value = env.get(ENV_API_KEY)
    if value and value.strip():
        return value.strip()

    file_path = env.get(ENV_API_KEY_FILE)
    if file_path:
        path = Path(file_path).expanduser()
        if not path.is_file():
            raise ConfigError(f"API key file not found: {path} (from {ENV_API_KEY_FILE})")
        try:
            content = path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read API key file {path}: {exc}") from exc
        if not content:
            raise ConfigError(f"API key file is empty: {path}")
        return content

    raise ConfigError(f"Environment variable '{ENV_API_KEY}' is not set")


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be true or false, got {raw!r}")
