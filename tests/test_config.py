"""Tests for circle_w3s.config -- environment-backed client configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from circle_w3s.config import (
    ENV_API_KEY,
    ENV_API_KEY_FILE,
    ENV_BASE_URL,
    ENV_TIMEOUT,
    ENV_VERIFY_SSL,
    load_config,
)
from circle_w3s.exceptions import ConfigError
from circle_w3s.models import DEFAULT_BASE_URL


# ---------------------------------------------------------------------------
# API key resolution
# ---------------------------------------------------------------------------


class TestApiKey:
    def test_from_env(self) -> None:
        config = load_config({ENV_API_KEY: "TEST_API_KEY:a:b"})
        assert config.api_key.get_secret_value() == "TEST_API_KEY:a:b"

    def test_whitespace_stripped(self) -> None:
        config = load_config({ENV_API_KEY: "  TEST_API_KEY:a:b\n"})
        assert config.api_key.get_secret_value() == "TEST_API_KEY:a:b"

    def test_missing(self) -> None:
        with pytest.raises(ConfigError, match="CIRCLE_API_KEY"):
            load_config({})

    def test_blank_is_missing(self) -> None:
        with pytest.raises(ConfigError, match="is not set"):
            load_config({ENV_API_KEY: "   "})

    def test_from_file(self, tmp_path: Path) -> None:
        key_file = tmp_path / "api_key"
        key_file.write_text("TEST_API_KEY:file:key\n", encoding="utf-8")
        config = load_config({ENV_API_KEY_FILE: str(key_file)})
        assert config.api_key.get_secret_value() == "TEST_API_KEY:file:key"

    def test_env_wins_over_file(self, tmp_path: Path) -> None:
        key_file = tmp_path / "api_key"
        key_file.write_text("from-file", encoding="utf-8")
        config = load_config({ENV_API_KEY: "from-env", ENV_API_KEY_FILE: str(key_file)})
        assert config.api_key.get_secret_value() == "from-env"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config({ENV_API_KEY_FILE: str(tmp_path / "nope")})

    def test_empty_file(self, tmp_path: Path) -> None:
        key_file = tmp_path / "api_key"
        key_file.write_text("\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="empty"):
            load_config({ENV_API_KEY_FILE: str(key_file)})

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_API_KEY, "TEST_API_KEY:os:env")
        monkeypatch.delenv(ENV_BASE_URL, raising=False)
        monkeypatch.delenv(ENV_TIMEOUT, raising=False)
        monkeypatch.delenv(ENV_VERIFY_SSL, raising=False)
        config = load_config()
        assert config.api_key.get_secret_value() == "TEST_API_KEY:os:env"


# ---------------------------------------------------------------------------
# Other settings
# ---------------------------------------------------------------------------


class TestSettings:
    def test_defaults(self) -> None:
        config = load_config({ENV_API_KEY: "k"})
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == 30.0
        assert config.verify_ssl is True

    def test_overrides(self) -> None:
        config = load_config(
            {
                ENV_API_KEY: "k",
                ENV_BASE_URL: "http://127.0.0.1:4010",
                ENV_TIMEOUT: "2.5",
                ENV_VERIFY_SSL: "false",
            }
        )
        assert config.base_url == "http://127.0.0.1:4010"
        assert config.timeout == 2.5
        assert config.verify_ssl is False

    @pytest.mark.parametrize("raw, expected", [("1", True), ("YES", True), ("off", False), ("0", False)])
    def test_verify_ssl_tokens(self, raw: str, expected: bool) -> None:
        assert load_config({ENV_API_KEY: "k", ENV_VERIFY_SSL: raw}).verify_ssl is expected

    def test_bad_verify_ssl(self) -> None:
        with pytest.raises(ConfigError, match="true or false"):
            load_config({ENV_API_KEY: "k", ENV_VERIFY_SSL: "maybe"})

    def test_bad_timeout(self) -> None:
        with pytest.raises(ConfigError, match="number of seconds"):
            load_config({ENV_API_KEY: "k", ENV_TIMEOUT: "soon"})

    def test_non_positive_timeout(self) -> None:
        with pytest.raises(ConfigError, match="Invalid client configuration"):
            load_config({ENV_API_KEY: "k", ENV_TIMEOUT: "0"})

    def test_api_key_not_in_repr(self) -> None:
        config = load_config({ENV_API_KEY: "TEST_API_KEY:hidden:value"})
        assert "hidden" not in repr(config)
