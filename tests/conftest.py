"""Shared test fixtures for circle_w3s.

Provides a recording :class:`httpx.MockTransport` handler, canned payloads
for the wallet services, and a config fixture. These fixtures are
discovered by pytest and available to all test modules without imports.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from circle_w3s.models import ClientConfig


API_KEY = "TEST_API_KEY:0123456789abcdef:fedcba9876543210"
BASE_URL = "https://api.circle.test"


# ---------------------------------------------------------------------------
# Recording transport
# ---------------------------------------------------------------------------


class RecordingHandler:
    """MockTransport handler that records requests and replays one response.

    Args:
        status_code: Status of every response.
        body: JSON-serialisable body, or ``bytes`` sent verbatim.
        error: Exception raised instead of answering (simulates network failures).
    """

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, bytes):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    """Factory for :class:`RecordingHandler` instances."""
    return RecordingHandler


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_key=API_KEY, base_url=BASE_URL, timeout=5.0)


# ---------------------------------------------------------------------------
# Canned payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def token_payload() -> dict[str, Any]:
    return {
        "id": "7adb2b7d-c9cd-5164-b2d4-b73b088274dc",
        "blockchain": "MATIC-AMOY",
        "isNative": True,
        "name": "Polygon-Amoy",
        "symbol": "MATIC-AMOY",
        "decimals": 18,
        "createDate": "2024-01-01T00:00:00Z",
        "updateDate": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def wallet_payload() -> dict[str, Any]:
    return {
        "id": "ce714f5b-0d8e-4062-9454-61aa1154869b",
        "address": "0xf5c83e5fede8456929d0f90e8c541dcac3d63835",
        "blockchain": "MATIC-AMOY",
        "createDate": "2024-01-01T00:00:00Z",
        "updateDate": "2024-01-01T00:00:00Z",
        "custodyType": "DEVELOPER",
        "state": "LIVE",
        "walletSetId": "0189bc61-7fe4-70f3-8a1b-0d14426397cb",
        "accountType": "SCA",
        "scaCore": "circle_6900_singleowner_v2",
    }


@pytest.fixture
def transaction_payload() -> dict[str, Any]:
    return {
        "id": "1af639ce-c8b2-54a6-af49-7aebc95aaac1",
        "state": "INITIATED",
        "blockchain": "MATIC-AMOY",
        "transactionType": "OUTBOUND",
        "createDate": "2024-01-01T00:00:00Z",
        "updateDate": "2024-01-01T00:00:00Z",
        "amounts": ["0.01"],
        "feeLevel": "MEDIUM",
        "operation": "TRANSFER",
    }


@pytest.fixture
def api_error_body() -> dict[str, Any]:
    return {"code": 156001, "message": "Wallet not found"}
