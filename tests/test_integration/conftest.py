"""In-process contract mock server for integration tests.

Builds one FastAPI app per service from ``tests/fixtures/contract.yaml`` and
serves it through :class:`httpx.ASGITransport`, so every facade can be
exercised end to end without network access. The app enforces the
service's header contract:

* no ``Authorization: Bearer ...`` -> 401
* session route without ``X-User-Token`` -> 401
* ``POST``/``PUT`` without ``X-Request-Id`` -> 400
* a path segment equal to ``missing`` -> 404 with the service's error body

and otherwise answers with the operation's example response.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
import yaml
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


CONTRACT_PATH = Path(__file__).parent.parent / "fixtures" / "contract.yaml"
CONTRACT_BASE_URL = "http://contract.test"
MISSING_SEGMENT = "missing"


class ContractServer:
    """FastAPI app mimicking one service, with a log of received requests."""

    def __init__(self, name: str, service: dict[str, Any]) -> None:
        self.name = name
        self.not_found = service["not_found"]
        self.requests: list[dict[str, Any]] = []
        self.app = FastAPI(title=f"{name} contract mock")

        # Static paths first so e.g. /transactions/lowestNonceTransaction
        # is not captured by /transactions/{id}.
        operations = sorted(service["operations"], key=lambda op: "{" in op["path"])
        for operation in operations:
            self.app.add_api_route(
                operation["path"],
                self._make_endpoint(operation),
                methods=[operation["method"]],
                name=operation["name"],
            )

    @property
    def last(self) -> dict[str, Any]:
        assert self.requests, f"{self.name} mock received no request"
        return self.requests[-1]

    def transport(self) -> httpx.ASGITransport:
        return httpx.ASGITransport(app=self.app)

    def _make_endpoint(self, operation: dict[str, Any]) -> Callable[[Request], Any]:
        async def endpoint(request: Request) -> JSONResponse:
            raw = await request.body()
            self.requests.append(
                {
                    "operation": operation["name"],
                    "method": request.method,
                    "path": request.url.path,
                    "query": dict(request.query_params),
                    "headers": dict(request.headers),
                    "body": json.loads(raw) if raw else None,
                }
            )

            authorization = request.headers.get("authorization", "")
            if not authorization.startswith("Bearer ") or not authorization[7:].strip():
                return JSONResponse({"code": 401, "message": "Malformed authorization."}, 401)
            if operation.get("session") and not request.headers.get("x-user-token"):
                return JSONResponse({"code": 155104, "message": "Missing user token."}, 401)
            if request.method in ("POST", "PUT") and not request.headers.get("x-request-id"):
                return JSONResponse({"code": 2, "message": "Missing X-Request-Id header."}, 400)
            if MISSING_SEGMENT in request.path_params.values():
                return JSONResponse(self.not_found, 404)

            return JSONResponse(operation["response"], operation.get("status", 200))

        endpoint.__name__ = operation["name"]
        return endpoint


@pytest.fixture(scope="session")
def contract() -> dict[str, Any]:
    with CONTRACT_PATH.open(encoding="utf-8") as fh:
        return yaml.safe_load(fh)


@pytest.fixture
def contract_server(contract) -> Callable[[str], ContractServer]:
    """Factory returning a fresh :class:`ContractServer` for a service name."""

    def factory(name: str) -> ContractServer:
        return ContractServer(name, contract["services"][name])

    return factory


@pytest.fixture
def contract_base_url() -> str:
    return CONTRACT_BASE_URL
