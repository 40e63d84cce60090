"""Facade for the Circle Compliance Engine API."""

from __future__ import annotations

from circle_w3s.client.base import BaseClient
from circle_w3s.client.request import Endpoint
from circle_w3s.client.response import ApiResult
from circle_w3s.compliance.models import ScreenAddressRequest, ScreenAddressResponse
from circle_w3s.models import HTTPMethod

SCREEN_ADDRESS = Endpoint(
    "screen_address",
    HTTPMethod.POST,
    "/v1/w3s/compliance/screening/addresses",
    ScreenAddressResponse,
)


class ComplianceClient(BaseClient):
    """Async client for blockchain address screening.

    Example::

        async with ComplianceClient(api_key) as client:
            result = await client.screen_address(
                ScreenAddressRequest(address="0xabc...", chain=Chain.ETH_SEPOLIA)
            )
            screening = result.unwrap().data
    """

    async def screen_address(
        self, request: ScreenAddressRequest
    ) -> ApiResult[ScreenAddressResponse]:
        """Screen an address against the configured compliance rules."""
        return await self._call(SCREEN_ADDRESS, body=request)
