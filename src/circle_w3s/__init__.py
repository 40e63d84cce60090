"""circle_w3s -- typed async clients for the Circle Web3 Services APIs.

One facade per service, all built on the same request/response core:

    BuidlWalletsClient       smart account transfers, user operations, holdings
    ComplianceClient         blockchain address screening
    DeveloperWalletsClient   developer-controlled wallets
    UserWalletsClient        user-controlled wallets

Every facade method returns an API result (``Success``, ``ApiFailure``,
``DecodeFailure``, ``TransportFailure`` or ``InvalidParam``) instead of
raising. Call ``unwrap()`` on a result to get the payload or the matching
:class:`~circle_w3s.exceptions.CircleError`.

Typical usage::

    from circle_w3s import ComplianceClient
    from circle_w3s.compliance import Chain, ScreenAddressRequest

    async with ComplianceClient(api_key) as client:
        result = await client.screen_address(
            ScreenAddressRequest(address="0xabc...", chain=Chain.ETH)
        )

Modules:
    client: request builder, transport, pagination, result classification.
    models: wire-model bases, config model, shared wallet vocabulary.
    config: environment-backed :class:`~circle_w3s.models.ClientConfig` loading.
    exceptions: exception hierarchy mirroring the result variants.
"""

from circle_w3s.buidl.client import BuidlWalletsClient
from circle_w3s.client.pagination import PageCursor
from circle_w3s.client.response import (
    ApiFailure,
    ApiResult,
    DecodeFailure,
    InvalidParam,
    Success,
    TransportFailure,
)
from circle_w3s.compliance.client import ComplianceClient
from circle_w3s.developer.client import DeveloperWalletsClient
from circle_w3s.models import ClientConfig
from circle_w3s.user.client import UserWalletsClient

__version__ = "0.1.0"

__all__ = [
    "ApiFailure",
    "ApiResult",
    "BuidlWalletsClient",
    "ClientConfig",
    "ComplianceClient",
    "DecodeFailure",
    "DeveloperWalletsClient",
    "InvalidParam",
    "PageCursor",
    "Success",
    "TransportFailure",
    "UserWalletsClient",
]
