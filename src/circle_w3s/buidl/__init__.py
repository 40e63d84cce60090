"""Buidl Wallets: transfers, user operations and holdings of smart accounts."""

from circle_w3s.buidl.client import BuidlWalletsClient
from circle_w3s.buidl.models import (
    Blockchain,
    FtStandard,
    ListTransfersParams,
    ListUserOpsParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    NftStandard,
    Transfer,
    TransferState,
    TransferType,
    UserOp,
    UserOpState,
)

__all__ = [
    "Blockchain",
    "BuidlWalletsClient",
    "FtStandard",
    "ListTransfersParams",
    "ListUserOpsParams",
    "ListWalletBalancesParams",
    "ListWalletNftsParams",
    "NftStandard",
    "Transfer",
    "TransferState",
    "TransferType",
    "UserOp",
    "UserOpState",
]
