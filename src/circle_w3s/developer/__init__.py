"""Developer-Controlled Wallets: wallet sets, wallets, signing, transactions."""

from circle_w3s.developer.client import DeveloperWalletsClient
from circle_w3s.developer.models import (
    AccelerateTransactionRequest,
    CancelTransactionRequest,
    CreateContractExecutionTransactionRequest,
    CreateTransferTransactionRequest,
    CreateWalletSetRequest,
    CreateWalletsRequest,
    EstimateTransferFeeRequest,
    ListTransactionsParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    ListWalletsParams,
    SignMessageRequest,
    SignTransactionRequest,
    SignTypedDataRequest,
    UpdateWalletRequest,
    UpdateWalletSetRequest,
    WalletSet,
)

__all__ = [
    "AccelerateTransactionRequest",
    "CancelTransactionRequest",
    "CreateContractExecutionTransactionRequest",
    "CreateTransferTransactionRequest",
    "CreateWalletSetRequest",
    "CreateWalletsRequest",
    "DeveloperWalletsClient",
    "EstimateTransferFeeRequest",
    "ListTransactionsParams",
    "ListWalletBalancesParams",
    "ListWalletNftsParams",
    "ListWalletsParams",
    "SignMessageRequest",
    "SignTransactionRequest",
    "SignTypedDataRequest",
    "UpdateWalletRequest",
    "UpdateWalletSetRequest",
    "WalletSet",
]
