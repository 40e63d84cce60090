"""Payload models for the Developer-Controlled Wallets API.

Wallet, token, balance and transaction payloads are shared with the
user-controlled service and live in :mod:`circle_w3s.models`. This module
adds wallet sets, the developer request bodies (all of which carry an
``entitySecretCiphertext``), signing, and the list filters.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from circle_w3s.models import (
    AccountType,
    Blockchain,
    CustodyType,
    DateRangeParams,
    FeeLevel,
    NftStandard,
    Operation,
    RequestModel,
    TransactionState,
    TransactionType,
    WalletMetadata,
    WalletState,
    WireModel,
)


# --- Wallet sets ---


class WalletSet(WireModel):
    id: str
    custody_type: CustodyType
    create_date: str
    update_date: str
    name: Optional[str] = None
    user_id: Optional[str] = None


class WalletSetData(WireModel):
    wallet_set: WalletSet


class WalletSetResponse(WireModel):
    data: WalletSetData


class WalletSetsData(WireModel):
    wallet_sets: list[WalletSet]


class WalletSetsResponse(WireModel):
    data: WalletSetsData


class CreateWalletSetRequest(RequestModel):
    entity_secret_ciphertext: str
    name: Optional[str] = None
    idempotency_key: Optional[str] = None


class UpdateWalletSetRequest(RequestModel):
    name: Optional[str] = None


# --- Wallets ---


class CreateWalletsRequest(RequestModel):
    """Create ``count`` wallets on each of ``blockchains`` inside a wallet set."""

    entity_secret_ciphertext: str
    wallet_set_id: str
    blockchains: list[Blockchain]
    account_type: Optional[AccountType] = None
    count: Optional[int] = Field(default=None, ge=1)
    metadata: Optional[list[WalletMetadata]] = None
    idempotency_key: Optional[str] = None


class UpdateWalletRequest(RequestModel):
    name: Optional[str] = None
    ref_id: Optional[str] = None


class ListWalletsParams(DateRangeParams):
    blockchain: Optional[Blockchain] = None
    address: Optional[str] = None
    wallet_set_id: Optional[str] = None
    ref_id: Optional[str] = None
    state: Optional[WalletState] = None
    custody_type: Optional[CustodyType] = None


class ListWalletBalancesParams(DateRangeParams):
    """Filters for ``GET /v1/w3s/developer/wallets/balances``."""

    include_all: Optional[bool] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_set_id: Optional[str] = None
    wallet_ids: Optional[list[str]] = None
    custody_type: Optional[CustodyType] = None
    address: Optional[str] = None


class ListWalletNftsParams(DateRangeParams):
    standard: Optional[NftStandard] = None
    name: Optional[str] = None
    token_address: Optional[str] = None


# --- Signing ---


class SignMessageRequest(RequestModel):
    """Sign an arbitrary message. Identify the wallet by id or by chain and address."""

    message: str
    entity_secret_ciphertext: str
    wallet_id: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_address: Optional[str] = None
    encoded_by_hex: Optional[bool] = None
    memo: Optional[str] = None


class SignTypedDataRequest(RequestModel):
    """Sign EIP-712 typed data, passed as a JSON string."""

    typed_data: str
    entity_secret_ciphertext: str
    wallet_id: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_address: Optional[str] = None


class SignTransactionRequest(RequestModel):
    entity_secret_ciphertext: str
    wallet_id: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_address: Optional[str] = None
    raw_transaction: Optional[str] = None
    transaction: Optional[Any] = None


class SignatureData(WireModel):
    signature: str


class SignatureResponse(WireModel):
    data: SignatureData


class SignedTransactionData(WireModel):
    signature: str
    signed_transaction: str
    tx_hash: Optional[str] = None


class SignTransactionResponse(WireModel):
    data: SignedTransactionData


# --- Transactions ---


class ListTransactionsParams(DateRangeParams):
    blockchain: Optional[Blockchain] = None
    custody_type: Optional[CustodyType] = None
    destination_address: Optional[str] = None
    include_all: Optional[bool] = None
    operation: Optional[Operation] = None
    ref_id: Optional[str] = None
    source_address: Optional[str] = None
    state: Optional[TransactionState] = None
    token_address: Optional[str] = None
    transaction_hash: Optional[str] = None
    transaction_type: Optional[TransactionType] = None
    wallet_ids: Optional[list[str]] = None


class CreateTransferTransactionRequest(RequestModel):
    """Transfer tokens from a developer-controlled wallet.

    Either ``amounts`` (fungible) or ``nft_token_ids`` is expected, and
    either ``fee_level`` or explicit gas settings.
    """

    entity_secret_ciphertext: str
    wallet_id: str
    destination_address: str
    blockchain: Optional[Blockchain] = None
    token_id: Optional[str] = None
    amounts: Optional[list[str]] = None
    nft_token_ids: Optional[list[str]] = None
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    idempotency_key: Optional[str] = None


class CreateContractExecutionTransactionRequest(RequestModel):
    """Call a smart contract function, by ABI signature or raw call data."""

    entity_secret_ciphertext: str
    wallet_id: str
    contract_address: str
    blockchain: Optional[Blockchain] = None
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    call_data: Optional[str] = None
    amount: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    ref_id: Optional[str] = None
    idempotency_key: Optional[str] = None


class CancelTransactionRequest(RequestModel):
    entity_secret_ciphertext: str
    idempotency_key: Optional[str] = None


class AccelerateTransactionRequest(RequestModel):
    entity_secret_ciphertext: str
    idempotency_key: Optional[str] = None


class EstimateTransferFeeRequest(RequestModel):
    source_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    destination_address: Optional[str] = None
    amounts: Optional[list[str]] = None
    nfts: Optional[list[str]] = None
    token_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
