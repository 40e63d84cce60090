"""Payload models for the Buidl Wallets (smart account indexing) API."""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import Field

from circle_w3s.models import DateRangeParams, WireModel


class Blockchain(str, enum.Enum):
    """EVM chains indexed by the Buidl Wallets service."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    MATIC = "MATIC"
    MATIC_AMOY = "MATIC-AMOY"
    ARB = "ARB"
    ARB_SEPOLIA = "ARB-SEPOLIA"
    UNI = "UNI"
    UNI_SEPOLIA = "UNI-SEPOLIA"
    BASE = "BASE"
    BASE_SEPOLIA = "BASE-SEPOLIA"
    OP = "OP"
    OP_SEPOLIA = "OP-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
    ARC_TESTNET = "ARC-TESTNET"
    MONAD = "MONAD"
    MONAD_TESTNET = "MONAD-TESTNET"


class TransferState(str, enum.Enum):
    CONFIRMED = "CONFIRMED"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"


class TransferType(str, enum.Enum):
    INBOUND_TRANSFER = "INBOUND_TRANSFER"
    OUTBOUND_TRANSFER = "OUTBOUND_TRANSFER"


class TransferErrorReason(str, enum.Enum):
    FAILED_REORG = "FAILED_REORG"


class UserOpState(str, enum.Enum):
    SENT = "SENT"
    CONFIRMED = "CONFIRMED"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"


class UserOpErrorReason(str, enum.Enum):
    FAILED_ON_CHAIN = "FAILED_ON_CHAIN"
    FAILED_REPLACED = "FAILED_REPLACED"


class FtStandard(str, enum.Enum):
    """Fungible token filter. The empty token selects native balances."""

    NATIVE = ""
    ERC20 = "ERC20"


class NftStandard(str, enum.Enum):
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"


class TokenStandard(str, enum.Enum):
    ERC20 = "ERC20"
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"


# --- Transfers ---


class NftIdMetadata(WireModel):
    metadata: Optional[str] = None
    nft_token_id: Optional[str] = None


class Transfer(WireModel):
    """Token movement into or out of an indexed wallet."""

    id: str
    wallet_id: str
    amount: str
    blockchain: Blockchain
    from_: str = Field(alias="from")
    to: str
    state: TransferState
    token_id: str
    transfer_type: TransferType
    tx_hash: str
    wallet_address: str
    block_date: Optional[str] = None
    block_hash: Optional[str] = None
    block_height: Optional[int] = None
    error_reason: Optional[TransferErrorReason] = None
    nft: Optional[NftIdMetadata] = None
    token_address: Optional[str] = None
    user_op_hash: Optional[str] = None
    create_date: Optional[str] = None
    update_date: Optional[str] = None


class TransfersData(WireModel):
    transfers: list[Transfer]


class TransfersResponse(WireModel):
    data: TransfersData


class TransferData(WireModel):
    transfer: Transfer


class TransferResponse(WireModel):
    data: TransferData


class ListTransfersParams(DateRangeParams):
    """``wallet_addresses`` is required and sent as one comma-separated value."""

    wallet_addresses: list[str]
    blockchain: Optional[Blockchain] = None
    state: Optional[TransferState] = None
    transfer_type: Optional[TransferType] = None
    tx_hash: Optional[str] = None
    user_op_hash: Optional[str] = None


# --- User operations ---


class UserOperation(WireModel):
    """ERC-4337 user operation fields as submitted to the bundler."""

    call_data: str
    nonce: str
    sender: str
    call_gas_limit: Optional[str] = None
    factory: Optional[str] = None
    factory_data: Optional[str] = None
    max_fee_per_gas: Optional[str] = None
    max_priority_fee_per_gas: Optional[str] = None
    paymaster: Optional[str] = None
    paymaster_and_data: Optional[str] = None
    paymaster_data: Optional[str] = None
    paymaster_post_op_gas_limit: Optional[str] = None
    paymaster_verification_gas_limit: Optional[str] = None
    pre_verification_gas: Optional[str] = None
    signature: Optional[str] = None
    verification_gas_limit: Optional[str] = None


class UserOp(WireModel):
    id: str
    blockchain: Blockchain
    state: UserOpState
    user_op_hash: str
    user_operation: UserOperation
    ref_id: Optional[str] = None
    actual_gas_cost: Optional[str] = None
    actual_gas_used: Optional[str] = None
    block_date: Optional[str] = None
    block_hash: Optional[str] = None
    block_height: Optional[int] = None
    error_reason: Optional[UserOpErrorReason] = None
    revert_reason: Optional[str] = None
    to: Optional[str] = None
    tx_hash: Optional[str] = None
    create_date: Optional[str] = None
    update_date: Optional[str] = None


class UserOpsData(WireModel):
    user_operations: list[UserOp]


class UserOpsResponse(WireModel):
    data: UserOpsData


class UserOpData(WireModel):
    user_operation: UserOp


class UserOpResponse(WireModel):
    data: UserOpData


class ListUserOpsParams(DateRangeParams):
    blockchain: Optional[Blockchain] = None
    ref_id: Optional[str] = None
    senders: Optional[list[str]] = None
    state: Optional[UserOpState] = None
    tx_hash: Optional[str] = None
    user_op_hash: Optional[str] = None


# --- Wallet holdings ---


class Token(WireModel):
    blockchain: Blockchain
    is_native: bool
    name: Optional[str] = None
    standard: Optional[TokenStandard] = None
    decimals: Optional[int] = None
    symbol: Optional[str] = None
    token_address: Optional[str] = None


class Balance(WireModel):
    amount: str
    token: Token
    update_date: str


class BalancesData(WireModel):
    token_balances: list[Balance]


class BalancesResponse(WireModel):
    data: BalancesData


class Nft(WireModel):
    amount: str
    token: Token
    update_date: str
    nft_token_id: Optional[str] = None
    metadata: Optional[str] = None


class NftsData(WireModel):
    nfts: list[Nft]


class NftsResponse(WireModel):
    data: NftsData


class ListWalletBalancesParams(DateRangeParams):
    standard: Optional[FtStandard] = None
    name: Optional[str] = None
    token_address: Optional[str] = None


class ListWalletNftsParams(DateRangeParams):
    standard: Optional[NftStandard] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
