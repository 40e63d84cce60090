"""Payload models for the User-Controlled Wallets API.

End users own their wallets; most writes do not execute directly but return
a *challenge* id that the end user completes in the client-side SDK. Those
operations answer with :class:`ChallengeIdResponse`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from circle_w3s.models import (
    AccountType,
    Blockchain,
    DateRangeParams,
    FeeLevel,
    Nft,
    Operation,
    RequestModel,
    ScaCore,
    TokenStandard,
    Transaction,
    TransactionFee,
    TransactionState,
    TransactionType,
    Wallet,
    WalletMetadata,
    WalletState,
    WireModel,
)


class PinStatus(str, enum.Enum):
    ENABLED = "ENABLED"
    UNSET = "UNSET"
    LOCKED = "LOCKED"


class SecurityQuestionStatus(str, enum.Enum):
    ENABLED = "ENABLED"
    UNSET = "UNSET"
    LOCKED = "LOCKED"


class EndUserStatus(str, enum.Enum):
    ENABLED = "ENABLED"
    DISABLED = "DISABLED"


class ChallengeType(str, enum.Enum):
    INITIALIZE = "INITIALIZE"
    SET_PIN = "SET_PIN"
    CHANGE_PIN = "CHANGE_PIN"
    SET_SECURITY_QUESTIONS = "SET_SECURITY_QUESTIONS"
    CREATE_WALLET = "CREATE_WALLET"
    RESTORE_PIN = "RESTORE_PIN"
    CREATE_TRANSACTION = "CREATE_TRANSACTION"
    ACCELERATE_TRANSACTION = "ACCELERATE_TRANSACTION"
    CANCEL_TRANSACTION = "CANCEL_TRANSACTION"
    CONTRACT_EXECUTION = "CONTRACT_EXECUTION"
    WALLET_UPGRADE = "WALLET_UPGRADE"
    SIGN_MESSAGE = "SIGN_MESSAGE"
    SIGN_TYPEDDATA = "SIGN_TYPEDDATA"
    SIGN_TRANSACTION = "SIGN_TRANSACTION"


class ChallengeStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"
    EXPIRED = "EXPIRED"


# --- Users ---


class EndUser(WireModel):
    id: Optional[str] = None
    create_date: Optional[str] = None
    pin_status: Optional[PinStatus] = None
    status: Optional[EndUserStatus] = None
    security_question_status: Optional[SecurityQuestionStatus] = None
    pin_details: Optional[dict[str, Any]] = None
    security_question_details: Optional[dict[str, Any]] = None


class EndUserResponse(WireModel):
    data: EndUser


class UserData(WireModel):
    user: EndUser


class UserResponse(WireModel):
    data: UserData


class UsersData(WireModel):
    users: list[EndUser]


class UsersResponse(WireModel):
    data: UsersData


class CreateUserRequest(RequestModel):
    user_id: str


class GetUserTokenRequest(RequestModel):
    user_id: str


class UserTokenData(WireModel):
    user_token: str
    encryption_key: Optional[str] = None


class UserTokenResponse(WireModel):
    data: UserTokenData


class ListUsersParams(DateRangeParams):
    pin_status: Optional[PinStatus] = None
    security_question_status: Optional[SecurityQuestionStatus] = None


# --- Session auth ---


class DeviceTokenSocialRequest(RequestModel):
    device_id: str
    idempotency_key: Optional[str] = None


class DeviceTokenSocialData(WireModel):
    device_token: str
    device_encryption_key: Optional[str] = None


class DeviceTokenSocialResponse(WireModel):
    data: DeviceTokenSocialData


class DeviceTokenEmailRequest(RequestModel):
    device_id: str
    email: str
    idempotency_key: Optional[str] = None


class DeviceTokenEmailData(WireModel):
    device_token: str
    device_encryption_key: Optional[str] = None
    otp_token: Optional[str] = None


class DeviceTokenEmailResponse(WireModel):
    data: DeviceTokenEmailData


class RefreshUserTokenRequest(RequestModel):
    refresh_token: str
    device_id: str
    idempotency_key: Optional[str] = None


class RefreshUserTokenData(WireModel):
    user_token: str
    encryption_key: Optional[str] = None
    user_id: Optional[str] = None
    refresh_token: Optional[str] = None


class RefreshUserTokenResponse(WireModel):
    data: RefreshUserTokenData


class ResendOtpRequest(RequestModel):
    otp_token: str
    email: str
    device_id: str
    idempotency_key: Optional[str] = None


class ResendOtpData(WireModel):
    otp_token: str


class ResendOtpResponse(WireModel):
    data: ResendOtpData


# --- Challenges ---


class Challenge(WireModel):
    id: str
    type: ChallengeType
    status: ChallengeStatus
    correlation_ids: Optional[list[str]] = None
    error_code: Optional[int] = None
    error_message: Optional[str] = None


class ChallengeData(WireModel):
    challenge: Challenge


class ChallengeResponse(WireModel):
    data: ChallengeData


class ChallengesData(WireModel):
    challenges: list[Challenge]


class ChallengesResponse(WireModel):
    data: ChallengesData


class ChallengeIdData(WireModel):
    challenge_id: str


class ChallengeIdResponse(WireModel):
    data: ChallengeIdData


class InitializeUserRequest(RequestModel):
    """Set the PIN and create the first wallets in one challenge."""

    account_type: Optional[AccountType] = None
    blockchains: Optional[list[Blockchain]] = None
    metadata: Optional[list[WalletMetadata]] = None
    idempotency_key: Optional[str] = None


class PinChallengeRequest(RequestModel):
    """Body for creating, changing or restoring the end user's PIN."""

    idempotency_key: Optional[str] = None


# --- Wallets ---


class UserWallet(Wallet):
    """End-user wallet. ``state`` and ``wallet_set_id`` are always present."""

    state: WalletState
    wallet_set_id: str


class UserWalletsData(WireModel):
    wallets: list[UserWallet]


class UserWalletsResponse(WireModel):
    data: UserWalletsData


class UserWalletData(WireModel):
    wallet: UserWallet


class UserWalletResponse(WireModel):
    data: UserWalletData


class CreateUserWalletRequest(RequestModel):
    blockchains: list[Blockchain]
    account_type: Optional[AccountType] = None
    metadata: Optional[list[WalletMetadata]] = None
    idempotency_key: Optional[str] = None


class UpdateUserWalletRequest(RequestModel):
    name: Optional[str] = None
    ref_id: Optional[str] = None


class ListUserWalletsParams(DateRangeParams):
    address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    sca_core: Optional[ScaCore] = None
    wallet_set_id: Optional[str] = None
    ref_id: Optional[str] = None


class ListUserWalletBalancesParams(DateRangeParams):
    include_all: Optional[bool] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    standard: Optional[TokenStandard] = None


class ListUserWalletNftsParams(DateRangeParams):
    include_all: Optional[bool] = None
    name: Optional[str] = None
    token_address: Optional[str] = None
    standard: Optional[TokenStandard] = None


# --- Transactions ---


class UserTransaction(Transaction):
    """Transaction as seen by an end user; NFTs are expanded."""

    blockchain: Blockchain
    transaction_type: TransactionType
    nfts: Optional[list[Nft]] = None


class UserTransactionsData(WireModel):
    transactions: list[UserTransaction]


class UserTransactionsResponse(WireModel):
    data: UserTransactionsData


class UserTransactionData(WireModel):
    transaction: UserTransaction


class UserTransactionResponse(WireModel):
    data: UserTransactionData


class LowestNonceFeeInfo(WireModel):
    new_high_estimated_fee: TransactionFee
    fee_difference_amount: str


class LowestNonceTransactionData(WireModel):
    transaction: UserTransaction
    fee_info: LowestNonceFeeInfo


class LowestNonceTransactionResponse(WireModel):
    data: LowestNonceTransactionData


class ListUserTransactionsParams(DateRangeParams):
    blockchain: Optional[Blockchain] = None
    destination_address: Optional[str] = None
    include_all: Optional[bool] = None
    operation: Optional[Operation] = None
    state: Optional[TransactionState] = None
    tx_hash: Optional[str] = None
    tx_type: Optional[TransactionType] = None
    user_id: Optional[str] = None
    wallet_ids: Optional[list[str]] = None


class LowestNonceTransactionParams(RequestModel):
    blockchain: Optional[Blockchain] = None
    address: Optional[str] = None
    wallet_id: Optional[str] = None


class CreateUserTransferRequest(RequestModel):
    wallet_id: str
    destination_address: str
    amounts: Optional[list[str]] = None
    nft_token_ids: Optional[list[str]] = None
    token_id: Optional[str] = None
    token_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    idempotency_key: Optional[str] = None


class UserTransactionActionRequest(RequestModel):
    """Body for accelerating or cancelling a pending transaction."""

    idempotency_key: Optional[str] = None


class CreateUserContractExecutionRequest(RequestModel):
    wallet_id: str
    contract_address: str
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    call_data: Optional[str] = None
    amount: Optional[str] = None
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    idempotency_key: Optional[str] = None


class CreateWalletUpgradeRequest(RequestModel):
    """Upgrade a smart contract account to ``new_sca_core``."""

    wallet_id: str
    new_sca_core: ScaCore
    ref_id: Optional[str] = None
    fee_level: Optional[FeeLevel] = None
    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    idempotency_key: Optional[str] = None


class EstimateUserTransferFeeRequest(RequestModel):
    amounts: list[str]
    destination_address: str
    nft_token_ids: Optional[list[str]] = None
    source_address: Optional[str] = None
    token_id: Optional[str] = None
    token_address: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    wallet_id: Optional[str] = None


class EstimateContractExecutionFeeRequest(RequestModel):
    contract_address: str
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    call_data: Optional[str] = None
    amount: Optional[str] = None
    blockchain: Optional[Blockchain] = None
    source_address: Optional[str] = None
    wallet_id: Optional[str] = None


# --- Signing ---


class UserSignMessageRequest(RequestModel):
    wallet_id: str
    message: str
    encoded_by_hex: Optional[bool] = None
    memo: Optional[str] = None


class UserSignTypedDataRequest(RequestModel):
    """EIP-712 typed data as a JSON string, sent as ``data``."""

    wallet_id: str
    data: str
    memo: Optional[str] = None


class UserSignTransactionRequest(RequestModel):
    wallet_id: str
    raw_transaction: Optional[str] = None
    transaction: Optional[str] = None
    memo: Optional[str] = None
