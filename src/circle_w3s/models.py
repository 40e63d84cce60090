"""Pydantic models shared across the circle_w3s services.

Every service package defines its own payload models in ``<service>/models.py``
on top of the base classes declared here. The models in this module fall into
three groups:

**Wire bases** -- :class:`WireModel` for response payloads (lenient, unknown
keys preserved in ``model_extra``) and :class:`RequestModel` for bodies and
query parameters (strict, unknown keys rejected). Both map snake_case
attributes to the camelCase keys used on the wire.

**Core models** -- :class:`ApiErrorBody`, the structured ``{code, message}``
error shape, and :class:`ClientConfig`, the settings a facade is built from.

**Wallet vocabulary** -- enumerations and payloads shared by the
developer-controlled and user-controlled wallet services:
    :class:`Blockchain`, :class:`CustodyType`, :class:`AccountType`,
    :class:`WalletState`, :class:`FeeLevel`, :class:`TokenStandard`,
    :class:`NftStandard`, :class:`ScaCore`, :class:`TransactionState`,
    :class:`TransactionType`, :class:`Operation`, :class:`Token`,
    :class:`Balance`, :class:`Nft`, :class:`Wallet`, :class:`TransactionFee`,
    :class:`Transaction` and their ``{data: ...}`` envelopes.

Enumerations are ``str`` enums whose *values* are the wire tokens, so
``model_dump(mode="json")`` produces exactly what the service expects.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic.alias_generators import to_camel


DEFAULT_BASE_URL = "https://api.circle.com"


# --- Wire bases ---


class WireModel(BaseModel):
    """Base class for payloads decoded from service responses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class RequestModel(BaseModel):
    """Base class for request bodies and query parameter objects.

    Fields left as ``None`` are never sent. Request models are validated on
    assignment so a model reused across calls cannot drift into an invalid
    state.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        validate_assignment=True,
    )


class DateRangeParams(RequestModel):
    """Query parameters shared by every list operation.

    ``from`` is a Python keyword, so the attribute is ``from_``.
    """

    from_: Optional[str] = Field(
        default=None, alias="from", description="Start of the date-time range (ISO-8601)"
    )
    to: Optional[str] = Field(default=None, description="End of the date-time range (ISO-8601)")


# --- Core models ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods used by the W3S services."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"


class ApiErrorBody(BaseModel):
    """Structured error returned by the service for error-range statuses."""

    code: int
    message: str


class ClientConfig(BaseModel):
    """Settings a service facade is constructed from.

    Example::

        config = ClientConfig(api_key="TEST_API_KEY:abc:def")
        client = DeveloperWalletsClient.from_config(config)
    """

    api_key: SecretStr = Field(description="Primary API key sent as a bearer token")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Service root URL")
    timeout: float = Field(default=30.0, gt=0, description="Per-call timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")


# --- Wallet vocabulary ---


class Blockchain(str, enum.Enum):
    """Chains supported by the programmable wallet services."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
    MATIC = "MATIC"
    MATIC_AMOY = "MATIC-AMOY"
    SOL = "SOL"
    SOL_DEVNET = "SOL-DEVNET"
    ARB = "ARB"
    ARB_SEPOLIA = "ARB-SEPOLIA"
    NEAR = "NEAR"
    NEAR_TESTNET = "NEAR-TESTNET"
    EVM = "EVM"
    EVM_TESTNET = "EVM-TESTNET"
    UNI = "UNI"
    UNI_SEPOLIA = "UNI-SEPOLIA"
    BASE = "BASE"
    BASE_SEPOLIA = "BASE-SEPOLIA"
    OP = "OP"
    OP_SEPOLIA = "OP-SEPOLIA"
    APTOS = "APTOS"
    APTOS_TESTNET = "APTOS-TESTNET"
    ARC_TESTNET = "ARC-TESTNET"
    MONAD = "MONAD"
    MONAD_TESTNET = "MONAD-TESTNET"


class CustodyType(str, enum.Enum):
    DEVELOPER = "DEVELOPER"
    ENDUSER = "ENDUSER"


class AccountType(str, enum.Enum):
    """Externally owned account or smart contract account."""

    SCA = "SCA"
    EOA = "EOA"


class WalletState(str, enum.Enum):
    LIVE = "LIVE"
    FROZEN = "FROZEN"


class FeeLevel(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class TokenStandard(str, enum.Enum):
    """Token standards across EVM, Solana and Aptos chains."""

    ERC20 = "ERC20"
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"
    FUNGIBLE = "Fungible"
    FUNGIBLE_ASSET = "FungibleAsset"
    NON_FUNGIBLE = "NonFungible"
    NON_FUNGIBLE_EDITION = "NonFungibleEdition"
    PROGRAMMABLE_NON_FUNGIBLE = "ProgrammableNonFungible"
    PROGRAMMABLE_NON_FUNGIBLE_EDITION = "ProgrammableNonFungibleEdition"


class NftStandard(str, enum.Enum):
    ERC721 = "ERC721"
    ERC1155 = "ERC1155"


class ScaCore(str, enum.Enum):
    """Smart contract account implementation version."""

    CIRCLE_4337_V1 = "circle_4337_v1"
    CIRCLE_6900_SINGLEOWNER_V1 = "circle_6900_singleowner_v1"
    CIRCLE_6900_SINGLEOWNER_V2 = "circle_6900_singleowner_v2"
    CIRCLE_6900_SINGLEOWNER_V3 = "circle_6900_singleowner_v3"


class TransactionState(str, enum.Enum):
    CANCELLED = "CANCELLED"
    CONFIRMED = "CONFIRMED"
    COMPLETE = "COMPLETE"
    DENIED = "DENIED"
    FAILED = "FAILED"
    INITIATED = "INITIATED"
    CLEARED = "CLEARED"
    QUEUED = "QUEUED"
    SENT = "SENT"
    STUCK = "STUCK"


class TransactionType(str, enum.Enum):
    INBOUND = "INBOUND"
    OUTBOUND = "OUTBOUND"


class Operation(str, enum.Enum):
    TRANSFER = "TRANSFER"
    CONTRACT_EXECUTION = "CONTRACT_EXECUTION"
    CONTRACT_DEPLOYMENT = "CONTRACT_DEPLOYMENT"


class Token(WireModel):
    """Token metadata as returned inside balances, NFTs and token lookups."""

    id: Optional[str] = None
    blockchain: Blockchain
    is_native: bool
    name: Optional[str] = None
    standard: Optional[TokenStandard] = None
    decimals: Optional[int] = None
    symbol: Optional[str] = None
    token_address: Optional[str] = None
    update_date: Optional[str] = None
    create_date: Optional[str] = None


class Balance(WireModel):
    amount: str
    token: Token
    update_date: str


class Nft(WireModel):
    amount: str
    token: Token
    update_date: str
    nft_token_id: Optional[str] = None
    metadata: Optional[Any] = None


class WalletMetadata(RequestModel):
    """Per-wallet name and reference id supplied at creation."""

    name: Optional[str] = None
    ref_id: Optional[str] = None


class Wallet(WireModel):
    id: str
    address: str
    blockchain: Blockchain
    create_date: str
    update_date: str
    custody_type: CustodyType
    name: Optional[str] = None
    ref_id: Optional[str] = None
    state: Optional[WalletState] = None
    user_id: Optional[str] = None
    wallet_set_id: Optional[str] = None
    initial_public_key: Optional[str] = None
    account_type: Optional[AccountType] = None
    sca_core: Optional[ScaCore] = None
    token_balances: Optional[list[Balance]] = None


class TransactionFee(WireModel):
    """Fee estimate for one fee level. All amounts are decimal strings."""

    gas_limit: Optional[str] = None
    gas_price: Optional[str] = None
    max_fee: Optional[str] = None
    priority_fee: Optional[str] = None
    base_fee: Optional[str] = None
    network_fee: Optional[str] = None
    network_fee_raw: Optional[str] = None
    l1_fee: Optional[str] = None


class Transaction(WireModel):
    id: str
    state: TransactionState
    create_date: str
    update_date: str
    blockchain: Optional[Blockchain] = None
    transaction_type: Optional[TransactionType] = None
    abi_function_signature: Optional[str] = None
    abi_parameters: Optional[list[Any]] = None
    amounts: Optional[list[str]] = None
    amount_in_usd: Optional[str] = None
    block_hash: Optional[str] = None
    block_height: Optional[int] = None
    contract_address: Optional[str] = None
    custody_type: Optional[CustodyType] = None
    destination_address: Optional[str] = None
    error_reason: Optional[str] = None
    error_details: Optional[str] = None
    estimated_fee: Optional[TransactionFee] = None
    fee_level: Optional[FeeLevel] = None
    first_confirm_date: Optional[str] = None
    network_fee: Optional[str] = None
    network_fee_in_usd: Optional[str] = None
    nfts: Optional[list[Any]] = None
    operation: Optional[Operation] = None
    ref_id: Optional[str] = None
    source_address: Optional[str] = None
    token_id: Optional[str] = None
    tx_hash: Optional[str] = None
    user_id: Optional[str] = None
    wallet_id: Optional[str] = None
    transaction_screening_evaluation: Optional[dict[str, Any]] = None


# --- Envelopes shared by both wallet services ---


class WalletsData(WireModel):
    wallets: list[Wallet]


class WalletsResponse(WireModel):
    data: WalletsData


class WalletData(WireModel):
    wallet: Wallet


class WalletResponse(WireModel):
    data: WalletData


class BalancesData(WireModel):
    token_balances: list[Balance]


class BalancesResponse(WireModel):
    data: BalancesData


class NftsData(WireModel):
    nfts: list[Nft]


class NftsResponse(WireModel):
    data: NftsData


class TransactionsData(WireModel):
    transactions: list[Transaction]


class TransactionsResponse(WireModel):
    data: TransactionsData


class TransactionData(WireModel):
    transaction: Transaction


class TransactionResponse(WireModel):
    data: TransactionData


class TokenData(WireModel):
    token: Token


class TokenResponse(WireModel):
    data: TokenData


class EstimateFeeData(WireModel):
    low: Optional[TransactionFee] = None
    medium: Optional[TransactionFee] = None
    high: Optional[TransactionFee] = None
    call_gas_limit: Optional[str] = None
    verification_gas_limit: Optional[str] = None
    pre_verification_gas: Optional[str] = None


class EstimateFeeResponse(WireModel):
    data: EstimateFeeData


class ValidateAddressRequest(RequestModel):
    blockchain: Blockchain
    address: str


class ValidateAddressData(WireModel):
    is_valid: bool


class ValidateAddressResponse(WireModel):
    data: ValidateAddressData
