"""Facade for the Developer-Controlled Wallets API.

Every mutating body carries an ``entitySecretCiphertext`` prepared by the
caller. Bodies that take an ``idempotencyKey`` get a fresh one per call
unless the caller sets ``idempotency_key`` on the request model.
"""

from __future__ import annotations

from typing import Optional

from circle_w3s.client.base import BaseClient
from circle_w3s.client.pagination import PageCursor
from circle_w3s.client.request import Endpoint
from circle_w3s.client.response import ApiResult
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
    SignatureResponse,
    SignMessageRequest,
    SignTransactionRequest,
    SignTransactionResponse,
    SignTypedDataRequest,
    UpdateWalletRequest,
    UpdateWalletSetRequest,
    WalletSetResponse,
    WalletSetsResponse,
)
from circle_w3s.models import (
    BalancesResponse,
    DateRangeParams,
    EstimateFeeResponse,
    HTTPMethod,
    NftsResponse,
    TokenResponse,
    TransactionResponse,
    TransactionsResponse,
    ValidateAddressRequest,
    ValidateAddressResponse,
    WalletResponse,
    WalletsResponse,
)

GET, POST, PUT = HTTPMethod.GET, HTTPMethod.POST, HTTPMethod.PUT

# --- Wallet sets ---
CREATE_WALLET_SET = Endpoint("create_wallet_set", POST, "/v1/w3s/developer/walletSets", WalletSetResponse)
GET_WALLET_SET = Endpoint("get_wallet_set", GET, "/v1/w3s/developer/walletSets/{}", WalletSetResponse)
UPDATE_WALLET_SET = Endpoint("update_wallet_set", PUT, "/v1/w3s/developer/walletSets/{}", WalletSetResponse)
LIST_WALLET_SETS = Endpoint("list_wallet_sets", GET, "/v1/w3s/walletSets", WalletSetsResponse)

# --- Wallets ---
CREATE_WALLETS = Endpoint("create_wallets", POST, "/v1/w3s/developer/wallets", WalletsResponse)
LIST_WALLETS = Endpoint("list_wallets", GET, "/v1/w3s/wallets", WalletsResponse)
GET_WALLET = Endpoint("get_wallet", GET, "/v1/w3s/wallets/{}", WalletResponse)
UPDATE_WALLET = Endpoint("update_wallet", PUT, "/v1/w3s/wallets/{}", WalletResponse)
LIST_WALLET_BALANCES = Endpoint(
    "list_wallet_balances", GET, "/v1/w3s/developer/wallets/balances", WalletsResponse
)
LIST_WALLET_TOKEN_BALANCES = Endpoint(
    "list_wallet_token_balances", GET, "/v1/w3s/wallets/{}/balances", BalancesResponse
)
LIST_WALLET_NFTS = Endpoint("list_wallet_nfts", GET, "/v1/w3s/wallets/{}/nfts", NftsResponse)

# --- Signing ---
SIGN_MESSAGE = Endpoint("sign_message", POST, "/v1/w3s/developer/sign/message", SignatureResponse)
SIGN_TYPED_DATA = Endpoint(
    "sign_typed_data", POST, "/v1/w3s/developer/sign/typedData", SignatureResponse
)
SIGN_TRANSACTION = Endpoint(
    "sign_transaction", POST, "/v1/w3s/developer/sign/transaction", SignTransactionResponse
)

# --- Transactions ---
LIST_TRANSACTIONS = Endpoint("list_transactions", GET, "/v1/w3s/transactions", TransactionsResponse)
GET_TRANSACTION = Endpoint("get_transaction", GET, "/v1/w3s/transactions/{}", TransactionResponse)
CREATE_TRANSFER_TRANSACTION = Endpoint(
    "create_transfer_transaction", POST, "/v1/w3s/developer/transactions/transfer", TransactionResponse
)
GET_FEE_PARAMETERS = Endpoint(
    "get_fee_parameters", POST, "/v1/w3s/developer/transactions/feeParameters", EstimateFeeResponse
)
CREATE_CONTRACT_EXECUTION_TRANSACTION = Endpoint(
    "create_contract_execution_transaction",
    POST,
    "/v1/w3s/developer/transactions/contractExecution",
    TransactionResponse,
)
CANCEL_TRANSACTION = Endpoint(
    "cancel_transaction", POST, "/v1/w3s/developer/transactions/{}/cancel", TransactionResponse
)
ACCELERATE_TRANSACTION = Endpoint(
    "accelerate_transaction", POST, "/v1/w3s/developer/transactions/{}/accelerate", TransactionResponse
)

# --- Tokens and utilities ---
GET_TOKEN = Endpoint("get_token", GET, "/v1/w3s/tokens/{}", TokenResponse)
ESTIMATE_TRANSFER_FEE = Endpoint(
    "estimate_transfer_fee", POST, "/v1/w3s/transactions/transfer/estimateFee", EstimateFeeResponse
)
VALIDATE_ADDRESS = Endpoint(
    "validate_address", POST, "/v1/w3s/transactions/validateAddress", ValidateAddressResponse
)


class DeveloperWalletsClient(BaseClient):
    """Async client for developer-controlled wallets.

    Example::

        async with DeveloperWalletsClient(api_key) as client:
            result = await client.create_wallets(
                CreateWalletsRequest(
                    entity_secret_ciphertext=ciphertext,
                    wallet_set_id=wallet_set_id,
                    blockchains=[Blockchain.ETH_SEPOLIA],
                    count=2,
                )
            )
            for wallet in result.unwrap().data.wallets:
                print(wallet.address)
    """

    # ------------------------------------------------------------------ #
    # Wallet sets
    # ------------------------------------------------------------------ #

    async def create_wallet_set(
        self, request: CreateWalletSetRequest
    ) -> ApiResult[WalletSetResponse]:
        return await self._call(CREATE_WALLET_SET, body=request)

    async def get_wallet_set(self, wallet_set_id: str) -> ApiResult[WalletSetResponse]:
        return await self._call(GET_WALLET_SET, wallet_set_id)

    async def update_wallet_set(
        self, wallet_set_id: str, request: UpdateWalletSetRequest
    ) -> ApiResult[WalletSetResponse]:
        return await self._call(UPDATE_WALLET_SET, wallet_set_id, body=request)

    async def list_wallet_sets(
        self,
        params: Optional[DateRangeParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[WalletSetsResponse]:
        return await self._call(LIST_WALLET_SETS, params=params, cursor=cursor)

    # ------------------------------------------------------------------ #
    # Wallets
    # ------------------------------------------------------------------ #

    async def create_wallets(self, request: CreateWalletsRequest) -> ApiResult[WalletsResponse]:
        """Create one or more wallets in a wallet set."""
        return await self._call(CREATE_WALLETS, body=request)

    async def list_wallets(
        self,
        params: Optional[ListWalletsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[WalletsResponse]:
        return await self._call(LIST_WALLETS, params=params, cursor=cursor)

    async def get_wallet(self, wallet_id: str) -> ApiResult[WalletResponse]:
        return await self._call(GET_WALLET, wallet_id)

    async def update_wallet(
        self, wallet_id: str, request: UpdateWalletRequest
    ) -> ApiResult[WalletResponse]:
        return await self._call(UPDATE_WALLET, wallet_id, body=request)

    async def list_wallet_balances(
        self,
        params: Optional[ListWalletBalancesParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[WalletsResponse]:
        """List wallets with their token balances embedded."""
        return await self._call(LIST_WALLET_BALANCES, params=params, cursor=cursor)

    async def list_wallet_token_balances(
        self,
        wallet_id: str,
        params: Optional[DateRangeParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[BalancesResponse]:
        return await self._call(LIST_WALLET_TOKEN_BALANCES, wallet_id, params=params, cursor=cursor)

    async def list_wallet_nfts(
        self,
        wallet_id: str,
        params: Optional[ListWalletNftsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[NftsResponse]:
        return await self._call(LIST_WALLET_NFTS, wallet_id, params=params, cursor=cursor)

    # ------------------------------------------------------------------ #
    # Signing
    # ------------------------------------------------------------------ #

    async def sign_message(self, request: SignMessageRequest) -> ApiResult[SignatureResponse]:
        return await self._call(SIGN_MESSAGE, body=request)

    async def sign_typed_data(self, request: SignTypedDataRequest) -> ApiResult[SignatureResponse]:
        return await self._call(SIGN_TYPED_DATA, body=request)

    async def sign_transaction(
        self, request: SignTransactionRequest
    ) -> ApiResult[SignTransactionResponse]:
        return await self._call(SIGN_TRANSACTION, body=request)

    # ------------------------------------------------------------------ #
    # Transactions
    # ------------------------------------------------------------------ #

    async def list_transactions(
        self,
        params: Optional[ListTransactionsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[TransactionsResponse]:
        return await self._call(LIST_TRANSACTIONS, params=params, cursor=cursor)

    async def get_transaction(self, transaction_id: str) -> ApiResult[TransactionResponse]:
        return await self._call(GET_TRANSACTION, transaction_id)

    async def create_transfer_transaction(
        self, request: CreateTransferTransactionRequest
    ) -> ApiResult[TransactionResponse]:
        return await self._call(CREATE_TRANSFER_TRANSACTION, body=request)

    async def get_fee_parameters(
        self, request: CreateTransferTransactionRequest
    ) -> ApiResult[EstimateFeeResponse]:
        """Estimate fee parameters for a transfer before submitting it."""
        return await self._call(GET_FEE_PARAMETERS, body=request)

    async def create_contract_execution_transaction(
        self, request: CreateContractExecutionTransactionRequest
    ) -> ApiResult[TransactionResponse]:
        return await self._call(CREATE_CONTRACT_EXECUTION_TRANSACTION, body=request)

    async def cancel_transaction(
        self, transaction_id: str, request: CancelTransactionRequest
    ) -> ApiResult[TransactionResponse]:
        return await self._call(CANCEL_TRANSACTION, transaction_id, body=request)

    async def accelerate_transaction(
        self, transaction_id: str, request: AccelerateTransactionRequest
    ) -> ApiResult[TransactionResponse]:
        return await self._call(ACCELERATE_TRANSACTION, transaction_id, body=request)

    # ------------------------------------------------------------------ #
    # Tokens and utilities
    # ------------------------------------------------------------------ #

    async def get_token(self, token_id: str) -> ApiResult[TokenResponse]:
        return await self._call(GET_TOKEN, token_id)

    async def estimate_transfer_fee(
        self, request: EstimateTransferFeeRequest
    ) -> ApiResult[EstimateFeeResponse]:
        return await self._call(ESTIMATE_TRANSFER_FEE, body=request)

    async def validate_address(
        self, request: ValidateAddressRequest
    ) -> ApiResult[ValidateAddressResponse]:
        return await self._call(VALIDATE_ADDRESS, body=request)
