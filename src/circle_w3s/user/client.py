"""Facade for the User-Controlled Wallets API.

Session-scoped operations take the end user's token as their first
argument and send it as ``X-User-Token``. Tokens expire independently of
the facade, so they are passed per call and never stored. An empty or
missing token yields :class:`~circle_w3s.client.response.InvalidParam`
without contacting the service.
"""

from __future__ import annotations

from typing import Optional, Union

from circle_w3s.auth.credential import UserToken
from circle_w3s.client.base import BaseClient
from circle_w3s.client.pagination import PageCursor
from circle_w3s.client.request import Endpoint
from circle_w3s.client.response import ApiResult
from circle_w3s.models import (
    BalancesResponse,
    EstimateFeeResponse,
    HTTPMethod,
    NftsResponse,
    TokenResponse,
    ValidateAddressRequest,
    ValidateAddressResponse,
)
from circle_w3s.user.models import (
    ChallengeIdResponse,
    ChallengeResponse,
    ChallengesResponse,
    CreateUserContractExecutionRequest,
    CreateUserRequest,
    CreateUserTransferRequest,
    CreateUserWalletRequest,
    CreateWalletUpgradeRequest,
    DeviceTokenEmailRequest,
    DeviceTokenEmailResponse,
    DeviceTokenSocialRequest,
    DeviceTokenSocialResponse,
    EndUserResponse,
    EstimateContractExecutionFeeRequest,
    EstimateUserTransferFeeRequest,
    GetUserTokenRequest,
    InitializeUserRequest,
    ListUsersParams,
    ListUserTransactionsParams,
    ListUserWalletBalancesParams,
    ListUserWalletNftsParams,
    ListUserWalletsParams,
    LowestNonceTransactionParams,
    LowestNonceTransactionResponse,
    PinChallengeRequest,
    RefreshUserTokenRequest,
    RefreshUserTokenResponse,
    ResendOtpRequest,
    ResendOtpResponse,
    UpdateUserWalletRequest,
    UserResponse,
    UserSignMessageRequest,
    UserSignTransactionRequest,
    UserSignTypedDataRequest,
    UsersResponse,
    UserTokenResponse,
    UserTransactionActionRequest,
    UserTransactionResponse,
    UserTransactionsResponse,
    UserWalletResponse,
    UserWalletsResponse,
)

GET, POST, PUT = HTTPMethod.GET, HTTPMethod.POST, HTTPMethod.PUT

SessionToken = Union[str, UserToken]

# --- Users ---
CREATE_USER = Endpoint("create_user", POST, "/v1/w3s/users", EndUserResponse)
LIST_USERS = Endpoint("list_users", GET, "/v1/w3s/users", UsersResponse)
GET_USER = Endpoint("get_user", GET, "/v1/w3s/users/{}", UserResponse)
GET_USER_TOKEN = Endpoint("get_user_token", POST, "/v1/w3s/users/token", UserTokenResponse)

# --- Session auth ---
GET_DEVICE_TOKEN_SOCIAL = Endpoint(
    "get_device_token_social", POST, "/v1/w3s/users/social/token", DeviceTokenSocialResponse
)
GET_DEVICE_TOKEN_EMAIL = Endpoint(
    "get_device_token_email", POST, "/v1/w3s/users/email/token", DeviceTokenEmailResponse
)
REFRESH_USER_TOKEN = Endpoint(
    "refresh_user_token", POST, "/v1/w3s/users/token/refresh", RefreshUserTokenResponse, session=True
)
RESEND_OTP = Endpoint(
    "resend_otp", POST, "/v1/w3s/users/email/resendOTP", ResendOtpResponse, session=True
)
GET_USER_BY_TOKEN = Endpoint("get_user_by_token", GET, "/v1/w3s/user", EndUserResponse, session=True)

# --- PIN and challenges ---
INITIALIZE_USER = Endpoint(
    "initialize_user", POST, "/v1/w3s/user/initialize", ChallengeIdResponse, session=True
)
CREATE_PIN_CHALLENGE = Endpoint(
    "create_pin_challenge", POST, "/v1/w3s/user/pin", ChallengeIdResponse, session=True
)
UPDATE_PIN_CHALLENGE = Endpoint(
    "update_pin_challenge", PUT, "/v1/w3s/user/pin", ChallengeIdResponse, session=True
)
RESTORE_PIN_CHALLENGE = Endpoint(
    "restore_pin_challenge", POST, "/v1/w3s/user/pin/restore", ChallengeIdResponse, session=True
)
LIST_CHALLENGES = Endpoint(
    "list_challenges", GET, "/v1/w3s/user/challenges", ChallengesResponse, session=True
)
GET_CHALLENGE = Endpoint(
    "get_challenge", GET, "/v1/w3s/user/challenges/{}", ChallengeResponse, session=True
)

# --- Wallets ---
CREATE_WALLET = Endpoint("create_wallet", POST, "/v1/w3s/user/wallets", ChallengeIdResponse, session=True)
LIST_WALLETS = Endpoint("list_wallets", GET, "/v1/w3s/wallets", UserWalletsResponse, session=True)
GET_WALLET = Endpoint("get_wallet", GET, "/v1/w3s/wallets/{}", UserWalletResponse, session=True)
UPDATE_WALLET = Endpoint("update_wallet", PUT, "/v1/w3s/wallets/{}", UserWalletResponse, session=True)
LIST_WALLET_BALANCES = Endpoint(
    "list_wallet_balances", GET, "/v1/w3s/wallets/{}/balances", BalancesResponse, session=True
)
LIST_WALLET_NFTS = Endpoint(
    "list_wallet_nfts", GET, "/v1/w3s/wallets/{}/nfts", NftsResponse, session=True
)

# --- Transactions ---
CREATE_TRANSFER_TRANSACTION = Endpoint(
    "create_transfer_transaction",
    POST,
    "/v1/w3s/user/transactions/transfer",
    ChallengeIdResponse,
    session=True,
)
ACCELERATE_TRANSACTION = Endpoint(
    "accelerate_transaction",
    POST,
    "/v1/w3s/user/transactions/{}/accelerate",
    ChallengeIdResponse,
    session=True,
)
CANCEL_TRANSACTION = Endpoint(
    "cancel_transaction",
    POST,
    "/v1/w3s/user/transactions/{}/cancel",
    ChallengeIdResponse,
    session=True,
)
CREATE_CONTRACT_EXECUTION_TRANSACTION = Endpoint(
    "create_contract_execution_transaction",
    POST,
    "/v1/w3s/user/transactions/contractExecution",
    ChallengeIdResponse,
    session=True,
)
CREATE_WALLET_UPGRADE_TRANSACTION = Endpoint(
    "create_wallet_upgrade_transaction",
    POST,
    "/v1/w3s/user/transactions/walletUpgrade",
    ChallengeIdResponse,
    session=True,
)
LIST_TRANSACTIONS = Endpoint(
    "list_transactions", GET, "/v1/w3s/transactions", UserTransactionsResponse, session=True
)
GET_TRANSACTION = Endpoint(
    "get_transaction", GET, "/v1/w3s/transactions/{}", UserTransactionResponse, session=True
)
GET_LOWEST_NONCE_TRANSACTION = Endpoint(
    "get_lowest_nonce_transaction",
    GET,
    "/v1/w3s/transactions/lowestNonceTransaction",
    LowestNonceTransactionResponse,
)
ESTIMATE_TRANSFER_FEE = Endpoint(
    "estimate_transfer_fee",
    POST,
    "/v1/w3s/transactions/transfer/estimateFee",
    EstimateFeeResponse,
    session=True,
)
ESTIMATE_CONTRACT_EXECUTION_FEE = Endpoint(
    "estimate_contract_execution_fee",
    POST,
    "/v1/w3s/transactions/contractExecution/estimateFee",
    EstimateFeeResponse,
    session=True,
)
VALIDATE_ADDRESS = Endpoint(
    "validate_address", POST, "/v1/w3s/transactions/validateAddress", ValidateAddressResponse
)

# --- Tokens and signing ---
GET_TOKEN = Endpoint("get_token", GET, "/v1/w3s/tokens/{}", TokenResponse)
SIGN_MESSAGE = Endpoint(
    "sign_message", POST, "/v1/w3s/user/sign/message", ChallengeIdResponse, session=True
)
SIGN_TYPED_DATA = Endpoint(
    "sign_typed_data", POST, "/v1/w3s/user/sign/typedData", ChallengeIdResponse, session=True
)
SIGN_TRANSACTION = Endpoint(
    "sign_transaction", POST, "/v1/w3s/user/sign/transaction", ChallengeIdResponse, session=True
)


class UserWalletsClient(BaseClient):
    """Async client for user-controlled wallets.

    Example::

        async with UserWalletsClient(api_key) as client:
            token = (await client.get_user_token(GetUserTokenRequest(user_id="u-1"))).unwrap()
            result = await client.create_wallet(
                token.data.user_token,
                CreateUserWalletRequest(blockchains=[Blockchain.MATIC_AMOY]),
            )
            challenge_id = result.unwrap().data.challenge_id
    """

    # ------------------------------------------------------------------ #
    # Users
    # ------------------------------------------------------------------ #

    async def create_user(self, request: CreateUserRequest) -> ApiResult[EndUserResponse]:
        return await self._call(CREATE_USER, body=request)

    async def list_users(
        self,
        params: Optional[ListUsersParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[UsersResponse]:
        return await self._call(LIST_USERS, params=params, cursor=cursor)

    async def get_user(self, user_id: str) -> ApiResult[UserResponse]:
        return await self._call(GET_USER, user_id)

    async def get_user_token(self, request: GetUserTokenRequest) -> ApiResult[UserTokenResponse]:
        """Issue a session token (valid for 60 minutes) for an end user."""
        return await self._call(GET_USER_TOKEN, body=request)

    # ------------------------------------------------------------------ #
    # Session auth
    # ------------------------------------------------------------------ #

    async def get_device_token_social(
        self, request: DeviceTokenSocialRequest
    ) -> ApiResult[DeviceTokenSocialResponse]:
        return await self._call(GET_DEVICE_TOKEN_SOCIAL, body=request)

    async def get_device_token_email(
        self, request: DeviceTokenEmailRequest
    ) -> ApiResult[DeviceTokenEmailResponse]:
        return await self._call(GET_DEVICE_TOKEN_EMAIL, body=request)

    async def refresh_user_token(
        self, user_token: SessionToken, request: RefreshUserTokenRequest
    ) -> ApiResult[RefreshUserTokenResponse]:
        return await self._call(REFRESH_USER_TOKEN, body=request, user_token=user_token)

    async def resend_otp(
        self, user_token: SessionToken, request: ResendOtpRequest
    ) -> ApiResult[ResendOtpResponse]:
        return await self._call(RESEND_OTP, body=request, user_token=user_token)

    async def get_user_by_token(self, user_token: SessionToken) -> ApiResult[EndUserResponse]:
        return await self._call(GET_USER_BY_TOKEN, user_token=user_token)

    # ------------------------------------------------------------------ #
    # PIN and challenges
    # ------------------------------------------------------------------ #

    async def initialize_user(
        self, user_token: SessionToken, request: InitializeUserRequest
    ) -> ApiResult[ChallengeIdResponse]:
        """Start the challenge that sets the PIN and creates the first wallets."""
        return await self._call(INITIALIZE_USER, body=request, user_token=user_token)

    async def create_pin_challenge(
        self, user_token: SessionToken, request: Optional[PinChallengeRequest] = None
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(
            CREATE_PIN_CHALLENGE, body=request or PinChallengeRequest(), user_token=user_token
        )

    async def update_pin_challenge(
        self, user_token: SessionToken, request: Optional[PinChallengeRequest] = None
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(
            UPDATE_PIN_CHALLENGE, body=request or PinChallengeRequest(), user_token=user_token
        )

    async def restore_pin_challenge(
        self, user_token: SessionToken, request: Optional[PinChallengeRequest] = None
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(
            RESTORE_PIN_CHALLENGE, body=request or PinChallengeRequest(), user_token=user_token
        )

    async def list_challenges(self, user_token: SessionToken) -> ApiResult[ChallengesResponse]:
        return await self._call(LIST_CHALLENGES, user_token=user_token)

    async def get_challenge(
        self, user_token: SessionToken, challenge_id: str
    ) -> ApiResult[ChallengeResponse]:
        return await self._call(GET_CHALLENGE, challenge_id, user_token=user_token)

    # ------------------------------------------------------------------ #
    # Wallets
    # ------------------------------------------------------------------ #

    async def create_wallet(
        self, user_token: SessionToken, request: CreateUserWalletRequest
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(CREATE_WALLET, body=request, user_token=user_token)

    async def list_wallets(
        self,
        user_token: SessionToken,
        params: Optional[ListUserWalletsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[UserWalletsResponse]:
        return await self._call(LIST_WALLETS, params=params, cursor=cursor, user_token=user_token)

    async def get_wallet(
        self, user_token: SessionToken, wallet_id: str
    ) -> ApiResult[UserWalletResponse]:
        return await self._call(GET_WALLET, wallet_id, user_token=user_token)

    async def update_wallet(
        self, user_token: SessionToken, wallet_id: str, request: UpdateUserWalletRequest
    ) -> ApiResult[UserWalletResponse]:
        return await self._call(UPDATE_WALLET, wallet_id, body=request, user_token=user_token)

    async def list_wallet_balances(
        self,
        user_token: SessionToken,
        wallet_id: str,
        params: Optional[ListUserWalletBalancesParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[BalancesResponse]:
        return await self._call(
            LIST_WALLET_BALANCES, wallet_id, params=params, cursor=cursor, user_token=user_token
        )

    async def list_wallet_nfts(
        self,
        user_token: SessionToken,
        wallet_id: str,
        params: Optional[ListUserWalletNftsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[NftsResponse]:
        return await self._call(
            LIST_WALLET_NFTS, wallet_id, params=params, cursor=cursor, user_token=user_token
        )

    # ------------------------------------------------------------------ #
    # Transactions
    # ------------------------------------------------------------------ #

    async def create_transfer_transaction(
        self, user_token: SessionToken, request: CreateUserTransferRequest
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(CREATE_TRANSFER_TRANSACTION, body=request, user_token=user_token)

    async def accelerate_transaction(
        self,
        user_token: SessionToken,
        transaction_id: str,
        request: Optional[UserTransactionActionRequest] = None,
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(
            ACCELERATE_TRANSACTION,
            transaction_id,
            body=request or UserTransactionActionRequest(),
            user_token=user_token,
        )

    async def cancel_transaction(
        self,
        user_token: SessionToken,
        transaction_id: str,
        request: Optional[UserTransactionActionRequest] = None,
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(
            CANCEL_TRANSACTION,
            transaction_id,
            body=request or UserTransactionActionRequest(),
            user_token=user_token,
        )

    async def create_contract_execution_transaction(
        self, user_token: SessionToken, request: CreateUserContractExecutionRequest
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(
            CREATE_CONTRACT_EXECUTION_TRANSACTION, body=request, user_token=user_token
        )

    async def create_wallet_upgrade_transaction(
        self, user_token: SessionToken, request: CreateWalletUpgradeRequest
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(
            CREATE_WALLET_UPGRADE_TRANSACTION, body=request, user_token=user_token
        )

    async def list_transactions(
        self,
        user_token: SessionToken,
        params: Optional[ListUserTransactionsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[UserTransactionsResponse]:
        return await self._call(
            LIST_TRANSACTIONS, params=params, cursor=cursor, user_token=user_token
        )

    async def get_transaction(
        self, user_token: SessionToken, transaction_id: str
    ) -> ApiResult[UserTransactionResponse]:
        return await self._call(GET_TRANSACTION, transaction_id, user_token=user_token)

    async def get_lowest_nonce_transaction(
        self, params: Optional[LowestNonceTransactionParams] = None
    ) -> ApiResult[LowestNonceTransactionResponse]:
        """Find the pending transaction with the lowest nonce, e.g. to unblock a stuck queue."""
        return await self._call(GET_LOWEST_NONCE_TRANSACTION, params=params)

    async def estimate_transfer_fee(
        self, user_token: SessionToken, request: EstimateUserTransferFeeRequest
    ) -> ApiResult[EstimateFeeResponse]:
        return await self._call(ESTIMATE_TRANSFER_FEE, body=request, user_token=user_token)

    async def estimate_contract_execution_fee(
        self, user_token: SessionToken, request: EstimateContractExecutionFeeRequest
    ) -> ApiResult[EstimateFeeResponse]:
        return await self._call(
            ESTIMATE_CONTRACT_EXECUTION_FEE, body=request, user_token=user_token
        )

    async def validate_address(
        self, request: ValidateAddressRequest
    ) -> ApiResult[ValidateAddressResponse]:
        return await self._call(VALIDATE_ADDRESS, body=request)

    # ------------------------------------------------------------------ #
    # Tokens and signing
    # ------------------------------------------------------------------ #

    async def get_token(self, token_id: str) -> ApiResult[TokenResponse]:
        return await self._call(GET_TOKEN, token_id)

    async def sign_message(
        self, user_token: SessionToken, request: UserSignMessageRequest
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(SIGN_MESSAGE, body=request, user_token=user_token)

    async def sign_typed_data(
        self, user_token: SessionToken, request: UserSignTypedDataRequest
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(SIGN_TYPED_DATA, body=request, user_token=user_token)

    async def sign_transaction(
        self, user_token: SessionToken, request: UserSignTransactionRequest
    ) -> ApiResult[ChallengeIdResponse]:
        return await self._call(SIGN_TRANSACTION, body=request, user_token=user_token)
