"""User-Controlled Wallets: end users, sessions, PIN challenges, wallets, transactions."""

from circle_w3s.user.client import UserWalletsClient
from circle_w3s.user.models import (
    Challenge,
    ChallengeStatus,
    ChallengeType,
    CreateUserContractExecutionRequest,
    CreateUserRequest,
    CreateUserTransferRequest,
    CreateUserWalletRequest,
    CreateWalletUpgradeRequest,
    DeviceTokenEmailRequest,
    DeviceTokenSocialRequest,
    EndUser,
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
    PinChallengeRequest,
    PinStatus,
    RefreshUserTokenRequest,
    ResendOtpRequest,
    UpdateUserWalletRequest,
    UserSignMessageRequest,
    UserSignTransactionRequest,
    UserSignTypedDataRequest,
    UserTransactionActionRequest,
)

__all__ = [
    "Challenge",
    "ChallengeStatus",
    "ChallengeType",
    "CreateUserContractExecutionRequest",
    "CreateUserRequest",
    "CreateUserTransferRequest",
    "CreateUserWalletRequest",
    "CreateWalletUpgradeRequest",
    "DeviceTokenEmailRequest",
    "DeviceTokenSocialRequest",
    "EndUser",
    "EstimateContractExecutionFeeRequest",
    "EstimateUserTransferFeeRequest",
    "GetUserTokenRequest",
    "InitializeUserRequest",
    "ListUsersParams",
    "ListUserTransactionsParams",
    "ListUserWalletBalancesParams",
    "ListUserWalletNftsParams",
    "ListUserWalletsParams",
    "LowestNonceTransactionParams",
    "PinChallengeRequest",
    "PinStatus",
    "RefreshUserTokenRequest",
    "ResendOtpRequest",
    "UpdateUserWalletRequest",
    "UserSignMessageRequest",
    "UserSignTransactionRequest",
    "UserSignTypedDataRequest",
    "UserTransactionActionRequest",
    "UserWalletsClient",
]
