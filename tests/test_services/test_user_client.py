"""Tests for the user-controlled wallets facade."""

from __future__ import annotations

from typing import Any

import pytest

from circle_w3s.auth import UserToken
from circle_w3s.client.pagination import PageCursor
from circle_w3s.client.response import DecodeFailure, InvalidParam, Success
from circle_w3s.models import AccountType, Blockchain, ScaCore, TransactionState
from circle_w3s.user import UserWalletsClient
from circle_w3s.user.models import (
    ChallengeStatus,
    ChallengeType,
    CreateUserContractExecutionRequest,
    CreateUserRequest,
    CreateUserTransferRequest,
    CreateUserWalletRequest,
    CreateWalletUpgradeRequest,
    DeviceTokenEmailRequest,
    DeviceTokenSocialRequest,
    EstimateContractExecutionFeeRequest,
    EstimateUserTransferFeeRequest,
    GetUserTokenRequest,
    InitializeUserRequest,
    ListUsersParams,
    ListUserTransactionsParams,
    LowestNonceTransactionParams,
    PinChallengeRequest,
    PinStatus,
    RefreshUserTokenRequest,
    ResendOtpRequest,
    UpdateUserWalletRequest,
    UserSignMessageRequest,
    UserSignTransactionRequest,
    UserSignTypedDataRequest,
)


USER_TOKEN = "eyJhbGciOiJSUzI1NiJ9.session"
CHALLENGE = {"data": {"challengeId": "c-1"}}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _client(handler) -> UserWalletsClient:
    return UserWalletsClient(
        "TEST_API_KEY:abc:def", "https://api.circle.test", transport=handler.transport()
    )


def _end_user() -> dict[str, Any]:
    return {
        "id": "user-1",
        "createDate": "2024-01-01T00:00:00Z",
        "pinStatus": "ENABLED",
        "status": "ENABLED",
        "securityQuestionStatus": "UNSET",
    }


def _user_wallet(wallet_payload: dict[str, Any]) -> dict[str, Any]:
    return dict(wallet_payload, custodyType="ENDUSER", userId="user-1")


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class TestUsers:
    @pytest.mark.asyncio
    async def test_create_user_needs_no_session(self, make_handler) -> None:
        handler = make_handler(201, {"data": _end_user()})
        async with _client(handler) as client:
            result = await client.create_user(CreateUserRequest(user_id="user-1"))

        assert handler.last.url.path == "/v1/w3s/users"
        assert handler.last_json() == {"userId": "user-1"}
        assert "X-User-Token" not in handler.last.headers
        assert result.unwrap().data.pin_status is PinStatus.ENABLED

    @pytest.mark.asyncio
    async def test_list_users(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"users": [_end_user()]}})
        async with _client(handler) as client:
            result = await client.list_users(
                ListUsersParams(pin_status=PinStatus.UNSET), cursor=PageCursor(size=10)
            )

        assert dict(handler.last.url.params) == {"pinStatus": "UNSET", "pageSize": "10"}
        assert result.unwrap().data.users[0].id == "user-1"

    @pytest.mark.asyncio
    async def test_get_user(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"user": _end_user()}})
        async with _client(handler) as client:
            result = await client.get_user("user-1")

        assert handler.last.url.path == "/v1/w3s/users/user-1"
        assert result.unwrap().data.user.id == "user-1"

    @pytest.mark.asyncio
    async def test_get_user_token(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"userToken": USER_TOKEN, "encryptionKey": "k"}})
        async with _client(handler) as client:
            result = await client.get_user_token(GetUserTokenRequest(user_id="user-1"))

        assert handler.last.url.path == "/v1/w3s/users/token"
        assert result.unwrap().data.user_token == USER_TOKEN


# ---------------------------------------------------------------------------
# Session auth
# ---------------------------------------------------------------------------


class TestSessionAuth:
    @pytest.mark.asyncio
    async def test_device_token_social(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"deviceToken": "dt", "deviceEncryptionKey": "dk"}})
        async with _client(handler) as client:
            result = await client.get_device_token_social(DeviceTokenSocialRequest(device_id="dev-1"))

        body = handler.last_json()
        assert handler.last.url.path == "/v1/w3s/users/social/token"
        assert body["deviceId"] == "dev-1"
        assert body["idempotencyKey"]
        assert result.unwrap().data.device_token == "dt"

    @pytest.mark.asyncio
    async def test_device_token_email(self, make_handler) -> None:
        handler = make_handler(
            200, {"data": {"deviceToken": "dt", "deviceEncryptionKey": "dk", "otpToken": "otp"}}
        )
        async with _client(handler) as client:
            result = await client.get_device_token_email(
                DeviceTokenEmailRequest(device_id="dev-1", email="user@example.com")
            )

        assert handler.last.url.path == "/v1/w3s/users/email/token"
        assert result.unwrap().data.otp_token == "otp"

    @pytest.mark.asyncio
    async def test_refresh_user_token(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"userToken": "new", "refreshToken": "r2"}})
        async with _client(handler) as client:
            result = await client.refresh_user_token(
                USER_TOKEN, RefreshUserTokenRequest(refresh_token="r1", device_id="dev-1")
            )

        assert handler.last.url.path == "/v1/w3s/users/token/refresh"
        assert handler.last.headers["X-User-Token"] == USER_TOKEN
        assert result.unwrap().data.refresh_token == "r2"

    @pytest.mark.asyncio
    async def test_resend_otp(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"otpToken": "otp2"}})
        async with _client(handler) as client:
            await client.resend_otp(
                USER_TOKEN,
                ResendOtpRequest(otp_token="otp", email="user@example.com", device_id="dev-1"),
            )

        assert handler.last.url.path == "/v1/w3s/users/email/resendOTP"

    @pytest.mark.asyncio
    async def test_get_user_by_token(self, make_handler) -> None:
        handler = make_handler(200, {"data": _end_user()})
        async with _client(handler) as client:
            result = await client.get_user_by_token(UserToken(USER_TOKEN))

        assert handler.last.url.path == "/v1/w3s/user"
        assert handler.last.headers["X-User-Token"] == USER_TOKEN
        assert isinstance(result, Success)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", ["", "   "])
    async def test_empty_token_rejected_locally(self, make_handler, token: str) -> None:
        handler = make_handler(200, {"data": _end_user()})
        async with _client(handler) as client:
            result = await client.get_user_by_token(token)

        assert isinstance(result, InvalidParam)
        assert "user token" in result.message
        assert handler.requests == []

    @pytest.mark.asyncio
    async def test_missing_token_rejected_locally(self, make_handler) -> None:
        handler = make_handler(200, {"data": _end_user()})
        async with _client(handler) as client:
            result = await client.list_challenges(None)  # type: ignore[arg-type]

        assert isinstance(result, InvalidParam)
        assert handler.requests == []


# ---------------------------------------------------------------------------
# PIN and challenges
# ---------------------------------------------------------------------------


class TestChallenges:
    @pytest.mark.asyncio
    async def test_initialize_user(self, make_handler) -> None:
        handler = make_handler(201, CHALLENGE)
        async with _client(handler) as client:
            result = await client.initialize_user(
                USER_TOKEN,
                InitializeUserRequest(
                    account_type=AccountType.SCA, blockchains=[Blockchain.MATIC_AMOY]
                ),
            )

        body = handler.last_json()
        assert handler.last.url.path == "/v1/w3s/user/initialize"
        assert body["accountType"] == "SCA"
        assert body["blockchains"] == ["MATIC-AMOY"]
        assert body["idempotencyKey"]
        assert result.unwrap().data.challenge_id == "c-1"

    @pytest.mark.asyncio
    async def test_pin_challenges_default_body(self, make_handler) -> None:
        handler = make_handler(200, CHALLENGE)
        async with _client(handler) as client:
            await client.create_pin_challenge(USER_TOKEN)
            create = handler.last
            await client.update_pin_challenge(USER_TOKEN)
            update = handler.last
            await client.restore_pin_challenge(USER_TOKEN, PinChallengeRequest(idempotency_key="k"))
            restore = handler.last

        assert (create.method, create.url.path) == ("POST", "/v1/w3s/user/pin")
        assert (update.method, update.url.path) == ("PUT", "/v1/w3s/user/pin")
        assert restore.url.path == "/v1/w3s/user/pin/restore"
        assert handler.last_json() == {"idempotencyKey": "k"}
        assert create.content != update.content

    @pytest.mark.asyncio
    async def test_list_and_get_challenge(self, make_handler) -> None:
        challenge = {"id": "c-1", "type": "SET_PIN", "status": "COMPLETE"}
        handler = make_handler(200, {"data": {"challenge": challenge}})
        async with _client(handler) as client:
            result = await client.get_challenge(USER_TOKEN, "c-1")

        assert handler.last.url.path == "/v1/w3s/user/challenges/c-1"
        decoded = result.unwrap().data.challenge
        assert decoded.type is ChallengeType.SET_PIN
        assert decoded.status is ChallengeStatus.COMPLETE

        handler = make_handler(200, {"data": {"challenges": [challenge]}})
        async with _client(handler) as client:
            listed = await client.list_challenges(USER_TOKEN)

        assert handler.last.url.path == "/v1/w3s/user/challenges"
        assert len(listed.unwrap().data.challenges) == 1


# ---------------------------------------------------------------------------
# Wallets
# ---------------------------------------------------------------------------


class TestWallets:
    @pytest.mark.asyncio
    async def test_create_wallet(self, make_handler) -> None:
        handler = make_handler(201, CHALLENGE)
        async with _client(handler) as client:
            await client.create_wallet(
                USER_TOKEN, CreateUserWalletRequest(blockchains=[Blockchain.ETH_SEPOLIA])
            )

        assert handler.last.url.path == "/v1/w3s/user/wallets"
        assert handler.last_json()["blockchains"] == ["ETH-SEPOLIA"]

    @pytest.mark.asyncio
    async def test_list_and_get_wallet(self, make_handler, wallet_payload) -> None:
        wallet = _user_wallet(wallet_payload)
        handler = make_handler(200, {"data": {"wallets": [wallet]}})
        async with _client(handler) as client:
            listed = await client.list_wallets(USER_TOKEN)

        assert handler.last.url.path == "/v1/w3s/wallets"
        assert handler.last.headers["X-User-Token"] == USER_TOKEN
        assert listed.unwrap().data.wallets[0].user_id == "user-1"

        handler = make_handler(200, {"data": {"wallet": wallet}})
        async with _client(handler) as client:
            result = await client.get_wallet(USER_TOKEN, wallet["id"])

        assert result.unwrap().data.wallet.wallet_set_id == wallet["walletSetId"]

    @pytest.mark.asyncio
    async def test_user_wallet_requires_state(self, make_handler, wallet_payload) -> None:
        wallet = _user_wallet(wallet_payload)
        del wallet["state"]
        handler = make_handler(200, {"data": {"wallet": wallet}})
        async with _client(handler) as client:
            result = await client.get_wallet(USER_TOKEN, "w-1")

        assert isinstance(result, DecodeFailure)

    @pytest.mark.asyncio
    async def test_update_wallet(self, make_handler, wallet_payload) -> None:
        handler = make_handler(200, {"data": {"wallet": _user_wallet(wallet_payload)}})
        async with _client(handler) as client:
            await client.update_wallet(USER_TOKEN, "w-1", UpdateUserWalletRequest(name="savings"))

        assert handler.last.method == "PUT"
        assert handler.last.url.path == "/v1/w3s/wallets/w-1"
        assert handler.last_json() == {"name": "savings"}

    @pytest.mark.asyncio
    async def test_balances_and_nfts(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"tokenBalances": [], "nfts": []}})
        async with _client(handler) as client:
            await client.list_wallet_balances(USER_TOKEN, "w-1", cursor=PageCursor(before="b"))
            balances = handler.last
            await client.list_wallet_nfts(USER_TOKEN, "w-1")
            nfts = handler.last

        assert balances.url.path == "/v1/w3s/wallets/w-1/balances"
        assert dict(balances.url.params) == {"pageBefore": "b"}
        assert nfts.url.path == "/v1/w3s/wallets/w-1/nfts"


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class TestTransactions:
    @pytest.mark.asyncio
    async def test_create_transfer(self, make_handler) -> None:
        handler = make_handler(201, CHALLENGE)
        async with _client(handler) as client:
            await client.create_transfer_transaction(
                USER_TOKEN,
                CreateUserTransferRequest(
                    wallet_id="w-1", destination_address="0xdest", amounts=["1"], token_id="t-1"
                ),
            )

        body = handler.last_json()
        assert handler.last.url.path == "/v1/w3s/user/transactions/transfer"
        assert body["walletId"] == "w-1"
        assert body["idempotencyKey"]

    @pytest.mark.asyncio
    async def test_accelerate_and_cancel(self, make_handler) -> None:
        handler = make_handler(200, CHALLENGE)
        async with _client(handler) as client:
            await client.accelerate_transaction(USER_TOKEN, "tx-1")
            accelerate = handler.last
            await client.cancel_transaction(USER_TOKEN, "tx-1")
            cancel = handler.last

        assert accelerate.url.path == "/v1/w3s/user/transactions/tx-1/accelerate"
        assert cancel.url.path == "/v1/w3s/user/transactions/tx-1/cancel"

    @pytest.mark.asyncio
    async def test_contract_execution_and_upgrade(self, make_handler) -> None:
        handler = make_handler(201, CHALLENGE)
        async with _client(handler) as client:
            await client.create_contract_execution_transaction(
                USER_TOKEN,
                CreateUserContractExecutionRequest(
                    wallet_id="w-1", contract_address="0xc", call_data="0x1234"
                ),
            )
            execution = handler.last
            await client.create_wallet_upgrade_transaction(
                USER_TOKEN,
                CreateWalletUpgradeRequest(
                    wallet_id="w-1", new_sca_core=ScaCore.CIRCLE_6900_SINGLEOWNER_V3
                ),
            )

        assert execution.url.path == "/v1/w3s/user/transactions/contractExecution"
        assert handler.last.url.path == "/v1/w3s/user/transactions/walletUpgrade"
        assert handler.last_json()["newScaCore"] == "circle_6900_singleowner_v3"

    @pytest.mark.asyncio
    async def test_list_and_get_transaction(self, make_handler, transaction_payload) -> None:
        handler = make_handler(200, {"data": {"transactions": [transaction_payload]}})
        async with _client(handler) as client:
            result = await client.list_transactions(
                USER_TOKEN, ListUserTransactionsParams(tx_hash="0xh", wallet_ids=["w-1"])
            )

        assert dict(handler.last.url.params) == {"txHash": "0xh", "walletIds": "w-1"}
        assert result.unwrap().data.transactions[0].state is TransactionState.INITIATED

        handler = make_handler(200, {"data": {"transaction": transaction_payload}})
        async with _client(handler) as client:
            await client.get_transaction(USER_TOKEN, "tx-1")

        assert handler.last.url.path == "/v1/w3s/transactions/tx-1"

    @pytest.mark.asyncio
    async def test_lowest_nonce_transaction(self, make_handler, transaction_payload) -> None:
        handler = make_handler(
            200,
            {
                "data": {
                    "transaction": transaction_payload,
                    "feeInfo": {
                        "newHighEstimatedFee": {"maxFee": "9", "priorityFee": "2"},
                        "feeDifferenceAmount": "0.001",
                    },
                }
            },
        )
        async with _client(handler) as client:
            result = await client.get_lowest_nonce_transaction(
                LowestNonceTransactionParams(blockchain=Blockchain.ETH, address="0xabc")
            )

        assert handler.last.url.path == "/v1/w3s/transactions/lowestNonceTransaction"
        assert "X-User-Token" not in handler.last.headers
        assert result.unwrap().data.fee_info.fee_difference_amount == "0.001"

    @pytest.mark.asyncio
    async def test_fee_estimates(self, make_handler) -> None:
        handler = make_handler(200, {"data": {"low": {"gasLimit": "1"}}})
        async with _client(handler) as client:
            await client.estimate_transfer_fee(
                USER_TOKEN,
                EstimateUserTransferFeeRequest(amounts=["1"], destination_address="0xdest"),
            )
            transfer = handler.last
            await client.estimate_contract_execution_fee(
                USER_TOKEN, EstimateContractExecutionFeeRequest(contract_address="0xc")
            )

        assert transfer.url.path == "/v1/w3s/transactions/transfer/estimateFee"
        assert handler.last.url.path == "/v1/w3s/transactions/contractExecution/estimateFee"
        assert handler.last_json() == {"contractAddress": "0xc"}


# ---------------------------------------------------------------------------
# Tokens and signing
# ---------------------------------------------------------------------------


class TestSigning:
    @pytest.mark.asyncio
    async def test_sign_endpoints(self, make_handler) -> None:
        handler = make_handler(200, CHALLENGE)
        async with _client(handler) as client:
            await client.sign_message(
                USER_TOKEN, UserSignMessageRequest(wallet_id="w-1", message="hi")
            )
            message = handler.last
            await client.sign_typed_data(
                USER_TOKEN, UserSignTypedDataRequest(wallet_id="w-1", data="{}")
            )
            typed = handler.last
            await client.sign_transaction(
                USER_TOKEN, UserSignTransactionRequest(wallet_id="w-1", raw_transaction="0xraw")
            )

        assert message.url.path == "/v1/w3s/user/sign/message"
        assert typed.url.path == "/v1/w3s/user/sign/typedData"
        assert handler.last.url.path == "/v1/w3s/user/sign/transaction"
        assert handler.last_json() == {"walletId": "w-1", "rawTransaction": "0xraw"}

    @pytest.mark.asyncio
    async def test_get_token_needs_no_session(self, make_handler, token_payload) -> None:
        handler = make_handler(200, {"data": {"token": token_payload}})
        async with _client(handler) as client:
            result = await client.get_token("t-1")

        assert "X-User-Token" not in handler.last.headers
        assert result.unwrap().data.token.symbol == "MATIC-AMOY"
