"""Facade for the Buidl Wallets API (read-only smart account indexing)."""

from __future__ import annotations

from typing import Optional, Union

from circle_w3s.buidl.models import (
    BalancesResponse,
    Blockchain,
    ListTransfersParams,
    ListUserOpsParams,
    ListWalletBalancesParams,
    ListWalletNftsParams,
    NftsResponse,
    TransferResponse,
    TransfersResponse,
    UserOpResponse,
    UserOpsResponse,
)
from circle_w3s.client.base import BaseClient
from circle_w3s.client.pagination import PageCursor
from circle_w3s.client.request import Endpoint
from circle_w3s.client.response import ApiResult
from circle_w3s.models import HTTPMethod

LIST_TRANSFERS = Endpoint("list_transfers", HTTPMethod.GET, "/v1/w3s/buidl/transfers", TransfersResponse)
GET_TRANSFER = Endpoint("get_transfer", HTTPMethod.GET, "/v1/w3s/buidl/transfers/{}", TransferResponse)
LIST_USER_OPS = Endpoint("list_user_ops", HTTPMethod.GET, "/v1/w3s/buidl/userOps", UserOpsResponse)
GET_USER_OP = Endpoint("get_user_op", HTTPMethod.GET, "/v1/w3s/buidl/userOps/{}", UserOpResponse)
LIST_WALLET_BALANCES_BY_ID = Endpoint(
    "list_wallet_balances_by_id",
    HTTPMethod.GET,
    "/v1/w3s/buidl/wallets/{}/balances",
    BalancesResponse,
)
LIST_WALLET_NFTS_BY_ID = Endpoint(
    "list_wallet_nfts_by_id",
    HTTPMethod.GET,
    "/v1/w3s/buidl/wallets/{}/nfts",
    NftsResponse,
)
LIST_WALLET_BALANCES_BY_ADDRESS = Endpoint(
    "list_wallet_balances_by_address",
    HTTPMethod.GET,
    "/v1/w3s/buidl/wallets/{}/{}/balances",
    BalancesResponse,
)
LIST_WALLET_NFTS_BY_ADDRESS = Endpoint(
    "list_wallet_nfts_by_address",
    HTTPMethod.GET,
    "/v1/w3s/buidl/wallets/{}/{}/nfts",
    NftsResponse,
)


class BuidlWalletsClient(BaseClient):
    """Async client for transfers, user operations and holdings of smart accounts.

    Example::

        async with BuidlWalletsClient(api_key) as client:
            result = await client.list_transfers(
                ListTransfersParams(wallet_addresses=["0xabc...", "0xdef..."]),
                cursor=PageCursor(size=20),
            )
    """

    async def list_transfers(
        self,
        params: ListTransfersParams,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[TransfersResponse]:
        return await self._call(LIST_TRANSFERS, params=params, cursor=cursor)

    async def get_transfer(self, transfer_id: str) -> ApiResult[TransferResponse]:
        return await self._call(GET_TRANSFER, transfer_id)

    async def list_user_ops(
        self,
        params: Optional[ListUserOpsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[UserOpsResponse]:
        return await self._call(LIST_USER_OPS, params=params, cursor=cursor)

    async def get_user_op(self, user_op_id: str) -> ApiResult[UserOpResponse]:
        return await self._call(GET_USER_OP, user_op_id)

    async def list_wallet_balances_by_id(
        self,
        wallet_id: str,
        params: Optional[ListWalletBalancesParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[BalancesResponse]:
        return await self._call(LIST_WALLET_BALANCES_BY_ID, wallet_id, params=params, cursor=cursor)

    async def list_wallet_nfts_by_id(
        self,
        wallet_id: str,
        params: Optional[ListWalletNftsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[NftsResponse]:
        return await self._call(LIST_WALLET_NFTS_BY_ID, wallet_id, params=params, cursor=cursor)

    async def list_wallet_balances_by_address(
        self,
        blockchain: Union[Blockchain, str],
        address: str,
        params: Optional[ListWalletBalancesParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[BalancesResponse]:
        return await self._call(
            LIST_WALLET_BALANCES_BY_ADDRESS, blockchain, address, params=params, cursor=cursor
        )

    async def list_wallet_nfts_by_address(
        self,
        blockchain: Union[Blockchain, str],
        address: str,
        params: Optional[ListWalletNftsParams] = None,
        cursor: Optional[PageCursor] = None,
    ) -> ApiResult[NftsResponse]:
        return await self._call(
            LIST_WALLET_NFTS_BY_ADDRESS, blockchain, address, params=params, cursor=cursor
        )
