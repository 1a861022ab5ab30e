"""Synchronous client for the Wallex REST API.

Every public method performs exactly one HTTP request and either returns a
decoded model or raises a :class:`wallex.errors.WallexError`. Nothing is
retried or cached; the client keeps no state between calls.
"""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, Field, ValidationError

from wallex.config import API_KEY_HEADER, ClientConfig
from wallex.errors import DecodeError, MissingAPIKeyError, RequestError, error_for_status
from wallex.models import (
    Balance, BankAccount, BankingCard, Candle, Currency, Envelope, FeeLevel,
    Market, MarketOrder, MarketTrade, Order, OrderParams, Profile, Resolution,
    Trade, WireModel,
)
from wallex.number import Number

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_default_http_client: httpx.Client | None = None
_default_lock = threading.Lock()


def default_http_client(timeout: float = 10.0) -> httpx.Client:
    """Process-wide transport used when the caller does not supply one.

    Created once; ``timeout`` only matters on the call that creates it.
    """
    global _default_http_client
    with _default_lock:
        if _default_http_client is None:
            _default_http_client = httpx.Client(timeout=timeout)
        return _default_http_client


# ── Result shapes that are not plain envelopes ──

class _Symbols(WireModel):
    symbols: dict[str, Market] = {}


class _Depth(WireModel):
    ask: list[MarketOrder] = []
    bid: list[MarketOrder] = []


class _LatestTrades(WireModel):
    latest_trades: list[MarketTrade] = Field([], alias="latestTrades")


class _Balances(WireModel):
    balances: dict[str, Balance] = {}


class _Orders(WireModel):
    orders: list[Order] = []


class _AccountTrades(WireModel):
    account_latest_trades: list[Trade] = Field([], alias="AccountLatestTrades")


class _History(WireModel):
    t: list[int] = []
    o: list[Any] = []
    h: list[Any] = []
    l: list[Any] = []  # noqa: E741
    c: list[Any] = []
    v: list[Any] = []


class Client:
    """Wallex API façade.

    ``api_key`` falls back to the ``WALLEX_API_KEY`` environment variable and
    is only needed for account endpoints. Without ``http_client`` the shared
    :func:`default_http_client` is used; its timeout comes from the config of
    the first client that needed it, so pass your own ``httpx.Client`` when a
    different timeout matters.
    """

    def __init__(
        self,
        api_key: str = "",
        http_client: httpx.Client | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        if config is None:
            config = ClientConfig(api_key=api_key)
        elif api_key:
            config = config.model_copy(update={"api_key": api_key})
        self.config = config
        self._http = http_client or default_http_client(config.timeout)

    @property
    def has_api_key(self) -> bool:
        return bool(self.config.api_key)

    # ── Plumbing ──

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
        auth: bool = False,
    ) -> httpx.Response:
        if auth and not self.config.api_key:
            raise MissingAPIKeyError()

        headers = {API_KEY_HEADER: self.config.api_key} if auth else None
        logger.debug("%s %s", method, path)
        try:
            resp = self._http.request(
                method, self.config.base_url + path,
                params=params, json=body, headers=headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RequestError(cause=e) from e

        if resp.status_code != 200:
            logger.debug("%s %s -> %d", method, path, resp.status_code)
            raise error_for_status(resp.status_code)
        return resp

    @staticmethod
    def _decode(resp: httpx.Response, shape: type[M]) -> M:
        try:
            return shape.model_validate_json(resp.content)
        except ValidationError as e:
            raise DecodeError(cause=e) from e

    def _get(self, path: str, shape: type[Envelope], *, params: dict[str, str] | None = None, auth: bool = False):
        return self._decode(self._send("GET", path, params=params, auth=auth), shape).result

    # ── Markets ──

    def markets(self) -> list[Market]:
        """All markets with their stats, in no particular order."""
        return list(self._get("/v1/markets", Envelope[_Symbols]).symbols.values())

    def currencies(self) -> list[Currency]:
        return self._get("/v1/currencies/stats", Envelope[list[Currency]])

    def market_orders(self, symbol: str) -> tuple[list[MarketOrder], list[MarketOrder]]:
        """Active orders of a market as ``(ask, bid)``."""
        depth = self._get("/v1/depth", Envelope[_Depth], params={"symbol": symbol})
        return depth.ask, depth.bid

    def market_trades(self, symbol: str) -> list[MarketTrade]:
        """Most recent trades in a market."""
        return self._get("/v1/trades", Envelope[_LatestTrades], params={"symbol": symbol}).latest_trades

    def candles(
        self, symbol: str, resolution: Resolution | str, start: datetime, end: datetime,
    ) -> list[Candle]:
        """OHLCV candles between ``start`` and ``end``.

        The history endpoint answers with parallel arrays instead of an
        envelope; they are zipped into one :class:`Candle` per timestamp.
        ``resolution`` is sent as given, so tokens outside :class:`Resolution`
        are left for the server to reject.
        """
        params = {
            "symbol": symbol,
            "resolution": resolution.value if isinstance(resolution, Resolution) else str(resolution),
            "from": str(int(start.timestamp())),
            "to": str(int(end.timestamp())),
        }
        h = self._decode(self._send("GET", "/v1/udf/history", params=params), _History)
        columns = (h.o, h.h, h.l, h.c, h.v)
        if any(len(col) != len(h.t) for col in columns):
            raise DecodeError(cause=ValueError("candle arrays differ in length"))
        return [
            Candle(
                timestamp=datetime.fromtimestamp(t, tz=UTC),
                open=Number.parse(o), high=Number.parse(hi), low=Number.parse(lo),
                close=Number.parse(c), volume=Number.parse(v),
            )
            for t, o, hi, lo, c, v in zip(h.t, *columns)
        ]

    # ── Account ──

    def profile(self) -> Profile:
        return self._get("/v1/account/profile", Envelope[Profile], auth=True)

    def balances(self) -> dict[str, Balance]:
        """Holdings keyed by asset."""
        return self._get("/v1/account/balances", Envelope[_Balances], auth=True).balances

    def fee_levels(self) -> dict[str, FeeLevel]:
        """Fee levels keyed by symbol."""
        return self._get("/v1/account/fee", Envelope[dict[str, FeeLevel]], auth=True)

    def banking_cards(self) -> list[BankingCard]:
        return self._get("/v1/account/card-numbers", Envelope[list[BankingCard]], auth=True)

    def bank_accounts(self) -> list[BankAccount]:
        return self._get("/v1/account/ibans", Envelope[list[BankAccount]], auth=True)

    # ── Orders and trades ──

    def place_order(self, params: OrderParams) -> Order:
        resp = self._send("POST", "/v1/account/orders", body=params.to_body(), auth=True)
        return self._decode(resp, Envelope[Order]).result

    def cancel_order(self, client_order_id: str) -> None:
        self._send("DELETE", "/v1/account/orders", params={"clientOrderId": client_order_id}, auth=True)

    def order(self, client_order_id: str) -> Order:
        return self._get(f"/v1/account/orders/{client_order_id}", Envelope[Order], auth=True)

    def open_orders(self, symbol: str = "") -> list[Order]:
        """Active orders; all markets when ``symbol`` is empty."""
        params = {"symbol": symbol} if symbol else {}
        return self._get("/v1/account/openOrders", Envelope[_Orders], params=params, auth=True).orders

    def trades(self, symbol: str = "", side: str = "") -> list[Trade]:
        """Most recent account trades, optionally filtered by market and side."""
        params = {}
        if symbol:
            params["symbol"] = symbol
        if side:
            params["side"] = side
        return self._get("/v1/account/trades", Envelope[_AccountTrades], params=params, auth=True).account_latest_trades
