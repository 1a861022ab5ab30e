"""Request and response models for the Wallex REST API."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wallex.number import Number

T = TypeVar("T")


class WireModel(BaseModel):
    """Lenient base: unknown fields are ignored, missing ones take zero values.

    A JSON null counts as missing, except for fields that default to None.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_missing(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        nullable = set()
        for name, f in cls.model_fields.items():
            if f.default is None:
                nullable.update((name, f.alias or name))
        return {k: v for k, v in data.items() if v is not None or k in nullable}


class Envelope(WireModel, Generic[T]):
    result: T


# ── Enumerations ──

class Resolution(str, Enum):
    MINUTE = "1"
    HOUR = "60"
    THREE_HOUR = "180"
    SIX_HOUR = "360"
    TWELVE_HOUR = "720"
    DAY = "1D"


class OrderType(str, Enum):
    LIMIT = "LIMIT"
    MARKET = "MARKET"


class OrderSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


# ── Markets ──

class TradeDirection(WireModel):
    sell: int = Field(0, alias="SELL")
    buy: int = Field(0, alias="BUY")


class MarketStats(WireModel):
    bid_price: Number = Field(Number(), alias="bidPrice")
    ask_price: Number = Field(Number(), alias="askPrice")
    change_24h: Number = Field(Number(), alias="24h_ch")
    change_7d: Number = Field(Number(), alias="7d_ch")
    volume_24h: Number = Field(Number(), alias="24h_volume")
    volume_7d: Number = Field(Number(), alias="7d_volume")
    quote_volume_24h: Number = Field(Number(), alias="24h_quoteVolume")
    high_price_24h: Number = Field(Number(), alias="24h_highPrice")
    low_price_24h: Number = Field(Number(), alias="24h_lowPrice")
    last_price: Number = Field(Number(), alias="lastPrice")
    last_qty: Number = Field(Number(), alias="lastQty")
    last_trade_side: str = Field("", alias="lastTradeSide")
    bid_volume: Number = Field(Number(), alias="bidVolume")
    ask_volume: Number = Field(Number(), alias="askVolume")
    bid_count: Number = Field(Number(), alias="bidCount")
    ask_count: Number = Field(Number(), alias="askCount")
    direction: TradeDirection = TradeDirection()


class Market(WireModel):
    symbol: str = ""
    base_asset: str = Field("", alias="baseAsset")
    base_asset_precision: int = Field(0, alias="baseAssetPrecision")
    quote_asset: str = Field("", alias="quoteAsset")
    quote_precision: int = Field(0, alias="quotePrecision")
    farsi_name: str = Field("", alias="faName")
    farsi_base_asset: str = Field("", alias="faBaseAsset")
    farsi_quote_asset: str = Field("", alias="faQuoteAsset")
    step_size: int = Field(0, alias="stepSize")
    tick_size: int = Field(0, alias="tickSize")
    min_qty: Number = Field(Number(), alias="minQty")
    min_notional: Number = Field(Number(), alias="minNotional")
    stats: MarketStats = MarketStats()
    created_at: datetime | None = Field(None, alias="createdAt")


class Currency(WireModel):
    key: str = ""
    name: str = ""
    name_en: str = ""
    rank: int = 0
    dominance: Number = Number()
    volume_24h: Number = Number()
    market_cap: Number = Number()
    ath: Number = Number()
    ath_change_percentage: Number = Number()
    ath_date: datetime | None = None
    price: Number = Number()
    daily_high_price: Number = Number()
    daily_low_price: Number = Number()
    weekly_high_price: Number = Number()
    weekly_low_price: Number = Number()
    percent_change_1h: Number = Number()
    percent_change_24h: Number = Number()
    percent_change_7d: Number = Number()
    percent_change_14d: Number = Number()
    percent_change_30d: Number = Number()
    percent_change_60d: Number = Number()
    percent_change_200d: Number = Number()
    percent_change_1y: Number = Number()
    price_change_24h: Number = Number()
    price_change_7d: Number = Number()
    price_change_14d: Number = Number()
    price_change_30d: Number = Number()
    price_change_60d: Number = Number()
    price_change_200d: Number = Number()
    price_change_1y: Number = Number()
    max_supply: Number = Number()
    total_supply: Number = Number()
    circulating_supply: Number = Number()
    created_at: datetime | None = None
    updated_at: datetime | None = None


class MarketOrder(WireModel):
    """One price level of the order book."""

    price: Number = Number()
    quantity: Number = Number()
    sum: Number = Number()


class MarketTrade(WireModel):
    symbol: str = ""
    quantity: Number = Number()
    price: Number = Number()
    sum: Number = Number()
    timestamp: datetime | None = None


class Candle(WireModel):
    timestamp: datetime
    open: Number = Number()
    high: Number = Number()
    low: Number = Number()
    close: Number = Number()
    volume: Number = Number()


# ── Account ──

class Address(WireModel):
    country: str | None = None
    province: str | None = None
    city: str | None = None
    location: str | None = None
    postal_code: str | None = None
    house_number: str | None = None


class PhoneNumber(WireModel):
    area_code: str = ""
    main_number: str = ""


class NotificationAction(WireModel):
    is_enable: bool = False
    label: str = ""


class NotificationChannel(WireModel):
    is_enable: bool = False
    actions: dict[str, NotificationAction] = {}
    label: str = ""


class Notification(WireModel):
    email: NotificationChannel = NotificationChannel()
    announcement: NotificationChannel = NotificationChannel()
    push: NotificationChannel = NotificationChannel()


class ProfileSettings(WireModel):
    theme: str = ""
    mode: str = ""
    order_submit_confirm: bool = False
    order_delete_confirm: bool = False
    default_mode: bool = False
    favorite_markets: list[str] = []
    choose_trading_type: bool = False
    coin_deposit: bool = False
    coin_withdraw: bool = False
    money_deposit: bool = False
    money_withdraw: bool = False
    logins: bool = False
    trade: bool = False
    api_key_expiration: bool = False
    notification: Notification = Notification()


class VerificationStatus(WireModel):
    first_name: str = ""
    last_name: str = ""
    national_code: str = ""
    national_card_image: str = ""
    face_image: str = ""
    birthday: str = ""
    address: str = ""
    phone_number: str = ""
    mobile_number: str = ""
    email: str = ""


class KycDetails(WireModel):
    mobile_activation: bool = False
    personal_info: bool = False
    financial_info: bool = False
    phone_number: bool = False
    national_card: bool = False
    face_recognition: bool = False
    admin_approval: bool = False


class KycInfo(WireModel):
    details: KycDetails = KycDetails()
    level: int = 0


class ProfileMeta(WireModel):
    disabled_features: list[str] = []


class Profile(WireModel):
    tracking_id: int = 0
    first_name: str = ""
    last_name: str = ""
    national_code: str = ""
    face_image: str = ""
    birthday: datetime | None = None
    address: Address = Address()
    phone_number: PhoneNumber = PhoneNumber()
    mobile_number: str = ""
    verification: str = ""
    email: str = ""
    invite_code: str = ""
    avatar: str | None = None
    commission: int = 0
    settings: ProfileSettings = ProfileSettings()
    status: VerificationStatus = VerificationStatus()
    kyc_info: KycInfo = KycInfo()
    meta: ProfileMeta = ProfileMeta()


class Balance(WireModel):
    asset: str = ""
    fa_name: str = Field("", alias="faName")
    fiat: bool = False
    value: Number = Number()
    locked: Number = Number()


class NamedFeeLevel(WireModel):
    maker_fee: Number = Number()
    taker_fee: Number = Number()
    name: Number = Number()


class FeeLevel(WireModel):
    levels: dict[str, NamedFeeLevel] = {}
    recent_days: int = 0
    recent_days_sum: Number = Number()
    maker_fee: Number = Number()
    taker_fee: Number = Number()
    is_fixed: bool = False


class BankingCard(WireModel):
    id: int = 0
    card_number: str = ""
    owners: list[str] = []
    status: str = ""
    is_default: int = 0


class BankDetails(WireModel):
    code: str = ""
    label: str = ""


class BankAccount(WireModel):
    id: int = 0
    iban: str = ""
    owners: list[str] = []
    bank_name: str = ""
    status: str = ""
    is_default: int = 0
    bank_details: BankDetails = BankDetails()


# ── Orders and trades ──

class OrderParams(WireModel):
    symbol: str
    type: OrderType
    side: OrderSide
    price: Number = Number()
    quantity: Number = Number()
    client_id: str = ""

    def to_body(self) -> dict[str, str]:
        """JSON body with empty fields left out."""
        data = self.model_dump(mode="json", by_alias=True)
        return {k: v for k, v in data.items() if v != ""}


class Order(WireModel):
    symbol: str = ""
    type: str = ""
    side: str = ""
    price: Number = Number()
    orig_qty: Number = Field(Number(), alias="origQty")
    orig_sum: Number = Field(Number(), alias="origSum")
    executed_price: Number | None = Field(None, alias="executedPrice")
    executed_qty: Number | None = Field(None, alias="executedQty")
    executed_sum: Number | None = Field(None, alias="executedSum")
    executed_percent: Number | None = Field(None, alias="executedPercent")
    status: str = ""
    active: bool = False
    client_order_id: str = Field("", alias="clientOrderId")
    created_at: datetime | None = None


class Trade(WireModel):
    symbol: str = ""
    quantity: Number = Number()
    price: Number = Number()
    sum: Number = Number()
    fee: Number = Number()
    fee_coefficient: Number = Field(Number(), alias="feeCoefficient")
    fee_asset: str = Field("", alias="feeAsset")
    is_buyer: bool = Field(False, alias="isBuyer")
    timestamp: datetime | None = None
