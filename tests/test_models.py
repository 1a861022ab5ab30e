"""Smoke tests for request/response models."""

import pytest
from pydantic import ValidationError

from wallex.models import (
    Balance, Market, Order, OrderParams, OrderSide, OrderType, Resolution, Trade,
)


def test_resolution_tokens():
    assert [r.value for r in Resolution] == ["1", "60", "180", "360", "720", "1D"]


def test_order_params_omits_empty_fields():
    p = OrderParams(symbol="BTCUSDT", type=OrderType.LIMIT, side=OrderSide.SELL,
                    price="100", quantity="2")
    assert p.to_body() == {"symbol": "BTCUSDT", "type": "LIMIT", "side": "SELL",
                           "price": "100", "quantity": "2"}


def test_order_params_keeps_client_id():
    p = OrderParams(symbol="BTCUSDT", type="LIMIT", side="BUY", price="1", quantity="1", client_id="x")
    assert p.to_body()["client_id"] == "x"


def test_order_params_rejects_unknown_side():
    with pytest.raises(ValidationError):
        OrderParams(symbol="BTCUSDT", type="LIMIT", side="HOLD")


def test_market_defaults():
    m = Market()
    assert m.symbol == ""
    assert m.min_qty.is_absent()
    assert m.stats.last_price.is_absent()
    assert m.created_at is None


def test_unknown_fields_ignored():
    b = Balance.model_validate({"asset": "BTC", "value": "1", "extra": 5})
    assert b.asset == "BTC"
    assert not hasattr(b, "extra")


def test_populate_by_field_name():
    t = Trade(fee_asset="USDT", is_buyer=True)
    assert t.fee_asset == "USDT"
    assert t.is_buyer


def test_order_executed_fields_optional():
    o = Order.model_validate({"executedPrice": "10", "executedSum": None})
    assert o.executed_price.as_float() == 10.0
    assert o.executed_sum is None
    assert o.executed_qty is None
