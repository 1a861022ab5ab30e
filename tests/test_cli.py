"""CLI tests with a stubbed client."""

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from wallex.errors import MissingAPIKeyError, NotFoundError
from wallex.models import Balance, Market, MarketOrder, Order

runner = CliRunner()


class StubClient:
    def markets(self):
        return [Market(symbol="ETHUSDT"), Market.model_validate({"symbol": "BTCUSDT", "stats": {"lastPrice": "43000"}})]

    def market_orders(self, symbol):
        if symbol == "NOPE":
            raise NotFoundError(404)
        return [MarketOrder(price="101", quantity="1", sum="101")], [MarketOrder(price="99", quantity="2", sum="198")]

    def balances(self):
        return {"BTC": Balance(asset="BTC", value="0.5", locked="0"),
                "ETH": Balance(asset="ETH", value="0", locked="0")}

    def open_orders(self, symbol=""):
        return []

    def cancel_order(self, client_order_id):
        raise MissingAPIKeyError()


@pytest.fixture(autouse=True)
def stub(monkeypatch):
    monkeypatch.setattr(cli_main, "_client", lambda: StubClient())


def test_markets():
    r = runner.invoke(cli_main.app, ["markets"])
    assert r.exit_code == 0
    assert "BTCUSDT" in r.output
    assert "43000" in r.output
    assert r.output.index("BTCUSDT") < r.output.index("ETHUSDT")


def test_depth():
    r = runner.invoke(cli_main.app, ["depth", "BTCUSDT"])
    assert r.exit_code == 0
    assert "101" in r.output
    assert "198" in r.output


def test_depth_not_found():
    r = runner.invoke(cli_main.app, ["depth", "NOPE"])
    assert r.exit_code == 1
    assert "resource not found" in r.output


def test_balances_hides_empty():
    r = runner.invoke(cli_main.app, ["balances"])
    assert r.exit_code == 0
    assert "BTC" in r.output
    assert "ETH" not in r.output


def test_orders_empty():
    r = runner.invoke(cli_main.app, ["orders"])
    assert r.exit_code == 0
    assert "No open orders" in r.output


def test_cancel_without_key():
    r = runner.invoke(cli_main.app, ["cancel", "abc"])
    assert r.exit_code == 1
    assert "missing api key" in r.output
