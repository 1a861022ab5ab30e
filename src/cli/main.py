"""CLI entry point — wallex command."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

import typer
from rich.console import Console
from rich.table import Table

from wallex.client import Client
from wallex.config import load_config
from wallex.errors import WallexError
from wallex.models import Resolution

app = typer.Typer(name="wallex", help="Wallex exchange REST client")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _client() -> Client:
    return Client(config=load_config())


def _fail(e: WallexError) -> None:
    console.print(f"[red]{e}[/red]")
    raise typer.Exit(code=1)


# ── Market data ──

@app.command()
def markets():
    """List all markets with last price and 24h change."""
    try:
        result = _client().markets()
    except WallexError as e:
        _fail(e)
    table = Table(title="Markets")
    table.add_column("Symbol", style="cyan")
    table.add_column("Last", justify="right")
    table.add_column("24h %", justify="right")
    table.add_column("24h Volume", justify="right")
    for m in sorted(result, key=lambda m: m.symbol):
        table.add_row(m.symbol, m.stats.last_price, m.stats.change_24h, m.stats.volume_24h)
    console.print(table)


@app.command()
def currencies():
    """List crypto-currencies by rank."""
    try:
        result = _client().currencies()
    except WallexError as e:
        _fail(e)
    table = Table(title="Currencies")
    table.add_column("Rank", justify="right")
    table.add_column("Key", style="cyan")
    table.add_column("Name")
    table.add_column("Price", justify="right")
    for c in sorted(result, key=lambda c: c.rank):
        table.add_row(str(c.rank), c.key, c.name_en, c.price)
    console.print(table)


@app.command()
def depth(symbol: str = typer.Argument(...)):
    """Show the order book of a market."""
    try:
        ask, bid = _client().market_orders(symbol)
    except WallexError as e:
        _fail(e)
    table = Table(title=f"Order Book — {symbol}")
    table.add_column("Side")
    table.add_column("Price", justify="right")
    table.add_column("Quantity", justify="right")
    table.add_column("Sum", justify="right")
    for o in ask:
        table.add_row("[red]ask[/red]", o.price, o.quantity, o.sum)
    for o in bid:
        table.add_row("[green]bid[/green]", o.price, o.quantity, o.sum)
    console.print(table)


@app.command()
def trades(symbol: str = typer.Argument(...)):
    """Show the latest trades of a market."""
    try:
        result = _client().market_trades(symbol)
    except WallexError as e:
        _fail(e)
    table = Table(title=f"Trades — {symbol}")
    table.add_column("Time")
    table.add_column("Price", justify="right")
    table.add_column("Quantity", justify="right")
    for t in result:
        table.add_row(str(t.timestamp or ""), t.price, t.quantity)
    console.print(table)


@app.command()
def candles(
    symbol: str = typer.Argument(...),
    resolution: Resolution = typer.Option(Resolution.HOUR, "--resolution", "-r"),
    hours: int = typer.Option(24, "--hours"),
):
    """Show OHLCV candles for the last N hours."""
    end = datetime.now(UTC)
    try:
        result = _client().candles(symbol, resolution, end - timedelta(hours=hours), end)
    except WallexError as e:
        _fail(e)
    table = Table(title=f"Candles — {symbol} ({resolution.value})")
    for col in ("Time", "Open", "High", "Low", "Close", "Volume"):
        table.add_column(col, justify="left" if col == "Time" else "right")
    for c in result:
        table.add_row(c.timestamp.isoformat(), c.open, c.high, c.low, c.close, c.volume)
    console.print(table)


# ── Account ──

@app.command()
def balances():
    """Show non-zero account balances."""
    try:
        result = _client().balances()
    except WallexError as e:
        _fail(e)
    table = Table(title="Balances")
    table.add_column("Asset", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Locked", justify="right")
    for asset, b in sorted(result.items()):
        if b.value.as_float() or b.locked.as_float():
            table.add_row(asset, b.value, b.locked)
    console.print(table)


@app.command()
def orders(symbol: str = typer.Option("", "--symbol", "-s")):
    """Show open orders."""
    try:
        result = _client().open_orders(symbol)
    except WallexError as e:
        _fail(e)
    if not result:
        console.print("[dim]No open orders.[/dim]")
        return
    table = Table(title="Open Orders")
    table.add_column("Client ID", style="cyan")
    table.add_column("Symbol")
    table.add_column("Side")
    table.add_column("Type")
    table.add_column("Price", justify="right")
    table.add_column("Qty", justify="right")
    table.add_column("Status")
    for o in result:
        table.add_row(o.client_order_id, o.symbol, o.side, o.type, o.price, o.orig_qty, o.status)
    console.print(table)


@app.command()
def cancel(client_order_id: str = typer.Argument(...)):
    """Cancel an open order."""
    try:
        _client().cancel_order(client_order_id)
    except WallexError as e:
        _fail(e)
    console.print(f"[green]Cancelled[/green] {client_order_id}")


if __name__ == "__main__":
    app()
