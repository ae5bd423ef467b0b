from __future__ import annotations

import typer
from afinimaki_client import AfinimakiClientError
from rich.table import Table

from .. import console
from ..http import client_from_settings, fail


def _fmt_rate(value: float | None) -> str:
    return "-" if value is None else f"{value:.4f}"


def rate(
        user_id: int = typer.Argument(..., help="User ID."),
        item_id: int = typer.Argument(..., help="Item ID."),
        value: int = typer.Argument(..., help="Rate given by the user."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
):
    """Store a user's rate for an item."""
    client = client_from_settings(endpoint)
    try:
        client.record_rating(user_id, item_id, value)
    except AfinimakiClientError as e:
        fail("store rate", e)
    finally:
        client.close()
    console.ok(f"Rate stored: user={user_id} item={item_id} rate={value}")


def estimate(
        user_id: int = typer.Argument(..., help="User ID."),
        item_id: int = typer.Argument(..., help="Item ID."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Estimate the rate a user would give to an item."""
    client = client_from_settings(endpoint)
    try:
        value = client.estimate_rate(user_id, item_id)
    except AfinimakiClientError as e:
        fail("estimate rate", e)
    finally:
        client.close()

    if json_out:
        console.print_json({"user_id": user_id, "item_id": item_id, "estimated_rate": value})
        return
    console.console.print(_fmt_rate(value))


def estimate_many(
        user_id: int = typer.Argument(..., help="User ID."),
        item_ids: list[int] = typer.Argument(..., help="Item IDs."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Estimate rates for several items at once."""
    client = client_from_settings(endpoint)
    try:
        rates = client.estimate_multiple_rates(user_id, item_ids)
    except AfinimakiClientError as e:
        fail("estimate rates", e)
    finally:
        client.close()

    if json_out:
        console.print_json({str(k): v for k, v in rates.items()})
        return

    table = Table(title=f"Estimated rates for user {user_id}")
    table.add_column("item_id", style="bold")
    table.add_column("estimated_rate")
    for item_id, value in rates.items():
        table.add_row(str(item_id), _fmt_rate(value))
    console.console.print(table)
