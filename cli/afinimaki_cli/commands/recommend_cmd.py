from __future__ import annotations

import typer
from afinimaki_client import AfinimakiClientError
from rich.table import Table

from .. import console
from ..http import client_from_settings, fail


def recommend(
        user_id: int = typer.Argument(..., help="User ID."),
        limit: int | None = typer.Option(None, "--limit", help="Show at most N recommendations."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """List recommendations for a user."""
    client = client_from_settings(endpoint)
    try:
        items = client.get_recommendations(user_id)
    except AfinimakiClientError as e:
        fail("get recommendations", e)
    finally:
        client.close()

    if limit is not None:
        items = items[:max(0, limit)]
    if json_out:
        console.print_json([r.as_dict() for r in items])
        return
    if not items:
        console.info(f"No recommendations for user {user_id}.")
        return

    table = Table(title=f"Recommendations for user {user_id}")
    table.add_column("item_id", style="bold")
    table.add_column("estimated_rate")
    for r in items:
        table.add_row(str(r.item_id), f"{r.estimated_rate:.4f}")
    console.console.print(table)


def _mark(list_name: str, user_id: int, item_id: int, endpoint: str | None) -> None:
    client = client_from_settings(endpoint)
    try:
        if list_name == "wishlist":
            client.add_to_wishlist(user_id, item_id)
        else:
            client.add_to_blacklist(user_id, item_id)
    except AfinimakiClientError as e:
        fail(f"add to {list_name}", e)
    finally:
        client.close()
    console.ok(f"Item {item_id} added to {list_name} of user {user_id}.")


def wishlist(
        user_id: int = typer.Argument(..., help="User ID."),
        item_id: int = typer.Argument(..., help="Item ID."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
):
    """Add an item to a user's wishlist (removes it from recommendations)."""
    _mark("wishlist", user_id, item_id, endpoint)


def blacklist(
        user_id: int = typer.Argument(..., help="User ID."),
        item_id: int = typer.Argument(..., help="Item ID."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
):
    """Add an item to a user's blacklist (removes it from recommendations)."""
    _mark("blacklist", user_id, item_id, endpoint)
