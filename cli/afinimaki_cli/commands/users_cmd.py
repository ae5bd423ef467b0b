from __future__ import annotations

import typer
from afinimaki_client import AfinimakiClientError
from rich.table import Table

from .. import console
from ..http import client_from_settings, fail


def affinity(
        user_id_1: int = typer.Argument(..., help="First user ID."),
        user_id_2: int = typer.Argument(..., help="Second user ID."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """User vs user afinimaki, in [0.0, 1.0]."""
    client = client_from_settings(endpoint)
    try:
        value = client.user_user_affinity(user_id_1, user_id_2)
    except AfinimakiClientError as e:
        fail("get afinimaki", e)
    finally:
        client.close()

    if json_out:
        console.print_json({"user_id_1": user_id_1, "user_id_2": user_id_2, "afinimaki": value})
        return
    console.console.print("-" if value is None else f"{value:.4f}")


def soul_mates(
        user_id: int = typer.Argument(..., help="User ID."),
        limit: int | None = typer.Option(None, "--limit", help="Show at most N users."),
        endpoint: str | None = typer.Option(None, "--endpoint", help="Override endpoint URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """List users with similar tastes."""
    client = client_from_settings(endpoint)
    try:
        mates = client.get_soul_mates(user_id)
    except AfinimakiClientError as e:
        fail("get soul mates", e)
    finally:
        client.close()

    if limit is not None:
        mates = mates[:max(0, limit)]
    if json_out:
        console.print_json([m.as_dict() for m in mates])
        return
    if not mates:
        console.info(f"No soul mates for user {user_id}.")
        return

    table = Table(title=f"Soul mates of user {user_id}")
    table.add_column("user_id", style="bold")
    table.add_column("afinimaki")
    for m in mates:
        table.add_row(str(m.user_id), f"{m.afinimaki:.4f}")
    console.console.print(table)
