from __future__ import annotations

import typer

from .commands import rates_cmd, recommend_cmd, settings_cmd, users_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="afinimaki",
        help="AfinimaKi recommendation API client",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="settings")

    # user-item services
    app.command("rate")(rates_cmd.rate)
    app.command("estimate")(rates_cmd.estimate)
    app.command("estimate-many")(rates_cmd.estimate_many)
    app.command("recommend")(recommend_cmd.recommend)
    app.command("wishlist")(recommend_cmd.wishlist)
    app.command("blacklist")(recommend_cmd.blacklist)

    # user-user services
    app.command("affinity")(users_cmd.affinity)
    app.command("soul-mates")(users_cmd.soul_mates)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
