#!/usr/bin/env python3
"""Fetch the dashboard document once and print every section."""

from __future__ import annotations

import asyncio
import locale
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from config import get_settings
from logging_setup import setup_logging
from presenter import DashboardClient, Errored, Presenter, ViewState
from presenter.formatting import use_user_locale
from presenter.render import render_dashboard

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Render the esports dashboard in the terminal.",
)


def _echo_state(state: ViewState) -> None:
    for line in render_dashboard(state):
        typer.echo(line)


@app.command()
def show_dashboard(
    api_url: Annotated[
        str | None,
        typer.Option("--api-url", help="Dashboard API base URL. Defaults to DASHBOARD_API_URL."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Request timeout in seconds."),
    ] = None,
) -> None:
    """Trigger one fetch and print the resulting view."""
    settings = get_settings()
    setup_logging(settings)
    try:
        use_user_locale()
    except locale.Error as exc:
        typer.echo(f"warning: keeping the default locale for dates ({exc})", err=True)

    request_timeout = timeout if timeout is not None else settings.request_timeout
    if request_timeout <= 0:
        raise typer.BadParameter("--timeout must be greater than 0")

    client = DashboardClient(api_url or settings.api_url, timeout=request_timeout)
    presenter = Presenter(client, on_change=_echo_state)
    state = asyncio.run(presenter.trigger_fetch())

    if isinstance(state, Errored):
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
