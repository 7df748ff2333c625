#!/usr/bin/env python3
"""Serve the dashboard API with uvicorn."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
import uvicorn

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from api import create_app
from config import get_settings
from logging_setup import setup_logging

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Run the dashboard HTTP API.",
)


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port")] = 8000,
) -> None:
    """Start the API; GET /api/query-data returns the aggregated document."""
    if not 0 < port < 65536:
        raise typer.BadParameter("--port must be between 1 and 65535")

    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)


if __name__ == "__main__":
    app()
