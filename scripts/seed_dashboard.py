#!/usr/bin/env python3
"""Reset the dashboard tables and repopulate them with randomized sample data."""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Annotated

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from config import DEFAULT_SEED_CONFIG_DIR, get_settings
from db import create_db_engine, create_session_factory
from domain.seed import generate_seed_rows, load_seed_configs, select_seed_config
from repositories import ensure_dashboard_schema, insert_seed_rows, truncate_dashboard_tables

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Dashboard sample-data jobs.",
)


@app.command("seed")
def seed_dashboard(
    db_url: Annotated[
        str | None,
        typer.Option(
            "--db-url",
            help="Database URL. Defaults to DATABASE_URL or the local postgres instance.",
        ),
    ] = None,
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory of seed profile TOML files."),
    ] = DEFAULT_SEED_CONFIG_DIR,
    profile: Annotated[
        str,
        typer.Option("--profile", help="Seed profile name ([seed].name in the TOML file)."),
    ] = "default",
    random_seed: Annotated[
        int | None,
        typer.Option("--random-seed", help="Override the profile's random seed."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Generate rows without touching the database."),
    ] = False,
) -> None:
    """Truncate all five tables and insert a fresh set of sample rows."""
    try:
        config = select_seed_config(load_seed_configs(config_dir), profile)
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0], param_hint="--profile") from exc

    seed_value = random_seed if random_seed is not None else config.random_seed
    rows = generate_seed_rows(config, rng=random.Random(seed_value))
    counts = rows.counts()

    if dry_run:
        typer.echo(f"[dry-run] profile={config.name} " + " ".join(f"{k}={v}" for k, v in counts.items()))
        return

    engine = create_db_engine(db_url or get_settings().database_url)
    ensure_dashboard_schema(engine)
    session_factory = create_session_factory(engine)

    with session_factory() as session:
        with session.begin():
            truncate_dashboard_tables(session)
            inserted = insert_seed_rows(session, rows)

    typer.echo(
        f"completed profile={config.name} " + " ".join(f"{k}={v}" for k, v in inserted.items())
    )


if __name__ == "__main__":
    app()
