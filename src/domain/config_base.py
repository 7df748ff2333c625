"""TOML profile loading shared by the file-backed configs (seed profiles today)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar
import tomllib


@dataclass(frozen=True)
class BaseConfig:
    """Name, description and source file of one TOML profile."""

    name: str
    description: str | None
    file_path: Path

    def as_config_json(self) -> dict[str, Any]:
        raise NotImplementedError


ConfigT = TypeVar("ConfigT", bound=BaseConfig)


def load_toml_configs(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], ConfigT],
    *,
    duplicate_name_label: str = "config",
    allowed_tables: Iterable[str] | None = None,
) -> list[ConfigT]:
    """Parse every ``*.toml`` file in ``config_dir``, sorted by file name.

    When ``allowed_tables`` is given, a file with any other top-level table is
    rejected so that a misspelt ``[team_stat]`` does not silently fall back to
    defaults. Profile names must be unique across the directory.
    """
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    known_tables = None if allowed_tables is None else frozenset(allowed_tables)
    configs: list[ConfigT] = []
    for file_path in config_files:
        with file_path.open("rb") as file:
            raw = tomllib.load(file)
        if known_tables is not None:
            unknown = sorted(set(raw) - known_tables)
            if unknown:
                raise ValueError(f"{file_path}: unknown tables {unknown}; expected {sorted(known_tables)}")
        configs.append(parser(raw, file_path))

    seen: dict[str, Path] = {}
    for config in configs:
        if config.name in seen:
            raise ValueError(
                f"Duplicate {duplicate_name_label} names found in {config_dir}: "
                f"'{config.name}' in {seen[config.name].name} and {config.file_path.name}"
            )
        seen[config.name] = config.file_path

    return configs


def select_config(configs: Sequence[ConfigT], name: str, *, label: str = "config") -> ConfigT:
    """Return the profile called ``name``; the error lists the available names."""
    for config in configs:
        if config.name == name:
            return config
    available = ", ".join(sorted(config.name for config in configs))
    raise KeyError(f"Unknown {label} '{name}'. Choose one of: {available}.")


def parse_name_and_description(section: dict[str, Any], file_path: Path, *, table: str) -> tuple[str, str | None]:
    """Read the required name and optional description from one TOML table."""
    name = str(section.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [{table}].name is required")

    description_value = section.get("description")
    description = None if description_value is None else str(description_value)
    return name, description


__all__ = ["BaseConfig", "load_toml_configs", "parse_name_and_description", "select_config"]
