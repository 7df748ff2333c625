"""Sample-data profiles and row generation for the dashboard tables."""

from domain.seed.config import (
    FloatRange,
    IntRange,
    SeedConfig,
    load_seed_configs,
    parse_seed_config,
    select_seed_config,
)
from domain.seed.generator import SeedRows, generate_seed_rows

__all__ = [
    "FloatRange",
    "IntRange",
    "SeedConfig",
    "SeedRows",
    "generate_seed_rows",
    "load_seed_configs",
    "parse_seed_config",
    "select_seed_config",
]
