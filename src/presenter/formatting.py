"""Field-level display formatting for dashboard values."""

from __future__ import annotations

import locale
import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

PLACEHOLDER = "–"

_TWO_PLACES = Decimal("0.01")


def _is_missing(value: float | int | None) -> bool:
    return value is None or (isinstance(value, float) and not math.isfinite(value))


def format_number(value: float | int | None) -> str:
    """Render with two decimals, dropping trailing zeros (10.00 -> "10", 10.50 -> "10.5")."""
    if _is_missing(value):
        return PLACEHOLDER

    # Decimal(float) is exact, so half-up here rounds the same binary value toFixed would.
    rounded = Decimal(value).quantize(_TWO_PLACES, rounding=ROUND_HALF_UP)
    text = f"{rounded:f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_duration(seconds: float | int | None) -> str:
    """Render a second count as "<minutes>m <seconds>s"."""
    if _is_missing(seconds):
        return PLACEHOLDER

    total = math.floor(seconds + 0.5)  # type: ignore[operator]
    minutes, remainder = divmod(total, 60)
    return f"{minutes}m {remainder}s"


def use_user_locale() -> str:
    """Switch LC_TIME to the locale named by the environment (LC_ALL, LC_TIME, LANG).

    Without this the process keeps the "C" locale and ``%x %X`` always renders
    US-style dates. Raises ``locale.Error`` when the environment names an
    unavailable locale.
    """
    return locale.setlocale(locale.LC_TIME, "")


def format_datetime(value: str | datetime | None) -> str:
    """Render an ISO-8601 timestamp with the locale's date and time representation."""
    if value is None:
        return PLACEHOLDER

    moment = value if isinstance(value, datetime) else datetime.fromisoformat(value)
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime("%x %X")


__all__ = ["PLACEHOLDER", "format_datetime", "format_duration", "format_number", "use_user_locale"]
