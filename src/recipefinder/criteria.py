from __future__ import annotations

from collections.abc import Iterable

from .domain import (
    DEVICE_SUPPORT,
    DIFFICULTIES,
    TIME_RANGE_MAX,
    TIME_RANGE_MIN,
    FilterState,
)
from .errors import ValidationError

NO_SELECTION = "all"


def clamp_time_range(low: int, high: int) -> tuple[int, int]:
    low = max(TIME_RANGE_MIN, min(TIME_RANGE_MAX, low))
    high = max(TIME_RANGE_MIN, min(TIME_RANGE_MAX, high))
    if low > high:
        raise ValidationError(f"Minimum cooking time {low} exceeds maximum {high}")
    return low, high


def parse_minutes(text: object, field: str = "cooking time") -> int:
    if isinstance(text, int) and not isinstance(text, bool):
        return text
    raw = str(text or "").strip()
    try:
        return int(raw)
    except ValueError as exc:
        raise ValidationError(f"{field} must be a whole number of minutes, got {raw!r}") from exc


def normalize_choice(value: str | None, choices: Iterable[str], field: str) -> str | None:
    text = (value or "").strip()
    if not text or text.lower() == NO_SELECTION:
        return None
    options = list(choices)
    for option in options:
        if option.lower() == text.lower():
            return option
    raise ValidationError(f"Unknown {field} {text!r} (expected one of: {', '.join(options)})")


def build_filter_state(
    query: str | None = None,
    cuisine: str | None = None,
    device: str | None = None,
    difficulty: str | None = None,
    min_time: object = None,
    max_time: object = None,
) -> FilterState:
    low = TIME_RANGE_MIN if min_time in (None, "") else parse_minutes(min_time, "min time")
    high = TIME_RANGE_MAX if max_time in (None, "") else parse_minutes(max_time, "max time")
    selected_cuisine = (cuisine or "").strip() or None
    if selected_cuisine is not None and selected_cuisine.lower() == NO_SELECTION:
        selected_cuisine = None
    return FilterState(
        search_query=query or "",
        selected_cuisine=selected_cuisine,
        selected_device=normalize_choice(device, DEVICE_SUPPORT, "device"),
        cooking_time_range=clamp_time_range(low, high),
        difficulty=normalize_choice(difficulty, DIFFICULTIES, "difficulty"),
    )
