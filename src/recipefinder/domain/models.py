from __future__ import annotations

from dataclasses import dataclass

DIFFICULTIES = ("Easy", "Medium", "Hard")
DEVICE_SUPPORT = ("MoMe", "Simmr", "Both")
RECIPE_STATUSES = ("approved", "pending")

TIME_RANGE_MIN = 0
TIME_RANGE_MAX = 120
DEFAULT_TIME_RANGE = (TIME_RANGE_MIN, TIME_RANGE_MAX)

DEFAULT_CUISINES = (
    "Indian",
    "Chinese",
    "Thai",
    "Mexican",
    "Italian",
    "Japanese",
    "American",
    "French",
    "Greek",
    "Lebanese",
    "Turkish",
    "Spanish",
    "European",
)


@dataclass(frozen=True)
class Recipe:
    recipe_id: str
    name: str
    cuisine: str
    ingredients: tuple[str, ...]
    cooking_time: int
    difficulty: str
    device_support: str
    status: str = "approved"
    description: str = ""


@dataclass(frozen=True)
class FilterState:
    """Current selection on the recipe browser.

    The caller owns the state and replaces it on every change; the time range
    is expected to be clamped to ``DEFAULT_TIME_RANGE`` before filtering.
    """

    search_query: str = ""
    selected_cuisine: str | None = None
    selected_device: str | None = None
    cooking_time_range: tuple[int, int] = DEFAULT_TIME_RANGE
    difficulty: str | None = None
