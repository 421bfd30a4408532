from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from .domain import DEFAULT_TIME_RANGE, FilterState, Recipe

ADMIN_TABS = ("all", "pending", "approved")

# Badge order on the recipe browser.
FILTER_KEYS = ("cuisine", "device", "difficulty", "cooking_time", "search")

_DEVICE_MATCHES = {
    "MoMe": ("MoMe", "Both"),
    "Simmr": ("Simmr", "Both"),
    # Stricter than the single-device tiers: only recipes tagged "Both".
    "Both": ("Both",),
}


@dataclass(frozen=True)
class ActiveFilter:
    key: str
    label: str
    state: FilterState

    def clear(self) -> FilterState:
        return clear_filter(self.state, self.key)


def filter_recipes(recipes: Iterable[Recipe], state: FilterState) -> list[Recipe]:
    return [recipe for recipe in recipes if matches(recipe, state)]


def matches(recipe: Recipe, state: FilterState) -> bool:
    return (
        _matches_text(recipe, state.search_query)
        and _matches_exact(getattr(recipe, "cuisine", None), state.selected_cuisine)
        and _matches_device(getattr(recipe, "device_support", None), state.selected_device)
        and _matches_time(getattr(recipe, "cooking_time", None), state.cooking_time_range)
        and _matches_exact(getattr(recipe, "difficulty", None), state.difficulty)
    )


def reset_filters() -> FilterState:
    return FilterState()


def clear_filter(state: FilterState, key: str) -> FilterState:
    defaults = FilterState()
    if key == "cuisine":
        return replace(state, selected_cuisine=defaults.selected_cuisine)
    if key == "device":
        return replace(state, selected_device=defaults.selected_device)
    if key == "difficulty":
        return replace(state, difficulty=defaults.difficulty)
    if key == "cooking_time":
        return replace(state, cooking_time_range=defaults.cooking_time_range)
    if key == "search":
        return replace(state, search_query=defaults.search_query)
    raise KeyError(key)


def active_filters(state: FilterState) -> list[ActiveFilter]:
    badges: list[ActiveFilter] = []
    if state.selected_cuisine:
        badges.append(ActiveFilter("cuisine", str(state.selected_cuisine), state))
    if state.selected_device:
        badges.append(ActiveFilter("device", str(state.selected_device), state))
    if state.difficulty:
        badges.append(ActiveFilter("difficulty", str(state.difficulty), state))
    if _time_range_active(state.cooking_time_range):
        low, high = state.cooking_time_range
        badges.append(ActiveFilter("cooking_time", f"{low}-{high} min", state))
    if state.search_query:
        badges.append(ActiveFilter("search", f"Search: {state.search_query}", state))
    return badges


def has_active_filters(state: FilterState) -> bool:
    return bool(active_filters(state))


def filter_admin_recipes(recipes: Iterable[Recipe], tab: str, query: str) -> list[Recipe]:
    """Recipe explorer filtering: review-status tab plus a name-only search."""
    if tab not in ADMIN_TABS:
        raise ValueError(f"Unknown recipe tab: {tab!r}")
    needle = (query or "").lower()
    found: list[Recipe] = []
    for recipe in recipes:
        if tab != "all" and getattr(recipe, "status", None) != tab:
            continue
        if needle and needle not in _text(getattr(recipe, "name", None)):
            continue
        found.append(recipe)
    return found


def summarize_results(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} recipes"


def _matches_text(recipe: Recipe, query: str) -> bool:
    if not query:
        return True
    needle = query.lower()
    if needle in _text(getattr(recipe, "name", None)):
        return True
    if needle in _text(getattr(recipe, "cuisine", None)):
        return True
    ingredients = getattr(recipe, "ingredients", None) or ()
    return any(needle in _text(item) for item in ingredients)


def _matches_exact(value: object, selected: str | None) -> bool:
    if not selected:
        return True
    return value == selected


def _matches_device(value: object, selected: str | None) -> bool:
    if not selected:
        return True
    return value in _DEVICE_MATCHES.get(selected, (selected,))


def _matches_time(value: object, time_range: tuple[int, int]) -> bool:
    if not isinstance(value, int) or isinstance(value, bool):
        return False
    low, high = time_range
    return low <= value <= high


def _time_range_active(time_range: tuple[int, int]) -> bool:
    low, high = time_range
    default_low, default_high = DEFAULT_TIME_RANGE
    return low > default_low or high < default_high


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).lower()
