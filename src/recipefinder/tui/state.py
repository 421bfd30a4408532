from __future__ import annotations

from collections.abc import Sequence

from ..domain import Recipe


def recipe_display(recipe: Recipe) -> str:
    cuisine = recipe.cuisine or "-"
    return f"{recipe.name}  ·  {cuisine} · {recipe.cooking_time} min · {recipe.difficulty} · {recipe.device_support}"


def admin_display(recipe: Recipe) -> str:
    marker = "[x]" if recipe.status == "approved" else "[ ]"
    return f"{marker} {recipe.recipe_id}: {recipe.name}"


def cycle_choice(current: str | None, options: Sequence[str]) -> str | None:
    """Advance a selector through "All" (None) and each option in turn."""
    if not options:
        return None
    if current is None or current not in options:
        return options[0] if current is None else None
    idx = options.index(current)
    if idx + 1 >= len(options):
        return None
    return options[idx + 1]


def choice_label(title: str, current: str | None) -> str:
    return f"{title}: {current or 'All'}"
