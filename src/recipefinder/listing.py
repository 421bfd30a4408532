from __future__ import annotations

from typing import Any

from .domain import Recipe
from .filters import ActiveFilter


def format_recipe_line(recipe: Recipe) -> str:
    return (
        f"{recipe.recipe_id}: {recipe.name} "
        f"[{recipe.cuisine or '-'}, {recipe.cooking_time} min, {recipe.difficulty}, {recipe.device_support}]"
    )


def format_badges(badges: list[ActiveFilter]) -> str | None:
    if not badges:
        return None
    return "Active filters: " + ", ".join(badge.label for badge in badges)


def recipe_to_dict(recipe: Recipe) -> dict[str, Any]:
    return {
        "id": recipe.recipe_id,
        "name": recipe.name,
        "cuisine": recipe.cuisine,
        "ingredients": list(recipe.ingredients),
        "cookingTime": recipe.cooking_time,
        "difficulty": recipe.difficulty,
        "deviceSupport": recipe.device_support,
        "status": recipe.status,
    }
