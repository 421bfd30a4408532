from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .domain import DEVICE_SUPPORT, DIFFICULTIES, RECIPE_STATUSES, Recipe
from .errors import CatalogError, MissingFileError

BUNDLED_CATALOG = Path(__file__).resolve().parent / "data" / "recipes.yaml"

_ALIASES = {
    "recipe_id": ("id", "recipe_id", "recipeId"),
    "cooking_time": ("cookingTime", "cooking_time"),
    "device_support": ("deviceSupport", "device_support"),
}


@dataclass(frozen=True)
class Catalog:
    recipes: list[Recipe]
    source: str
    problems: list[str] = field(default_factory=list)


def load_catalog(path: str | Path, strict: bool = False) -> Catalog:
    """Read a recipe catalog file.

    The document is either a list of recipe mappings or a mapping with a
    ``recipes`` list. Invalid entries raise in strict mode; otherwise they are
    skipped and reported in ``Catalog.problems``.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise MissingFileError(f"Catalog not found: {source}") from exc
    except UnicodeDecodeError as exc:
        raise CatalogError(f"{source}: not valid UTF-8") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogError(f"{source}: invalid YAML") from exc

    entries = _entries(data, source)
    recipes: list[Recipe] = []
    problems: list[str] = []
    for index, raw in enumerate(entries):
        where = f"{source}[{index}]"
        try:
            recipes.append(coerce_recipe(raw, where))
        except CatalogError as exc:
            if strict:
                raise
            problems.append(str(exc))
    return Catalog(recipes=recipes, source=source, problems=problems)


def coerce_recipe(raw: Any, source: str) -> Recipe:
    if not isinstance(raw, dict):
        raise CatalogError(f"{source}: recipe must be a mapping")

    recipe_id = _text(_get(raw, "recipe_id"))
    name = _text(raw.get("name"))
    if not recipe_id or not name:
        raise CatalogError(f"{source}: missing required keys 'id' and 'name'")

    return Recipe(
        recipe_id=recipe_id,
        name=name,
        cuisine=_text(raw.get("cuisine")),
        ingredients=_ingredients(raw.get("ingredients")),
        cooking_time=_cooking_time(_get(raw, "cooking_time"), source),
        difficulty=_choice(raw.get("difficulty"), DIFFICULTIES, "difficulty", source),
        device_support=_choice(_get(raw, "device_support"), DEVICE_SUPPORT, "deviceSupport", source),
        status=_choice(raw.get("status") or "approved", RECIPE_STATUSES, "status", source),
        description=_text(raw.get("description")),
    )


def list_cuisines(recipes: list[Recipe]) -> list[str]:
    seen: list[str] = []
    for recipe in recipes:
        if recipe.cuisine and recipe.cuisine not in seen:
            seen.append(recipe.cuisine)
    return seen


def _entries(data: Any, source: str) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("recipes", [])
    if not isinstance(data, list):
        raise CatalogError(f"{source}: expected a list of recipes")
    return data


def _get(raw: dict[str, Any], key: str) -> Any:
    for alias in _ALIASES[key]:
        if alias in raw:
            return raw[alias]
    return None


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _ingredients(value: Any) -> tuple[str, ...]:
    if isinstance(value, list):
        return tuple(str(item).strip() for item in value if item is not None)
    if isinstance(value, str):
        return (value.strip(),)
    return ()


def _cooking_time(value: Any, source: str) -> int:
    if isinstance(value, bool):
        raise CatalogError(f"{source}: cookingTime must be a whole number of minutes")
    if isinstance(value, int):
        minutes = value
    else:
        try:
            minutes = int(str(value).strip())
        except ValueError as exc:
            raise CatalogError(f"{source}: cookingTime must be a whole number of minutes") from exc
    if minutes < 0:
        raise CatalogError(f"{source}: cookingTime must not be negative")
    return minutes


def _choice(value: Any, choices: tuple[str, ...], key: str, source: str) -> str:
    text = _text(value)
    for option in choices:
        if option.lower() == text.lower():
            return option
    raise CatalogError(f"{source}: {key} must be one of {', '.join(choices)} (got {text!r})")
