from __future__ import annotations

from ...domain import Recipe
from ..textual import Label, ListItem, ListView, plain


async def replace_items(list_view: ListView, items: list[ListItem], empty_text: str) -> None:
    if list_view.children:
        await list_view.clear()
    if items:
        await list_view.extend(items)
    else:
        await list_view.extend([ListItem(Label(plain(empty_text)))])


def recipe_item(recipe: Recipe, text: str) -> ListItem:
    item = ListItem(Label(plain(text)))
    item.recipe = recipe
    return item


def highlighted_recipe(list_view: ListView) -> Recipe | None:
    item = getattr(list_view, "highlighted_child", None)
    if item is None:
        return None
    return getattr(item, "recipe", None)
