from __future__ import annotations

from ...filters import ADMIN_TABS, filter_admin_recipes
from ..common import header_icon, sync_screen_layout
from ..state import admin_display
from ..textual import (
    Button,
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Input,
    ListView,
    Screen,
    Static,
    Vertical,
)
from ..widgets.list_utils import recipe_item, replace_items

TAB_LABELS = {
    "all": "All Recipes",
    "pending": "Pending Approval",
    "approved": "Approved",
}


class ExploreRecipesScreen(Screen):
    BINDINGS = [("escape", "back", "Back")]

    def __init__(self) -> None:
        super().__init__()
        self.tab = "all"
        self.search_query = ""

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="explore-shell", classes="screen-shell"):
            with Vertical(id="explore-card", classes="screen-card"):
                yield Static("Recipe Management", id="title")
                yield Input(placeholder="Search recipes...", id="search-input")
                with Horizontal(id="tab-actions"):
                    for tab in ADMIN_TABS:
                        yield Button(TAB_LABELS[tab], id=f"tab-{tab}")
                yield Static("", id="summary")
                yield ListView(id="recipe-list")
        yield Footer()

    async def on_mount(self) -> None:
        self.sync_layout()
        await self._refresh()
        self.query_one("#search-input", Input).focus()

    def on_resize(self, event) -> None:
        self.sync_layout()

    def sync_layout(self) -> None:
        sync_screen_layout(self)

    async def on_input_changed(self, event: Input.Changed) -> None:
        widget = getattr(event, "input", event.control)
        if widget.id == "search-input":
            self.search_query = event.value
            await self._refresh()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id.startswith("tab-"):
            self.tab = button_id[len("tab-") :]
            await self._refresh()

    def action_back(self) -> None:
        self.app.pop_screen()

    async def _refresh(self) -> None:
        for tab in ADMIN_TABS:
            button = self.query_one(f"#tab-{tab}", Button)
            if tab == self.tab:
                button.add_class("tab-active")
            else:
                button.remove_class("tab-active")

        recipes = filter_admin_recipes(self.app.catalog.recipes, self.tab, self.search_query)
        self.query_one("#summary", Static).update(f"{TAB_LABELS[self.tab]}: {len(recipes)} recipes")
        items = [recipe_item(recipe, admin_display(recipe)) for recipe in recipes]
        await replace_items(self.query_one("#recipe-list", ListView), items, "No recipes found")
