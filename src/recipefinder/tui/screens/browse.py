from __future__ import annotations

from dataclasses import replace

from ...criteria import clamp_time_range, parse_minutes
from ...domain import DEVICE_SUPPORT, DIFFICULTIES, FilterState
from ...errors import ValidationError
from ...filters import active_filters, clear_filter, filter_recipes, has_active_filters, reset_filters, summarize_results
from ..common import header_icon, set_hidden, size_filter_panel, sync_screen_layout
from ..data_sources import cuisine_options
from ..state import choice_label, cycle_choice, recipe_display
from ..textual import (
    Button,
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Input,
    Label,
    ListView,
    Screen,
    Static,
    Vertical,
    plain,
)
from ..widgets.list_utils import highlighted_recipe, recipe_item, replace_items


class BrowseRecipesScreen(Screen):
    BINDINGS = [("escape", "back", "Back"), ("ctrl+r", "reset", "Reset filters")]

    def __init__(self) -> None:
        super().__init__()
        self.state: FilterState = reset_filters()

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="browse-shell", classes="screen-shell"):
            with Vertical(id="browse-card", classes="screen-card"):
                yield Static("All Recipes", id="title")
                yield Input(placeholder="Search by name, cuisine or ingredient", id="search-input")
                with Horizontal(id="browse-body"):
                    with Vertical(id="filter-panel"):
                        yield Button(choice_label("Cuisine", None), id="cuisine")
                        yield Button(choice_label("Device", None), id="device")
                        yield Button(choice_label("Difficulty", None), id="difficulty")
                        yield Label("Cooking time (min)")
                        with Horizontal(id="time-row"):
                            low, high = self.state.cooking_time_range
                            yield Input(str(low), id="min-time")
                            yield Input(str(high), id="max-time")
                        yield Button("Reset All", id="reset", variant="primary")
                    with Vertical(id="results-panel"):
                        yield Horizontal(id="badge-row")
                        yield Static("", id="summary")
                        yield ListView(id="recipe-list")
                yield Static("", id="status")
        yield Footer()

    async def on_mount(self) -> None:
        self.sync_layout()
        await self._refresh()
        self.query_one("#search-input", Input).focus()

    def on_resize(self, event) -> None:
        self.sync_layout()

    def sync_layout(self) -> None:
        sync_screen_layout(self)
        size_filter_panel(self)

    async def on_input_changed(self, event: Input.Changed) -> None:
        widget = getattr(event, "input", event.control)
        if widget.id == "search-input":
            if event.value == self.state.search_query:
                return
            await self._apply(replace(self.state, search_query=event.value))
        elif widget.id in ("min-time", "max-time"):
            await self._apply_time_inputs()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id or ""
        if button_id == "cuisine":
            options = cuisine_options(self.app.catalog)
            await self._apply(replace(self.state, selected_cuisine=cycle_choice(self.state.selected_cuisine, options)))
        elif button_id == "device":
            await self._apply(replace(self.state, selected_device=cycle_choice(self.state.selected_device, DEVICE_SUPPORT)))
        elif button_id == "difficulty":
            await self._apply(replace(self.state, difficulty=cycle_choice(self.state.difficulty, DIFFICULTIES)))
        elif button_id in ("reset", "clear-all"):
            await self.action_reset()
        elif button_id.startswith("clear-"):
            await self._apply(clear_filter(self.state, button_id[len("clear-") :]))

    def on_list_view_highlighted(self, event: ListView.Highlighted) -> None:
        recipe = highlighted_recipe(self.query_one("#recipe-list", ListView))
        if recipe is not None:
            self._set_status(", ".join(recipe.ingredients) or recipe.description)

    async def action_reset(self) -> None:
        await self._apply(reset_filters())

    def action_back(self) -> None:
        self.app.pop_screen()

    async def _apply_time_inputs(self) -> None:
        try:
            low = parse_minutes(self.query_one("#min-time", Input).value, "min time")
            high = parse_minutes(self.query_one("#max-time", Input).value, "max time")
            time_range = clamp_time_range(low, high)
        except ValidationError as exc:
            self._set_status(str(exc))
            return
        if time_range != self.state.cooking_time_range:
            await self._apply(replace(self.state, cooking_time_range=time_range), sync_inputs=False)

    async def _apply(self, state: FilterState, sync_inputs: bool = True) -> None:
        self.state = state
        if sync_inputs:
            self._sync_inputs()
        await self._refresh()

    def _sync_inputs(self) -> None:
        search = self.query_one("#search-input", Input)
        if search.value != self.state.search_query:
            search.value = self.state.search_query
        low, high = self.state.cooking_time_range
        for selector, value in (("#min-time", low), ("#max-time", high)):
            widget = self.query_one(selector, Input)
            if widget.value.strip() != str(value):
                widget.value = str(value)

    async def _refresh(self) -> None:
        self.query_one("#cuisine", Button).label = plain(choice_label("Cuisine", self.state.selected_cuisine))
        self.query_one("#device", Button).label = plain(choice_label("Device", self.state.selected_device))
        self.query_one("#difficulty", Button).label = plain(choice_label("Difficulty", self.state.difficulty))

        badge_row = self.query_one("#badge-row", Horizontal)
        await badge_row.remove_children()
        badges = [Button(plain(f"{badge.label} ×"), id=f"clear-{badge.key}") for badge in active_filters(self.state)]
        if has_active_filters(self.state):
            badges.append(Button("Clear All", id="clear-all"))
        if badges:
            await badge_row.mount(*badges)
        set_hidden(badge_row, not badges)

        recipes = self.app.catalog.recipes
        visible = filter_recipes(recipes, self.state)
        self.query_one("#summary", Static).update(summarize_results(len(visible), len(recipes)))
        items = [recipe_item(recipe, recipe_display(recipe)) for recipe in visible]
        await replace_items(
            self.query_one("#recipe-list", ListView),
            items,
            "No recipes found. Adjust your filters or press Ctrl+R to reset.",
        )
        self._set_status("")

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(plain(message))
