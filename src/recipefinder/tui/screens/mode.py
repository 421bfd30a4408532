from __future__ import annotations

from ..common import header_icon, size_mode_card, sync_screen_layout
from ..textual import Button, ComposeResult, Footer, Header, Horizontal, Screen, Static, Vertical
from .browse import BrowseRecipesScreen
from .explore import ExploreRecipesScreen


class ModeScreen(Screen):
    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="mode-shell", classes="screen-shell"):
            with Vertical(id="mode-card", classes="screen-card"):
                yield Static("recipefinder", id="title")
                yield Static("Browse the recipe catalog or review submissions.", id="mode-subtitle")
                yield Static("", id="status")
                with Horizontal(id="mode-actions"):
                    yield Button("[underline]B[/underline]rowse recipes", id="browse", variant="primary")
                    yield Button("[underline]M[/underline]anage recipes", id="manage")
        yield Footer()

    def on_mount(self) -> None:
        self.sync_layout()
        problems = getattr(self.app.catalog, "problems", [])
        if problems:
            self.query_one("#status", Static).update(f"Skipped {len(problems)} invalid recipe(s).")
        self.query_one("#browse", Button).focus()

    def on_resize(self, event) -> None:
        self.sync_layout()

    def sync_layout(self) -> None:
        sync_screen_layout(self)
        size_mode_card(self)

    def on_key(self, event) -> None:
        if event.key in ("b", "B"):
            self.query_one("#browse", Button).press()
            event.stop()
            return
        if event.key in ("m", "M"):
            self.query_one("#manage", Button).press()
            event.stop()
            return
        if event.key in ("h", "left"):
            self.query_one("#browse", Button).focus()
            event.stop()
            return
        if event.key in ("l", "right"):
            self.query_one("#manage", Button).focus()
            event.stop()
            return
        if event.key in ("enter", "space"):
            focused = self.app.focused
            if isinstance(focused, Button) and hasattr(focused, "press"):
                focused.press()
                event.stop()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "browse":
            self.app.push_screen(BrowseRecipesScreen())
        elif event.button.id == "manage":
            self.app.push_screen(ExploreRecipesScreen())
