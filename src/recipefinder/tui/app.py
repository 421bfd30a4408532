from __future__ import annotations

from ..config import EffectiveConfig
from .common import apply_theme, sync_layout_classes
from .data_sources import load_catalog
from .layout import resolve_layout_mode
from .screens.mode import ModeScreen
from .textual import App
from .theme import APP_CSS


class RecipeFinderApp(App):
    TITLE = "recipefinder"
    CSS = APP_CSS
    BINDINGS = [("q", "quit", "Quit")]

    def __init__(self, cfg: EffectiveConfig) -> None:
        super().__init__(ansi_color=True)
        self.cfg = cfg
        self.tui_layout_mode = "normal"
        self.tui_density = cfg.tui.density
        self.catalog = load_catalog(cfg)

    def on_mount(self) -> None:
        apply_theme(self)
        self._refresh_layout_mode()
        self.push_screen(ModeScreen())

    def on_resize(self, event) -> None:
        self._refresh_layout_mode()

    def _refresh_layout_mode(self) -> None:
        self.tui_layout_mode = resolve_layout_mode(self.size.width, self.size.height, self.cfg.tui.layout)
        sync_layout_classes(self, self.tui_layout_mode, self.tui_density)
        for screen in self.screen_stack:
            sync_layout = getattr(screen, "sync_layout", None)
            if sync_layout is not None and screen.is_mounted:
                sync_layout()
