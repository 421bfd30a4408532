from __future__ import annotations

from .layout import LAYOUT_MODES, filter_panel_width, mode_card_width
from .textual import App, Screen
from .theme import TUI_THEME_NAME, TUI_THEMES

DEFAULT_HEADER_ICON = "🍳"
DENSITIES = ("cozy", "compact")


def header_icon(screen: Screen) -> str:
    cfg = getattr(getattr(screen, "app", None), "cfg", None)
    icon = str(getattr(getattr(cfg, "tui", None), "header_icon", "") or "").strip()
    return icon or DEFAULT_HEADER_ICON


def apply_theme(app: App) -> None:
    app.register_theme(TUI_THEMES[TUI_THEME_NAME])
    app.theme = TUI_THEME_NAME


def sync_layout_classes(node, layout_mode: str, density: str) -> None:
    for mode in LAYOUT_MODES:
        node.set_class(mode == layout_mode, f"layout-{mode}")
    for name in DENSITIES:
        node.set_class(name == density, f"density-{name}")


def sync_screen_layout(screen: Screen) -> None:
    sync_layout_classes(screen, screen.app.tui_layout_mode, screen.app.tui_density)


def size_filter_panel(screen: Screen) -> None:
    # The results list takes whatever the filter panel leaves.
    width = filter_panel_width(screen.app.size.width, screen.app.tui_layout_mode)
    panel = screen.query_one("#filter-panel")
    panel.styles.width = "1fr" if width is None else width


def size_mode_card(screen: Screen) -> None:
    screen.query_one("#mode-card").styles.width = mode_card_width(screen.app.size.width)


def set_hidden(widget, hidden: bool) -> None:
    widget.set_class(hidden, "is-hidden")
