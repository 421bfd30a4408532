from __future__ import annotations

LAYOUT_MODES = ("compact", "normal", "wide")

AUTO_WIDE_MIN_WIDTH = 140
AUTO_NORMAL_MIN_WIDTH = 96
AUTO_MIN_HEIGHT = 24

FILTER_PANEL_MIN_WIDTH = 28
FILTER_PANEL_MAX_WIDTH = 44
MODE_CARD_MAX_WIDTH = 72
MODE_CARD_MIN_WIDTH = 36


def resolve_layout_mode(width: int, height: int, requested_mode: str) -> str:
    """Pick the browser layout for a terminal size.

    ``compact`` stacks the filter panel above the results; ``normal`` and
    ``wide`` put it beside them. A mode set in config always wins over "auto".
    """
    if requested_mode in LAYOUT_MODES:
        return requested_mode
    if height < AUTO_MIN_HEIGHT:
        return "compact"
    if width >= AUTO_WIDE_MIN_WIDTH:
        return "wide"
    if width >= AUTO_NORMAL_MIN_WIDTH:
        return "normal"
    return "compact"


def filter_panel_width(viewport_width: int, layout_mode: str) -> int | None:
    """Columns for the filter panel, or None when it spans the full width."""
    if layout_mode not in ("normal", "wide"):
        return None
    share = viewport_width // 4 if layout_mode == "wide" else viewport_width // 3
    return max(FILTER_PANEL_MIN_WIDTH, min(FILTER_PANEL_MAX_WIDTH, share))


def mode_card_width(viewport_width: int) -> int:
    return max(MODE_CARD_MIN_WIDTH, min(MODE_CARD_MAX_WIDTH, viewport_width - 4))
