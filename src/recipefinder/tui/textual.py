from __future__ import annotations

from ..errors import ConfigError

try:  # Textual is optional at import time for non-TUI usage.
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal, Vertical
    from textual.content import Content
    from textual.screen import Screen
    from textual.theme import Theme
    from textual.widgets import Button, Footer, Header, Input, Label, ListItem, ListView, Static
except ImportError as exc:  # pragma: no cover
    raise ConfigError(
        "The recipe browser needs Textual 2.0 or newer: pip install 'textual>=2.0'"
    ) from exc


def plain(text: object) -> Content:
    """Wrap catalog or user text so brackets are shown, never parsed as markup."""
    return Content(str(text))


__all__ = [
    "App",
    "Button",
    "ComposeResult",
    "Content",
    "Footer",
    "Header",
    "Horizontal",
    "Input",
    "Label",
    "ListItem",
    "ListView",
    "Screen",
    "Static",
    "Theme",
    "Vertical",
    "plain",
]
