from __future__ import annotations

from .textual import Theme

TUI_THEME_NAME = "recipefinder-ansi"

APP_CSS = """
Screen {
    background: $background;
    color: $text;
    padding: 0;
}

Header, Footer {
    background: $panel;
    color: $text;
}

.screen-shell {
    width: 1fr;
    height: 1fr;
    align: center top;
    padding: 1 2;
}

.layout-compact .screen-shell {
    padding: 0 1;
}

.screen-card {
    width: 1fr;
    height: 1fr;
    border: round $panel;
    background: $surface;
    padding: 1 2;
}

.layout-compact .screen-card,
.density-compact .screen-card {
    padding: 1;
}

#title,
#mode-subtitle {
    text-style: bold;
    color: $text;
}

#mode-card {
    height: auto;
}

#mode-actions,
#filter-actions,
#tab-actions {
    height: auto;
    padding: 1 0 0 0;
}

#mode-actions Button,
#tab-actions Button {
    margin: 0 1 0 0;
}

#browse-body {
    height: 1fr;
}

#filter-panel {
    width: 34;
    height: auto;
    padding: 0 2 0 0;
}

.layout-compact #browse-body {
    layout: vertical;
}

#filter-panel Button {
    width: 1fr;
    margin: 0 0 1 0;
}

#time-row {
    height: auto;
}

#time-row Input {
    width: 1fr;
}

#results-panel {
    width: 1fr;
    height: 1fr;
}

#badge-row {
    height: auto;
}

#badge-row Button {
    margin: 0 1 0 0;
    background: $panel;
}

#summary,
#status {
    height: auto;
    color: $text-muted;
}

#recipe-list {
    height: 1fr;
    border: round $panel;
    background: $surface;
}

#recipe-list:focus {
    border: round $primary;
}

ListView > ListItem.--highlight,
ListView > ListItem.-highlight {
    background: $panel;
    color: $text;
    text-style: bold;
}

ListView:focus > ListItem.--highlight,
ListView:focus > ListItem.-highlight {
    background: ansi_bright_yellow;
    color: ansi_black;
    text-style: bold;
}

Button {
    background: $surface;
    color: $text;
    border: round $panel;
}

Button.-primary {
    background: $primary;
    color: $button-color-foreground;
    border: round $primary;
}

Button:focus {
    background: $primary;
    color: $button-color-foreground;
    border: round $primary;
    text-style: none;
}

Button.tab-active {
    border: round $accent;
    text-style: bold;
}

Input {
    background: $surface;
    border: round $panel;
    color: $text;
}

.is-hidden {
    display: none;
}
"""

TUI_THEMES = {
    TUI_THEME_NAME: Theme(
        name=TUI_THEME_NAME,
        primary="ansi_bright_magenta",
        secondary="ansi_bright_blue",
        accent="ansi_bright_yellow",
        warning="ansi_bright_yellow",
        error="ansi_bright_red",
        success="ansi_bright_green",
        foreground="ansi_default",
        background="ansi_default",
        surface="ansi_default",
        panel="ansi_bright_black",
        dark=False,
        variables={
            "text": "ansi_default",
            "text-muted": "ansi_bright_black",
            "button-foreground": "ansi_default",
            "button-color-foreground": "ansi_black",
            "button-focus-text-style": "b",
        },
    )
}
