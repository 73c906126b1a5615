from __future__ import annotations

from .textual import Theme

TUI_THEME_NAME = "recipebox-ansi"

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

FooterKey,
FooterLabel,
Footer .footer-key--key,
Footer .footer-key--description {
    background: $panel;
    color: $text;
}

.screen-shell {
    width: 1fr;
    height: 1fr;
    align: center top;
    padding: 1 2;
}

.layout-wide .screen-shell {
    padding: 1 4;
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

.screen-heading {
    text-style: bold;
    color: $text;
    padding: 0 0 1 0;
}

.sub-header {
    text-style: bold;
    padding: 1 0 0 0;
}

#recipe-list, #ingredient-list {
    height: 1fr;
    min-height: 4;
    border: round $panel;
    background: $surface;
}

#recipe-list:focus,
#ingredient-list:focus {
    border: round $primary;
}

ListView,
ListView > ListItem,
ListView Label {
    color: $text;
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

ListView:focus > ListItem.--highlight Label,
ListView:focus > ListItem.-highlight Label {
    color: ansi_black;
}

#status {
    height: auto;
    padding: 1 0 0 0;
    color: $text-muted;
}

Input, TextArea {
    margin: 0 0 1 0;
    background: $surface;
    border: round $panel;
    color: $text;
}

#instructions-input {
    height: 6;
}

#ingredient-row {
    height: auto;
}

#ingredient-input {
    width: 1fr;
}

#add-ingredient {
    min-width: 5;
    margin: 0 0 0 1;
}

#details-body {
    height: 1fr;
}

.ingredient-line,
#details-instructions {
    padding: 0 0 0 1;
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

Button.-error {
    background: $error;
    color: $button-color-foreground;
    border: round $error;
}

Button:focus {
    background: $primary;
    color: $button-color-foreground;
    border: round $primary;
    text-style: none;
}

#home-actions,
#add-actions,
#details-actions {
    height: auto;
    padding: 1 0 0 0;
}

#home-actions Button,
#add-actions Button,
#details-actions Button {
    margin: 0 1 0 0;
}

.layout-compact #home-actions,
.layout-compact #add-actions,
.layout-compact #details-actions {
    layout: vertical;
}

.layout-compact #home-actions Button,
.layout-compact #add-actions Button,
.layout-compact #details-actions Button {
    margin: 0 0 1 0;
}
"""

RECIPEBOX_THEME = Theme(
    name=TUI_THEME_NAME,
    primary="ansi_bright_green",
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
