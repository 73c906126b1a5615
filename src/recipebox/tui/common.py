"""Layout and theming shared by the recipe screens.

The app picks a layout mode from the terminal size (or the configured
``tui.layout``) and every screen mirrors it as ``layout-*``/``density-*``
CSS classes. The screens' centred card is resized to match.
"""

from __future__ import annotations

from ..config import DEFAULT_HEADER_ICON
from .textual import Screen
from .theme import RECIPEBOX_THEME

LAYOUT_MODES = ("compact", "normal", "wide")
DENSITIES = ("cozy", "compact")

# Checked widest first: (min columns, min rows, mode).
AUTO_LAYOUT_STEPS = (
    (140, 36, "wide"),
    (100, 28, "normal"),
)

# Card width per mode: (max width, horizontal margin). Compact fills the screen.
CARD_SIZES = {
    "wide": (110, 20),
    "normal": (96, 12),
}
COMPACT_CARD_MARGIN = 4
MIN_CARD_WIDTH = 36


def header_icon(screen: Screen) -> str:
    icon = screen.app.cfg.tui.header_icon.strip()
    return icon or DEFAULT_HEADER_ICON


def apply_theme(app) -> None:
    app.register_theme(RECIPEBOX_THEME)
    app.theme = RECIPEBOX_THEME.name


def resolve_layout_mode(width: int, height: int, requested: str) -> str:
    if requested in LAYOUT_MODES:
        return requested
    for min_width, min_height, mode in AUTO_LAYOUT_STEPS:
        if width >= min_width and height >= min_height:
            return mode
    return "compact"


def card_width(viewport_width: int, layout_mode: str) -> int:
    width = max(40, viewport_width)
    max_width, margin = CARD_SIZES.get(layout_mode, (width, COMPACT_CARD_MARGIN))
    return max(MIN_CARD_WIDTH, min(max_width, width - margin, width - 2))


def sync_layout_classes(node, layout_mode: str, density: str) -> None:
    for mode in LAYOUT_MODES:
        node.set_class(mode == layout_mode, f"layout-{mode}")
    for name in DENSITIES:
        node.set_class(name == density, f"density-{name}")


def refresh_screen_layout(screen: Screen, card_selector: str) -> None:
    """Apply the app's layout classes to ``screen`` and size its card."""
    app = screen.app
    sync_layout_classes(screen, app.tui_layout_mode, app.tui_density)
    width = screen.size.width
    if width > 0:
        screen.query_one(card_selector).styles.width = card_width(width, app.tui_layout_mode)
