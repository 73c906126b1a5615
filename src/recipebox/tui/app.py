from __future__ import annotations

from ..config import EffectiveConfig
from ..paths import resolve_export_dir
from ..session import RecipeSession
from ..share import CommandShareBackend, ShareDispatcher
from .common import apply_theme, resolve_layout_mode, sync_layout_classes
from .screens.home import HomeScreen
from .textual import App
from .theme import APP_CSS


class RecipeboxApp(App):
    TITLE = "Mina recept"
    CSS = APP_CSS
    BINDINGS = [("q", "quit", "Avsluta")]

    def __init__(
        self,
        cfg: EffectiveConfig,
        session: RecipeSession | None = None,
        dispatcher: ShareDispatcher | None = None,
    ) -> None:
        super().__init__(ansi_color=True)
        self.cfg = cfg
        self.session = session if session is not None else RecipeSession()
        self.dispatcher = dispatcher or ShareDispatcher(CommandShareBackend(cfg.share_command))
        self.export_dir = resolve_export_dir(cfg)
        self.tui_layout_mode = "normal"
        self.tui_density = cfg.tui.density

    def on_mount(self) -> None:
        apply_theme(self)
        self._refresh_layout_mode()
        self.push_screen(HomeScreen())

    def on_resize(self, event) -> None:
        self._refresh_layout_mode()

    def _refresh_layout_mode(self) -> None:
        width, height = self.size
        self.tui_layout_mode = resolve_layout_mode(width, height, self.cfg.tui.layout)
        sync_layout_classes(self, self.tui_layout_mode, self.tui_density)
        for screen in self.screen_stack:
            sync_layout_classes(screen, self.tui_layout_mode, self.tui_density)
