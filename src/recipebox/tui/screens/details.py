from __future__ import annotations

import logging
import threading

from ...domain import Recipe
from ...export import BULLET, format_cooking_time
from ...services.export_service import ExportShareOutcome, export_and_share
from ..common import header_icon, refresh_screen_layout
from ..textual import (
    Button,
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Screen,
    Static,
    Vertical,
)

logger = logging.getLogger(__name__)


class RecipeDetailsScreen(Screen):
    BINDINGS = [
        ("escape", "back", "Tillbaka"),
        ("s", "download", "Ladda ner"),
    ]

    def __init__(self, recipe: Recipe) -> None:
        super().__init__()
        self.recipe = recipe
        self._busy = False
        self.last_outcome: ExportShareOutcome | None = None

    def compose(self) -> ComposeResult:
        recipe = self.recipe
        yield Header(icon=header_icon(self))
        with Vertical(id="details-shell", classes="screen-shell"):
            with Vertical(id="details-card", classes="screen-card"):
                with Vertical(id="details-body"):
                    yield Static(recipe.title, classes="screen-heading", markup=False)
                    yield Static(format_cooking_time(recipe), classes="sub-header", markup=False)
                    yield Static("Ingredienser:", classes="sub-header")
                    for ingredient in recipe.ingredients:
                        yield Static(f"{BULLET} {ingredient}", classes="ingredient-line", markup=False)
                    yield Static("Instruktioner:", classes="sub-header")
                    yield Static(recipe.instructions, id="details-instructions", markup=False)
                with Horizontal(id="details-actions"):
                    yield Button("Ladda ner", id="download", variant="primary")
                    yield Button("Tillbaka", id="back")
                yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self.title = self.recipe.title
        refresh_screen_layout(self, "#details-card")
        self.query_one("#download", Button).focus()

    def on_resize(self, event) -> None:
        refresh_screen_layout(self, "#details-card")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "download":
            self.action_download()
        elif event.button.id == "back":
            self.action_back()

    def action_back(self) -> None:
        self.app.pop_screen()

    def action_download(self) -> None:
        if self._busy:
            return
        self._busy = True
        self.last_outcome = None
        self.query_one("#download", Button).disabled = True
        self._set_status("Sparar receptet...")
        # The app outlives this screen; the user may leave before the export ends.
        app = self.app
        thread = threading.Thread(target=self._run_export, args=(app,), daemon=True)
        thread.start()

    def _run_export(self, app) -> None:
        try:
            outcome = export_and_share(self.recipe, app.export_dir, app.dispatcher)
        except Exception as exc:  # pragma: no cover
            logger.exception("Export of %r failed unexpectedly", self.recipe.title)
            outcome = ExportShareOutcome(path=None, error=f"Export misslyckades: {exc}")
        app.call_from_thread(self._on_export_done, app, outcome)

    def _on_export_done(self, app, outcome: ExportShareOutcome) -> None:
        self._busy = False
        self.last_outcome = outcome
        if outcome.ok:
            app.notify(outcome.message)
        elif outcome.exported:
            app.notify(outcome.message, severity="warning")
        else:
            app.notify(outcome.message, severity="error")
        if not self.is_attached:
            return
        self.query_one("#download", Button).disabled = False
        self._set_status(outcome.message)

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(message)
