from __future__ import annotations

from ...domain import Recipe, RecipeDraft
from ...errors import OutOfRangeError, ValidationError
from ..common import header_icon, refresh_screen_layout
from ..textual import (
    Button,
    ComposeResult,
    Footer,
    Header,
    Horizontal,
    Input,
    Label,
    ListItem,
    ListView,
    Screen,
    Static,
    TextArea,
    Vertical,
)
from ..widgets.list_utils import clear_list, current_index


class AddRecipeScreen(Screen[Recipe | None]):
    """Form for a new recipe. Dismisses with the recipe, or ``None`` on cancel."""

    BINDINGS = [
        ("escape", "cancel", "Avbryt"),
        ("delete", "remove_ingredient", "Ta bort ingrediens"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.draft = RecipeDraft()

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="add-shell", classes="screen-shell"):
            with Vertical(id="add-card", classes="screen-card"):
                yield Static("Skapa nytt recept", classes="screen-heading")
                yield Input(placeholder="Receptets Rubrik", id="title-input")
                with Horizontal(id="ingredient-row"):
                    yield Input(placeholder="Ingrediens", id="ingredient-input")
                    yield Button("+", id="add-ingredient")
                yield ListView(id="ingredient-list")
                yield Input(placeholder="Koktid (minuter)", id="time-input")
                yield Label("Hur man gör maträtten")
                yield TextArea(id="instructions-input")
                with Horizontal(id="add-actions"):
                    yield Button("Skapa recept", id="create", variant="primary")
                    yield Button("Ta bort ingrediens", id="remove-ingredient")
                    yield Button("Avbryt", id="cancel")
                yield Static("", id="status")
        yield Footer()

    async def on_mount(self) -> None:
        refresh_screen_layout(self, "#add-card")
        await self._refresh_ingredients()
        self.query_one("#title-input", Input).focus()

    def on_resize(self, event) -> None:
        refresh_screen_layout(self, "#add-card")

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "ingredient-input":
            await self._add_ingredient()
        elif event.input.id == "title-input":
            self.query_one("#ingredient-input", Input).focus()
        elif event.input.id == "time-input":
            self.query_one("#instructions-input", TextArea).focus()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-ingredient":
            await self._add_ingredient()
        elif event.button.id == "remove-ingredient":
            await self.action_remove_ingredient()
        elif event.button.id == "create":
            self._create_recipe()
        elif event.button.id == "cancel":
            self.action_cancel()

    def action_cancel(self) -> None:
        self.dismiss(None)

    async def action_remove_ingredient(self) -> None:
        position = current_index(self.query_one("#ingredient-list", ListView))
        if position is None or not self.draft.ingredients:
            self._set_status("Välj en ingrediens att ta bort.")
            return
        try:
            removed = self.draft.remove_ingredient(position)
        except OutOfRangeError:
            self._set_status("Välj en ingrediens att ta bort.")
            return
        await self._refresh_ingredients(highlight=position)
        self._set_status(f"Tog bort {removed}")

    async def _add_ingredient(self) -> None:
        ingredient_input = self.query_one("#ingredient-input", Input)
        if not self.draft.add_ingredient(ingredient_input.value):
            self._set_status("Skriv en ingrediens först.")
            return
        ingredient_input.value = ""
        await self._refresh_ingredients(highlight=len(self.draft.ingredients) - 1)
        self._set_status("")
        ingredient_input.focus()

    def _create_recipe(self) -> None:
        self.draft.title = self.query_one("#title-input", Input).value
        self.draft.cooking_time = self.query_one("#time-input", Input).value
        self.draft.instructions = self.query_one("#instructions-input", TextArea).text
        try:
            recipe = self.draft.build()
        except ValidationError as exc:
            self._set_status(str(exc))
            self.query_one("#title-input", Input).focus()
            return
        self.dismiss(recipe)

    async def _refresh_ingredients(self, highlight: int = 0) -> None:
        list_view = self.query_one("#ingredient-list", ListView)
        await clear_list(list_view)
        if not self.draft.ingredients:
            await list_view.append(ListItem(Label("Inga ingredienser ännu")))
            return
        await list_view.extend(
            ListItem(Label(f"• {ingredient}", markup=False)) for ingredient in self.draft.ingredients
        )
        list_view.index = min(max(highlight, 0), len(self.draft.ingredients) - 1)

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(message)
