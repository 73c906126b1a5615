from __future__ import annotations

import logging

from ...domain import Recipe
from ...errors import OutOfRangeError
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
    Vertical,
)
from ..widgets.list_utils import clear_list, current_index, highlighted_recipe
from .add_recipe import AddRecipeScreen
from .details import RecipeDetailsScreen

logger = logging.getLogger(__name__)


class HomeScreen(Screen):
    BINDINGS = [
        ("n", "new_recipe", "Nytt recept"),
        ("d", "remove_recipe", "Ta bort"),
        ("delete", "remove_recipe", "Ta bort"),
        ("slash", "focus_search", "Sök"),
    ]

    def compose(self) -> ComposeResult:
        yield Header(icon=header_icon(self))
        with Vertical(id="home-shell", classes="screen-shell"):
            with Vertical(id="home-card", classes="screen-card"):
                yield Static("Mina recept", classes="screen-heading")
                yield Button("Skapa nytt recept", id="create", variant="primary")
                yield Input(placeholder="Sök efter recept...", id="search-input")
                yield ListView(id="recipe-list")
                with Horizontal(id="home-actions"):
                    yield Button("Visa", id="open")
                    yield Button("Ta bort", id="remove", variant="error")
                yield Static("", id="status")
        yield Footer()

    async def on_mount(self) -> None:
        refresh_screen_layout(self, "#home-card")
        await self._refresh_recipes()
        self.query_one("#recipe-list", ListView).focus()

    def on_resize(self, event) -> None:
        refresh_screen_layout(self, "#home-card")

    async def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self.app.session.set_query(event.value)
            await self._refresh_recipes()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "search-input":
            self.query_one("#recipe-list", ListView).focus()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        recipe = getattr(event.item, "recipe", None)
        if recipe is not None:
            self._open_details(recipe)

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "create":
            self.action_new_recipe()
        elif event.button.id == "open":
            recipe = highlighted_recipe(self.query_one("#recipe-list", ListView))
            if recipe is None:
                self._set_status("Välj ett recept först.")
                return
            self._open_details(recipe)
        elif event.button.id == "remove":
            await self.action_remove_recipe()

    def action_new_recipe(self) -> None:
        self.app.push_screen(AddRecipeScreen(), self._on_recipe_created)

    def action_focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    async def action_remove_recipe(self) -> None:
        list_view = self.query_one("#recipe-list", ListView)
        position = current_index(list_view)
        if position is None or highlighted_recipe(list_view) is None:
            self._set_status("Välj ett recept att ta bort.")
            return
        try:
            removed = self.app.session.remove_visible(position)
        except OutOfRangeError as exc:
            logger.warning("Ignored removal at position %s: %s", position, exc)
            self._set_status("Receptet finns inte längre.")
            return
        await self._refresh_recipes(highlight=position)
        self._set_status(f"Tog bort {removed.title}")

    async def _on_recipe_created(self, recipe: Recipe | None) -> None:
        if recipe is None:
            return
        self.app.session.add(recipe)
        await self._refresh_recipes()
        self._set_status(f"Skapade {recipe.title}")

    def _open_details(self, recipe: Recipe) -> None:
        self.app.push_screen(RecipeDetailsScreen(recipe))

    async def _refresh_recipes(self, highlight: int = 0) -> None:
        list_view = self.query_one("#recipe-list", ListView)
        await clear_list(list_view)
        session = self.app.session
        recipes = session.visible

        if not recipes:
            text = "Inga recept matchar sökningen" if session.query.strip() else "Inga recept ännu"
            await list_view.append(ListItem(Label(text)))
            return

        items = []
        for recipe in recipes:
            item = ListItem(Label(recipe.title, markup=False))
            item.recipe = recipe
            items.append(item)
        await list_view.extend(items)
        list_view.index = min(max(highlight, 0), len(items) - 1)

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(message)
