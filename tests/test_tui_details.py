from __future__ import annotations

import asyncio
from pathlib import Path
import threading

import pytest

from recipebox.config import EffectiveConfig
from recipebox.domain import Recipe
from recipebox.share import ShareDispatcher
from recipebox.tui.app import RecipeboxApp
from recipebox.tui.screens.details import RecipeDetailsScreen
from tests.utils import FakeShareBackend


class GatedShareBackend(FakeShareBackend):
    def __init__(self) -> None:
        super().__init__()
        self.release = threading.Event()

    def share(self, path: Path) -> None:
        self.release.wait(5)
        super().share(path)


def _run_download(app: RecipeboxApp, screen: RecipeDetailsScreen, backend, leave_first: bool):
    async def scenario() -> None:
        async with app.run_test() as pilot:
            await app.push_screen(screen)
            await pilot.pause()
            await pilot.press("s")
            if leave_first:
                await pilot.press("escape")
                await pilot.pause()
            backend.release.set()
            for _ in range(100):
                await pilot.pause(0.05)
                if screen.last_outcome is not None:
                    break

    asyncio.run(scenario())


@pytest.fixture()
def thread_errors(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    errors: list[str] = []
    monkeypatch.setattr(threading, "excepthook", lambda args: errors.append(args.exc_type.__name__))
    return errors


@pytest.mark.parametrize("leave_first", [False, True])
def test_download_reports_outcome(
    tmp_path: Path, temp_home: Path, tea: Recipe, thread_errors: list[str], leave_first: bool
) -> None:
    backend = GatedShareBackend()
    cfg = EffectiveConfig(export_dir=str(tmp_path / "exports"), log_file="")
    app = RecipeboxApp(cfg, dispatcher=ShareDispatcher(backend))
    notices: list[str] = []
    app.notify = lambda message, **kwargs: notices.append(message)
    screen = RecipeDetailsScreen(tea)

    _run_download(app, screen, backend, leave_first)

    exported = tmp_path / "exports" / "Tea.txt"
    assert thread_errors == []
    assert screen.last_outcome is not None
    assert screen.last_outcome.ok
    assert backend.shared == [exported]
    assert notices == [f"Delat: {exported}"]
