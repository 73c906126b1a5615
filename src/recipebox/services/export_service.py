from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from ..domain import Recipe
from ..errors import ExportWriteError
from ..export import export_recipe
from ..share import ShareDispatcher, ShareResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportShareOutcome:
    path: Path | None
    share: ShareResult | None = None
    error: str | None = None

    @property
    def exported(self) -> bool:
        return self.path is not None

    @property
    def ok(self) -> bool:
        if not self.exported:
            return False
        return self.share is None or self.share.shared

    @property
    def message(self) -> str:
        if self.error:
            return self.error
        if self.share is not None and self.share.message:
            return self.share.message
        if self.path is not None and self.share is None:
            return f"Sparat: {self.path}"
        return f"Delat: {self.path}"


def export_and_share(
    recipe: Recipe,
    export_dir: Path,
    dispatcher: ShareDispatcher | None,
) -> ExportShareOutcome:
    """Export ``recipe`` and hand the file to ``dispatcher``.

    Export failures are reported in the outcome and skip the share step.
    When ``dispatcher`` is ``None`` the recipe is only exported.
    """

    try:
        path = export_recipe(recipe, export_dir)
    except ExportWriteError as exc:
        logger.warning("Skipping share for %r: %s", recipe.title, exc)
        return ExportShareOutcome(path=None, error=str(exc))

    if dispatcher is None:
        return ExportShareOutcome(path=path)
    return ExportShareOutcome(path=path, share=dispatcher.share(path))
