from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
import subprocess
from typing import Protocol

from .errors import SharePlatformError, ShareUnavailableError
from .infra.process import has_binary, run_process

logger = logging.getLogger(__name__)

SHARE_UNAVAILABLE_MESSAGE = "Dela-funktioner är inte tillgängliga på denna enhet."

SHARED = "shared"
UNAVAILABLE = "unavailable"
FAILED = "failed"


class ShareBackend(Protocol):
    def is_available(self) -> bool:
        """Return whether the platform can share files right now."""

    def share(self, path: Path) -> None:
        """Hand ``path`` to the platform share surface."""


class CommandShareBackend:
    """Shares a file by running an external command with the path appended."""

    def __init__(self, command: Sequence[str]) -> None:
        self.command = tuple(command)

    def is_available(self) -> bool:
        return bool(self.command) and has_binary(self.command[0])

    def share(self, path: Path) -> None:
        if not self.command:
            raise ShareUnavailableError("No share command configured")
        cmd = [*self.command, str(path)]
        try:
            run_process(cmd)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise SharePlatformError(f"{self.command[0]} failed: {detail or exc.returncode}") from exc
        except OSError as exc:
            raise SharePlatformError(f"Could not run {self.command[0]}: {exc}") from exc


@dataclass(frozen=True)
class ShareResult:
    status: str
    path: Path
    message: str = ""

    @property
    def shared(self) -> bool:
        return self.status == SHARED


class ShareDispatcher:
    """Checks for a share capability and hands exported files to it.

    Failures never propagate: every call returns a :class:`ShareResult`.
    ``notify`` receives the user-facing notice when sharing is unavailable.
    """

    def __init__(self, backend: ShareBackend, notify: Callable[[str], None] | None = None) -> None:
        self.backend = backend
        self.notify = notify

    def share(self, path: Path) -> ShareResult:
        path = Path(path)
        if not path.is_file():
            logger.error("Cannot share %s: file does not exist", path)
            return ShareResult(FAILED, path, f"Filen finns inte: {path}")

        try:
            if not self.backend.is_available():
                logger.warning("Sharing is not available; skipped %s", path)
                return self._unavailable(path)
            self.backend.share(path)
        except ShareUnavailableError as exc:
            logger.warning("Sharing became unavailable for %s: %s", path, exc)
            return self._unavailable(path)
        except SharePlatformError as exc:
            logger.error("Failed to share %s: %s", path, exc)
            return ShareResult(FAILED, path, str(exc))
        except Exception as exc:
            logger.exception("Unexpected error while sharing %s", path)
            return ShareResult(FAILED, path, f"Delning misslyckades: {exc}")

        logger.info("Shared %s", path)
        return ShareResult(SHARED, path)

    def _unavailable(self, path: Path) -> ShareResult:
        if self.notify is not None:
            self.notify(SHARE_UNAVAILABLE_MESSAGE)
        return ShareResult(UNAVAILABLE, path, SHARE_UNAVAILABLE_MESSAGE)
