from __future__ import annotations

from pathlib import Path

from recipebox.errors import SharePlatformError


def write_global_config(home: Path, content: str) -> Path:
    cfg_dir = home / ".config" / "recipebox"
    cfg_dir.mkdir(parents=True, exist_ok=True)
    path = cfg_dir / "config.toml"
    path.write_text(content, encoding="utf-8")
    return path


class FakeShareBackend:
    def __init__(self, available: bool = True, error: Exception | None = None) -> None:
        self.available = available
        self.error = error
        self.shared: list[Path] = []
        self.checks = 0

    def is_available(self) -> bool:
        self.checks += 1
        return self.available

    def share(self, path: Path) -> None:
        if self.error is not None:
            raise self.error
        self.shared.append(path)


def failing_backend(message: str = "boom") -> FakeShareBackend:
    return FakeShareBackend(error=SharePlatformError(message))
