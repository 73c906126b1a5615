from __future__ import annotations

from pathlib import Path

from .config import EffectiveConfig


def resolve_export_dir(cfg: EffectiveConfig) -> Path:
    return Path(cfg.export_dir).expanduser()


def resolve_log_file(cfg: EffectiveConfig, fallback: str | None = None) -> Path | None:
    value = cfg.log_file or fallback
    if not value:
        return None
    return Path(value).expanduser()
