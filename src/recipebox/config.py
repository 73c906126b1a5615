from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import shlex
import tomllib
from typing import Any

from .errors import ConfigError

DEFAULT_EXPORT_DIR = "~/.local/share/recipebox/exports"
DEFAULT_LOG_FILE = "~/.local/state/recipebox/recipebox.log"
DEFAULT_SHARE_COMMAND = "xdg-open"
DEFAULT_HEADER_ICON = "🍲"
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class TuiConfig:
    header_icon: str = DEFAULT_HEADER_ICON
    layout: str = "auto"
    density: str = "cozy"


@dataclass(frozen=True)
class EffectiveConfig:
    export_dir: str = DEFAULT_EXPORT_DIR
    share_command: tuple[str, ...] = (DEFAULT_SHARE_COMMAND,)
    log_level: str = "WARNING"
    log_file: str = DEFAULT_LOG_FILE
    tui: TuiConfig = TuiConfig()


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/recipebox"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except OSError as exc:
        raise ConfigError(f"Failed to read config: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config: {path}") from exc


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_config(cli: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    return _deep_merge(global_cfg, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    merged = merge_config(_cli_to_dict(cli_args), load_global_config())
    tui_cfg = merged.get("tui", {})
    if not isinstance(tui_cfg, dict):
        raise ConfigError("[tui] must be a table")

    return EffectiveConfig(
        export_dir=str(merged.get("export_dir") or DEFAULT_EXPORT_DIR),
        share_command=parse_share_command(merged.get("share_command", DEFAULT_SHARE_COMMAND)),
        log_level=_normalize_log_level(merged.get("log_level", "WARNING")),
        log_file=str(merged.get("log_file", DEFAULT_LOG_FILE)),
        tui=TuiConfig(
            header_icon=str(tui_cfg.get("header_icon", DEFAULT_HEADER_ICON)),
            layout=_normalize_tui_layout(tui_cfg.get("layout", "auto")),
            density=_normalize_tui_density(tui_cfg.get("density", "cozy")),
        ),
    )


def parse_share_command(value: Any) -> tuple[str, ...]:
    if isinstance(value, (list, tuple)):
        return tuple(str(part) for part in value)
    try:
        return tuple(shlex.split(str(value or "")))
    except ValueError as exc:
        raise ConfigError(f"Invalid share_command: {value!r}") from exc


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("export_dir", "share_command", "log_level", "log_file"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]

    tui: dict[str, Any] = {}
    for key in ("header_icon", "layout", "density"):
        if cli_args.get(f"tui_{key}") is not None:
            tui[key] = cli_args[f"tui_{key}"]
    if tui:
        out["tui"] = tui

    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines = [
        f"export_dir = {_toml_str(cfg.export_dir)}",
        f"share_command = {_toml_str(shlex.join(cfg.share_command))}",
        f"log_level = {_toml_str(cfg.log_level)}",
        f"log_file = {_toml_str(cfg.log_file)}",
        "",
        "[tui]",
        f"header_icon = {_toml_str(cfg.tui.header_icon)}",
        f"layout = {_toml_str(cfg.tui.layout)}",
        f"density = {_toml_str(cfg.tui.density)}",
    ]
    return "\n".join(lines) + "\n"


def _toml_str(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _normalize_log_level(value: Any) -> str:
    text = str(value or "").strip().upper()
    if text in VALID_LOG_LEVELS:
        return text
    return "WARNING"


def _normalize_tui_layout(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in {"auto", "compact", "normal", "wide"}:
        return text
    return "auto"


def _normalize_tui_density(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text in {"cozy", "compact"}:
        return text
    return "cozy"
