from __future__ import annotations

from pathlib import Path
import tomllib

import pytest

from recipebox.config import (
    DEFAULT_EXPORT_DIR,
    EffectiveConfig,
    config_to_toml,
    load_global_config,
    merge_config,
    parse_share_command,
    resolve_config,
)
from recipebox.errors import ConfigError
from tests.utils import write_global_config


def test_load_global_config_missing(temp_home: Path) -> None:
    assert load_global_config() == {}


def test_load_global_config_invalid(temp_home: Path) -> None:
    write_global_config(temp_home, "bad = ")
    with pytest.raises(ConfigError):
        load_global_config()


def test_resolve_defaults(temp_home: Path) -> None:
    cfg = resolve_config({})
    assert cfg == EffectiveConfig()
    assert cfg.export_dir == DEFAULT_EXPORT_DIR
    assert cfg.share_command == ("xdg-open",)
    assert cfg.tui.layout == "auto"


def test_resolve_reads_global_config(temp_home: Path) -> None:
    write_global_config(
        temp_home,
        """export_dir = "/srv/recipes"
share_command = "xdg-email --attach"
log_level = "debug"

[tui]
layout = "WIDE"
density = "compact"
header_icon = "🥘"
""",
    )
    cfg = resolve_config({})
    assert cfg.export_dir == "/srv/recipes"
    assert cfg.share_command == ("xdg-email", "--attach")
    assert cfg.log_level == "DEBUG"
    assert cfg.tui.layout == "wide"
    assert cfg.tui.density == "compact"
    assert cfg.tui.header_icon == "🥘"


def test_cli_overrides_global_config(temp_home: Path) -> None:
    write_global_config(temp_home, 'export_dir = "/srv/recipes"\n[tui]\nlayout = "wide"\n')
    cfg = resolve_config({"export_dir": "/tmp/out", "tui_density": "compact", "tui_layout": None})
    assert cfg.export_dir == "/tmp/out"
    assert cfg.tui.layout == "wide"
    assert cfg.tui.density == "compact"


def test_invalid_values_normalize(temp_home: Path) -> None:
    cfg = resolve_config({"log_level": "chatty", "tui_layout": "huge", "tui_density": "dense"})
    assert cfg.log_level == "WARNING"
    assert cfg.tui.layout == "auto"
    assert cfg.tui.density == "cozy"


def test_tui_must_be_table(temp_home: Path) -> None:
    write_global_config(temp_home, 'tui = "wide"\n')
    with pytest.raises(ConfigError):
        resolve_config({})


def test_merge_config_is_deep() -> None:
    merged = merge_config({"tui": {"layout": "wide"}}, {"tui": {"density": "compact"}, "a": 1})
    assert merged == {"tui": {"layout": "wide", "density": "compact"}, "a": 1}


def test_parse_share_command() -> None:
    assert parse_share_command("xdg-open") == ("xdg-open",)
    assert parse_share_command("'my opener' --flag") == ("my opener", "--flag")
    assert parse_share_command(["open", "-R"]) == ("open", "-R")
    assert parse_share_command("") == ()
    with pytest.raises(ConfigError):
        parse_share_command("'unterminated")


def test_config_to_toml_round_trip(temp_home: Path) -> None:
    cfg = EffectiveConfig(export_dir='C:\\Recipes "mine"', share_command=("my opener", "-x"))
    write_global_config(temp_home, config_to_toml(cfg))
    assert resolve_config({}) == cfg
    data = tomllib.loads(config_to_toml(cfg))
    assert data["tui"]["layout"] == "auto"
