from __future__ import annotations

import argparse
import sys
from collections.abc import Callable

from .config import DEFAULT_LOG_FILE, EffectiveConfig, config_to_toml, resolve_config
from .domain import RecipeDraft
from .errors import (
    ConfigError,
    ExportWriteError,
    RecipeboxError,
    SharePlatformError,
    ShareUnavailableError,
    ValidationError,
)
from .logs import configure_logging
from .paths import resolve_export_dir, resolve_log_file
from .services.export_service import export_and_share
from .share import SHARE_UNAVAILABLE_MESSAGE, UNAVAILABLE, CommandShareBackend, ShareDispatcher


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.tui or not args.command:
        return _cmd_tui(args)

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "config": _cmd_config,
        "share-check": _cmd_share_check,
        "export": _cmd_export,
    }

    handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except RecipeboxError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)
    except Exception as exc:  # pragma: no cover
        print(str(exc), file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--export-dir")
    common.add_argument("--share-command")
    common.add_argument("--log-level")
    common.add_argument("--log-file")
    common.add_argument("--tui-header-icon")
    common.add_argument("--tui-layout")
    common.add_argument("--tui-density")

    parser = argparse.ArgumentParser(prog="recipebox", parents=[common])
    parser.add_argument("--tui", action="store_true", help="Launch interactive TUI")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("config", parents=[common])
    sub.add_parser("share-check", parents=[common])

    export = sub.add_parser("export", parents=[common])
    export.add_argument("--title", required=True)
    export.add_argument("--ingredient", dest="ingredients", action="append", default=[])
    export.add_argument("--time", dest="cooking_time", default="")
    export.add_argument("--instructions", default="")
    export.add_argument("--share", action="store_true")

    return parser


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _cmd_share_check(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    backend = CommandShareBackend(cfg.share_command)
    if not backend.is_available():
        raise ShareUnavailableError(SHARE_UNAVAILABLE_MESSAGE)
    print(f"Sharing available via: {' '.join(cfg.share_command)}")
    return 0


def _cmd_export(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    draft = RecipeDraft(
        title=args.title,
        cooking_time=args.cooking_time,
        instructions=args.instructions,
    )
    for ingredient in args.ingredients:
        draft.add_ingredient(ingredient)
    recipe = draft.build()

    dispatcher = None
    if args.share:
        dispatcher = ShareDispatcher(
            CommandShareBackend(cfg.share_command),
            notify=lambda message: print(message, file=sys.stderr),
        )
    outcome = export_and_share(recipe, resolve_export_dir(cfg), dispatcher)
    if outcome.path is None:
        raise ExportWriteError(outcome.error or "Export failed")
    print(outcome.path)
    if outcome.share is not None and not outcome.share.shared:
        if outcome.share.status == UNAVAILABLE:
            return _exit_code(ShareUnavailableError(outcome.share.message))
        raise SharePlatformError(outcome.share.message)
    return 0


def _cmd_tui(args: argparse.Namespace) -> int:
    from .tui import run_tui

    cfg = resolve_config(_cli_args_dict(args))
    configure_logging(cfg.log_level, resolve_log_file(cfg, fallback=DEFAULT_LOG_FILE))
    return run_tui(cfg)


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    cfg = resolve_config(_cli_args_dict(args))
    configure_logging(cfg.log_level, resolve_log_file(cfg))
    return cfg


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: RecipeboxError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, ValidationError):
        return 4
    if isinstance(exc, ExportWriteError):
        return 5
    if isinstance(exc, (ShareUnavailableError, SharePlatformError)):
        return 6
    return 1
