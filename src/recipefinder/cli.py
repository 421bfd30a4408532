from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Callable

from .catalog import list_cuisines
from .config import PROJECT_CONFIG_NAME, EffectiveConfig, config_to_toml, resolve_config
from .criteria import build_filter_state
from .domain import DEVICE_SUPPORT, DIFFICULTIES
from .errors import (
    ConfigError,
    MissingFileError,
    RecipeFinderError,
    ValidationError,
)
from .filters import ADMIN_TABS
from .listing import format_badges, format_recipe_line, recipe_to_dict
from .services.search_service import SearchResult, explore_catalog, open_catalog, search_catalog


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "search": _cmd_search,
        "admin": _cmd_admin,
        "cuisines": _cmd_cuisines,
        "validate": _cmd_validate,
        "init": _cmd_init,
        "config": _cmd_config,
    }

    if args.tui or not args.command:
        handler = _cmd_tui
    else:
        handler = handlers.get(args.command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except RecipeFinderError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _common_parser(default: object = None) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--catalog", dest="catalog_path", default=default)
    common.add_argument("--project", default=default)
    common.add_argument("--profile", default=default)
    common.add_argument("--tui-header-icon", default=default)
    common.add_argument("--tui-layout", default=default)
    common.add_argument("--tui-density", default=default)
    return common


def _build_parser() -> argparse.ArgumentParser:
    # Subcommands leave unset options alone so values given before the
    # subcommand name survive.
    common = _common_parser(default=argparse.SUPPRESS)

    parser = argparse.ArgumentParser(prog="recipefinder", parents=[_common_parser()])
    parser.add_argument("--tui", action="store_true", help="Launch interactive recipe browser")
    sub = parser.add_subparsers(dest="command")

    search = sub.add_parser("search", parents=[common])
    search.add_argument("query", nargs="?", default="")
    search.add_argument("--cuisine")
    search.add_argument("--device", help=f"One of: {', '.join(DEVICE_SUPPORT)}")
    search.add_argument("--difficulty", help=f"One of: {', '.join(DIFFICULTIES)}")
    search.add_argument("--min-time", dest="min_time")
    search.add_argument("--max-time", dest="max_time")
    search.add_argument("--json", action="store_true")

    admin = sub.add_parser("admin", parents=[common])
    admin.add_argument("query", nargs="?", default="")
    admin.add_argument("--status", choices=ADMIN_TABS, default="all")
    admin.add_argument("--json", action="store_true")

    sub.add_parser("cuisines", parents=[common])
    sub.add_parser("validate", parents=[common])
    sub.add_parser("config", parents=[common])

    init = sub.add_parser("init")
    init.add_argument("path", nargs="?", default=".")
    init.add_argument("--force", action="store_true")

    return parser


def _cmd_search(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    state = build_filter_state(
        query=args.query,
        cuisine=args.cuisine,
        device=args.device,
        difficulty=args.difficulty,
        min_time=args.min_time,
        max_time=args.max_time,
    )
    result = search_catalog(cfg, state)
    _print_result(result, args.json)
    return 0


def _cmd_admin(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    result = explore_catalog(cfg, args.status, args.query)
    _print_result(result, args.json)
    return 0


def _cmd_cuisines(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = open_catalog(cfg)
    _warn_problems(catalog.problems)
    for cuisine in list_cuisines(catalog.recipes):
        print(cuisine)
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    catalog = open_catalog(cfg)
    if catalog.problems:
        for problem in catalog.problems:
            print(problem, file=sys.stderr)
        raise ValidationError(f"{len(catalog.problems)} invalid recipe(s) in {catalog.source}")
    print(f"{catalog.source}: {len(catalog.recipes)} recipes OK")
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    root = os.path.abspath(args.path)
    os.makedirs(root, exist_ok=True)
    config_path = os.path.join(root, PROJECT_CONFIG_NAME)
    if os.path.exists(config_path) and not args.force:
        raise ConfigError(f"{config_path} already exists (use --force to overwrite)")
    with open(config_path, "w", encoding="utf-8") as fh:
        fh.write(
            """# catalog_path = \"recipes.yaml\"\n\n[tui]\n# header_icon = \"🍳\"\n# layout = \"auto\"\n# density = \"cozy\"\n"""
        )
    print(config_path)
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _cmd_tui(args: argparse.Namespace) -> int:
    from .tui import run_tui

    return run_tui(_cli_args_dict(args))


def _print_result(result: SearchResult, as_json: bool) -> None:
    _warn_problems(result.problems)
    if as_json:
        payload = {
            "total": result.total,
            "shown": len(result.recipes),
            "activeFilters": [badge.label for badge in result.badges],
            "recipes": [recipe_to_dict(recipe) for recipe in result.recipes],
        }
        print(json.dumps(payload, indent=2))
        return

    badges = format_badges(result.badges)
    if badges:
        print(badges)
    print(result.summary)
    if not result.recipes:
        print("No recipes found. Try adjusting your filters or search query.")
    for recipe in result.recipes:
        print(format_recipe_line(recipe))


def _warn_problems(problems: list[str]) -> None:
    if not problems:
        return
    print(f"Skipped {len(problems)} invalid recipe(s); run `recipefinder validate` for details.", file=sys.stderr)


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    return resolve_config(_cli_args_dict(args))


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: RecipeFinderError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, MissingFileError):
        return 3
    if isinstance(exc, ValidationError):
        return 4
    return 1
