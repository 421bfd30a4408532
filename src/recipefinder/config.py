from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os
import tomllib
from typing import Any, Optional

from .errors import ConfigError

PROJECT_CONFIG_NAME = "recipefinder.toml"


@dataclass(frozen=True)
class TuiConfig:
    header_icon: str = "🍳"
    layout: str = "auto"
    density: str = "cozy"


@dataclass(frozen=True)
class EffectiveConfig:
    catalog_path: Optional[str]
    default_project: Optional[str]
    tui: TuiConfig
    project_dir: str


def _config_root() -> Path:
    return Path(os.path.expanduser("~/.config/recipefinder"))


def load_global_config() -> dict[str, Any]:
    path = _config_root() / "config.toml"
    if not path.exists():
        return {}
    return _load_toml(path)


def load_profile(profile: str) -> Optional[str]:
    path = _config_root() / "projects.d" / f"{profile}.toml"
    if not path.exists():
        return None
    data = _load_toml(path)
    project = data.get("project")
    if not project:
        raise ConfigError(f"Profile {profile!r} missing 'project' key")
    return str(project)


def load_project_config(project_dir: str) -> dict[str, Any]:
    path = Path(project_dir) / PROJECT_CONFIG_NAME
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


def merge_config(cli: dict[str, Any], project: dict[str, Any], global_cfg: dict[str, Any]) -> dict[str, Any]:
    merged = _deep_merge(global_cfg, project)
    return _deep_merge(merged, cli)


def resolve_config(cli_args: dict[str, Any]) -> EffectiveConfig:
    global_cfg = load_global_config()
    profile = cli_args.get("profile")
    project_dir = cli_args.get("project")
    if not project_dir and profile:
        project_dir = load_profile(profile)
    if not project_dir:
        project_dir = global_cfg.get("default_project") or os.getcwd()

    project_cfg = load_project_config(project_dir)

    cli_cfg = _cli_to_dict(cli_args)
    merged = merge_config(cli_cfg, project_cfg, global_cfg)

    catalog_path = merged.get("catalog_path")
    tui_cfg = merged.get("tui", {})
    if not isinstance(tui_cfg, dict):
        raise ConfigError("[tui] must be a table")

    return EffectiveConfig(
        catalog_path=str(catalog_path) if catalog_path else None,
        default_project=merged.get("default_project"),
        tui=TuiConfig(
            header_icon=str(tui_cfg.get("header_icon", "🍳")),
            layout=_normalize_tui_layout(tui_cfg.get("layout", "auto")),
            density=_normalize_tui_density(tui_cfg.get("density", "cozy")),
        ),
        project_dir=str(project_dir),
    )


def _cli_to_dict(cli_args: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key in ("catalog_path", "default_project"):
        if cli_args.get(key) is not None:
            out[key] = cli_args[key]

    tui: dict[str, Any] = {}
    for key in ("header_icon", "layout", "density"):
        value = cli_args.get(f"tui_{key}")
        if value is not None:
            tui[key] = value
    if tui:
        out["tui"] = tui

    return out


def config_to_toml(cfg: EffectiveConfig) -> str:
    lines: list[str] = []
    if cfg.catalog_path:
        lines.append(f"catalog_path = {cfg.catalog_path!r}")
    if cfg.default_project:
        lines.append(f"default_project = {cfg.default_project!r}")
    if lines:
        lines.append("")
    lines.append("[tui]")
    lines.append(f"header_icon = {cfg.tui.header_icon!r}")
    lines.append(f"layout = {cfg.tui.layout!r}")
    lines.append(f"density = {cfg.tui.density!r}")
    return "\n".join(lines) + "\n"


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
