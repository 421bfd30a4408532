from __future__ import annotations

from pathlib import Path

from .catalog import BUNDLED_CATALOG
from .config import EffectiveConfig
from .errors import MissingFileError


def resolve_catalog_path(cfg: EffectiveConfig) -> Path:
    if not cfg.catalog_path:
        return BUNDLED_CATALOG
    rel = Path(cfg.catalog_path).expanduser()
    candidate = rel if rel.is_absolute() else Path(cfg.project_dir) / rel
    if not candidate.exists():
        raise MissingFileError(f"Catalog not found: {candidate}")
    return candidate
