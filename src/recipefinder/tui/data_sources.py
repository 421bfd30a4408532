from __future__ import annotations

from ..catalog import Catalog, list_cuisines
from ..config import EffectiveConfig
from ..domain import DEFAULT_CUISINES
from ..services.search_service import open_catalog


def load_catalog(cfg: EffectiveConfig) -> Catalog:
    return open_catalog(cfg)


def cuisine_options(catalog: Catalog) -> list[str]:
    """Cuisines present in the catalog, falling back to the standard list."""
    found = list_cuisines(catalog.recipes)
    return found or list(DEFAULT_CUISINES)
