from __future__ import annotations

from dataclasses import dataclass, field

from ..catalog import Catalog, load_catalog
from ..config import EffectiveConfig
from ..domain import FilterState, Recipe
from ..filters import ActiveFilter, active_filters, filter_admin_recipes, filter_recipes, summarize_results
from ..paths import resolve_catalog_path


@dataclass(frozen=True)
class SearchResult:
    recipes: list[Recipe]
    total: int
    badges: list[ActiveFilter] = field(default_factory=list)
    problems: list[str] = field(default_factory=list)

    @property
    def summary(self) -> str:
        return summarize_results(len(self.recipes), self.total)


def open_catalog(cfg: EffectiveConfig, strict: bool = False) -> Catalog:
    return load_catalog(resolve_catalog_path(cfg), strict=strict)


def search_catalog(cfg: EffectiveConfig, state: FilterState) -> SearchResult:
    catalog = open_catalog(cfg)
    return SearchResult(
        recipes=filter_recipes(catalog.recipes, state),
        total=len(catalog.recipes),
        badges=active_filters(state),
        problems=list(catalog.problems),
    )


def explore_catalog(cfg: EffectiveConfig, tab: str, query: str) -> SearchResult:
    catalog = open_catalog(cfg)
    return SearchResult(
        recipes=filter_admin_recipes(catalog.recipes, tab, query),
        total=len(catalog.recipes),
        problems=list(catalog.problems),
    )
