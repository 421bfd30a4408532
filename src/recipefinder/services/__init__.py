from .search_service import SearchResult, explore_catalog, open_catalog, search_catalog

__all__ = ["SearchResult", "explore_catalog", "open_catalog", "search_catalog"]
