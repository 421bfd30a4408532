from .browse import BrowseRecipesScreen
from .explore import ExploreRecipesScreen
from .mode import ModeScreen

__all__ = [
    "BrowseRecipesScreen",
    "ExploreRecipesScreen",
    "ModeScreen",
]
