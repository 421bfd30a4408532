from .models import (
    DEFAULT_CUISINES,
    DEFAULT_TIME_RANGE,
    DEVICE_SUPPORT,
    DIFFICULTIES,
    RECIPE_STATUSES,
    TIME_RANGE_MAX,
    TIME_RANGE_MIN,
    FilterState,
    Recipe,
)

__all__ = [
    "DEFAULT_CUISINES",
    "DEFAULT_TIME_RANGE",
    "DEVICE_SUPPORT",
    "DIFFICULTIES",
    "RECIPE_STATUSES",
    "TIME_RANGE_MAX",
    "TIME_RANGE_MIN",
    "FilterState",
    "Recipe",
]
