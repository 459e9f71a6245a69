"""Set collection catalog.

Provides the set record model and the query engine over it: theme
rollups, filtering, sorting, search suggestions and view composition.
"""

from brickfolio.catalog.aggregator import (
    UNCLASSIFIED_THEME,
    OverallStats,
    ThemeCard,
    ThemeStat,
    compute_overall_stats,
    compute_theme_stats,
    find_theme_stat,
    theme_spotlight,
)
from brickfolio.catalog.filters import filter_sets, matches_search
from brickfolio.catalog.models import (
    CURRENCY_PRIORITY,
    BricklinkPrice,
    Dimensions,
    LegoSet,
    RetailPrice,
    Skus,
    preferred_retail_amount,
)
from brickfolio.catalog.service import CollectionService, CollectionView, QueryState
from brickfolio.catalog.sorting import SortOption, sort_sets
from brickfolio.catalog.suggestions import DEFAULT_SUGGESTION_LIMIT, suggest

__all__ = [
    # Models
    "BricklinkPrice",
    "CURRENCY_PRIORITY",
    "Dimensions",
    "LegoSet",
    "RetailPrice",
    "Skus",
    "preferred_retail_amount",
    # Aggregation
    "OverallStats",
    "ThemeCard",
    "ThemeStat",
    "UNCLASSIFIED_THEME",
    "compute_overall_stats",
    "compute_theme_stats",
    "find_theme_stat",
    "theme_spotlight",
    # Filtering, sorting, suggestions
    "DEFAULT_SUGGESTION_LIMIT",
    "SortOption",
    "filter_sets",
    "matches_search",
    "sort_sets",
    "suggest",
    # Service
    "CollectionService",
    "CollectionView",
    "QueryState",
]
