"""Collection service.

Combines filtering, sorting, aggregation and suggestions into the view
the presentation layer renders. Query state is an explicit immutable
value: every user action produces a new ``QueryState`` and the view is
recomputed from scratch for it.
"""

from dataclasses import dataclass, replace
from typing import Iterable

from brickfolio.catalog.aggregator import (
    OverallStats,
    ThemeCard,
    ThemeStat,
    compute_overall_stats,
    compute_theme_stats,
    find_theme_stat,
    theme_spotlight,
)
from brickfolio.catalog.filters import filter_sets
from brickfolio.catalog.models import LegoSet
from brickfolio.catalog.sorting import SortOption, sort_sets
from brickfolio.catalog.suggestions import DEFAULT_SUGGESTION_LIMIT, suggest


@dataclass(frozen=True)
class QueryState:
    """What the user is currently looking at.

    Attributes:
        theme: Selected theme, None for all themes.
        search: Text in the search box.
        sort_by: Gallery sort option.
        selected: Set open in the detail panel, if any.
        suggestions: Suggestions shown under the search box.
    """

    theme: str | None = None
    search: str = ""
    sort_by: SortOption = SortOption.RETAIL
    selected: LegoSet | None = None
    suggestions: tuple[LegoSet, ...] = ()


@dataclass(frozen=True)
class CollectionView:
    """Everything needed to render one screen of the explorer.

    Attributes:
        sets: Filtered and sorted gallery.
        theme_stats: Rollups for every theme, independent of filters.
        spotlight: Top theme cards.
        active_theme: Rollup for the selected theme, if any.
        overall: Collection-wide totals, independent of filters.
        suggestions: Current search suggestions.
        selected: Set open in the detail panel, if any.
    """

    sets: list[LegoSet]
    theme_stats: list[ThemeStat]
    spotlight: list[ThemeCard]
    active_theme: ThemeStat | None
    overall: OverallStats
    suggestions: list[LegoSet]
    selected: LegoSet | None

    @property
    def result_count(self) -> int:
        """Number of sets in the gallery."""
        return len(self.sets)

    @property
    def theme_count(self) -> int:
        """Number of distinct themes in the collection."""
        return len(self.theme_stats)


class CollectionService:
    """Query operations over a loaded collection.

    Example usage:
        service = CollectionService(sets)
        state = QueryState()
        state = service.with_theme(state, "Star Wars")
        state = service.with_search(state, "falcon")
        view = service.compose_view(state)
    """

    def __init__(
        self,
        sets: Iterable[LegoSet],
        suggestion_limit: int = DEFAULT_SUGGESTION_LIMIT,
        spotlight_limit: int = 15,
    ) -> None:
        """Initialize service with the loaded collection.

        Args:
            sets: All sets in the collection.
            suggestion_limit: Maximum suggestions per search.
            spotlight_limit: Maximum theme cards in the spotlight.
        """
        self.sets: tuple[LegoSet, ...] = tuple(sets)
        self.suggestion_limit = suggestion_limit
        self.spotlight_limit = spotlight_limit

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def theme_stats(self) -> list[ThemeStat]:
        """Get per-theme rollups for the whole collection."""
        return compute_theme_stats(self.sets)

    def overall_stats(self) -> OverallStats:
        """Get collection-wide totals."""
        return compute_overall_stats(self.sets)

    def browse(self, state: QueryState) -> list[LegoSet]:
        """Get the gallery for a query: filtered, then sorted.

        Args:
            state: Current query state.

        Returns:
            Sets to display.
        """
        return sort_sets(filter_sets(self.sets, state.theme, state.search), state.sort_by)

    def suggest(self, search: str) -> list[LegoSet]:
        """Get suggestions for search text over the whole collection."""
        return suggest(self.sets, search, self.suggestion_limit)

    def compose_view(self, state: QueryState) -> CollectionView:
        """Compute the full view for a query state.

        Args:
            state: Current query state.

        Returns:
            Freshly computed view.
        """
        theme_stats = self.theme_stats()
        return CollectionView(
            sets=self.browse(state),
            theme_stats=theme_stats,
            spotlight=theme_spotlight(theme_stats, self.spotlight_limit),
            active_theme=find_theme_stat(theme_stats, state.theme),
            overall=self.overall_stats(),
            suggestions=list(state.suggestions),
            selected=state.selected,
        )

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def with_theme(self, state: QueryState, theme: str | None) -> QueryState:
        """Select a theme, or all themes with None."""
        return replace(state, theme=theme)

    def clear_theme(self, state: QueryState) -> QueryState:
        """Go back to all themes."""
        return replace(state, theme=None)

    def with_search(self, state: QueryState, search: str) -> QueryState:
        """Update the search text and refresh suggestions for it."""
        return replace(state, search=search, suggestions=tuple(self.suggest(search)))

    def with_sort(self, state: QueryState, sort_by: SortOption) -> QueryState:
        """Change the gallery sort option."""
        return replace(state, sort_by=SortOption(sort_by))

    def with_selected(self, state: QueryState, lego_set: LegoSet | None) -> QueryState:
        """Open a set in the detail panel, or close it with None."""
        return replace(state, selected=lego_set)

    def select_suggestion(self, state: QueryState, lego_set: LegoSet) -> QueryState:
        """Accept a suggestion.

        Opens the set, clears the suggestion list and puts the set's
        name in the search box, all in one new state.

        Args:
            state: Current query state.
            lego_set: The suggestion picked.

        Returns:
            New query state.
        """
        return replace(state, selected=lego_set, suggestions=(), search=lego_set.name)
