"""Theme rollups and collection-wide totals.

All functions here are pure: they take the full set list and return
freshly computed results. Nothing is cached; callers recompute on every
change, which is fine at personal-collection scale.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Sequence

from brickfolio.catalog.models import LegoSet, preferred_retail_amount

# Grouping key for sets whose theme is empty or missing
UNCLASSIFIED_THEME = "Misc"


@dataclass(frozen=True)
class ThemeStat:
    """Aggregated statistics for one theme.

    Attributes:
        theme: Theme name (``UNCLASSIFIED_THEME`` for sets without one).
        sets: Number of sets in the theme.
        value: Sum of preferred retail amounts, unpriced sets count as 0.
        earliest_year: Earliest known release year, None if no set has one.
        latest_year: Latest known release year, None if no set has one.
    """

    theme: str
    sets: int
    value: Decimal
    earliest_year: int | None
    latest_year: int | None

    @property
    def average_value(self) -> Decimal | None:
        """Average preferred retail per set, None when the theme is empty."""
        if self.sets == 0:
            return None
        return self.value / self.sets


@dataclass
class _ThemeTotals:
    """Running totals while grouping."""

    sets: int = 0
    value: Decimal = field(default_factory=Decimal)
    years: list[int] = field(default_factory=list)


def theme_key(lego_set: LegoSet) -> str:
    """Get the grouping key for a set."""
    return lego_set.theme or UNCLASSIFIED_THEME


def compute_theme_stats(sets: Iterable[LegoSet]) -> list[ThemeStat]:
    """Group sets by theme and compute per-theme rollups.

    Themes are ordered by descending total value. Themes with equal
    value keep the order in which they were first seen in ``sets``.

    Args:
        sets: Sets to aggregate.

    Returns:
        One ThemeStat per theme present.
    """
    totals: dict[str, _ThemeTotals] = {}
    for lego_set in sets:
        entry = totals.setdefault(theme_key(lego_set), _ThemeTotals())
        entry.sets += 1
        entry.value += preferred_retail_amount(lego_set)
        year = lego_set.release_year
        if year is not None:
            entry.years.append(year)

    stats = [
        ThemeStat(
            theme=theme,
            sets=entry.sets,
            value=entry.value,
            earliest_year=min(entry.years) if entry.years else None,
            latest_year=max(entry.years) if entry.years else None,
        )
        for theme, entry in totals.items()
    ]
    # sorted() is stable with reverse=True, ties stay in discovery order
    return sorted(stats, key=lambda stat: stat.value, reverse=True)


def find_theme_stat(stats: Sequence[ThemeStat], theme: str | None) -> ThemeStat | None:
    """Look up the rollup for the currently selected theme.

    Args:
        stats: Output of ``compute_theme_stats``.
        theme: Selected theme, None when no theme filter is active.

    Returns:
        Matching ThemeStat, or None.
    """
    if theme is None:
        return None
    return next((stat for stat in stats if stat.theme == theme), None)


@dataclass(frozen=True)
class ThemeCard:
    """A theme in the spotlight with its share of the top theme's value."""

    stat: ThemeStat
    share: float


def theme_spotlight(stats: Sequence[ThemeStat], limit: int = 15) -> list[ThemeCard]:
    """Build the top-N theme cards.

    ``share`` is the theme value as a percentage of the most valuable
    theme, capped at 100. It is 0 for every card when the top theme has
    no value.

    Args:
        stats: Output of ``compute_theme_stats`` (already value-ordered).
        limit: Maximum number of cards.

    Returns:
        Up to ``limit`` theme cards.
    """
    if not stats:
        return []
    top_value = stats[0].value
    cards = []
    for stat in stats[:limit]:
        share = 0.0 if top_value <= 0 else min(100.0, float(stat.value / top_value * 100))
        cards.append(ThemeCard(stat=stat, share=share))
    return cards


# ============================================================================
# Collection Totals
# ============================================================================


@dataclass(frozen=True)
class OverallStats:
    """Collection-wide totals.

    Attributes:
        set_count: Number of sets.
        total_retail: Sum of preferred retail amounts.
        total_bricklink_new: Sum of BrickLink sold-new prices.
        total_pieces: Sum of piece counts.
    """

    set_count: int
    total_retail: Decimal
    total_bricklink_new: Decimal
    total_pieces: int

    @property
    def average_price(self) -> Decimal | None:
        """Average preferred retail per set, None for an empty collection."""
        if self.set_count == 0:
            return None
        return self.total_retail / self.set_count


def compute_overall_stats(sets: Sequence[LegoSet]) -> OverallStats:
    """Sum retail, BrickLink and piece counts across all sets.

    Missing values count as zero.

    Args:
        sets: The full, unfiltered collection.

    Returns:
        Collection totals.
    """
    return OverallStats(
        set_count=len(sets),
        total_retail=sum((preferred_retail_amount(s) for s in sets), Decimal(0)),
        total_bricklink_new=sum(
            (s.bricklink.new or Decimal(0) for s in sets), Decimal(0)
        ),
        total_pieces=sum(s.pieces or 0 for s in sets),
    )
