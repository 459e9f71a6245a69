"""Theme and text-search filtering."""

from typing import Iterable

from brickfolio.catalog.models import LegoSet


def is_blank(search: str | None) -> bool:
    """Check whether a search string should match everything."""
    return not search or not search.strip()


def matches_search(lego_set: LegoSet, search: str | None) -> bool:
    """Case-insensitive substring match on "name number".

    Args:
        lego_set: Set to test.
        search: Search text; blank matches every set.

    Returns:
        True if the set matches.
    """
    if is_blank(search):
        return True
    return search.casefold() in lego_set.search_text.casefold()


def matches_theme(lego_set: LegoSet, theme: str | None) -> bool:
    """Exact, case-sensitive theme match; None matches every set."""
    return theme is None or lego_set.theme == theme


def filter_sets(
    sets: Iterable[LegoSet],
    theme: str | None = None,
    search: str | None = None,
) -> list[LegoSet]:
    """Filter sets by theme and search text.

    Both predicates must hold. The input is not modified.

    Args:
        sets: Sets to filter.
        theme: Theme to keep, None for all themes.
        search: Search text, blank for no text filter.

    Returns:
        New list of matching sets in input order.
    """
    return [
        s for s in sets
        if matches_theme(s, theme) and matches_search(s, search)
    ]
