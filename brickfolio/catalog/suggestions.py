"""Search-box suggestions."""

from itertools import islice
from typing import Iterable

from brickfolio.catalog.filters import is_blank, matches_search
from brickfolio.catalog.models import LegoSet

DEFAULT_SUGGESTION_LIMIT = 6


def suggest(
    sets: Iterable[LegoSet],
    search: str | None,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[LegoSet]:
    """Suggest sets for partially typed search text.

    Uses the same match as the gallery search but over the whole
    collection, ignoring the theme filter. Matches are returned in
    collection order, not ranked, and cut at ``limit``.

    Args:
        sets: The full collection.
        search: Text typed so far; blank yields no suggestions.
        limit: Maximum number of suggestions.

    Returns:
        Up to ``limit`` matching sets.
    """
    if is_blank(search) or limit <= 0:
        return []
    return list(islice((s for s in sets if matches_search(s, search)), limit))
