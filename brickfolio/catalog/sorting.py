"""Sort options for the set gallery."""

import unicodedata
from enum import Enum
from typing import Iterable

from brickfolio.catalog.models import LegoSet, preferred_retail_amount


class SortOption(str, Enum):
    """Ways the gallery can be ordered."""

    RETAIL = "retail"
    YEAR = "year"
    NAME = "name"


def name_key(name: str) -> str:
    """Collation key that ignores case and accents.

    "Château" and "chateau" compare equal, so stable ordering decides
    between them.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def sort_sets(sets: Iterable[LegoSet], sort_by: SortOption = SortOption.RETAIL) -> list[LegoSet]:
    """Sort sets into a new list.

    - ``retail``: highest preferred retail first, unpriced sets last.
    - ``year``: newest release first, unknown years last.
    - ``name``: A-Z, case- and accent-insensitive.

    Sets with equal keys keep their input order, so sorting an already
    sorted list returns it unchanged.

    Args:
        sets: Sets to sort.
        sort_by: Sort option.

    Returns:
        Sorted copy of ``sets``.
    """
    if sort_by == SortOption.YEAR:
        return sorted(sets, key=lambda s: s.release_year or 0, reverse=True)
    if sort_by == SortOption.NAME:
        return sorted(sets, key=lambda s: name_key(s.name))
    return sorted(sets, key=preferred_retail_amount, reverse=True)
