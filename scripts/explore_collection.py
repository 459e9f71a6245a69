#!/usr/bin/env python3
"""Explore a set collection from the command line.

Loads sets.json once, applies the requested theme, search and sort,
and prints the collection header, theme spotlight and gallery.

Usage:
    python scripts/explore_collection.py
    python scripts/explore_collection.py --theme "Star Wars" --sort year
    python scripts/explore_collection.py --search falcon --source https://example.com/sets.json
"""

import argparse
import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from brickfolio.catalog.sorting import SortOption
from brickfolio.infrastructure.config import settings
from brickfolio.infrastructure.loader import CollectionLoader
from brickfolio.infrastructure.logging import configure_logging
from brickfolio.session import CollectionSession

ALL_THEMES_LABEL = "All Themes"


def format_amount(amount: Decimal | None) -> str:
    """Format a total or average for display, "—" when there is none."""
    if amount is None:
        return "—"
    digits = 0 if amount >= 100 else 2
    return f"{amount:,.{digits}f}"


def format_year(year: int | None) -> str:
    """Format a release year, "—" when unknown."""
    return str(year) if year is not None else "—"


async def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Explore a LEGO set collection")
    parser.add_argument(
        "--source",
        default=settings.data_source,
        help=f"URL or path of sets.json (default: {settings.data_source})",
    )
    parser.add_argument("--theme", default=None, help="Only show this theme")
    parser.add_argument("--search", default="", help="Search set names and numbers")
    parser.add_argument(
        "--sort",
        choices=[o.value for o in SortOption],
        default=SortOption.RETAIL.value,
        help="Gallery order (default: retail)",
    )
    parser.add_argument("--limit", type=int, default=20, help="Gallery rows to print")
    args = parser.parse_args()

    configure_logging(settings.log_level)

    session = CollectionSession(CollectionLoader(args.source))
    print("Loading collection…")
    await session.load()
    if not session.is_ready:
        print(session.error, file=sys.stderr)
        return 1

    session.set_theme(args.theme)
    session.set_search(args.search)
    session.set_sort(SortOption(args.sort))
    view = session.view()

    overall = view.overall
    print("=" * 60)
    print(f"{overall.set_count:,} sets spanning {view.theme_count} themes")
    print(f"Total retail:        {format_amount(overall.total_retail)}")
    print(f"BrickLink (new):     {format_amount(overall.total_bricklink_new)}")
    print(f"Total pieces:        {overall.total_pieces:,}")
    print(f"Average price / set: {format_amount(overall.average_price)}")
    print("=" * 60)

    print("Theme spotlight")
    for card in view.spotlight:
        stat = card.stat
        print(
            f"  {stat.theme:<30} {stat.sets:>4} sets  "
            f"{format_amount(stat.value):>14}  {card.share:5.1f}%"
        )
    print()

    if view.active_theme:
        stat = view.active_theme
        print(f"Theme focus: {stat.theme}")
        print(f"  Earliest release: {format_year(stat.earliest_year)}")
        print(f"  Latest release:   {format_year(stat.latest_year)}")
        print(f"  Avg retail:       {format_amount(stat.average_value)}")
        print()

    if view.suggestions:
        print("Suggestions")
        for s in view.suggestions:
            print(f"  {s.name} · #{s.number} · {s.theme or '—'}")
        print()

    print(f"{args.theme or ALL_THEMES_LABEL}: {view.result_count} sets")
    for s in view.sets[: args.limit]:
        pieces = f"{s.pieces:,} pcs" if s.pieces is not None else "— pcs"
        price = str(s.preferred_retail) if s.preferred_retail is not None else "—"
        print(
            f"  #{s.number:<10} {s.name[:40]:<40} {pieces:>10}  "
            f"{price}"
        )
    if view.result_count == 0:
        print("  No sets match that search.")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
