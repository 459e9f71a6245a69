#!/usr/bin/env python3
"""Build sets.json from a Brickset CSV export.

Usage:
    python scripts/build_data.py
    python scripts/build_data.py --csv ../Brickset-mySets-owned.csv --output public/sets.json
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from brickfolio.domain.exceptions import CollectionImportError
from brickfolio.importer import build_collection
from brickfolio.infrastructure.config import settings
from brickfolio.infrastructure.logging import configure_logging


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Convert a Brickset 'my sets' CSV export into sets.json",
    )
    parser.add_argument(
        "--csv",
        default=settings.csv_path,
        help=f"CSV export to read (default: {settings.csv_path})",
    )
    parser.add_argument(
        "--output",
        default=settings.output_path,
        help=f"JSON document to write (default: {settings.output_path})",
    )
    args = parser.parse_args()

    configure_logging(settings.log_level)

    try:
        count = build_collection(args.csv, args.output)
    except CollectionImportError as e:
        print(f"✗ {e.message}", file=sys.stderr)
        return 1

    print(f"Wrote {count} sets to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
