"""Convert a Brickset "my sets" CSV export into ``sets.json``.

The export has one header row and one row per owned set. Each row is
mapped onto the ``LegoSet`` shape:

- numeric text is coerced: prices and dimensions keep only digits,
  ``.`` and ``-`` and become null when nothing parseable remains;
  pieces, minifig count and year take the leading integer or 0;
- ``MinifigNumbers`` is split on commas;
- blank optional text becomes null;
- image and thumbnail URLs are derived from ``ImageFilename``.
"""

import csv
import json
import re
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Iterable

import structlog
from pydantic import ValidationError

from brickfolio.catalog.models import LegoSet
from brickfolio.domain.exceptions import CollectionImportError

logger = structlog.get_logger()

IMAGE_URL_TEMPLATE = "https://images.brickset.com/sets/{folder}/{code}.jpg"

_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def to_number(value: str | None) -> Decimal | None:
    """Coerce price-like text ("£49.99", "1,234.5") to a number.

    Args:
        value: Raw cell text.

    Returns:
        Parsed amount, None for blank or unparseable text.
    """
    if not value:
        return None
    try:
        return Decimal(_NON_NUMERIC.sub("", value))
    except InvalidOperation:
        return None


def to_int(value: str | None) -> int:
    """Coerce count-like text to an integer.

    Args:
        value: Raw cell text.

    Returns:
        Leading integer of the text, 0 for blank or unparseable text.
    """
    if not value:
        return 0
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else 0


def split_minifigs(value: str | None) -> list[str]:
    """Split a comma-joined minifig code list, dropping blanks."""
    return [code.strip() for code in (value or "").split(",") if code.strip()]


def image_url(code: str | None, folder: str) -> str | None:
    """Build an image URL from an image code, None when there is no code."""
    if not code:
        return None
    return IMAGE_URL_TEMPLATE.format(folder=folder, code=code)


def row_to_record(row: dict[str, str]) -> dict[str, Any]:
    """Map one CSV row onto the set record fields.

    Args:
        row: Row from ``csv.DictReader``.

    Returns:
        Field values keyed by ``LegoSet`` attribute name.
    """
    image_code = row.get("ImageFilename") or ""
    return {
        "id": row.get("SetID", ""),
        "name": row.get("SetName", ""),
        "number": row.get("Number", ""),
        "variant": row.get("Variant"),
        "theme": row.get("Theme"),
        "subtheme": row.get("Subtheme") or None,
        "theme_group": row.get("ThemeGroup") or None,
        "category": row.get("Category") or None,
        "availability": row.get("Availability") or None,
        "packaging": row.get("PackagingType") or None,
        "pieces": to_int(row.get("Pieces")),
        "minifigs_count": to_int(row.get("Minifigs")),
        "minifigs": split_minifigs(row.get("MinifigNumbers")),
        "year_from": to_int(row.get("YearFrom")),
        "retail_price": {
            "us": to_number(row.get("USRetailPrice")),
            "uk": to_number(row.get("UKRetailPrice")),
            "ca": to_number(row.get("CARetailPrice")),
            "de": to_number(row.get("DERetailPrice")),
        },
        "bricklink": {
            "new": to_number(row.get("BrickLinkSoldPriceNew")),
            "used": to_number(row.get("BrickLinkSoldPriceUsed")),
        },
        "skus": {
            "us": row.get("USItemNumber") or None,
            "eu": row.get("EUItemNumber") or None,
            "ean": row.get("EAN") or None,
            "upc": row.get("UPC") or None,
        },
        "dimensions": {
            "width": to_number(row.get("Width")),
            "height": to_number(row.get("Height")),
            "depth": to_number(row.get("Depth")),
            "weight": to_number(row.get("Weight")),
        },
        "image": image_url(image_code, "images"),
        "thumb": image_url(image_code, "small"),
    }


def convert_rows(rows: Iterable[dict[str, str]], source: str = "<rows>") -> list[LegoSet]:
    """Convert CSV rows into validated set records.

    Args:
        rows: Rows keyed by header name.
        source: Name of the export, for error messages.

    Returns:
        One LegoSet per row, in row order.

    Raises:
        CollectionImportError: If a row does not form a valid record.
    """
    sets = []
    # Row 1 is the header
    for line, row in enumerate(rows, start=2):
        try:
            sets.append(LegoSet(**row_to_record(row)))
        except ValidationError as e:
            raise CollectionImportError(
                source, f"row {line}: {e.error_count()} invalid fields"
            ) from e
    return sets


def read_csv(path: str | Path) -> list[LegoSet]:
    """Read and convert a CSV export.

    Args:
        path: Path of the export.

    Returns:
        Converted sets.

    Raises:
        CollectionImportError: If the file is unreadable or not valid UTF-8 CSV,
            or a row is invalid.
    """
    try:
        with open(path, encoding="utf-8-sig", newline="") as f:
            return convert_rows(csv.DictReader(f), str(path))
    except OSError as e:
        raise CollectionImportError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise CollectionImportError(str(path), f"not UTF-8 encoded ({e.reason})") from e
    except csv.Error as e:
        raise CollectionImportError(str(path), f"malformed CSV ({e})") from e


def dump_collection(sets: Iterable[LegoSet]) -> str:
    """Serialize sets as the pretty-printed ``sets.json`` array."""
    payload = [s.model_dump(mode="json", by_alias=True) for s in sets]
    return json.dumps(payload, indent=2, ensure_ascii=False)


def build_collection(csv_path: str | Path, output_path: str | Path) -> int:
    """Convert the CSV export and write ``sets.json``.

    Args:
        csv_path: Path of the CSV export.
        output_path: Where to write the JSON document; parent
            directories are created.

    Returns:
        Number of sets written.

    Raises:
        CollectionImportError: If the export cannot be converted.
    """
    sets = read_csv(csv_path)
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_collection(sets), encoding="utf-8")
    logger.info("Wrote collection", set_count=len(sets), output=str(output))
    return len(sets)
