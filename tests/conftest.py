"""Shared fixtures for collection tests."""

from typing import Any, Callable

import pytest

from brickfolio.catalog.models import LegoSet

SetFactory = Callable[..., LegoSet]


def build_set(
    set_id: str,
    name: str = "Test Set",
    number: str = "0000-1",
    theme: str | None = "Misc",
    retail: dict[str, Any] | None = None,
    year: int | None = 0,
    **extra: Any,
) -> LegoSet:
    """Build a set record from JSON-style field values."""
    return LegoSet.model_validate(
        {
            "id": set_id,
            "name": name,
            "number": number,
            "theme": theme,
            "retailPrice": retail or {},
            "yearFrom": year,
            **extra,
        }
    )


@pytest.fixture
def make_set() -> SetFactory:
    """Factory for set records."""
    return build_set


@pytest.fixture
def space_and_castle() -> list[LegoSet]:
    """Three sets: two Space, one Castle.

    A: Space, uk 50, 2020
    B: Space, us 40 (uk missing), 2018
    C: Castle, uk 0, 2022
    """
    return [
        build_set("a", name="Galaxy Explorer", number="10497-1", theme="Space",
                  retail={"uk": 50}, year=2020),
        build_set("b", name="Moon Base", number="6971-1", theme="Space",
                  retail={"uk": None, "us": 40}, year=2018),
        build_set("c", name="King's Castle", number="6080-1", theme="Castle",
                  retail={"uk": 0}, year=2022),
    ]


@pytest.fixture
def sample_payload() -> list[dict[str, Any]]:
    """Collection document as produced by the data build."""
    return [
        {
            "id": "31970",
            "name": "Millennium Falcon",
            "number": "75192",
            "variant": "1",
            "theme": "Star Wars",
            "subtheme": "Ultimate Collector Series",
            "themeGroup": "Licensed",
            "category": "Normal",
            "availability": "LEGO exclusive",
            "packaging": "Box",
            "pieces": 7541,
            "minifigsCount": 8,
            "minifigs": ["sw0888", "sw0889"],
            "yearFrom": 2017,
            "retailPrice": {"us": 849.99, "uk": 734.99, "ca": None, "de": 799.99},
            "bricklink": {"new": 780.5, "used": 560},
            "skus": {"us": "6175771", "eu": None, "ean": "5702015869935", "upc": None},
            "dimensions": {"width": 70.2, "height": 59, "depth": 48.5, "weight": 19.7},
            "image": "https://images.brickset.com/sets/images/75192-1.jpg",
            "thumb": "https://images.brickset.com/sets/small/75192-1.jpg",
        },
        {
            "id": "2001",
            "name": "Police Station",
            "number": "60316",
            "theme": "City",
            "pieces": None,
            "yearFrom": 0,
            "retailPrice": {"us": None, "uk": None, "ca": None, "de": None},
            "bricklink": {"new": None, "used": None},
        },
    ]
