"""Pydantic models for the set collection.

Defines the shape of one catalog entry as it arrives in ``sets.json``
and the derived-value accessors the query engine ranks and sums by.
JSON keys are camelCase; Python attributes are snake_case.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from brickfolio.domain.value_objects import Currency, Money

# Decimal in Python, plain JSON number on the way back out
Amount = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class FrozenModel(BaseModel):
    """Base for immutable collection models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


# ============================================================================
# Price Records
# ============================================================================


class RetailPrice(FrozenModel):
    """Retail price of a set in up to four regional currencies."""

    us: Amount | None = Field(None, description="US retail price (USD)")
    uk: Amount | None = Field(None, description="UK retail price (GBP)")
    ca: Amount | None = Field(None, description="Canadian retail price (CAD)")
    de: Amount | None = Field(None, description="German retail price (EUR)")

    def preferred(self) -> Money | None:
        """Pick the first listed price in ``CURRENCY_PRIORITY`` order.

        This is an availability-ordered pick, not a conversion: the
        returned amount keeps the currency it was listed in. A listed
        zero counts as present.

        Returns:
            Money for the first non-null price, None if none is listed.
        """
        for region, currency in CURRENCY_PRIORITY:
            amount = getattr(self, region)
            if amount is not None:
                return Money(amount=amount, currency=currency)
        return None


# UK first, then US, Canada, Germany
CURRENCY_PRIORITY: tuple[tuple[str, Currency], ...] = (
    ("uk", Currency.GBP),
    ("us", Currency.USD),
    ("ca", Currency.CAD),
    ("de", Currency.EUR),
)


class BricklinkPrice(FrozenModel):
    """Secondary-market sold prices."""

    new: Amount | None = None
    used: Amount | None = None


class Skus(FrozenModel):
    """Regional item numbers and barcodes."""

    us: str | None = None
    eu: str | None = None
    ean: str | None = None
    upc: str | None = None


class Dimensions(FrozenModel):
    """Box dimensions and weight."""

    width: Amount | None = None
    height: Amount | None = None
    depth: Amount | None = None
    weight: Amount | None = None


# ============================================================================
# Set Record
# ============================================================================


class LegoSet(FrozenModel):
    """A single set in the collection.

    Records are built once from the collection document and never
    modified afterwards. Only ``id``, ``name`` and ``number`` are
    required; every other field may be null or omitted.

    Attributes:
        id: Stable unique identifier.
        name: Display name.
        number: Set number, shared by variants of the same set.
        theme: Primary grouping key.
        minifigs_count: Declared minifigure count; may differ from
            ``len(minifigs)``.
        year_from: First release year, 0 or None when unknown.
    """

    id: str
    name: str
    number: str
    variant: str | None = None
    theme: str | None = None
    subtheme: str | None = None
    theme_group: str | None = None
    category: str | None = None
    availability: str | None = None
    packaging: str | None = None
    pieces: int | None = Field(None, ge=0)
    minifigs_count: int = Field(default=0, ge=0)
    minifigs: tuple[str, ...] = ()
    year_from: int | None = Field(None, ge=0)
    retail_price: RetailPrice = Field(default_factory=RetailPrice)
    bricklink: BricklinkPrice = Field(default_factory=BricklinkPrice)
    skus: Skus = Field(default_factory=Skus)
    dimensions: Dimensions = Field(default_factory=Dimensions)
    image: str | None = None
    thumb: str | None = None

    @property
    def release_year(self) -> int | None:
        """First release year, None when unknown."""
        return self.year_from or None

    @property
    def search_text(self) -> str:
        """Text the search box matches against: name and set number."""
        return f"{self.name} {self.number}"

    @property
    def preferred_retail(self) -> Money | None:
        """Representative retail price, see ``RetailPrice.preferred``."""
        return self.retail_price.preferred()


def preferred_retail_amount(lego_set: LegoSet) -> Decimal:
    """Get the preferred retail amount for ranking and summing.

    Args:
        lego_set: Set to price.

    Returns:
        Preferred amount, ``Decimal(0)`` when no price is listed.
    """
    price = lego_set.preferred_retail
    return price.amount if price is not None else Decimal(0)
