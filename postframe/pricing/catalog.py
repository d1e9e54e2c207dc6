"""Material catalog interface, in-memory/JSON catalog, and price normalization."""

from __future__ import annotations

import abc
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Iterable

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class PriceUnit(str, Enum):
    EACH = "each"
    LINEAR_FOOT = "linear_foot"


class CatalogItem(BaseModel):
    """One purchasable material keyed by a stable SKU."""
    model_config = ConfigDict(frozen=True)

    sku: str
    description: str
    unit_price: float
    price_unit: PriceUnit = PriceUnit.EACH
    stock_length: float = 16.0   # Feet per piece for linear-foot pricing


def normalize_unit_price(item: CatalogItem, stock_length: float | None = None) -> float:
    """
    Price of one purchasable unit of ``item``.

    Per-each prices pass through. Per-linear-foot prices become the price
    of one stock-length piece. Every BOM price goes through here.
    """
    if item.price_unit == PriceUnit.EACH:
        return item.unit_price
    length = stock_length if stock_length is not None else item.stock_length
    if abs(length - item.stock_length) > 1e-9:
        logger.warning(
            "SKU %s is stocked in %g' pieces but priced for %g' pieces",
            item.sku, item.stock_length, length,
        )
    return round(item.unit_price * length, 4)


class MaterialCatalog(abc.ABC):
    """Abstract catalog data source."""

    @abc.abstractmethod
    def lookup(self, sku: str) -> CatalogItem | None:
        """Return the item for ``sku``, or None if not carried."""

    @abc.abstractmethod
    def items(self) -> list[CatalogItem]:
        """Return every item in the catalog."""


class InMemoryCatalog(MaterialCatalog):
    """Catalog held in a dict; loaded from seed data or a JSON file."""

    def __init__(self, items: Iterable[CatalogItem]) -> None:
        self._items: dict[str, CatalogItem] = {item.sku: item for item in items}

    def lookup(self, sku: str) -> CatalogItem | None:
        return self._items.get(sku)

    def items(self) -> list[CatalogItem]:
        return list(self._items.values())

    @classmethod
    def from_json(cls, path: str | Path) -> InMemoryCatalog:
        """Load a JSON list of catalog items."""
        path = Path(path)
        raw = json.loads(path.read_text(encoding="utf-8"))
        items = [CatalogItem.model_validate(entry) for entry in raw]
        logger.info("Loaded %d catalog items from %s", len(items), path)
        return cls(items)


def default_catalog() -> InMemoryCatalog:
    """Embedded seed catalog so estimates work out-of-the-box."""
    from postframe.pricing.seed_data import SEED_CATALOG

    return InMemoryCatalog(SEED_CATALOG)
