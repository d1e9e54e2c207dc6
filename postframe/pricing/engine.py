"""PricingEngine: joins takeoff lines against a material catalog.

Usage::

    engine = PricingEngine(default_catalog())
    bom = engine.price(lines)
    bom.total
"""

from __future__ import annotations

import logging

from postframe.core import solver
from postframe.pricing.catalog import MaterialCatalog, default_catalog, normalize_unit_price
from postframe.models import (
    BOMLine, DimensionalSpec, PricedBOM, PricingConfig, TakeoffLine,
)

logger = logging.getLogger(__name__)


class PricingEngine:
    """Materials-only pricing; tax, labor and markup are left to the caller."""

    def __init__(
        self,
        catalog: MaterialCatalog | None = None,
        config: PricingConfig | None = None,
    ) -> None:
        self.catalog = catalog or default_catalog()
        self.config = config or PricingConfig()

    def price(self, lines: list[TakeoffLine]) -> PricedBOM:
        bom_lines: list[BOMLine] = []
        unpriced: list[str] = []
        for line in lines:
            item = self.catalog.lookup(line.sku)
            if item is None:
                logger.warning("No catalog price for SKU %s (%s); priced at 0", line.sku, line.description)
                if line.sku not in unpriced:
                    unpriced.append(line.sku)
                unit_price = 0.0
            else:
                unit_price = normalize_unit_price(item, line.stock_length)
            bom_lines.append(BOMLine(
                category=line.category,
                spec_description=line.description,
                sku=line.sku,
                quantity=line.quantity,
                unit_price=unit_price,
            ))

        total = round(sum(b.subtotal for b in bom_lines), 2)
        return PricedBOM(lines=tuple(bom_lines), total=total, unpriced=tuple(unpriced))

    def budget_price(self, spec: DimensionalSpec) -> float:
        """Quick square-foot budget: footprint rate plus a per-foot-of-height adder."""
        area = spec.width * solver.rounded_length(spec)
        return round(area * self.config.base_unit_cost + spec.eave_height * self.config.height_cost, 2)
