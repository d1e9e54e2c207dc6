"""Default material prices for post-frame packages."""

from __future__ import annotations

from postframe.pricing.catalog import CatalogItem, PriceUnit

SEED_CATALOG: tuple[CatalogItem, ...] = (
    CatalogItem(sku="POST-6X6-LAM", description="6x6 laminated column", unit_price=92.50),
    CatalogItem(sku="TRUSS-PF", description="Post-frame truss, 4' o.c.", unit_price=385.00),
    CatalogItem(
        sku="LBR-2X10-16", description="2x10 #2 SYP", unit_price=1.45,
        price_unit=PriceUnit.LINEAR_FOOT,
    ),
    CatalogItem(
        sku="LBR-2X4-16", description="2x4 #2 SYP", unit_price=0.62,
        price_unit=PriceUnit.LINEAR_FOOT,
    ),
    CatalogItem(
        sku="TRIM-FASCIA-16", description="Steel fascia trim", unit_price=4.85,
        price_unit=PriceUnit.LINEAR_FOOT,
    ),
    CatalogItem(sku="OPENING-KIT", description="Opening trim kit", unit_price=45.00),
    CatalogItem(sku="PANEL-WALL-29GA", description="29 ga wall panel, 3' x 16'", unit_price=58.00),
    CatalogItem(sku="PANEL-ROOF-29GA", description="29 ga roof panel, 3' x 16'", unit_price=62.00),
    CatalogItem(sku="CONC-4000", description="Ready-mix concrete, per yard", unit_price=165.00),
)
