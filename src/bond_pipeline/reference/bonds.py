"""Static reference data for the on-the-run US Treasury curve.

Provides product lookup by CUSIP, PV01 factors and the default risk
sectors. Unknown ids are not an error: they resolve to a placeholder
bond with a zero PV01 factor.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.risk import BucketedSector
from bond_pipeline.domain.types import BondIdType

logger = logging.getLogger(__name__)

US2Y = "91282CJL6"
US3Y = "91282CJK8"
US5Y = "91282CJN2"
US7Y = "91282CJM4"
US10Y = "91282CJJ1"
US20Y = "912810TW8"
US30Y = "912810TV0"

TREASURIES: dict[str, Bond] = {
    US2Y: Bond(US2Y, BondIdType.CUSIP, "US2Y", Decimal("0.04875"), date(2025, 11, 30)),
    US3Y: Bond(US3Y, BondIdType.CUSIP, "US3Y", Decimal("0.04625"), date(2026, 11, 15)),
    US5Y: Bond(US5Y, BondIdType.CUSIP, "US5Y", Decimal("0.04375"), date(2028, 11, 30)),
    US7Y: Bond(US7Y, BondIdType.CUSIP, "US7Y", Decimal("0.04375"), date(2030, 11, 30)),
    US10Y: Bond(US10Y, BondIdType.CUSIP, "US10Y", Decimal("0.045"), date(2033, 11, 15)),
    US20Y: Bond(US20Y, BondIdType.CUSIP, "US20Y", Decimal("0.0475"), date(2043, 11, 15)),
    US30Y: Bond(US30Y, BondIdType.CUSIP, "US30Y", Decimal("0.0475"), date(2053, 11, 15)),
}

PV01_FACTORS: dict[str, Decimal] = {
    US2Y: Decimal("0.01"),
    US3Y: Decimal("0.02"),
    US5Y: Decimal("0.04"),
    US7Y: Decimal("0.06"),
    US10Y: Decimal("0.08"),
    US20Y: Decimal("0.12"),
    US30Y: Decimal("0.20"),
}

DEFAULT_SECTORS: dict[str, list[str]] = {
    "FrontEnd": [US2Y, US3Y],
    "Belly": [US5Y, US7Y, US10Y],
    "LongEnd": [US20Y, US30Y],
}


class BondReference:
    """Lookup of bonds and PV01 factors by product id."""

    def __init__(
        self,
        bonds: dict[str, Bond] | None = None,
        pv01_factors: dict[str, Decimal] | None = None,
    ) -> None:
        """Initialize with reference tables.

        Args:
            bonds: Product id -> Bond (defaults to the Treasury curve)
            pv01_factors: Product id -> PV01 factor
        """
        self._bonds = dict(TREASURIES if bonds is None else bonds)
        self._factors = dict(PV01_FACTORS if pv01_factors is None else pv01_factors)

    def product_ids(self) -> list[str]:
        """Return known product ids."""
        return list(self._bonds)

    def resolve_product(self, product_id: str) -> Bond:
        """Return the bond for an id, or a placeholder for unknown ids."""
        bond = self._bonds.get(product_id)
        if bond is None:
            logger.debug(f"Unknown product {product_id}, using placeholder")
            return Bond(product_id=product_id)
        return bond

    def pv01_factor(self, product_id: str) -> Decimal:
        """Return the PV01 factor for an id (0 for unknown ids)."""
        return self._factors.get(product_id, Decimal("0"))

    def sector(self, name: str, product_ids: list[str]) -> BucketedSector:
        """Build a sector from product ids."""
        return BucketedSector(
            name=name, products=[self.resolve_product(pid) for pid in product_ids]
        )

    def default_sectors(self) -> list[BucketedSector]:
        """Return the FrontEnd, Belly and LongEnd sectors."""
        return [self.sector(name, ids) for name, ids in DEFAULT_SECTORS.items()]
