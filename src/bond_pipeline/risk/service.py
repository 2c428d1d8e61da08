"""Risk aggregation.

Per-product PV01 is recomputed on every position update as

    pv01 = factor(product) * aggregate position

Sector (bucketed) risk is a pull-style query over the stored product
records and is never cached.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.positions import Position
from bond_pipeline.domain.risk import PV01, BucketedSector
from bond_pipeline.reference.bonds import BondReference

logger = logging.getLogger(__name__)


class RiskService(KeyedStore[str, PV01]):
    """PV01 store keyed by product id."""

    def __init__(self, reference: BondReference | None = None) -> None:
        """Initialize service.

        Args:
            reference: Source of PV01 factors (defaults to the Treasury curve)
        """
        super().__init__(key=lambda record: record.product_id, name="risk")
        self._reference = reference or BondReference()

    def add_position(self, position: Position) -> PV01:
        """Recompute PV01 for a position's product and notify listeners.

        Args:
            position: Latest merged position

        Returns:
            The stored PV01 record
        """
        quantity = position.aggregate_position()
        factor = self._reference.pv01_factor(position.product_id)
        record = PV01(product=position.product, pv01=factor * quantity, quantity=quantity)
        logger.debug(f"PV01 {position.product_id}: {record.pv01} on {quantity}")
        return self.on_message(record)

    def bucketed_risk(self, sector: BucketedSector) -> PV01:
        """Aggregate risk over the products of a sector.

        Sums pv01 * quantity and quantity over the stored records of the
        sector's products; products without a record contribute zero.

        Args:
            sector: Products to aggregate

        Returns:
            PV01 record for the sector
        """
        total_pv01 = Decimal("0")
        total_quantity = 0
        for product_id in sector.product_ids:
            if product_id not in self:
                continue
            record = self.get(product_id)
            total_pv01 += record.pv01 * record.quantity
            total_quantity += record.quantity

        return PV01(product=sector, pv01=total_pv01, quantity=total_quantity)
