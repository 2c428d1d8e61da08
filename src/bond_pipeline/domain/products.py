"""Product reference entities."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from pydantic.dataclasses import dataclass

from bond_pipeline.domain.types import BondIdType


@dataclass(frozen=True)
class Bond:
    """A government bond identified by its product id (CUSIP).

    Bonds come from the static reference lookup and are never mutated
    by the pipeline.
    """

    product_id: str
    id_type: BondIdType = BondIdType.CUSIP
    ticker: str = ""
    coupon: Decimal = Decimal("0")
    maturity: date | None = None

    def __str__(self) -> str:
        return f"{self.ticker or 'UNKNOWN'}({self.product_id})"
