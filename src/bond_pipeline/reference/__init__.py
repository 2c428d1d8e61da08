"""Reference data and external-collaborator helpers.

Static bond lookup, PV01 factors, fractional price notation and
order id generation.
"""

from bond_pipeline.reference.bonds import (
    DEFAULT_SECTORS,
    PV01_FACTORS,
    TREASURIES,
    BondReference,
)
from bond_pipeline.reference.ids import OrderIdFactory, SequentialIds, new_order_id
from bond_pipeline.reference.price_format import format_price, parse_price

__all__ = [
    "BondReference",
    "DEFAULT_SECTORS",
    "PV01_FACTORS",
    "TREASURIES",
    "OrderIdFactory",
    "SequentialIds",
    "new_order_id",
    "format_price",
    "parse_price",
]
