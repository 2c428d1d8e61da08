"""Tests for bond reference data."""

from decimal import Decimal

from bond_pipeline.reference.bonds import US2Y, US30Y, BondReference
from bond_pipeline.reference.ids import SequentialIds, new_order_id


class TestBondReference:
    """Tests for BondReference."""

    def test_resolves_known_bond(self, reference: BondReference) -> None:
        """Should return the Treasury with its ticker."""
        bond = reference.resolve_product(US2Y)

        assert bond.ticker == "US2Y"
        assert bond.coupon == Decimal("0.04875")

    def test_unknown_bond_is_placeholder(self, reference: BondReference) -> None:
        """Unknown ids should resolve to a placeholder carrying the id."""
        bond = reference.resolve_product("UNKNOWN1")

        assert bond.product_id == "UNKNOWN1"
        assert bond.ticker == ""

    def test_pv01_factors(self, reference: BondReference) -> None:
        """Should return the factor, or zero for unknown ids."""
        assert reference.pv01_factor(US2Y) == Decimal("0.01")
        assert reference.pv01_factor(US30Y) == Decimal("0.20")
        assert reference.pv01_factor("UNKNOWN1") == Decimal("0")

    def test_default_sectors(self, reference: BondReference) -> None:
        """Should cover the seven Treasuries in three sectors."""
        sectors = reference.default_sectors()

        assert [s.name for s in sectors] == ["FrontEnd", "Belly", "LongEnd"]
        assert sum(len(s.products) for s in sectors) == 7
        assert sectors[0].product_ids[0] == US2Y


class TestOrderIds:
    """Tests for order id factories."""

    def test_new_order_ids_are_unique(self) -> None:
        """Ids created back to back should never repeat."""
        ids = [new_order_id() for _ in range(20_000)]

        assert len(set(ids)) == len(ids)
        assert all(i.startswith("ALGO-") for i in ids)

    def test_sequential_ids(self) -> None:
        """Should count up from 1."""
        ids = SequentialIds("ALGO")

        assert [ids(), ids(), ids()] == ["ALGO1", "ALGO2", "ALGO3"]
