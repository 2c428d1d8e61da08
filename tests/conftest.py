"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest

from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.trades import Trade
from bond_pipeline.domain.types import TradeSide
from bond_pipeline.reference.bonds import US2Y, US10Y, BondReference


@pytest.fixture
def reference() -> BondReference:
    """Treasury curve reference data."""
    return BondReference()


@pytest.fixture
def us2y(reference: BondReference) -> Bond:
    """The 2 year note."""
    return reference.resolve_product(US2Y)


@pytest.fixture
def us10y(reference: BondReference) -> Bond:
    """The 10 year note."""
    return reference.resolve_product(US10Y)


@pytest.fixture
def make_trade(us2y: Bond):
    """Factory for trades on the 2 year note."""

    def _make(
        trade_id: str = "T1",
        side: TradeSide = TradeSide.BUY,
        quantity: int = 1_000_000,
        book: str = "TRSY1",
        product: Bond | None = None,
    ) -> Trade:
        return Trade(
            product=product or us2y,
            trade_id=trade_id,
            price=Decimal("99.5"),
            book=book,
            quantity=quantity,
            side=side,
        )

    return _make


@pytest.fixture
def sample_price_lines() -> list[str]:
    """Price lines: product,bid,offer."""
    return [
        "91282CJL6,99-160,99-162",
        "91282CJJ1,100-00+,100-01\r",
    ]


@pytest.fixture
def sample_market_data_lines() -> list[str]:
    """One full depth-5 batch for the 2 year note with a crossed top."""
    return [
        "91282CJL6,99-16+,1000000,BID",
        "91282CJL6,99-16+,1000000,OFFER",
        "91282CJL6,99-16,2000000,BID",
        "91282CJL6,99-17,2000000,OFFER",
        "91282CJL6,99-15+,3000000,BID",
        "91282CJL6,99-17+,3000000,OFFER",
        "91282CJL6,99-15,4000000,BID",
        "91282CJL6,99-18,4000000,OFFER",
        "91282CJL6,99-14+,5000000,BID",
        "91282CJL6,99-18+,5000000,OFFER",
    ]
