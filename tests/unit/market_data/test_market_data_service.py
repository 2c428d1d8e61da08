"""Tests for the market data service."""

from decimal import Decimal

import pytest

from bond_pipeline.domain.errors import EmptyBookError, NotFoundError
from bond_pipeline.domain.market_data import Order, OrderBook
from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.types import PricingSide
from bond_pipeline.market_data.service import (
    MarketDataService,
    aggregate_depth,
    best_bid_offer,
)


def _levels(stack: list[Order]) -> set[tuple[Decimal, int]]:
    return {(o.price, o.quantity) for o in stack}


@pytest.fixture
def book(us2y: Bond) -> OrderBook:
    """Book with repeated price levels on both sides."""
    bid = PricingSide.BID
    offer = PricingSide.OFFER
    return OrderBook(
        product=us2y,
        bid_stack=[
            Order(price=Decimal("99.5"), quantity=10, side=bid),
            Order(price=Decimal("99.25"), quantity=20, side=bid),
            Order(price=Decimal("99.5"), quantity=5, side=bid),
        ],
        offer_stack=[
            Order(price=Decimal("99.75"), quantity=7, side=offer),
            Order(price=Decimal("99.75"), quantity=3, side=offer),
            Order(price=Decimal("100"), quantity=1, side=offer),
        ],
    )


class TestBestBidOffer:
    """Tests for best_bid_offer."""

    def test_returns_best_levels(self, book: OrderBook) -> None:
        """Should pick the highest bid and lowest offer, first on ties."""
        result = best_bid_offer(book)

        assert result.bid_order.price == Decimal("99.5")
        assert result.bid_order.quantity == 10
        assert result.offer_order.price == Decimal("99.75")
        assert result.offer_order.quantity == 7


class TestAggregateDepth:
    """Tests for aggregate_depth."""

    def test_sums_by_price(self, book: OrderBook) -> None:
        """Should sum quantities per distinct price."""
        aggregated = aggregate_depth(book)

        assert _levels(aggregated.bid_stack) == {
            (Decimal("99.5"), 15),
            (Decimal("99.25"), 20),
        }
        assert _levels(aggregated.offer_stack) == {
            (Decimal("99.75"), 10),
            (Decimal("100"), 1),
        }

    def test_idempotent(self, book: OrderBook) -> None:
        """Aggregating an aggregated book should change nothing."""
        once = aggregate_depth(book)
        twice = aggregate_depth(once)

        assert _levels(twice.bid_stack) == _levels(once.bid_stack)
        assert _levels(twice.offer_stack) == _levels(once.offer_stack)

    def test_preserves_sides(self, book: OrderBook) -> None:
        """Aggregated orders should keep their side."""
        aggregated = aggregate_depth(book)

        assert all(o.side == PricingSide.BID for o in aggregated.bid_stack)
        assert all(o.side == PricingSide.OFFER for o in aggregated.offer_stack)

    def test_empty_stack(self, us2y: Bond) -> None:
        """Empty stacks should stay empty."""
        empty = OrderBook(product=us2y, bid_stack=[], offer_stack=[])

        aggregated = aggregate_depth(empty)

        assert aggregated.bid_stack == []
        assert aggregated.offer_stack == []


class TestMarketDataService:
    """Tests for MarketDataService."""

    def test_snapshot_replaces_previous(self, book: OrderBook, us2y: Bond) -> None:
        """A new snapshot should replace the stored one."""
        service = MarketDataService()
        service.on_message(book)
        newer = OrderBook(
            product=us2y,
            bid_stack=[Order(price=Decimal("98"), quantity=1, side=PricingSide.BID)],
            offer_stack=[Order(price=Decimal("99"), quantity=1, side=PricingSide.OFFER)],
        )
        service.on_message(newer)

        assert service.get_best_bid_offer(us2y.product_id).bid_order.price == Decimal("98")

    def test_queries_by_product(self, book: OrderBook, us2y: Bond) -> None:
        """Should answer best bid/offer and depth for a stored product."""
        service = MarketDataService()
        service.on_message(book)

        assert service.get_best_bid_offer(us2y.product_id).spread() == Decimal("0.25")
        assert len(service.aggregate_depth(us2y.product_id).bid_stack) == 2

    def test_unknown_product_raises(self) -> None:
        """Should raise NotFoundError for an unknown product."""
        with pytest.raises(NotFoundError):
            MarketDataService().get_best_bid_offer("NOPE")

    def test_empty_side_raises(self, us2y: Bond) -> None:
        """Should raise EmptyBookError when a side is empty."""
        service = MarketDataService()
        service.on_message(OrderBook(product=us2y, bid_stack=[], offer_stack=[]))

        with pytest.raises(EmptyBookError):
            service.get_best_bid_offer(us2y.product_id)
