"""Tests for the spread-crossing execution algorithm."""

from decimal import Decimal

import pytest

from bond_pipeline.domain.errors import EmptyBookError
from bond_pipeline.domain.market_data import Order, OrderBook
from bond_pipeline.domain.orders import AlgoExecution, ExecutionOrder
from bond_pipeline.domain.products import Bond
from bond_pipeline.domain.types import Market, OrderType, PricingSide
from bond_pipeline.execution.algo import DEFAULT_SPREAD_THRESHOLD, AlgoExecutionService
from bond_pipeline.execution.service import ExecutionService
from bond_pipeline.reference.ids import SequentialIds
from bond_pipeline.reference.price_format import parse_price


def make_book(product: Bond, bid: str, offer: str) -> OrderBook:
    return OrderBook(
        product=product,
        bid_stack=[
            Order(price=parse_price(bid), quantity=1_000_000, side=PricingSide.BID),
            Order(price=parse_price("99-00"), quantity=9_000_000, side=PricingSide.BID),
        ],
        offer_stack=[
            Order(price=parse_price(offer), quantity=2_000_000, side=PricingSide.OFFER),
            Order(price=parse_price("100-00"), quantity=9_000_000, side=PricingSide.OFFER),
        ],
    )


class TestAlgoExecutionService:
    """Tests for AlgoExecutionService."""

    @pytest.fixture
    def algo(self) -> AlgoExecutionService:
        """Algorithm with deterministic order ids."""
        return AlgoExecutionService(order_ids=SequentialIds("ALGO"))

    def test_default_threshold(self) -> None:
        """Default threshold should be 1/128."""
        assert DEFAULT_SPREAD_THRESHOLD == Decimal("0.0078125")

    def test_wide_spread_does_nothing(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """A 1/32 spread should not trigger an execution."""
        emitted: list[AlgoExecution] = []
        algo.add_listener(emitted.append)

        result = algo.execute(make_book(us2y, "99-16", "99-17"))

        assert result is None
        assert emitted == []
        assert algo.side == PricingSide.BID
        assert us2y.product_id not in algo

    def test_zero_spread_executes(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """A locked book should emit exactly one execution."""
        emitted: list[AlgoExecution] = []
        algo.add_listener(emitted.append)

        algo.execute(make_book(us2y, "99-16+", "99-16+"))

        assert len(emitted) == 1
        order = emitted[0].execution_order
        assert order.side == PricingSide.BID
        assert order.order_id == "ALGO1"
        assert order.order_type == OrderType.MARKET
        assert order.price == parse_price("99-16+")
        assert order.visible_quantity == 1_000_000
        assert order.hidden_quantity == 0
        assert order.parent_order_id == ""
        assert not order.is_child_order
        assert emitted[0].market == Market.CME

    def test_side_toggles(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """Successive executions should alternate BID, OFFER, BID."""
        book = make_book(us2y, "99-16+", "99-16+")

        sides = [algo.execute(book).execution_order.side for _ in range(3)]

        assert sides == [PricingSide.BID, PricingSide.OFFER, PricingSide.BID]

    def test_offer_side_uses_offer_order(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """The OFFER execution should copy the best offer's quantity."""
        book = make_book(us2y, "99-16+", "99-16+")
        algo.execute(book)

        order = algo.execute(book).execution_order

        assert order.side == PricingSide.OFFER
        assert order.visible_quantity == 2_000_000

    def test_threshold_is_inclusive(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """A spread equal to the threshold should execute."""
        assert algo.execute(make_book(us2y, "99-160", "99-162")) is not None

    def test_wide_book_keeps_toggle(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """Books without an execution should not flip the side."""
        tight = make_book(us2y, "99-16+", "99-16+")
        wide = make_book(us2y, "99-16", "99-17")

        algo.execute(tight)
        algo.execute(wide)

        assert algo.execute(tight).execution_order.side == PricingSide.OFFER

    def test_latest_execution_per_product(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """Only the latest execution per product should be stored."""
        book = make_book(us2y, "99-16+", "99-16+")
        algo.execute(book)
        algo.execute(book)

        assert len(algo) == 1
        assert algo.get(us2y.product_id).execution_order.order_id == "ALGO2"

    def test_empty_book_raises(self, algo: AlgoExecutionService, us2y: Bond) -> None:
        """Should propagate EmptyBookError."""
        with pytest.raises(EmptyBookError):
            algo.execute(OrderBook(product=us2y, bid_stack=[], offer_stack=[]))


class TestExecutionService:
    """Tests for ExecutionService."""

    def test_relays_algo_execution(self, us2y: Bond) -> None:
        """Should store and publish the wrapped execution order."""
        service = ExecutionService()
        received: list[ExecutionOrder] = []
        service.add_listener(received.append)
        order = ExecutionOrder(
            product=us2y,
            side=PricingSide.BID,
            order_id="O1",
            order_type=OrderType.MARKET,
            price=Decimal("99.5"),
            visible_quantity=10,
            hidden_quantity=0,
        )

        service.on_algo_execution(AlgoExecution(execution_order=order, market=Market.ESPEED))

        assert received == [order]
        assert service.get(us2y.product_id) == order
