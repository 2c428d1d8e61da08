"""Market data service.

Keeps the latest order book snapshot per product and answers best
bid/offer and aggregated depth queries.
"""

from __future__ import annotations

from decimal import Decimal

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.market_data import BidOffer, Order, OrderBook


def best_bid_offer(book: OrderBook) -> BidOffer:
    """Return the best bid and best offer of a book.

    The highest bid and the lowest offer win; on a tie the order that
    appears first in its stack is returned.

    Raises:
        EmptyBookError: If either stack is empty
    """
    return book.bid_offer()


def _aggregate_stack(stack: list[Order]) -> list[Order]:
    if not stack:
        return []
    levels: dict[Decimal, int] = {}
    for order in stack:
        levels[order.price] = levels.get(order.price, 0) + order.quantity
    side = stack[0].side
    return [Order(price=price, quantity=qty, side=side) for price, qty in levels.items()]


def aggregate_depth(book: OrderBook) -> OrderBook:
    """Group each side of a book by exact price.

    Quantities at the same price are summed. The result holds one order
    per distinct price on each side; callers must not rely on the order
    of the price levels.

    Args:
        book: Raw order book snapshot

    Returns:
        New OrderBook with aggregated stacks
    """
    return OrderBook(
        product=book.product,
        bid_stack=_aggregate_stack(book.bid_stack),
        offer_stack=_aggregate_stack(book.offer_stack),
    )


class MarketDataService(KeyedStore[str, OrderBook]):
    """Order book store keyed by product id.

    Each snapshot fully replaces the previous one for its product and is
    passed on to listeners (the execution algorithm).
    """

    def __init__(self) -> None:
        super().__init__(key=lambda book: book.product_id, name="market_data")

    def get_best_bid_offer(self, product_id: str) -> BidOffer:
        """Return the best bid/offer of the stored book for a product.

        Raises:
            NotFoundError: If no book is stored for the product
            EmptyBookError: If either side of the book is empty
        """
        return best_bid_offer(self.get(product_id))

    def aggregate_depth(self, product_id: str) -> OrderBook:
        """Return the aggregated depth of the stored book for a product.

        Raises:
            NotFoundError: If no book is stored for the product
        """
        return aggregate_depth(self.get(product_id))
