"""Field formatting for persisted values.

Each formatter returns (key, fields) for one domain value. Prices are
written in fractional notation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from bond_pipeline.domain.inquiries import Inquiry
from bond_pipeline.domain.orders import ExecutionOrder
from bond_pipeline.domain.positions import Position
from bond_pipeline.domain.pricing import Price, PriceStream, PriceStreamOrder
from bond_pipeline.domain.risk import PV01
from bond_pipeline.recording.events import HistoryType
from bond_pipeline.reference.price_format import format_price

Formatter = Callable[[Any], tuple[str, dict[str, Any]]]


def format_position(position: Position) -> tuple[str, dict[str, Any]]:
    return position.product_id, {
        "books": {book: position.get_position(book) for book in position.books()},
        "aggregate": position.aggregate_position(),
    }


def format_risk(record: PV01) -> tuple[str, dict[str, Any]]:
    return record.product_id, {"pv01": record.pv01, "quantity": record.quantity}


def format_execution(order: ExecutionOrder) -> tuple[str, dict[str, Any]]:
    return order.order_id, {
        "product_id": order.product_id,
        "side": order.side,
        "order_type": order.order_type,
        "price": format_price(order.price),
        "visible_quantity": order.visible_quantity,
        "hidden_quantity": order.hidden_quantity,
        "parent_order_id": order.parent_order_id,
        "is_child_order": order.is_child_order,
    }


def _stream_order(order: PriceStreamOrder) -> dict[str, Any]:
    return {
        "price": format_price(order.price),
        "visible_quantity": order.visible_quantity,
        "hidden_quantity": order.hidden_quantity,
    }


def format_stream(stream: PriceStream) -> tuple[str, dict[str, Any]]:
    return stream.product_id, {
        "bid": _stream_order(stream.bid_order),
        "offer": _stream_order(stream.offer_order),
    }


def format_inquiry(inquiry: Inquiry) -> tuple[str, dict[str, Any]]:
    return inquiry.inquiry_id, {
        "product_id": inquiry.product_id,
        "side": inquiry.side,
        "quantity": inquiry.quantity,
        "price": format_price(inquiry.price),
        "state": inquiry.state,
    }


def format_gui_price(price: Price) -> tuple[str, dict[str, Any]]:
    return price.product_id, {
        "mid": format_price(price.mid),
        "spread": format_price(price.bid_offer_spread),
    }


FORMATTERS: dict[HistoryType, Formatter] = {
    HistoryType.POSITION: format_position,
    HistoryType.RISK: format_risk,
    HistoryType.EXECUTION: format_execution,
    HistoryType.STREAMING: format_stream,
    HistoryType.INQUIRY: format_inquiry,
    HistoryType.GUI: format_gui_price,
}
