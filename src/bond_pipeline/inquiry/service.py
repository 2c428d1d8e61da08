"""Customer inquiry lifecycle.

States:
    RECEIVED -> QUOTED -> DONE
    RECEIVED -> REJECTED
    RECEIVED -> CUSTOMER_REJECTED

A RECEIVED inquiry is answered automatically: the service's own
listener quotes it at the configured price, publishes it as QUOTED and
then immediately as DONE, all inside the call that delivered it.
Because that listener runs first, downstream listeners see QUOTED, then
DONE, and only then the original RECEIVED message.

Rejections change the stored state without notifying listeners.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from bond_pipeline.core.store import KeyedStore
from bond_pipeline.domain.inquiries import Inquiry
from bond_pipeline.domain.types import InquiryState

logger = logging.getLogger(__name__)


class InquiryService(KeyedStore[str, Inquiry]):
    """Inquiry store keyed by inquiry id."""

    def __init__(self, quote_price: Decimal = Decimal("100")) -> None:
        """Initialize service and register the auto-quote listener.

        Args:
            quote_price: Price quoted on every received inquiry
        """
        super().__init__(key=lambda inquiry: inquiry.inquiry_id, name="inquiry")
        self._quote_price = quote_price
        self.add_listener(self._auto_quote)

    @property
    def quote_price(self) -> Decimal:
        """Return the automatic quote price."""
        return self._quote_price

    def _auto_quote(self, inquiry: Inquiry) -> None:
        if inquiry.state == InquiryState.RECEIVED:
            self.send_quote(inquiry.inquiry_id, self._quote_price)

    def send_quote(self, inquiry_id: str, price: Decimal) -> Inquiry:
        """Quote an inquiry and complete it.

        A RECEIVED inquiry is priced, published as QUOTED and then
        published as DONE. Inquiries in any other state are left as they
        are.

        Args:
            inquiry_id: Inquiry to quote
            price: Quote price

        Returns:
            The inquiry as now stored

        Raises:
            NotFoundError: If the inquiry is unknown
        """
        inquiry = self.get(inquiry_id)
        if inquiry.state != InquiryState.RECEIVED:
            logger.debug(f"Inquiry {inquiry_id} is {inquiry.state.value}, not quoting")
            return inquiry

        quoted = self.on_message(inquiry.with_price(price).with_state(InquiryState.QUOTED))
        logger.debug(f"Inquiry {inquiry_id} quoted at {price}")
        done = self.on_message(quoted.with_state(InquiryState.DONE))
        logger.debug(f"Inquiry {inquiry_id} done")
        return done

    def reject(self, inquiry_id: str) -> Inquiry:
        """Reject an inquiry without notifying listeners.

        Raises:
            NotFoundError: If the inquiry is unknown
        """
        return self._set_state_silently(inquiry_id, InquiryState.REJECTED)

    def customer_reject(self, inquiry_id: str) -> Inquiry:
        """Record a customer rejection without notifying listeners.

        Raises:
            NotFoundError: If the inquiry is unknown
        """
        return self._set_state_silently(inquiry_id, InquiryState.CUSTOMER_REJECTED)

    def _set_state_silently(self, inquiry_id: str, state: InquiryState) -> Inquiry:
        inquiry = self.put(self.get(inquiry_id).with_state(state))
        logger.debug(f"Inquiry {inquiry_id} set to {state.value}")
        return inquiry
