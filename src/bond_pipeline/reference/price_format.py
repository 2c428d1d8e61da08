"""Fractional price notation for US Treasuries.

Prices are quoted as ``<whole>-<32nds><z>`` where the optional last
character z is either ``+`` (half a 32nd) or a digit 0-7 giving eighths
of a 32nd (256ths):

    99-16   = 99 + 16/32
    99-16+  = 99 + 16/32 + 4/256
    99-163  = 99 + 16/32 + 3/256
"""

from __future__ import annotations

import re
from decimal import Decimal

from bond_pipeline.domain.errors import RecordParseError

THIRTY_SECOND = Decimal(1) / Decimal(32)
TWO_FIFTY_SIXTH = Decimal(1) / Decimal(256)

_PRICE_RE = re.compile(r"^(?P<whole>\d+)-(?P<ticks>[0-2]\d|3[01])(?P<eighths>[0-7+])?$")


def parse_price(text: str) -> Decimal:
    """Convert fractional notation to a decimal price.

    Args:
        text: Price such as "99-16+" or "100-001"

    Returns:
        Decimal price

    Raises:
        RecordParseError: If the text is not valid fractional notation
    """
    match = _PRICE_RE.match(text.strip())
    if match is None:
        raise RecordParseError(f"Invalid fractional price: {text!r}", line=text)

    whole = Decimal(match.group("whole"))
    ticks = Decimal(match.group("ticks"))
    eighths_str = match.group("eighths")
    if eighths_str is None:
        eighths = Decimal(0)
    elif eighths_str == "+":
        eighths = Decimal(4)
    else:
        eighths = Decimal(eighths_str)

    return whole + ticks * THIRTY_SECOND + eighths * TWO_FIFTY_SIXTH


def format_price(price: Decimal) -> str:
    """Convert a decimal price to fractional notation.

    Prices off the 1/256 grid are truncated to the grid.

    Args:
        price: Decimal price (non-negative)

    Returns:
        Price such as "99-16+"
    """
    if price < 0:
        raise ValueError("Price must not be negative")

    total_256ths = int(price * 256)
    whole, remainder = divmod(total_256ths, 256)
    ticks, eighths = divmod(remainder, 8)

    if eighths == 0:
        suffix = ""
    elif eighths == 4:
        suffix = "+"
    else:
        suffix = str(eighths)

    return f"{whole}-{ticks:02d}{suffix}"
