"""
Display formatting for position sizing results.

Rounding happens here only; engine values stay exact.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

from .position_sizer import TradeDirection

PLACEHOLDER = '—'

# Wide enough to quantize any finite float to cents
_CENTS_CONTEXT = Context(prec=400)


def _finite(value) -> bool:
    return value is not None and math.isfinite(value)


def _round_half_up(value: float, digits: int = 2) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _round_cents(value: float) -> Decimal:
    # Ties on the exact binary value go away from zero
    return Decimal(value).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP, context=_CENTS_CONTEXT)


def _trim_zeros(text: str) -> str:
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def format_currency(value: Optional[float], symbol: str = '$') -> str:
    """USD-style currency string, e.g. $2,000.00 or -$12.50."""
    if not _finite(value):
        return PLACEHOLDER

    amount = f"{_round_cents(abs(value)):,.2f}"
    sign = '-' if value < 0 and amount.strip('0.,') else ''
    return f"{sign}{symbol}{amount}"


def format_fixed(value: float) -> str:
    """Exactly 2 decimals with ties rounded up, e.g. 2.00 or 0.13."""
    return f"{_round_cents(value):.2f}"


def format_quantity(value: Optional[float]) -> str:
    """Round to 2 decimals, group thousands, drop trailing zeros."""
    if not _finite(value):
        return PLACEHOLDER

    return _trim_zeros(f"{_round_cents(value):,.2f}")


def format_price(value: Optional[float]) -> str:
    """Round half up to 2 decimals, always showing 2 decimals."""
    if not _finite(value):
        return PLACEHOLDER

    return f"{_round_half_up(value):.2f}"


def format_ratio(multiple: Optional[float]) -> Optional[str]:
    """Reward multiple as a 1:N label, or None when unavailable."""
    if not _finite(multiple):
        return None

    normalized = _round_half_up(multiple)
    return f"1:{_trim_zeros(f'{normalized:.2f}')}"


def format_percent(value: Optional[float]) -> str:
    if not _finite(value):
        return PLACEHOLDER
    return f"{format_fixed(value)}%"


def format_multiple(multiple: Optional[float]) -> str:
    # 0 and None both mean "not requested"
    if not _finite(multiple) or not multiple:
        return PLACEHOLDER
    return f"{format_fixed(multiple)}x"


def format_direction(direction: TradeDirection) -> str:
    if direction is TradeDirection.LONG:
        return 'Long (bullish)'
    return 'Short (bearish)'
