"""
Result Report - Labelled display rows for a sizing outcome

Display only: values shown here are rounded and must not be fed back
into any calculation.
"""

from typing import List, Tuple

from ..risk.formatting import (
    PLACEHOLDER,
    format_currency,
    format_direction,
    format_multiple,
    format_percent,
    format_price,
    format_quantity,
    format_ratio
)
from ..risk.position_sizer import PositionSizingResult
from .form import CalculationOutcome


def build_stat_rows(result: PositionSizingResult, currency_symbol: str = '$') -> List[Tuple[str, str]]:
    """
    Build (label, value) rows for a result.

    Args:
        result: Engine result
        currency_symbol: Prefix for money and price values

    Returns:
        Ordered list of display rows
    """
    take_profit = (
        f"{currency_symbol}{format_price(result.take_profit)}"
        if result.take_profit else PLACEHOLDER
    )

    return [
        ('Quantity to Trade', f"{format_quantity(result.quantity)} units"),
        ('Risk Amount', format_currency(result.risk_amount, currency_symbol)),
        ('Risk Per Unit', f"{currency_symbol}{format_price(result.risk_per_unit)}"),
        ('Risk %', format_percent(result.risk_percent)),
        ('Potential Profit', format_currency(result.potential_profit, currency_symbol)),
        ('Take Profit', take_profit),
        ('Risk/Reward', format_ratio(result.reward_multiple) or PLACEHOLDER),
        ('Directional Bias', format_direction(result.direction)),
        ('Reward Multiple', format_multiple(result.reward_multiple)),
    ]


def render_outcome(outcome: CalculationOutcome, currency_symbol: str = '$') -> str:
    """Render an outcome as a plain-text block."""
    if outcome.error:
        return f"Error: {outcome.error}"
    if outcome.result is None:
        return ''

    rows = build_stat_rows(outcome.result, currency_symbol)
    width = max(len(label) for label, _ in rows) + 1
    return '\n'.join(f"{label + ':':<{width}} {value}" for label, value in rows)
