"""
Risk Module - Position sizing and result formatting

Components:
- calculate_position_sizing: Pure sizing function (None when not computable)
- parse_reward_ratio: "risk:reward" string to reward multiple
- PositionSizer: Sizing with a configured balance and risk %
- format_*: Display helpers (rounding lives here, not in the engine)

Direction is inferred from the stop:
- Stop BELOW entry -> LONG, take profit ABOVE entry
- Stop ABOVE entry -> SHORT, take profit BELOW entry
"""

from .position_sizer import (
    TradeDirection,
    PositionSizingInput,
    PositionSizingResult,
    PositionSizer,
    calculate_position_sizing,
    parse_reward_ratio
)
from .formatting import (
    PLACEHOLDER,
    format_currency,
    format_quantity,
    format_price,
    format_ratio,
    format_fixed,
    format_percent,
    format_multiple,
    format_direction
)

__all__ = [
    'TradeDirection',
    'PositionSizingInput',
    'PositionSizingResult',
    'PositionSizer',
    'calculate_position_sizing',
    'parse_reward_ratio',
    'PLACEHOLDER',
    'format_currency',
    'format_quantity',
    'format_price',
    'format_ratio',
    'format_fixed',
    'format_percent',
    'format_multiple',
    'format_direction'
]
