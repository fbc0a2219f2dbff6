"""
Position Sizer - Risk-based position sizing for LONG and SHORT setups

Calculates position size based on:
- Account balance
- Risk per trade (percent of balance)
- Distance between entry and stop loss
- Optional risk:reward multiple for the take profit

Direction is inferred from the stop:
- Stop BELOW entry -> LONG, take profit ABOVE entry
- Stop ABOVE entry -> SHORT, take profit BELOW entry

Quantity = Risk Amount / |Entry - Stop Loss|
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class TradeDirection(Enum):
    """Directional bias implied by the stop placement."""
    LONG = 'long'
    SHORT = 'short'


@dataclass(frozen=True)
class PositionSizingInput:
    """Trade parameters for a single sizing calculation."""
    account_balance: float
    risk_percent: float
    entry_price: float
    stop_loss_price: float
    reward_multiple: Optional[float] = None


@dataclass(frozen=True)
class PositionSizingResult:
    """
    Position sizing result.

    take_profit and potential_profit are both None when no reward
    multiple was requested.
    """
    quantity: float                   # Units to trade
    risk_amount: float                # Dollar amount at risk
    risk_per_unit: float              # |entry - stop|
    risk_percent: float               # Echoed input
    potential_profit: Optional[float]
    reward_multiple: Optional[float]
    take_profit: Optional[float]
    direction: TradeDirection

    @property
    def is_long(self) -> bool:
        return self.direction is TradeDirection.LONG

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary."""
        return {
            'quantity': self.quantity,
            'risk_amount': self.risk_amount,
            'risk_per_unit': self.risk_per_unit,
            'risk_percent': self.risk_percent,
            'potential_profit': self.potential_profit,
            'reward_multiple': self.reward_multiple,
            'take_profit': self.take_profit,
            'direction': self.direction.value
        }


def _is_finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def calculate_position_sizing(inputs: PositionSizingInput) -> Optional[PositionSizingResult]:
    """
    Size a position from validated trade parameters.

    Callers are expected to validate first; the checks here mirror that
    validation so the function is safe to reuse on its own.

    Args:
        inputs: Balance, risk %, entry, stop and optional reward multiple

    Returns:
        PositionSizingResult, or None when the inputs cannot be sized
    """
    balance = inputs.account_balance
    risk_percent = inputs.risk_percent
    entry = inputs.entry_price
    stop = inputs.stop_loss_price

    if not all(_is_finite(v) for v in (balance, risk_percent, entry, stop)):
        logger.debug("Not computable: non-numeric or non-finite input")
        return None

    if balance <= 0 or risk_percent <= 0 or risk_percent > 100:
        logger.debug(f"Not computable: balance={balance}, risk%={risk_percent}")
        return None

    if entry <= 0 or stop <= 0:
        logger.debug(f"Not computable: entry={entry}, stop={stop}")
        return None

    raw_risk_per_unit = entry - stop
    if raw_risk_per_unit == 0:
        logger.debug(f"Not computable: entry equals stop ({entry})")
        return None

    risk_per_unit = abs(raw_risk_per_unit)
    risk_amount = balance * (risk_percent / 100)
    if risk_amount <= 0 or risk_per_unit <= 0:
        return None

    quantity = risk_amount / risk_per_unit
    direction = TradeDirection.LONG if raw_risk_per_unit > 0 else TradeDirection.SHORT

    take_profit = None
    potential_profit = None
    reward_multiple = inputs.reward_multiple

    if _is_finite(reward_multiple) and reward_multiple > 0:
        if direction is TradeDirection.LONG:
            take_profit = entry + risk_per_unit * reward_multiple
        else:
            take_profit = entry - risk_per_unit * reward_multiple
        potential_profit = risk_amount * reward_multiple
    else:
        reward_multiple = None

    logger.debug(
        f"Sized {direction.value}: qty={quantity:.4f}, risk=${risk_amount:,.2f}, "
        f"risk/unit={risk_per_unit:.4f}, tp={take_profit}"
    )

    return PositionSizingResult(
        quantity=quantity,
        risk_amount=risk_amount,
        risk_per_unit=risk_per_unit,
        risk_percent=risk_percent,
        potential_profit=potential_profit,
        reward_multiple=reward_multiple,
        take_profit=take_profit,
        direction=direction
    )


def parse_reward_ratio(ratio: Optional[str]) -> Optional[float]:
    """
    Convert a "risk:reward" string into a reward multiple.

    "1:2" -> 2.0, "2:5" -> 2.5, "3:1" -> 0.333...
    Malformed input returns None; this never raises.
    """
    if not isinstance(ratio, str):
        return None

    trimmed = ratio.strip()
    if not trimmed:
        return None

    # Python-only digit separators
    if '_' in trimmed:
        return None

    parts = trimmed.split(':')
    if len(parts) != 2:
        return None

    try:
        risk_portion = float(parts[0])
        reward_portion = float(parts[1])
    except ValueError:
        return None

    if not math.isfinite(risk_portion) or not math.isfinite(reward_portion):
        return None

    if risk_portion <= 0 or reward_portion <= 0:
        return None

    return reward_portion / risk_portion


class PositionSizer:
    """
    Position sizing with a configured account balance and risk per trade.

    Formula: quantity = (account_balance * risk_percent / 100) / |entry - stop|

    Example:
        sizer = PositionSizer(account_balance=100000, risk_percent=2.0)
        result = sizer.calculate(entry_price=100, stop_loss=95, reward_multiple=2)
        print(f"Quantity: {result.quantity:,.2f} ({result.direction.value})")
    """

    def __init__(
        self,
        account_balance: float = 100000.0,
        risk_percent: float = 2.0
    ):
        """
        Initialize position sizer.

        Args:
            account_balance: Account balance in USD
            risk_percent: Percent of account to risk per trade
        """
        self.account_balance = account_balance
        self.risk_percent = risk_percent

    def calculate(
        self,
        entry_price: float,
        stop_loss: float,
        reward_multiple: Optional[float] = None
    ) -> Optional[PositionSizingResult]:
        """
        Calculate position size for a trade.

        Args:
            entry_price: Entry price
            stop_loss: Stop loss price (below entry for LONG, above for SHORT)
            reward_multiple: Optional reward units per unit of risk

        Returns:
            PositionSizingResult, or None when not computable
        """
        result = calculate_position_sizing(PositionSizingInput(
            account_balance=self.account_balance,
            risk_percent=self.risk_percent,
            entry_price=entry_price,
            stop_loss_price=stop_loss,
            reward_multiple=reward_multiple
        ))

        if result is None:
            logger.warning(
                f"Cannot size position: entry {entry_price}, stop {stop_loss}, "
                f"balance {self.account_balance}, risk {self.risk_percent}%"
            )
        return result

    def calculate_with_ratio(
        self,
        entry_price: float,
        stop_loss: float,
        ratio: Optional[str] = None
    ) -> Optional[PositionSizingResult]:
        """
        Calculate using a "risk:reward" string instead of a multiple.

        A blank or missing ratio means no take profit; any other text that
        does not parse targets 1:1.
        """
        if ratio is None or not str(ratio).strip():
            return self.calculate(entry_price, stop_loss)
        return self.calculate(entry_price, stop_loss, parse_reward_ratio(ratio) or 1.0)
