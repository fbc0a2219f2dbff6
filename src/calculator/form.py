"""
Calculator Form - Parsing and validation in front of the sizing engine

Raw text fields are parsed to numbers, validated one check at a time
(first failure wins), and only then passed to the engine. The engine
keeps its own guard, so a None result is still reported.
"""

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

from ..core.exceptions import RiskValidationError
from ..risk.position_sizer import (
    PositionSizingInput,
    PositionSizingResult,
    calculate_position_sizing,
    parse_reward_ratio
)
from ..risk.formatting import format_fixed

logger = logging.getLogger(__name__)


# Validation messages, in check order
BALANCE_ERROR = 'Account balance must be a positive number.'
RISK_PERCENT_ERROR = 'Risk % must be between 0 and 100.'
ENTRY_ERROR = 'Entry price must be a positive number.'
STOP_LOSS_ERROR = 'Stop loss price must be a positive number.'
SAME_PRICE_ERROR = 'Entry price and stop loss price cannot be the same.'
RATIO_ERROR = 'Risk/reward ratio must be positive when provided.'
CALCULATION_ERROR = 'Unable to calculate risk/reward with the provided inputs.'

FIELD_KEYS = ('account_balance', 'risk_percent', 'entry_price', 'stop_loss_price', 'risk_reward')


@dataclass(frozen=True)
class CalculatorFormValues:
    """Raw text values as typed by the user."""
    account_balance: str = '100000'
    risk_percent: str = '2'
    entry_price: str = '100'
    stop_loss_price: str = '95'
    risk_reward: str = '1:2'

    def update(self, key: str, value: str) -> 'CalculatorFormValues':
        """Return a copy with one field changed."""
        if key not in FIELD_KEYS:
            raise KeyError(f"Unknown form field: {key}")
        return replace(self, **{key: value})

    def to_dict(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in FIELD_KEYS}


@dataclass(frozen=True)
class ParsedForm:
    """Numeric form values; None where the text did not parse."""
    account_balance: Optional[float]
    risk_percent: Optional[float]
    entry_price: Optional[float]
    stop_loss_price: Optional[float]
    reward_multiple: Optional[float]
    ratio_provided: bool = False


@dataclass(frozen=True)
class CalculationOutcome:
    """Either a validation/calculation error message or a result."""
    error: Optional[str] = None
    result: Optional[PositionSizingResult] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None

    def raise_for_error(self) -> PositionSizingResult:
        """Return the result or raise RiskValidationError with the message."""
        if not self.ok:
            raise RiskValidationError(self.error or CALCULATION_ERROR)
        return self.result


@dataclass(frozen=True)
class Preset:
    """Quick-pick value for a form field."""
    value: str
    label: str


def _number_text(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def _amount_label(value: float) -> str:
    if value >= 1_000_000:
        return f"{value / 1_000_000:g}M"
    return f"{value / 1000:.0f}K"


def build_presets(
    balances: List[float],
    risk_percents: List[float],
    ratios: List[str]
) -> Dict[str, List[Preset]]:
    """Build the quick-pick buttons for balance, risk % and ratio."""
    return {
        'account_balance': [Preset(_number_text(v), _amount_label(v)) for v in balances],
        'risk_percent': [Preset(_number_text(v), f"{_number_text(v)}%") for v in risk_percents],
        'risk_reward': [Preset(r, r) for r in ratios],
    }


def parse_number(text: Any) -> Optional[float]:
    """
    Parse a text field; empty, malformed and non-finite become None.

    Digit separators ("1_000", "1,000") are rejected rather than read
    as a different number.
    """
    if text is None:
        return None
    text = str(text).strip()
    if '_' in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_form(values: CalculatorFormValues) -> ParsedForm:
    """
    Convert raw form text to numbers.

    An empty ratio means no take-profit was requested. A non-empty ratio
    that does not parse falls back to 1:1.
    """
    ratio_text = (values.risk_reward or '').strip()
    ratio_provided = bool(ratio_text)
    reward_multiple = (parse_reward_ratio(ratio_text) or 1.0) if ratio_provided else None

    return ParsedForm(
        account_balance=parse_number(values.account_balance),
        risk_percent=parse_number(values.risk_percent),
        entry_price=parse_number(values.entry_price),
        stop_loss_price=parse_number(values.stop_loss_price),
        reward_multiple=reward_multiple,
        ratio_provided=ratio_provided
    )


def validate_form(parsed: ParsedForm) -> Optional[str]:
    """Return the first failing check's message, or None if valid."""
    if parsed.account_balance is None or parsed.account_balance <= 0:
        return BALANCE_ERROR

    if parsed.risk_percent is None or parsed.risk_percent <= 0 or parsed.risk_percent > 100:
        return RISK_PERCENT_ERROR

    if parsed.entry_price is None or parsed.entry_price <= 0:
        return ENTRY_ERROR

    if parsed.stop_loss_price is None or parsed.stop_loss_price <= 0:
        return STOP_LOSS_ERROR

    if parsed.entry_price == parsed.stop_loss_price:
        return SAME_PRICE_ERROR

    if parsed.ratio_provided:
        multiple = parsed.reward_multiple
        if multiple is None or not math.isfinite(multiple) or multiple <= 0:
            return RATIO_ERROR

    return None


def risk_helper_text(values: CalculatorFormValues) -> Optional[str]:
    """Hint shown under the risk % field, e.g. "Risking ~2.00% of account balance"."""
    risk = parse_number(values.risk_percent)
    if risk is None:
        return None
    return f"Risking ~{format_fixed(risk)}% of account balance"


def evaluate_form(values: CalculatorFormValues) -> CalculationOutcome:
    """Parse, validate and size. Called again on every field change."""
    parsed = parse_form(values)

    error = validate_form(parsed)
    if error:
        logger.debug(f"Validation failed: {error}")
        return CalculationOutcome(error=error)

    result = calculate_position_sizing(PositionSizingInput(
        account_balance=parsed.account_balance,
        risk_percent=parsed.risk_percent,
        entry_price=parsed.entry_price,
        stop_loss_price=parsed.stop_loss_price,
        reward_multiple=parsed.reward_multiple
    ))

    if result is None:
        logger.warning(f"Engine could not size validated inputs: {values.to_dict()}")
        return CalculationOutcome(error=CALCULATION_ERROR)

    return CalculationOutcome(result=result)
