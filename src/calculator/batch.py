"""
Batch Sizing - Size many trade setups from a table

Each row goes through the same parse -> validate -> size path as the
interactive calculator, so a bad row yields an error message instead
of stopping the batch.

Input columns:
- account_balance, risk_percent, entry_price, stop_loss_price (required)
- risk_reward (optional "risk:reward" string)
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np
import pandas as pd

from ..core.exceptions import BatchInputError
from .form import CalculatorFormValues, evaluate_form

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ['account_balance', 'risk_percent', 'entry_price', 'stop_loss_price']
RESULT_COLUMNS = [
    'quantity', 'risk_amount', 'risk_per_unit', 'potential_profit',
    'reward_multiple', 'take_profit', 'direction', 'error'
]


def _cell_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, float) and np.isnan(value):
        return ''
    return str(value)


def load_trades(path: Union[str, Path]) -> pd.DataFrame:
    """
    Load trade setups from a CSV file.

    Args:
        path: CSV file path

    Returns:
        DataFrame with one setup per row
    """
    path = Path(path)
    if not path.exists():
        raise BatchInputError(f"Batch file not found: {path}")

    # Keep text as-is so the ratio column is never coerced to numbers
    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    logger.info(f"Loaded {len(frame)} trade setups from {path}")
    return frame


def size_trades(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Size every setup in a DataFrame.

    Args:
        frame: Setups with the required columns

    Returns:
        Copy of the input with result columns appended. Result columns
        already present (a previously sized file) are replaced.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in frame.columns]
    if missing:
        raise BatchInputError(f"Missing required columns: {', '.join(missing)}")

    stale = [c for c in RESULT_COLUMNS if c in frame.columns]
    if stale:
        logger.info(f"Replacing existing result columns: {', '.join(stale)}")
        frame = frame.drop(columns=stale)

    has_ratio = 'risk_reward' in frame.columns
    rows = []

    for _, row in frame.iterrows():
        values = CalculatorFormValues(
            account_balance=_cell_text(row['account_balance']),
            risk_percent=_cell_text(row['risk_percent']),
            entry_price=_cell_text(row['entry_price']),
            stop_loss_price=_cell_text(row['stop_loss_price']),
            risk_reward=_cell_text(row['risk_reward']) if has_ratio else ''
        )
        outcome = evaluate_form(values)

        if outcome.ok:
            data = outcome.result.to_dict()
            data.pop('risk_percent')
            data['error'] = None
        else:
            data = {col: np.nan for col in RESULT_COLUMNS}
            data['direction'] = None
            data['error'] = outcome.error
        rows.append(data)

    results = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=frame.index)
    for col in ('potential_profit', 'reward_multiple', 'take_profit'):
        results[col] = pd.to_numeric(results[col], errors='coerce')

    output = pd.concat([frame, results], axis=1)

    errors = int(output['error'].notna().sum())
    if errors:
        logger.warning(f"{errors} of {len(output)} setups could not be sized")
    return output


def summarize(sized: pd.DataFrame) -> Dict[str, float]:
    """
    Totals over a sized batch.

    Returns:
        Dictionary with row counts and summed risk / potential profit
    """
    ok = sized[sized['error'].isna()]
    return {
        'total': int(len(sized)),
        'sized': int(len(ok)),
        'errors': int(len(sized) - len(ok)),
        'total_risk': float(ok['risk_amount'].sum()) if len(ok) else 0.0,
        'total_potential_profit': float(np.nansum(ok['potential_profit'].to_numpy(dtype=float)))
        if len(ok) else 0.0,
        'long_count': int((ok['direction'] == 'long').sum()),
        'short_count': int((ok['direction'] == 'short').sum())
    }
