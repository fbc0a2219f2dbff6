"""
Calculator Module - Form handling around the sizing engine

Components:
- Form parsing and first-failure-wins validation
- CalculationOutcome: error message or result
- Report rows / text rendering
- Batch sizing over a DataFrame
"""

from .form import (
    CalculatorFormValues,
    ParsedForm,
    CalculationOutcome,
    Preset,
    build_presets,
    parse_number,
    parse_form,
    validate_form,
    evaluate_form,
    risk_helper_text
)
from .report import build_stat_rows, render_outcome
from .batch import load_trades, size_trades, summarize

__all__ = [
    'CalculatorFormValues',
    'ParsedForm',
    'CalculationOutcome',
    'Preset',
    'build_presets',
    'parse_number',
    'parse_form',
    'validate_form',
    'evaluate_form',
    'risk_helper_text',
    'build_stat_rows',
    'render_outcome',
    'load_trades',
    'size_trades',
    'summarize'
]
