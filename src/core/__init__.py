"""
Core module - Shared infrastructure for the calculator
"""
from .exceptions import (
    CalculatorException,
    ConfigurationError,
    RiskValidationError,
    BatchInputError
)

__all__ = [
    'CalculatorException',
    'ConfigurationError',
    'RiskValidationError',
    'BatchInputError'
]
