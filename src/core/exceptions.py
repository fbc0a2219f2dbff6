"""
Custom Exceptions for the Risk Reward Calculator

Provides a hierarchy of exceptions for specific error handling.
The sizing engine itself never raises; these are used by the
configuration, form and batch layers around it.
"""


class CalculatorException(Exception):
    """Base exception for the calculator."""
    pass


class ConfigurationError(CalculatorException):
    """Configuration-related errors."""
    pass


class RiskValidationError(CalculatorException):
    """Trade inputs failed validation."""
    pass


class BatchInputError(CalculatorException):
    """Batch input file is missing or malformed."""
    pass
