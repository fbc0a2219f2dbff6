"""
Configuration module for the Risk Reward Calculator.

Centralized configuration with priority:
1. Environment variables (RRCALC_*)
2. Explicit config file
3. config.local.yaml - local overrides
4. defaults.yaml - all default values
"""
from .settings import (
    Config,
    get_config,
    CalculatorConfig,
    PresetsConfig,
    FormattingConfig,
    LoggingConfig,
)
from .logging_config import setup_logging, setup_logging_from_config, get_logger

__all__ = [
    'Config',
    'get_config',
    'CalculatorConfig',
    'PresetsConfig',
    'FormattingConfig',
    'LoggingConfig',
    'setup_logging',
    'setup_logging_from_config',
    'get_logger'
]
