"""
Central Configuration System for the Risk Reward Calculator

Configuration is loaded from multiple sources with the following priority:
1. Environment variables (highest)
2. Explicit config file passed to Config.load()
3. config.local.yaml (local overrides, git-ignored)
4. defaults.yaml (all default values, version controlled)
5. Dataclass defaults (lowest - fallback only)

Usage:
    config = Config.load()
    print(config.calculator.risk_percent)  # '2'
"""

from dataclasses import dataclass, field
from typing import List, Optional
import os
import yaml
from pathlib import Path
import logging

from src.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Project root directory
CONFIG_DIR = Path(__file__).parent
PROJECT_ROOT = CONFIG_DIR.parent

ENV_PREFIX = 'RRCALC_'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _load_yaml(path: Path) -> dict:
    """Load YAML file if it exists."""
    if path.exists():
        with open(path, 'r') as f:
            return yaml.safe_load(f) or {}
    return {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, override takes precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _is_positive_number(text: str) -> bool:
    try:
        return float(text) > 0
    except (TypeError, ValueError):
        return False


# =============================================================================
# CALCULATOR CONFIGURATION
# =============================================================================

@dataclass
class CalculatorConfig:
    """Initial form values (kept as text, like the form fields)"""
    account_balance: str = '100000'
    risk_percent: str = '2'
    entry_price: str = '100'
    stop_loss_price: str = '95'
    risk_reward: str = '1:2'


@dataclass
class PresetsConfig:
    """Quick-pick values offered next to the form fields"""
    account_balances: List[float] = field(
        default_factory=lambda: [100000, 300000, 500000, 1000000])
    risk_percents: List[float] = field(
        default_factory=lambda: [0.5, 1, 2, 3, 5])
    risk_rewards: List[str] = field(
        default_factory=lambda: ['1:2', '1:3', '1:5'])


@dataclass
class FormattingConfig:
    """Display settings"""
    currency_symbol: str = '$'


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = 'INFO'
    log_file: Optional[str] = None
    max_bytes: int = 10_000_000
    backup_count: int = 5
    format: str = '%(asctime)s | %(levelname)-8s | %(name)-25s | %(message)s'


# =============================================================================
# MASTER CONFIG
# =============================================================================

@dataclass
class Config:
    """
    Master Configuration Container

    Load priority:
    1. Environment variables (RRCALC_*)
    2. Explicit config file
    3. config.local.yaml - local overrides
    4. defaults.yaml - all default values
    """
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)
    presets: PresetsConfig = field(default_factory=PresetsConfig)
    formatting: FormattingConfig = field(default_factory=FormattingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> 'Config':
        """
        Load configuration from YAML files and environment.

        Args:
            config_path: Optional extra YAML file applied after the local overrides

        Raises:
            ConfigurationError: If config_path does not exist or is not a mapping
        """
        defaults = _load_yaml(CONFIG_DIR / 'defaults.yaml')
        local = _load_yaml(CONFIG_DIR / 'config.local.yaml')

        # Merge: defaults <- local overrides
        yaml_config = _deep_merge(defaults, local)

        if config_path:
            path = Path(config_path)
            if not path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            extra = _load_yaml(path)
            if not isinstance(extra, dict):
                raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
            yaml_config = _deep_merge(yaml_config, extra)
            logger.debug(f"Applied config overrides from {config_path}")

        config = cls()
        config = cls._apply_yaml_config(config, yaml_config)
        config = cls._apply_env_overrides(config)

        return config

    @classmethod
    def _apply_yaml_config(cls, config: 'Config', yaml_config: dict) -> 'Config':
        """Apply YAML configuration to dataclasses."""
        for section in ('calculator', 'presets', 'formatting', 'logging'):
            target = getattr(config, section)
            for k, v in (yaml_config.get(section) or {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning(f"Ignoring unknown config key: {section}.{k}")

        # Form values are text fields
        for k in ('account_balance', 'risk_percent', 'entry_price', 'stop_loss_price', 'risk_reward'):
            value = getattr(config.calculator, k)
            setattr(config.calculator, k, '' if value is None else str(value))

        return config

    @classmethod
    def _apply_env_overrides(cls, config: 'Config') -> 'Config':
        """Apply environment variable overrides."""
        level = os.getenv(f'{ENV_PREFIX}LOG_LEVEL', '')
        if level:
            config.logging.level = level

        balance = os.getenv(f'{ENV_PREFIX}ACCOUNT_BALANCE', '')
        if balance:
            config.calculator.account_balance = balance

        risk = os.getenv(f'{ENV_PREFIX}RISK_PERCENT', '')
        if risk:
            config.calculator.risk_percent = risk

        return config

    def to_dict(self) -> dict:
        """Convert config to dictionary (for logging/debugging)."""
        from dataclasses import asdict
        return asdict(self)

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not _is_positive_number(self.calculator.account_balance):
            errors.append(f"calculator.account_balance must be positive, got {self.calculator.account_balance!r}")

        try:
            risk = float(self.calculator.risk_percent)
            if not 0 < risk <= 100:
                errors.append(f"calculator.risk_percent must be 0-100, got {risk}")
        except (TypeError, ValueError):
            errors.append(f"calculator.risk_percent is not a number: {self.calculator.risk_percent!r}")

        if any(not _is_positive_number(v) for v in self.presets.account_balances):
            errors.append("presets.account_balances must all be positive")

        if any(not _is_positive_number(v) or float(v) > 100 for v in self.presets.risk_percents):
            errors.append("presets.risk_percents must all be between 0 and 100")

        if str(self.logging.level).upper() not in LOG_LEVELS:
            errors.append(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {self.logging.level}")

        return errors


# Convenience function
def get_config() -> Config:
    """Get the default configuration."""
    return Config.load()
