"""
Unit tests for configuration loading and validation.
"""

import pytest

from config.settings import Config, _deep_merge
from src.core.exceptions import ConfigurationError


pytestmark = pytest.mark.unit


class TestLoad:

    def test_defaults(self, clean_env):
        config = Config.load()

        assert config.calculator.account_balance == "100000"
        assert config.calculator.risk_reward == "1:2"
        assert config.presets.risk_rewards == ["1:2", "1:3", "1:5"]
        assert config.formatting.currency_symbol == "$"
        assert config.validate() == []

    def test_explicit_file_overrides(self, clean_env, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("calculator:\n  account_balance: 25000\n  risk_reward: ''\nformatting:\n  currency_symbol: '€'\n")

        config = Config.load(str(path))

        assert config.calculator.account_balance == "25000"
        assert config.calculator.risk_reward == ""
        assert config.calculator.risk_percent == "2"
        assert config.formatting.currency_symbol == "€"

    def test_missing_file(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError):
            Config.load(str(tmp_path / "missing.yaml"))

    def test_env_overrides(self, clean_env):
        clean_env.setenv("RRCALC_ACCOUNT_BALANCE", "5000")
        clean_env.setenv("RRCALC_RISK_PERCENT", "1.5")
        clean_env.setenv("RRCALC_LOG_LEVEL", "DEBUG")

        config = Config.load()

        assert config.calculator.account_balance == "5000"
        assert config.calculator.risk_percent == "1.5"
        assert config.logging.level == "DEBUG"


class TestValidate:

    def test_bad_values(self):
        config = Config()
        config.calculator.account_balance = "-1"
        config.calculator.risk_percent = "250"
        config.logging.level = "LOUD"

        errors = config.validate()

        assert len(errors) == 3
        assert any("account_balance" in e for e in errors)
        assert any("risk_percent" in e for e in errors)
        assert any("logging.level" in e for e in errors)

    def test_non_numeric_risk(self):
        config = Config()
        config.calculator.risk_percent = "two"
        assert any("not a number" in e for e in config.validate())

    def test_bad_presets(self):
        config = Config()
        config.presets.risk_percents = [1, 200]
        config.presets.account_balances = [0]

        errors = config.validate()
        assert any("presets.risk_percents" in e for e in errors)
        assert any("presets.account_balances" in e for e in errors)


def test_deep_merge():
    merged = _deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}
