"""
Unit tests for batch sizing over DataFrames.
"""

import numpy as np
import pandas as pd
import pytest

from src.calculator.batch import load_trades, size_trades, summarize
from src.core.exceptions import BatchInputError


pytestmark = pytest.mark.unit


@pytest.fixture
def setups():
    return pd.DataFrame(
        {
            "account_balance": [100000, 100000, 50000, 100000],
            "risk_percent": [2, 2, 1, 150],
            "entry_price": [100, 95, 250, 100],
            "stop_loss_price": [95, 100, 240, 95],
            "risk_reward": ["1:2", "1:2", np.nan, "1:2"],
        }
    )


class TestSizeTrades:

    def test_results(self, setups):
        sized = size_trades(setups)

        assert len(sized) == 4
        assert sized.loc[0, "quantity"] == pytest.approx(400)
        assert sized.loc[0, "take_profit"] == pytest.approx(110)
        assert sized.loc[0, "direction"] == "long"
        assert sized.loc[1, "direction"] == "short"
        assert sized.loc[1, "take_profit"] == pytest.approx(85)

    def test_missing_ratio_cell(self, setups):
        sized = size_trades(setups)

        assert sized.loc[2, "quantity"] == pytest.approx(50)
        assert np.isnan(sized.loc[2, "take_profit"])
        assert pd.isna(sized.loc[2, "error"])

    def test_invalid_row_keeps_going(self, setups):
        sized = size_trades(setups)

        assert sized.loc[3, "error"] == "Risk % must be between 0 and 100."
        assert np.isnan(sized.loc[3, "quantity"])

    def test_input_columns_preserved(self, setups):
        sized = size_trades(setups)
        assert list(sized.columns[:5]) == list(setups.columns)

    def test_without_ratio_column(self, setups):
        sized = size_trades(setups.drop(columns=["risk_reward"]).iloc[:2])

        assert sized["take_profit"].isna().all()
        assert sized["quantity"].tolist() == pytest.approx([400, 400])

    def test_missing_columns(self):
        with pytest.raises(BatchInputError, match="entry_price"):
            size_trades(pd.DataFrame({"account_balance": [1], "risk_percent": [1], "stop_loss_price": [1]}))

    def test_resizing_sized_frame(self, setups):
        """Sizing an already-sized frame replaces the result columns."""
        first = size_trades(setups)
        again = size_trades(first)

        assert not again.columns.duplicated().any()
        assert list(again.columns) == list(first.columns)
        assert again["quantity"].tolist()[:3] == pytest.approx([400, 400, 50])
        assert again.loc[3, "error"] == "Risk % must be between 0 and 100."

    def test_resizing_written_output(self, sample_csv, tmp_path):
        path = tmp_path / "sized.csv"
        size_trades(load_trades(sample_csv)).to_csv(path, index=False)

        again = size_trades(load_trades(path))

        assert not again.columns.duplicated().any()
        assert again.loc[0, "quantity"] == pytest.approx(400)
        assert again["error"].notna().sum() == 2


class TestSummarize:

    def test_totals(self, setups):
        stats = summarize(size_trades(setups))

        assert stats["total"] == 4
        assert stats["sized"] == 3
        assert stats["errors"] == 1
        assert stats["total_risk"] == pytest.approx(2000 + 2000 + 500)
        assert stats["total_potential_profit"] == pytest.approx(8000)
        assert stats["long_count"] == 2
        assert stats["short_count"] == 1


class TestLoadTrades:

    def test_fixture_file(self, sample_csv):
        frame = load_trades(sample_csv)

        assert len(frame) == 5
        assert frame.loc[0, "risk_reward"] == "1:2"
        assert frame.loc[2, "risk_reward"] == ""

    def test_fixture_sized(self, sample_csv):
        sized = size_trades(load_trades(sample_csv))

        assert sized["error"].notna().sum() == 2
        assert sized.loc[4, "error"] == "Entry price and stop loss price cannot be the same."

    def test_missing_file(self, tmp_path):
        with pytest.raises(BatchInputError):
            load_trades(tmp_path / "nope.csv")
