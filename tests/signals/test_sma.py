"""Tests for SMA calculations"""

import dataclasses

import pytest
from stocks_app.signals.sma import WindowedSMA, n_window_sma


class TestWindowedSMA:
    """Test WindowedSMA signal"""

    def test_sma_window_three(self, sma_series):
        """Test averages of every 3-element window"""
        signal = WindowedSMA(window_size=3)
        assert signal.calculate(sma_series) == [3.9333333333333336, 5.433333333333334, 5.5]

    def test_sma_window_equals_length(self, sma_series):
        """Test a window covering the whole series yields one average"""
        assert WindowedSMA(window_size=5).calculate(sma_series) == [4.6]

    def test_sma_window_longer_than_series(self, sma_series):
        """Test a series shorter than the window yields an empty list, not None"""
        assert WindowedSMA(window_size=10).calculate(sma_series) == []

    def test_sma_empty_series(self):
        assert WindowedSMA(window_size=3).calculate([]) is None

    @pytest.mark.parametrize("window", [1, 0, -3])
    def test_sma_window_too_small(self, sma_series, window):
        """Test windows below two elements are rejected"""
        assert WindowedSMA(window_size=window).calculate(sma_series) is None

    @pytest.mark.parametrize("window", [2, 3, 4, 5, 6, 30])
    def test_sma_output_length(self, sma_series, window):
        result = n_window_sma(window, sma_series)
        assert len(result) == max(0, len(sma_series) - window + 1)

    def test_sma_window_two(self):
        assert n_window_sma(2, [1.0, 3.0, 5.0]) == [2.0, 4.0]

    def test_sma_sums_each_window_in_order(self):
        """Test each window is summed left to right without compensation"""
        series = [1e16, 1.0, -1e16]
        # Naive left-to-right addition loses the 1.0
        assert n_window_sma(3, series) == [0.0]

    def test_sma_signal_is_immutable(self):
        signal = WindowedSMA(window_size=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            signal.window_size = 5

    def test_sma_signal_reusable(self, sma_series):
        """Test repeated calls return identical results"""
        signal = WindowedSMA(window_size=2)
        assert signal.calculate(sma_series) == signal.calculate(sma_series)
