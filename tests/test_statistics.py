#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Statistics Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
License:        MIT License
================================================================================
"""

import numpy as np
import pytest
from lorentz_gas.statistics import (
    HistoryBuffer,
    StatisticsAccumulator,
    MEASURE_PERIOD,
    TIME_SCALE
)


class TestHistoryBuffer:
    """Tests for the fixed-capacity series."""

    def test_append_until_full(self):
        buf = HistoryBuffer(3)
        assert all(buf.append(v) for v in (1.0, 2.0, 3.0))
        assert buf.is_full
        assert not buf.append(4.0)
        assert np.array_equal(buf.values(), [1.0, 2.0, 3.0])

    def test_clear(self):
        buf = HistoryBuffer(2)
        buf.append(1.0)
        buf.clear()
        assert len(buf) == 0
        assert buf.capacity == 2


class TestDwell:
    """Tests for dwell time accumulation."""

    def test_same_bin_credited(self):
        stats = StatisticsAccumulator(width=100, n_bins=10, bin_index=2)
        stats.record_dwell(np.array([21.0, 55.0]), np.array([29.0, 52.0]), 0.5)

        assert stats.time_inside == pytest.approx(0.5)
        assert stats.time_inside_all[2] == pytest.approx(0.5)
        assert stats.time_inside_all[5] == pytest.approx(0.5)
        assert stats.time_inside_all.sum() == pytest.approx(1.0)

    def test_crossing_not_credited(self):
        stats = StatisticsAccumulator(width=100, n_bins=10, bin_index=2)
        stats.record_dwell(np.array([29.0]), np.array([31.0]), 1.0)

        assert stats.time_inside == 0.0
        assert stats.time_inside_all.sum() == 0.0

    def test_outside_arena_ignored(self):
        stats = StatisticsAccumulator(width=100, n_bins=10)
        stats.record_dwell(np.array([-1.0, 101.0]), np.array([-2.0, 105.0]), 1.0)
        assert stats.time_inside_all.sum() == 0.0

    def test_repeated_bin_accumulates(self):
        stats = StatisticsAccumulator(width=100, n_bins=4, bin_index=1)
        stats.record_dwell(np.array([30.0, 31.0, 32.0]), np.array([30.0, 31.0, 32.0]), 1.0)
        assert stats.time_inside_all[1] == pytest.approx(3.0)
        assert stats.time_inside == pytest.approx(3.0)


class TestSampling:
    """Tests for periodic sampling."""

    def test_no_sample_before_time(self):
        stats = StatisticsAccumulator(width=100)
        assert not stats.maybe_sample()
        assert len(stats.time) == 0

    def test_first_sample(self):
        stats = StatisticsAccumulator(width=100, n_bins=2, bin_index=0)
        stats.record_dwell(np.array([10.0]), np.array([12.0]), 20.0)
        stats.add_impulse(3.0)
        stats.advance(20.0)

        assert stats.maybe_sample()
        assert stats.time[0] == pytest.approx(20.0 / TIME_SCALE)
        assert stats.probability[0] == pytest.approx(1.0)
        assert stats.impulses[0] == pytest.approx(3.0)
        assert np.allclose(stats.density, [1.0, 0.0])

    def test_period_respected(self):
        stats = StatisticsAccumulator(width=100)
        samples = 0
        for _ in range(50):
            stats.advance(MEASURE_PERIOD / 5)
            samples += stats.maybe_sample()

        # First sample at the first step, then one per period
        assert samples == 10
        assert len(stats.time) == len(stats.probability) == len(stats.impulses)

    def test_bounded_history(self):
        stats = StatisticsAccumulator(width=100, max_history=5)
        for _ in range(20):
            stats.advance(MEASURE_PERIOD)
            stats.maybe_sample()

        assert stats.is_full
        assert len(stats.time) == 5
        assert len(stats.probability) == 5
        assert len(stats.impulses) == 5
        # Oldest samples are kept
        assert stats.time[0] == pytest.approx(MEASURE_PERIOD / TIME_SCALE)

    def test_density_normalized(self):
        stats = StatisticsAccumulator(width=100, n_bins=4)
        stats.record_dwell(np.array([10.0, 60.0, 61.0]), np.array([11.0, 62.0, 63.0]), 5.0)
        stats.advance(50.0)
        stats.maybe_sample()

        assert stats.density.sum() == pytest.approx(1.0)
        assert stats.density[2] == pytest.approx(2.0 / 3.0)

    def test_pressure(self):
        stats = StatisticsAccumulator(width=100)
        stats.add_impulse(10.0)
        stats.advance(500.0)
        stats.maybe_sample()

        assert stats.pressure()[0] == pytest.approx(10.0 / (500.0 / TIME_SCALE))

    def test_recent_window(self):
        stats = StatisticsAccumulator(width=100)
        for _ in range(30):
            stats.advance(MEASURE_PERIOD)
            stats.maybe_sample()

        recent = stats.recent(10)
        assert len(recent['time']) == 10
        assert recent['time'][-1] == stats.time[-1]
        assert len(recent['pressure']) == 10


class TestReset:
    """Tests for clearing and repartitioning."""

    def test_clear(self):
        stats = StatisticsAccumulator(width=100, n_bins=4)
        stats.record_dwell(np.array([10.0]), np.array([11.0]), 1.0)
        stats.add_impulse(2.0)
        stats.advance(200.0)
        stats.maybe_sample()

        stats.clear()

        assert stats.time_full == 0.0
        assert stats.impulse_sum == 0.0
        assert len(stats.time) == 0
        assert np.array_equal(stats.time_inside_all, np.zeros(4))

    def test_set_bins_count_keeps_global_sums(self):
        stats = StatisticsAccumulator(width=100, n_bins=4)
        stats.record_dwell(np.array([10.0]), np.array([11.0]), 1.0)
        stats.add_impulse(2.0)
        stats.advance(200.0)

        stats.set_bins_count(5)

        assert stats.bin_width == pytest.approx(20.0)
        assert stats.time_inside_all.shape == (5,)
        assert stats.time_inside_all.sum() == 0.0
        assert stats.time_full == 200.0
        assert stats.impulse_sum == 2.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
