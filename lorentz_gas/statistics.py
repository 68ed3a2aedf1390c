#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Residence and Pressure Statistics
================================================================================

Project:        Lorentz Gas Lattice Simulator
Module:         statistics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

The arena is cut into `n_bins` vertical slices of equal width. Each step, an
electron whose x coordinate starts and ends inside the same slice contributes
dt / N of dwell time to that slice. From these sums:

    probability = time_inside / time_full          (distinguished bin)
    density[b]  = time_inside_all[b] / Σ time_inside_all
    pressure    = impulse_sum / time

Samples are appended to fixed-capacity histories at most once per
`measure_period` of simulated time; a full history stops growing.
"""

import numpy as np
from typing import Dict


# Simulated milliseconds between history samples
MEASURE_PERIOD = 100.0

# Capacity of every history series
MAX_HISTORY = 10000

# Milliseconds per unit on the time axis of the histories
TIME_SCALE = 100.0

# Latest samples shown by the history plot
HISTORY_WINDOW = 200


class HistoryBuffer:
    """Append-only series with a fixed capacity."""

    def __init__(self, capacity: int = MAX_HISTORY):
        self._data = np.zeros(capacity)
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._data.shape[0]

    @property
    def is_full(self) -> bool:
        return self._size >= self.capacity

    def append(self, value: float) -> bool:
        """Store `value` unless full. Returns whether it was stored."""
        if self.is_full:
            return False
        self._data[self._size] = value
        self._size += 1
        return True

    def values(self) -> np.ndarray:
        return self._data[:self._size].copy()

    def clear(self) -> None:
        self._size = 0


class StatisticsAccumulator:
    """
    Dwell time, wall impulse and sampled histories of a running simulation.
    """

    def __init__(
        self,
        width: float,
        n_bins: int = 10,
        bin_index: int = 0,
        measure_period: float = MEASURE_PERIOD,
        max_history: int = MAX_HISTORY
    ):
        self.width = width
        self.bin_index = bin_index
        self.measure_period = measure_period

        self._time = HistoryBuffer(max_history)
        self._prob = HistoryBuffer(max_history)
        self._impulses = HistoryBuffer(max_history)

        self.set_bins_count(n_bins)
        self.clear()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_bins_count(self, n_bins: int) -> None:
        """
        Repartition the arena into `n_bins` slices.

        Per-bin sums restart from zero; global time and impulse continue.
        """
        self.n_bins = int(n_bins)
        self.bin_width = self.width / self.n_bins
        self.time_inside_all = np.zeros(self.n_bins)
        self.density = np.zeros(self.n_bins)

    def set_bin_index(self, bin_index: int) -> None:
        self.bin_index = int(bin_index)

    def set_width(self, width: float) -> None:
        self.width = width
        self.bin_width = self.width / self.n_bins

    def clear(self) -> None:
        """Reset every accumulator and history."""
        self.time_full = 0.0
        self.time_inside = 0.0
        self.impulse_sum = 0.0
        self.last_sample_time = 0.0
        self.time_inside_all = np.zeros(self.n_bins)
        self.density = np.zeros(self.n_bins)

        self._time.clear()
        self._prob.clear()
        self._impulses.clear()

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def bin_of(self, x: np.ndarray) -> np.ndarray:
        """Bin index of each x coordinate (may fall outside [0, n_bins))."""
        return np.floor(np.asarray(x) / self.bin_width).astype(np.int64)

    def record_dwell(
        self,
        old_x: np.ndarray,
        new_x: np.ndarray,
        weight: float
    ) -> None:
        """
        Credit `weight` to each bin that holds both ends of a step.

        Args:
            old_x: x coordinates before the step
            new_x: x coordinates after the step
            weight: dt / number of electrons
        """
        old_bins = self.bin_of(old_x)
        new_bins = self.bin_of(new_x)

        stayed = (old_bins == new_bins) & (old_bins >= 0) & (old_bins < self.n_bins)
        bins = old_bins[stayed]

        self.time_inside += weight * np.count_nonzero(bins == self.bin_index)
        np.add.at(self.time_inside_all, bins, weight)

    def add_impulse(self, impulse: float) -> None:
        self.impulse_sum += impulse

    def advance(self, elapsed: float) -> None:
        self.time_full += elapsed

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    @property
    def is_full(self) -> bool:
        return self._time.is_full

    def should_sample(self) -> bool:
        if self.is_full or self.time_full <= 0:
            return False
        if len(self._time) == 0:
            return True
        return self.last_sample_time + self.measure_period <= self.time_full

    def maybe_sample(self) -> bool:
        """
        Append one sample to the histories if a period has elapsed.

        Returns:
            True if a sample was taken
        """
        if not self.should_sample():
            return False

        self._time.append(self.time_full / TIME_SCALE)
        self._prob.append(self.time_inside / self.time_full)
        self._impulses.append(self.impulse_sum)
        self.last_sample_time = self.time_full

        density = self.time_inside_all / self.time_full
        total = density.sum()
        if total > 0:
            density = density / total
        self.density = density

        return True

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def time(self) -> np.ndarray:
        return self._time.values()

    @property
    def probability(self) -> np.ndarray:
        return self._prob.values()

    @property
    def impulses(self) -> np.ndarray:
        return self._impulses.values()

    def pressure(self) -> np.ndarray:
        """Cumulative wall impulse per unit of time for each sample."""
        return self.impulses / self.time

    def recent(self, limit: int = HISTORY_WINDOW) -> Dict[str, np.ndarray]:
        """
        Latest `limit` samples of every series.

        Returns:
            Dict with 'time', 'probability', 'impulses' and 'pressure'
        """
        return {
            'time': self.time[-limit:],
            'probability': self.probability[-limit:],
            'impulses': self.impulses[-limit:],
            'pressure': self.pressure()[-limit:],
        }
