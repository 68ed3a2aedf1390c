#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lorentz Gas Simulation Engine
================================================================================

Project:        Lorentz Gas Lattice Simulator
Module:         simulation.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

Core stepping engine. Each step moves every electron a distance
speed * elapsed / 1000 along its direction, reflects it off the walls and
then off the nearest atom, and (outside of speculative stepping) feeds the
dwell time and wall impulse into the statistics.
"""

import math
import numpy as np
from typing import Optional, Tuple
from dataclasses import dataclass
from enum import Enum
import time

from .lattice import LatticeGeometry
from .particles import ParticleStore
from .collisions import advance_particles
from .statistics import StatisticsAccumulator, MEASURE_PERIOD, MAX_HISTORY


class StepMode(Enum):
    """Whether a step counts towards the statistics."""
    NORMAL = "normal"
    SPECULATIVE = "speculative"


@dataclass
class SimulationState:
    """Read-only snapshot of the simulation after a step."""
    positions: np.ndarray
    directions: np.ndarray
    time: float = 0.0
    step: int = 0
    impulse_sum: float = 0.0

    @property
    def n_particles(self) -> int:
        return self.positions.shape[0]


@dataclass
class SimulationConfig:
    """Configuration for the Lorentz gas simulation."""
    # Arena
    width: int = 400
    height: int = 400

    # Lattice
    side: int = 25
    atom_r: float = 5.0

    # Electrons
    electron_r: float = 2.0
    speed: float = 100.0        # Distance per second of simulated time
    default_direction: Optional[float] = None   # None = random

    # Statistics
    n_bins: int = 10
    bin_index: int = 0
    measure_period: float = MEASURE_PERIOD      # Milliseconds
    max_history: int = MAX_HISTORY

    seed: Optional[int] = None

    @property
    def reach(self) -> float:
        """Center distance at which an electron touches an atom."""
        return self.atom_r + self.electron_r


class LorentzGasSimulation:
    """
    Electrons bouncing among a square lattice of atoms in a closed box.

    Owns the configuration, lattice, particle store and statistics. All
    setters take effect on the next step.
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()
        self.rng = np.random.default_rng(self.config.seed)

        self.lattice = self._build_lattice()
        self.particles = ParticleStore()
        self.statistics = StatisticsAccumulator(
            width=self.config.width,
            n_bins=self.config.n_bins,
            bin_index=self.config.bin_index,
            measure_period=self.config.measure_period,
            max_history=self.config.max_history
        )

        self.paint_trace_only = False
        self.show_bins = False
        self._step = 0

        # Performance tracking
        self.steps_per_second = 0.0
        self._last_time = time.time()
        self._step_count = 0

    def _build_lattice(self) -> LatticeGeometry:
        return LatticeGeometry.from_dimensions(
            self.config.width, self.config.height,
            self.config.side, self.config.atom_r
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_dimensions(self, width: int, height: int) -> None:
        self.config.width = width
        self.config.height = height
        self.lattice = self._build_lattice()
        self.statistics.set_width(width)

    def set_side(self, side: int) -> None:
        self.config.side = side
        self.lattice = self._build_lattice()

    def set_atom_r(self, atom_r: float) -> None:
        self.config.atom_r = atom_r
        self.lattice.atom_r = atom_r

    def set_electron_r(self, electron_r: float) -> None:
        self.config.electron_r = electron_r

    def set_speed(self, speed: float) -> None:
        self.config.speed = speed

    def set_bins_count(self, n_bins: int) -> None:
        self.config.n_bins = n_bins
        self.statistics.set_bins_count(n_bins)

    def set_bin_index(self, bin_index: int) -> None:
        self.config.bin_index = bin_index
        self.statistics.set_bin_index(bin_index)

    def set_paint_trace_only(self, enabled: bool) -> None:
        """Make plain `step()` calls speculative until switched off."""
        self.paint_trace_only = enabled

    def set_default_direction(self, angle: Optional[float]) -> None:
        """Direction for electrons added without one; None means random."""
        self.config.default_direction = angle

    def set_show_bins(self, enabled: bool) -> None:
        self.show_bins = enabled

    # ------------------------------------------------------------------
    # Particles
    # ------------------------------------------------------------------

    @property
    def count(self) -> int:
        return len(self.particles)

    @property
    def positions(self) -> np.ndarray:
        return self.particles.positions.copy()

    @property
    def directions(self) -> np.ndarray:
        return self.particles.directions.copy()

    def default_angle(self) -> float:
        if self.config.default_direction is None:
            return self.rng.uniform(0.0, 2 * math.pi)
        return self.config.default_direction

    def add(self, x: float, y: float, angle: Optional[float] = None) -> None:
        """Add one electron at (x, y); without an angle the default is used."""
        if angle is None:
            angle = self.default_angle()
        self.particles.add(x, y, angle)

    def add_from_drag(
        self,
        begin: Tuple[float, float],
        end: Tuple[float, float]
    ) -> None:
        """
        Add an electron at `begin` heading towards `end`.

        A zero-length drag falls back to the default direction.
        """
        angle = None
        if begin != end:
            angle = math.atan2(end[1] - begin[1], end[0] - begin[0])
        self.add(begin[0], begin[1], angle)

    def set_count(self, n: int) -> None:
        """Remove electrons from the end, or add randomly placed ones."""
        self.particles.set_count(
            n,
            self.config.width,
            self.config.height,
            self.lattice,
            self.config.electron_r,
            self.rng
        )

    def save(self) -> None:
        self.particles.save()

    def load(self) -> None:
        """
        Restore particles saved by `save`.

        Raises:
            RuntimeError: If nothing was saved
        """
        self.particles.load()

    def clear(self) -> None:
        """Reset statistics and histories; particles are kept."""
        self.statistics.clear()
        self._step = 0

    def reset(self) -> None:
        """Remove all electrons and reset statistics."""
        self.set_count(0)
        self.clear()

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def _advance(self, store: ParticleStore, elapsed: float) -> Tuple[np.ndarray, float]:
        """Move the electrons of `store`; returns old x coordinates and impulse."""
        old_x = store.positions[:, 0].copy()
        distance = self.config.speed * elapsed / 1000.0

        impulse = advance_particles(
            store.positions,
            store.directions,
            float(distance),
            float(self.config.width),
            float(self.config.height),
            float(self.config.electron_r),
            float(self.lattice.side),
            float(self.lattice.x_begin),
            float(self.lattice.y_begin),
            float(self.config.reach)
        )

        return old_x, impulse

    def step(
        self,
        elapsed: float,
        mode: Optional[StepMode] = None
    ) -> SimulationState:
        """
        Advance the simulation by `elapsed` milliseconds.

        Args:
            elapsed: Simulated time of the step in milliseconds
            mode: NORMAL updates statistics, SPECULATIVE only moves the
                electrons. Defaults to SPECULATIVE while paint_trace_only
                is set, NORMAL otherwise.

        Returns:
            Updated simulation state
        """
        if elapsed < 0:
            raise ValueError(f"Elapsed time must be non-negative, got {elapsed}")

        if mode is None:
            mode = StepMode.SPECULATIVE if self.paint_trace_only else StepMode.NORMAL

        old_x, impulse = self._advance(self.particles, elapsed)

        if mode is StepMode.NORMAL:
            stats = self.statistics
            n = self.count
            if n > 0:
                stats.record_dwell(old_x, self.particles.positions[:, 0], elapsed / n)
            stats.add_impulse(impulse)
            stats.advance(elapsed)
            stats.maybe_sample()
            self._step += 1

        # Track performance
        self._step_count += 1
        if self._step_count % 100 == 0:
            current_time = time.time()
            dt = current_time - self._last_time
            if dt > 0:
                self.steps_per_second = 100.0 / dt
            self._last_time = current_time

        return self.state

    def run(self, n_steps: int, elapsed: float) -> SimulationState:
        """Run n_steps normal steps of `elapsed` milliseconds."""
        for _ in range(n_steps):
            self.step(elapsed, StepMode.NORMAL)
        return self.state

    def trace(self, n_steps: int, elapsed: float) -> np.ndarray:
        """
        Predict trajectories without touching the simulation.

        Steps a copy of the electrons speculatively; neither the particles
        nor the statistics of this simulation change.

        Returns:
            (n_steps + 1) x N x 2 array of positions, starting with the
            current ones
        """
        store = self.particles.copy()
        trajectory = np.empty((n_steps + 1, len(store), 2))
        trajectory[0] = store.positions

        for k in range(1, n_steps + 1):
            self._advance(store, elapsed)
            trajectory[k] = store.positions

        return trajectory

    # ------------------------------------------------------------------
    # Rendering support
    # ------------------------------------------------------------------

    @property
    def state(self) -> SimulationState:
        return SimulationState(
            positions=self.positions,
            directions=self.directions,
            time=self.statistics.time_full,
            step=self._step,
            impulse_sum=self.statistics.impulse_sum
        )

    def atom_centers(self) -> np.ndarray:
        return self.lattice.atom_centers(self.config.width, self.config.height)

    def bin_edges(self) -> np.ndarray:
        """x coordinates of the bin boundaries, n_bins + 1 values."""
        return np.linspace(0.0, self.config.width, self.statistics.n_bins + 1)


def create_random_simulation(
    n_particles: int = 50,
    config: Optional[SimulationConfig] = None
) -> LorentzGasSimulation:
    """
    Create a simulation with randomly placed electrons.

    Args:
        n_particles: Number of electrons
        config: Simulation configuration (defaults if omitted)

    Returns:
        Populated LorentzGasSimulation
    """
    sim = LorentzGasSimulation(config)
    sim.set_count(n_particles)
    return sim
