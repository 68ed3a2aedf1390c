#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Particle Store
================================================================================

Project:        Lorentz Gas Lattice Simulator
Module:         particles.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

Ordered storage of electron positions and directions, with random placement
that avoids the atoms and a single save/load snapshot.
"""

import math
import numpy as np
from typing import Optional, Tuple

from .lattice import LatticeGeometry
from .collisions import normalize_angle


# Random positions tried before accepting an overlapping one
PLACEMENT_TRIALS = 9


class ParticleStore:
    """
    Electron positions (Nx2) and direction angles (N) in radians.

    Store order is drawing order; particles are removed from the end.
    """

    def __init__(
        self,
        positions: Optional[np.ndarray] = None,
        directions: Optional[np.ndarray] = None
    ):
        if positions is None:
            positions = np.empty((0, 2))
        if directions is None:
            directions = np.empty(0)

        self.positions = np.array(positions, dtype=np.float64).reshape(-1, 2)
        self.directions = np.array(directions, dtype=np.float64).reshape(-1)
        self._saved: Optional[Tuple[np.ndarray, np.ndarray]] = None

    def __len__(self) -> int:
        return self.positions.shape[0]

    @property
    def count(self) -> int:
        return len(self)

    def add(self, x: float, y: float, angle: float) -> None:
        """Append one electron. Position bounds are not checked."""
        self.positions = np.vstack((self.positions, [[x, y]]))
        self.directions = np.append(self.directions, normalize_angle(float(angle)))

    def set_count(
        self,
        n: int,
        width: float,
        height: float,
        lattice: LatticeGeometry,
        electron_r: float,
        rng: np.random.Generator
    ) -> None:
        """
        Grow or shrink the store to `n` electrons.

        Shrinking drops the most recently added electrons. Growing places
        each new electron at a random point clear of the atoms (up to
        PLACEMENT_TRIALS attempts, after which the last point is kept even
        if it overlaps) with a uniformly random direction.
        """
        n = max(int(n), 0)

        if n < len(self):
            self.positions = self.positions[:n].copy()
            self.directions = self.directions[:n].copy()
            return

        n_new = n - len(self)
        new_positions = np.empty((n_new, 2))
        new_directions = np.empty(n_new)
        for i in range(n_new):
            new_positions[i] = random_free_position(width, height, lattice, electron_r, rng)
            new_directions[i] = rng.uniform(0.0, 2 * math.pi)

        self.positions = np.concatenate((self.positions, new_positions))
        self.directions = np.concatenate((self.directions, new_directions))

    def save(self) -> None:
        """Snapshot positions and directions, replacing any earlier snapshot."""
        self._saved = (self.positions.copy(), self.directions.copy())

    def load(self) -> None:
        """
        Restore the last snapshot taken with `save`.

        Raises:
            RuntimeError: If no snapshot exists
        """
        if self._saved is None:
            raise RuntimeError("No saved particle snapshot to load")

        positions, directions = self._saved
        self.positions = positions.copy()
        self.directions = directions.copy()

    @property
    def has_snapshot(self) -> bool:
        return self._saved is not None

    def copy(self) -> "ParticleStore":
        """Independent copy of the current particles (snapshot not included)."""
        return ParticleStore(self.positions.copy(), self.directions.copy())


def random_free_position(
    width: float,
    height: float,
    lattice: LatticeGeometry,
    electron_r: float,
    rng: np.random.Generator,
    trials: int = PLACEMENT_TRIALS
) -> Tuple[float, float]:
    """
    Random point in [0, width) x [0, height) that touches no atom.

    Returns the last point tried when every trial overlaps an atom.
    """
    x = y = 0.0
    for _ in range(trials):
        x = rng.uniform(0.0, width)
        y = rng.uniform(0.0, height)
        if lattice.is_clear(x, y, electron_r):
            break
    return x, y
