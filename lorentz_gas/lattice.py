#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Square Lattice Geometry
================================================================================

Project:        Lorentz Gas Lattice Simulator
Module:         lattice.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

Atoms sit on a square grid with spacing `side`. The grid is shifted by a
phase (x_begin, y_begin) derived from the arena size, so that atom centers are:

    (x_begin + i * side, y_begin + j * side)    for integers i, j

The atom nearest to any point is one of the four grid points obtained by
rounding the point's fractional grid coordinates up or down.
"""

import math
import numpy as np
from numba import jit
from typing import Tuple
from dataclasses import dataclass


def lattice_phase(length: float, side: float) -> float:
    """
    Offset of the first lattice row/column along an axis of given length.

    Args:
        length: Arena width or height
        side: Lattice spacing (must be positive)

    Returns:
        length mod side, or side when the remainder is zero
    """
    remainder = length % side
    return remainder if remainder != 0 else side


@jit(nopython=True, cache=True)
def nearest_centers(
    x: float,
    y: float,
    side: float,
    x_begin: float,
    y_begin: float
) -> np.ndarray:
    """
    Candidate atom centers around a point.

    Returns:
        4x2 array of (floor, floor), (floor, ceil), (ceil, floor), (ceil, ceil)
        grid points; duplicates are possible when the point lies on a grid line
    """
    u = (x - x_begin) / side
    v = (y - y_begin) / side

    x_lo = math.floor(u) * side + x_begin
    x_hi = math.ceil(u) * side + x_begin
    y_lo = math.floor(v) * side + y_begin
    y_hi = math.ceil(v) * side + y_begin

    centers = np.empty((4, 2))
    centers[0, 0] = x_lo
    centers[0, 1] = y_lo
    centers[1, 0] = x_lo
    centers[1, 1] = y_hi
    centers[2, 0] = x_hi
    centers[2, 1] = y_lo
    centers[3, 0] = x_hi
    centers[3, 1] = y_hi

    return centers


@jit(nopython=True, cache=True)
def nearest_center(
    x: float,
    y: float,
    side: float,
    x_begin: float,
    y_begin: float
) -> Tuple[float, float, float]:
    """
    Closest atom center to a point.

    Returns:
        (cx, cy, distance)
    """
    centers = nearest_centers(x, y, side, x_begin, y_begin)

    best_x = centers[0, 0]
    best_y = centers[0, 1]
    best_dist = math.hypot(x - best_x, y - best_y)

    for k in range(1, 4):
        dist = math.hypot(x - centers[k, 0], y - centers[k, 1])
        if dist < best_dist:
            best_x = centers[k, 0]
            best_y = centers[k, 1]
            best_dist = dist

    return best_x, best_y, best_dist


@jit(nopython=True, cache=True)
def is_clear_of_atoms(
    x: float,
    y: float,
    side: float,
    x_begin: float,
    y_begin: float,
    reach: float
) -> bool:
    """True if every candidate center is farther than `reach` from (x, y)."""
    centers = nearest_centers(x, y, side, x_begin, y_begin)
    for k in range(4):
        if math.hypot(x - centers[k, 0], y - centers[k, 1]) <= reach:
            return False
    return True


@dataclass
class LatticeGeometry:
    """
    Geometry of the atom lattice.

    Regenerate with `from_dimensions` whenever the arena size or the
    spacing changes; the phase depends on both.
    """
    side: float = 25.0
    atom_r: float = 5.0
    x_begin: float = 25.0
    y_begin: float = 25.0

    @classmethod
    def from_dimensions(
        cls,
        width: float,
        height: float,
        side: float,
        atom_r: float
    ) -> "LatticeGeometry":
        """Build the lattice for an arena of the given size."""
        return cls(
            side=side,
            atom_r=atom_r,
            x_begin=lattice_phase(width, side),
            y_begin=lattice_phase(height, side)
        )

    def nearest_centers(self, x: float, y: float) -> np.ndarray:
        return nearest_centers(
            float(x), float(y), float(self.side),
            float(self.x_begin), float(self.y_begin)
        )

    def nearest_center(self, x: float, y: float) -> Tuple[float, float, float]:
        return nearest_center(
            float(x), float(y), float(self.side),
            float(self.x_begin), float(self.y_begin)
        )

    def is_clear(self, x: float, y: float, electron_r: float) -> bool:
        """True if an electron of radius `electron_r` at (x, y) touches no atom."""
        return is_clear_of_atoms(
            float(x), float(y), float(self.side),
            float(self.x_begin), float(self.y_begin),
            float(self.atom_r + electron_r)
        )

    def atom_centers(self, width: float, height: float) -> np.ndarray:
        """
        All atom centers whose disks reach into the arena.

        Args:
            width: Arena width
            height: Arena height

        Returns:
            Mx2 array of centers, row by row
        """
        # One extra column/row before the phase: its disk may still poke in
        xs = np.arange(self.x_begin - self.side, width + self.atom_r, self.side)
        ys = np.arange(self.y_begin - self.side, height + self.atom_r, self.side)
        xs = xs[xs + self.atom_r > 0]
        ys = ys[ys + self.atom_r > 0]

        grid_x, grid_y = np.meshgrid(xs, ys)
        return np.column_stack((grid_x.ravel(), grid_y.ravel()))
