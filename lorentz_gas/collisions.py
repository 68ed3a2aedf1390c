#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Collision Resolver
================================================================================

Project:        Lorentz Gas Lattice Simulator
Module:         collisions.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

Specular reflection of electrons off the box walls and off the lattice atoms.

Walls:
    An electron of radius r is confined to [r, W - r] x [r, H - r]. A step
    that overshoots a wall is mirrored back about it:
        horizontal wall:  y -> 2*wall - y,   φ -> 2π - φ
        vertical wall:    x -> 2*wall - x,   φ -> 3π - φ
    The overshoot length is returned as the wall impulse of the step.
    Both axes are corrected independently near corners (approximation).

Atoms:
    An electron hits an atom when its center comes within R = atom_r + r of
    the atom center c. Along the step p0 -> p the impact time t solves

        |p0 + t (p - p0) - c|² = R²

    (earlier root). With the surface normal angle β at the impact point the
    new direction is φ' = 2β - φ - π, and the rest of the step, (1 - t)|p - p0|,
    is travelled along φ'. Only one bounce is resolved per step. An electron
    that starts a step inside an atom and moves away from its center is let
    through, so overlapping placements drain out.
"""

import math
import numpy as np
from numba import jit
from typing import Tuple

from .lattice import nearest_center


TWO_PI = 2.0 * math.pi


@jit(nopython=True, cache=True)
def normalize_angle(phi: float) -> float:
    """Wrap an angle into [0, 2π)."""
    phi = phi % TWO_PI
    if phi >= TWO_PI:
        phi = 0.0
    return phi


@jit(nopython=True, cache=True)
def reflect_from_borders(
    x: float,
    y: float,
    phi: float,
    width: float,
    height: float,
    electron_r: float
) -> Tuple[float, float, float, float]:
    """
    Mirror a candidate position back into the box.

    Args:
        x, y: Position after free flight
        phi: Direction of motion (radians)
        width, height: Arena dimensions
        electron_r: Electron radius

    Returns:
        (x, y, phi, impulse) where impulse is the summed overshoot
    """
    impulse = 0.0
    x_max = width - electron_r
    y_max = height - electron_r

    # Bottom
    if y > y_max:
        overshoot = y - y_max
        y = y_max - overshoot
        phi = TWO_PI - phi
        impulse += overshoot

    # Right
    if x > x_max:
        overshoot = x - x_max
        x = x_max - overshoot
        phi = 3.0 * math.pi - phi
        impulse += overshoot

    # Top
    if y < electron_r:
        overshoot = electron_r - y
        y = electron_r + overshoot
        phi = TWO_PI - phi
        impulse += overshoot

    # Left
    if x < electron_r:
        overshoot = electron_r - x
        x = electron_r + overshoot
        phi = 3.0 * math.pi - phi
        impulse += overshoot

    return x, y, normalize_angle(phi), impulse


@jit(nopython=True, cache=True)
def time_of_impact(
    x0: float,
    y0: float,
    x: float,
    y: float,
    cx: float,
    cy: float,
    reach: float
) -> float:
    """
    Fraction of the segment (x0, y0) -> (x, y) travelled before touching
    the circle of radius `reach` around (cx, cy).

    A negative discriminant (the segment only grazes the circle) is treated
    as tangent contact. The result is clamped to [0, 1]; a start point already
    inside the circle gives 0.
    """
    dx = x - x0
    dy = y - y0
    fx = x0 - cx
    fy = y0 - cy

    a = dx * dx + dy * dy
    if a == 0.0:
        return 0.0

    b = 2.0 * (fx * dx + fy * dy)
    c = fx * fx + fy * fy - reach * reach

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        discriminant = 0.0

    t = (-b - math.sqrt(discriminant)) / (2.0 * a)

    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return t


@jit(nopython=True, cache=True)
def reflect_from_atom(
    x: float,
    y: float,
    phi: float,
    x0: float,
    y0: float,
    side: float,
    x_begin: float,
    y_begin: float,
    reach: float
) -> Tuple[float, float, float]:
    """
    Bounce off the atom nearest to the end of the step, if it was hit.

    Args:
        x, y: Position after wall reflection
        phi: Direction after wall reflection
        x0, y0: Position at the start of the step
        side, x_begin, y_begin: Lattice spacing and phase
        reach: atom_r + electron_r

    Returns:
        (x, y, phi) after at most one bounce
    """
    cx, cy, dist = nearest_center(x, y, side, x_begin, y_begin)
    if dist > reach:
        return x, y, phi

    dx = x - x0
    dy = y - y0
    length = math.sqrt(dx * dx + dy * dy)
    if length == 0.0:
        # No motion this step, nothing to bounce
        return x, y, phi

    # Started inside the atom and heading out: let it leave
    fx = x0 - cx
    fy = y0 - cy
    if math.hypot(fx, fy) <= reach and dx * fx + dy * fy >= 0.0:
        return x, y, phi

    t = time_of_impact(x0, y0, x, y, cx, cy, reach)
    hit_x = x0 + t * dx
    hit_y = y0 + t * dy

    beta = math.atan2(hit_y - cy, hit_x - cx)
    phi = normalize_angle(2.0 * beta - phi - math.pi)

    remaining = (1.0 - t) * length
    return (
        hit_x + remaining * math.cos(phi),
        hit_y + remaining * math.sin(phi),
        phi
    )


@jit(nopython=True, cache=True)
def advance_particles(
    positions: np.ndarray,
    directions: np.ndarray,
    distance: float,
    width: float,
    height: float,
    electron_r: float,
    side: float,
    x_begin: float,
    y_begin: float,
    reach: float
) -> float:
    """
    Move every electron `distance` along its direction and resolve collisions.

    Positions and directions are updated in place.

    Returns:
        Total wall impulse collected during the step
    """
    impulse = 0.0

    for i in range(positions.shape[0]):
        x0 = positions[i, 0]
        y0 = positions[i, 1]
        phi = directions[i]

        x = x0 + distance * math.cos(phi)
        y = y0 + distance * math.sin(phi)

        x, y, phi, overshoot = reflect_from_borders(
            x, y, phi, width, height, electron_r
        )
        impulse += overshoot

        x, y, phi = reflect_from_atom(
            x, y, phi, x0, y0, side, x_begin, y_begin, reach
        )

        positions[i, 0] = x
        positions[i, 1] = y
        directions[i] = phi

    return impulse
