#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module
================================================================================

Project:        Lorentz Gas Lattice Simulator
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

Matplotlib rendering of the arena (atoms, electrons, bins, predicted
trajectories) and of the statistics histories.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle
from matplotlib.collections import PatchCollection
from typing import Tuple, Optional
from dataclasses import dataclass

from .simulation import LorentzGasSimulation
from .statistics import HISTORY_WINDOW


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    background_color: str = "white"
    atom_color: str = "black"
    electron_color: str = "red"
    bin_color: str = "#dde6f5"
    selected_bin_color: str = "#9db8e8"
    trace_color: str = "green"
    show_bins: bool = False
    history_window: int = HISTORY_WINDOW
    figsize: Tuple[int, int] = (6, 6)


def _get_axes(ax: Optional[plt.Axes], figsize: Tuple[int, int]) -> Tuple[plt.Figure, plt.Axes]:
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=figsize)
    else:
        fig = ax.figure
    return fig, ax


def render_arena(
    sim: LorentzGasSimulation,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None,
    trajectory: Optional[np.ndarray] = None
) -> plt.Figure:
    """
    Draw the atoms, the electrons and optionally the bins and a trace.

    The y axis points down, matching screen coordinates used for input.

    Args:
        sim: Simulation to draw
        config: Visualization configuration
        ax: Optional existing axes to draw on
        trajectory: Optional (steps x N x 2) array from `sim.trace`

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    fig, ax = _get_axes(ax, config.figsize)
    width, height = sim.config.width, sim.config.height

    ax.clear()
    ax.set_facecolor(config.background_color)

    if config.show_bins or sim.show_bins:
        edges = sim.bin_edges()
        selected = sim.statistics.bin_index
        for b in range(len(edges) - 1):
            if b == selected:
                color = config.selected_bin_color
            elif b % 2 == 0:
                color = config.bin_color
            else:
                continue
            ax.add_patch(Rectangle(
                (edges[b], 0), edges[b + 1] - edges[b], height,
                facecolor=color, edgecolor='none', zorder=0
            ))

    atoms = [Circle((cx, cy), sim.lattice.atom_r) for cx, cy in sim.atom_centers()]
    ax.add_collection(PatchCollection(
        atoms, facecolor=config.atom_color, edgecolor='none', zorder=1
    ))

    if trajectory is not None and trajectory.shape[1] > 0:
        for i in range(trajectory.shape[1]):
            ax.plot(
                trajectory[:, i, 0], trajectory[:, i, 1],
                color=config.trace_color, linewidth=0.8, zorder=2
            )

    electrons = [
        Circle((x, y), sim.config.electron_r) for x, y in sim.particles.positions
    ]
    if electrons:
        ax.add_collection(PatchCollection(
            electrons, facecolor=config.electron_color, edgecolor='none', zorder=3
        ))

    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect('equal')
    ax.set_xticks([])
    ax.set_yticks([])

    return fig


def render_history(
    sim: LorentzGasSimulation,
    series: str = "probability",
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Plot the latest samples of the probability or pressure history.

    Args:
        sim: Simulation whose statistics to plot
        series: "probability" or "pressure"
        config: Visualization configuration
        ax: Optional existing axes

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()
    if series not in ("probability", "pressure"):
        raise ValueError(f"Unknown history series: {series}")

    fig, ax = _get_axes(ax, config.figsize)
    ax.clear()

    recent = sim.statistics.recent(config.history_window)
    t = recent['time']
    y = recent[series]

    ax.set_xlabel('t')
    ax.set_ylabel('p' if series == "probability" else 'P')

    if len(t) == 0:
        ax.set_xlim(0, 1000)
        ax.set_ylim(0, 1)
        return fig

    ax.plot(t, y, 'b-')
    if t[-1] > t[0]:
        ax.set_xlim(t[0], t[-1])

    y_max = float(np.max(y))
    if series == "probability" or y_max <= 0:
        ax.set_ylim(0, 1)
    else:
        ax.set_ylim(0, y_max * 1.2)

    ax.grid(True, alpha=0.3)
    return fig


def render_density(
    sim: LorentzGasSimulation,
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Bar chart of the normalized dwell time per bin.

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    fig, ax = _get_axes(ax, config.figsize)
    ax.clear()

    edges = sim.bin_edges()
    density = sim.statistics.density
    colors = [
        config.selected_bin_color if b == sim.statistics.bin_index else config.bin_color
        for b in range(len(density))
    ]

    ax.bar(
        edges[:-1], density, width=np.diff(edges), align='edge',
        color=colors, edgecolor='gray'
    )
    ax.set_xlim(edges[0], edges[-1])
    ax.set_xlabel('x')
    ax.set_ylabel('density')
    ax.grid(True, alpha=0.3)

    return fig
