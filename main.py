#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lorentz Gas Lattice Simulator - Command Line Interface
================================================================================

Project:        Lorentz Gas Lattice Simulator
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

Command line interface for running and inspecting the Lorentz gas
simulation.
"""

import argparse
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
import time

from lorentz_gas.simulation import SimulationConfig, create_random_simulation
from lorentz_gas.visualization import (
    VisualizationConfig, render_arena, render_history, render_density
)


def build_config(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        side=args.side,
        speed=args.speed,
        n_bins=args.bins,
        bin_index=args.bin,
        seed=args.seed
    )


def run_statistics(args: argparse.Namespace):
    """
    Run the simulation headless and report the collected statistics.
    """
    print("=" * 60)
    print("Lorentz Gas - Statistics Run")
    print("=" * 60)

    print(f"\nPlacing {args.particles} electrons...")
    sim = create_random_simulation(args.particles, build_config(args))

    print(f"Running {args.steps} steps of {args.elapsed:g} ms...")
    t_start = time.time()

    for step in range(args.steps):
        sim.step(args.elapsed)

        if step % 1000 == 0:
            stats = sim.statistics
            prob = stats.probability
            p = prob[-1] if len(prob) else 0.0
            print(f"  Step {step:5d}: t = {stats.time_full / 1000:.1f} s, "
                  f"p = {p:.4f}, impulse = {stats.impulse_sum:.1f}")

    t_end = time.time()

    print(f"\nSimulation completed in {t_end - t_start:.2f} seconds")
    print(f"Steps per second: {args.steps / max(t_end - t_start, 1e-9):.1f}")

    stats = sim.statistics
    print(f"\nFinal State:")
    print(f"  Samples:         {len(stats.time)}")
    if len(stats.time):
        print(f"  Probability:     {stats.probability[-1]:.4f}")
        print(f"  Expected (1/n):  {1.0 / stats.n_bins:.4f}")
        print(f"  Pressure:        {stats.pressure()[-1]:.4f}")
    print(f"  Density:         {np.array2string(stats.density, precision=3)}")

    fig, axes = plt.subplots(2, 2, figsize=(12, 10))
    vis_config = VisualizationConfig(show_bins=True)

    render_arena(sim, vis_config, ax=axes[0, 0])
    axes[0, 0].set_title('Final Configuration')

    render_history(sim, "probability", vis_config, ax=axes[0, 1])
    axes[0, 1].set_title('Probability vs Time')

    render_history(sim, "pressure", vis_config, ax=axes[1, 0])
    axes[1, 0].set_title('Pressure vs Time')

    render_density(sim, vis_config, ax=axes[1, 1])
    axes[1, 1].set_title('Density')

    plt.tight_layout()
    plt.show()


def run_trace(args: argparse.Namespace):
    """
    Show predicted short-term trajectories of the current electrons.
    """
    print("=" * 60)
    print("Lorentz Gas - Trajectory Preview")
    print("=" * 60)

    sim = create_random_simulation(args.particles, build_config(args))
    trajectory = sim.trace(args.steps, args.elapsed)
    print(f"\nPredicted {args.steps} steps for {sim.count} electrons")

    render_arena(sim, VisualizationConfig(), trajectory=trajectory)
    plt.show()


def run_animation(args: argparse.Namespace, n_steps_per_frame: int = 1):
    """
    Live animation of the simulation alongside the probability history.
    """
    print("=" * 60)
    print("Lorentz Gas - Animation")
    print("=" * 60)

    sim = create_random_simulation(args.particles, build_config(args))
    vis_config = VisualizationConfig(show_bins=True)

    fig, (ax_arena, ax_plot) = plt.subplots(1, 2, figsize=(12, 6))

    def update(frame):
        for _ in range(n_steps_per_frame):
            sim.step(args.elapsed)

        render_arena(sim, vis_config, ax=ax_arena)
        ax_arena.set_title(f'Frame {frame}, t = {sim.statistics.time_full / 1000:.1f} s')
        render_history(sim, "probability", vis_config, ax=ax_plot)

        return ax_arena, ax_plot

    ani = FuncAnimation(fig, update, frames=args.steps, interval=args.elapsed, blit=False)
    plt.show()
    return ani


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Lorentz Gas - electrons among a square lattice of atoms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --run               Headless run with statistics
  python main.py --trace             Preview predicted trajectories
  python main.py --animate           Live animation
        """
    )

    parser.add_argument('--run', action='store_true',
                       help='Run headless and report statistics')
    parser.add_argument('--trace', action='store_true',
                       help='Preview predicted trajectories')
    parser.add_argument('--animate', action='store_true',
                       help='Show live animation')
    parser.add_argument('--particles', '-n', type=int, default=50,
                       help='Number of electrons (default: 50)')
    parser.add_argument('--steps', '-s', type=int, default=5000,
                       help='Number of steps (default: 5000)')
    parser.add_argument('--elapsed', type=float, default=20.0,
                       help='Milliseconds per step (default: 20)')
    parser.add_argument('--side', type=int, default=25,
                       help='Lattice spacing (default: 25)')
    parser.add_argument('--speed', type=float, default=100.0,
                       help='Electron speed per second (default: 100)')
    parser.add_argument('--bins', type=int, default=10,
                       help='Number of bins (default: 10)')
    parser.add_argument('--bin', type=int, default=0,
                       help='Distinguished bin index (default: 0)')
    parser.add_argument('--seed', type=int, default=None,
                       help='Random seed')

    args = parser.parse_args()

    if args.run:
        run_statistics(args)
    elif args.trace:
        run_trace(args)
    elif args.animate:
        run_animation(args)
    else:
        parser.print_help()
        print("\nNo action specified. Run with --run, --trace, or --animate")


if __name__ == "__main__":
    main()
