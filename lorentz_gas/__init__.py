#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Lorentz Gas Lattice Simulator
================================================================================

Project:        Lorentz Gas Lattice Simulator
Description:    2D gas of electrons bouncing among a square lattice of atoms
                inside a reflecting box, with residence and pressure statistics

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
Last Updated:   October 15, 2026

License:        MIT License
================================================================================

This package implements a Lorentz gas simulation featuring:
- Constant-speed electrons with specular reflection off walls and atoms
- Exact time-of-impact computation for circle/circle contact
- Residence probability, wall pressure and density histogram statistics
- Speculative trace stepping for trajectory previews

Modules:
    - lattice: Square lattice geometry and nearest atom search
    - particles: Particle store with snapshot support
    - collisions: Boundary and atom reflection kernels (Numba)
    - statistics: Dwell time accumulation and bounded histories
    - simulation: Integrator and simulation facade
    - visualization: Matplotlib rendering of the arena and histories
"""

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
