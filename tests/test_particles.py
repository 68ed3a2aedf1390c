#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Particle Store Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 15, 2026
License:        MIT License
================================================================================
"""

import math
import numpy as np
import pytest
from lorentz_gas.lattice import LatticeGeometry
from lorentz_gas.particles import ParticleStore, random_free_position


@pytest.fixture
def lattice():
    return LatticeGeometry.from_dimensions(400, 400, 25, 5.0)


class TestAdd:
    """Tests for adding particles."""

    def test_empty_store(self):
        store = ParticleStore()
        assert len(store) == 0
        assert store.positions.shape == (0, 2)

    def test_add_appends(self):
        store = ParticleStore()
        store.add(10, 20, 1.0)
        store.add(30, 40, 2.0)

        assert store.count == 2
        assert np.array_equal(store.positions, [[10.0, 20.0], [30.0, 40.0]])
        assert np.array_equal(store.directions, [1.0, 2.0])

    def test_add_wraps_angle(self):
        store = ParticleStore()
        store.add(0, 0, -math.pi / 2)
        assert store.directions[0] == pytest.approx(3 * math.pi / 2)

    def test_tiny_negative_angle_stays_below_two_pi(self):
        store = ParticleStore()
        store.add(0, 0, -1e-17)
        assert 0.0 <= store.directions[0] < 2 * math.pi


class TestSetCount:
    """Tests for resizing the store."""

    def test_grow_places_inside_arena(self, lattice):
        store = ParticleStore()
        store.set_count(100, 400, 300, lattice, 2.0, np.random.default_rng(0))

        assert len(store) == 100
        assert np.all(store.positions[:, 0] >= 0) and np.all(store.positions[:, 0] < 400)
        assert np.all(store.positions[:, 1] >= 0) and np.all(store.positions[:, 1] < 300)
        assert np.all(store.directions >= 0) and np.all(store.directions < 2 * math.pi)

    def test_grow_avoids_atoms(self, lattice):
        """With a sparse lattice placement practically never overlaps."""
        store = ParticleStore()
        store.set_count(200, 400, 400, lattice, 2.0, np.random.default_rng(3))

        clear = [lattice.is_clear(x, y, 2.0) for x, y in store.positions]
        assert sum(clear) >= 198

    def test_grow_keeps_existing(self, lattice):
        store = ParticleStore()
        store.add(10, 20, 1.0)
        store.set_count(4, 400, 400, lattice, 2.0, np.random.default_rng(5))

        assert len(store) == 4
        assert np.array_equal(store.positions[0], [10.0, 20.0])
        assert store.directions[0] == 1.0
        assert store.positions.flags['C_CONTIGUOUS']

    def test_shrink_removes_last(self, lattice):
        """set_count(5) then set_count(2) keeps the first two electrons."""
        store = ParticleStore()
        store.set_count(5, 400, 400, lattice, 2.0, np.random.default_rng(1))
        first_two = store.positions[:2].copy(), store.directions[:2].copy()

        store.set_count(2, 400, 400, lattice, 2.0, np.random.default_rng(1))

        assert len(store) == 2
        assert np.array_equal(store.positions, first_two[0])
        assert np.array_equal(store.directions, first_two[1])

    def test_crowded_lattice_still_places(self):
        """Placement falls back to an overlapping spot instead of failing."""
        crowded = LatticeGeometry.from_dimensions(100, 100, 10, 6.0)
        x, y = random_free_position(100, 100, crowded, 2.0, np.random.default_rng(2))

        assert 0 <= x < 100
        assert 0 <= y < 100
        assert not crowded.is_clear(x, y, 2.0)


class TestSnapshot:
    """Tests for save/load."""

    def test_load_restores(self):
        store = ParticleStore()
        store.add(1, 2, 0.5)
        store.save()

        store.positions[0] = [50, 60]
        store.directions[0] = 3.0
        store.add(7, 8, 1.0)
        store.load()

        assert np.array_equal(store.positions, [[1.0, 2.0]])
        assert np.array_equal(store.directions, [0.5])

    def test_load_without_save(self):
        store = ParticleStore()
        store.add(1, 2, 0.5)

        with pytest.raises(RuntimeError):
            store.load()

        assert len(store) == 1

    def test_last_save_wins(self):
        store = ParticleStore()
        store.add(1, 2, 0.5)
        store.save()
        store.add(3, 4, 0.5)
        store.save()
        store.set_count(0, 400, 400, LatticeGeometry(), 2.0, np.random.default_rng())
        store.load()

        assert len(store) == 2

    def test_copy_is_independent(self):
        store = ParticleStore()
        store.add(1, 2, 0.5)
        clone = store.copy()
        clone.positions[0] = [9, 9]

        assert np.array_equal(store.positions, [[1.0, 2.0]])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
