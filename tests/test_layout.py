"""
Tests for the nucleon ring-packing layout.

Covers counts, determinism, ring radii and the proton/neutron split.
"""

import math
import unittest

import numpy as np

from nucleuslab.config import RING_BASE_RADIUS
from nucleuslab.model.layout import (
    Position, extent, layout, positions_to_array, ring_capacity, ring_occupancy, ring_radius,
    split_positions,
)


class TestLayoutCounts(unittest.TestCase):
    """The layout always places exactly the requested number of nucleons."""

    def test_exact_count(self):
        for total in range(0, 121):
            self.assertEqual(len(layout(total)), total)

    def test_non_positive_total_is_empty(self):
        self.assertEqual(layout(0), [])
        self.assertEqual(layout(-5), [])

    def test_single_nucleon_is_centred(self):
        self.assertEqual(layout(1), [Position(0.0, 0.0)])

    def test_ring_occupancy(self):
        self.assertEqual(ring_occupancy(0), [])
        self.assertEqual(ring_occupancy(1), [1])
        self.assertEqual(ring_occupancy(7), [1, 6])
        self.assertEqual(ring_occupancy(10), [1, 6, 3])
        self.assertEqual(ring_occupancy(19), [1, 6, 12])
        self.assertEqual(ring_occupancy(60), [1, 6, 12, 18, 23])

    def test_ring_count_grows_like_sqrt(self):
        # rings 0..k hold 1 + 3k(k+1) nucleons
        self.assertEqual(len(ring_occupancy(1 + 3 * 10 * 11)), 11)


class TestLayoutGeometry(unittest.TestCase):
    """Radii and angles of placed nucleons."""

    def test_deterministic(self):
        self.assertEqual(layout(37), layout(37))
        self.assertEqual(layout(37, 50.0), layout(37, 50.0))

    def test_seven_nucleons_fill_two_rings(self):
        positions = layout(7)
        radii = sorted({round(p.radius, 9) for p in positions})
        self.assertEqual(radii, [0.0, round(RING_BASE_RADIUS * 0.65, 9)])

        ring1 = positions[1:]
        angles = [p.angle for p in ring1]
        for i, angle in enumerate(angles):
            self.assertAlmostEqual(angle, math.radians(60 * i), places=9)

    def test_first_ring_point_on_positive_x_axis(self):
        p = layout(2, 10.0)[1]
        self.assertAlmostEqual(p.x, 6.5)
        self.assertAlmostEqual(p.y, 0.0)

    def test_partial_ring_is_spread_evenly(self):
        ring2 = layout(10)[7:]
        self.assertEqual(len(ring2), 3)
        for i, p in enumerate(ring2):
            self.assertAlmostEqual(p.radius, RING_BASE_RADIUS * 2 * 0.65)
            self.assertAlmostEqual(p.angle, 2 * math.pi * i / 3, places=9)

    def test_ring_helpers(self):
        self.assertEqual(ring_capacity(0), 1)
        self.assertEqual(ring_capacity(3), 18)
        self.assertEqual(ring_radius(0, 36.0), 0.0)
        self.assertAlmostEqual(ring_radius(2, 36.0), 46.8)
        with self.assertRaises(ValueError):
            ring_capacity(-1)
        with self.assertRaises(ValueError):
            ring_radius(-1)

    def test_extent(self):
        self.assertEqual(extent(0), 0.0)
        self.assertEqual(extent(1), 0.0)
        self.assertAlmostEqual(extent(8, 36.0), 46.8)


class TestSplit(unittest.TestCase):
    """The first Z positions are protons, the rest neutrons."""

    def test_split_for_all_compositions(self):
        for z in range(1, 21):
            for n in range(0, 41):
                positions = layout(z + n)
                protons, neutrons = split_positions(positions, z)
                self.assertEqual(len(protons), z)
                self.assertEqual(len(neutrons), n)
                self.assertEqual(protons + neutrons, positions)

    def test_positions_to_array(self):
        array = positions_to_array(layout(7))
        self.assertEqual(array.shape, (7, 2))
        self.assertTrue(np.allclose(array[0], [0.0, 0.0]))
        self.assertEqual(positions_to_array([]).shape, (0, 2))


if __name__ == "__main__":
    unittest.main(verbosity=2)
