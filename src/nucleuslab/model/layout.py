"""
Nucleon Ring-Packing Layout
===========================
Places A nucleons on concentric rings around the nucleus centre.

Ring 0 holds a single nucleon at the centre, ring k >= 1 holds up to 6k
nucleons on a circle of radius ``base * k * 0.65``. Rings are filled in
order and nucleons are spread evenly in angle on each ring.

The output order (ring-major, then angle) decides which position is drawn
as a proton: the caller labels the first Z entries as protons and the rest
as neutrons. Keep it stable.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

import math
import numpy as np

from nucleuslab.config import RING_BASE_RADIUS, RING_SPACING_FACTOR

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Position:
    """Placement of one nucleon in layout units (origin = nucleus centre)."""
    x: float
    y: float

    @property
    def radius(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Polar angle in radians, in [0, 2π)."""
        return math.atan2(self.y, self.x) % (2.0 * math.pi)


def ring_capacity(ring: int) -> int:
    """Maximum number of nucleons on the given ring."""
    if ring < 0:
        raise ValueError(f"Ring index must be non-negative, got {ring}")
    return 1 if ring == 0 else 6 * ring


def ring_radius(ring: int, ring_base_radius: float = RING_BASE_RADIUS) -> float:
    """Distance of the given ring from the centre."""
    if ring < 0:
        raise ValueError(f"Ring index must be non-negative, got {ring}")
    return 0.0 if ring == 0 else ring_base_radius * ring * RING_SPACING_FACTOR


def ring_occupancy(total: int) -> list[int]:
    """
    Number of nucleons placed on each ring, innermost first.

    Examples:
        ring_occupancy(7) -> [1, 6]
        ring_occupancy(10) -> [1, 6, 3]
    """
    counts: list[int] = []
    remaining = total
    ring = 0
    while remaining > 0:
        on_ring = min(remaining, ring_capacity(ring))
        counts.append(on_ring)
        remaining -= on_ring
        ring += 1
    return counts


def layout(total: int, ring_base_radius: float = RING_BASE_RADIUS) -> list[Position]:
    """
    Compute the positions of ``total`` nucleons.

    Args:
        total: Number of nucleons (mass number A). Non-positive values give
            an empty layout.
        ring_base_radius: Base radius scaling the ring spacing.

    Returns:
        Exactly ``total`` positions, ring by ring, in angular order.
    """
    positions: list[Position] = []
    for ring, on_ring in enumerate(ring_occupancy(total)):
        r = ring_radius(ring, ring_base_radius)
        theta = np.arange(on_ring) / on_ring * 2.0 * np.pi
        xs = r * np.cos(theta)
        ys = r * np.sin(theta)
        positions.extend(Position(float(x), float(y)) for x, y in zip(xs, ys))
    return positions


def extent(total: int, ring_base_radius: float = RING_BASE_RADIUS) -> float:
    """Radius of the outermost occupied ring (0 for one nucleon or none)."""
    rings = len(ring_occupancy(total))
    if rings == 0:
        return 0.0
    return ring_radius(rings - 1, ring_base_radius)


def split_positions(
    positions: Sequence[Position],
    z: int
) -> tuple[list[Position], list[Position]]:
    """Split a layout into (protons, neutrons): the first ``z`` entries are protons."""
    z = max(0, z)
    return list(positions[:z]), list(positions[z:])


def positions_to_array(positions: Sequence[Position]) -> npt.NDArray[np.float64]:
    """Convert positions to an (n, 2) array of xy coordinates."""
    if not positions:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in positions], dtype=np.float64)
