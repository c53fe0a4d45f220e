"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the nucleon bounds, defaults and layout radii in
   one place instead of scattering magic numbers through model and view.
2. Consistency: The sliders, spin boxes and the session clamp against the
   very same ranges.

Exports:
    Z_RANGE, N_RANGE: Inclusive (min, max) bounds for protons and neutrons.
    DEFAULT_Z, DEFAULT_N: Configuration restored by a reset.
    RING_BASE_RADIUS: Base radius handed to the ring-packing layout.
"""

# Nucleon bounds (inclusive)
Z_MIN: int = 1
Z_MAX: int = 20
N_MIN: int = 0
N_MAX: int = 40

Z_RANGE: tuple[int, int] = (Z_MIN, Z_MAX)
N_RANGE: tuple[int, int] = (N_MIN, N_MAX)

# Session defaults
DEFAULT_Z: int = 8
DEFAULT_N: int = 8

# Randomize draws delta = N - Z from this inclusive range
RANDOM_DELTA_RANGE: tuple[int, int] = (-1, 3)

# Ring-packing layout
RING_BASE_RADIUS: float = 36.0
RING_SPACING_FACTOR: float = 0.65

# Preview
NUCLEON_RADIUS: float = 12.0
PROTON_COLOR: str = "#ef4444"
NEUTRON_COLOR: str = "#64748b"
GLOW_COLOR: str = "#818cf8"
PREVIEW_HALF_EXTENT: float = 200.0

# Application identity
ORG_ID = "nucleuslab"
APP_ID = "nucleus-lab"
VISIBLE_APP_NAME = "Nucleus Lab"
