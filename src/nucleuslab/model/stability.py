"""
Stability Hint
==============
A coarse, illustrative rule of thumb about the neutron/proton balance.
It is NOT a stability calculation and does not look at isotope data.
"""
from enum import StrEnum

# Elements up to oxygen count as "light"
LIGHT_Z_MAX = 8


class StabilityCategory(StrEnum):
    LIGHT_BALANCED = "light, near-equal N/Z, typical of stable light nuclei"
    LIGHT_UNBALANCED = "light nuclide, N usually close to Z"
    HEAVY_NEUTRON_RICH = "heavier nucleus, N > Z consistent with stability trend"
    HEAVY_NEUTRON_POOR = "heavier nucleus, stable isotopes usually need N well above Z"


def stability_category(z: int, n: int) -> StabilityCategory:
    if z <= LIGHT_Z_MAX:
        if abs(n - z) <= 1:
            return StabilityCategory.LIGHT_BALANCED
        return StabilityCategory.LIGHT_UNBALANCED
    if n >= z + 2:
        return StabilityCategory.HEAVY_NEUTRON_RICH
    return StabilityCategory.HEAVY_NEUTRON_POOR


def stability_hint(z: int, n: int) -> str:
    """Hint text shown on the stability card."""
    return str(stability_category(z, n))
