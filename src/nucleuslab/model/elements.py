"""Element table for the light elements (Z = 1..20)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Element:
    symbol: str
    name: str


ELEMENTS: dict[int, Element] = {
    1: Element("H", "Hydrogen"),
    2: Element("He", "Helium"),
    3: Element("Li", "Lithium"),
    4: Element("Be", "Beryllium"),
    5: Element("B", "Boron"),
    6: Element("C", "Carbon"),
    7: Element("N", "Nitrogen"),
    8: Element("O", "Oxygen"),
    9: Element("F", "Fluorine"),
    10: Element("Ne", "Neon"),
    11: Element("Na", "Sodium"),
    12: Element("Mg", "Magnesium"),
    13: Element("Al", "Aluminium"),
    14: Element("Si", "Silicon"),
    15: Element("P", "Phosphorus"),
    16: Element("S", "Sulfur"),
    17: Element("Cl", "Chlorine"),
    18: Element("Ar", "Argon"),
    19: Element("K", "Potassium"),
    20: Element("Ca", "Calcium"),
}


def element_identity(z: int) -> Element:
    """
    Look up the element with atomic number ``z``.

    Unknown atomic numbers get a synthetic identity ("Z21", "Element Z=21")
    instead of an error.
    """
    element = ELEMENTS.get(z)
    if element is None:
        return Element(symbol=f"Z{z}", name=f"Element Z={z}")
    return element


def isotope_notation(symbol: str, a: int, z: int) -> str:
    """Plain-text isotope notation, e.g. ``^12_6C``."""
    return f"^{a}_{z}{symbol}"
