"""Tests for the element table and the stability hint."""

import unittest

from nucleuslab.model.elements import ELEMENTS, element_identity, isotope_notation
from nucleuslab.model.stability import StabilityCategory, stability_category, stability_hint


class TestElements(unittest.TestCase):

    def test_table_covers_slider_range(self):
        self.assertEqual(sorted(ELEMENTS), list(range(1, 21)))
        self.assertEqual(element_identity(1).symbol, "H")
        self.assertEqual(element_identity(20).symbol, "Ca")

    def test_fallback_identity(self):
        element = element_identity(21)
        self.assertEqual(element.symbol, "Z21")
        self.assertEqual(element.name, "Element Z=21")
        self.assertEqual(element_identity(0).symbol, "Z0")

    def test_isotope_notation(self):
        self.assertEqual(isotope_notation("C", 12, 6), "^12_6C")


class TestStabilityHint(unittest.TestCase):

    def test_scenarios(self):
        self.assertEqual(stability_category(6, 6), StabilityCategory.LIGHT_BALANCED)
        self.assertEqual(stability_category(20, 20), StabilityCategory.HEAVY_NEUTRON_POOR)
        self.assertEqual(stability_category(20, 22), StabilityCategory.HEAVY_NEUTRON_RICH)

    def test_light_boundaries(self):
        self.assertEqual(stability_category(8, 9), StabilityCategory.LIGHT_BALANCED)
        self.assertEqual(stability_category(8, 7), StabilityCategory.LIGHT_BALANCED)
        self.assertEqual(stability_category(8, 10), StabilityCategory.LIGHT_UNBALANCED)
        self.assertEqual(stability_category(1, 0), StabilityCategory.LIGHT_BALANCED)

    def test_heavy_boundary(self):
        self.assertEqual(stability_category(9, 11), StabilityCategory.HEAVY_NEUTRON_RICH)
        self.assertEqual(stability_category(9, 10), StabilityCategory.HEAVY_NEUTRON_POOR)

    def test_hint_text(self):
        self.assertEqual(stability_hint(6, 6), "light, near-equal N/Z, typical of stable light nuclei")
        self.assertEqual(stability_hint(3, 0), "light nuclide, N usually close to Z")
        self.assertEqual(
            stability_hint(12, 10),
            "heavier nucleus, stable isotopes usually need N well above Z",
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
