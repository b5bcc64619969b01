from __future__ import annotations

import math
import unittest

from ui_modifiers.geometry import BOTTOM_RIGHT, CENTER, TOP_LEFT, BoxConstraints, EdgeInsets, Offset, Size


class GeometryTests(unittest.TestCase):
    def test_edge_insets_helpers(self) -> None:
        self.assertEqual(EdgeInsets.all(2.0), EdgeInsets(2.0, 2.0, 2.0, 2.0))
        sym = EdgeInsets.symmetric(horizontal=3.0, vertical=1.0)
        self.assertEqual((sym.horizontal, sym.vertical), (6.0, 2.0))
        self.assertFalse(EdgeInsets(bottom=-1.0).is_non_negative)

    def test_alignment_resolves_against_size(self) -> None:
        size = Size(200, 100)
        self.assertEqual(CENTER.along_size(size), Offset(100, 50))
        self.assertEqual(TOP_LEFT.along_size(size), Offset(0, 0))
        self.assertEqual(BOTTOM_RIGHT.along_size(size), Offset(200, 100))

    def test_box_constraints_defaults_unbounded(self) -> None:
        constraints = BoxConstraints()
        self.assertEqual(constraints.min_width, 0.0)
        self.assertTrue(math.isinf(constraints.max_height))
        self.assertFalse(constraints.is_tight)
        self.assertTrue(BoxConstraints.tight(Size(4, 5)).is_tight)
        self.assertEqual(BoxConstraints.loose(Size(4, 5)).max_width, 4)

    def test_box_constraints_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "must not exceed"):
            BoxConstraints(min_width=10, max_width=5)
        with self.assertRaisesRegex(ValueError, ">= 0"):
            BoxConstraints(min_height=-1)

    def test_offset_addition(self) -> None:
        self.assertEqual(Offset(1, 2) + Offset(3, 4), Offset(4, 6))


if __name__ == "__main__":
    unittest.main()
