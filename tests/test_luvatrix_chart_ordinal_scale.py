from __future__ import annotations

import unittest

from luvatrix_chart import OrdinalScale


class OrdinalScaleTests(unittest.TestCase):
    def test_range_wraps_around(self) -> None:
        scale = OrdinalScale(domain=("A", "B", "C", "D"), range=("r0", "r1"))
        self.assertEqual([scale.get(v) for v in "ABCD"], ["r0", "r1", "r0", "r1"])
        self.assertEqual(scale.tick("C"), "r0")

    def test_palette_cycling_is_deterministic(self) -> None:
        palette = ("#1f77b4", "#ff7f0e", "#2ca02c")
        scale = OrdinalScale(domain=tuple(range(7)), range=palette)
        self.assertEqual([scale.get(i) for i in range(7)], [palette[i % 3] for i in range(7)])
        self.assertEqual(scale.get(6), OrdinalScale(domain=tuple(range(7)), range=palette).get(6))

    def test_unknown_values(self) -> None:
        scale = OrdinalScale(domain=("a",), range=(1,))
        self.assertIsNone(scale.get("z"))
        self.assertIsNone(scale.get(["a"]))  # type: ignore[arg-type]
        fallback = scale.with_unknown(-1)
        self.assertEqual(fallback.get("z"), -1)
        self.assertEqual(fallback.get("a"), 1)
        self.assertIsNone(scale.unknown)

    def test_empty_range_returns_none(self) -> None:
        scale = OrdinalScale(domain=("a", "b"), range=(), unknown="?")
        self.assertIsNone(scale.get("a"))
        self.assertEqual(scale.get("c"), "?")

    def test_duplicate_domain_keeps_first_position(self) -> None:
        scale = OrdinalScale(domain=("a", "b", "a"), range=("x", "y", "z"))
        self.assertEqual(scale.get("a"), "x")

    def test_least_index_defaults(self) -> None:
        scale = OrdinalScale(domain=("a", "b"), range=(1, 2))
        self.assertEqual(scale.least_index(10.0), 0)
        self.assertEqual(scale.least_index_with_domain(10.0, ["a", "b"]), (0, 0.0))


if __name__ == "__main__":
    unittest.main()
