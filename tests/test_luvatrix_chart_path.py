from __future__ import annotations

import math
import unittest

import numpy as np

from luvatrix_chart import DEFAULT_CHART_DEFAULTS, validate_chart_defaults
from luvatrix_chart.shape import ArcTo, Close, CubicTo, LineTo, MoveTo, Path, PathBuilder
from luvatrix_chart.shape.path import polar


class PathTests(unittest.TestCase):
    def test_polar_uses_clockwise_from_twelve_oclock(self) -> None:
        x, y = polar(0.0, 0.0, 10.0, 0.0)
        self.assertAlmostEqual(x, 0.0)
        self.assertAlmostEqual(y, -10.0)
        x, y = polar(0.0, 0.0, 10.0, math.pi / 2.0)
        self.assertAlmostEqual(x, 10.0)
        self.assertAlmostEqual(y, 0.0)

    def test_builder_records_commands(self) -> None:
        builder = PathBuilder()
        builder.move_to((0, 0))
        builder.line_to((10, 0))
        builder.cubic_to((12, 0), (14, 2), (14, 4))
        builder.close()
        path = builder.build()
        self.assertEqual(
            path.commands,
            (MoveTo(0.0, 0.0), LineTo(10.0, 0.0), CubicTo(12.0, 0.0, 14.0, 2.0, 14.0, 4.0), Close()),
        )
        self.assertFalse(path.is_empty)
        self.assertTrue(Path().is_empty)

    def test_svg_serialization(self) -> None:
        builder = PathBuilder()
        builder.move_to((0.5, 1.25))
        builder.line_to((3.0, -0.00001))
        builder.close()
        self.assertEqual(builder.build().to_svg(), "M0.5,1.25L3,0Z")

    def test_svg_arc_flags(self) -> None:
        builder = PathBuilder()
        builder.move_to(polar(0, 0, 5, 0.0))
        builder.arc_to((0, 0), 5, 0.0, 1.5 * math.pi)
        svg = builder.build().to_svg()
        self.assertIn("A5,5,0,1,1,", svg)

        builder = PathBuilder()
        builder.move_to(polar(0, 0, 5, 0.0))
        builder.arc_to((0, 0), 5, 0.0, -0.5 * math.pi)
        self.assertIn("A5,5,0,0,0,-5,0", builder.build().to_svg())

    def test_arc_to_records_endpoint(self) -> None:
        builder = PathBuilder()
        builder.arc_to((1, 1), 2, 0.0, math.pi)
        cmd = builder.build().commands[0]
        self.assertIsInstance(cmd, ArcTo)
        self.assertAlmostEqual(cmd.x, 1.0)
        self.assertAlmostEqual(cmd.y, 3.0)

    def test_flatten_splits_subpaths_and_closes(self) -> None:
        builder = PathBuilder()
        builder.move_to((0, 0))
        builder.line_to((1, 0))
        builder.line_to((1, 1))
        builder.close()
        builder.move_to((5, 5))
        builder.line_to((6, 6))
        lines = builder.build().flatten()
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[0].shape, (4, 2))
        self.assertTrue(np.array_equal(lines[0][0], lines[0][-1]))
        self.assertEqual(lines[1].tolist(), [[5.0, 5.0], [6.0, 6.0]])

    def test_flatten_samples_curves(self) -> None:
        builder = PathBuilder()
        builder.move_to((0, 0))
        builder.cubic_to((0, 10), (10, 10), (10, 0))
        line = builder.build().flatten(segments=8)[0]
        self.assertEqual(line.shape, (9, 2))
        self.assertEqual(line[-1].tolist(), [10.0, 0.0])
        self.assertAlmostEqual(float(line[4][1]), 7.5)

        builder = PathBuilder()
        builder.move_to(polar(0, 0, 10, 0.0))
        builder.arc_to((0, 0), 10, 0.0, math.pi)
        arc = builder.build().flatten(segments=4)[0]
        self.assertEqual(arc.shape, (5, 2))
        self.assertTrue(np.allclose(np.hypot(arc[:, 0], arc[:, 1]), 10.0))

    def test_flatten_rejects_zero_segments(self) -> None:
        with self.assertRaises(ValueError):
            Path().flatten(segments=0)

    def test_flatten_segments_from_defaults(self) -> None:
        builder = PathBuilder()
        builder.move_to((0, 0))
        builder.cubic_to((0, 10), (10, 10), (10, 0))
        path = builder.build()
        self.assertEqual(path.flatten()[0].shape, (DEFAULT_CHART_DEFAULTS.arc_segments + 1, 2))
        defaults = validate_chart_defaults({"arc_segments": 4})
        self.assertEqual(path.flatten(defaults=defaults)[0].shape, (5, 2))


if __name__ == "__main__":
    unittest.main()
