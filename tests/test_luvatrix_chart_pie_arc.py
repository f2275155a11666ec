from __future__ import annotations

import math
import unittest

from luvatrix_chart import Arc, ArcData, ChartConfigError, Pie, validate_chart_defaults
from luvatrix_chart.shape import ArcTo, Close, LineTo, MoveTo

TAU = 2.0 * math.pi


class PieTests(unittest.TestCase):
    def test_spans_are_proportional_and_contiguous(self) -> None:
        arcs = Pie().arcs([1, 1, 2])
        self.assertEqual([a.index for a in arcs], [0, 1, 2])
        self.assertAlmostEqual(arcs[0].span, math.pi / 2.0)
        self.assertAlmostEqual(arcs[2].span, math.pi)
        self.assertEqual(arcs[0].start_angle, 0.0)
        self.assertEqual(arcs[1].start_angle, arcs[0].end_angle)
        self.assertAlmostEqual(arcs[2].end_angle, TAU)

    def test_pad_angle_and_zero_slices(self) -> None:
        pad = 0.1
        arcs = Pie(pad_angle=pad).arcs([1, 0, 3])
        self.assertEqual(len(arcs), 3)
        self.assertAlmostEqual(sum(a.span for a in arcs), TAU - 3 * pad)
        self.assertEqual(arcs[1].span, 0.0)
        self.assertAlmostEqual(arcs[1].start_angle, arcs[0].end_angle + pad)
        self.assertAlmostEqual(arcs[2].start_angle, arcs[1].end_angle + pad)
        self.assertTrue(all(a.pad_angle == pad for a in arcs))

    def test_pad_angle_is_capped(self) -> None:
        arcs = Pie(pad_angle=10.0).arcs([1, 1])
        self.assertTrue(all(a.pad_angle == math.pi for a in arcs))
        self.assertTrue(all(abs(a.span) < 1e-12 for a in arcs))

    def test_sort_changes_layout_not_output_order(self) -> None:
        arcs = Pie(sort=lambda v: v).arcs([3, 1])
        self.assertEqual([a.value for a in arcs], [3.0, 1.0])
        self.assertEqual(arcs[1].start_angle, 0.0)
        self.assertEqual(arcs[0].start_angle, arcs[1].end_angle)

        arcs = Pie(sort=lambda v: v, reverse=True).arcs([1, 3])
        self.assertEqual(arcs[1].start_angle, 0.0)

    def test_reverse_without_sort_flips_input_order(self) -> None:
        arcs = Pie(reverse=True).arcs([1, 2, 1])
        self.assertEqual([a.index for a in arcs], [0, 1, 2])
        self.assertEqual(arcs[2].start_angle, 0.0)
        self.assertEqual(arcs[1].start_angle, arcs[2].end_angle)
        self.assertEqual(arcs[0].start_angle, arcs[1].end_angle)

    def test_start_angle_from_defaults(self) -> None:
        defaults = validate_chart_defaults({"pie_start_angle": math.pi})
        arcs = Pie(defaults=defaults).arcs([1, 1])
        self.assertEqual(arcs[0].start_angle, math.pi)
        self.assertAlmostEqual(arcs[1].end_angle, math.pi + TAU)
        self.assertEqual(Pie(start_angle=0.5, defaults=defaults).arcs([1])[0].start_angle, 0.5)

    def test_bad_values_count_as_zero(self) -> None:
        with self.assertLogs("luvatrix_chart.shape.pie", level="WARNING") as logs:
            arcs = Pie().arcs([2, -1, float("nan"), "x", 2])
        self.assertEqual(len(logs.records), 3)
        self.assertEqual([a.value for a in arcs], [2.0, 0.0, 0.0, 0.0, 2.0])
        self.assertAlmostEqual(arcs[0].span, math.pi)

    def test_zero_total(self) -> None:
        with self.assertLogs("luvatrix_chart.shape.pie", level="DEBUG"):
            arcs = Pie().arcs([0, 0])
        self.assertEqual([a.span for a in arcs], [0.0, 0.0])

    def test_record_values_and_accessor(self) -> None:
        arcs = Pie().arcs([{"value": 1}, ("b", 3)])
        self.assertEqual([a.value for a in arcs], [1.0, 3.0])
        arcs = Pie(value=lambda d: d["n"]).arcs([{"n": 2}, {"n": 2}])
        self.assertAlmostEqual(arcs[1].span, math.pi)

    def test_partial_and_counter_clockwise_sweeps(self) -> None:
        arcs = Pie(end_angle=math.pi).arcs([1, 1])
        self.assertAlmostEqual(arcs[1].end_angle, math.pi)

        arcs = Pie(end_angle=-TAU).arcs([1, 3])
        self.assertAlmostEqual(arcs[0].span, -math.pi / 2.0)
        self.assertAlmostEqual(arcs[1].end_angle, -TAU)

    def test_empty_and_invalid(self) -> None:
        self.assertEqual(Pie().arcs([]), [])
        with self.assertRaises(ChartConfigError):
            Pie(pad_angle=-0.1)
        with self.assertRaises(ChartConfigError):
            Pie(start_angle=float("inf"))


def _slice(start: float, end: float, index: int = 0) -> ArcData[None]:
    return ArcData(data=None, index=index, value=1.0, start_angle=start, end_angle=end)


class ArcTests(unittest.TestCase):
    def test_quarter_pie_slice_svg(self) -> None:
        path = Arc(outer_radius=10.0).path(_slice(0.0, math.pi / 2.0))
        self.assertEqual(path.to_svg(), "M0,-10A10,10,0,0,1,10,0L0,0Z")

    def test_donut_segment_commands(self) -> None:
        path = Arc(outer_radius=10.0, inner_radius=5.0).path(_slice(0.0, math.pi / 2.0), center=(50.0, 50.0))
        kinds = [type(c) for c in path.commands]
        self.assertEqual(kinds, [MoveTo, ArcTo, LineTo, ArcTo, Close])
        inner = path.commands[3]
        assert isinstance(inner, ArcTo)
        self.assertEqual((inner.start_angle, inner.end_angle), (math.pi / 2.0, 0.0))
        self.assertAlmostEqual(inner.x, 50.0)
        self.assertAlmostEqual(inner.y, 45.0)

    def test_zero_width_and_zero_span_are_empty(self) -> None:
        ring = Arc(outer_radius=10.0, inner_radius=10.0)
        self.assertTrue(ring.path(_slice(0.0, 1.0)).is_empty)
        self.assertEqual(ring.area(_slice(0.0, 1.0)), 0.0)
        self.assertTrue(Arc(outer_radius=10.0).path(_slice(1.0, 1.0)).is_empty)
        self.assertTrue(Arc(outer_radius=0.0).path(_slice(0.0, 1.0)).is_empty)

    def test_full_circle_splits_arc(self) -> None:
        path = Arc(outer_radius=10.0, inner_radius=4.0).path(_slice(0.0, TAU))
        arcs = [c for c in path.commands if isinstance(c, ArcTo)]
        self.assertEqual(len(arcs), 4)
        outline = path.flatten(segments=8)[0]
        self.assertAlmostEqual(float(outline[0][0]), float(outline[-1][0]))

    def test_per_call_radius_override(self) -> None:
        arc = Arc(outer_radius=10.0)
        path = arc.path(_slice(0.0, math.pi / 2.0), outer_radius=20.0)
        self.assertEqual(path.to_svg(), "M0,-20A20,20,0,0,1,20,0L0,0Z")
        with self.assertRaises(ChartConfigError):
            arc.path(_slice(0.0, 1.0), inner_radius=30.0)

    def test_centroid_and_area(self) -> None:
        arc = Arc(outer_radius=10.0, inner_radius=6.0)
        x, y = arc.centroid(_slice(0.0, math.pi))
        self.assertAlmostEqual(x, 8.0)
        self.assertAlmostEqual(y, 0.0)
        self.assertAlmostEqual(arc.area(_slice(0.0, math.pi)), 0.5 * math.pi * (100.0 - 36.0))

    def test_hit_testing(self) -> None:
        arcs = Pie().arcs([1, 1])
        arc = Arc(outer_radius=10.0)
        self.assertEqual(arc.hit_test(arcs, (5.0, 0.0)), 0)
        self.assertEqual(arc.hit_test(arcs, (-5.0, 1.0)), 1)
        self.assertIsNone(arc.hit_test(arcs, (20.0, 0.0)))
        self.assertEqual(arc.hit_test(arcs, (105.0, 100.0), center=(100.0, 100.0)), 0)

    def test_invalid_radii(self) -> None:
        with self.assertRaises(ChartConfigError):
            Arc(outer_radius=5.0, inner_radius=10.0)
        with self.assertRaises(ChartConfigError):
            Arc(outer_radius=-1.0)
        with self.assertRaises(ChartConfigError):
            Arc(outer_radius=float("nan"))


if __name__ == "__main__":
    unittest.main()
