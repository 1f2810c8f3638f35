from __future__ import annotations

import json
import unittest

from flot_html import KindMismatchError, Page, SeriesKind


class SeriesBuilderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.plot = Page().plot()

    def test_points_serialize_in_order(self) -> None:
        series = self.plot.lines("lines", [(0, 1), (1, 4.5)])
        payload = json.loads(series.to_json())
        self.assertEqual(payload["data"], [[0, 1], [1, 4.5]])
        self.assertIn('"data":[[0,1],[1,4.5]]', series.to_json())

    def test_kind_options_are_namespaced(self) -> None:
        series = self.plot.lines("l", [(0, 0)]).fill(0.3).line_width(0).color("green").yaxis(2)
        payload = json.loads(series.to_json())
        self.assertEqual(payload["lines"], {"show": True, "fill": 0.3, "lineWidth": 0})
        self.assertEqual(payload["color"], "green")
        self.assertEqual(payload["yaxis"], 2)
        self.assertEqual(series.kind, SeriesKind.LINES)

    def test_cross_kind_options_use_flot_keys(self) -> None:
        series = self.plot.lines("l", [(0, 0)]).shadow_size(3).highlight_color("#f00")
        self.assertEqual(series.option("shadowSize"), 3)
        self.assertEqual(series.option("highlightColor"), "#f00")
        self.assertNotIn("shadowSize", series.option("lines"))

    def test_fill_options_follow_the_series_kind(self) -> None:
        pts = self.plot.points("p", [(0, 0)]).fill(0.5).fill_color("#0f0").line_width(2)
        bar = self.plot.bars("b", [(0, 0)]).fill(1).fill_color("#00f").line_width(1)
        self.assertEqual(
            json.loads(pts.to_json())["points"],
            {"show": True, "fill": 0.5, "fillColor": "#0f0", "lineWidth": 2},
        )
        self.assertEqual(
            json.loads(bar.to_json())["bars"],
            {"show": True, "fill": 1, "fillColor": "#00f", "lineWidth": 1},
        )
        for series in (pts, bar):
            payload = series.to_dict()
            self.assertNotIn("fill", payload)
            self.assertNotIn("lines", payload)

    def test_points_returns_a_copy(self) -> None:
        series = self.plot.lines("l", [(0, 1)])
        series.points.append([5.0, 5.0])
        series.points[0][1] = 9.0
        self.assertEqual(series.points, [[0.0, 1.0]])
        self.assertIn('"data":[[0,1]]', series.to_json())

    def test_empty_label_is_omitted(self) -> None:
        series = self.plot.points("", [(0, 0)])
        self.assertNotIn("label", json.loads(series.to_json()))
        self.assertIsNone(series.label_text)
        series.label("named")
        self.assertEqual(series.label_text, "named")
        series.label(None)
        self.assertNotIn("label", json.loads(series.to_json()))

    def test_radius_on_non_points_is_rejected_without_mutation(self) -> None:
        for series in (self.plot.lines("l", [(0, 0)]), self.plot.bars("b", [(0, 0)])):
            before = series.to_json()
            with self.assertRaises(KindMismatchError) as ctx:
                series.radius(10)
            self.assertEqual(ctx.exception.operation, "radius")
            self.assertEqual(ctx.exception.kind, series.kind.value)
            self.assertEqual(ctx.exception.allowed, ("points",))
            self.assertIn("radius", str(ctx.exception))
            self.assertEqual(series.to_json(), before)

    def test_kind_specific_operations(self) -> None:
        pts = self.plot.points("p", [(0, 0)]).symbol("cross").radius(10)
        self.assertEqual(json.loads(pts.to_json())["points"], {"show": True, "symbol": "cross", "radius": 10})
        self.assertTrue(pts.symbols)
        self.assertTrue(self.plot.symbols)

        line = self.plot.lines("l", [(0, 0)]).steps()
        self.assertTrue(json.loads(line.to_json())["lines"]["steps"])

        bar = self.plot.bars("b", [(0, 0)]).width(0.75).align("center").horizontal()
        self.assertEqual(
            json.loads(bar.to_json())["bars"],
            {"show": True, "barWidth": 0.75, "align": "center", "horizontal": True},
        )

    def test_steps_and_width_reject_other_kinds(self) -> None:
        with self.assertRaises(KindMismatchError):
            self.plot.points("p", [(0, 0)]).steps()
        with self.assertRaises(KindMismatchError):
            self.plot.lines("l", [(0, 0)]).width(0.5)
        with self.assertRaises(KindMismatchError):
            self.plot.bars("b", [(0, 0)]).symbol("circle")
        self.assertFalse(self.plot.symbols)

    def test_invalid_axis_number(self) -> None:
        with self.assertRaises(ValueError):
            self.plot.lines("l", [(0, 0)]).xaxis(0)


if __name__ == "__main__":
    unittest.main()
