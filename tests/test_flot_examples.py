from __future__ import annotations

import contextlib
import io
from pathlib import Path
import tempfile
import unittest

from flot_html import AssetSources
from main import EXAMPLES, load_example, main


class ExamplePagesTests(unittest.TestCase):
    def test_every_example_builds_and_serializes(self) -> None:
        for name in EXAMPLES:
            with self.subTest(example=name):
                page = load_example(name)()
                html = page.to_html(assets=AssetSources())
                self.assertGreaterEqual(html.count("$.plot("), 1)
                self.assertEqual(html.count("$.plot("), len(page.plots))

    def test_simple_example_uses_symbols_and_escapes_text(self) -> None:
        html = load_example("simple")().to_html(assets=AssetSources())
        self.assertIn("jquery.flot.symbol.min.js", html)
        self.assertIn("&lt;bold&gt;text&lt;bold&gt;", html)
        self.assertIn('"backgroundColor":{"colors":["#FFF","#AAA"]}', html)

    def test_exchange_example_uses_time_and_second_axis(self) -> None:
        page = load_example("exchange")()
        html = page.to_html(assets=AssetSources())
        self.assertIn("jquery.flot.time.min.js", html)
        self.assertIn('"yaxes":[{"min":0},{"alignTicksWithAxis":1,"position":"right"}]', html)
        self.assertIn("plot1_options.yaxes[1].tickFormatter = ", html)

    def test_exchange_example_reads_csv(self) -> None:
        from examples.pages.exchange import build_page

        with tempfile.TemporaryDirectory() as tmp:
            rates = Path(tmp) / "rates.csv"
            oil = Path(tmp) / "oil.csv"
            rates.write_text("1,1.5\n2,1.6\n", encoding="utf-8")
            oil.write_text("1,90\n\n2,95\n", encoding="utf-8")
            page = build_page(rates, oil)
        data = page.plots[0].series[1].points
        self.assertEqual(data, [[1000.0, 90.0], [2000.0, 95.0]])

    def test_unknown_example_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            load_example("nope")


class CliTests(unittest.TestCase):
    def test_render_example_writes_html(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "bars.html"
            stdout = io.StringIO()
            with contextlib.redirect_stdout(stdout):
                code = main(["render-example", "bars", "--out", str(out), "--local-assets", "/srv/flot"])
            self.assertEqual(code, 0)
            html = out.read_text(encoding="utf-8")
        self.assertIn('src="file:///srv/flot/jquery.min.js"', html)
        self.assertIn('"barWidth":0.75', html)
        self.assertIn("plots=1", stdout.getvalue())

    def test_list_examples(self) -> None:
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            self.assertEqual(main(["list-examples"]), 0)
        self.assertEqual(stdout.getvalue().split(), list(EXAMPLES))


if __name__ == "__main__":
    unittest.main()
