from __future__ import annotations

import argparse
import importlib
import logging
from pathlib import Path
from typing import Callable

from flot_html import AssetSources, Page


EXAMPLES = ("simple", "bars", "log_axis", "normal", "multi_plot", "exchange")


def load_example(name: str) -> Callable[[], Page]:
    if name not in EXAMPLES:
        raise ValueError(f"unknown example: {name}")
    module = importlib.import_module(f"examples.pages.{name}")
    return module.build_page


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="flot-html")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list-examples", help="List the bundled example pages.")

    render = sub.add_parser("render-example", help="Render one bundled example page to an HTML file.")
    render.add_argument("name", choices=EXAMPLES)
    render.add_argument("--out", type=Path, default=None, help="Output path. Default: <name>.html")
    render.add_argument(
        "--local-assets",
        default=None,
        help="Directory holding jquery/flot scripts; overrides the FLOT environment variable.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "list-examples":
        for name in EXAMPLES:
            print(name)
        return 0

    if args.command == "render-example":
        page = load_example(args.name)()
        out = args.out if args.out is not None else Path(f"{args.name}.html")
        assets = AssetSources.local(args.local_assets) if args.local_assets else None
        written = page.render(out, assets=assets)
        print(f"wrote {written} plots={len(page.plots)}")
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
