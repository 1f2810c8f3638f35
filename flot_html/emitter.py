from __future__ import annotations

import html
from typing import Sequence

from flot_html.assets import BASE_SCRIPT, FLOT_SCRIPT, SYMBOL_SCRIPT, TIME_SCRIPT, AssetSources
from flot_html.plot import Plot


DEFAULT_DOCUMENT_TITLE = "Flot"


def script_tag(src: str) -> str:
    return f'<script language="javascript" type="text/javascript" src="{html.escape(src)}"></script>'


def render_head(title: str, plots: Sequence[Plot], assets: AssetSources) -> str:
    tags = [script_tag(assets.base(BASE_SCRIPT)), script_tag(assets.flot(FLOT_SCRIPT))]
    if any(p.time for p in plots):
        tags.append(script_tag(assets.flot(TIME_SCRIPT)))
    if any(p.symbols for p in plots):
        tags.append(script_tag(assets.flot(SYMBOL_SCRIPT)))
    return (
        "<html>\n"
        " <head>\n"
        '    <meta http-equiv="Content-Type" content="text/html; charset=utf-8">\n'
        f"    <title>{html.escape(title or DEFAULT_DOCUMENT_TITLE)}</title>\n"
        + "".join(tag + "\n" for tag in tags)
        + "</head>\n"
    )


def render_body(title: str, plots: Sequence[Plot]) -> str:
    parts = ["<body>\n"]
    if title:
        parts.append(f"<h1>{html.escape(title)}</h1>\n")
    for plot in plots:
        parts.append(plot.render_placeholder())
    parts.append('<script type="text/javascript">\n$(function () {\n')
    for plot in plots:
        parts.append(plot.render_script())
    parts.append("});\n</script>\n</body>\n</html>\n")
    return "".join(parts)


def render_document(title: str, plots: Sequence[Plot], assets: AssetSources) -> str:
    return render_head(title, plots, assets) + render_body(title, plots)
