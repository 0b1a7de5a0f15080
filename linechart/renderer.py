from __future__ import annotations

import asyncio
import logging
import webbrowser
from typing import Any, Dict, Mapping, Optional, Protocol

import altair as alt
from altair.utils.html import spec_to_html

from linechart.draw_area import DrawSurface, StreamlitSurface, get_draw_area
from linechart.errors import RendererError
from linechart.settings import get_settings
from linechart.spec_builder import build_linechart_spec

logger = logging.getLogger(__name__)

EMBED_OPTIONS = {
    "actions": False,
    "mode": "vega-lite",
}


class ChartRenderer(Protocol):
    async def render(self, surface: DrawSurface, spec: Dict[str, Any], embed_options: Mapping[str, Any]) -> None:
        """Draw `spec` onto `surface`; completes once the chart is on screen."""
        ...


# ---------------------------------------------------------
# HTML PAGE
# ---------------------------------------------------------
class HtmlRenderer:
    """
    Writes the chart as a standalone HTML page using vega-embed.
    The spec is checked against the Vega-Lite schema first; schema errors
    are raised as Altair reports them.
    """

    def __init__(self, open_browser: Optional[bool] = None):
        self.open_browser = get_settings().open_browser if open_browser is None else open_browser

    async def render(self, surface, spec, embed_options):
        path = getattr(surface, "path", None)
        if path is None:
            raise RendererError("HtmlRenderer needs a surface with an output path")

        alt.TopLevelLayerSpec.from_dict(spec)

        options = dict(embed_options)
        html = spec_to_html(
            spec,
            mode=options.pop("mode", "vega-lite"),
            vega_version=alt.VEGA_VERSION,
            vegaembed_version=alt.VEGAEMBED_VERSION,
            vegalite_version=alt.VEGALITE_VERSION,
            embed_options=options,
        )
        await asyncio.to_thread(path.write_text, html, encoding="utf-8")
        logger.info("Wrote line chart to %s", path)

        if self.open_browser:
            webbrowser.open(path.resolve().as_uri())


# ---------------------------------------------------------
# STREAMLIT CONTAINER
# ---------------------------------------------------------
class StreamlitRenderer:
    """Draws into a Streamlit container; the page supplies its own embed chrome."""

    async def render(self, surface, spec, embed_options):
        if not isinstance(surface, StreamlitSurface):
            raise RendererError("StreamlitRenderer needs a Streamlit container")

        surface.container.vega_lite_chart(spec=spec, width="stretch", theme=None)
        logger.info("Drew line chart with %d records", len(spec["data"]["values"]))


def default_renderer(surface) -> ChartRenderer:
    if isinstance(surface, StreamlitSurface):
        return StreamlitRenderer()
    return HtmlRenderer()


# ---------------------------------------------------------
# ENTRYPOINT
# ---------------------------------------------------------
async def render_linechart(data, container, opts=None, renderer: Optional[ChartRenderer] = None) -> None:
    """
    Renders a line chart

    data: {"values": [...], "series": [...]}
        values is a list of points with `x` and `y` keys for one series, or a
        list of such lists, one per series. series optionally names them.
    container: where to draw (see `get_draw_area`)
    opts: width, height, xLabel, yLabel, xType, yType
    """
    surface = get_draw_area(container)
    spec = build_linechart_spec(data, surface, opts)

    renderer = renderer or default_renderer(surface)
    await renderer.render(surface, spec, dict(EMBED_OPTIONS))
