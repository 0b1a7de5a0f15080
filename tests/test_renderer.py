import asyncio

import jsonschema
import pytest

from linechart.draw_area import DrawSurface, HtmlFileSurface, StreamlitSurface
from linechart.errors import InvalidInputError, RendererError, SurfaceResolutionError
from linechart.renderer import (
    EMBED_OPTIONS,
    HtmlRenderer,
    StreamlitRenderer,
    default_renderer,
    render_linechart,
)


class FakeContainer:
    def __init__(self):
        self.charts = []

    def vega_lite_chart(self, **kwargs):
        self.charts.append(kwargs)


def test_render_hands_spec_and_embed_options(renderer, surface):
    data = {"values": [[{"x": 0, "y": 1}], [{"x": 0, "y": 2}]], "series": ["A", "B"]}
    assert asyncio.run(render_linechart(data, surface, {"xLabel": "Time"}, renderer=renderer)) is None

    (drawn_on, spec, embed_options), = renderer.calls
    assert drawn_on is surface
    assert embed_options == {"actions": False, "mode": "vega-lite"}
    assert [r["series"] for r in spec["data"]["values"]] == ["A", "B"]
    assert spec["layer"][0]["encoding"]["x"]["title"] == "Time"
    assert (spec["width"], spec["height"]) == (800, 500)


def test_each_call_builds_a_fresh_spec(renderer, surface):
    data = {"values": [{"x": 0, "y": 1}]}
    asyncio.run(render_linechart(data, surface, renderer=renderer))
    asyncio.run(render_linechart(data, surface, renderer=renderer))
    first, second = renderer.calls[0][1], renderer.calls[1][1]
    assert first == second
    assert first is not second


def test_errors_reach_the_caller(renderer, surface):
    with pytest.raises(InvalidInputError):
        asyncio.run(render_linechart({"values": None}, surface, renderer=renderer))
    with pytest.raises(SurfaceResolutionError):
        asyncio.run(render_linechart({"values": []}, None, renderer=renderer))
    assert renderer.calls == []


def test_renderer_failure_propagates(surface):
    class Broken:
        async def render(self, surface, spec, embed_options):
            raise RuntimeError("paint failed")

    with pytest.raises(RuntimeError, match="paint failed"):
        asyncio.run(render_linechart({"values": []}, surface, renderer=Broken()))


def test_default_renderer_follows_surface(tmp_path):
    assert isinstance(default_renderer(StreamlitSurface(1, 1, container=FakeContainer())), StreamlitRenderer)
    assert isinstance(default_renderer(HtmlFileSurface(1, 1, path=tmp_path / "c.html")), HtmlRenderer)


def test_html_page_written(tmp_path):
    out = tmp_path / "chart.html"
    data = {"values": [{"x": 0, "y": 1.5}, {"x": 1, "y": 2.5}]}
    asyncio.run(render_linechart(data, out, {"width": 400, "height": 300}))

    html = out.read_text(encoding="utf-8")
    assert "vega-embed" in html
    assert "nearestPoint" in html
    assert '"actions": false' in html


def test_html_renderer_rejects_invalid_type_tag(tmp_path):
    out = tmp_path / "chart.html"
    with pytest.raises(jsonschema.ValidationError):
        asyncio.run(render_linechart({"values": [{"x": 0, "y": 1}]}, out, {"xType": "bogus"}))
    assert not out.exists()


def test_html_renderer_needs_a_path():
    with pytest.raises(RendererError):
        asyncio.run(HtmlRenderer(open_browser=False).render(DrawSurface(1, 1), {}, EMBED_OPTIONS))


def test_html_renderer_opens_browser(tmp_path, monkeypatch):
    opened = []
    monkeypatch.setattr("linechart.renderer.webbrowser.open", opened.append)
    surface = HtmlFileSurface(10, 10, path=tmp_path / "c.html")

    asyncio.run(render_linechart({"values": []}, surface, renderer=HtmlRenderer(open_browser=True)))
    assert opened == [(tmp_path / "c.html").resolve().as_uri()]


def test_streamlit_renderer_draws_into_container():
    container = FakeContainer()
    asyncio.run(render_linechart({"values": [{"x": 0, "y": 1}]}, container))

    (chart,) = container.charts
    assert chart["width"] == "stretch"
    assert chart["spec"]["data"]["values"] == [{"x": 0, "y": 1, "series": "Series 1"}]


def test_streamlit_renderer_needs_container(surface):
    with pytest.raises(RendererError):
        asyncio.run(StreamlitRenderer().render(surface, {}, EMBED_OPTIONS))
