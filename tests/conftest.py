import pytest

from linechart.draw_area import DrawSurface
from linechart.settings import get_settings


class CapturingRenderer:
    """Stands in for vega-embed: keeps what it was asked to draw."""

    def __init__(self):
        self.calls = []

    async def render(self, surface, spec, embed_options):
        self.calls.append((surface, spec, embed_options))


@pytest.fixture
def renderer():
    return CapturingRenderer()


@pytest.fixture
def surface():
    return DrawSurface(client_width=800, client_height=500)


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("LINECHART_SURFACE_WIDTH", "LINECHART_SURFACE_HEIGHT", "LINECHART_OUTPUT_HTML",
                 "LINECHART_OPEN_BROWSER", "LINECHART_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
