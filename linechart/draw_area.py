from __future__ import annotations

import os
from dataclasses import dataclass, field
from numbers import Number
from pathlib import Path
from typing import Any

from linechart.errors import SurfaceResolutionError
from linechart.settings import get_settings


@dataclass
class DrawSurface:
    client_width: Any
    client_height: Any


@dataclass
class HtmlFileSurface(DrawSurface):
    path: Path = field(default_factory=lambda: get_settings().output_html)


@dataclass
class StreamlitSurface(DrawSurface):
    container: Any = None


def get_draw_area(container) -> DrawSurface:
    """
    Resolve `container` to a surface with a measurable size.

    Accepts a DrawSurface, a file path for an HTML page, a Streamlit
    container (anything with `vega_lite_chart`), or any object exposing
    numeric `client_width` / `client_height`.
    """
    if isinstance(container, DrawSurface):
        return container

    settings = get_settings()

    if isinstance(container, (str, os.PathLike)):
        return HtmlFileSurface(
            client_width=settings.surface_width,
            client_height=settings.surface_height,
            path=Path(container),
        )

    if hasattr(container, "vega_lite_chart"):
        return StreamlitSurface(
            client_width=settings.surface_width,
            client_height=settings.surface_height,
            container=container,
        )

    width = getattr(container, "client_width", None)
    height = getattr(container, "client_height", None)
    if isinstance(width, Number) and isinstance(height, Number):
        return DrawSurface(client_width=width, client_height=height)

    raise SurfaceResolutionError(f"Cannot draw into a {type(container).__name__}")
