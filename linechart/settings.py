from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    surface_width: int
    surface_height: int
    output_html: Path
    open_browser: bool
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        surface_width=int(os.getenv("LINECHART_SURFACE_WIDTH", "600")),
        surface_height=int(os.getenv("LINECHART_SURFACE_HEIGHT", "400")),
        output_html=Path(os.getenv("LINECHART_OUTPUT_HTML", "output_chart.html")),
        open_browser=os.getenv("LINECHART_OPEN_BROWSER", "false").strip().lower() in TRUTHY,
        log_level=os.getenv("LINECHART_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(settings: Settings | None = None):
    """
    Apply the configured level to the package logger.
    Handlers are left to the host application; a basic stream handler is
    installed only when the root logger has none.
    """
    settings = settings or get_settings()
    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("linechart").setLevel(settings.log_level)
