import asyncio

import numpy as np
import pandas as pd

from linechart.renderer import render_linechart
from linechart.series import series_from_frame
from linechart.settings import configure_logging, get_settings

SERIES_NAMES = ["glucose_level", "heart_rate", "temperature", "oxygen_saturation", "cholesterol"]


def load_synthetic_series(n_series: int = 3, n_points: int = 50, seed=None) -> pd.DataFrame:
    """
    Random-walk demo data: one row per point with `x`, `y` and `series`.
    Series are named after clinical metrics, then "metric_<n>" past the list.
    """
    rng = np.random.default_rng(seed)

    frames = []
    for i in range(n_series):
        name = SERIES_NAMES[i] if i < len(SERIES_NAMES) else f"metric_{i + 1}"

        # -----------------------------------------
        # Walk starts at a per-series level so lines do not overlap
        # -----------------------------------------
        start = 100 + 20 * i
        steps = rng.normal(0, 1, size=n_points)

        frames.append(pd.DataFrame({
            "x": np.arange(n_points),
            "y": start + np.cumsum(steps),
            "series": name,
        }))

    if not frames:
        return pd.DataFrame({"x": [], "y": [], "series": []})

    return pd.concat(frames, ignore_index=True)


def main():
    configure_logging()
    settings = get_settings()

    df = load_synthetic_series()
    series = series_from_frame(df, by="series")
    asyncio.run(render_linechart({"values": series}, settings.output_html, {"xLabel": "Reading"}))


if __name__ == "__main__":
    main()
