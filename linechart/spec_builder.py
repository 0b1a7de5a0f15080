from __future__ import annotations

import copy
import logging

import altair as alt

from linechart.options import resolve_options
from linechart.series import SERIES_FIELD, coerce_series, normalize_series

logger = logging.getLogger(__name__)

SELECTION_NAME = "nearestPoint"
PADDING = 5
AUTOSIZE = {"type": "fit", "contains": "padding", "resize": True}


# ---------------------------------------------------------
# ENCODINGS
# ---------------------------------------------------------
def build_encodings(options):
    """Shared x / y / color channels reused by the line, point and text layers."""
    return {
        "x": {"field": "x", "type": options.x_type, "title": options.x_label},
        "y": {"field": "y", "type": options.y_type, "title": options.y_label},
        "color": {"field": SERIES_FIELD, "type": "nominal"},
    }


def _selected(**kwds):
    # "empty: false" keeps the selection empty while the pointer is off the data
    return {"param": SELECTION_NAME, "empty": False, **kwds}


# ---------------------------------------------------------
# LAYERS
# ---------------------------------------------------------
def _line_layer(encodings):
    return {
        "mark": {"type": "line"},
        "encoding": copy.deepcopy(encodings),
    }


def _point_layer(encodings):
    encoding = copy.deepcopy(encodings)
    encoding["opacity"] = {"value": 0, "condition": _selected(value=1)}

    return {
        "params": [
            {
                "name": SELECTION_NAME,
                "select": {
                    "type": "point",
                    "on": "mouseover",
                    "nearest": True,
                    "encodings": ["x"],
                },
            }
        ],
        "mark": {"type": "point"},
        "encoding": encoding,
    }


def _rule_layer(options):
    return {
        "transform": [{"filter": _selected()}],
        "mark": {"type": "rule", "color": "gray"},
        "encoding": {"x": {"type": options.x_type, "field": "index"}},
    }


def _tooltip_layer(encodings, options):
    encoding = copy.deepcopy(encodings)
    # Series color would override the fixed black text
    encoding.pop("color", None)
    encoding["text"] = {"type": options.x_type, "field": "value", "format": ".6f"}

    return {
        "transform": [{"filter": _selected()}],
        "mark": {
            "type": "text",
            "align": "left",
            "dx": 5,
            "dy": -5,
            "color": "black",
        },
        "encoding": encoding,
    }


def build_layers(options):
    encodings = build_encodings(options)
    return [
        _line_layer(encodings),
        _point_layer(encodings),
        _rule_layer(options),
        _tooltip_layer(encodings, options),
    ]


# ---------------------------------------------------------
# ENTRYPOINT
# ---------------------------------------------------------
def build_linechart_spec(data, surface, opts=None) -> dict:
    """
    Assemble the layered Vega-Lite spec for an interactive line chart.

    `data` is a mapping with `values` (points, lists of points, or an
    already tagged SingleSeries / MultiSeries) and optional `series` names.
    `surface` supplies `client_width` / `client_height` for any size the
    options leave unset.
    """
    options = resolve_options(opts)
    series = coerce_series(data.get("values"), data.get("series"))
    values = [record.as_dict() for record in normalize_series(series)]

    width = options.width if options.width is not None else surface.client_width
    height = options.height if options.height is not None else surface.client_height
    logger.debug("Chart size %sx%s for %d records", width, height, len(values))

    return {
        "$schema": alt.SCHEMA_URL,
        "width": width,
        "height": height,
        "padding": PADDING,
        "autosize": dict(AUTOSIZE),
        "data": {"values": values},
        "layer": build_layers(options),
    }
