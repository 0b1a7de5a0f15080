from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

DEFAULT_OPTIONS = {
    "x_label": "Index",
    "y_label": "Value",
    "x_type": "quantitative",
    "y_type": "quantitative",
    "width": None,
    "height": None,
}

# Caller-facing keys keep the camelCase names used by chart options elsewhere.
OPTION_ALIASES = {
    "xLabel": "x_label",
    "yLabel": "y_label",
    "xType": "x_type",
    "yType": "y_type",
    "width": "width",
    "height": "height",
}


@dataclass(frozen=True)
class RenderOptions:
    x_label: Any = DEFAULT_OPTIONS["x_label"]
    y_label: Any = DEFAULT_OPTIONS["y_label"]
    x_type: Any = DEFAULT_OPTIONS["x_type"]
    y_type: Any = DEFAULT_OPTIONS["y_type"]
    width: Optional[Any] = None
    height: Optional[Any] = None


def resolve_options(opts: Optional[Mapping[str, Any] | RenderOptions] = None) -> RenderOptions:
    """
    Merge caller options over the defaults.

    Keys that are absent or None keep their default. Every other value,
    falsy ones included, is taken verbatim: type tags and sizes are not
    checked here, the renderer rejects what it cannot draw.
    """
    if opts is None:
        return RenderOptions()
    if isinstance(opts, RenderOptions):
        return opts

    overrides = {}
    for key, value in opts.items():
        field = OPTION_ALIASES.get(key, key if key in DEFAULT_OPTIONS else None)
        if field is None or value is None:
            continue
        overrides[field] = value

    return replace(RenderOptions(), **overrides)
