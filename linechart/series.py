from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import pandas as pd

from linechart.errors import InvalidInputError

logger = logging.getLogger(__name__)

SERIES_FIELD = "series"
MISSING = object()
GROUP_KEY = "__series_key__"


# ---------------------------------------------------------
# INPUT SHAPES
# ---------------------------------------------------------
@dataclass
class SingleSeries:
    points: Sequence[Mapping[str, Any]]
    names: Optional[Sequence[Optional[str]]] = None

    def series_list(self):
        return [self.points]


@dataclass
class MultiSeries:
    series: Sequence[Sequence[Mapping[str, Any]]]
    names: Optional[Sequence[Optional[str]]] = None

    def series_list(self):
        return list(self.series)


SeriesInput = Union[SingleSeries, MultiSeries]


@dataclass
class RenderRecord:
    """One point tagged with the name of the series it belongs to."""

    series: str
    x: Any = MISSING
    y: Any = MISSING
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_point(cls, point: Mapping[str, Any], series: str) -> "RenderRecord":
        extra = {k: v for k, v in point.items() if k not in ("x", "y", SERIES_FIELD)}
        return cls(
            series=series,
            x=point.get("x", MISSING),
            y=point.get("y", MISSING),
            extra=extra,
        )

    def as_dict(self) -> Dict[str, Any]:
        row = {}
        if self.x is not MISSING:
            row["x"] = self.x
        if self.y is not MISSING:
            row["y"] = self.y
        row.update(self.extra)
        row[SERIES_FIELD] = self.series
        return row


# ---------------------------------------------------------
# SHAPE DETECTION
# ---------------------------------------------------------
def _is_point_sequence(value) -> bool:
    return isinstance(value, (list, tuple))


def coerce_series(values, names: Optional[Sequence[Optional[str]]] = None) -> SeriesInput:
    """
    Turn raw `values` into a SingleSeries or MultiSeries.

    A list whose first element is itself a list/tuple holds one list of points
    per series; anything else is a single series. An empty list is read as one
    empty series.
    """
    if isinstance(values, (SingleSeries, MultiSeries)):
        if values.names is None and names is not None:
            return replace(values, names=names)
        return values

    if values is None:
        raise InvalidInputError("data.values must not be null")
    if isinstance(values, pd.DataFrame):
        series = series_from_frame(values)
        series.names = names
        return series
    if isinstance(values, (str, bytes, Mapping)) or not hasattr(values, "__iter__"):
        raise InvalidInputError(f"data.values must be a sequence, got {type(values).__name__}")

    values = list(values)
    if values and _is_point_sequence(values[0]):
        logger.debug("Detected %d series", len(values))
        return MultiSeries(series=values, names=names)

    logger.debug("Detected a single series of %d points", len(values))
    return SingleSeries(points=values, names=names)


# ---------------------------------------------------------
# NORMALIZATION
# ---------------------------------------------------------
def series_name(names: Optional[Sequence[Optional[str]]], i: int) -> str:
    if names is not None and i < len(names) and names[i] is not None:
        return names[i]
    return f"Series {i + 1}"


def normalize_series(series: SeriesInput) -> List[RenderRecord]:
    records = []
    for i, points in enumerate(series.series_list()):
        name = series_name(series.names, i)
        records.extend(RenderRecord.from_point(p, name) for p in points)

    logger.debug("Normalized %d records", len(records))
    return records


# ---------------------------------------------------------
# TABULAR INPUT
# ---------------------------------------------------------
def series_from_frame(df: pd.DataFrame, x: str = "x", y: str = "y", by: Optional[str] = None) -> SeriesInput:
    """
    Build series from a DataFrame.

    Columns `x` and `y` become the point coordinates; every other column is
    carried along. With `by`, rows are split into one series per distinct
    value, in order of first appearance, and the value names the series.
    Datetime columns are written as ISO strings so the spec stays JSON.
    """
    required = [x, y] + ([by] if by else [])
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise InvalidInputError(f"Columns not found in table: {', '.join(missing)}")
    if x == y:
        raise InvalidInputError(f"Column '{x}' cannot be both the x and the y axis")
    if by in (x, y):
        raise InvalidInputError(f"Series column '{by}' cannot also be an axis column")

    # Split key moves out of the way before stray "x" / "y" columns are dropped
    frame = df.rename(columns={by: GROUP_KEY}) if by else df
    frame = frame.drop(columns=[c for c in ("x", "y") if c in frame.columns and c not in (x, y)])
    frame = frame.rename(columns={x: "x", y: "y"})

    for col in frame.select_dtypes(include=["datetime", "datetimetz"]).columns:
        frame[col] = frame[col].dt.strftime("%Y-%m-%dT%H:%M:%S")

    if by is None:
        return SingleSeries(points=frame.to_dict(orient="records"))

    series, names = [], []
    for i, (value, group) in enumerate(frame.groupby(GROUP_KEY, sort=False, dropna=False)):
        series.append(group.drop(columns=[GROUP_KEY]).to_dict(orient="records"))
        names.append(f"Series {i + 1}" if pd.isna(value) else str(value))

    logger.debug("Split table into %d series on '%s'", len(series), by)
    return MultiSeries(series=series, names=names)


def records_to_frame(records: Sequence[RenderRecord]) -> pd.DataFrame:
    return pd.DataFrame([r.as_dict() for r in records])
