import math
from enum import Enum
from typing import Optional

import altair as alt
import pandas as pd

SERIES_COLORS = {
    "a": "#1b4965",
    "b": "#e11d48",
}

HEAT_EMPTY = "#e5e7eb"
HEAT_START = (219, 234, 254)
HEAT_END = (30, 64, 175)
HEAT_TEXT_THRESHOLD = 0.6


class ChartType(str, Enum):
    LINE = "line"
    BAR = "bar"
    AREA = "area"
    HEAT_STRIP = "heatmap"

    @property
    def label(self):
        return CHART_LABELS[self]


CHART_LABELS = {
    ChartType.LINE: "Line (two series)",
    ChartType.BAR: "Bar (two series)",
    ChartType.AREA: "Area (two series)",
    ChartType.HEAT_STRIP: "Heat strip (per country)",
}


def _round_half_up(x):
    return int(math.floor(x + 0.5))


def heat_color(value: Optional[float], lo: float, hi: float) -> str:
    """Blue shade for a value inside [lo, hi]; grey when it cannot be placed."""
    if value is None or not math.isfinite(lo) or not math.isfinite(hi) or lo == hi:
        return HEAT_EMPTY

    t = (value - lo) / (hi - lo)
    r, g, b = (
        _round_half_up(s + (e - s) * t)
        for s, e in zip(HEAT_START, HEAT_END)
    )
    return f"rgb({r}, {g}, {b})"


def value_range(rows):
    values = [v for r in rows for v in (r.value_a, r.value_b) if v is not None]
    if not values:
        return float("nan"), float("nan")
    return min(values), max(values)


def rows_to_long(rows, country_a: str, country_b: Optional[str] = None) -> pd.DataFrame:
    """Aligned rows -> (year, country, value) records, missing values dropped."""
    records = []
    for r in rows:
        if r.value_a is not None:
            records.append({"year": r.year, "country": country_a, "value": r.value_a})
        if country_b and r.value_b is not None:
            records.append({"year": r.year, "country": country_b, "value": r.value_b})
    return pd.DataFrame(records, columns=["year", "country", "value"])


def _color_encoding(country_a, country_b):
    domain = [country_a] + ([country_b] if country_b else [])
    palette = [SERIES_COLORS["a"]] + ([SERIES_COLORS["b"]] if country_b else [])
    return alt.Color("country:N", title="Country", scale=alt.Scale(domain=domain, range=palette))


class ChartRenderer:
    """Abstract base: builds an Altair chart from aligned two-country rows.

    Subclasses set `chart_type` and implement `render`.
    """

    chart_type: ChartType = None

    def render(self, rows, country_a: str, country_b: Optional[str] = None,
               y_title: str = "value") -> alt.Chart:
        raise NotImplementedError


class LineChartRenderer(ChartRenderer):
    chart_type = ChartType.LINE

    def render(self, rows, country_a, country_b=None, y_title="value"):
        df = rows_to_long(rows, country_a, country_b)
        return alt.Chart(df).mark_line(point=True).encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("value:Q", title=y_title),
            color=_color_encoding(country_a, country_b),
            tooltip=["year:O", "country:N", "value:Q"],
        ).interactive()


class BarChartRenderer(ChartRenderer):
    chart_type = ChartType.BAR

    def render(self, rows, country_a, country_b=None, y_title="value"):
        df = rows_to_long(rows, country_a, country_b)
        return alt.Chart(df).mark_bar().encode(
            x=alt.X("year:O", title="Year"),
            xOffset="country:N",
            y=alt.Y("value:Q", title=y_title),
            color=_color_encoding(country_a, country_b),
            tooltip=["year:O", "country:N", "value:Q"],
        )


class AreaChartRenderer(ChartRenderer):
    chart_type = ChartType.AREA

    def render(self, rows, country_a, country_b=None, y_title="value"):
        df = rows_to_long(rows, country_a, country_b)
        return alt.Chart(df).mark_area(opacity=0.6, line=True).encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("value:Q", title=y_title, stack=None),
            color=_color_encoding(country_a, country_b),
            tooltip=["year:O", "country:N", "value:Q"],
        ).interactive()


class HeatStripRenderer(ChartRenderer):
    """One strip of yearly cells per country, shaded against the shared min/max."""

    chart_type = ChartType.HEAT_STRIP

    def cells(self, rows, country_a, country_b=None) -> pd.DataFrame:
        lo, hi = value_range(rows)
        sides = [("value_a", country_a)]
        if country_b:
            sides.append(("value_b", country_b))

        records = []
        for attr, country in sides:
            for r in rows:
                value = getattr(r, attr)
                dark = (
                    value is not None
                    and math.isfinite(lo)
                    and value > lo + (hi - lo) * HEAT_TEXT_THRESHOLD
                )
                records.append({
                    "year": r.year,
                    "country": country,
                    "value": value,
                    "label": "–" if value is None else f"{value:.1f}",
                    "fill": heat_color(value, lo, hi),
                    "text_color": "white" if dark else "#111827",
                })
        return pd.DataFrame(records, columns=["year", "country", "value", "label", "fill", "text_color"])

    def render(self, rows, country_a, country_b=None, y_title="value"):
        df = self.cells(rows, country_a, country_b)
        base = alt.Chart(df).encode(
            x=alt.X("year:O", title="Year"),
            y=alt.Y("country:N", title=None),
        )
        rect = base.mark_rect().encode(
            color=alt.Color("fill:N", scale=None, legend=None),
            tooltip=["year:O", "country:N", alt.Tooltip("value:Q", title=y_title)],
        )
        text = base.mark_text(fontSize=9, angle=270).encode(
            text="label:N",
            color=alt.Color("text_color:N", scale=None, legend=None),
        )
        return rect + text


RENDERERS = {
    r.chart_type: r
    for r in (LineChartRenderer(), BarChartRenderer(), AreaChartRenderer(), HeatStripRenderer())
}


def get_renderer(chart_type) -> ChartRenderer:
    return RENDERERS[ChartType(chart_type)]
