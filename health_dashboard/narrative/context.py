from dataclasses import dataclass, field
from typing import List, Optional

import pandas as pd

from health_dashboard.analytics.trends import (
    ComparisonResult,
    Relation,
    TrendResult,
    classify_trend,
    compare,
    latest_year_phrase,
)
from health_dashboard.data.series import (
    AlignedRow,
    SeriesPoint,
    align_series,
    series_from_rows,
)
from health_dashboard.state import DashboardState


@dataclass(frozen=True)
class NarrativeContext:
    """Everything the text renderers need for one selection."""

    indicator: str
    country_a: str
    country_b: Optional[str] = None
    generated: bool = False
    rows: List[AlignedRow] = field(default_factory=list)
    series_a: List[SeriesPoint] = field(default_factory=list)
    series_b: List[SeriesPoint] = field(default_factory=list)
    trend_a: Optional[TrendResult] = None
    trend_b: Optional[TrendResult] = None
    comparison: Optional[ComparisonResult] = None

    @property
    def has_data(self) -> bool:
        return self.generated and len(self.rows) > 0

    @property
    def has_trend(self) -> bool:
        return self.has_data and self.trend_a is not None

    @property
    def has_comparison(self) -> bool:
        return self.trend_b is not None and self.comparison is not None and bool(self.country_b)

    def comparison_sentence(self) -> str:
        if not self.has_comparison:
            return ""
        if self.comparison.relation is Relation.SIMILAR:
            return f"{self.country_a} and {self.country_b} are very similar in the latest year."
        return latest_year_phrase(self.comparison, self.country_a, self.country_b) + "."


def context_from_rows(indicator: str, country_a: str, country_b: Optional[str],
                      rows: List[AlignedRow], generated: bool = True) -> NarrativeContext:
    country_b = country_b or None
    if not generated:
        rows = []

    series_a = series_from_rows(rows, "a")
    series_b = series_from_rows(rows, "b") if country_b else []

    trend_a = classify_trend(series_a) if rows else None
    trend_b = classify_trend(series_b) if trend_a is not None else None
    comparison = compare(trend_a, trend_b, country_a, country_b)

    return NarrativeContext(
        indicator=indicator,
        country_a=country_a,
        country_b=country_b,
        generated=generated,
        rows=rows,
        series_a=series_a,
        series_b=series_b,
        trend_a=trend_a,
        trend_b=trend_b,
        comparison=comparison,
    )


def build_context(state: DashboardState, table: pd.DataFrame) -> NarrativeContext:
    """Derive rows, series, trends and comparison for the current selection.

    Nothing is looked up until the dashboard has been generated.
    """
    rows = []
    if state.generated:
        rows = align_series(table, state.indicator, state.country_a, state.country_b)
    return context_from_rows(state.indicator, state.country_a, state.country_b, rows, state.generated)
