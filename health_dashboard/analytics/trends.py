"""
trends.py
---------
Endpoint trend classification and latest-year comparison.

The trend only looks at the first and last observed points of a series
(delta = last - first); it is not a fitted slope. A series that dips in the
middle and recovers reads as "stable". This is a known limitation of the
heuristic and the text built on top of it depends on exactly this definition.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from health_dashboard.data.series import SeriesPoint

# Deadbands (policy constants)
TREND_DEADBAND = 0.5
COMPARISON_DEADBAND = 0.25


class Trend(str, Enum):
    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class Relation(str, Enum):
    SIMILAR = "similar"
    A_HIGHER = "A-higher"
    B_HIGHER = "B-higher"


# Wording used in prose
TREND_WORDS = {
    Trend.INCREASING: "increasing",
    Trend.DECREASING: "decreasing",
    Trend.STABLE: "relatively stable",
}


@dataclass(frozen=True)
class TrendResult:
    first: float
    last: float
    delta: float
    classification: Trend

    @property
    def word(self) -> str:
        return TREND_WORDS[self.classification]


@dataclass(frozen=True)
class ComparisonResult:
    gap: float
    relation: Relation


def classify_delta(delta: float) -> Trend:
    if delta > TREND_DEADBAND:
        return Trend.INCREASING
    if delta < -TREND_DEADBAND:
        return Trend.DECREASING
    return Trend.STABLE


def classify_trend(series: List[SeriesPoint]) -> Optional[TrendResult]:
    """Trend for a series, or None ("no trend available") when it is empty."""
    if not series:
        return None

    first = series[0].value
    last = series[-1].value
    delta = last - first
    return TrendResult(first=first, last=last, delta=delta, classification=classify_delta(delta))


def classify_gap(gap: float) -> Relation:
    if abs(gap) < COMPARISON_DEADBAND:
        return Relation.SIMILAR
    if gap > 0:
        return Relation.A_HIGHER
    return Relation.B_HIGHER


def compare(trend_a: TrendResult, trend_b: Optional[TrendResult],
            country_a: str, country_b: Optional[str]) -> Optional[ComparisonResult]:
    """Compare latest values of A and B; None when no second country/series."""
    if trend_a is None or trend_b is None or not country_b:
        return None

    gap = trend_a.last - trend_b.last
    return ComparisonResult(gap=gap, relation=classify_gap(gap))


def latest_year_phrase(comparison: ComparisonResult, country_a: str, country_b: str) -> str:
    if comparison.relation is Relation.SIMILAR:
        return "very similar in the latest year"
    if comparison.relation is Relation.A_HIGHER:
        return f"{country_a} is higher than {country_b} in the latest year"
    return f"{country_b} is higher than {country_a} in the latest year"
