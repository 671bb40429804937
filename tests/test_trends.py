import pytest

from health_dashboard.analytics.trends import (
    ComparisonResult,
    Relation,
    Trend,
    TrendResult,
    classify_trend,
    compare,
    latest_year_phrase,
)
from health_dashboard.data.series import SeriesPoint


def series(*values):
    return [SeriesPoint(year=str(2000 + i), value=v) for i, v in enumerate(values)]


def trend_ending(last):
    return TrendResult(first=0.0, last=last, delta=last, classification=Trend.INCREASING)


def test_empty_series_has_no_trend():
    assert classify_trend([]) is None


def test_single_point_is_stable():
    result = classify_trend(series(5.0))
    assert result.delta == 0
    assert result.classification is Trend.STABLE


@pytest.mark.parametrize("values, expected", [
    ((1.0, 1.6), Trend.INCREASING),
    ((1.0, 0.4), Trend.DECREASING),
    ((1.0, 1.5), Trend.STABLE),   # delta exactly +0.5
    ((2.0, 1.5), Trend.STABLE),   # delta exactly -0.5
    ((1.0, 1.2), Trend.STABLE),
])
def test_deadband(values, expected):
    assert classify_trend(series(*values)).classification is expected


def test_only_endpoints_matter():
    # big dip in the middle, same start and end
    result = classify_trend(series(10.0, 2.0, 30.0, 10.2))
    assert result.first == 10.0
    assert result.last == 10.2
    assert result.classification is Trend.STABLE


def test_stable_reads_as_relatively_stable():
    assert classify_trend(series(1.0, 1.0)).word == "relatively stable"
    assert classify_trend(series(1.0, 9.0)).word == "increasing"


def test_compare_needs_second_country_and_trend():
    a = trend_ending(1.0)
    assert compare(a, None, "Ireland", "France") is None
    assert compare(a, trend_ending(1.0), "Ireland", None) is None
    assert compare(a, trend_ending(1.0), "Ireland", "") is None


@pytest.mark.parametrize("last_a, last_b, expected", [
    (1.0, 1.0, Relation.SIMILAR),
    (1.24999, 1.0, Relation.SIMILAR),
    (1.25, 1.0, Relation.A_HIGHER),    # |gap| == 0.25 is not similar
    (1.0, 1.25, Relation.B_HIGHER),
    (1.0, 1.3, Relation.B_HIGHER),
    (5.0, 1.0, Relation.A_HIGHER),
])
def test_comparison_deadband(last_a, last_b, expected):
    result = compare(trend_ending(last_a), trend_ending(last_b), "A", "B")
    assert result.relation is expected
    assert result.gap == pytest.approx(last_a - last_b)


def test_latest_year_phrase():
    assert latest_year_phrase(ComparisonResult(0.1, Relation.SIMILAR), "Ireland", "France") == \
        "very similar in the latest year"
    assert latest_year_phrase(ComparisonResult(1.0, Relation.A_HIGHER), "Ireland", "France") == \
        "Ireland is higher than France in the latest year"
    assert latest_year_phrase(ComparisonResult(-1.0, Relation.B_HIGHER), "Ireland", "France") == \
        "France is higher than Ireland in the latest year"


def test_enum_values_match_wire_names():
    assert Trend.INCREASING == "increasing"
    assert Relation.A_HIGHER == "A-higher"
    assert Relation.B_HIGHER == "B-higher"
