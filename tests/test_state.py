from health_dashboard.charts.renderers import ChartType
from health_dashboard.state import DashboardState


def test_defaults():
    state = DashboardState()
    assert state.country_a == "Ireland"
    assert state.country_b == "United Kingdom"
    assert state.chart_type is ChartType.LINE
    assert not state.generated
    assert state.username is None


def test_generate_needs_indicator_and_country():
    assert not DashboardState().can_generate()
    assert not DashboardState(indicator="X", country_a="").can_generate()

    state = DashboardState(indicator="X")
    assert state.can_generate()
    generated = state.generate()
    assert generated.generated
    assert not generated.can_generate()


def test_selection_changes_reset_to_idle():
    state = DashboardState(indicator="X").generate()
    assert not state.select_indicator("Y").generated
    assert not state.select_country_a("France").generated
    assert not state.select_country_b("France").generated


def test_chart_type_change_keeps_generated():
    state = DashboardState(indicator="X").generate().select_chart_type("heatmap")
    assert state.generated
    assert state.chart_type is ChartType.HEAT_STRIP


def test_clearing_country_b():
    assert DashboardState().select_country_b("").country_b is None
    assert DashboardState().select_country_b(None).country_b is None


def test_sign_in_and_out():
    state = DashboardState().sign_in("  ada@example.com ")
    assert state.username == "ada@example.com"
    assert state.sign_out().username is None
    assert DashboardState().sign_in("   ").username is None
