"""Per-session dashboard selections and the idle/generated flag."""

from dataclasses import dataclass, replace
from typing import Optional

from health_dashboard.charts.renderers import ChartType

DEFAULT_COUNTRY_A = "Ireland"
DEFAULT_COUNTRY_B = "United Kingdom"


@dataclass(frozen=True)
class DashboardState:
    indicator: str = ""
    country_a: str = DEFAULT_COUNTRY_A
    country_b: Optional[str] = DEFAULT_COUNTRY_B
    chart_type: ChartType = ChartType.LINE
    generated: bool = False
    username: Optional[str] = None

    # Any selection change sends the dashboard back to idle.
    def select_indicator(self, indicator: str) -> "DashboardState":
        return replace(self, indicator=indicator, generated=False)

    def select_country_a(self, country: str) -> "DashboardState":
        return replace(self, country_a=country, generated=False)

    def select_country_b(self, country: Optional[str]) -> "DashboardState":
        return replace(self, country_b=country or None, generated=False)

    def select_chart_type(self, chart_type: ChartType) -> "DashboardState":
        return replace(self, chart_type=ChartType(chart_type))

    def can_generate(self) -> bool:
        return not self.generated and bool(self.indicator) and bool(self.country_a)

    def generate(self) -> "DashboardState":
        return replace(self, generated=True)

    def sign_in(self, username: str) -> "DashboardState":
        return replace(self, username=username.strip() or None)

    def sign_out(self) -> "DashboardState":
        return replace(self, username=None)
