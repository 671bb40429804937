import pandas as pd
import pytest

from health_dashboard.data.series import COUNTRY_COL, SERIES_COL, YEAR_COLUMNS

LIFE_EXP = "Life expectancy at birth (years)"
BIRTH_RATE = "Birth rate, crude (per 1,000 people)"


def linear(first, last, n=len(YEAR_COLUMNS)):
    return [f"{first + (last - first) * i / (n - 1):.1f}" for i in range(n)]


def make_row(indicator, country, values):
    row = {SERIES_COL: indicator, COUNTRY_COL: country}
    row.update(dict(zip(YEAR_COLUMNS, values)))
    return row


@pytest.fixture
def health_table():
    births_ie = linear(14.4, 10.4)
    births_ie[5] = ""  # 2005 missing
    births_uk = linear(11.5, 9.2)
    births_uk[-3:] = ["", "n/a", ""]

    rows = [
        make_row(LIFE_EXP, "Ireland", linear(76.6, 82.5)),
        make_row(LIFE_EXP, "United Kingdom", linear(78.0, 82.5)),
        make_row(LIFE_EXP, "France", linear(82.3, 82.5)),
        make_row(BIRTH_RATE, "Ireland", births_ie),
        make_row(BIRTH_RATE, "United Kingdom", births_uk),
    ]
    return pd.DataFrame(rows, columns=[SERIES_COL, COUNTRY_COL] + YEAR_COLUMNS)
