"""
series.py
---------
Turns rows of the cleaned health CSV into per-country year/value series.

The CSV has one row per (Series Name, Country Name) pair and one column per
year 2000..2023. Cells are kept as strings when loaded; a cell only becomes a
number here, and anything empty or non-numeric is treated as missing data
(dropped, never zero).
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import pandas as pd

from health_dashboard.config import DATA_PATH, START_YEAR, END_YEAR

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

SERIES_COL = "Series Name"
COUNTRY_COL = "Country Name"

YEAR_COLUMNS = [str(y) for y in range(START_YEAR, END_YEAR + 1)]


class HealthDataError(ValueError):
    """The dataset file exists but cannot be read as the health CSV."""


@dataclass(frozen=True)
class SeriesPoint:
    year: str
    value: float

    def to_dict(self):
        return {"year": self.year, "value": self.value}


@dataclass(frozen=True)
class AlignedRow:
    year: str
    value_a: Optional[float]
    value_b: Optional[float]


# -------------------------------------------------
# Loading
# -------------------------------------------------
def load_health_table(path: str = DATA_PATH) -> pd.DataFrame:
    """Load the cleaned CSV with every cell as a string.

    Rows missing either identity field are dropped. Raises FileNotFoundError
    for a missing file and HealthDataError for an empty or malformed one, or
    one without the identity columns.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Health dataset not found: {path}")

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.error(f"Could not parse health dataset {path}: {e}")
        raise HealthDataError(f"Health dataset is empty or malformed: {path}") from e

    required = {SERIES_COL, COUNTRY_COL}
    if not required.issubset(set(df.columns)):
        raise HealthDataError(f"Health CSV missing required cols. Found: {df.columns.tolist()}")

    df = df[(df[SERIES_COL] != "") & (df[COUNTRY_COL] != "")].reset_index(drop=True)
    logger.info(f"Loaded {len(df)} health rows from {path}")
    return df


def list_indicators(table: pd.DataFrame) -> List[str]:
    if table is None or table.empty:
        return []
    return sorted(table[SERIES_COL].unique().tolist())


def list_countries(table: pd.DataFrame, indicator: str) -> List[str]:
    if table is None or table.empty or not indicator:
        return []
    sel = table[table[SERIES_COL] == indicator]
    return sorted(sel[COUNTRY_COL].unique().tolist())


# -------------------------------------------------
# Extraction
# -------------------------------------------------
def parse_cell(raw) -> Optional[float]:
    """Numeric value of one year cell, or None when the cell holds no usable number."""
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return None

    try:
        value = float(pd.to_numeric(raw, errors="coerce"))
    except (TypeError, ValueError):
        return None

    if not np.isfinite(value):
        return None
    return value


def find_row(table: pd.DataFrame, indicator: str, country: str) -> Optional[pd.Series]:
    """First row matching indicator and country exactly.

    Duplicate rows for the same pair are a data-quality problem in the CSV;
    the first one wins.
    """
    if table is None or table.empty or not indicator or not country:
        return None
    if SERIES_COL not in table.columns or COUNTRY_COL not in table.columns:
        return None

    matches = table[(table[SERIES_COL] == indicator) & (table[COUNTRY_COL] == country)]
    if matches.empty:
        return None
    return matches.iloc[0]


def _row_values(row: Optional[pd.Series]) -> List[Optional[float]]:
    if row is None:
        return [None] * len(YEAR_COLUMNS)
    return [parse_cell(row.get(year)) for year in YEAR_COLUMNS]


def extract_series(table: pd.DataFrame, indicator: str, country: str) -> List[SeriesPoint]:
    """Ordered (year, value) points for one indicator/country pair.

    An unknown pair gives an empty list, which callers treat as "no data".
    """
    row = find_row(table, indicator, country)
    values = _row_values(row)
    return [
        SeriesPoint(year=year, value=value)
        for year, value in zip(YEAR_COLUMNS, values)
        if value is not None
    ]


def align_series(table: pd.DataFrame, indicator: str, country_a: str,
                 country_b: Optional[str] = None) -> List[AlignedRow]:
    """Year-by-year rows for the two-country chart.

    A year is kept when either side has a value; the missing side is None.
    """
    row_a = find_row(table, indicator, country_a)
    row_b = find_row(table, indicator, country_b) if country_b else None

    if row_a is None and row_b is None:
        return []

    rows = []
    for year, a, b in zip(YEAR_COLUMNS, _row_values(row_a), _row_values(row_b)):
        if a is None and b is None:
            continue
        rows.append(AlignedRow(year=year, value_a=a, value_b=b))
    return rows


def series_from_rows(rows: List[AlignedRow], side: str = "a") -> List[SeriesPoint]:
    attr = "value_a" if side == "a" else "value_b"
    return [
        SeriesPoint(year=r.year, value=getattr(r, attr))
        for r in rows
        if getattr(r, attr) is not None
    ]


def series_from_payload(points) -> List[SeriesPoint]:
    """Rebuild a series from JSON ``[{"year": ..., "value": ...}]`` items.

    Items without a usable value are skipped.
    """
    out = []
    for p in points or []:
        if not isinstance(p, dict):
            continue
        value = parse_cell(p.get("value"))
        if value is None or p.get("year") is None:
            continue
        out.append(SeriesPoint(year=str(p["year"]), value=value))
    return out
