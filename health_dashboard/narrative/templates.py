"""
templates.py
------------
Text for the report-notes box, the local (no model) summary and the LLM prompt.

Each renderer takes a NarrativeContext and returns plain text. When nothing has
been generated, or the selection has no data, the renderer returns a guidance
message instead.
"""

from decimal import Decimal
from typing import List, Optional

from health_dashboard.analytics.trends import Trend
from health_dashboard.data.series import SeriesPoint
from health_dashboard.narrative.context import NarrativeContext

PERIOD = "2000–2023"

SYSTEM_INSTRUCTION = (
    "You are a careful public health data analyst. You must be honest about "
    "uncertainty and never invent precise numbers that are not present."
)

_SUMMARY_ENDINGS = {
    Trend.INCREASING: "been rising overall during this period.",
    Trend.DECREASING: "declined over time.",
    Trend.STABLE: "remained fairly steady.",
}


def _generate_first(action: str) -> str:
    return "\n".join([
        "Please generate graphs & data first.",
        "",
        '1. Click "Generate graphs & data" above.',
        "2. Make sure a health indicator and at least one country/region are selected.",
        f"3. Then try {action} again.",
    ])


def format_value(value: float) -> str:
    """Raw number as written into prompts.

    Shortest round-trip digits, written the way a browser prints a number:
    no trailing .0, plain notation for 1e-6 <= |x| < 1e21 and exponent form
    (`1e+21`, `1.5e-7`) outside it.
    """
    value = float(value)
    if value == 0:
        return "0"

    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digits)
    k = len(digits)
    n = exponent + k  # position of the decimal point
    prefix = "-" if sign else ""

    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{prefix}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def series_to_text(series: List[SeriesPoint]) -> str:
    return ", ".join(f"{p.year}: {format_value(p.value)}" for p in series)


# -------------------------------------------------
# Report notes
# -------------------------------------------------
def render_report_notes(ctx: NarrativeContext) -> str:
    header = (
        f"Report notes for {ctx.indicator or 'the selected indicator'} in {ctx.country_a}"
        + (f" (compared with {ctx.country_b})" if ctx.country_b else "")
        + f" ({PERIOD})\n\n"
    )

    if ctx.has_data:
        body = [
            f"1. Describe the overall trend for {ctx.indicator} in {ctx.country_a}.",
            "   • Is it increasing, decreasing, or relatively stable between 2000 and 2023?",
            f"2. Compare {ctx.country_a} with {ctx.country_b}. Which one appears higher or lower overall?"
            if ctx.country_b
            else "2. Optionally select a second country/region to compare trends.",
            "3. Comment on any obvious spikes or drops in the lines or bars.",
            "   • Could these be linked to policy changes, economic events, or health crises?",
            "4. Explain what this means in practical terms for this indicator "
            "(e.g. births, deaths, life expectancy, or another health measure).",
            "5. Summarise why these findings are important for public health planning or policy-making.",
        ]
    else:
        body = [
            "Graphs and data have not been generated yet or no data is available for this combination.",
            '1. First click "Generate graphs & data" on the dashboard.',
            "2. Make sure the selected indicator and country/region actually exist in the dataset.",
            "3. Once the graphs are visible, focus on direction of change, spikes/drops, "
            "and differences between regions.",
        ]
    return header + "\n".join(body)


# -------------------------------------------------
# Local summary
# -------------------------------------------------
def render_local_summary(ctx: NarrativeContext) -> str:
    if not ctx.has_trend:
        return _generate_first("generating the local summary")

    ta = ctx.trend_a
    lines = [
        "Local AI-style summary (no external model):",
        "",
        f"For {ctx.indicator} in {ctx.country_a}, the indicator appears to be {ta.word} "
        f"over the period {PERIOD}.",
        f"The value starts around {ta.first:.1f} and ends near {ta.last:.1f}, suggesting that "
        f"{ctx.indicator.lower()} has {_SUMMARY_ENDINGS[ta.classification]}",
    ]

    if ctx.has_comparison:
        tb = ctx.trend_b
        lines += [
            "",
            f"For {ctx.country_b}, the indicator also appears {tb.word}.",
            f"It starts around {tb.first:.1f} and ends near {tb.last:.1f}. {ctx.comparison_sentence()}",
        ]

    lines += [
        "",
        "In your report, you could:",
        "• Comment on whether these patterns are expected for each country/region.",
        "• Suggest possible reasons (policy changes, economic conditions, health system strength, crises).",
        "• Compare this pattern to other countries for the same indicator if data is available.",
        "• Link the numeric change back to real-world effects relevant to this indicator.",
    ]
    return "\n".join(lines)


# -------------------------------------------------
# LLM prompt
# -------------------------------------------------
def build_summary_prompt(indicator: str, country_a: str, series_a: List[SeriesPoint],
                         country_b: Optional[str] = None,
                         series_b: Optional[List[SeriesPoint]] = None) -> str:
    if series_b and country_b:
        comparison_text = (
            f"\n\nFor {country_b}, the indicator series is:\n{series_to_text(series_b)}"
            f"\n\nPlease compare {country_a} and {country_b} clearly."
        )
    else:
        comparison_text = (
            "\n\nNo comparison country was provided; focus on a clear analysis "
            "for the primary country only."
        )

    return "\n".join([
        "You are an expert public health data analyst.",
        "You are given a world health indicator time series from 2000 to 2023, taken from a "
        "cleaned CSV dataset used in a student dashboard project.",
        "",
        f"Indicator: {indicator}",
        f"Country/Region A: {country_a}",
        f"Time series for {country_a}:",
        series_to_text(series_a),
        comparison_text,
        "",
        "TASK:",
        "Write a clear, accurate, student-friendly narrative (no more than about 3 short paragraphs) that:",
        "1. Describes the overall trend over time (increasing/decreasing/stable) and any important "
        "spikes or drops.",
        "2. Interprets what this might mean in real-world terms (e.g. births, deaths, life expectancy "
        "or the meaning of the indicator).",
        "3. If a comparison country was provided, compares the two countries honestly and highlights "
        "key differences or similarities.",
        "4. Avoids guessing specific causes unless they are very generic (e.g. 'policy changes', "
        "'economic conditions', 'health system strength').",
        "5. Avoids making up any numbers not present in the data - use only qualitative language "
        "about direction and relative levels.",
        "",
        "Keep the tone neutral and analytical, suitable for a college assignment.",
    ])


def build_llm_prompt(ctx: NarrativeContext) -> str:
    if not ctx.has_data or not ctx.series_a:
        return _generate_first("'Copy LLM prompt'")

    return build_summary_prompt(
        ctx.indicator,
        ctx.country_a,
        ctx.series_a,
        ctx.country_b,
        ctx.series_b,
    )
