import os
import sys

import streamlit as st

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..")))
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from health_dashboard.charts.renderers import ChartType, get_renderer
from health_dashboard.data.series import HealthDataError, list_countries, list_indicators
from health_dashboard.llm.pipelines.summary_llm import HealthSummaryLLM
from health_dashboard.narrative.context import build_context
from health_dashboard.narrative.insight import (
    gemini_insight,
    local_insight,
    prompt_insight,
    report_summary,
    selection_key,
)
from health_dashboard.narrative.templates import render_report_notes
from health_dashboard.report.pdf_report import build_report_pdf
from utils.load_data import load_all_data
from utils.session import get_state, get_transcript, set_state

NONE_OPTION = "(None)"

st.set_page_config(page_title="Health Data Trends Dashboard", layout="wide")
st.title("Health Data Trends Dashboard")
st.caption("Visualize global health indicators (2000–2023)")

state = get_state()

# --- Signed-in bar ---
col_user, col_out = st.columns([4, 1])
with col_user:
    if state.username:
        st.write(f"Signed in as **{state.username}**")
    else:
        st.write("Not signed in (demo mode)")
with col_out:
    if st.button("Sign out"):
        set_state(state.sign_out())
        st.switch_page("Home.py")

# --- Data ---
try:
    table = load_all_data()
except (FileNotFoundError, HealthDataError):
    st.error("Could not load health dataset. Check that data/Data_Cleaned.csv exists and try again.")
    st.stop()

indicators = list_indicators(table)
if not indicators:
    st.warning("The health dataset has no indicators.")
    st.stop()

st.markdown(
    f"Explore **births, deaths, life expectancy** and many other world health indicators. "
    f"{len(indicators)} indicators • {table['Country Name'].nunique()} countries • Years: 2000–2023"
)

# --- Controls ---
c1, c2, c3, c4 = st.columns(4)

with c1:
    idx = indicators.index(state.indicator) if state.indicator in indicators else 0
    indicator = st.selectbox("Health indicator", indicators, index=idx)
    if indicator != state.indicator:
        state = state.select_indicator(indicator)

countries = list_countries(table, state.indicator) or [state.country_a]

with c2:
    idx = countries.index(state.country_a) if state.country_a in countries else 0
    country_a = st.selectbox("Country / region A", countries, index=idx,
                             help="Primary country/region for analysis.")
    if country_a != state.country_a:
        state = state.select_country_a(country_a)

with c3:
    options_b = [NONE_OPTION] + countries
    idx = options_b.index(state.country_b) if state.country_b in options_b else 0
    country_b = st.selectbox("Country / region B (comparison)", options_b, index=idx,
                             help="Optional comparison line on the same chart.")
    country_b = None if country_b == NONE_OPTION else country_b
    if country_b != state.country_b:
        state = state.select_country_b(country_b)

with c4:
    chart_types = list(ChartType)
    chart_type = st.selectbox("Chart type", chart_types, index=chart_types.index(state.chart_type),
                              format_func=lambda t: t.label)
    state = state.select_chart_type(chart_type)

set_state(state)

label = "Graphs generated" if state.generated else "Generate graphs & data"
if st.button(label, type="primary", disabled=not state.can_generate()):
    set_state(state.generate())
    st.rerun()

ctx = build_context(state, table)

# --- Chart ---
st.subheader("Visualisation")
if not state.generated:
    st.info('Click **"Generate graphs & data"** above to populate this view using your cleaned dataset.')
elif not ctx.rows:
    st.warning("No data was found in the cleaned dataset for this combination of indicator and "
               "countries. Try selecting different combinations.")
else:
    chart = get_renderer(state.chart_type).render(ctx.rows, ctx.country_a, ctx.country_b,
                                                  y_title=ctx.indicator)
    st.altair_chart(chart, use_container_width=True)
    if state.chart_type is ChartType.HEAT_STRIP:
        st.caption("Darker cells indicate relatively higher values for that year within the selected range.")

# --- Report notes ---
st.subheader("Report notes")
if st.button("Generate notes"):
    st.session_state["report_notes"] = render_report_notes(ctx)
notes = st.text_area(
    "Notes",
    key="report_notes",
    height=220,
    placeholder="Click 'Generate notes' to create a starting point for your report, then edit and expand it here...",
)

# --- AI insight ---
st.subheader("AI insight")
b1, b2, b3 = st.columns(3)
if b1.button("Local summary"):
    st.session_state["ai_insight"] = local_insight(ctx)
if b2.button("Copy LLM prompt"):
    st.session_state["ai_insight"] = prompt_insight(ctx)
if b3.button("Ask Gemini", disabled=not ctx.has_trend):
    with st.spinner("Generating summary..."):
        result = HealthSummaryLLM().summarize_context(ctx)
    if not result.ok:
        st.error(f"LLM request failed ({result.status})")
    st.session_state["ai_insight"] = gemini_insight(ctx, result)

# only shown for the selection it was made for
insight = st.session_state.get("ai_insight")
if insight is not None and insight.selection == selection_key(ctx):
    st.code(insight.text, language=None)

if ctx.has_data:
    st.download_button(
        "Download PDF summary",
        data=build_report_pdf(ctx, notes=notes or None, summary=report_summary(insight, ctx), username=state.username),
        file_name="world-health-dashboard.pdf",
        mime="application/pdf",
    )

# --- Chat ---
st.subheader("Ask the dashboard helper")
transcript = get_transcript()
for msg in transcript.messages:
    with st.chat_message(msg.role):
        st.write(msg.content)

question = st.chat_input("Ask about trends, comparisons, or interpretation...")
if question:
    transcript.ask(question, ctx)
    st.rerun()
