# health_dashboard/report/pdf_report.py

import io
import os
from datetime import datetime
from textwrap import wrap

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from health_dashboard.charts.renderers import SERIES_COLORS
from health_dashboard.config import REPORT_DIR
from health_dashboard.narrative.context import NarrativeContext
from health_dashboard.narrative.templates import (
    PERIOD,
    render_local_summary,
    render_report_notes,
)


def _plot_series_png(ctx: NarrativeContext):
    """Line chart of the aligned rows; None when there is nothing to draw."""
    if not ctx.has_data:
        return None

    fig, ax = plt.subplots(figsize=(6, 3.5))
    years_a = [int(p.year) for p in ctx.series_a]
    if years_a:
        ax.plot(years_a, [p.value for p in ctx.series_a], label=ctx.country_a,
                color=SERIES_COLORS["a"], linewidth=2, marker="o", markersize=3)
    if ctx.country_b and ctx.series_b:
        ax.plot([int(p.year) for p in ctx.series_b], [p.value for p in ctx.series_b],
                label=ctx.country_b, color=SERIES_COLORS["b"], linewidth=2, linestyle="--")

    ax.set_title(ctx.indicator)
    ax.set_xlabel("Year")
    ax.grid(alpha=0.2)
    ax.legend()

    buf = io.BytesIO()
    fig.tight_layout()
    fig.savefig(buf, format="png", dpi=150)
    plt.close(fig)
    buf.seek(0)
    return buf


def _draw_title_page(c, ctx: NarrativeContext, username: str | None = None):
    """Draws a title page on the given canvas."""
    width, height = A4
    margin = 50

    c.setFillColor(colors.black)
    c.setFont("Helvetica-Bold", 22)
    title = "World Health Indicator Summary"
    tw = c.stringWidth(title, "Helvetica-Bold", 22)
    c.drawString((width - tw) / 2, height - 150, title)

    c.setFont("Helvetica-Bold", 14)
    countries = ctx.country_a + (f" vs {ctx.country_b}" if ctx.country_b else "")
    subtitle = f"{countries}, {PERIOD}"
    sw = c.stringWidth(subtitle, "Helvetica-Bold", 14)
    c.drawString((width - sw) / 2, height - 185, subtitle)

    c.setFont("Helvetica", 11)
    c.drawString(margin, height - 240, f"Indicator: {ctx.indicator or 'not selected'}")
    c.drawString(margin, height - 260, f"Prepared by: {username or 'demo user'}")
    c.drawString(margin, height - 280, f"Generated on: {datetime.now().strftime('%d %b %Y')}")

    c.setFont("Helvetica-Oblique", 9)
    c.setFillColor(colors.grey)
    c.drawString(margin, margin, "Values come from the cleaned world health CSV (Data_Cleaned.csv).")


def _draw_wrapped_text(c, text, x, y, max_width, line_height, font_name="Helvetica", font_size=10):
    c.setFont(font_name, font_size)
    # rough width approximation using 0.5 * font_size per char
    max_chars = int(max_width / (0.5 * font_size))
    for p in text.split("\n"):
        for line in wrap(p, max_chars) or [""]:
            if y < 60:
                c.showPage()
                c.setFont(font_name, font_size)
                y = A4[1] - 50
            c.drawString(x, y, line)
            y -= line_height
    return y


def build_report_pdf(ctx: NarrativeContext, notes: str | None = None,
                     summary: str | None = None, username: str | None = None) -> bytes:
    """
    Two-section PDF: summary (local or the given LLM text) with the chart,
    then the report notes. Without data the body is the guidance text.
    """
    summary = summary or render_local_summary(ctx)
    notes = notes or render_report_notes(ctx)
    chart_buf = _plot_series_png(ctx)

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    width, height = A4
    margin = 40

    _draw_title_page(c, ctx, username)
    c.showPage()

    c.setFont("Helvetica-Bold", 16)
    c.drawString(margin, height - margin, "Summary")
    y = _draw_wrapped_text(c, summary, margin, height - margin - 24, width - 2 * margin, line_height=13)

    if chart_buf is not None:
        chart_height = height * 0.3
        if y - chart_height < margin:
            c.showPage()
            y = height - margin
        c.drawImage(
            ImageReader(chart_buf),
            margin,
            y - chart_height - 10,
            width=width - 2 * margin,
            height=chart_height,
            preserveAspectRatio=True,
            mask="auto",
        )

    c.showPage()
    c.setFont("Helvetica-Bold", 16)
    c.drawString(margin, height - margin, "Report notes")
    _draw_wrapped_text(c, notes, margin, height - margin - 24, width - 2 * margin, line_height=13)

    c.setFont("Helvetica-Oblique", 8)
    c.setFillColor(colors.grey)
    c.drawRightString(width - margin, margin / 2, "Generated by the World Health Dashboard")
    c.showPage()
    c.save()

    return buf.getvalue()


def save_report_pdf(ctx: NarrativeContext, output_path: str | None = None, **kwargs) -> str:
    if output_path is None:
        os.makedirs(REPORT_DIR, exist_ok=True)
        safe = "_".join(filter(None, [ctx.country_a, ctx.country_b])).replace(" ", "_")
        output_path = os.path.join(REPORT_DIR, f"{safe}_Health_Report.pdf")

    with open(output_path, "wb") as f:
        f.write(build_report_pdf(ctx, **kwargs))

    print(f"Saved health report: {output_path}")
    return output_path
