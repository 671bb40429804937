"""
insight.py
----------
The text shown in the dashboard's "AI insight" box, tagged with what produced
it and for which selection, so the PDF export only reuses a real summary of
the selection it is exporting.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from health_dashboard.llm.pipelines.summary_llm import EMPTY_RESPONSE_MESSAGE, SummaryResult
from health_dashboard.narrative.context import NarrativeContext
from health_dashboard.narrative.templates import build_llm_prompt, render_local_summary


class InsightKind(str, Enum):
    LOCAL_SUMMARY = "local"
    LLM_PROMPT = "prompt"
    GEMINI_SUMMARY = "gemini"
    MESSAGE = "message"  # guidance or error text


def selection_key(ctx: NarrativeContext) -> Tuple[str, str, Optional[str]]:
    return (ctx.indicator, ctx.country_a, ctx.country_b)


@dataclass(frozen=True)
class Insight:
    kind: InsightKind
    text: str
    selection: Tuple[str, str, Optional[str]]

    @property
    def is_summary(self) -> bool:
        return self.kind in (InsightKind.LOCAL_SUMMARY, InsightKind.GEMINI_SUMMARY)


def local_insight(ctx: NarrativeContext) -> Insight:
    kind = InsightKind.LOCAL_SUMMARY if ctx.has_trend else InsightKind.MESSAGE
    return Insight(kind, render_local_summary(ctx), selection_key(ctx))


def prompt_insight(ctx: NarrativeContext) -> Insight:
    return Insight(InsightKind.LLM_PROMPT, build_llm_prompt(ctx), selection_key(ctx))


def gemini_insight(ctx: NarrativeContext, result: SummaryResult) -> Insight:
    usable = result.ok and result.summary != EMPTY_RESPONSE_MESSAGE
    kind = InsightKind.GEMINI_SUMMARY if usable else InsightKind.MESSAGE
    return Insight(kind, result.summary, selection_key(ctx))


def report_summary(insight: Optional[Insight], ctx: NarrativeContext) -> Optional[str]:
    """Summary text for the PDF, or None to fall back to the local summary.

    Prompts, guidance, errors and summaries of another selection are never
    reused.
    """
    if insight is None or not insight.is_summary or not ctx.has_trend:
        return None
    if insight.selection != selection_key(ctx):
        return None
    return insight.text
