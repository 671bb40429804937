"""
summary_llm.py (Pipeline)
-------------------------
Narrative summary of one or two health series through an external model.

Mirrors the HTTP contract of /api/llm-summary: every path returns a
SummaryResult with a user-facing `summary` string and an HTTP-style status.
Nothing raises past summarize().

Provides:
- summarize(payload)
- summarize_context(ctx)
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
import logging

from health_dashboard.data.series import series_from_payload
from health_dashboard.llm.models.gemini_client import (
    GeminiLLMClient,
    LLMConfigError,
    LLMUpstreamError,
)
from health_dashboard.narrative.context import NarrativeContext
from health_dashboard.narrative.templates import SYSTEM_INSTRUCTION, build_summary_prompt

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

INSUFFICIENT_DATA_MESSAGE = (
    "Insufficient data was provided to generate an LLM summary. "
    "Please ensure you have generated graphs & data first."
)
UPSTREAM_ERROR_PREFIX = (
    "LLM API returned an error. Check your API key and model name. Raw response: "
)
EMPTY_RESPONSE_MESSAGE = "No summary content was returned by the LLM."
SERVER_ERROR_PREFIX = "Server-side error when generating LLM summary: "


@dataclass
class SummaryResult:
    summary: str
    status: int = 200

    @property
    def ok(self) -> bool:
        return self.status == 200


def default_client_factory():
    return GeminiLLMClient(system_instruction=SYSTEM_INSTRUCTION)


class HealthSummaryLLM:
    def __init__(self, client_factory: Optional[Callable[[], Any]] = None):
        """
        client_factory: returns an object with `.complete(prompt: str) -> str`.
        Called per request so a missing credential is reported, not cached.
        """
        self.client_factory = client_factory or default_client_factory

    def summarize(self, payload: Dict[str, Any]) -> SummaryResult:
        try:
            try:
                client = self.client_factory()
            except LLMConfigError as e:
                logger.error(f"LLM not configured: {e}")
                return SummaryResult(str(e), 500)

            payload = payload if isinstance(payload, dict) else {}
            indicator = payload.get("indicator")
            country_a = payload.get("countryA")
            country_b = payload.get("countryB") or None
            series_a = series_from_payload(payload.get("seriesA"))
            series_b = series_from_payload(payload.get("seriesB"))

            if not indicator or not country_a or not series_a:
                return SummaryResult(INSUFFICIENT_DATA_MESSAGE, 400)

            prompt = build_summary_prompt(indicator, country_a, series_a, country_b, series_b)

            try:
                text = client.complete(prompt)
            except LLMUpstreamError as e:
                logger.error(f"LLM upstream error: {e}")
                return SummaryResult(UPSTREAM_ERROR_PREFIX + str(e), 500)

            if not text:
                return SummaryResult(EMPTY_RESPONSE_MESSAGE, 200)

            logger.info(f"Generated summary for {indicator} / {country_a}")
            return SummaryResult(text, 200)

        except Exception as e:
            logger.error(f"LLM summary failed: {e}")
            return SummaryResult(SERVER_ERROR_PREFIX + str(e), 500)

    def summarize_context(self, ctx: NarrativeContext) -> SummaryResult:
        return self.summarize(context_to_payload(ctx))


def context_to_payload(ctx: NarrativeContext) -> Dict[str, Any]:
    """Request body for /api/llm-summary built from the dashboard context."""
    payload = {
        "indicator": ctx.indicator,
        "countryA": ctx.country_a,
        "seriesA": [p.to_dict() for p in ctx.series_a],
    }
    if ctx.country_b and ctx.series_b:
        payload["countryB"] = ctx.country_b
        payload["seriesB"] = [p.to_dict() for p in ctx.series_b]
    return payload
