"""
chat.py
-------
Rule-based chat helper. No model is involved: the question is matched against
keyword rules in a fixed order and the first matching rule builds the reply
from the current trends.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from health_dashboard.narrative.context import NarrativeContext

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

GREETING = (
    "Hi! I’m the health dashboard helper. Generate a graph, then ask me things like "
    "“What’s the trend?”, “Compare the two countries”, or “Is this indicator improving?”."
)

NOT_GENERATED_REPLY = (
    "First generate graphs & data on the left by picking an indicator and countries, "
    "then click “Generate graphs & data”. After that, ask me about trends, comparisons, "
    "or interpretation."
)

TREND_KEYWORDS = ("trend", "increase", "decrease", "up", "down")
COMPARE_KEYWORDS = ("compare", "difference", "higher", "lower")
INTERPRET_KEYWORDS = ("good", "bad", "interpret", "meaning")


def _contains_any(keywords: Tuple[str, ...]) -> Callable[[str], bool]:
    return lambda q: any(k in q for k in keywords)


def _trend_reply(ctx: NarrativeContext) -> List[str]:
    ta = ctx.trend_a
    return [
        f"For {ctx.indicator} in {ctx.country_a}, the overall trend from 2000 to 2023 looks {ta.word}.",
        f"It starts around {ta.first:.1f} and ends near {ta.last:.1f}.",
    ]


def _comparison_reply(ctx: NarrativeContext) -> List[str]:
    ta = ctx.trend_a
    if not ctx.has_comparison:
        return [
            f"I only have a clear time series for {ctx.country_a} right now, "
            "so I can’t fully compare both countries.",
            f"For {ctx.country_a}, the trend looks {ta.word} from 2000 to 2023.",
        ]

    tb = ctx.trend_b
    return [
        f"Comparing {ctx.country_a} and {ctx.country_b} for {ctx.indicator}:",
        f"{ctx.country_a} is {ta.word} overall, from about {ta.first:.1f} to {ta.last:.1f}.",
        f"{ctx.country_b} is {tb.word}, from about {tb.first:.1f} to {tb.last:.1f}.",
        ctx.comparison_sentence(),
    ]


def _interpretation_reply(ctx: NarrativeContext) -> List[str]:
    return [
        f"Whether the trend is “good” or “bad” depends on what {ctx.indicator} actually measures.",
        "For example, an increase might be positive for coverage/uptake indicators, "
        "but negative for death or incidence indicators.",
        "Use the direction (increasing/decreasing/stable) plus your knowledge of the indicator "
        "to argue why this might be a concern or an improvement.",
    ]


def _full_reply(ctx: NarrativeContext) -> List[str]:
    ta = ctx.trend_a
    lines = [
        f"I’ve used your current graph settings to answer based on {ctx.indicator} in {ctx.country_a}.",
        f"Overall, the trend looks {ta.word} from 2000 to 2023, starting around {ta.first:.1f} "
        f"and ending near {ta.last:.1f}.",
    ]
    if ctx.has_comparison:
        tb = ctx.trend_b
        lines += [
            f"For {ctx.country_b}, the pattern is {tb.word}, from about {tb.first:.1f} to {tb.last:.1f}.",
            ctx.comparison_sentence(),
        ]
    lines.append(
        "If you want a richer narrative in full sentences, use the “Copy LLM prompt” "
        "button and paste it into ChatGPT."
    )
    return lines


@dataclass(frozen=True)
class ChatRule:
    name: str
    matches: Callable[[str], bool]
    build: Callable[[NarrativeContext], List[str]]


# Order matters: a question can hit several keyword sets; the first rule wins.
CHAT_RULES = [
    ChatRule("trend", _contains_any(TREND_KEYWORDS), _trend_reply),
    ChatRule("compare", _contains_any(COMPARE_KEYWORDS), _comparison_reply),
    ChatRule("interpret", _contains_any(INTERPRET_KEYWORDS), _interpretation_reply),
    ChatRule("fallback", lambda q: True, _full_reply),
]


def match_rule(question: str) -> ChatRule:
    q = question.strip().lower()
    return next(rule for rule in CHAT_RULES if rule.matches(q))


def reply_to_question(question: str, ctx: NarrativeContext) -> Optional[str]:
    """Assistant reply for one question; None for a blank question."""
    if not question or not question.strip():
        return None

    if not ctx.has_trend:
        return NOT_GENERATED_REPLY

    rule = match_rule(question)
    logger.info(f"Chat question matched rule '{rule.name}'")
    return " ".join(rule.build(ctx))


@dataclass
class ChatMessage:
    role: str
    content: str


@dataclass
class ChatTranscript:
    """Messages for one browser session, greeting first."""

    messages: List[ChatMessage] = field(
        default_factory=lambda: [ChatMessage("assistant", GREETING)]
    )

    def ask(self, question: str, ctx: NarrativeContext) -> Optional[str]:
        reply = reply_to_question(question, ctx)
        if reply is None:
            return None
        self.messages.append(ChatMessage("user", question.strip()))
        self.messages.append(ChatMessage("assistant", reply))
        return reply
