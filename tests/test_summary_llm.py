import pytest

from health_dashboard.llm.models import gemini_client
from health_dashboard.llm.models.gemini_client import (
    GeminiLLMClient,
    LLMConfigError,
    LLMUpstreamError,
)
from health_dashboard.llm.pipelines.summary_llm import (
    EMPTY_RESPONSE_MESSAGE,
    INSUFFICIENT_DATA_MESSAGE,
    SERVER_ERROR_PREFIX,
    UPSTREAM_ERROR_PREFIX,
    HealthSummaryLLM,
    context_to_payload,
)
from health_dashboard.narrative.context import build_context
from health_dashboard.state import DashboardState
from conftest import LIFE_EXP

PAYLOAD = {
    "indicator": LIFE_EXP,
    "countryA": "Ireland",
    "seriesA": [{"year": "2000", "value": 76.6}, {"year": "2023", "value": 82.5}],
}


class FakeClient:
    def __init__(self, reply="  A steady rise.  ", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply.strip()


def summarizer_with(client):
    return HealthSummaryLLM(client_factory=lambda: client)


def test_success_returns_model_text():
    client = FakeClient()
    result = summarizer_with(client).summarize(PAYLOAD)

    assert result.ok
    assert result.summary == "A steady rise."
    assert "Time series for Ireland:\n2000: 76.6, 2023: 82.5" in client.prompts[0]
    assert "No comparison country was provided" in client.prompts[0]


def test_comparison_series_reaches_prompt():
    client = FakeClient()
    payload = dict(PAYLOAD, countryB="France", seriesB=[{"year": "2000", "value": 82.3}])
    summarizer_with(client).summarize(payload)
    assert "Please compare Ireland and France clearly." in client.prompts[0]


@pytest.mark.parametrize("payload", [
    {},
    dict(PAYLOAD, indicator=""),
    dict(PAYLOAD, countryA=None),
    dict(PAYLOAD, seriesA=[]),
    dict(PAYLOAD, seriesA=[{"year": "2000", "value": None}]),
    ["not", "an", "object"],
])
def test_insufficient_data(payload):
    client = FakeClient()
    result = summarizer_with(client).summarize(payload)
    assert result.status == 400
    assert result.summary == INSUFFICIENT_DATA_MESSAGE
    assert client.prompts == []


def test_missing_key_reported_before_validation():
    def no_key():
        raise LLMConfigError("GEMINI_API_KEY is not set on the server.")

    result = HealthSummaryLLM(client_factory=no_key).summarize({})
    assert result.status == 500
    assert "GEMINI_API_KEY" in result.summary


def test_upstream_error_carries_raw_text():
    client = FakeClient(error=LLMUpstreamError("401 API key not valid"))
    result = summarizer_with(client).summarize(PAYLOAD)
    assert result.status == 500
    assert result.summary == UPSTREAM_ERROR_PREFIX + "401 API key not valid"


def test_empty_model_reply():
    result = summarizer_with(FakeClient(reply="   ")).summarize(PAYLOAD)
    assert result.status == 200
    assert result.summary == EMPTY_RESPONSE_MESSAGE


def test_unexpected_failure_is_a_server_error():
    result = summarizer_with(FakeClient(error=KeyError("boom"))).summarize(PAYLOAD)
    assert result.status == 500
    assert result.summary.startswith(SERVER_ERROR_PREFIX)


def test_context_payload_and_summary(health_table):
    state = DashboardState(indicator=LIFE_EXP, country_a="Ireland", country_b="France").generate()
    ctx = build_context(state, health_table)

    payload = context_to_payload(ctx)
    assert payload["countryB"] == "France"
    assert len(payload["seriesA"]) == 24
    assert payload["seriesA"][0] == {"year": "2000", "value": 76.6}

    client = FakeClient()
    assert summarizer_with(client).summarize_context(ctx).ok


def test_context_payload_without_country_b(health_table):
    state = DashboardState(indicator=LIFE_EXP, country_a="Ireland", country_b=None).generate()
    payload = context_to_payload(build_context(state, health_table))
    assert "countryB" not in payload
    assert "seriesB" not in payload


def test_gemini_client_without_key(monkeypatch):
    monkeypatch.setattr(gemini_client, "load_dotenv", lambda: None)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    with pytest.raises(LLMConfigError, match="GEMINI_API_KEY"):
        GeminiLLMClient()


def test_gemini_client_wraps_upstream_failures(monkeypatch):
    class FailingModel:
        def __init__(self, *args, **kwargs):
            pass

        def generate_content(self, *args, **kwargs):
            raise RuntimeError("quota exceeded")

    monkeypatch.setattr(gemini_client, "load_dotenv", lambda: None)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(gemini_client.genai, "configure", lambda **kwargs: None)
    monkeypatch.setattr(gemini_client.genai, "GenerativeModel", FailingModel)

    client = GeminiLLMClient()
    with pytest.raises(LLMUpstreamError, match="quota exceeded"):
        client.complete("prompt")
