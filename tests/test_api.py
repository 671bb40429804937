from fastapi.testclient import TestClient

from health_dashboard.api.server import create_app
from health_dashboard.llm.pipelines.summary_llm import (
    INSUFFICIENT_DATA_MESSAGE,
    SERVER_ERROR_PREFIX,
    HealthSummaryLLM,
)


class EchoClient:
    def complete(self, prompt):
        return "Summary for: " + prompt.splitlines()[3]


def client_for(factory=EchoClient):
    return TestClient(create_app(HealthSummaryLLM(client_factory=factory)))


def test_summary_route_success():
    body = {
        "indicator": "Life expectancy at birth (years)",
        "countryA": "Ireland",
        "seriesA": [{"year": "2000", "value": 76.6}],
    }
    response = client_for().post("/api/llm-summary", json=body)
    assert response.status_code == 200
    assert response.json() == {"summary": "Summary for: Indicator: Life expectancy at birth (years)"}


def test_summary_route_missing_fields():
    response = client_for().post("/api/llm-summary", json={"indicator": "x"})
    assert response.status_code == 400
    assert response.json() == {"summary": INSUFFICIENT_DATA_MESSAGE}


def test_summary_route_invalid_json():
    response = client_for().post(
        "/api/llm-summary",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 500
    assert response.json()["summary"].startswith(SERVER_ERROR_PREFIX)


def test_summary_route_rejects_get():
    assert client_for().get("/api/llm-summary").status_code == 405


def test_health():
    response = client_for().get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
