"""
Health Dashboard API - LLM summary route for the dashboard.
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from health_dashboard.config import API_HOST, API_PORT
from health_dashboard.llm.pipelines.summary_llm import (
    SERVER_ERROR_PREFIX,
    HealthSummaryLLM,
)

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def create_app(summarizer: HealthSummaryLLM | None = None) -> FastAPI:
    app = FastAPI(title="World Health Dashboard API")
    app.state.summarizer = summarizer or HealthSummaryLLM()

    @app.post("/api/llm-summary")
    async def llm_summary(request: Request):
        """Narrative summary for one or two series; always answers {"summary": ...}."""
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Bad request body: {e}")
            return JSONResponse({"summary": SERVER_ERROR_PREFIX + str(e)}, status_code=500)

        result = app.state.summarizer.summarize(body)
        return JSONResponse({"summary": result.summary}, status_code=result.status)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
