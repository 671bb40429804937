import google.generativeai as genai
import os
from dotenv import load_dotenv

from health_dashboard.config import (
    GEMINI_API_KEY_ENV,
    GEMINI_MODEL,
    LLM_MAX_OUTPUT_TOKENS,
    LLM_TEMPERATURE,
)


class LLMConfigError(RuntimeError):
    """The server has no credential for the model."""


class LLMUpstreamError(RuntimeError):
    """The model call failed; the message carries the raw upstream text."""


class GeminiLLMClient:
    """
    Gemini wrapper used by HealthSummaryLLM.
    Loads API key from .env using python-dotenv.
    """

    def __init__(
        self,
        model: str = GEMINI_MODEL,
        temperature: float = LLM_TEMPERATURE,
        max_output_tokens: int = LLM_MAX_OUTPUT_TOKENS,
        system_instruction: str | None = None,
    ):
        load_dotenv()
        api_key = os.getenv(GEMINI_API_KEY_ENV)

        if not api_key:
            raise LLMConfigError(
                f"{GEMINI_API_KEY_ENV} is not set on the server. Add it to your .env file "
                f"({GEMINI_API_KEY_ENV}=your_api_key_here) or the deployment settings, then try again."
            )

        genai.configure(api_key=api_key)

        self.model_name = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens

        self.model = genai.GenerativeModel(
            self.model_name,
            system_instruction=system_instruction,
        )

    def complete(self, prompt: str) -> str:
        """
        Single round trip to Gemini. Returns the stripped text ("" when the
        response has no text); raises LLMUpstreamError on any failure.
        """
        try:
            response = self.model.generate_content(
                prompt,
                generation_config={
                    "temperature": self.temperature,
                    "max_output_tokens": self.max_output_tokens,
                },
            )
        except Exception as e:
            raise LLMUpstreamError(str(e)) from e

        try:
            text = response.text
        except ValueError:
            # blocked / empty candidates
            return ""
        return (text or "").strip()
