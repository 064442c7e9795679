"""Gemini text generation client."""

import logging

from google import genai

from ..config import DEFAULT_GEMINI_MODEL

logger = logging.getLogger(__name__)


class GeminiClient:
    """Client for generating text via Google's Gemini models."""

    def __init__(self, api_key: str | None, model: str = DEFAULT_GEMINI_MODEL):
        self.api_key = api_key
        self.model = model
        self._client: genai.Client | None = None
        self.total_input_tokens = 0
        self.total_output_tokens = 0

    @property
    def client(self) -> genai.Client:
        # Created on first use so a missing key fails the call, not startup
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str, label: str = "") -> str:
        """Send a single prompt and return the reply text.

        Args:
            prompt: Full prompt text.
            label: Optional label for logging token usage.

        Returns:
            Reply text, stripped.

        Raises:
            RuntimeError: If the reply carries no text.
        """
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
        )

        usage = getattr(response, "usage_metadata", None)
        if usage is not None:
            input_tokens = usage.prompt_token_count or 0
            output_tokens = usage.candidates_token_count or 0
            self.total_input_tokens += input_tokens
            self.total_output_tokens += output_tokens
            if label:
                logger.info(f"{label}: input={input_tokens}, output={output_tokens}")

        text = response.text
        if not text:
            raise RuntimeError("No text generated by Gemini")
        return text.strip()

    def get_token_totals(self) -> tuple[int, int]:
        """Return accumulated (input, output) tokens."""
        return self.total_input_tokens, self.total_output_tokens
