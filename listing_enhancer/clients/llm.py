"""OpenAI text generation client."""

import logging

from openai import OpenAI

from ..config import DEFAULT_OPENAI_MODEL

logger = logging.getLogger(__name__)


class LLMClient:
    """OpenAI-backed client with the same interface as GeminiClient."""

    def __init__(self, api_key: str | None, model: str = DEFAULT_OPENAI_MODEL):
        self.api_key = api_key
        self.model = model
        self._client: OpenAI | None = None
        self.total_input_tokens = 0
        self.total_output_tokens = 0

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def generate(self, prompt: str, label: str = "") -> str:
        """Make LLM call and return response text."""
        response = self.client.responses.create(
            model=self.model,
            input=[{"role": "user", "content": prompt}],
        )

        usage = response.usage
        if usage is not None:
            self.total_input_tokens += usage.input_tokens
            self.total_output_tokens += usage.output_tokens
            if label:
                logger.info(f"{label}: input={usage.input_tokens}, output={usage.output_tokens}")

        return response.output_text.strip()

    def get_token_totals(self) -> tuple[int, int]:
        """Return accumulated (input, output) tokens."""
        return self.total_input_tokens, self.total_output_tokens
