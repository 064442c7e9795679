"""API clients for text generation providers."""

from typing import Protocol

from ..config import Settings
from .gemini import GeminiClient
from .llm import LLMClient


class TextModel(Protocol):
    """Anything that turns a prompt into reply text."""

    def generate(self, prompt: str, label: str = "") -> str: ...


class UnknownProviderError(ValueError):
    """LLM_PROVIDER names a provider we have no client for."""
    pass


def build_text_model(settings: Settings) -> TextModel:
    """Create the text model client selected by settings.llm_provider."""
    if settings.llm_provider == "gemini":
        return GeminiClient(api_key=settings.gemini_api_key, model=settings.gemini_model)
    if settings.llm_provider == "openai":
        return LLMClient(api_key=settings.openai_api_key, model=settings.openai_model)
    raise UnknownProviderError(f"Unknown LLM provider: {settings.llm_provider!r}")


__all__ = ["GeminiClient", "LLMClient", "TextModel", "UnknownProviderError", "build_text_model"]
