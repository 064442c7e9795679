import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash-exp"
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """Process configuration - built once at startup and passed to services."""

    gemini_api_key: str | None = None
    openai_api_key: str | None = None
    llm_provider: str = "gemini"  # "gemini" or "openai"
    gemini_model: str = DEFAULT_GEMINI_MODEL
    openai_model: str = DEFAULT_OPENAI_MODEL
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from the environment (and .env if present).

        Missing API keys are not an error here: the model call fails later
        and the enhancer falls back to the original data.
        """
        load_dotenv()
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY"),
            openai_api_key=os.getenv("OPENAI_API_KEY"),
            llm_provider=os.getenv("LLM_PROVIDER", "gemini").strip().lower(),
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
            openai_model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Safe to call more than once (Lambda warm starts, tests).
    """
    logger = logging.getLogger("listing_enhancer")
    resolved = logging.getLevelName(level.upper())
    logger.setLevel(resolved if isinstance(resolved, int) else logging.INFO)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
        # Lambda installs its own root handler
        logger.propagate = False

    return logger
