"""Load prompt templates from the prompts directory."""

from pathlib import Path
from string import Template


PROMPTS_DIR = Path(__file__).parent / "prompts"


def load_prompt(name: str) -> Template:
    """
    Load a prompt template by name.

    Args:
        name: Template file name without extension, e.g. 'listing'.

    Returns:
        The template; placeholders use $name syntax.

    Raises:
        FileNotFoundError: If prompt file doesn't exist.
    """
    path = PROMPTS_DIR / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    return Template(path.read_text(encoding="utf-8").strip())
