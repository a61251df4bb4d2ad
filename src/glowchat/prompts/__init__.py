"""Prompt management module.

Externalizes prompts to text files for easy customization.
Prompts can be overridden by placing files in the working directory.
"""

from functools import lru_cache
from pathlib import Path

# Default prompts directory (package location)
_PROMPTS_DIR = Path(__file__).parent


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: glowchat/prompts/{name}.txt

    Trailing whitespace is stripped so the files can end with a newline.

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    # Working directory first (user overrides)
    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8").rstrip()

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8").rstrip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def get_directive() -> str:
    """Get the fixed system directive that leads every transcript."""
    return load_prompt("directive")


def get_greeting() -> str:
    """Get the greeting shown when a session starts."""
    return load_prompt("greeting")


def format_acknowledgment(name: str) -> str:
    """Render the one-time notice for a newly detected name."""
    return load_prompt("acknowledgment").format(name=name)


__all__ = [
    "load_prompt",
    "get_directive",
    "get_greeting",
    "format_acknowledgment",
]
