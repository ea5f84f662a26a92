import json
import os
from dataclasses import dataclass
from pathlib import Path

RESOURCE_DIR = Path(__file__).parent / "resources"

LABEL_KEYS = (
    "AddFavoriteCommand",
    "BackCommand",
    "ErrorTitle",
    "FavoriteFirstItem",
    "FavoritePrompt",
    "FavoritePromptTitle",
    "GoCommand",
    "HomeCommand",
    "NextCommand",
    "SetHomeCommand",
)


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class BrowserConfig:
    """Browser shell settings."""
    headless: bool = True
    language: str = "english"
    page_load_timeout: float = 10.0
    parse_delay: float = 0.0
    window_size: tuple[int, int] = (800, 600)

    def __post_init__(self):
        if self.page_load_timeout <= 0:
            raise ValueError("page_load_timeout must be positive")
        if self.parse_delay < 0:
            raise ValueError("parse_delay must not be negative")
        if len(self.window_size) != 2 or min(self.window_size) <= 0:
            raise ValueError("window_size must be two positive integers")

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """Create configuration from environment variables."""
        try:
            return cls(
                headless=_env_flag("BROWSER_HEADLESS", True),
                language=os.environ.get("BROWSER_LANGUAGE", "english").strip().lower(),
                page_load_timeout=float(os.environ.get("BROWSER_PAGE_LOAD_TIMEOUT", "10")),
                parse_delay=float(os.environ.get("BROWSER_PARSE_DELAY", "0")),
                window_size=parse_window_size(os.environ.get("BROWSER_WINDOW_SIZE", "800x600")),
            )
        except ValueError as e:
            raise ValueError(f"Invalid browser configuration in environment: {str(e)}") from e


def parse_window_size(value: str) -> tuple[int, int]:
    """Parse a WIDTHxHEIGHT string such as "800x600"."""
    width, sep, height = value.lower().partition("x")
    if not sep:
        raise ValueError(f"Window size must look like 800x600, got {value!r}")
    return int(width), int(height)


def load_labels(language: str) -> dict[str, str]:
    """
    Load the display strings for a language.

    Args:
        language: Name of a file in the resources directory, without extension

    Returns:
        dict[str, str]: Label key to display string

    Raises:
        ValueError: If the language is unknown or its labels are incomplete
    """
    path = RESOURCE_DIR / f"{language}.json"
    if not language.isidentifier() or not path.is_file():
        raise ValueError(f"No labels available for language {language!r}")

    with open(path, "r", encoding="utf-8") as f:
        labels = json.load(f)

    missing = [key for key in LABEL_KEYS if key not in labels]
    if missing:
        raise ValueError(f"Labels for {language!r} are missing: {', '.join(missing)}")

    return labels
