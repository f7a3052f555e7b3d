"""Environment-driven configuration.

Values are read once at import time. Services accept explicit overrides in
their constructors so tests never depend on the process environment.
"""

import os

from core.exceptions import ConfigurationError

# Database (read/write partitioning, same file by default)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///nutrition.db")
READ_DATABASE_URL = os.getenv("READ_DATABASE_URL", DATABASE_URL)

# Text generation (meal plans)
GROQ_API_KEY_PLACEHOLDER = "your_groq_api_key_here"
GROQ_API_KEY = os.getenv("GROQ_API_KEY", GROQ_API_KEY_PLACEHOLDER)
GROQ_API_URL = os.getenv("GROQ_API_URL", "https://api.groq.com/openai/v1/chat/completions")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")

# Vision (food photo analysis)
OPENAI_API_KEY_PLACEHOLDER = "your_openai_api_key_here"
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", OPENAI_API_KEY_PLACEHOLDER)
OPENAI_VISION_URL = os.getenv("OPENAI_VISION_URL", "https://api.openai.com/v1/chat/completions")
OPENAI_VISION_MODEL = os.getenv("OPENAI_VISION_MODEL", "gpt-4o-mini")

def _float_env(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}", config_key=name) from exc


AI_REQUEST_TIMEOUT_S = _float_env("AI_REQUEST_TIMEOUT_S", "30")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.path.dirname(__file__), "..", "logs"))


def is_api_key_configured(api_key, placeholder: str) -> bool:
    """Return True when a usable key is present (not empty, not the template value)."""
    if not api_key:
        return False
    return api_key.strip() not in ("", placeholder)
