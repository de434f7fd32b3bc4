"""Environment-based configuration for the FlowBond client."""
from __future__ import annotations

import os
from pathlib import Path

SUPPORTED_LANGUAGES = ("en", "es", "fr")
FALLBACK_LANGUAGE = "en"

ROOT_DIR = Path(__file__).resolve().parents[1]


class Settings:
    """Client settings loaded from environment variables."""

    def __init__(self) -> None:
        self.api_url = os.environ.get("FLOWBOND_API_URL", "http://localhost:3001/api").rstrip("/")
        self.api_token = os.environ.get("FLOWBOND_API_TOKEN") or None
        self.api_timeout = float(os.environ.get("FLOWBOND_API_TIMEOUT", "15"))

        lang = os.environ.get("FLOWBOND_DEFAULT_LANGUAGE", FALLBACK_LANGUAGE)
        self.default_language = lang if lang in SUPPORTED_LANGUAGES else FALLBACK_LANGUAGE

        self.translations_dir = Path(
            os.environ.get("FLOWBOND_TRANSLATIONS_DIR", ROOT_DIR / "translations")
        )
        self.session_file = os.environ.get("FLOWBOND_SESSION_FILE", "session_data.json")
        self.log_level = os.environ.get("LOG_LEVEL", "INFO")


# Singleton
config = Settings()
