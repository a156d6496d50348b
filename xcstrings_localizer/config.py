"""Configuration management for the localizer."""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()

MISSING_API_KEY = "OPENAI_API_KEY is not set"


def _env_int(name: str, default: int) -> Optional[int]:
    """Read an integer setting; None when the value is not a number."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return None


@dataclass
class Config:
    """Application configuration."""

    # API key
    openai_api_key: str = field(default_factory=lambda: os.getenv("OPENAI_API_KEY", ""))

    # OpenAI model settings
    openai_model: str = field(default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4o-mini"))
    analysis_temperature: float = 0.3
    max_completion_tokens: int = 4096

    # Batch translation settings
    batch_size: Optional[int] = field(
        default_factory=lambda: _env_int("XCSTRINGS_BATCH_SIZE", 15)
    )

    # Optional description of the app, passed to the model as context
    app_description: Optional[str] = field(
        default_factory=lambda: os.getenv("APP_DESCRIPTION") or None
    )

    # Language display names (for prompts)
    LANGUAGE_NAMES: Dict[str, str] = field(default_factory=lambda: {
        "ar": "Arabic",
        "ca": "Catalan",
        "cs": "Czech",
        "da": "Danish",
        "de": "German",
        "el": "Greek",
        "en": "English",
        "en-GB": "British English",
        "es": "Spanish",
        "es-419": "Latin American Spanish",
        "fi": "Finnish",
        "fr": "French",
        "fr-CA": "Canadian French",
        "he": "Hebrew",
        "hi": "Hindi",
        "hr": "Croatian",
        "hu": "Hungarian",
        "id": "Indonesian",
        "it": "Italian",
        "ja": "Japanese",
        "ko": "Korean",
        "ms": "Malay",
        "nb": "Norwegian Bokmål",
        "nl": "Dutch",
        "pl": "Polish",
        "pt-BR": "Brazilian Portuguese",
        "pt-PT": "European Portuguese",
        "ro": "Romanian",
        "ru": "Russian",
        "sk": "Slovak",
        "sv": "Swedish",
        "th": "Thai",
        "tr": "Turkish",
        "uk": "Ukrainian",
        "vi": "Vietnamese",
        "zh-Hans": "Simplified Chinese",
        "zh-Hant": "Traditional Chinese",
    })

    def language_name(self, code: str) -> str:
        """English display name for a language code, falling back to the code."""
        if code in self.LANGUAGE_NAMES:
            return self.LANGUAGE_NAMES[code]
        base = code.split("-")[0]
        return self.LANGUAGE_NAMES.get(base, code)

    def resolve_api_key(self, cli_value: Optional[str] = None) -> str:
        """Return the API key from the command line, falling back to the environment."""
        return cli_value or self.openai_api_key

    def validate(
        self,
        cli_api_key: Optional[str] = None,
        require_api_key: bool = True,
    ) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []
        if require_api_key and not self.resolve_api_key(cli_api_key):
            errors.append(MISSING_API_KEY)
        if self.batch_size is None or self.batch_size < 1:
            errors.append("XCSTRINGS_BATCH_SIZE must be a positive integer")
        return errors


# Global config instance
config = Config()
