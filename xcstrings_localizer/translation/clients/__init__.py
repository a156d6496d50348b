"""Translation API clients."""

from .base import TranslationClient, TranslationServiceError
from .openai_client import OpenAIClient

__all__ = ["OpenAIClient", "TranslationClient", "TranslationServiceError"]
