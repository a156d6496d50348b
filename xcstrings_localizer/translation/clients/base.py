"""
Abstract base for translation services.

The orchestrator only talks to this interface, so the OpenAI client can be
swapped for another provider or a test double.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from ...models.translation_result import AnalysisCandidate, AnalysisItem, BatchItem


class TranslationServiceError(Exception):
    """A batch call failed as a whole (transport, API or response format)."""


class TranslationClient(ABC):
    """A remote service that translates and reviews batches of strings."""

    @abstractmethod
    async def translate_batch(
        self,
        items: List[BatchItem],
        target_language: str,
    ) -> Dict[str, str]:
        """
        Translate a batch in a single request.

        Returns:
            Mapping of item key -> translated text. Keys the service did not
            answer are absent.

        Raises:
            TranslationServiceError: If the request fails as a whole
        """

    @abstractmethod
    async def analyze_batch(
        self,
        items: List[AnalysisItem],
        target_language: str,
        source_language: str = "en",
    ) -> List[AnalysisCandidate]:
        """
        Review existing translations in a single request.

        Returns:
            One candidate per answered item, unfiltered.

        Raises:
            TranslationServiceError: If the request fails as a whole
        """

    def language_name(self, code: str) -> str:
        return code
