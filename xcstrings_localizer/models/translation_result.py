"""Data models for batch work items, suggestions and run statistics."""

from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class BatchItem:
    """One string sent to the translation service."""

    key: str
    text: str
    context: Optional[str] = None


@dataclass(frozen=True)
class AnalysisItem:
    """One existing translation sent to the service for review."""

    key: str
    original: str
    translation: str
    context: Optional[str] = None


@dataclass(frozen=True)
class AnalysisCandidate:
    """Raw per-string analysis returned by the service, before filtering."""

    key: str
    suggested: str
    confidence: int  # 1-5
    reasoning: str


@dataclass(frozen=True)
class TranslationSuggestion:
    """A suggestion for improving an existing translation."""

    key: str
    language: str
    current_translation: str
    suggested_translation: str
    confidence: int  # 1-5
    reasoning: str


@dataclass
class TranslationStats:
    """Statistics about one translation run."""

    total_keys: int = 0
    skipped_should_not_translate: int = 0
    skipped_already_translated: int = 0
    translated: int = 0
    errors: int = 0

    def reset(self) -> None:
        self.total_keys = 0
        self.skipped_should_not_translate = 0
        self.skipped_already_translated = 0
        self.translated = 0
        self.errors = 0

    @property
    def has_errors(self) -> bool:
        return self.errors > 0

    def rows(self) -> List[Tuple[str, int]]:
        """Summary rows in display order."""
        return [
            ("Total keys", self.total_keys),
            ("Translations created", self.translated),
            ("Skipped (shouldTranslate=false)", self.skipped_should_not_translate),
            ("Skipped (already translated)", self.skipped_already_translated),
            ("Errors", self.errors),
        ]
