"""Data models for the localizer."""

from .string_entry import (
    Localization,
    StringEntry,
    StringUnit,
    TranslateFlag,
    TranslationState,
    XCStringsFile,
)
from .translation_result import (
    AnalysisCandidate,
    AnalysisItem,
    BatchItem,
    TranslationStats,
    TranslationSuggestion,
)

__all__ = [
    "StringUnit",
    "Localization",
    "StringEntry",
    "TranslateFlag",
    "TranslationState",
    "XCStringsFile",
    "BatchItem",
    "AnalysisItem",
    "AnalysisCandidate",
    "TranslationSuggestion",
    "TranslationStats",
]
