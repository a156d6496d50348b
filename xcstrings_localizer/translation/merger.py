"""Applies service results back into the string catalog."""

from typing import Dict, Optional

from ..models.string_entry import TranslationState, XCStringsFile
from ..models.translation_result import BatchItem, TranslationStats
from ..reporting import Reporter
from ..validation.placeholder_validator import PlaceholderValidator
from .batching import Batch


def apply_translation(
    xcstrings: XCStringsFile,
    key: str,
    language: str,
    value: str,
) -> None:
    """
    Store ``value`` as the translated string unit of ``key`` in ``language``.

    Any previous string unit for that language is replaced; variations are kept.
    """
    entry = xcstrings.strings[key]
    entry.set_translation(language, value, TranslationState.TRANSLATED)


def merge_batch(
    xcstrings: XCStringsFile,
    language: str,
    batch: Batch[BatchItem],
    translations: Dict[str, str],
    stats: TranslationStats,
    reporter: Optional[Reporter] = None,
    validator: Optional[PlaceholderValidator] = None,
) -> None:
    """
    Merge one successful batch response into the catalog.

    Args:
        xcstrings: Catalog to update in place
        language: Target language of the batch
        batch: The batch that was sent
        translations: Service response, key -> translated text
        stats: Run statistics to update
        reporter: Optional output for per-item problems
        validator: Optional placeholder checker; mismatches are reported only
    """
    for item in batch.items:
        translated = translations.get(item.key)
        if translated is None:
            stats.errors += 1
            if reporter:
                reporter.error(f"    ✗ Missing translation for: {item.key}")
            continue

        apply_translation(xcstrings, item.key, language, translated)
        stats.translated += 1

        if validator and reporter:
            for issue in validator.compare(item.text, translated):
                reporter.warning(f"    ! {item.key} [{language}]: {issue.message}")
