# tests/test_merger.py
"""
Tests for merging service results into the catalog.
"""
import copy

from xcstrings_localizer.models.string_entry import (
    Localization,
    StringEntry,
    StringUnit,
    TranslationState,
    XCStringsFile,
)
from xcstrings_localizer.models.translation_result import BatchItem, TranslationStats
from xcstrings_localizer.translation.batching import Batch
from xcstrings_localizer.translation.merger import apply_translation, merge_batch
from xcstrings_localizer.validation.placeholder_validator import PlaceholderValidator


def make_catalog():
    return XCStringsFile(
        source_language="en",
        strings={
            "Hello": StringEntry(key="Hello"),
            "Bye": StringEntry(
                key="Bye",
                localizations={"fr": Localization(string_unit=StringUnit("", TranslationState.NEW))},
            ),
            "%d files": StringEntry(key="%d files"),
        },
    )


def make_batch(*keys):
    return Batch(number=1, total=1, items=[BatchItem(key=k, text=k) for k in keys])


class TestApplyTranslation:

    def test_overwrites_previous_state(self):
        xcstrings = make_catalog()

        apply_translation(xcstrings, "Bye", "fr", "Au revoir")

        unit = xcstrings.strings["Bye"].localizations["fr"].string_unit
        assert unit.value == "Au revoir"
        assert unit.state is TranslationState.TRANSLATED


class TestMergeBatch:

    def test_successes_and_omissions(self, reporter, output_of):
        xcstrings = make_catalog()
        stats = TranslationStats()

        merge_batch(xcstrings, "fr", make_batch("Hello", "Bye"), {"Hello": "Bonjour"}, stats, reporter)

        assert stats.translated == 1
        assert stats.errors == 1
        assert xcstrings.strings["Hello"].get_value("fr") == "Bonjour"
        assert xcstrings.strings["Bye"].get_value("fr") == ""
        assert "Missing translation for: Bye" in output_of()

    def test_same_response_twice_is_idempotent(self):
        first, second = make_catalog(), make_catalog()
        response = {"Hello": "Bonjour", "Bye": "Au revoir"}
        batch = make_batch("Hello", "Bye")

        merge_batch(first, "fr", batch, response, TranslationStats())
        merge_batch(second, "fr", batch, response, TranslationStats())
        snapshot = copy.deepcopy(second)
        merge_batch(second, "fr", batch, response, TranslationStats())

        assert second == snapshot
        assert first == second

    def test_last_write_wins(self):
        xcstrings = make_catalog()
        batch = make_batch("Hello")

        merge_batch(xcstrings, "fr", batch, {"Hello": "Salut"}, TranslationStats())
        merge_batch(xcstrings, "fr", batch, {"Hello": "Bonjour"}, TranslationStats())

        assert xcstrings.strings["Hello"].get_value("fr") == "Bonjour"

    def test_placeholder_mismatch_is_reported_but_applied(self, reporter, output_of):
        xcstrings = make_catalog()
        stats = TranslationStats()

        merge_batch(
            xcstrings,
            "fr",
            make_batch("%d files"),
            {"%d files": "fichiers"},
            stats,
            reporter,
            validator=PlaceholderValidator(),
        )

        assert stats.translated == 1
        assert xcstrings.strings["%d files"].get_value("fr") == "fichiers"
        assert "Missing placeholder %d" in output_of()
