# tests/test_placeholder_validator.py
"""
Tests for format specifier comparison.
"""
import pytest

from xcstrings_localizer.validation.placeholder_validator import PlaceholderValidator


@pytest.fixture
def validator():
    return PlaceholderValidator()


class TestFindPlaceholders:

    def test_recognises_ios_specifiers(self, validator):
        text = "%@ has %lld items, %.0f%% done, %1$@ and {name}"

        assert validator.find_placeholders(text) == ["%@", "%lld", "%.0f", "%%", "%1$@", "{name}"]

    def test_plain_text(self, validator):
        assert validator.find_placeholders("Hello world") == []


class TestCompare:

    def test_reordered_placeholders_are_fine(self, validator):
        assert validator.is_valid("%1$@ sent %2$@", "%2$@ reçu de %1$@")

    def test_missing_placeholder(self, validator):
        issues = validator.compare("%d files", "fichiers")

        assert [(i.kind, i.token) for i in issues] == [("missing", "%d")]

    def test_extra_placeholder(self, validator):
        issues = validator.compare("Files", "%@ fichiers")

        assert [(i.kind, i.token) for i in issues] == [("extra", "%@")]

    def test_duplicate_counts_matter(self, validator):
        issues = validator.compare("%@ and %@", "%@")

        assert issues[0].kind == "missing"

    def test_newline_change(self, validator):
        issues = validator.compare("Line one\nLine two", "Ligne un Ligne deux")

        assert [i.kind for i in issues] == ["newlines"]
