"""Pytest configuration and shared fixtures."""
import io
import json

import pytest
from rich.console import Console

from xcstrings_localizer.models.translation_result import AnalysisCandidate
from xcstrings_localizer.reporting import Reporter
from xcstrings_localizer.translation.clients.base import (
    TranslationClient,
    TranslationServiceError,
)


class FakeTranslationClient(TranslationClient):
    """In-memory translation service recording every call."""

    def __init__(self, fail_calls=(), omit=(), analysis=None, analysis_fail_calls=()):
        self.calls = []
        self.analysis_calls = []
        self.analysis_sources = []
        self.fail_calls = set(fail_calls)
        self.omit = set(omit)
        self.analysis = analysis or {}
        self.analysis_fail_calls = set(analysis_fail_calls)

    async def translate_batch(self, items, target_language):
        self.calls.append((target_language, [item.key for item in items]))
        if len(self.calls) in self.fail_calls:
            raise TranslationServiceError("service unavailable")
        return {
            item.key: f"{item.text} [{target_language}]"
            for item in items
            if item.key not in self.omit
        }

    async def analyze_batch(self, items, target_language, source_language="en"):
        self.analysis_calls.append((target_language, [item.key for item in items]))
        self.analysis_sources.append(source_language)
        if len(self.analysis_calls) in self.analysis_fail_calls:
            raise TranslationServiceError("service unavailable")
        candidates = []
        for item in items:
            if (item.key, target_language) in self.analysis:
                suggested, confidence, reasoning = self.analysis[(item.key, target_language)]
                candidates.append(
                    AnalysisCandidate(item.key, suggested, confidence, reasoning)
                )
        return candidates

    def language_name(self, code):
        return {"fr": "French", "de": "German"}.get(code, code)


def translated(value, state="translated"):
    return {"stringUnit": {"state": state, "value": value}}


@pytest.fixture
def reporter():
    """Reporter writing to an in-memory buffer."""
    return Reporter(Console(file=io.StringIO(), width=200, force_terminal=False))


@pytest.fixture
def output_of(reporter):
    return lambda: reporter.console.file.getvalue()


@pytest.fixture
def fake_client():
    return FakeTranslationClient()


@pytest.fixture
def make_client():
    """Factory for clients with scripted failures, omissions or analyses."""
    return FakeTranslationClient


@pytest.fixture
def write_catalog(tmp_path):
    """Write a catalog dict to a temporary .xcstrings file and return its path."""
    def _write(data, name="Localizable.xcstrings"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_catalog():
    return {
        "sourceLanguage": "en",
        "version": "1.0",
        "strings": {
            "Hello": {
                "comment": "Greeting on the home screen",
                "localizations": {
                    "en": translated("Hello"),
                    "fr": translated("Bonjour"),
                    "de": translated("", state="new"),
                },
            },
            "Goodbye": {
                "localizations": {"en": translated("Goodbye")},
            },
            "%lld items": {
                "localizations": {"en": translated("%lld items")},
            },
            "AppName": {
                "shouldTranslate": False,
                "localizations": {"en": translated("MintDeck")},
            },
        },
    }
