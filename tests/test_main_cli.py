# tests/test_main_cli.py
"""
Tests for the xcstrings-localizer command line.
"""
import json

import pytest
from unittest.mock import patch
from click.testing import CliRunner

from xcstrings_localizer.cli import main


def unit(value, state="translated"):
    return {"stringUnit": {"state": state, "value": value}}


CATALOG = {
    "sourceLanguage": "en",
    "strings": {
        "Hi": {"localizations": {"en": unit("Hi")}},
        "Save": {"localizations": {"en": unit("Save"), "fr": unit("Sauver")}},
    },
}


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def catalog_path(write_catalog):
    return write_catalog(CATALOG)


def run_with(runner, client, args):
    with patch("xcstrings_localizer.cli.OpenAIClient", return_value=client):
        return runner.invoke(main, args)


class TestTranslateCommand:

    def test_success(self, runner, catalog_path, fake_client):
        result = run_with(runner, fake_client, [str(catalog_path), "--api-key", "sk-test"])

        assert result.exit_code == 0, result.output
        saved = json.loads(catalog_path.read_text(encoding="utf-8"))
        assert saved["strings"]["Hi"]["localizations"]["fr"]["stringUnit"]["value"] == "Hi [fr]"

    def test_errors_exit_non_zero(self, runner, catalog_path, make_client):
        client = make_client(omit={"Hi"})

        result = run_with(runner, client, [str(catalog_path), "--api-key", "sk-test"])

        assert result.exit_code == 1

    def test_language_and_keys_options(self, runner, catalog_path, fake_client):
        result = run_with(
            runner,
            fake_client,
            [str(catalog_path), "--api-key", "sk-test", "-l", "de", "-l", "es", "-k", "Hi"],
        )

        assert result.exit_code == 0, result.output
        assert fake_client.calls == [("de", ["Hi"]), ("es", ["Hi"])]

    def test_batch_size_option(self, runner, catalog_path, fake_client):
        result = run_with(
            runner,
            fake_client,
            [str(catalog_path), "--api-key", "sk-test", "-l", "de", "--batch-size", "1"],
        )

        assert result.exit_code == 0, result.output
        assert fake_client.calls == [("de", ["Hi"]), ("de", ["Save"])]

    def test_dry_run_without_api_key(self, runner, catalog_path, monkeypatch):
        from xcstrings_localizer.config import config
        monkeypatch.setattr(config, "openai_api_key", "")
        original = catalog_path.read_text(encoding="utf-8")

        result = runner.invoke(main, [str(catalog_path), "--dry-run"])

        assert result.exit_code == 0, result.output
        assert catalog_path.read_text(encoding="utf-8") == original

    def test_missing_api_key(self, runner, catalog_path, monkeypatch):
        from xcstrings_localizer.config import config
        monkeypatch.setattr(config, "openai_api_key", "")

        result = runner.invoke(main, [str(catalog_path)])

        assert result.exit_code == 1

    def test_invalid_document(self, runner, tmp_path, fake_client):
        path = tmp_path / "broken.xcstrings"
        path.write_text("{]", encoding="utf-8")

        result = run_with(runner, fake_client, [str(path), "--api-key", "sk-test"])

        assert result.exit_code == 1
        assert fake_client.calls == []

    def test_non_utf8_input_is_reported(self, runner, tmp_path, fake_client):
        path = tmp_path / "Localizable.xcstrings"
        path.write_bytes(b"\xff\xfe not a catalog")

        result = run_with(runner, fake_client, [str(path), "--api-key", "sk-test", "--dry-run"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert fake_client.calls == []

    def test_bad_batch_size_setting_is_reported(self, runner, catalog_path, monkeypatch):
        from xcstrings_localizer.config import config
        monkeypatch.setattr(config, "batch_size", None)

        result = runner.invoke(main, [str(catalog_path), "--dry-run"])

        assert result.exit_code == 1
        assert "XCSTRINGS_BATCH_SIZE must be a positive integer" in result.output

    def test_missing_input_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.xcstrings"), "--api-key", "sk-test"])

        assert result.exit_code != 0


class TestSuggestCommand:

    def test_interactive_accept(self, runner, catalog_path, make_client):
        client = make_client(analysis={("Save", "fr"): ("Enregistrer", 5, "Standard UI term")})

        with patch("xcstrings_localizer.cli.OpenAIClient", return_value=client):
            result = runner.invoke(main, [str(catalog_path), "--api-key", "sk-test", "--suggest"], input="y\n")

        assert result.exit_code == 0, result.output
        assert "Enregistrer" in catalog_path.read_text(encoding="utf-8")

    def test_auto_reject_leaves_file(self, runner, catalog_path, make_client):
        client = make_client(analysis={("Save", "fr"): ("Enregistrer", 5, "Standard UI term")})
        original = catalog_path.read_text(encoding="utf-8")

        result = run_with(
            runner,
            client,
            [str(catalog_path), "--api-key", "sk-test", "--suggest", "--auto-decision", "reject"],
        )

        assert result.exit_code == 0, result.output
        assert catalog_path.read_text(encoding="utf-8") == original

    def test_analysis_failure_does_not_fail_process(self, runner, catalog_path, make_client):
        client = make_client(analysis_fail_calls={1})

        result = run_with(runner, client, [str(catalog_path), "--api-key", "sk-test", "--suggest"])

        assert result.exit_code == 0, result.output

    def test_suggest_dry_run_requires_api_key(self, runner, catalog_path, monkeypatch):
        from xcstrings_localizer.config import config
        monkeypatch.setattr(config, "openai_api_key", "")

        result = runner.invoke(main, [str(catalog_path), "--suggest", "--dry-run"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "OPENAI_API_KEY is not set" in result.output

    def test_suggest_dry_run_does_not_save(self, runner, catalog_path, make_client):
        client = make_client(analysis={("Save", "fr"): ("Enregistrer", 5, "Standard UI term")})
        original = catalog_path.read_text(encoding="utf-8")

        result = run_with(
            runner,
            client,
            [str(catalog_path), "--api-key", "sk-test", "--suggest", "--dry-run", "--auto-decision", "accept"],
        )

        assert result.exit_code == 0, result.output
        assert client.analysis_calls
        assert catalog_path.read_text(encoding="utf-8") == original
