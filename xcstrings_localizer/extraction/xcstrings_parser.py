"""Parser for Apple's .xcstrings JSON format (Xcode 15+)."""

import json
from pathlib import Path
from typing import Any

from ..models.string_entry import (
    Localization,
    StringEntry,
    StringUnit,
    TranslateFlag,
    TranslationState,
    XCStringsFile,
)

ROOT_FIELDS = {"sourceLanguage", "strings", "version"}
ENTRY_FIELDS = {"comment", "shouldTranslate", "localizations", "extractionState"}
LOCALIZATION_FIELDS = {"stringUnit", "variations"}


class InvalidDocumentError(ValueError):
    """Raised when a file is not a well-formed string catalog."""


class XCStringsParser:
    """Parser for .xcstrings files."""

    def parse(self, file_path: str) -> XCStringsFile:
        """
        Parse an .xcstrings file and return a structured representation.

        Args:
            file_path: Path to the .xcstrings file

        Returns:
            XCStringsFile object containing all parsed data

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidDocumentError: If the content is not a valid string catalog
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise InvalidDocumentError(f"File is not valid UTF-8: {e}") from e

        return self.parse_string(content)

    def parse_string(self, content: str) -> XCStringsFile:
        """
        Parse .xcstrings content from a string.

        Args:
            content: JSON string content

        Returns:
            XCStringsFile object
        """
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise InvalidDocumentError(f"Invalid JSON: {e}") from e

        return self._parse_data(data)

    def _parse_data(self, data: Any) -> XCStringsFile:
        """Parse the JSON data structure into our model."""
        if not isinstance(data, dict):
            raise InvalidDocumentError("Root of the document must be an object")

        source_language = data.get("sourceLanguage", "en")
        if not isinstance(source_language, str):
            raise InvalidDocumentError("'sourceLanguage' must be a string")

        version = data.get("version")
        if version is not None and not isinstance(version, str):
            raise InvalidDocumentError("'version' must be a string")

        raw_strings = data.get("strings")
        if not isinstance(raw_strings, dict):
            raise InvalidDocumentError("'strings' must be an object")

        strings = {}
        for key, entry_data in raw_strings.items():
            strings[key] = self._parse_string_entry(key, entry_data)

        return XCStringsFile(
            source_language=source_language,
            strings=strings,
            version=version,
            extra={k: v for k, v in data.items() if k not in ROOT_FIELDS},
        )

    def _parse_string_entry(self, key: str, entry_data: Any) -> StringEntry:
        """Parse a single string entry."""
        if not isinstance(entry_data, dict):
            raise InvalidDocumentError(f"Entry '{key}' must be an object")

        comment = entry_data.get("comment")
        if comment is not None and not isinstance(comment, str):
            raise InvalidDocumentError(f"Entry '{key}': 'comment' must be a string")

        should_translate = entry_data.get("shouldTranslate")
        if should_translate is not None and not isinstance(should_translate, bool):
            raise InvalidDocumentError(f"Entry '{key}': 'shouldTranslate' must be a boolean")

        raw_localizations = entry_data.get("localizations", {})
        if not isinstance(raw_localizations, dict):
            raise InvalidDocumentError(f"Entry '{key}': 'localizations' must be an object")

        localizations = {}
        for lang, loc_data in raw_localizations.items():
            localizations[lang] = self._parse_localization(key, lang, loc_data)

        return StringEntry(
            key=key,
            comment=comment,
            should_translate=TranslateFlag.from_json(should_translate),
            localizations=localizations,
            explicit_localizations="localizations" in entry_data,
            extraction_state=entry_data.get("extractionState"),
            extra={k: v for k, v in entry_data.items() if k not in ENTRY_FIELDS},
        )

    def _parse_localization(self, key: str, lang: str, loc_data: Any) -> Localization:
        """Parse a localization entry."""
        where = f"Entry '{key}', language '{lang}'"
        if not isinstance(loc_data, dict):
            raise InvalidDocumentError(f"{where}: localization must be an object")

        string_unit = None
        if "stringUnit" in loc_data:
            string_unit = self._parse_string_unit(where, loc_data["stringUnit"])

        return Localization(
            string_unit=string_unit,
            variations=loc_data.get("variations"),
            extra={k: v for k, v in loc_data.items() if k not in LOCALIZATION_FIELDS},
        )

    def _parse_string_unit(self, where: str, su: Any) -> StringUnit:
        if not isinstance(su, dict):
            raise InvalidDocumentError(f"{where}: 'stringUnit' must be an object")

        value = su.get("value")
        if not isinstance(value, str):
            raise InvalidDocumentError(f"{where}: 'stringUnit.value' must be a string")

        try:
            state = TranslationState(su.get("state"))
        except ValueError:
            raise InvalidDocumentError(
                f"{where}: unknown stringUnit state {su.get('state')!r}"
            ) from None

        return StringUnit(value=value, state=state)
