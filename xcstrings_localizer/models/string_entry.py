"""Data models for XCStrings file structure."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class TranslationState(str, Enum):
    """State of a string unit as stored in the catalog."""

    NEW = "new"
    TRANSLATED = "translated"
    NEEDS_REVIEW = "needs_review"
    STALE = "stale"


class TranslateFlag(Enum):
    """The ``shouldTranslate`` attribute of an entry.

    Xcode omits the attribute for the common case, so absence is kept
    distinct from an explicit ``true``.
    """

    UNSET = "unset"
    ALLOW = "allow"
    DENY = "deny"

    @classmethod
    def from_json(cls, value: Optional[bool]) -> "TranslateFlag":
        if value is None:
            return cls.UNSET
        return cls.ALLOW if value else cls.DENY

    def to_json(self) -> Optional[bool]:
        if self is TranslateFlag.UNSET:
            return None
        return self is TranslateFlag.ALLOW


@dataclass
class StringUnit:
    """Represents a single string translation unit."""

    value: str
    state: TranslationState = TranslationState.NEW

    @property
    def is_complete(self) -> bool:
        """A translated unit with a non-empty value."""
        return self.state is TranslationState.TRANSLATED and self.value != ""


@dataclass
class Localization:
    """Represents a localization entry for a specific language."""

    string_unit: Optional[StringUnit] = None
    variations: Optional[Dict[str, Any]] = None  # plural/device variants, passthrough only
    extra: Dict[str, Any] = field(default_factory=dict)


@dataclass
class StringEntry:
    """Represents a single localizable string entry."""

    key: str
    comment: Optional[str] = None
    should_translate: TranslateFlag = TranslateFlag.UNSET
    localizations: Dict[str, Localization] = field(default_factory=dict)
    explicit_localizations: bool = False  # "localizations" key present even if empty
    extraction_state: Optional[str] = None  # manual, extracted_with_value, stale
    extra: Dict[str, Any] = field(default_factory=dict)

    def get_localization(self, language: str) -> Optional[Localization]:
        return self.localizations.get(language)

    def get_value(self, language: str) -> Optional[str]:
        """Get the flat string unit value for a language, if any."""
        loc = self.localizations.get(language)
        if loc is None or loc.string_unit is None:
            return None
        return loc.string_unit.value

    def has_translation(self, language: str) -> bool:
        """Check if this string has a complete translation for the given language."""
        loc = self.localizations.get(language)
        return loc is not None and loc.string_unit is not None and loc.string_unit.is_complete

    def set_translation(
        self,
        language: str,
        value: str,
        state: TranslationState = TranslationState.TRANSLATED,
    ) -> None:
        """Set the string unit for a language, keeping any existing variations."""
        existing = self.localizations.get(language)
        if existing is None:
            self.localizations[language] = Localization(
                string_unit=StringUnit(value=value, state=state)
            )
            return
        existing.string_unit = StringUnit(value=value, state=state)


@dataclass
class XCStringsFile:
    """Represents a complete .xcstrings file."""

    source_language: str
    strings: Dict[str, StringEntry]
    version: Optional[str] = "1.0"
    extra: Dict[str, Any] = field(default_factory=dict)

    def languages(self) -> List[str]:
        """All language codes that appear in any entry, sorted."""
        found = set()
        for entry in self.strings.values():
            found.update(entry.localizations.keys())
        return sorted(found)

    def target_languages(self) -> List[str]:
        """Languages present in the file other than the source language."""
        return [lang for lang in self.languages() if lang != self.source_language]
