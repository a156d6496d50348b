"""Writer for Apple's .xcstrings JSON format (Xcode 15+)."""

import json
from pathlib import Path
from typing import Any, Dict

from ..models.string_entry import Localization, StringEntry, XCStringsFile


class XCStringsWriter:
    """Writer for .xcstrings files."""

    def write(self, xcstrings: XCStringsFile, output_path: str) -> None:
        """
        Write an XCStringsFile to disk.

        Args:
            xcstrings: The XCStringsFile to write
            output_path: Path to write the file to
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_string(xcstrings))
            f.write("\n")  # Trailing newline

    def to_string(self, xcstrings: XCStringsFile) -> str:
        """
        Convert an XCStringsFile to a JSON string.

        Keys are sorted at every level and separators follow Xcode's
        ``"key" : value`` style so rewritten catalogs diff cleanly.
        """
        data = self.to_dict(xcstrings)
        return json.dumps(
            data,
            indent=2,
            ensure_ascii=False,
            sort_keys=True,
            separators=(",", " : "),
        )

    def to_dict(self, xcstrings: XCStringsFile) -> Dict[str, Any]:
        """Convert XCStringsFile to dictionary for JSON serialization."""
        data: Dict[str, Any] = dict(xcstrings.extra)
        data["sourceLanguage"] = xcstrings.source_language
        data["strings"] = {
            key: self._entry_to_dict(xcstrings.strings[key])
            for key in sorted(xcstrings.strings)
        }
        if xcstrings.version is not None:
            data["version"] = xcstrings.version
        return data

    def _entry_to_dict(self, entry: StringEntry) -> Dict[str, Any]:
        """Convert a StringEntry to dictionary."""
        entry_dict: Dict[str, Any] = dict(entry.extra)

        if entry.comment is not None:
            entry_dict["comment"] = entry.comment

        if entry.extraction_state is not None:
            entry_dict["extractionState"] = entry.extraction_state

        should_translate = entry.should_translate.to_json()
        if should_translate is not None:
            entry_dict["shouldTranslate"] = should_translate

        if entry.localizations or entry.explicit_localizations:
            entry_dict["localizations"] = {
                lang: self._localization_to_dict(entry.localizations[lang])
                for lang in sorted(entry.localizations)
            }

        return entry_dict

    def _localization_to_dict(self, loc: Localization) -> Dict[str, Any]:
        """Convert a Localization to dictionary."""
        loc_dict: Dict[str, Any] = dict(loc.extra)

        if loc.string_unit is not None:
            loc_dict["stringUnit"] = {
                "state": loc.string_unit.state.value,
                "value": loc.string_unit.value,
            }

        if loc.variations is not None:
            loc_dict["variations"] = loc.variations

        return loc_dict
