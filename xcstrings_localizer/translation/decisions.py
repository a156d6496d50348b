"""Rules deciding which strings are sent for translation."""

from typing import Optional

from ..models.string_entry import Localization, StringEntry, TranslateFlag, TranslationState


def should_translate_key(entry: StringEntry, force: bool) -> bool:
    """False only for entries marked ``shouldTranslate: false``, unless forced."""
    if entry.should_translate is TranslateFlag.DENY and not force:
        return False
    return True


def needs_translation(
    language: str,
    localization: Optional[Localization],
    source_language: str,
    force: bool,
) -> bool:
    """
    Decide whether a single localization has to be (re)translated.

    Args:
        language: Target language code
        localization: The entry's current localization for that language, if any
        source_language: The catalog's source language
        force: Retranslate even complete localizations

    Returns:
        True if the string should be sent to the translation service
    """
    if language == source_language:
        return False

    if localization is None or localization.string_unit is None:
        return True

    if force:
        return True

    unit = localization.string_unit
    return unit.state is TranslationState.NEW or unit.value == ""


def resolve_source_text(entry: StringEntry, source_language: str = "en") -> str:
    """Source-language value of an entry, or the key itself when there is none."""
    value = entry.get_value(source_language)
    if value:
        return value
    return entry.key
