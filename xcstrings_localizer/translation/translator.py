"""Batch localizer for .xcstrings catalogs."""

from typing import List, Optional, Sequence

from ..extraction.xcstrings_parser import XCStringsParser
from ..extraction.xcstrings_writer import XCStringsWriter
from ..models.string_entry import StringEntry, XCStringsFile
from ..models.translation_result import (
    AnalysisCandidate,
    AnalysisItem,
    BatchItem,
    TranslationStats,
    TranslationSuggestion,
)
from ..reporting import Reporter
from ..review import DecisionProvider, ReviewOutcome, run_review
from ..validation.placeholder_validator import PlaceholderValidator
from .batching import DEFAULT_BATCH_SIZE, Batch, BatchScheduler
from .clients.base import TranslationClient, TranslationServiceError
from .decisions import needs_translation, resolve_source_text, should_translate_key
from .merger import merge_batch

MIN_SUGGESTION_CONFIDENCE = 4


def select_suggestions(
    batch: Batch[AnalysisItem],
    candidates: List[AnalysisCandidate],
    language: str,
) -> List[TranslationSuggestion]:
    """
    Keep the candidates worth showing to a human.

    A candidate survives only with confidence >= 4 and a text that differs
    from the current translation. Results follow the batch order.
    """
    by_key = {candidate.key: candidate for candidate in candidates}
    suggestions = []
    for item in batch.items:
        candidate = by_key.get(item.key)
        if candidate is None:
            continue
        if candidate.confidence < MIN_SUGGESTION_CONFIDENCE:
            continue
        if candidate.suggested == item.translation:
            continue
        suggestions.append(
            TranslationSuggestion(
                key=item.key,
                language=language,
                current_translation=item.translation,
                suggested_translation=candidate.suggested,
                confidence=candidate.confidence,
                reasoning=candidate.reasoning,
            )
        )
    return suggestions


class XCStringsLocalizer:
    """
    Translates missing strings of a catalog and reviews existing ones.

    Flow for a normal run:
    1. Load the catalog
    2. For every target language, collect entries needing translation
    3. Send them in fixed-size batches, one request at a time
    4. Merge results and count successes/errors
    5. Save (unless dry run) and print a summary
    """

    def __init__(
        self,
        client: Optional[TranslationClient],
        reporter: Optional[Reporter] = None,
        batch_size: int = DEFAULT_BATCH_SIZE,
        parser: Optional[XCStringsParser] = None,
        writer: Optional[XCStringsWriter] = None,
        validator: Optional[PlaceholderValidator] = None,
    ):
        """
        Initialize the localizer.

        Args:
            client: Translation service; may be None for dry runs only
            reporter: Output sink, defaults to a stderr console
            batch_size: Maximum number of strings per request
            parser: Catalog parser
            writer: Catalog writer
            validator: Placeholder checker for returned translations
        """
        self.client = client
        self.reporter = reporter or Reporter()
        self.scheduler = BatchScheduler(batch_size)
        self.parser = parser or XCStringsParser()
        self.writer = writer or XCStringsWriter()
        self.validator = validator or PlaceholderValidator()
        self.stats = TranslationStats()

    def language_name(self, code: str) -> str:
        if self.client is None:
            return code
        return self.client.language_name(code)

    # -- Normal mode ---------------------------------------------------------

    async def localize(
        self,
        input_path: str,
        output_path: Optional[str] = None,
        keys: Optional[Sequence[str]] = None,
        languages: Optional[Sequence[str]] = None,
        force: bool = False,
        dry_run: bool = False,
    ) -> TranslationStats:
        """
        Translate a catalog file and save the result.

        Args:
            input_path: Catalog to read
            output_path: Where to write, defaults to the input path
            keys: Only process these keys
            languages: Target languages, defaults to every non-source language in the file
            force: Retranslate complete strings and ignore ``shouldTranslate: false``
            dry_run: Count what would be translated without calling the service or saving

        Returns:
            Statistics of the run
        """
        self.reporter.info(f"Loading: {input_path}")
        xcstrings = self.parser.parse(input_path)

        stats = await self.translate_document(
            xcstrings, keys=keys, languages=languages, force=force, dry_run=dry_run
        )

        if not dry_run:
            output = output_path or input_path
            self.reporter.info(f"Saving to: {output}")
            self.writer.write(xcstrings, output)
        else:
            self.reporter.warning("Dry run - no changes saved")

        self.reporter.print_summary(stats)
        return stats

    async def translate_document(
        self,
        xcstrings: XCStringsFile,
        keys: Optional[Sequence[str]] = None,
        languages: Optional[Sequence[str]] = None,
        force: bool = False,
        dry_run: bool = False,
    ) -> TranslationStats:
        """Translate an in-memory catalog; see :meth:`localize`."""
        if self.client is None and not dry_run:
            raise ValueError("A translation client is required unless dry_run is set")

        self.stats.reset()
        target_languages = self._translation_languages(xcstrings, languages)
        entries = self._select_entries(xcstrings, keys, action="Translating")
        self.stats.total_keys = len(entries)

        self.reporter.info(f"Source language: {xcstrings.source_language}")
        self.reporter.info(f"Target languages: {', '.join(target_languages) or 'none'}")

        for language in target_languages:
            work = self._collect_translation_work(xcstrings, entries, language, force)
            if not work:
                continue

            self.reporter.info(f"Translating {len(work)} strings to {language}...")
            for batch in self.scheduler.partition(work):
                self.reporter.batch(batch.number, batch.total, len(batch))
                if dry_run:
                    self.stats.translated += len(batch)
                    continue
                await self._translate_batch(xcstrings, language, batch)

        return self.stats

    def _collect_translation_work(
        self,
        xcstrings: XCStringsFile,
        entries: List[StringEntry],
        language: str,
        force: bool,
    ) -> List[BatchItem]:
        work = []
        for entry in entries:
            if not should_translate_key(entry, force):
                self.stats.skipped_should_not_translate += 1
                continue

            if not needs_translation(
                language,
                entry.get_localization(language),
                xcstrings.source_language,
                force,
            ):
                self.stats.skipped_already_translated += 1
                continue

            work.append(
                BatchItem(
                    key=entry.key,
                    text=resolve_source_text(entry, xcstrings.source_language),
                    context=entry.comment,
                )
            )
        return work

    async def _translate_batch(
        self,
        xcstrings: XCStringsFile,
        language: str,
        batch: Batch[BatchItem],
    ) -> None:
        try:
            translations = await self.client.translate_batch(batch.items, language)
        except TranslationServiceError as e:
            self.reporter.error(f"    ✗ Batch error: {e}")
            self.stats.errors += len(batch)
            return

        merge_batch(
            xcstrings,
            language,
            batch,
            translations,
            self.stats,
            reporter=self.reporter,
            validator=self.validator,
        )

    # -- Suggest mode --------------------------------------------------------

    async def suggest_improvements(
        self,
        input_path: str,
        provider: DecisionProvider,
        output_path: Optional[str] = None,
        keys: Optional[Sequence[str]] = None,
        languages: Optional[Sequence[str]] = None,
        dry_run: bool = False,
    ) -> ReviewOutcome:
        """
        Analyze existing translations and let a human accept improvements.

        The catalog is saved only when at least one suggestion was accepted
        and this is not a dry run.

        Args:
            input_path: Catalog to read
            provider: Source of accept/reject/quit decisions
            output_path: Where to write, defaults to the input path
            keys: Only analyze these keys
            languages: Only analyze these languages (must exist in the file)
            dry_run: Review as usual but never save accepted suggestions

        Returns:
            ReviewOutcome of the interactive session
        """
        self.reporter.info(f"Loading: {input_path}")
        xcstrings = self.parser.parse(input_path)

        suggestions = await self.collect_suggestions(xcstrings, keys=keys, languages=languages)
        if not suggestions:
            self.reporter.success("✓ No improvement suggestions found!")
            self.reporter.detail("All translations look good.")
            return ReviewOutcome()

        self.reporter.info(f"Found {len(suggestions)} suggestion(s) for improvement")
        outcome = run_review(
            suggestions, xcstrings, provider, self.reporter, language_name=self.language_name
        )

        if outcome.accepted > 0 and dry_run:
            self.reporter.warning("Dry run - no changes saved")
        elif outcome.accepted > 0:
            output = output_path or input_path
            self.reporter.info(f"Saving changes to: {output}")
            self.writer.write(xcstrings, output)
            self.reporter.success(f"✓ Successfully applied {outcome.accepted} suggestion(s)!")
        else:
            self.reporter.detail("No changes made.")

        if outcome.rejected > 0:
            self.reporter.detail(f"Rejected {outcome.rejected} suggestion(s).")

        return outcome

    async def collect_suggestions(
        self,
        xcstrings: XCStringsFile,
        keys: Optional[Sequence[str]] = None,
        languages: Optional[Sequence[str]] = None,
    ) -> List[TranslationSuggestion]:
        """
        Run the analysis batches and return high-confidence suggestions.

        Failed batches are reported and skipped; they are not counted as errors.
        """
        if self.client is None:
            raise ValueError("A translation client is required for analysis")

        target_languages = xcstrings.target_languages()
        if languages:
            requested = set(languages)
            target_languages = [lang for lang in target_languages if lang in requested]
            if not target_languages:
                self.reporter.error("Error: None of the specified languages found in file")
                return []
            self.reporter.info(f"Analyzing languages: {', '.join(target_languages)}")
        else:
            self.reporter.info(f"Target languages: {', '.join(target_languages) or 'none'}")

        entries = self._select_entries(xcstrings, keys, action="Analyzing")
        suggestions: List[TranslationSuggestion] = []

        for language in target_languages:
            work = self._collect_analysis_work(xcstrings, entries, language)
            if not work:
                continue

            self.reporter.info(f"Analyzing {len(work)} translations in {language}...")
            for batch in self.scheduler.partition(work):
                self.reporter.batch(batch.number, batch.total, len(batch))
                try:
                    candidates = await self.client.analyze_batch(
                        batch.items, language, xcstrings.source_language
                    )
                except TranslationServiceError as e:
                    self.reporter.error(f"    ✗ Batch error: {e}")
                    continue

                found = select_suggestions(batch, candidates, language)
                if found:
                    self.reporter.detail(f"  Found {len(found)} high-confidence suggestion(s)")
                suggestions.extend(found)

        return suggestions

    def _collect_analysis_work(
        self,
        xcstrings: XCStringsFile,
        entries: List[StringEntry],
        language: str,
    ) -> List[AnalysisItem]:
        work = []
        for entry in entries:
            if not entry.has_translation(language):
                continue
            work.append(
                AnalysisItem(
                    key=entry.key,
                    original=resolve_source_text(entry, xcstrings.source_language),
                    translation=entry.get_value(language),
                    context=entry.comment,
                )
            )
        return work

    # -- Helpers -------------------------------------------------------------

    def _translation_languages(
        self,
        xcstrings: XCStringsFile,
        languages: Optional[Sequence[str]],
    ) -> List[str]:
        """Requested languages (which may be new to the file), else those present."""
        if not languages:
            return xcstrings.target_languages()

        if xcstrings.source_language in languages:
            self.reporter.warning(
                f"Ignoring source language '{xcstrings.source_language}' as a target"
            )
        return sorted(set(languages) - {xcstrings.source_language})

    def _select_entries(
        self,
        xcstrings: XCStringsFile,
        keys: Optional[Sequence[str]],
        action: str,
    ) -> List[StringEntry]:
        """Entries to process, sorted by key."""
        if not keys:
            self.reporter.info(f"Total keys in file: {len(xcstrings.strings)}")
            return [xcstrings.strings[key] for key in sorted(xcstrings.strings)]

        wanted = set(keys)
        for key in sorted(wanted - set(xcstrings.strings)):
            self.reporter.warning(f"Key not found: {key}")

        selected = [xcstrings.strings[key] for key in sorted(wanted & set(xcstrings.strings))]
        self.reporter.info(f"{action} specific keys: {len(selected)}")
        return selected
