"""Interactive accept/reject loop over translation suggestions."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .models.string_entry import XCStringsFile
from .models.translation_result import TranslationSuggestion
from .reporting import Reporter
from .translation.merger import apply_translation

PROMPT = "Accept this suggestion? [y/N/q]"


class Decision(Enum):
    ACCEPT = "accept"
    REJECT = "reject"
    QUIT = "quit"


def parse_decision(response: Optional[str]) -> Decision:
    """Map a typed answer to a decision; anything unrecognised rejects."""
    answer = (response or "").strip().lower()
    if answer in ("y", "yes"):
        return Decision.ACCEPT
    if answer in ("q", "quit"):
        return Decision.QUIT
    return Decision.REJECT


class DecisionProvider(ABC):
    """Source of accept/reject/quit decisions for the review loop."""

    @abstractmethod
    def decide(self, suggestion: TranslationSuggestion, index: int, total: int) -> Decision:
        """Decide on the suggestion at ``index`` (0-based) of ``total``."""


class ConsoleDecisionProvider(DecisionProvider):
    """Asks the user on the reporter's console."""

    def __init__(self, reporter: Reporter):
        self.reporter = reporter

    def decide(self, suggestion: TranslationSuggestion, index: int, total: int) -> Decision:
        try:
            return parse_decision(self.reporter.ask(PROMPT))
        except EOFError:
            return Decision.REJECT
        except KeyboardInterrupt:
            return Decision.QUIT


class ScriptedDecisionProvider(DecisionProvider):
    """Replays canned answers; once they run out every suggestion is rejected."""

    def __init__(self, answers: Iterable[str]):
        self.answers = list(answers)
        self.asked = 0

    def decide(self, suggestion: TranslationSuggestion, index: int, total: int) -> Decision:
        answer = self.answers[self.asked] if self.asked < len(self.answers) else ""
        self.asked += 1
        return parse_decision(answer)


class AutoDecisionProvider(DecisionProvider):
    """Gives the same decision for every suggestion (non-interactive runs)."""

    def __init__(self, decision: Decision):
        self.decision = decision

    def decide(self, suggestion: TranslationSuggestion, index: int, total: int) -> Decision:
        return self.decision


@dataclass
class ReviewOutcome:
    """What happened during one review session."""

    total: int = 0
    accepted: int = 0
    rejected: int = 0
    stopped: bool = False

    @property
    def undecided(self) -> int:
        return self.total - self.accepted - self.rejected

    @property
    def changed(self) -> bool:
        return self.accepted > 0


def run_review(
    suggestions: List[TranslationSuggestion],
    xcstrings: XCStringsFile,
    provider: DecisionProvider,
    reporter: Reporter,
    language_name: Callable[[str], str] = lambda code: code,
) -> ReviewOutcome:
    """
    Present each suggestion in order and apply the accepted ones.

    Quitting stops immediately; later suggestions are left undecided.

    Args:
        suggestions: Suggestions in presentation order
        xcstrings: Catalog updated in place on acceptance
        provider: Where decisions come from
        reporter: Output for the suggestion panels
        language_name: Display name lookup for language codes

    Returns:
        ReviewOutcome with accepted/rejected counts
    """
    outcome = ReviewOutcome(total=len(suggestions))

    for index, suggestion in enumerate(suggestions):
        reporter.show_suggestion(index, len(suggestions), suggestion, language_name(suggestion.language))
        decision = provider.decide(suggestion, index, len(suggestions))

        if decision is Decision.QUIT:
            reporter.warning("Stopped by user.")
            outcome.stopped = True
            break

        if decision is Decision.ACCEPT:
            apply_translation(
                xcstrings,
                suggestion.key,
                suggestion.language,
                suggestion.suggested_translation,
            )
            outcome.accepted += 1
            reporter.success("✓ Applied")
        else:
            outcome.rejected += 1
            reporter.detail("✗ Skipped")

    return outcome
