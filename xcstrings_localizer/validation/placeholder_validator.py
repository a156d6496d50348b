"""Checks that format specifiers survive translation."""

import re
from collections import Counter
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class PlaceholderIssue:
    """A difference between the placeholders of a source and its translation."""

    kind: str  # missing, extra, newlines
    token: str
    message: str


class PlaceholderValidator:
    """
    Compares iOS format specifiers between a source string and a translation.

    Recognised tokens:
    - %@, %d, %ld, %lld, %f, %.0f, %.2f and other printf conversions
    - %1$@, %2$lld - positional specifiers
    - %% - literal percent
    - {name} - named template variables

    Reordering is allowed; only the multiset of tokens has to match.
    The check is advisory: callers report issues but still keep the text.
    """

    PLACEHOLDER_PATTERN = re.compile(
        r"%%"
        r"|%(?:\d+\$)?[-+0 #]*(?:\d+|\*)?(?:\.(?:\d+|\*))?(?:hh|h|ll|l|L|z|j|t|q)?[diouxXeEfFgGaAcsp@]"
        r"|\{[A-Za-z_][A-Za-z0-9_]*\}"
    )

    def find_placeholders(self, text: str) -> List[str]:
        """Placeholders in order of appearance."""
        return [match.group(0) for match in self.PLACEHOLDER_PATTERN.finditer(text)]

    def compare(self, source: str, translation: str) -> List[PlaceholderIssue]:
        """Return every placeholder difference, empty if the texts agree."""
        issues = []
        expected = Counter(self.find_placeholders(source))
        actual = Counter(self.find_placeholders(translation))

        for token in sorted(expected - actual):
            issues.append(
                PlaceholderIssue("missing", token, f"Missing placeholder {token}")
            )
        for token in sorted(actual - expected):
            issues.append(
                PlaceholderIssue("extra", token, f"Unexpected placeholder {token}")
            )

        source_newlines = source.count("\n")
        translated_newlines = translation.count("\n")
        if source_newlines != translated_newlines:
            issues.append(
                PlaceholderIssue(
                    "newlines",
                    "\\n",
                    f"Newline count changed: {source_newlines} -> {translated_newlines}",
                )
            )

        return issues

    def is_valid(self, source: str, translation: str) -> bool:
        return not self.compare(source, translation)
