"""Spell Checker - layered spelling correction for commit messages.

Each alphabetic token goes through three layers, first match wins:
technical allowlist (never flagged), curated typo rules (one high-confidence
correction), then the general dictionary (flag unknown words, up to three
suggestions). Without a dictionary only the typo rules apply.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from gitclean.spelling.dictionary import Dictionary
from gitclean.spelling.wordlists import COMMON_TYPOS, TECHNICAL_WORDS

logger = logging.getLogger(__name__)

# Maximal runs of letters; digits, underscores and punctuation split tokens
WORD_PATTERN = re.compile(r'[^\W\d_]+')

MAX_SUGGESTIONS = 3
MIN_WORD_LENGTH = 3


@dataclass(frozen=True)
class Span:
    """Half-open character range into the checked text."""
    start: int
    end: int


@dataclass(frozen=True)
class SpellFinding:
    """A misspelled word, where it is, and what it probably should be."""
    word: str
    span: Span
    suggestions: tuple[str, ...] = ()
    is_misspelled: bool = True

    @property
    def best(self) -> str | None:
        return self.suggestions[0] if self.suggestions else None


@dataclass(frozen=True)
class SpellStats:
    has_dictionary: bool
    technical_word_count: int
    typo_rule_count: int


@dataclass
class _Token:
    word: str
    start: int
    end: int
    lower: str = field(init=False)

    def __post_init__(self):
        self.lower = self.word.lower()


def _tokenize(text: str) -> list[_Token]:
    return [_Token(m.group(0), m.start(), m.end()) for m in WORD_PATTERN.finditer(text)]


def match_case(replacement: str, original: str) -> str:
    """Give replacement the casing pattern of original (UPPER, Title, lower)."""
    if len(original) > 1 and original.isupper():
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


class SpellChecker:
    """Finds misspellings in commit text.

    Tables are injected so tests can substitute their own; by default the
    built-in allowlist and typo rules are used. extra_words extends the
    allowlist (user-configured custom words).
    """

    def __init__(
        self,
        dictionary: Dictionary | None = None,
        typo_rules: Mapping[str, str] = COMMON_TYPOS,
        technical_words: Iterable[str] = TECHNICAL_WORDS,
        extra_words: Iterable[str] = (),
    ):
        self._dictionary = dictionary
        self._typo_rules = typo_rules
        self.extra_words = frozenset(w.lower() for w in extra_words)
        self._allowlist = frozenset(w.lower() for w in technical_words) | self.extra_words

    @property
    def dictionary(self) -> Dictionary | None:
        return self._dictionary

    @property
    def has_dictionary(self) -> bool:
        return self._dictionary is not None

    def _should_skip(self, token: _Token) -> bool:
        if len(token.word) < MIN_WORD_LENGTH:
            return True
        if token.word.isdigit():
            return True
        if len(token.word) == 1:
            return True
        return token.lower in self._allowlist

    def _is_known(self, word: str) -> bool:
        try:
            return self._dictionary.is_known(word)
        except Exception:
            logger.exception("Dictionary lookup failed for %r", word)
            return True

    def _suggest(self, word: str, limit: int) -> list[str]:
        try:
            raw = list(self._dictionary.suggest(word, limit))
        except Exception:
            logger.exception("Dictionary suggest failed for %r", word)
            return []

        # A dictionary word can itself be a known typo; map it so a second
        # auto_correct pass has nothing left to change.
        suggestions = []
        for suggestion in raw:
            suggestion = self._typo_rules.get(suggestion.lower(), suggestion)
            if suggestion not in suggestions:
                suggestions.append(suggestion)
        return suggestions[:limit]

    def check(self, text: str) -> list[SpellFinding]:
        """Return findings for text in ascending start order."""
        findings = []
        for token in _tokenize(text):
            if self._should_skip(token):
                continue

            span = Span(token.start, token.end)
            correction = self._typo_rules.get(token.lower)
            if correction is not None:
                findings.append(SpellFinding(token.word, span, (correction,)))
                continue

            if self._dictionary is not None and not self._is_known(token.lower):
                suggestions = self._suggest(token.lower, MAX_SUGGESTIONS)
                findings.append(SpellFinding(token.word, span, tuple(suggestions)))

        return findings

    def suggest_first(self, word: str) -> str | None:
        """Best single correction for word, or None."""
        lower = word.lower()
        if lower in self._typo_rules:
            return self._typo_rules[lower]
        if self._dictionary is not None:
            suggestions = self._suggest(lower, 1)
            if suggestions:
                return suggestions[0]
        return None

    def auto_correct(self, text: str) -> str:
        """Replace every finding that has a suggestion with its best one."""
        corrected = text
        findings = sorted(self.check(text), key=lambda f: f.span.start, reverse=True)
        for finding in findings:
            if not finding.suggestions:
                continue
            replacement = match_case(finding.suggestions[0], finding.word)
            corrected = corrected[:finding.span.start] + replacement + corrected[finding.span.end:]
        return corrected

    def stats(self) -> SpellStats:
        return SpellStats(
            has_dictionary=self.has_dictionary,
            technical_word_count=len(self._allowlist),
            typo_rule_count=len(self._typo_rules),
        )
