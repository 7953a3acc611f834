"""Spelling Correction Package"""

from collections.abc import Iterable

from gitclean.spelling.checker import SpellChecker, SpellFinding, SpellStats, Span, match_case
from gitclean.spelling.dictionary import Dictionary, DictionaryLoadError, SymSpellDictionary, load_dictionary
from gitclean.spelling.wordlists import COMMON_TYPOS, TECHNICAL_WORDS

_default_checker: SpellChecker | None = None


def get_spell_checker(extra_words: Iterable[str] = ()) -> SpellChecker:
    """Process-wide checker; the dictionary is loaded on first call only.

    Calls with the same extra_words get the same instance. Different
    extra_words build a new checker that shares the loaded dictionary.
    """
    global _default_checker
    words = frozenset(w.lower() for w in extra_words)
    if _default_checker is None:
        _default_checker = SpellChecker(dictionary=load_dictionary(), extra_words=words)
    elif _default_checker.extra_words != words:
        _default_checker = SpellChecker(dictionary=_default_checker.dictionary, extra_words=words)
    return _default_checker


__all__ = [
    "SpellChecker",
    "SpellFinding",
    "SpellStats",
    "Span",
    "match_case",
    "Dictionary",
    "DictionaryLoadError",
    "SymSpellDictionary",
    "load_dictionary",
    "get_spell_checker",
    "COMMON_TYPOS",
    "TECHNICAL_WORDS",
]
