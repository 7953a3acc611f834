"""General-purpose dictionary backend for the spell checker.

The engine only needs two questions answered: is a word known, and what are
the closest known words. SymSpellDictionary answers both from the English
frequency dictionary that ships with symspellpy.
"""

import logging
from importlib import resources
from pathlib import Path
from typing import Protocol

from symspellpy import SymSpell, Verbosity

logger = logging.getLogger(__name__)

FREQUENCY_DICT = "frequency_dictionary_en_82_765.txt"


class Dictionary(Protocol):
    """Lookup interface the spell checker depends on."""

    def is_known(self, word: str) -> bool:
        ...

    def suggest(self, word: str, limit: int) -> list[str]:
        ...


class DictionaryLoadError(Exception):
    """Raised when the frequency dictionary cannot be loaded."""
    pass


class SymSpellDictionary:
    """Dictionary backed by a symspellpy SymSpell index.

    Suggestions come back best-first: smallest edit distance, then highest
    corpus frequency.
    """

    def __init__(self, dictionary_path: Path | str | None = None,
                 max_edit_distance: int = 2, prefix_length: int = 7):
        self.max_edit_distance = max_edit_distance
        self._sym_spell = SymSpell(
            max_dictionary_edit_distance=max_edit_distance,
            prefix_length=prefix_length,
        )
        path = Path(dictionary_path) if dictionary_path else self._bundled_path()
        loaded = self._sym_spell.load_dictionary(str(path), term_index=0, count_index=1, encoding='utf-8')
        if not loaded or not self._sym_spell.words:
            raise DictionaryLoadError(f"Could not load dictionary from {path}")
        logger.debug("Loaded %d dictionary words from %s", len(self._sym_spell.words), path)

    @staticmethod
    def _bundled_path() -> Path:
        return Path(str(resources.files("symspellpy") / FREQUENCY_DICT))

    @property
    def word_count(self) -> int:
        return len(self._sym_spell.words)

    def is_known(self, word: str) -> bool:
        return word.lower() in self._sym_spell.words

    def suggest(self, word: str, limit: int) -> list[str]:
        if limit <= 0:
            return []
        target = word.lower()
        items = self._sym_spell.lookup(
            target,
            Verbosity.ALL,
            max_edit_distance=self.max_edit_distance,
        )
        suggestions = []
        for item in items:
            if item.term == target or item.term in suggestions:
                continue
            suggestions.append(item.term)
            if len(suggestions) >= limit:
                break
        return suggestions


def load_dictionary(dictionary_path: Path | str | None = None) -> SymSpellDictionary | None:
    """Load the general dictionary, or return None so callers run degraded."""
    try:
        return SymSpellDictionary(dictionary_path)
    except (DictionaryLoadError, OSError, ValueError) as e:
        logger.warning("Spell check dictionary unavailable, using typo rules only: %s", e)
        return None
