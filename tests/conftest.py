"""
Shared fakes for the spell checker and the interactive prompt.

FakeTerminal replays a scripted list of keys and Pause() entries against a
FakeClock, so debounce timing is deterministic. Exception instances in the
script are raised from read_key.
"""

import re
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from gitclean.spelling import SpellChecker

ANSI_RE = re.compile(r'\033\[[0-9;?]*[A-Za-z]')

# Every scripted key takes this long to "type"
KEY_INTERVAL = 0.01


class FakeDictionary:
    """In-memory Dictionary: a set of known words plus canned suggestions."""

    def __init__(self, words=(), suggestions=None):
        self.words = {w.lower() for w in words}
        self.suggestions = {k.lower(): list(v) for k, v in (suggestions or {}).items()}

    def is_known(self, word):
        return word.lower() in self.words

    def suggest(self, word, limit):
        return self.suggestions.get(word.lower(), [])[:limit]


class BrokenDictionary:
    """Raises on every lookup."""

    def is_known(self, word):
        raise RuntimeError("dictionary exploded")

    def suggest(self, word, limit):
        raise RuntimeError("dictionary exploded")


class RecordingChecker:
    """Wraps a SpellChecker and records every text it is asked to check."""

    def __init__(self, inner):
        self.inner = inner
        self.calls = []

    def check(self, text):
        self.calls.append(text)
        return self.inner.check(text)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@dataclass
class Pause:
    """Idle time in a key script."""
    seconds: float


class FakeTerminal:
    """Scripted stand-in for RawTerminal."""

    def __init__(self, script, clock=None, width=80):
        self.script = list(script)
        self.clock = clock or FakeClock()
        self._width = width
        self.output = []
        self.entered = False
        self.restored = False

    @contextmanager
    def raw_mode(self):
        self.entered = True
        try:
            yield self
        finally:
            self.restored = True

    def width(self):
        return self._width

    def write(self, text):
        self.output.append(text)

    @property
    def text(self):
        return ''.join(self.output)

    @property
    def plain_text(self):
        return ANSI_RE.sub('', self.text)

    def read_key(self, timeout=None):
        while self.script:
            item = self.script.pop(0)
            if isinstance(item, Pause):
                if timeout is not None and item.seconds > timeout:
                    # Overshoot a hair so the deadline has definitely passed
                    step = timeout + 1e-6
                    self.clock.advance(step)
                    self.script.insert(0, Pause(item.seconds - step))
                    return None
                self.clock.advance(item.seconds)
                if timeout is not None:
                    timeout -= item.seconds
                continue
            if isinstance(item, BaseException):
                raise item
            self.clock.advance(KEY_INTERVAL)
            return item
        raise RuntimeError("key script exhausted")


@pytest.fixture
def fake_dictionary():
    return FakeDictionary(
        words=["fix", "the", "bug", "in", "parser", "add", "login", "page", "update", "handler",
               "readme", "with", "new", "examples", "function", "name", "typo", "handle", "empty",
               "input", "return", "early", "instead", "crashing", "timeout", "short", "this",
               "message", "too", "long", "hello"],
        suggestions={"pasrer": ["parser", "passer"], "lgoin": ["login"], "emtpy": ["empty"]},
    )


@pytest.fixture
def checker(fake_dictionary):
    return SpellChecker(dictionary=fake_dictionary)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def no_colors(monkeypatch):
    monkeypatch.setattr("gitclean.output.COLORS_ENABLED", False)


@pytest.fixture
def colors(monkeypatch):
    monkeypatch.setattr("gitclean.output.COLORS_ENABLED", True)
