"""Spell-checked text prompt.

A single-line input that edits in place (wrapping across terminal rows when
it has to) and underlines misspelled words as the user types. Spell checking
is debounced: each edit re-arms a timer and the checker runs only once the
typing pauses, always against the current text.
"""

import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum

from gitclean.output import bold, error, info
from gitclean.prompts.render import (
    ERASE_LINE,
    compute_cursor_move,
    cursor_down,
    erase_lines,
    highlight,
    wrap_fixup,
)
from gitclean.prompts.terminal import Key, RawTerminal
from gitclean.spelling import SpellChecker, SpellFinding

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_MS = 200
PROMPT_SYMBOL = '?'

ValidateResult = bool | str
Validator = Callable[[str], ValidateResult | Awaitable[ValidateResult]]
Filter = Callable[[str], str | Awaitable[str]]


class PromptAborted(Exception):
    """The user aborted the interactive session (Escape or Ctrl-C)."""
    pass


class Status(Enum):
    PENDING = 'pending'
    ANSWERED = 'answered'


class EventKind(Enum):
    CHAR_INSERTED = 'char_inserted'
    BACKSPACE = 'backspace'
    DELETE = 'delete'
    CURSOR_MOVE = 'cursor_move'
    SUBMIT = 'submit'
    ABORT = 'abort'
    DEBOUNCE_FIRED = 'debounce_fired'


@dataclass(frozen=True)
class Event:
    kind: EventKind
    char: str = ''
    target: str = ''  # CURSOR_MOVE only: left, right, home, end


KEY_EVENTS = {
    Key.BACKSPACE: Event(EventKind.BACKSPACE),
    Key.DELETE: Event(EventKind.DELETE),
    Key.LEFT: Event(EventKind.CURSOR_MOVE, target='left'),
    Key.RIGHT: Event(EventKind.CURSOR_MOVE, target='right'),
    Key.HOME: Event(EventKind.CURSOR_MOVE, target='home'),
    Key.END: Event(EventKind.CURSOR_MOVE, target='end'),
    Key.ENTER: Event(EventKind.SUBMIT),
    Key.ESCAPE: Event(EventKind.ABORT),
    Key.INTERRUPT: Event(EventKind.ABORT),
}


def key_to_event(key: str) -> Event | None:
    """Translate a key into an editor event; unhandled keys give None."""
    if key in KEY_EVENTS:
        return KEY_EVENTS[key]
    if len(key) == 1 and key.isprintable():
        return Event(EventKind.CHAR_INSERTED, char=key)
    return None


class Debouncer:
    """A single cancellable deadline, re-armed on every schedule()."""

    def __init__(self, delay: float, clock: Callable[[], float] = time.monotonic):
        self.delay = delay
        self._clock = clock
        self._deadline: float | None = None

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def schedule(self) -> None:
        self._deadline = self._clock() + self.delay

    def cancel(self) -> None:
        self._deadline = None

    def timeout(self) -> float | None:
        """Seconds until the deadline, None when nothing is scheduled."""
        if self._deadline is None:
            return None
        return max(self._deadline - self._clock(), 0.0)

    def fire(self) -> bool:
        """Consume the deadline if it has passed."""
        if self._deadline is None or self._clock() < self._deadline:
            return False
        self._deadline = None
        return True


@dataclass
class InputState:
    text: str = ''
    cursor: int = 0
    findings: list[SpellFinding] = field(default_factory=list)
    line_count: int = 0  # rows used by the last render
    cursor_row: int = 0  # row of the terminal cursor within that render
    status: Status = Status.PENDING


async def _await(awaitable):
    return await awaitable


def resolve_callback(value):
    """Accept plain values and awaitables from validate/filter callbacks."""
    if inspect.isawaitable(value):
        return asyncio.run(_await(value))
    return value


class SpellCheckInput:
    """Interactive prompt with live spelling feedback.

    run() blocks until Enter is pressed on text that passes validation and
    returns the (filtered) answer. Escape or Ctrl-C restores the terminal
    and raises PromptAborted.
    """

    def __init__(
        self,
        message: str,
        validate: Validator | None = None,
        filter: Filter | None = None,
        checker: SpellChecker | None = None,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        terminal=None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.message = message
        self.validate = validate
        self.filter = filter
        self.checker = checker
        self.state = InputState()
        self._terminal = terminal or RawTerminal()
        self._debouncer = Debouncer(debounce_ms / 1000, clock)
        self._answer = ''

    @property
    def prefix(self) -> str:
        return f"{PROMPT_SYMBOL} {self.message} "

    def run(self) -> str:
        with self._terminal.raw_mode():
            self._render()
            while self.state.status is Status.PENDING:
                if self._debouncer.fire():
                    self._handle(Event(EventKind.DEBOUNCE_FIRED))
                    continue
                try:
                    key = self._terminal.read_key(self._debouncer.timeout())
                except KeyboardInterrupt:
                    self._abort()
                if key is None:
                    continue
                event = key_to_event(key)
                if event is not None:
                    self._handle(event)
        return self._answer

    def _handle(self, event: Event) -> None:
        try:
            self._dispatch(event)
        except PromptAborted:
            raise
        except Exception:
            logger.exception("Error while handling %s", event.kind.name)

    def _dispatch(self, event: Event) -> None:
        kind = event.kind
        if kind is EventKind.CHAR_INSERTED:
            self._insert(event.char)
        elif kind is EventKind.BACKSPACE:
            self._backspace()
        elif kind is EventKind.DELETE:
            self._delete()
        elif kind is EventKind.CURSOR_MOVE:
            self._move_cursor(event.target)
        elif kind is EventKind.DEBOUNCE_FIRED:
            self._run_spell_check()
        elif kind is EventKind.SUBMIT:
            self._submit()
        elif kind is EventKind.ABORT:
            self._abort()

    # --- Editing ---

    def _insert(self, char: str) -> None:
        s = self.state
        s.text = s.text[:s.cursor] + char + s.text[s.cursor:]
        s.cursor += 1
        self._text_changed()

    def _backspace(self) -> None:
        s = self.state
        if s.cursor == 0:
            return
        s.text = s.text[:s.cursor - 1] + s.text[s.cursor:]
        s.cursor -= 1
        self._text_changed()

    def _delete(self) -> None:
        s = self.state
        if s.cursor >= len(s.text):
            return
        s.text = s.text[:s.cursor] + s.text[s.cursor + 1:]
        self._text_changed()

    def _move_cursor(self, target: str) -> None:
        s = self.state
        if target == 'left':
            s.cursor = max(s.cursor - 1, 0)
        elif target == 'right':
            s.cursor = min(s.cursor + 1, len(s.text))
        elif target == 'home':
            s.cursor = 0
        elif target == 'end':
            s.cursor = len(s.text)
        self._render()

    def _text_changed(self) -> None:
        # Findings are stale until the debounced check catches up
        self.state.findings = []
        if self.state.text:
            self._debouncer.schedule()
        else:
            self._debouncer.cancel()
        self._render()

    def _run_spell_check(self) -> None:
        if self.state.status is not Status.PENDING or self.checker is None:
            return
        self.state.findings = self.checker.check(self.state.text)
        logger.debug("Spell check found %d issue(s)", len(self.state.findings))
        self._render()

    # --- Submit / abort ---

    def _submit(self) -> None:
        self._debouncer.cancel()
        text = self.state.text
        if self.validate is not None:
            verdict = resolve_callback(self.validate(text))
            if verdict is not True:
                self._reject(verdict if isinstance(verdict, str) and verdict else "Invalid input")
                return

        answer = resolve_callback(self.filter(text)) if self.filter is not None else text
        self._answer = answer
        self.state.status = Status.ANSWERED
        self._render_answer(answer)

    def _reject(self, message: str) -> None:
        s = self.state
        self._terminal.write(
            self._clear_previous() + f"{error('>> ' + message)}\n"
        )
        s.text = ''
        s.cursor = 0
        s.findings = []
        s.line_count = 0
        s.cursor_row = 0
        self._render()

    def _abort(self) -> None:
        self._debouncer.cancel()
        s = self.state
        rows_below = max(s.line_count - 1 - s.cursor_row, 0)
        self._terminal.write(cursor_down(rows_below) + '\n')
        raise PromptAborted("Prompt cancelled by user")

    # --- Rendering ---

    def _clear_previous(self) -> str:
        s = self.state
        if not s.line_count:
            return f"\r{ERASE_LINE}"
        rows_below = max(s.line_count - 1 - s.cursor_row, 0)
        return cursor_down(rows_below) + erase_lines(s.line_count)

    def _render(self) -> None:
        if self.state.status is not Status.PENDING:
            return
        s = self.state
        width = self._terminal.width()
        display = highlight(s.text, s.findings)
        move = compute_cursor_move(len(self.prefix), len(s.text), s.cursor, width)
        self._terminal.write(
            self._clear_previous()
            + f"{info(PROMPT_SYMBOL)} {bold(self.message)} {display}"
            + wrap_fixup(len(self.prefix), len(s.text), width)
            + move.to_ansi()
        )
        s.line_count = move.line_count
        s.cursor_row = move.cursor_row

    def _render_answer(self, answer: str) -> None:
        self._terminal.write(
            self._clear_previous()
            + f"{info(PROMPT_SYMBOL)} {bold(self.message)} {info(answer)}\n"
        )
        self.state.line_count = 0
        self.state.cursor_row = 0
