"""Interactive Prompts Package"""

from gitclean.prompts.questions import Choice, Question, ask, ask_confirm, ask_input, ask_select
from gitclean.prompts.render import CursorMove, compute_cursor_move, highlight, wrap_fixup
from gitclean.prompts.spell_input import (
    Debouncer,
    Event,
    EventKind,
    InputState,
    PromptAborted,
    SpellCheckInput,
    Status,
)
from gitclean.prompts.terminal import Key, RawTerminal, parse_keys

__all__ = [
    "Choice",
    "Question",
    "ask",
    "ask_confirm",
    "ask_input",
    "ask_select",
    "CursorMove",
    "compute_cursor_move",
    "highlight",
    "wrap_fixup",
    "Debouncer",
    "Event",
    "EventKind",
    "InputState",
    "PromptAborted",
    "SpellCheckInput",
    "Status",
    "Key",
    "RawTerminal",
    "parse_keys",
]
