"""
Tests for the question sequence used by the guided commit form.

Run with:
    pytest tests/test_questions.py -v
"""

import pytest

from gitclean.config import SpellCheckSettings
from gitclean.prompts import Choice, PromptAborted, Question, ask, ask_confirm, ask_input, ask_select
from gitclean.prompts.terminal import Key

from conftest import FakeTerminal


@pytest.fixture
def answer_with(monkeypatch):
    """Feed scripted lines to input()."""
    def _answer(*lines):
        remaining = list(lines)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
    return _answer


@pytest.fixture
def type_question():
    return Question("type", "select", "Type:", choices=[
        Choice("ADD", "ADD - Add new code"),
        Choice("FIX", "FIX - A bug fix"),
        Choice("DOCS", "DOCS - Documentation"),
    ])


class TestQuestion:

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError):
            Question("x", "checkbox", "Pick")


class TestSelect:

    def test_by_number(self, answer_with, type_question):
        answer_with("2")
        assert ask_select(type_question) == "FIX"

    def test_enter_picks_first(self, answer_with, type_question):
        answer_with("")
        assert ask_select(type_question) == "ADD"

    def test_enter_picks_default(self, answer_with, type_question):
        type_question.default = "DOCS"
        answer_with("")
        assert ask_select(type_question) == "DOCS"

    def test_by_value(self, answer_with, type_question):
        answer_with("docs")
        assert ask_select(type_question) == "DOCS"

    def test_retries_on_bad_choice(self, answer_with, type_question, capsys):
        answer_with("9", "x", "1")
        assert ask_select(type_question) == "ADD"
        assert capsys.readouterr().out.count(">> Enter a number from 1 to 3") == 2


class TestConfirm:

    @pytest.mark.parametrize("line, default, expected", [
        ("y", False, True),
        ("YES", False, True),
        ("n", True, False),
        ("", True, True),
        ("", False, False),
    ])
    def test_answers(self, answer_with, line, default, expected):
        answer_with(line)
        assert ask_confirm(Question("ok", "confirm", "OK?", default=default)) is expected

    def test_retries(self, answer_with):
        answer_with("maybe", "y")
        assert ask_confirm(Question("ok", "confirm", "OK?")) is True


class TestInput:

    def test_filter(self, answer_with):
        answer_with("  api  ")
        assert ask_input(Question("scope", "input", "Scope:", filter=str.strip)) == "api"

    def test_default_used_on_empty(self, answer_with):
        answer_with("")
        assert ask_input(Question("msg", "input", "Msg:", default="fix the parser")) == "fix the parser"

    def test_validation_retries(self, answer_with, capsys):
        answer_with("", "ok")
        question = Question("msg", "input", "Msg:", validate=lambda t: True if t else "Required")
        assert ask_input(question) == "ok"
        assert ">> Required" in capsys.readouterr().out

    def test_eof_aborts(self, answer_with):
        answer_with()
        with pytest.raises(PromptAborted):
            ask_input(Question("msg", "input", "Msg:"))

    def test_ctrl_c_aborts(self, monkeypatch):
        def interrupt(prompt=""):
            raise KeyboardInterrupt
        monkeypatch.setattr("builtins.input", interrupt)
        with pytest.raises(PromptAborted):
            ask_input(Question("msg", "input", "Msg:"))


class TestAsk:

    def test_collects_answers_in_order(self, answer_with, type_question):
        answer_with("2", "parser", "y")
        answers = ask([
            type_question,
            Question("scope", "input", "Scope:"),
            Question("breaking", "confirm", "Breaking?", default=False),
        ])
        assert answers == {"type": "FIX", "scope": "parser", "breaking": True}

    def test_spellcheck_falls_back_without_tty(self, answer_with):
        # stdin is not a terminal under pytest
        answer_with("fix teh bug")
        answers = ask([Question("message", "spellcheck", "Message:")])
        assert answers == {"message": "fix teh bug"}

    def test_spellcheck_disabled_uses_plain_input(self, answer_with):
        answer_with("hello")
        settings = SpellCheckSettings(enabled=False)
        assert ask([Question("message", "spellcheck", "Message:")], settings=settings) == {"message": "hello"}

    def test_spellcheck_uses_widget_with_terminal(self, no_colors):
        terminal = FakeTerminal(["h", "i", Key.ENTER])
        answers = ask([Question("message", "spellcheck", "Message:", filter=str.upper)], terminal=terminal)
        assert answers == {"message": "HI"}
        assert terminal.restored

    def test_abort_propagates(self):
        terminal = FakeTerminal([Key.ESCAPE])
        with pytest.raises(PromptAborted):
            ask([Question("message", "spellcheck", "Message:")], terminal=terminal)
