"""
Tests for commit message assembly and the CommitBuilder workflow.

Run with:
    pytest tests/test_commit.py -v
"""

import pytest

from gitclean.commit import (
    CommitAnswers,
    CommitBuilder,
    build_commit_body,
    build_commit_header,
    build_full_message,
    commit_type_choices,
    format_commit_preview,
    validate_commit_message,
)
from gitclean.config import Config, WorkflowSettings
from gitclean.git import GitError
from gitclean.output import strip_ansi


class FakeRepo:
    """Records git calls instead of running them."""

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name == self.fail_on:
            raise GitError(f"git {name} failed")

    def add(self, paths):
        self._record("add", list(paths))

    def commit(self, header, body=""):
        self._record("commit", header, body)

    def push(self):
        self._record("push")


@pytest.fixture
def answer_with(monkeypatch):
    def _answer(*lines):
        remaining = list(lines)
        monkeypatch.setattr("builtins.input", lambda prompt="": remaining.pop(0))
    return _answer


@pytest.fixture
def answers():
    return CommitAnswers(type="FIX", scope="parser", message="handle empty input",
                         body="Return early instead of crashing.", breaking=False, issues="fixes #12")


# ---------------------------------------------------------------------------
# Header / body / full message
# ---------------------------------------------------------------------------

class TestBuildMessage:

    @pytest.mark.parametrize("scope, breaking, expected", [
        ("", False, "FIX: handle empty input"),
        ("parser", False, "FIX(parser): handle empty input"),
        ("", True, "FIX!: handle empty input"),
        ("parser", True, "FIX(parser)!: handle empty input"),
    ])
    def test_header(self, scope, breaking, expected):
        answers = CommitAnswers(type="FIX", message="handle empty input", scope=scope, breaking=breaking)
        assert build_commit_header(answers) == expected

    def test_full_message_all_sections(self, answers):
        answers.breaking = True
        assert build_full_message(answers) == (
            "FIX(parser)!: handle empty input\n"
            "\n"
            "Return early instead of crashing.\n"
            "\n"
            "BREAKING CHANGE: handle empty input\n"
            "\n"
            "fixes #12"
        )

    def test_full_message_header_only(self):
        answers = CommitAnswers(type="DOCS", message="update readme")
        assert build_full_message(answers) == "DOCS: update readme"
        assert build_commit_body(answers) == ""

    def test_body_skips_empty_sections(self):
        answers = CommitAnswers(type="ADD", message="add login page", issues="closes #4")
        assert build_commit_body(answers) == "closes #4"


class TestValidateCommitMessage:

    def test_empty(self):
        assert validate_commit_message("") == "Please enter a commit message."

    def test_whitespace_only(self):
        assert validate_commit_message("   ") == "Please enter a commit message."

    def test_at_limit(self):
        assert validate_commit_message("x" * 72) is True

    def test_over_limit(self):
        result = validate_commit_message("x" * 73)
        assert isinstance(result, str)
        assert "72" in result

    def test_custom_limit(self):
        assert validate_commit_message("x" * 51, max_length=50) == "Keep the first line under 50 characters."


class TestPreview:

    def test_contains_all_parts(self, answers, no_colors):
        answers.breaking = True
        preview = format_commit_preview(answers)
        assert preview.startswith("🐛 FIX(parser)!: handle empty input")
        assert "Return early instead of crashing." in preview
        assert "BREAKING CHANGE: FIX(parser)!: handle empty input" in preview
        assert "fixes #12" in preview

    def test_colored_by_type(self, answers, colors):
        preview = format_commit_preview(answers)
        assert "\033[31mFIX(parser): handle empty input" in preview

    def test_unknown_type_is_neutral(self, colors):
        preview = format_commit_preview(CommitAnswers(type="CHORE", message="tidy"))
        assert preview == "CHORE: tidy"

    def test_type_choices(self, no_colors):
        choices = commit_type_choices()
        assert [c.value for c in choices] == ["ADD", "FIX", "UPDATE", "DOCS", "TEST", "REMOVE"]
        assert "A bug fix" in choices[1].label


# ---------------------------------------------------------------------------
# CommitBuilder
# ---------------------------------------------------------------------------

class TestReviewSpelling:

    @pytest.fixture
    def builder(self, checker):
        return CommitBuilder(Config(), repo=FakeRepo(), checker=checker)

    def test_clean_text_not_prompted(self, builder, monkeypatch):
        def no_input(prompt=""):
            raise AssertionError("should not prompt")
        monkeypatch.setattr("builtins.input", no_input)
        assert builder.review_spelling("fix the parser", "commit message") == "fix the parser"

    def test_auto_correct(self, builder, answer_with, capsys, no_colors):
        answer_with("1")
        assert builder.review_spelling("fix teh pasrer", "commit message") == "fix the parser"
        out = capsys.readouterr().out
        assert "Spelling issues found in commit message:" in out
        assert "teh" in out and "pasrer" in out

    def test_edit_then_recheck(self, builder, answer_with):
        answer_with("2", "fix the parser")
        assert builder.review_spelling("fix teh pasrer", "commit message") == "fix the parser"

    def test_edit_keeps_reviewing(self, builder, answer_with):
        answer_with("2", "fix teh parser", "1")
        assert builder.review_spelling("fix teh pasrer", "commit message") == "fix the parser"

    def test_continue_keeps_text(self, builder, answer_with):
        answer_with("3")
        assert builder.review_spelling("fix teh pasrer", "commit body") == "fix teh pasrer"

    def test_auto_correct_revalidated(self, checker, answer_with, capsys, no_colors):
        builder = CommitBuilder(Config(max_subject_length=12), repo=FakeRepo(), checker=checker)
        # corrected text is 14 characters, so it goes back for editing
        answer_with("1", "fix parser")
        result = builder.review_spelling("fix teh pasrer", "commit message", builder._validate_message)
        assert result == "fix parser"
        assert "Keep the first line under 12 characters." in capsys.readouterr().out

    def test_edit_validated(self, checker, answer_with, capsys, no_colors):
        builder = CommitBuilder(Config(max_subject_length=12), repo=FakeRepo(), checker=checker)
        answer_with("2", "", "fix parser")
        result = builder.review_spelling("fix teh pasrer", "commit message", builder._validate_message)
        assert result == "fix parser"
        assert "Keep the first line under 12 characters." in capsys.readouterr().out


class TestCommitBuilderRun:

    @pytest.fixture
    def make_builder(self, checker, answers, monkeypatch):
        def _make(config=None, repo=None):
            builder = CommitBuilder(config or Config(), repo=repo or FakeRepo(), checker=checker)
            monkeypatch.setattr(builder, "collect_answers", lambda: answers)
            return builder
        return _make

    def test_hook_mode_writes_file(self, make_builder, answers, answer_with, tmp_path):
        hook_file = tmp_path / "COMMIT_EDITMSG"
        builder = make_builder()
        answer_with("")
        assert builder.run(hook_file) == 0
        assert hook_file.read_text(encoding="utf-8") == build_full_message(answers) + "\n"
        assert builder.repo.calls == []

    def test_workflow_add_commit_push(self, make_builder, answers, answer_with):
        builder = make_builder()
        answer_with("y")
        assert builder.run() == 0
        assert builder.repo.calls == [
            ("add", ["."]),
            ("commit", "FIX(parser): handle empty input", "Return early instead of crashing.\n\nfixes #12"),
            ("push",),
        ]

    def test_workflow_respects_settings(self, make_builder, answer_with):
        config = Config(workflow=WorkflowSettings(auto_add=False, auto_push=False))
        builder = make_builder(config)
        answer_with("y")
        assert builder.run() == 0
        assert [call[0] for call in builder.repo.calls] == ["commit"]

    def test_each_git_step_behind_spinner(self, make_builder, answers, monkeypatch):
        labels = []

        class RecordingSpinner:
            def __init__(self, label=""):
                labels.append(label)

            def __enter__(self):
                return self

            def __exit__(self, *args):
                pass

        monkeypatch.setattr("gitclean.commit.builder.Spinner", RecordingSpinner)
        assert make_builder().execute(answers) == 0
        assert labels == ["Staging...", "Committing...", "Pushing..."]

    def test_declined(self, make_builder, answer_with, capsys, no_colors):
        builder = make_builder()
        answer_with("n")
        assert builder.run() == 1
        assert builder.repo.calls == []
        assert "Operation cancelled" in capsys.readouterr().out

    def test_git_failure(self, make_builder, answer_with, capsys, no_colors):
        builder = make_builder(repo=FakeRepo(fail_on="push"))
        answer_with("y")
        assert builder.run() == 1
        assert "Failed to complete git workflow" in capsys.readouterr().out

    def test_spelling_reviewed_before_preview(self, make_builder, answers, answer_with, tmp_path):
        answers.message = "handle emtpy input"
        answers.body = ""
        builder = make_builder()
        # auto-correct, then confirm
        answer_with("1", "y")
        hook_file = tmp_path / "msg"
        assert builder.run(hook_file) == 0
        assert hook_file.read_text(encoding="utf-8").startswith("FIX(parser): handle empty input")

    def test_preview_printed(self, make_builder, answer_with, capsys, no_colors):
        builder = make_builder()
        answer_with("n")
        builder.run()
        out = strip_ansi(capsys.readouterr().out)
        assert "Final Commit Message" in out
        assert "GitClean Helper" in out


class TestCollectAnswers:

    def test_guided_form(self, checker, answer_with):
        builder = CommitBuilder(Config(), repo=FakeRepo(), checker=checker)
        answer_with("2", " api ", "handle timeout", "", "n", "fixes #12")
        assert builder.collect_answers() == CommitAnswers(
            type="FIX", scope="api", message="handle timeout", body="", breaking=False, issues="fixes #12",
        )

    def test_message_validated(self, checker, answer_with, capsys):
        builder = CommitBuilder(Config(max_subject_length=10), repo=FakeRepo(), checker=checker)
        answer_with("1", "", "this message is too long", "short", "", "", "")
        result = builder.collect_answers()
        assert result.message == "short"
        assert "Keep the first line under 10 characters." in capsys.readouterr().out
