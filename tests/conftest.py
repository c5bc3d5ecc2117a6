"""Pytest configuration and shared fakes.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the import path. No test invokes a real go/git/task binary.
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from goskel.domain.config import InitDefaults
from goskel.domain.entities import CommandResult
from goskel.domain.naming import parse_yes_no


class FakeCommandRunner:
    """Records every invocation; answers from a (name, first arg) -> CommandResult table."""

    def __init__(
        self,
        installed: Optional[set[str]] = None,
        results: Optional[dict[tuple[str, str], CommandResult]] = None,
    ) -> None:
        self.installed = installed if installed is not None else {"go", "task", "make", "git"}
        self.results = results or {}
        self.calls: list[tuple[str, list[str], Optional[str]]] = []

    def execute(self, name: str, args: list[str], cwd: Optional[str] = None) -> CommandResult:
        self.calls.append((name, list(args), cwd))
        key = (name, args[0] if args else "")
        if key in self.results:
            return self.results[key]
        if name not in self.installed:
            return CommandResult(127, "", f"{name}: command not found")
        return CommandResult(0, "", "")

    def which(self, name: str) -> Optional[str]:
        return f"/usr/bin/{name}" if name in self.installed else None

    def commands(self) -> list[list[str]]:
        """Invocations as argv lists, without cwd."""
        return [[name, *args] for name, args, _ in self.calls]


class ScriptedPrompter:
    """Answers questions from a list, in order; records what was asked."""

    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else ""

    def yes_no(self, question: str, default: bool) -> bool:
        return parse_yes_no(self.ask(question), default)


@pytest.fixture
def defaults() -> InitDefaults:
    return InitDefaults()


@pytest.fixture
def telemetry() -> MagicMock:
    return MagicMock()


@pytest.fixture
def fake_runner() -> FakeCommandRunner:
    return FakeCommandRunner()


@pytest.fixture
def make_runner() -> type[FakeCommandRunner]:
    """Factory for runners with a custom installed set or canned results."""
    return FakeCommandRunner


@pytest.fixture
def make_prompter() -> type[ScriptedPrompter]:
    return ScriptedPrompter
