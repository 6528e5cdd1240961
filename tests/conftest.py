"""Shared fixtures for prompter tests."""

from collections import deque

import pytest

from prompter_lib.prompter import InputValidationError, Prompter


class ScriptedBackend:
    """Backend that replays canned answers instead of reading the terminal.

    Answers are consumed in order by both run_line and run_select. An
    exception instance in the script is raised instead of returned.
    """

    def __init__(self, answers):
        self.answers = deque(answers)
        self.line_calls = []
        self.select_calls = []

    def _next(self):
        answer = self.answers.popleft()
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def run_line(self, label, validate=None):
        self.line_calls.append(label)
        answer = self._next()
        if validate:
            message = validate(answer)
            if message:
                raise InputValidationError(message, answer)
        return answer

    def run_select(self, label, items, default=""):
        self.select_calls.append((label, list(items), default))
        return self._next()


@pytest.fixture
def scripted():
    """Build a (prompter, backend) pair from a list of answers."""
    def make(answers, options=None):
        backend = ScriptedBackend(answers)
        return Prompter(backend, options), backend
    return make
