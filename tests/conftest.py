"""Shared fixtures for the roster test suite."""

import io

import pytest
from rich.console import Console

from roster.menu import RosterMenu
from roster.store import RosterStore


@pytest.fixture
def store():
    return RosterStore()


@pytest.fixture
def console():
    """A console that records plain text instead of writing to a terminal."""
    return Console(file=io.StringIO(), width=200, no_color=True, highlight=False)


class ScriptedInput:
    """Feeds canned answers to the menu, then raises EOFError like a closed stdin."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def session(store, console):
    """Build a menu wired to a script of answers: session('add', 'A1', ...)."""

    def _make(*answers):
        reader = ScriptedInput(*answers)
        return RosterMenu(store, console, read=reader), reader

    return _make


@pytest.fixture
def output(console):
    """Everything printed to the test console so far."""
    return lambda: console.file.getvalue()
