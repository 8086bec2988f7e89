"""Tests for the typer entry point."""

import logging

import pytest
from typer.testing import CliRunner

from roster.__main__ import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_roster_logger():
    yield
    logger = logging.getLogger("roster")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def test_default_invocation_runs_menu():
    script = "add\nA1\nAlice\n10\nadd\nA1\nBob\n11\nview\nA1\nexit\n"
    result = runner.invoke(app, [], input=script, env={"ROSTER_LOG_LEVEL": ""})
    assert result.exit_code == 0
    assert "Welcome to the Student Management Console" in result.output
    assert "- Alice, Age: 10" in result.output
    assert "- Bob, Age: 11" in result.output
    assert "Exiting... Goodbye!" in result.output


def test_menu_command_with_flags():
    result = runner.invoke(app, ["menu", "--log-level", "info", "--no-color"], input="exit\n")
    assert result.exit_code == 0
    assert "Exiting... Goodbye!" in result.output


def test_menu_ends_on_closed_input():
    result = runner.invoke(app, ["menu"], input="")
    assert result.exit_code == 0
    assert "Exiting... Goodbye!" in result.output


def test_invalid_log_level_exits_1():
    result = runner.invoke(app, ["menu", "--log-level", "loud"], input="exit\n")
    assert result.exit_code == 1
    assert "Welcome" not in result.output


def test_invalid_log_level_before_command_exits_1():
    result = runner.invoke(app, ["--log-level", "loud", "menu"], input="exit\n")
    assert result.exit_code == 1
    assert "Welcome" not in result.output


def test_log_level_before_command_reaches_menu():
    env = {"ROSTER_LOG_LEVEL": ""}
    quiet = runner.invoke(app, ["menu"], input="exit\n", env=env)
    verbose = runner.invoke(app, ["-l", "info", "menu"], input="exit\n", env=env)
    assert quiet.exit_code == 0 and verbose.exit_code == 0
    assert "Starting menu" not in quiet.output
    assert "Starting menu" in verbose.output
