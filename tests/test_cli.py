"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from incipit.cli import app


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def document(tmp_path):
    """Write a small Markdown document to disk."""
    path = tmp_path / "doc.md"
    path.write_text("# Title\n\nHello *world*.\n\n```go\nx := 1\n```\n", encoding="utf-8")
    return path


def test_dark_and_light_are_mutually_exclusive(runner, document):
    result = runner.invoke(app, ["--dark", "--light", str(document)])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "mutually exclusive" in result.stderr


def test_missing_argument_prints_usage(runner):
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Usage: incipit" in result.stderr


def test_too_many_arguments_prints_usage(runner, document):
    result = runner.invoke(app, [str(document), str(document)])

    assert result.exit_code == 1
    assert "Usage: incipit" in result.stderr


def test_unknown_option_exits_with_one(runner, document):
    result = runner.invoke(app, ["--bogus", str(document)])

    assert result.exit_code == 1
    assert result.stdout == ""


def test_unreadable_file(runner, tmp_path):
    result = runner.invoke(app, [str(tmp_path / "missing.md")])

    assert result.exit_code == 1
    assert result.stderr.startswith("incipit: ")


def test_prints_rendering_when_not_a_terminal(runner, document):
    """Output that is not a terminal bypasses the pager."""
    result = runner.invoke(app, [str(document)])

    assert result.exit_code == 0
    assert "\x1b[" in result.stdout
    assert "╭── go " in result.stdout
    assert "  Title  " in result.stdout
    assert not result.stdout.endswith("\n")


def test_no_color_flag(runner, document):
    result = runner.invoke(app, ["--no-pager", "--no-color", str(document)])

    assert result.exit_code == 0
    assert "\x1b" not in result.stdout
    assert "Title" in result.stdout
    assert "│ x := 1" in result.stdout


def test_no_color_environment_overrides_dark(runner, document):
    result = runner.invoke(app, ["--dark", str(document)], env={"NO_COLOR": "1"})

    assert result.exit_code == 0
    assert "\x1b" not in result.stdout


def test_light_theme(runner, document):
    result = runner.invoke(app, ["--light", "--no-pager", str(document)])

    assert result.exit_code == 0
    assert "48;5;254" in result.stdout


def test_width_from_environment(runner, document):
    result = runner.invoke(app, ["--no-color", str(document)], env={"INCIPIT_WIDTH": "40"})

    assert result.exit_code == 0
    assert "╰" + "─" * 38 + "╯" in result.stdout.split("\n")


def test_invalid_width_setting(runner, document):
    result = runner.invoke(app, [str(document)], env={"INCIPIT_WIDTH": "zero"})

    assert result.exit_code == 1
    assert "invalid configuration" in result.stderr
