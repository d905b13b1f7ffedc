"""Tests for env CLI command."""

import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        timeout=30,
    )


@pytest.mark.integration
def test_env_lists_variables():
    """env prints every configuration variable."""
    result = _run("env")
    assert result.returncode == 0
    assert "TERMGRID_PLACEHOLDER" in result.stdout
    assert "TERMGRID_BORDER_COLOR" in result.stdout


@pytest.mark.integration
def test_env_category_filter():
    """env --category limits output to one category."""
    result = _run("env", "--category", "frame")
    assert result.returncode == 0
    assert "TERMGRID_FRAME_PADDING" in result.stdout
    assert "TERMGRID_PLACEHOLDER" not in result.stdout


@pytest.mark.integration
def test_env_unknown_category_fails():
    """An empty category exits with an error."""
    result = _run("env", "--category", "nothing")
    assert result.returncode == 1


@pytest.mark.integration
def test_help_and_unknown_command():
    """--help exits cleanly, unknown commands do not."""
    assert _run("--help").returncode == 0
    assert _run("frobnicate").returncode == 1
