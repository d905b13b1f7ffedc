"""Tests for the demo CLI command."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str, env: dict[str, str] | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, ".", *args],
        capture_output=True,
        text=True,
        cwd=REPO_ROOT,
        env={**os.environ, **(env or {})},
        timeout=30,
    )


@pytest.mark.integration
def test_demo_list_shows_names():
    """demo --list prints every demo name."""
    result = _run("demo", "--list")
    assert result.returncode == 0
    assert result.stdout.split() == ["basic", "frames", "expanded"]


@pytest.mark.integration
def test_demo_basic_renders_requested_size():
    """demo basic prints a block of exactly the requested size."""
    result = _run("demo", "basic", "--width", "60", "--height", "5", "--no-color")
    assert result.returncode == 0
    lines = result.stdout.rstrip("\n").split("\n")
    assert len(lines) == 5
    assert all(len(line) == 60 for line in lines)
    assert "Item 1" in lines[0]


@pytest.mark.integration
def test_demo_expanded_draws_frames():
    """demo expanded draws rounded frames."""
    result = _run("demo", "expanded", "-W", "90", "-H", "24", "--no-color")
    assert result.returncode == 0
    assert "╭" in result.stdout
    assert "Framed Item 7" in result.stdout


@pytest.mark.integration
def test_demo_unknown_name_fails():
    """An unknown demo name exits with an error."""
    result = _run("demo", "nope")
    assert result.returncode == 1
    assert "Unknown demo" in result.stderr


@pytest.mark.integration
def test_demo_without_name_fails():
    """demo without a name or --list exits with an error."""
    result = _run("demo")
    assert result.returncode == 1


@pytest.mark.integration
def test_demo_no_color_overrides_configuration():
    """--no-color wins over TERMGRID_COLOR=1."""
    args = ("demo", "basic", "-W", "60", "-H", "5")
    colored = _run(*args, env={"TERMGRID_COLOR": "1"})
    plain = _run(*args, "--no-color", env={"TERMGRID_COLOR": "1"})
    assert colored.returncode == plain.returncode == 0
    assert "\x1b[" in colored.stdout
    assert "\x1b[" not in plain.stdout
