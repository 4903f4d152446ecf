"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lintopts.core.options import lookup


# =============================================================================
# OPTION FIXTURES
# =============================================================================

@pytest.fixture
def white():
    return lookup("WHITE")


@pytest.fixture
def indent():
    return lookup("INDENT")


@pytest.fixture
def predef():
    return lookup("PREDEF")


# =============================================================================
# ENVIRONMENT FIXTURES
# =============================================================================

@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Run with an empty cwd and home, and no $LINTOPTS_CONFIG."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("LINTOPTS_CONFIG", raising=False)
    monkeypatch.chdir(work)
    return work
