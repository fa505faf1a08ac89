"""Pytest configuration: keep terminal background detection deterministic."""

import re

import pytest

from tui_styles.env import COLORFGBG, TERM_BACKGROUND

_SGR = re.compile(r'\x1b\[[0-9;]*m')


@pytest.fixture(autouse=True)
def clean_background_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests never see the developer's own terminal settings."""
    monkeypatch.delenv(TERM_BACKGROUND, raising=False)
    monkeypatch.delenv(COLORFGBG, raising=False)


@pytest.fixture
def light_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pretend the terminal has a light background."""
    monkeypatch.setenv(TERM_BACKGROUND, "light")


@pytest.fixture
def plain():
    """Strip SGR sequences so tests can assert on layout alone."""
    def _plain(s: str) -> str:
        return _SGR.sub('', s)
    return _plain
