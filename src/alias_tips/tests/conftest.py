"""
Shared pytest configuration for Alias Tips tests.
"""

import os

import pytest

from alias_tips.core.types import Alias


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep the user's config and plugin variables out of every test."""
    for key in list(os.environ):
        if key.startswith(("ALIAS_TIPS_", "ZSH_PLUGINS_ALIAS_TIPS_")):
            monkeypatch.delenv(key, raising=False)

    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    yield config_home


@pytest.fixture
def git_aliases():
    """Aliases resembling a typical git plugin setup."""
    return [
        Alias(name="g", expanded="git"),
        Alias(name="gst", expanded="git status"),
        Alias(name="gR", expanded="git remote"),
        Alias(name="gRv", expanded="git remote -v"),
        Alias(name="git st", expanded="git status -sb"),
    ]


@pytest.fixture
def shell_dump():
    """Lines as produced by ``alias; functions`` in zsh."""
    return [
        "g=git",
        "gst='git status'",
        "ll='ls -l'",
        "mkcd () {",
        "\tmkdir -p \"$1\" && cd \"$1\"",
        "}",
        "",
    ]


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
