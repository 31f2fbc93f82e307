"""Shared test fixtures for credent.

Provides fixtures for isolated configuration directories, credentials file
paths, output state, and running CLI commands. These fixtures are
automatically discovered by pytest and available to all test modules.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from credent.output import reset_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Credentials file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def credentials_path(tmp_path: Path) -> Path:
    """Path of a credentials file that does not exist yet."""
    return tmp_path / "credent" / "credentials"


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate the user configuration directory to a temporary directory.

    Forces Linux path rules, points XDG_CONFIG_HOME at ``tmp_path / "config"``
    and clears CREDENT_APP_NAME so tests never touch real user config.

    Returns:
        The temporary configuration base directory.
    """
    config_dir = tmp_path / "config"
    monkeypatch.setattr("credent.config.platform.system", lambda: "Linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
    monkeypatch.delenv("CREDENT_APP_NAME", raising=False)
    return config_dir


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
