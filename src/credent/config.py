"""Configuration: platform directories and process-wide settings.

This module handles everything credent reads from the environment:

* **Directory layout** -- the user's configuration directory following each
  platform's convention. See :func:`get_user_config_dir`.

  - Linux/BSD: ``$XDG_CONFIG_HOME`` or ``~/.config``
  - macOS: ``~/Library/Application Support``
  - Windows: ``%APPDATA%``

* **Password encoding** -- ``CREDENT_PASSWORD_ENCODING`` selects how passwords
  are held in memory and on disk (``plain`` or ``base64``). The choice is made
  once, when :mod:`credent.model.password` is first imported.
* **Application name** -- ``CREDENT_APP_NAME`` overrides the directory name
  the ``credent`` CLI stores its own credentials under.

Nothing here touches the filesystem; callers create directories when they
write.
"""

from __future__ import annotations

import os
import platform
from enum import Enum
from pathlib import Path

from credent.exceptions import ConfigError, UserConfigDirNotFound

DEFAULT_APP_NAME = "credent"
DEFAULT_PROFILE_NAME = "default"

PASSWORD_ENCODING_ENV = "CREDENT_PASSWORD_ENCODING"
APP_NAME_ENV = "CREDENT_APP_NAME"


class PasswordEncoding(str, Enum):
    """How passwords are represented in memory and in the credentials file."""

    PLAIN = "plain"
    BASE64 = "base64"


# --- Platform directory resolution ---


def _is_windows() -> bool:
    return platform.system() == "Windows"


def _is_macos() -> bool:
    return platform.system() == "Darwin"


def _home_dir() -> Path:
    """Return the user's home directory.

    Raises:
        UserConfigDirNotFound: If the home directory cannot be determined.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        raise UserConfigDirNotFound() from None


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME.

    Relative values are ignored, as XDG Base Directory rules require.
    """
    env_value = os.environ.get(env_var, "")
    if env_value and Path(env_value).is_absolute():
        return Path(env_value)
    base = _home_dir()
    for seg in default_segments:
        base = base / seg
    return base


def get_user_config_dir() -> Path:
    """Return the platform's base configuration directory for the current user.

    The directory is not created and its existence is not checked.

    Returns:
        Absolute path of the base configuration directory (not app-specific).

    Raises:
        UserConfigDirNotFound: If the directory cannot be determined, e.g.
            ``%APPDATA%`` is unset on Windows or there is no home directory.
    """
    if _is_windows():
        appdata = os.environ.get("APPDATA", "")
        if not appdata:
            raise UserConfigDirNotFound()
        return Path(appdata)
    if _is_macos():
        return _home_dir() / "Library" / "Application Support"
    return _xdg_base("XDG_CONFIG_HOME", (".config",))


def get_app_config_dir(app_name: str) -> Path:
    """Return ``<user config dir>/<app_name>``.

    Args:
        app_name: Directory name of the application.

    Raises:
        UserConfigDirNotFound: See :func:`get_user_config_dir`.
    """
    return get_user_config_dir() / app_name


# --- Settings ---


def get_password_encoding() -> PasswordEncoding:
    """Return the password encoding selected by ``CREDENT_PASSWORD_ENCODING``.

    An unset or empty variable means :attr:`PasswordEncoding.PLAIN`.

    Raises:
        ConfigError: If the variable holds an unknown encoding name.
    """
    value = os.environ.get(PASSWORD_ENCODING_ENV, "").strip().lower()
    if not value:
        return PasswordEncoding.PLAIN
    try:
        return PasswordEncoding(value)
    except ValueError:
        choices = ", ".join(e.value for e in PasswordEncoding)
        raise ConfigError(
            f"Unknown password encoding '{value}' in {PASSWORD_ENCODING_ENV} "
            f"(expected one of: {choices})"
        ) from None


def get_default_app_name() -> str:
    """Return the application name the CLI stores credentials under.

    ``CREDENT_APP_NAME`` takes precedence over :data:`DEFAULT_APP_NAME`.
    """
    return os.environ.get(APP_NAME_ENV) or DEFAULT_APP_NAME
