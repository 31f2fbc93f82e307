"""Location of the credentials file."""

from __future__ import annotations

from pathlib import Path

from credent.config import get_app_config_dir

CREDENTIALS_FILE_NAME = "credentials"
"""Name of the file used to store credentials."""


class CredentialsFile:
    """Returns the path to an application's credentials file."""

    @staticmethod
    def path(app_name: str) -> Path:
        """Return the path to the credentials in the user's configuration directory.

        The file's existence is not checked -- that is the responsibility of
        the caller.

        The path differs depending on the user's operating system:

        * Windows: ``%APPDATA%\\<app>\\credentials``
        * Linux: ``$XDG_CONFIG_HOME/<app>/credentials`` or
          ``$HOME/.config/<app>/credentials``
        * macOS: ``$HOME/Library/Application Support/<app>/credentials``

        Raises:
            UserConfigDirNotFound: If the configuration directory cannot be
                determined.
        """
        return get_app_config_dir(app_name) / CREDENTIALS_FILE_NAME
