"""Exception hierarchy for credent.

All exceptions inherit from :class:`CredentError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`credent.exit_codes`.
The top-level error handler in :func:`credent.app.main` catches
``CredentError`` and exits with the appropriate code.

Every error keeps the context needed to explain itself -- the path involved
and, where there is one, the underlying exception as ``error`` (also chained
as ``__cause__`` by the raising code).

Subclass hierarchy::

    CredentError (exit 1)
    +-- ConfigError                     (exit 2)
    +-- CredentialsFsError              (exit 4)
    |   +-- UserConfigDirNotFound       (exit 3)
    |   +-- CredentialsParentDirCreate
    |   +-- CredentialsFileNonExistent
    |   +-- CredentialsFileIsDir
    |   +-- CredentialsFileRead
    |   +-- CredentialsFileWrite
    |   +-- CredentialsFileDeserialize  (exit 5)
    |   +-- CredentialsFileSerialize    (exit 5)
    +-- CliReadError                    (exit 6)
        +-- PromptWrite
        +-- UsernameRead
        +-- PasswordRead
        +-- PlainTextRead
        +-- SecretRead
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from credent.exit_codes import (
    EXIT_CONFIG_DIR_NOT_FOUND,
    EXIT_FILESYSTEM_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_SERIALIZATION_ERROR,
    EXIT_TERMINAL_ERROR,
)


class CredentError(Exception):
    """Base exception for all credent errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`credent.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(CredentError):
    """Raised for invalid configuration values (e.g. an unknown password encoding)."""

    exit_code = EXIT_INVALID_USAGE


# --- Credentials file ---


class CredentialsFsError(CredentError):
    """Base class for errors reading or writing the user credentials file."""

    exit_code = EXIT_FILESYSTEM_ERROR


class UserConfigDirNotFound(CredentialsFsError):
    """Raised when the platform's user configuration directory cannot be determined."""

    exit_code = EXIT_CONFIG_DIR_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Unable to determine user configuration directory.")


class CredentialsParentDirCreate(CredentialsFsError):
    """Raised when the credentials file's parent directory cannot be created."""

    def __init__(self, parent_path: Path, error: OSError) -> None:
        self.parent_path = parent_path
        self.error = error
        super().__init__(
            f"Failed to create credentials file parent directory. Path: `{parent_path}`"
        )


class CredentialsFileNonExistent(CredentialsFsError):
    """Raised when the credentials file does not exist or cannot be accessed."""

    def __init__(self, credentials_path: Path) -> None:
        self.credentials_path = credentials_path
        super().__init__(
            "User credentials does not exist or cannot be accessed. "
            f"Path: `{credentials_path}`"
        )


class CredentialsFileIsDir(CredentialsFsError):
    """Raised when the credentials path is a directory."""

    def __init__(self, credentials_path: Path) -> None:
        self.credentials_path = credentials_path
        super().__init__(
            "User credentials file should be a file, but it is a directory. "
            f"Path: `{credentials_path}`"
        )


class CredentialsFileRead(CredentialsFsError):
    """Raised when the credentials file cannot be read."""

    def __init__(self, credentials_path: Path, error: OSError) -> None:
        self.credentials_path = credentials_path
        self.error = error
        super().__init__(
            f"User credentials file failed to be read. Path: `{credentials_path}`: {error}"
        )


class CredentialsFileWrite(CredentialsFsError):
    """Raised when the credentials file cannot be written."""

    def __init__(self, credentials_path: Path, error: OSError) -> None:
        self.credentials_path = credentials_path
        self.error = error
        super().__init__(
            f"User credentials file failed to be written. Path: `{credentials_path}`: {error}"
        )


class CredentialsFileDeserialize(CredentialsFsError):
    """Raised when the credentials file is not a valid profiles document."""

    exit_code = EXIT_SERIALIZATION_ERROR

    def __init__(self, credentials_path: Path, error: Exception) -> None:
        self.credentials_path = credentials_path
        self.error = error
        super().__init__(
            "User credentials file failed to be deserialized. "
            f"Path: `{credentials_path}`: {error}"
        )


class CredentialsFileSerialize(CredentialsFsError):
    """Raised when profiles cannot be serialized.

    ``profiles`` renders with masked passwords, so the message is safe to print.
    """

    exit_code = EXIT_SERIALIZATION_ERROR

    def __init__(self, profiles: Any, error: Exception) -> None:
        self.profiles = profiles
        self.error = error
        super().__init__(
            f"User credentials failed to be serialized. Profiles: `{profiles}`: {error}"
        )


# --- Terminal ---


class CliReadError(CredentError):
    """Base class for errors prompting for or reading values from the terminal."""

    exit_code = EXIT_TERMINAL_ERROR

    message = "Failed to read from the terminal."

    def __init__(self, error: BaseException) -> None:
        self.error = error
        super().__init__(self.message)


class PromptWrite(CliReadError):
    """Raised when a prompt cannot be written to stderr."""

    def __init__(self, prompt: str, error: BaseException) -> None:
        self.prompt = prompt
        self.message = f"Failed to write prompt to stderr. Prompt: `{prompt}`"
        super().__init__(error)


class UsernameRead(CliReadError):
    """Raised when the username cannot be read from stdin."""

    message = "Failed to read username from stdin."


class PasswordRead(CliReadError):
    """Raised when the password cannot be read from the terminal."""

    message = "Failed to read password from stdin."


class PlainTextRead(CliReadError):
    """Raised when a plain text value cannot be read from stdin."""

    message = "Failed to read value from stdin."


class SecretRead(CliReadError):
    """Raised when a secret value cannot be read from the terminal."""

    message = "Failed to read secret value from stdin."
