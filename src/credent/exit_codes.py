"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~credent.exceptions.CredentError` subclass.
Shell wrappers can inspect the exit code to tell a missing configuration
directory apart from a corrupt credentials file without parsing stderr.

Example::

    $ credent --profile work
    $ echo $?
    5   # EXIT_SERIALIZATION_ERROR -- the credentials file is not valid TOML
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or configuration values."""

EXIT_CONFIG_DIR_NOT_FOUND = 3
"""The user's configuration directory could not be determined."""

EXIT_FILESYSTEM_ERROR = 4
"""The credentials file or its parent directory could not be read or written."""

EXIT_SERIALIZATION_ERROR = 5
"""The credentials file could not be parsed, or profiles could not be serialized."""

EXIT_TERMINAL_ERROR = 6
"""Prompting for or reading credentials from the terminal failed."""

EXIT_INTERRUPTED = 130
"""The user cancelled with Ctrl-C."""
