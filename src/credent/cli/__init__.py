"""Terminal prompts for credentials.

:class:`CredentialsCliReader` asks for a username and a hidden password and
returns :class:`~credent.model.Credentials`.
"""

from credent.cli.reader import CredentialsCliReader

__all__ = ["CredentialsCliReader"]
