"""Credentials file: location, loading and storing.

- :class:`CredentialsFile` -- resolves ``<config dir>/<app>/credentials``.
- :class:`CredentialsFileLoader` -- reads profiles from the file.
- :class:`CredentialsFileStorer` -- merges profiles into the file.

Typical usage::

    from credent.fs import CredentialsFileLoader, CredentialsFileStorer

    profile = await CredentialsFileLoader.load_profile("my-tool", "work")
    if profile is None:
        profile = Profile("work", await CredentialsCliReader().prompt_credentials())
        await CredentialsFileStorer.store("my-tool", profile)
"""

from credent.fs.credentials_file import CREDENTIALS_FILE_NAME, CredentialsFile
from credent.fs.loader import CredentialsFileLoader
from credent.fs.storer import CredentialsFileStorer

__all__ = [
    "CREDENTIALS_FILE_NAME",
    "CredentialsFile",
    "CredentialsFileLoader",
    "CredentialsFileStorer",
]
