"""Reads credentials from the user's configuration directory.

:class:`CredentialsFileLoader` is stateless; every method is a coroutine that
reads the credentials file on a worker thread so the event loop is never
blocked on disk I/O.

The convenience lookups (:meth:`~CredentialsFileLoader.load_all`,
:meth:`~CredentialsFileLoader.load`, :meth:`~CredentialsFileLoader.load_profile`)
return ``None`` when there is nothing stored yet, so callers can fall back to
prompting. :meth:`~CredentialsFileLoader.load_file` requires the file to exist.
"""

from __future__ import annotations

import asyncio
import logging
from os import PathLike
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from credent.exceptions import (
    CredentialsFileDeserialize,
    CredentialsFileIsDir,
    CredentialsFileNonExistent,
    CredentialsFileRead,
)
from credent.fs import codec
from credent.fs.credentials_file import CredentialsFile
from credent.model import Credentials, Profile, Profiles

logger = logging.getLogger(__name__)

StrPath = Union[str, "PathLike[str]"]


class CredentialsFileLoader:
    """Reads credentials from the user's configuration directory.

    The credentials type defaults to :class:`~credent.model.Credentials`; any
    pydantic model can be used in its place by passing ``credentials_type``.

    Example::

        profile = await CredentialsFileLoader.load_profile("my-tool", "work")
        if profile is not None:
            print(profile.credentials.username)
    """

    @classmethod
    async def load(
        cls, app_name: str, credentials_type: type[Any] = Credentials
    ) -> Optional[Profile[Any]]:
        """Return the ``"default"`` profile stored for *app_name*.

        Returns:
            The profile, or ``None`` if the credentials file or the profile
            does not exist.

        Raises:
            CredentialsFsError: If the path cannot be resolved or an existing
                file cannot be loaded.
        """
        return await cls.load_profile(app_name, Profile.DEFAULT_NAME, credentials_type)

    @classmethod
    async def load_profile(
        cls,
        app_name: str,
        profile_name: str,
        credentials_type: type[Any] = Credentials,
    ) -> Optional[Profile[Any]]:
        """Return the profile called *profile_name* stored for *app_name*.

        Returns:
            The profile, or ``None`` if the credentials file or the profile
            does not exist.
        """
        profiles = await cls.load_all(app_name, credentials_type)
        if profiles is None:
            return None
        profile = profiles.get(profile_name)
        if profile is None:
            logger.debug("Profile '%s' not found for app '%s'", profile_name, app_name)
        return profile

    @classmethod
    async def load_all(
        cls, app_name: str, credentials_type: type[Any] = Credentials
    ) -> Optional[Profiles[Any]]:
        """Return all profiles stored for *app_name*.

        The path differs depending on the user's operating system, see
        :meth:`~credent.fs.credentials_file.CredentialsFile.path`.

        Returns:
            The profiles, or ``None`` if the credentials file does not exist.
        """
        credentials_path = CredentialsFile.path(app_name)
        if not credentials_path.exists():
            logger.debug("No credentials file at %s", credentials_path)
            return None
        return await cls.load_file(credentials_path, credentials_type)

    @classmethod
    async def load_file(
        cls, credentials_path: StrPath, credentials_type: type[Any] = Credentials
    ) -> Profiles[Any]:
        """Load profiles from the given file.

        Args:
            credentials_path: File to load credentials from.
            credentials_type: Pydantic model each profile's credentials are
                validated with.

        Raises:
            CredentialsFileNonExistent: If the file does not exist.
            CredentialsFileIsDir: If the path is a directory.
            CredentialsFileRead: If the file cannot be read.
            CredentialsFileDeserialize: If the contents are not a valid
                profiles document.
        """
        credentials_path = Path(credentials_path)
        if not credentials_path.exists():
            raise CredentialsFileNonExistent(credentials_path)
        if credentials_path.is_dir():
            raise CredentialsFileIsDir(credentials_path)

        contents = await cls._credentials_file_read(credentials_path)
        profiles = cls._credentials_deserialize(contents, credentials_path, credentials_type)
        logger.debug("Loaded profiles %s from %s", profiles.names(), credentials_path)
        return profiles

    @staticmethod
    async def _credentials_file_read(credentials_path: Path) -> bytes:
        try:
            return await asyncio.to_thread(credentials_path.read_bytes)
        except OSError as exc:
            raise CredentialsFileRead(credentials_path, exc) from exc

    @staticmethod
    def _credentials_deserialize(
        contents: bytes, credentials_path: Path, credentials_type: type[Any]
    ) -> Profiles[Any]:
        try:
            mapping = codec.loads(contents.decode("utf-8"))
            return Profiles.from_mapping(mapping, credentials_type)
        except (UnicodeDecodeError, codec.TOMLKitError, ValidationError, ValueError) as exc:
            raise CredentialsFileDeserialize(credentials_path, exc) from exc
