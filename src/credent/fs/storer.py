"""Writes credentials to the user's configuration directory.

Storing merges into whatever the credentials file already holds, keyed by
profile name:

* :meth:`CredentialsFileStorer.store_file` replaces the one given profile and
  keeps every other profile.
* :meth:`CredentialsFileStorer.store_many_file` writes every profile of the
  batch, replacing stored profiles with the same names, and keeps stored
  profiles the batch does not mention.

The merged set is serialised in name order and the file is overwritten in
full. Writes are not atomic: a crash mid-write can leave the file absent or
truncated.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional

from credent.exceptions import (
    CredentialsFileSerialize,
    CredentialsFileWrite,
    CredentialsParentDirCreate,
)
from credent.fs import codec
from credent.fs.credentials_file import CredentialsFile
from credent.fs.loader import CredentialsFileLoader, StrPath
from credent.model import Credentials, Profile, Profiles

logger = logging.getLogger(__name__)


class CredentialsFileStorer:
    """Writes credentials to the user's configuration directory.

    Example::

        profile = Profile("work", Credentials(username="me", password=Password("pw")))
        await CredentialsFileStorer.store("my-tool", profile)
    """

    @classmethod
    async def store(cls, app_name: str, profile: Profile[Any]) -> None:
        """Store *profile* in *app_name*'s credentials file.

        This replaces the profile's credentials in the file. See
        :meth:`~credent.fs.credentials_file.CredentialsFile.path` for the
        location.
        """
        await cls.store_file(profile, CredentialsFile.path(app_name))

    @classmethod
    async def store_many(cls, app_name: str, profiles: Profiles[Any]) -> None:
        """Store every profile in *profiles* in *app_name*'s credentials file."""
        await cls.store_many_file(profiles, CredentialsFile.path(app_name))

    @classmethod
    async def store_file(cls, profile: Profile[Any], credentials_path: StrPath) -> None:
        """Store *profile* in the given file.

        Profiles compare equal by name, so the stored profile of the same name
        is replaced outright, credentials included. Other profiles in the file
        are kept.

        Args:
            profile: Profile to store.
            credentials_path: File to write credentials to.

        Raises:
            CredentialsFsError: If the existing file cannot be loaded, or the
                merged profiles cannot be serialised or written.
        """
        credentials_path = Path(credentials_path)
        profiles = await cls._profiles_existing(credentials_path, type(profile.credentials))
        if profiles is None:
            profiles = Profiles()

        profiles.replace(profile)

        await cls._profiles_write(profiles, credentials_path)
        logger.debug("Stored profile '%s' in %s", profile.name, credentials_path)

    @classmethod
    async def store_many_file(cls, profiles: Profiles[Any], credentials_path: StrPath) -> None:
        """Store a batch of profiles in the given file.

        Profiles in the batch replace stored profiles of the same name;
        stored profiles whose names are not in the batch are kept unchanged.
        *profiles* itself is not modified.

        Args:
            profiles: Profiles to store.
            credentials_path: File to write credentials to.
        """
        credentials_path = Path(credentials_path)
        credentials_type = cls._credentials_type(profiles)
        merged: Profiles[Any] = Profiles(profiles)

        profiles_existing = await cls._profiles_existing(credentials_path, credentials_type)
        if profiles_existing is not None:
            for profile in profiles_existing:
                merged.insert(profile)

        await cls._profiles_write(merged, credentials_path)
        logger.debug("Stored profiles %s in %s", profiles.names(), credentials_path)

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _credentials_type(profiles: Profiles[Any]) -> type[Any]:
        for profile in profiles:
            return type(profile.credentials)
        return Credentials

    @staticmethod
    async def _profiles_existing(
        credentials_path: Path, credentials_type: type[Any]
    ) -> Optional[Profiles[Any]]:
        if not credentials_path.exists():
            return None
        return await CredentialsFileLoader.load_file(credentials_path, credentials_type)

    @classmethod
    async def _profiles_write(cls, profiles: Profiles[Any], credentials_path: Path) -> None:
        contents = cls._profiles_serialize(profiles)
        await cls._credentials_parent_create(credentials_path)
        await cls._credentials_file_write(contents, credentials_path)

    @staticmethod
    def _profiles_serialize(profiles: Profiles[Any]) -> bytes:
        try:
            return codec.dumps(profiles.to_mapping()).encode("utf-8")
        except (TypeError, ValueError, UnicodeEncodeError, codec.TOMLKitError) as exc:
            raise CredentialsFileSerialize(profiles, exc) from exc

    @staticmethod
    async def _credentials_parent_create(credentials_path: Path) -> None:
        parent_path = credentials_path.parent
        try:
            await asyncio.to_thread(parent_path.mkdir, parents=True, exist_ok=True)
        except OSError as exc:
            raise CredentialsParentDirCreate(parent_path, exc) from exc

    @staticmethod
    async def _credentials_file_write(contents: bytes, credentials_path: Path) -> None:
        try:
            await asyncio.to_thread(credentials_path.write_bytes, contents)
        except OSError as exc:
            raise CredentialsFileWrite(credentials_path, exc) from exc
