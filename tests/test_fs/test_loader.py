"""Tests for CredentialsFileLoader."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import BaseModel

from credent.exceptions import (
    CredentialsFileDeserialize,
    CredentialsFileIsDir,
    CredentialsFileNonExistent,
    CredentialsFileRead,
)
from credent.exit_codes import EXIT_FILESYSTEM_ERROR, EXIT_SERIALIZATION_ERROR
from credent.fs import CredentialsFile, CredentialsFileLoader
from credent.model import Credentials, Password, Profile, Profiles


def _creds(username: str, password: str) -> Credentials:
    return Credentials(username=username, password=Password(password))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _two_profiles_text() -> str:
    return (
        "[default]\n"
        "username = 'me'\n"
        f"password = '{Password('secret').encoded()}'\n"
        "\n"
        "[profile_other]\n"
        "username = 'you'\n"
        f"password = '{Password('code').encoded()}'\n"
    )


class TestLoadFile:
    @pytest.mark.asyncio
    async def test_loads_profiles(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "credentials", _two_profiles_text())

        profiles = await CredentialsFileLoader.load_file(path)

        assert profiles == Profiles(
            [
                Profile("default", _creds("me", "secret")),
                Profile("profile_other", _creds("you", "code")),
            ]
        )

    @pytest.mark.asyncio
    async def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "credentials", _two_profiles_text())
        profiles = await CredentialsFileLoader.load_file(str(path))
        assert profiles.names() == ["default", "profile_other"]

    @pytest.mark.asyncio
    async def test_empty_file_is_empty_profiles(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "credentials", "")
        assert len(await CredentialsFileLoader.load_file(path)) == 0

    @pytest.mark.asyncio
    async def test_non_existent(self, tmp_path: Path) -> None:
        path = tmp_path / "missing" / "credentials"

        with pytest.raises(CredentialsFileNonExistent) as exc_info:
            await CredentialsFileLoader.load_file(path)

        assert exc_info.value.credentials_path == path
        assert str(path) in str(exc_info.value)
        assert exc_info.value.exit_code == EXIT_FILESYSTEM_ERROR

    @pytest.mark.asyncio
    async def test_is_dir(self, tmp_path: Path) -> None:
        with pytest.raises(CredentialsFileIsDir) as exc_info:
            await CredentialsFileLoader.load_file(tmp_path)
        assert exc_info.value.credentials_path == tmp_path

    @pytest.mark.asyncio
    async def test_garbage_is_deserialize_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "credentials", "garbage")

        with pytest.raises(CredentialsFileDeserialize) as exc_info:
            await CredentialsFileLoader.load_file(path)

        assert exc_info.value.credentials_path == path
        assert exc_info.value.exit_code == EXIT_SERIALIZATION_ERROR
        assert exc_info.value.__cause__ is exc_info.value.error

    @pytest.mark.asyncio
    async def test_missing_field_is_deserialize_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "credentials", "[default]\nusername = 'me'\n")
        with pytest.raises(CredentialsFileDeserialize):
            await CredentialsFileLoader.load_file(path)

    @pytest.mark.asyncio
    async def test_non_table_profile_is_deserialize_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "credentials", "default = 'me'\n")
        with pytest.raises(CredentialsFileDeserialize):
            await CredentialsFileLoader.load_file(path)

    @pytest.mark.asyncio
    async def test_invalid_utf8_is_deserialize_error(self, tmp_path: Path) -> None:
        path = tmp_path / "credentials"
        path.write_bytes(b"[default]\nusername = '\xff'\n")
        with pytest.raises(CredentialsFileDeserialize):
            await CredentialsFileLoader.load_file(path)

    @pytest.mark.asyncio
    @pytest.mark.skipif(
        os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root"
    )
    async def test_unreadable_is_read_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "credentials", _two_profiles_text())
        path.chmod(0o000)
        try:
            with pytest.raises(CredentialsFileRead) as exc_info:
                await CredentialsFileLoader.load_file(path)
            assert isinstance(exc_info.value.error, PermissionError)
        finally:
            path.chmod(0o600)

    @pytest.mark.asyncio
    async def test_custom_credentials_type(self, tmp_path: Path) -> None:
        class ApiToken(BaseModel):
            token: str

        path = _write(tmp_path / "credentials", "[ci]\ntoken = 'abc'\n")
        profiles = await CredentialsFileLoader.load_file(path, ApiToken)
        assert profiles["ci"].credentials == ApiToken(token="abc")


class TestLoadByAppName:
    @pytest.mark.asyncio
    async def test_load_all_missing_file_is_none(self, isolated_config: Path) -> None:
        assert await CredentialsFileLoader.load_all("my-tool") is None

    @pytest.mark.asyncio
    async def test_load_all(self, isolated_config: Path) -> None:
        _write(CredentialsFile.path("my-tool"), _two_profiles_text())
        profiles = await CredentialsFileLoader.load_all("my-tool")
        assert profiles is not None
        assert profiles.names() == ["default", "profile_other"]

    @pytest.mark.asyncio
    async def test_load_default(self, isolated_config: Path) -> None:
        _write(CredentialsFile.path("my-tool"), _two_profiles_text())
        profile = await CredentialsFileLoader.load("my-tool")
        assert profile is not None
        assert profile.is_default()
        assert profile.credentials == _creds("me", "secret")

    @pytest.mark.asyncio
    async def test_load_missing_file_is_none(self, isolated_config: Path) -> None:
        assert await CredentialsFileLoader.load("my-tool") is None

    @pytest.mark.asyncio
    async def test_load_profile(self, isolated_config: Path) -> None:
        _write(CredentialsFile.path("my-tool"), _two_profiles_text())
        profile = await CredentialsFileLoader.load_profile("my-tool", "profile_other")
        assert profile is not None
        assert profile.credentials == _creds("you", "code")

    @pytest.mark.asyncio
    async def test_load_profile_absent_from_file_is_none(self, isolated_config: Path) -> None:
        _write(CredentialsFile.path("my-tool"), _two_profiles_text())
        assert await CredentialsFileLoader.load_profile("my-tool", "nope") is None

    @pytest.mark.asyncio
    async def test_load_propagates_corrupt_file(self, isolated_config: Path) -> None:
        _write(CredentialsFile.path("my-tool"), "garbage")
        with pytest.raises(CredentialsFileDeserialize):
            await CredentialsFileLoader.load("my-tool")
