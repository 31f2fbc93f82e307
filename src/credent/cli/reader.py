"""Reads credentials from the terminal.

Prompts are written to stderr so they never mix with data on stdout. Plain
values are read as one line from stdin; secrets are read with
:func:`getpass.getpass`, which does not echo. Both reads block, so they run
on a worker thread via :func:`asyncio.to_thread`.
"""

from __future__ import annotations

import asyncio
import getpass
import sys
from typing import Callable

from credent.exceptions import (
    CliReadError,
    PasswordRead,
    PlainTextRead,
    PromptWrite,
    SecretRead,
    UsernameRead,
)
from credent.model import BasePassword, Credentials, Password, Username

DEFAULT_USERNAME_PROMPT = "Username: "
DEFAULT_PASSWORD_PROMPT = "Password (input is hidden): "


class CredentialsCliReader:
    """Reads :class:`~credent.model.Credentials` from the command line.

    Args:
        username_prompt: Text shown before reading the username.
        password_prompt: Text shown before reading the password.

    Example::

        reader = CredentialsCliReader(username_prompt="Email: ")
        credentials = await reader.prompt_credentials()
    """

    def __init__(
        self,
        username_prompt: str = DEFAULT_USERNAME_PROMPT,
        password_prompt: str = DEFAULT_PASSWORD_PROMPT,
    ) -> None:
        self.username_prompt = username_prompt
        self.password_prompt = password_prompt

    async def prompt_credentials(self) -> Credentials:
        """Read the username and then the password from the terminal."""
        username = await self.prompt_username()
        password = await self.prompt_password()
        return Credentials(username=username, password=password)

    async def prompt_username(self) -> Username:
        """Read the username from stdin, stripped of surrounding whitespace.

        Raises:
            PromptWrite: If the prompt cannot be written.
            UsernameRead: If stdin cannot be read or is at end of file.
        """
        line = await self._prompt(self.username_prompt, _read_line, UsernameRead)
        return Username.parse(line.strip())

    async def prompt_password(self) -> BasePassword:
        """Read the password from the terminal without echo.

        Raises:
            PromptWrite: If the prompt cannot be written.
            PasswordRead: If the password cannot be read.
        """
        secret = await self._prompt(self.password_prompt, _read_secret, PasswordRead)
        return Password.parse(secret)

    async def read_plain_text(self, prompt: str) -> str:
        """Prompt for and read one stripped line from stdin."""
        line = await self._prompt(prompt, _read_line, PlainTextRead)
        return line.strip()

    async def read_secret(self, prompt: str) -> str:
        """Prompt for and read a value without echo."""
        return await self._prompt(prompt, _read_secret, SecretRead)

    @staticmethod
    async def _prompt(
        prompt: str,
        read: Callable[[], str],
        read_error: type[CliReadError],
    ) -> str:
        try:
            sys.stderr.write(prompt)
            sys.stderr.flush()
        except (OSError, ValueError) as exc:
            raise PromptWrite(prompt, exc) from exc

        try:
            return await asyncio.to_thread(read)
        except (OSError, EOFError) as exc:
            raise read_error(exc) from exc


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("stdin closed")
    return line


def _read_secret() -> str:
    return getpass.getpass("")
