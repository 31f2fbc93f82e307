"""Credentials: a username and password pair."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator

from credent.model.password import BasePassword, Password
from credent.model.username import Username


def _validate_username(value: Any) -> Username:
    if not isinstance(value, str):
        raise ValueError(f"username must be a string, not {type(value).__name__}")
    return Username(value)


def _validate_password(value: Any) -> BasePassword:
    # Strings come from storage, so they are in the stored representation.
    if isinstance(value, BasePassword):
        return value
    return Password.from_encoded(value)


def _serialize_password(password: BasePassword) -> str:
    return password.encoded()


UsernameField = Annotated[
    Username,
    PlainValidator(_validate_username),
    PlainSerializer(str, return_type=str),
]

PasswordField = Annotated[
    BasePassword,
    PlainValidator(_validate_password),
    PlainSerializer(_serialize_password, return_type=str),
]


class Credentials(BaseModel):
    """Username and password to log in with.

    Serialises to ``{"username": ..., "password": ...}`` where the password is
    its stored representation (see :mod:`credent.model.password`).
    Credentials sort by username; equality compares both fields.

    Example::

        credentials = Credentials(username="me", password=Password("secret"))
        str(credentials)  # 'me:******'
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    username: UsernameField
    password: PasswordField

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return self.username < other.username

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return self.username <= other.username

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return self.username > other.username

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Credentials):
            return NotImplemented
        return self.username >= other.username

    def __str__(self) -> str:
        return f"{self.username}:{self.password}"
