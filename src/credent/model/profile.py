"""A named set of credentials."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from credent.config import DEFAULT_PROFILE_NAME

C = TypeVar("C", bound=BaseModel)


@dataclass(frozen=True, order=True)
class Profile(Generic[C]):
    """Profile to store credentials under.

    This allows one credentials file to hold credentials for multiple
    environments or accounts. Profiles are compared, hashed and ordered by
    :attr:`name` alone, so two profiles with the same name are the same entry
    of a :class:`~credent.model.profiles.Profiles` set even when their
    credentials differ.

    The credentials payload can be any pydantic model; it defaults to
    :class:`~credent.model.credentials.Credentials`.

    Attributes:
        name: Profile name.
        credentials: Credentials for this profile.
    """

    DEFAULT_NAME: ClassVar[str] = DEFAULT_PROFILE_NAME

    name: str
    credentials: C = field(compare=False)

    @classmethod
    def new_default(cls, credentials: C) -> Profile[C]:
        """Return a profile named :attr:`DEFAULT_NAME`."""
        return cls(cls.DEFAULT_NAME, credentials)

    def is_default(self) -> bool:
        """Return whether this profile has the ``"default"`` profile name."""
        return self.name == self.DEFAULT_NAME

    def __str__(self) -> str:
        return f"{self.name}/{self.credentials}"
