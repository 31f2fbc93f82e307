"""Username to log in with."""

from __future__ import annotations


class Username(str):
    """Username to log in with. ``str`` newtype.

    Unlike passwords, usernames render as-is.
    """

    __slots__ = ()

    @classmethod
    def parse(cls, text: str) -> Username:
        """Parse a username entered on the command line. Always succeeds."""
        return cls(text)

    def __repr__(self) -> str:
        return f"Username({str.__repr__(self)})"
