"""Password value types.

A password is held in one of two representations:

* :class:`PlainTextPassword` -- stored as-is.
* :class:`Base64EncodedPassword` -- stored base64 encoded. This is
  obfuscation so the secret is not readable at a glance, not security.

Both share the :class:`BasePassword` interface, and neither ever reveals the
secret through ``str()`` or ``repr()``.

:data:`Password` is the representation this process uses. It is chosen once,
on import, from ``CREDENT_PASSWORD_ENCODING`` (see :mod:`credent.config`) and
cannot be switched afterwards.
"""

from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod

from credent.config import PasswordEncoding, get_password_encoding

MASK = "******"
"""Rendering of every password, whatever its content."""


class BasePassword(ABC):
    """Abstract password holding its stored (encoded) representation.

    Args:
        plain_text: The secret, as typed by the user.
    """

    __slots__ = ("_encoded",)

    def __init__(self, plain_text: str) -> None:
        self._encoded = self._encode(plain_text)

    @classmethod
    def parse(cls, text: str) -> BasePassword:
        """Parse a password entered as plain text. Always succeeds."""
        return cls(text)

    @classmethod
    def from_encoded(cls, encoded: str) -> BasePassword:
        """Rebuild a password from its stored representation.

        Raises:
            ValueError: If *encoded* is not a string, or is not a value this
                representation could have produced.
        """
        if not isinstance(encoded, str):
            raise ValueError(f"password must be a string, not {type(encoded).__name__}")
        cls._check_encoded(encoded)
        password = cls.__new__(cls)
        password._encoded = encoded
        return password

    def encoded(self) -> str:
        """Return the stored representation of the password."""
        return self._encoded

    def plain_text(self) -> str:
        """Return the secret."""
        return self._decode(self._encoded)

    @staticmethod
    @abstractmethod
    def _encode(plain_text: str) -> str: ...

    @staticmethod
    @abstractmethod
    def _decode(encoded: str) -> str: ...

    @staticmethod
    def _check_encoded(encoded: str) -> None:
        """Raise ``ValueError`` if *encoded* cannot be decoded."""

    # Never reveal the password, even in repr().
    def __repr__(self) -> str:
        return MASK

    def __str__(self) -> str:
        return MASK

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._encoded == other._encoded  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._encoded))


class PlainTextPassword(BasePassword):
    """Password stored as plain text."""

    __slots__ = ()

    @staticmethod
    def _encode(plain_text: str) -> str:
        return plain_text

    @staticmethod
    def _decode(encoded: str) -> str:
        return encoded


class Base64EncodedPassword(BasePassword):
    """Password stored as the standard base64 encoding of its UTF-8 bytes.

    Example::

        >>> Base64EncodedPassword("hi").encoded()
        'aGk='
    """

    __slots__ = ()

    @staticmethod
    def _encode(plain_text: str) -> str:
        return base64.b64encode(plain_text.encode("utf-8")).decode("ascii")

    @staticmethod
    def _decode(encoded: str) -> str:
        try:
            return base64.b64decode(encoded, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            # Only values produced by _encode or vetted by _check_encoded get here.
            raise AssertionError(
                "Password base64 decode failed. "
                "This should be impossible as we only decode what we have encoded."
            ) from exc

    @staticmethod
    def _check_encoded(encoded: str) -> None:
        try:
            base64.b64decode(encoded, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValueError(f"password is not valid base64 encoded UTF-8: {exc}") from exc


def _configured_password_type() -> type[BasePassword]:
    if get_password_encoding() is PasswordEncoding.BASE64:
        return Base64EncodedPassword
    return PlainTextPassword


Password: type[BasePassword] = _configured_password_type()
