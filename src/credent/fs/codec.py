"""TOML encoding of the credentials file.

The file holds one table per profile, in the order of the mapping given to
:func:`dumps`, separated by a blank line::

    [default]
    username = 'me'
    password = 'secret'

    [profile_other]
    username = 'you'
    password = 'code'

Strings are written as single-quoted literal strings. Values a literal string
cannot hold (a ``'``, a newline or another control character) are written as
escaped basic strings instead.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import String

__all__ = ["TOMLKitError", "dumps", "loads"]

# Literal strings may contain tab but no other control character, and no quote.
_NOT_LITERAL = re.compile(r"['\x00-\x08\x0a-\x1f\x7f]")


def _string(value: str) -> String:
    if _NOT_LITERAL.search(value):
        return tomlkit.string(value)
    return tomlkit.string(value, literal=True)


def loads(text: str) -> dict[str, Any]:
    """Parse a credentials document into plain Python values.

    Raises:
        TOMLKitError: If *text* is not valid TOML.
    """
    return tomlkit.parse(text).unwrap()


def dumps(mapping: Mapping[str, Mapping[str, Any]]) -> str:
    """Render a ``name -> fields`` mapping as a credentials document.

    Raises:
        TypeError: If a profile is not a mapping or a field is not a string.
    """
    document = tomlkit.document()
    for name, fields in mapping.items():
        if not isinstance(fields, Mapping):
            raise TypeError(
                f"profile '{name}' must be a table, not {type(fields).__name__}"
            )
        table = tomlkit.table()
        for key, value in fields.items():
            if not isinstance(value, str):
                raise TypeError(
                    f"field '{key}' of profile '{name}' must be a string, "
                    f"not {type(value).__name__}"
                )
            table.add(key, _string(value))
        document.add(name, table)
    return tomlkit.dumps(document)
