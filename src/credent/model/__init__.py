"""Data types to represent application credentials.

- :class:`Password` -- the configured password representation, masked in all
  output. :class:`PlainTextPassword` and :class:`Base64EncodedPassword` are the
  two concrete representations.
- :class:`Username` -- the login name.
- :class:`Credentials` -- username and password pair.
- :class:`Profile` -- credentials stored under a name.
- :class:`Profiles` -- name-unique, name-ordered set of profiles.
"""

from credent.model.credentials import Credentials
from credent.model.password import (
    MASK,
    Base64EncodedPassword,
    BasePassword,
    Password,
    PlainTextPassword,
)
from credent.model.profile import Profile
from credent.model.profiles import Profiles
from credent.model.username import Username

__all__ = [
    "MASK",
    "Base64EncodedPassword",
    "BasePassword",
    "Credentials",
    "Password",
    "PlainTextPassword",
    "Profile",
    "Profiles",
    "Username",
]
