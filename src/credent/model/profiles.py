"""The set of profiles held in one credentials file."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic, Optional

from credent.model.credentials import Credentials
from credent.model.profile import C, Profile


class Profiles(Generic[C]):
    """Set of :class:`~credent.model.profile.Profile` objects, unique by name.

    Iteration, display and serialisation always follow ascending name order,
    regardless of the order profiles were added in.

    On disk the set is a mapping from profile name to credentials;
    :meth:`to_mapping` and :meth:`from_mapping` convert between the two
    shapes.

    Args:
        profiles: Initial profiles. A later profile replaces an earlier one
            with the same name.

    Example::

        profiles = Profiles()
        profiles.replace(Profile("work", work_credentials))
        profiles.replace(Profile.new_default(credentials))
        [p.name for p in profiles]  # ['default', 'work']
    """

    def __init__(self, profiles: Iterable[Profile[C]] = ()) -> None:
        self._profiles: dict[str, Profile[C]] = {}
        for profile in profiles:
            self.replace(profile)

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #

    def replace(self, profile: Profile[C]) -> Optional[Profile[C]]:
        """Add *profile*, overwriting any profile with the same name.

        The existing entry is replaced even though profiles compare equal by
        name, so updated credentials under an unchanged name are never lost.

        Returns:
            The profile that was replaced, or ``None`` if the name was new.
        """
        previous = self._profiles.get(profile.name)
        self._profiles[profile.name] = profile
        return previous

    def insert(self, profile: Profile[C]) -> bool:
        """Add *profile* only if no profile with its name is present.

        Returns:
            ``True`` if the profile was added, ``False`` if the name was
            already taken (the existing profile is left untouched).
        """
        if profile.name in self._profiles:
            return False
        self._profiles[profile.name] = profile
        return True

    def remove(self, name: str) -> Profile[C]:
        """Remove and return the profile called *name*.

        Raises:
            KeyError: If there is no such profile.
        """
        return self._profiles.pop(name)

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #

    def get(self, name: str) -> Optional[Profile[C]]:
        """Return the profile called *name*, or ``None``."""
        return self._profiles.get(name)

    def names(self) -> list[str]:
        """Return the profile names in ascending order."""
        return sorted(self._profiles)

    def __getitem__(self, name: str) -> Profile[C]:
        return self._profiles[name]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Profile):
            item = item.name
        return item in self._profiles

    def __iter__(self) -> Iterator[Profile[C]]:
        for name in sorted(self._profiles):
            yield self._profiles[name]

    def __len__(self) -> int:
        return len(self._profiles)

    # ------------------------------------------------------------------ #
    # Serialisation boundary
    # ------------------------------------------------------------------ #

    def to_mapping(self) -> dict[str, dict[str, Any]]:
        """Return a ``name -> credentials`` mapping in ascending name order.

        Each value is the credentials model dumped to plain JSON-compatible
        data, e.g. ``{"username": "me", "password": "secret"}``.
        """
        return {
            profile.name: profile.credentials.model_dump(mode="json")
            for profile in self
        }

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        credentials_type: type[Any] = Credentials,
    ) -> Profiles[Any]:
        """Build profiles from a ``name -> credentials`` mapping.

        Args:
            mapping: Profile names to credentials data.
            credentials_type: Pydantic model used to validate each value.

        Raises:
            ValueError: If *mapping* is not a mapping, or a value fails
                validation (``pydantic.ValidationError`` is a ``ValueError``).
        """
        if not isinstance(mapping, Mapping):
            raise ValueError(f"expected a mapping of profiles, not {type(mapping).__name__}")
        profiles: Profiles[Any] = cls()
        for name, value in mapping.items():
            profiles.replace(Profile(name, credentials_type.model_validate(value)))
        return profiles

    # ------------------------------------------------------------------ #
    # Dunder helpers
    # ------------------------------------------------------------------ #

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Profiles):
            return NotImplemented
        return [(p.name, p.credentials) for p in self] == [
            (p.name, p.credentials) for p in other
        ]

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(str(profile) for profile in self) + "]"

    def __repr__(self) -> str:
        return f"Profiles({list(self)!r})"

