"""Profile registry — stores and resolves named cross-section profiles."""

from __future__ import annotations
import logging

from shedbim.core.errors import ProfileNotFoundError
from shedbim.models import Profile, ProfileKind, STANDARD_PROFILES

logger = logging.getLogger(__name__)


class ProfileRegistry:
    """
    Central registry of cross-section profiles, keyed by name.

    Profiles are immutable, so the registry hands out the shared instance
    and every member built from it references the same object.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, Profile] = {}

    def register(self, profile: Profile) -> None:
        """Register a profile, replacing any existing one with the same name."""
        if profile.name in self._profiles:
            logger.warning("Replacing registered profile %s", profile.name)
        self._profiles[profile.name] = profile

    def unregister(self, name: str) -> None:
        """Remove a profile from the registry."""
        self._profiles.pop(name, None)

    def has_profile(self, name: str) -> bool:
        return name in self._profiles

    def get_profile(self, name: str) -> Profile:
        try:
            return self._profiles[name]
        except KeyError:
            raise ProfileNotFoundError(name) from None

    def list_profiles(self, kind: ProfileKind | None = None) -> list[Profile]:
        """Return registered profiles, optionally filtered by kind."""
        profiles = list(self._profiles.values())
        if kind is not None:
            profiles = [p for p in profiles if p.kind == kind]
        return profiles


def create_default_registry() -> ProfileRegistry:
    """Create a registry holding the standard C and top-hat sections."""
    registry = ProfileRegistry()
    for profile in STANDARD_PROFILES.values():
        registry.register(profile)
    return registry
