"""
Fake Profile Repository for Testing.

In-memory implementation of ProfileRepository.
"""
from typing import Dict, Iterable, Optional

from models.profile import UserProfile


class FakeProfileRepository:
    """In-memory fake implementation of ProfileRepository."""

    def __init__(self, profiles: Optional[Iterable[UserProfile]] = None):
        self._profiles: Dict[str, UserProfile] = {}
        if profiles:
            self.seed(profiles)

    def reset(self) -> None:
        """Clear all stored data."""
        self._profiles.clear()

    def seed(self, profiles: Iterable[UserProfile]) -> None:
        for profile in profiles:
            self._profiles[profile.id] = profile

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        return self._profiles.get(user_id)
