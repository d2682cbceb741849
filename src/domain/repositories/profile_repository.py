"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile documents."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by its handle."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get every profile, oldest first."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Insert a new profile.

        Raises IntegrityError when the user or handle is already taken.
        """
        ...

    async def update(self, profile: Profile) -> Profile:
        """Replace the stored document with ``profile`` (last write wins)."""
        ...

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user. Returns False when none existed."""
        ...
