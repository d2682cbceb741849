"""User account domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Account record owned by the auth server.

    Profiles only read ``name`` and ``avatar`` from it and delete it when
    the owner removes their account.
    """

    id: UUID = field(default_factory=uuid4)
    name: str = ""
    email: str = ""
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
