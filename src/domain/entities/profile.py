"""Profile domain entities."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Generic, Protocol, TypeVar
from uuid import UUID, uuid4

from domain.entities.user import User

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")
HANDLE_MAX_LENGTH = 40


class _HasId(Protocol):
    id: UUID


T = TypeVar("T", bound=_HasId)


class SubRecordList(Generic[T]):
    """Newest-first sequence of embedded sub-records.

    New entries go to the front; removal is by identifier only.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def prepend(self, item: T) -> None:
        self._items.insert(0, item)

    def remove(self, item_id: UUID | str) -> bool:
        """Remove the entry with ``item_id``. Unknown ids leave the list untouched."""
        target = str(item_id)
        for item in self._items:
            if str(item.id) == target:
                self._items.remove(item)
                return True
        return False

    def get(self, item_id: UUID | str) -> T | None:
        target = str(item_id)
        return next((item for item in self._items if str(item.id) == target), None)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SubRecordList):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"SubRecordList({self._items!r})"


@dataclass
class Experience:
    """A job held by the profile owner."""

    title: str
    company: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    location: str | None = None
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class Education:
    """A school attended by the profile owner."""

    school: str
    degree: str
    field_of_study: str
    from_date: date
    id: UUID = field(default_factory=uuid4)
    to_date: date | None = None
    current: bool = False
    description: str | None = None


@dataclass
class SocialLinks:
    """Social network URLs. Unset networks stay ``None``."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Only the networks that are set."""
        return {
            name: value
            for name in SOCIAL_NETWORKS
            if (value := getattr(self, name)) is not None
        }


@dataclass
class Profile:
    """Domain entity for a developer profile, one per user."""

    user_id: UUID
    handle: str
    status: str
    skills: list[str] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    github_username: str | None = None
    experience: SubRecordList[Experience] = field(default_factory=SubRecordList)
    education: SubRecordList[Education] = field(default_factory=SubRecordList)
    social: SocialLinks = field(default_factory=SocialLinks)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Accept plain lists for the sub-collections."""
        if not isinstance(self.experience, SubRecordList):
            self.experience = SubRecordList(self.experience)
        if not isinstance(self.education, SubRecordList):
            self.education = SubRecordList(self.education)


@dataclass(frozen=True, slots=True)
class ProfileWithOwner:
    """Read-only value object: a Profile bundled with its owner's account."""

    profile: Profile
    owner: User | None = None
