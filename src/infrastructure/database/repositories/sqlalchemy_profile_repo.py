"""SQLAlchemy implementation of Profile repository."""

from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Education, Experience, Profile, SocialLinks
from domain.validation import parse_date
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_handle(self, handle: str) -> Profile | None:
        """Get a profile by handle."""
        stmt = select(ProfileModel).where(ProfileModel.handle == handle)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get all profiles."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(id=profile.id, user_id=profile.user_id, created_at=profile.created_at)
        self._apply(model, profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Overwrite an existing profile document."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        self._apply(model, profile)

        await self._session.flush()
        return self._to_entity(model)

    async def delete_by_user(self, user_id: UUID) -> bool:
        """Delete the profile owned by a user."""
        stmt = delete(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    def _apply(self, model: ProfileModel, entity: Profile) -> None:
        """Copy every mutable field of the entity onto the row."""
        model.handle = entity.handle
        model.company = entity.company
        model.website = entity.website
        model.location = entity.location
        model.status = entity.status
        model.skills = list(entity.skills)
        model.bio = entity.bio
        model.github_username = entity.github_username
        # New list/dict objects so the JSON columns are flagged dirty
        model.experience = [_experience_to_doc(item) for item in entity.experience]
        model.education = [_education_to_doc(item) for item in entity.education]
        model.social = entity.social.to_dict()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            handle=model.handle,
            company=model.company,
            website=model.website,
            location=model.location,
            status=model.status,
            skills=list(model.skills or []),
            bio=model.bio,
            github_username=model.github_username,
            experience=[_experience_from_doc(doc) for doc in model.experience or []],
            education=[_education_from_doc(doc) for doc in model.education or []],
            social=SocialLinks(**(model.social or {})),
            created_at=model.created_at,
        )


def _isoformat(value: Any) -> str | None:
    return value.isoformat() if value is not None else None


def _experience_to_doc(item: Experience) -> dict[str, Any]:
    return {
        "id": str(item.id),
        "title": item.title,
        "company": item.company,
        "location": item.location,
        "from_date": _isoformat(item.from_date),
        "to_date": _isoformat(item.to_date),
        "current": item.current,
        "description": item.description,
    }


def _experience_from_doc(doc: dict[str, Any]) -> Experience:
    return Experience(
        id=UUID(doc["id"]),
        title=doc["title"],
        company=doc["company"],
        location=doc.get("location"),
        from_date=parse_date(doc["from_date"]),  # type: ignore[arg-type]
        to_date=parse_date(doc["to_date"]) if doc.get("to_date") else None,
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )


def _education_to_doc(item: Education) -> dict[str, Any]:
    return {
        "id": str(item.id),
        "school": item.school,
        "degree": item.degree,
        "field_of_study": item.field_of_study,
        "from_date": _isoformat(item.from_date),
        "to_date": _isoformat(item.to_date),
        "current": item.current,
        "description": item.description,
    }


def _education_from_doc(doc: dict[str, Any]) -> Education:
    return Education(
        id=UUID(doc["id"]),
        school=doc["school"],
        degree=doc["degree"],
        field_of_study=doc["field_of_study"],
        from_date=parse_date(doc["from_date"]),  # type: ignore[arg-type]
        to_date=parse_date(doc["to_date"]) if doc.get("to_date") else None,
        current=bool(doc.get("current", False)),
        description=doc.get("description"),
    )
