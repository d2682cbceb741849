"""Profile service layer with business logic."""

from collections.abc import Callable, Mapping
from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    HandleTakenError,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    ProfileValidationError,
)
from domain.entities.profile import (
    SOCIAL_NETWORKS,
    Education,
    Experience,
    Profile,
    ProfileWithOwner,
    SocialLinks,
)
from domain.repositories.unit_of_work import IUnitOfWork
from domain.validation import (
    ValidationResult,
    is_empty,
    parse_date,
    split_skills,
    validate_education_input,
    validate_experience_input,
    validate_profile_input,
)

logger = structlog.get_logger()

# Top-level scalar fields replaced in place by an upsert
PROFILE_SCALAR_FIELDS = (
    "handle",
    "company",
    "website",
    "location",
    "bio",
    "status",
    "github_username",
)


def _clean(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def build_social(fields: Mapping[str, Any]) -> SocialLinks:
    """Collect the flat social keys of a payload. Absent keys stay unset."""
    return SocialLinks(
        **{
            name: _clean(fields[name])
            for name in SOCIAL_NETWORKS
            if not is_empty(fields.get(name))
        }
    )


def _optional(entry: Mapping[str, Any], key: str) -> Any:
    value = entry.get(key)
    return None if is_empty(value) else value


def _raise_if_invalid(result: ValidationResult) -> None:
    if not result.is_valid:
        raise ProfileValidationError(result.errors)


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    # --- Lookups ---

    async def get_own(self, user_id: UUID) -> ProfileWithOwner:
        """Get the caller's own profile."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            return await self._with_owner(uow, profile)

    async def list_all(self) -> list[ProfileWithOwner]:
        """Get every profile with its owner. An empty list is not an error."""
        async with self._uow_factory() as uow:
            profiles = await uow.profiles.get_all()
            owners = await uow.users.get_many(list({p.user_id for p in profiles}))
            return [ProfileWithOwner(profile=p, owner=owners.get(p.user_id)) for p in profiles]

    async def get_by_handle(self, handle: str) -> ProfileWithOwner:
        """Get a profile by handle."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_handle(handle)
            if not profile:
                raise ProfileNotFoundError(
                    "There is no profile for this handle", lookup={"handle": handle}
                )
            return await self._with_owner(uow, profile)

    async def get_by_user_id(self, user_id: UUID) -> ProfileWithOwner:
        """Get a profile by the owning user's ID."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            return await self._with_owner(uow, profile)

    # --- Create / update ---

    async def upsert(
        self, user_id: UUID, fields: Mapping[str, Any]
    ) -> tuple[ProfileWithOwner, bool]:
        """Create the caller's profile or update it in place.

        Only top-level fields present in ``fields`` are replaced; ``social``
        is rebuilt from the payload and the experience/education lists are
        never touched.

        Returns:
            The stored profile and whether it was newly created.
        """
        _raise_if_invalid(validate_profile_input(fields))

        values: dict[str, Any] = {
            name: _clean(fields[name])
            for name in PROFILE_SCALAR_FIELDS
            if not is_empty(fields.get(name))
        }
        values["skills"] = split_skills(fields["skills"])
        social = build_social(fields)
        handle = values["handle"]

        async with self._uow_factory() as uow:
            existing = await uow.profiles.get_by_user(user_id)

            # Fast path; the unique index on handle is the real guard
            owner_of_handle = await uow.profiles.get_by_handle(handle)
            if owner_of_handle and owner_of_handle.user_id != user_id:
                raise HandleTakenError(handle)

            try:
                if existing:
                    for name, value in values.items():
                        setattr(existing, name, value)
                    existing.social = social
                    saved = await uow.profiles.update(existing)
                else:
                    saved = await uow.profiles.create(
                        Profile(user_id=user_id, social=social, **values)
                    )
                await uow.commit()
            except IntegrityError as exc:
                await uow.rollback()
                # Only unique-index races are conflicts; FK and NOT NULL
                # violations propagate.
                orig = str(exc.orig).lower() if exc.orig else ""
                if "unique" not in orig and "duplicate" not in orig:
                    raise
                if "handle" in orig:
                    raise HandleTakenError(handle) from exc
                if "user_id" in orig:
                    raise ProfileAlreadyExistsError(str(user_id)) from exc
                raise

            logger.info(
                "profile_updated" if existing else "profile_created",
                user_id=str(user_id),
                handle=handle,
            )
            return await self._with_owner(uow, saved), existing is None

    # --- Sub-collections ---

    async def add_experience(self, user_id: UUID, entry: Mapping[str, Any]) -> ProfileWithOwner:
        """Prepend a new experience entry to the caller's profile."""
        _raise_if_invalid(validate_experience_input(entry))
        experience = Experience(
            title=entry["title"],
            company=entry["company"],
            location=_optional(entry, "location"),
            from_date=parse_date(entry["from_date"]),  # type: ignore[arg-type]
            to_date=parse_date(entry["to_date"]) if _optional(entry, "to_date") else None,
            current=bool(entry.get("current") or False),
            description=_optional(entry, "description"),
        )

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.experience.prepend(experience)
            saved = await uow.profiles.update(profile)
            await uow.commit()

            logger.info("experience_added", user_id=str(user_id), experience_id=str(experience.id))
            return await self._with_owner(uow, saved)

    async def add_education(self, user_id: UUID, entry: Mapping[str, Any]) -> ProfileWithOwner:
        """Prepend a new education entry to the caller's profile."""
        _raise_if_invalid(validate_education_input(entry))
        education = Education(
            school=entry["school"],
            degree=entry["degree"],
            field_of_study=entry["field_of_study"],
            from_date=parse_date(entry["from_date"]),  # type: ignore[arg-type]
            to_date=parse_date(entry["to_date"]) if _optional(entry, "to_date") else None,
            current=bool(entry.get("current") or False),
            description=_optional(entry, "description"),
        )

        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            profile.education.prepend(education)
            saved = await uow.profiles.update(profile)
            await uow.commit()

            logger.info("education_added", user_id=str(user_id), education_id=str(education.id))
            return await self._with_owner(uow, saved)

    async def remove_experience(self, user_id: UUID, exp_id: str) -> ProfileWithOwner:
        """Remove an experience entry by ID. Unknown IDs leave the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.experience.remove(exp_id):
                logger.debug("experience_not_found", user_id=str(user_id), experience_id=exp_id)
                return await self._with_owner(uow, profile)

            saved = await uow.profiles.update(profile)
            await uow.commit()

            logger.info("experience_removed", user_id=str(user_id), experience_id=exp_id)
            return await self._with_owner(uow, saved)

    async def remove_education(self, user_id: UUID, edu_id: str) -> ProfileWithOwner:
        """Remove an education entry by ID. Unknown IDs leave the profile unchanged."""
        async with self._uow_factory() as uow:
            profile = await self._require_profile(uow, user_id)
            if not profile.education.remove(edu_id):
                logger.debug("education_not_found", user_id=str(user_id), education_id=edu_id)
                return await self._with_owner(uow, profile)

            saved = await uow.profiles.update(profile)
            await uow.commit()

            logger.info("education_removed", user_id=str(user_id), education_id=edu_id)
            return await self._with_owner(uow, saved)

    # --- Account deletion ---

    async def delete_account(self, user_id: UUID) -> None:
        """Delete the caller's profile (if any), then the user account.

        The profile goes first since it references the user. Repeating the
        call is harmless.
        """
        async with self._uow_factory() as uow:
            profile_deleted = await uow.profiles.delete_by_user(user_id)
            user_deleted = await uow.users.delete(user_id)
            await uow.commit()

            logger.info(
                "account_deleted",
                user_id=str(user_id),
                profile_deleted=profile_deleted,
                user_deleted=user_deleted,
            )

    # --- Helpers ---

    async def _require_profile(self, uow: IUnitOfWork, user_id: UUID) -> Profile:
        profile = await uow.profiles.get_by_user(user_id)
        if not profile:
            raise ProfileNotFoundError(lookup={"user_id": str(user_id)})
        return profile

    async def _with_owner(self, uow: IUnitOfWork, profile: Profile) -> ProfileWithOwner:
        owner = await uow.users.get(profile.user_id)
        return ProfileWithOwner(profile=profile, owner=owner)
