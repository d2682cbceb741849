"""Pydantic schemas for Profile API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import AliasChoices, Field

from api.v1.schemas.common import CamelModel
from domain.entities.profile import Education, Experience, ProfileWithOwner

# --- Requests ---
# Presence and format checks live in domain.validation so that every failing
# field is reported together with a 400; these schemas only shape the payload.


class ProfileInput(CamelModel):
    """Create/update payload. Social links are flat top-level keys."""

    handle: str | None = None
    company: str | None = None
    website: str | None = None
    location: str | None = None
    bio: str | None = None
    status: str | None = None
    skills: str | list[str] | None = Field(
        None, description="Comma-separated list, e.g. `python,fastapi,postgres`"
    )
    github_username: str | None = Field(
        None,
        validation_alias=AliasChoices("githubUsername", "githubusername", "github_username"),
    )
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceInput(CamelModel):
    """Add-experience payload."""

    title: str | None = None
    company: str | None = None
    location: str | None = None
    from_date: str | date | None = Field(
        None, validation_alias=AliasChoices("from", "fromDate", "from_date")
    )
    to_date: str | date | None = Field(
        None, validation_alias=AliasChoices("to", "toDate", "to_date")
    )
    current: bool | None = None
    description: str | None = None


class EducationInput(CamelModel):
    """Add-education payload."""

    school: str | None = None
    degree: str | None = None
    field_of_study: str | None = Field(
        None,
        validation_alias=AliasChoices("fieldOfStudy", "fieldofstudy", "field_of_study"),
    )
    from_date: str | date | None = Field(
        None, validation_alias=AliasChoices("from", "fromDate", "from_date")
    )
    to_date: str | date | None = Field(
        None, validation_alias=AliasChoices("to", "toDate", "to_date")
    )
    current: bool | None = None
    description: str | None = None


# --- Responses ---


class OwnerResponse(CamelModel):
    """Public part of the owning user account."""

    id: UUID
    name: str
    avatar: str | None = None


class SocialResponse(CamelModel):
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    linkedin: str | None = None
    instagram: str | None = None


class ExperienceResponse(CamelModel):
    id: UUID
    title: str
    company: str
    location: str | None = None
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @classmethod
    def from_entity(cls, item: Experience) -> "ExperienceResponse":
        return cls(
            id=item.id,
            title=item.title,
            company=item.company,
            location=item.location,
            from_date=item.from_date,
            to_date=item.to_date,
            current=item.current,
            description=item.description,
        )


class EducationResponse(CamelModel):
    id: UUID
    school: str
    degree: str
    field_of_study: str
    from_date: date = Field(alias="from")
    to_date: date | None = Field(None, alias="to")
    current: bool = False
    description: str | None = None

    @classmethod
    def from_entity(cls, item: Education) -> "EducationResponse":
        return cls(
            id=item.id,
            school=item.school,
            degree=item.degree,
            field_of_study=item.field_of_study,
            from_date=item.from_date,
            to_date=item.to_date,
            current=item.current,
            description=item.description,
        )


class ProfileResponse(CamelModel):
    """Schema for Profile response, newest experience/education first."""

    model_config = CamelModel.model_config | {
        "json_schema_extra": {
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "userId": "9b2f6c1e-3d4a-4f8e-a1b2-c3d4e5f60718",
                "user": {
                    "id": "9b2f6c1e-3d4a-4f8e-a1b2-c3d4e5f60718",
                    "name": "Jane Doe",
                    "avatar": "https://gravatar.com/avatar/abc",
                },
                "handle": "janedoe",
                "status": "Developer",
                "skills": ["python", "fastapi"],
                "experience": [],
                "education": [],
                "social": {"twitter": "https://twitter.com/janedoe"},
                "createdAt": "2026-01-28T10:00:00",
            }
        }
    }

    id: UUID
    user_id: UUID
    user: OwnerResponse | None = None
    handle: str
    company: str | None = None
    website: str | None = None
    location: str | None = None
    status: str
    skills: list[str]
    bio: str | None = None
    github_username: str | None = None
    experience: list[ExperienceResponse]
    education: list[EducationResponse]
    social: SocialResponse
    created_at: datetime

    @classmethod
    def from_domain(cls, item: ProfileWithOwner) -> "ProfileResponse":
        profile, owner = item.profile, item.owner
        return cls(
            id=profile.id,
            user_id=profile.user_id,
            user=(
                OwnerResponse(id=owner.id, name=owner.name, avatar=owner.avatar)
                if owner
                else None
            ),
            handle=profile.handle,
            company=profile.company,
            website=profile.website,
            location=profile.location,
            status=profile.status,
            skills=list(profile.skills),
            bio=profile.bio,
            github_username=profile.github_username,
            experience=[ExperienceResponse.from_entity(e) for e in profile.experience],
            education=[EducationResponse.from_entity(e) for e in profile.education],
            social=SocialResponse(**profile.social.to_dict()),
            created_at=profile.created_at,
        )
