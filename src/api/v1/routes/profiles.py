"""Profile API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import ErrorResponse, SuccessResponse
from api.v1.schemas.profile import (
    EducationInput,
    ExperienceInput,
    ProfileInput,
    ProfileResponse,
)
from core.exceptions import ProfileNotFoundError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profiles"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Profile not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Invalid input"}}
_UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing or invalid token"}}


@router.get(
    "",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Get own profile",
    responses={**_NOT_FOUND, **_UNAUTHORIZED},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_own_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Get the authenticated user's profile with their name and avatar."""
    return ProfileResponse.from_domain(await service.get_own(user.id))


@router.get(
    "/all",
    response_model=list[ProfileResponse],
    response_model_exclude_none=True,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> list[ProfileResponse]:
    """Get every profile. Returns an empty list when there are none."""
    return [ProfileResponse.from_domain(item) for item in await service.list_all()]


@router.get(
    "/handle/{handle}",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Get profile by handle",
    responses=_NOT_FOUND,
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_handle(
    request: Request,
    handle: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Public lookup by handle."""
    return ProfileResponse.from_domain(await service.get_by_handle(handle))


@router.get(
    "/user/{user_id}",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Get profile by user ID",
    responses=_NOT_FOUND,
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user_id(
    request: Request,
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Public lookup by owning user. A malformed ID simply matches nothing."""
    try:
        owner_id = UUID(user_id)
    except ValueError:
        raise ProfileNotFoundError(lookup={"user_id": user_id}) from None
    return ProfileResponse.from_domain(await service.get_by_user_id(owner_id))


@router.post(
    "",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Create or update own profile",
    responses={
        200: {"description": "Profile updated"},
        201: {"description": "Profile created"},
        **_INVALID,
        **_UNAUTHORIZED,
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    response: Response,
    body: ProfileInput,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """
    Create the caller's profile, or update the fields sent in the body.

    `skills` is a comma-separated string. Social links are sent flat
    (`twitter`, `linkedin`, ...) and returned nested under `social`.
    """
    item, created = await service.upsert(user.id, body.model_dump(exclude_none=True))
    if created:
        response.status_code = status.HTTP_201_CREATED
    return ProfileResponse.from_domain(item)


@router.delete(
    "",
    response_model=SuccessResponse,
    summary="Delete own profile and account",
    responses=_UNAUTHORIZED,
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_profile_and_user(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> SuccessResponse:
    """Delete the caller's profile, then their user account. Safe to repeat."""
    await service.delete_account(user.id)
    return SuccessResponse(success=True)


# --- Experience ---


@router.post(
    "/experience",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Add experience",
    responses={**_INVALID, **_NOT_FOUND, **_UNAUTHORIZED},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_experience(
    request: Request,
    body: ExperienceInput,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add an experience entry; it becomes the first one listed."""
    item = await service.add_experience(user.id, body.model_dump(exclude_none=True))
    return ProfileResponse.from_domain(item)


@router.delete(
    "/experience/{exp_id}",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Remove experience",
    responses={**_NOT_FOUND, **_UNAUTHORIZED},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_experience(
    request: Request,
    exp_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove an experience entry by ID. Unknown IDs leave the profile unchanged."""
    return ProfileResponse.from_domain(await service.remove_experience(user.id, exp_id))


# --- Education ---


@router.post(
    "/education",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Add education",
    responses={**_INVALID, **_NOT_FOUND, **_UNAUTHORIZED},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_education(
    request: Request,
    body: EducationInput,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Add an education entry; it becomes the first one listed."""
    item = await service.add_education(user.id, body.model_dump(exclude_none=True))
    return ProfileResponse.from_domain(item)


@router.delete(
    "/education/{edu_id}",
    response_model=ProfileResponse,
    response_model_exclude_none=True,
    summary="Remove education",
    responses={**_NOT_FOUND, **_UNAUTHORIZED},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_education(
    request: Request,
    edu_id: str,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Remove an education entry by ID. Unknown IDs leave the profile unchanged."""
    return ProfileResponse.from_domain(await service.remove_education(user.id, edu_id))
