"""Input validation for profile payloads.

Each validator is a pure function over a request payload (snake_case keys)
returning every failed field at once, keyed by its wire name.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from domain.entities.profile import HANDLE_MAX_LENGTH, SOCIAL_NETWORKS

HANDLE_MIN_LENGTH = 2

_url_adapter = TypeAdapter(AnyHttpUrl)
_date_adapter = TypeAdapter(date)
_datetime_adapter = TypeAdapter(datetime)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one payload."""

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def is_empty(value: Any) -> bool:
    """True for None, blank strings and empty containers."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return not value
    return False


def is_url(value: str) -> bool:
    """Loose URL check; a missing scheme is tolerated (``github.com/me``)."""
    candidate = value.strip()
    if "://" not in candidate:
        candidate = f"http://{candidate}"
    try:
        url = _url_adapter.validate_python(candidate)
    except ValidationError:
        return False
    return bool(url.host) and "." in url.host


def parse_date(value: Any) -> date | None:
    """Parse an ISO date or datetime. Returns None when unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return _date_adapter.validate_python(value)
    except ValidationError:
        pass
    try:
        return _datetime_adapter.validate_python(value).date()
    except ValidationError:
        return None


def split_skills(raw: str | list[str]) -> list[str]:
    """Turn ``"node, react,mongo"`` into ``["node", "react", "mongo"]``."""
    parts = raw.split(",") if isinstance(raw, str) else raw
    return [skill.strip() for skill in parts if skill and skill.strip()]


def validate_profile_input(data: Mapping[str, Any]) -> ValidationResult:
    """Validate a create/update profile payload."""
    errors: dict[str, str] = {}

    handle = data.get("handle")
    if is_empty(handle):
        errors["handle"] = "Profile handle is required"
    elif not HANDLE_MIN_LENGTH <= len(str(handle).strip()) <= HANDLE_MAX_LENGTH:
        errors["handle"] = (
            f"Handle needs to be between {HANDLE_MIN_LENGTH} and {HANDLE_MAX_LENGTH} characters"
        )

    if is_empty(data.get("status")):
        errors["status"] = "Status field is required"

    skills = data.get("skills")
    if is_empty(skills) or not split_skills(skills):  # type: ignore[arg-type]
        errors["skills"] = "Skills field is required"

    website = data.get("website")
    if not is_empty(website) and not is_url(str(website)):
        errors["website"] = "Not a valid URL"

    for network in SOCIAL_NETWORKS:
        value = data.get(network)
        if not is_empty(value) and not is_url(str(value)):
            errors[network] = "Not a valid URL"

    return ValidationResult(errors=errors)


def _validate_period(data: Mapping[str, Any], errors: dict[str, str]) -> None:
    """Shared checks for the from/to dates of experience and education."""
    from_value = data.get("from_date")
    if is_empty(from_value):
        errors["from"] = "From date field is required"
    elif parse_date(from_value) is None:
        errors["from"] = "From date is not a valid date"

    to_value = data.get("to_date")
    if not is_empty(to_value):
        to_date = parse_date(to_value)
        if to_date is None:
            errors["to"] = "To date is not a valid date"
        elif "from" not in errors and to_date < parse_date(from_value):  # type: ignore[operator]
            errors["to"] = "To date must not be before the from date"


def validate_experience_input(data: Mapping[str, Any]) -> ValidationResult:
    """Validate an add-experience payload."""
    errors: dict[str, str] = {}

    if is_empty(data.get("title")):
        errors["title"] = "Job title field is required"
    if is_empty(data.get("company")):
        errors["company"] = "Company field is required"
    _validate_period(data, errors)

    return ValidationResult(errors=errors)


def validate_education_input(data: Mapping[str, Any]) -> ValidationResult:
    """Validate an add-education payload."""
    errors: dict[str, str] = {}

    if is_empty(data.get("school")):
        errors["school"] = "School field is required"
    if is_empty(data.get("degree")):
        errors["degree"] = "Degree field is required"
    if is_empty(data.get("field_of_study")):
        errors["fieldOfStudy"] = "Field of study field is required"
    _validate_period(data, errors)

    return ValidationResult(errors=errors)
