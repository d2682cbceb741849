"""Unit tests for profile input validation."""

from datetime import date

import pytest

from domain.validation import (
    is_empty,
    is_url,
    parse_date,
    validate_education_input,
    validate_experience_input,
    validate_profile_input,
)


class TestHelpers:
    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_is_empty(self, value):
        assert is_empty(value)

    @pytest.mark.parametrize("value", ["x", ["a"], 0, False])
    def test_is_not_empty(self, value):
        assert not is_empty(value)

    @pytest.mark.parametrize(
        "value", ["https://example.com", "http://dev.io/path?q=1", "github.com/janedoe"]
    )
    def test_valid_urls(self, value):
        assert is_url(value)

    @pytest.mark.parametrize("value", ["not a url", "localhost", "http://"])
    def test_invalid_urls(self, value):
        assert not is_url(value)

    def test_parse_date(self):
        assert parse_date("2020-01-01") == date(2020, 1, 1)
        assert parse_date("2020-01-01T00:00:00") == date(2020, 1, 1)
        assert parse_date(date(2019, 5, 4)) == date(2019, 5, 4)
        assert parse_date("yesterday") is None


class TestValidateProfileInput:
    def test_valid_minimal_payload(self):
        result = validate_profile_input(
            {"handle": "dev1", "status": "Developer", "skills": "node,react"}
        )

        assert result.is_valid
        assert result.errors == {}

    def test_missing_required_fields(self):
        result = validate_profile_input({})

        assert not result.is_valid
        assert result.errors == {
            "handle": "Profile handle is required",
            "status": "Status field is required",
            "skills": "Skills field is required",
        }

    @pytest.mark.parametrize("skills", [" , ,", ",", ["", "  "]])
    def test_skills_without_entries_are_missing(self, skills):
        result = validate_profile_input({"handle": "dev1", "status": "Developer", "skills": skills})

        assert result.errors == {"skills": "Skills field is required"}

    def test_handle_length(self):
        too_long = validate_profile_input({"handle": "x" * 41, "status": "s", "skills": "a"})
        just_right = validate_profile_input({"handle": "x" * 40, "status": "s", "skills": "a"})

        assert "handle" in too_long.errors
        assert just_right.is_valid

    def test_urls_are_checked_when_present(self):
        result = validate_profile_input(
            {
                "handle": "dev1",
                "status": "Developer",
                "skills": "go",
                "website": "nope",
                "twitter": "https://twitter.com/dev1",
                "facebook": "also nope",
                "youtube": "",
            }
        )

        assert result.errors == {"website": "Not a valid URL", "facebook": "Not a valid URL"}


class TestValidateExperienceInput:
    def test_valid(self):
        result = validate_experience_input(
            {"title": "Engineer", "company": "Acme", "from_date": "2020-01-01"}
        )

        assert result.is_valid

    def test_missing_fields(self):
        result = validate_experience_input({})

        assert set(result.errors) == {"title", "company", "from"}

    def test_bad_dates(self):
        result = validate_experience_input(
            {"title": "Engineer", "company": "Acme", "from_date": "2020-13-45", "to_date": "x"}
        )

        assert set(result.errors) == {"from", "to"}

    def test_to_before_from(self):
        result = validate_experience_input(
            {
                "title": "Engineer",
                "company": "Acme",
                "from_date": "2020-01-01",
                "to_date": "2019-01-01",
            }
        )

        assert set(result.errors) == {"to"}


class TestValidateEducationInput:
    def test_valid(self):
        result = validate_education_input(
            {
                "school": "MIT",
                "degree": "BSc",
                "field_of_study": "CS",
                "from_date": "2015-09-01",
                "to_date": "2019-06-01",
            }
        )

        assert result.is_valid

    def test_missing_fields_use_wire_names(self):
        result = validate_education_input({})

        assert set(result.errors) == {"school", "degree", "fieldOfStudy", "from"}
