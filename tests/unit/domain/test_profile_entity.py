"""Unit tests for the Profile entity and its sub-record list."""

from datetime import date
from uuid import uuid4

from domain.entities.profile import (
    Education,
    Experience,
    Profile,
    SocialLinks,
    SubRecordList,
)


def _experience(title: str) -> Experience:
    return Experience(title=title, company="Acme", from_date=date(2021, 3, 1))


class TestSubRecordList:
    def test_prepend_puts_newest_first(self):
        items: SubRecordList[Experience] = SubRecordList()
        first, second = _experience("First"), _experience("Second")

        items.prepend(first)
        items.prepend(second)

        assert [e.title for e in items] == ["Second", "First"]
        assert len(items) == 2

    def test_remove_by_id(self):
        a, b, c = _experience("A"), _experience("B"), _experience("C")
        items = SubRecordList([a, b, c])

        assert items.remove(b.id) is True
        assert [e.title for e in items] == ["A", "C"]

    def test_remove_accepts_string_id(self):
        entry = _experience("A")
        items = SubRecordList([entry])

        assert items.remove(str(entry.id)) is True
        assert len(items) == 0

    def test_remove_unknown_id_leaves_list_untouched(self):
        items = SubRecordList([_experience("A"), _experience("B")])

        assert items.remove(uuid4()) is False
        assert items.remove("not-a-uuid") is False
        assert [e.title for e in items] == ["A", "B"]

    def test_get(self):
        entry = _experience("A")
        items = SubRecordList([entry])

        assert items.get(entry.id) is entry
        assert items.get(uuid4()) is None


class TestSocialLinks:
    def test_to_dict_skips_unset_networks(self):
        social = SocialLinks(twitter="https://twitter.com/x", instagram="https://instagram.com/x")

        assert social.to_dict() == {
            "twitter": "https://twitter.com/x",
            "instagram": "https://instagram.com/x",
        }

    def test_empty(self):
        assert SocialLinks().to_dict() == {}


class TestProfile:
    def test_defaults(self):
        user_id = uuid4()
        profile = Profile(user_id=user_id, handle="dev", status="Developer", skills=["go"])

        assert profile.user_id == user_id
        assert len(profile.experience) == 0
        assert len(profile.education) == 0
        assert profile.social.to_dict() == {}
        assert profile.company is None
        assert profile.created_at is not None

    def test_plain_lists_become_sub_record_lists(self):
        school = Education(
            school="MIT", degree="BSc", field_of_study="CS", from_date=date(2010, 9, 1)
        )
        profile = Profile(
            user_id=uuid4(),
            handle="dev",
            status="Developer",
            experience=[_experience("A")],  # type: ignore[arg-type]
            education=[school],  # type: ignore[arg-type]
        )

        assert isinstance(profile.experience, SubRecordList)
        assert isinstance(profile.education, SubRecordList)
        assert profile.education.get(school.id) is school

    def test_sub_records_get_distinct_ids(self):
        assert _experience("A").id != _experience("A").id
