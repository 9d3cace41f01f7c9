"""Unit tests for the Profile aggregate and its sparse patches."""

from datetime import date, datetime, timedelta
from uuid import uuid4

from domain.entities.profile import Education, Experience, Profile, SocialLinks
from domain.entities.profile_patch import UNSET, ProfilePatch, is_present, parse_skills


class TestParseSkills:
    def test_splits_and_trims(self):
        assert parse_skills("a, b ,c") == ["a", "b", "c"]

    def test_drops_empty_items(self):
        assert parse_skills("python,, ,sql,") == ["python", "sql"]

    def test_keeps_order_duplicates_and_case(self):
        assert parse_skills("Go, go, Go") == ["Go", "go", "Go"]

    def test_accepts_list(self):
        assert parse_skills([" rust ", "", "zig"]) == ["rust", "zig"]


class TestIsPresent:
    def test_missing_and_empty(self):
        assert not is_present(None)
        assert not is_present("")
        assert not is_present([])
        assert not is_present("   ")
        assert not is_present("\t\n")

    def test_values(self):
        assert is_present("x")
        assert is_present(["x"])
        assert is_present(False)


class TestProfilePatch:
    def test_unset_is_falsy_singleton(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert type(UNSET)() is UNSET

    def test_keeps_only_supplied_fields(self):
        patch = ProfilePatch.from_fields(
            {"company": "Acme", "website": "", "bio": None, "youtube": "https://yt.test/dev"}
        )

        assert patch.present() == {"company": "Acme"}
        assert patch.social.present() == {"youtube": "https://yt.test/dev"}
        assert patch.website is UNSET

    def test_githubusername_field(self):
        patch = ProfilePatch.from_fields({"github_username": "octocat"})

        assert patch.present() == {"github_username": "octocat"}

    def test_skills_parsed(self):
        patch = ProfilePatch.from_fields({"skills": "a, b"})

        assert patch.skills == ["a", "b"]

    def test_skills_with_no_items_are_ignored(self):
        patch = ProfilePatch.from_fields({"skills": " , "})

        assert patch.skills is UNSET
        assert patch.is_empty

    def test_empty(self):
        assert ProfilePatch.from_fields({}).is_empty
        assert not ProfilePatch.from_fields({"linkedin": "https://li.test/dev"}).is_empty


class TestProfileApply:
    def test_sparse_apply(self):
        profile = Profile(
            user_id=uuid4(),
            status="Developer",
            company="Acme",
            skills=["python"],
            social=SocialLinks(twitter="https://twitter.com/dev"),
        )

        profile.apply(ProfilePatch.from_fields({"location": "Oslo", "facebook": "https://fb.test/dev"}))

        assert profile.location == "Oslo"
        assert profile.company == "Acme"
        assert profile.status == "Developer"
        assert profile.skills == ["python"]
        assert profile.social.twitter == "https://twitter.com/dev"
        assert profile.social.facebook == "https://fb.test/dev"

    def test_apply_touches_updated_at(self):
        profile = Profile(user_id=uuid4())
        profile.updated_at = datetime.utcnow() - timedelta(days=1)
        before = profile.updated_at

        profile.apply(ProfilePatch.from_fields({"bio": "Hi"}))

        assert profile.updated_at > before

    def test_updated_at_never_before_created_at(self):
        created = datetime(2024, 1, 2)
        profile = Profile(user_id=uuid4(), created_at=created, updated_at=datetime(2024, 1, 1))

        assert profile.updated_at == created


class TestEmbeddedEntries:
    def test_experience_newest_first_regardless_of_dates(self):
        profile = Profile(user_id=uuid4())
        recent = Experience(title="Recent", company="A", from_date=date(2023, 1, 1))
        old = Experience(title="Old", company="B", from_date=date(2010, 1, 1))

        profile.add_experience(recent)
        profile.add_experience(old)

        assert [e.title for e in profile.experience] == ["Old", "Recent"]

    def test_remove_experience(self):
        profile = Profile(user_id=uuid4())
        entry = Experience(title="Dev", company="A", from_date=date(2020, 1, 1))
        profile.add_experience(entry)

        assert profile.remove_experience(entry.id) is True
        assert profile.experience == []
        assert profile.remove_experience(entry.id) is False

    def test_entry_ids_are_unique(self):
        a = Education(school="U", degree="B", fieldofstudy="F", from_date=date(2020, 1, 1))
        b = Education(school="U", degree="B", fieldofstudy="F", from_date=date(2020, 1, 1))

        assert a.id != b.id

    def test_remove_education_unknown_id(self):
        profile = Profile(user_id=uuid4())
        entry = Education(school="U", degree="B", fieldofstudy="F", from_date=date(2020, 1, 1))
        profile.add_education(entry)

        assert profile.remove_education(uuid4()) is False
        assert profile.education == [entry]
