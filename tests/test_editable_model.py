"""Tests for profiles/editable.py: in-memory profile mutations."""

import pytest
from datetime import date
from config.constants import SkinType
from profiles.editable import EditableProfileModel
from profiles.models import ConcernPhoto, Profile


@pytest.fixture
def model():
    return EditableProfileModel(Profile(skin_issues=["acne", "redness"], allergies=["latex"]))


class TestAddListItem:
    def test_appends_trimmed(self, model):
        assert model.add_list_item("skin_issues", "  dryness ") is True
        assert model.profile.skin_issues == ["acne", "redness", "dryness"]

    @pytest.mark.parametrize("value", ["", " ", "\t\n"])
    def test_blank_is_noop(self, model, value):
        before = list(model.profile.skin_issues)
        revision = model.revision
        assert model.add_list_item("skin_issues", value) is False
        assert model.profile.skin_issues == before
        assert model.revision == revision

    def test_duplicates_allowed(self, model):
        model.add_list_item("allergies", "latex")
        assert model.profile.allergies == ["latex", "latex"]

    def test_unknown_field(self, model):
        with pytest.raises(ValueError):
            model.add_list_item("notes", "x")


class TestRemoveListItem:
    def test_removes_at_index(self, model):
        assert model.remove_list_item("skin_issues", 0) is True
        assert model.profile.skin_issues == ["redness"]

    @pytest.mark.parametrize("index", [2, 10, -1])
    def test_out_of_range_is_noop(self, model, index):
        assert model.remove_list_item("skin_issues", index) is False
        assert model.profile.skin_issues == ["acne", "redness"]

    def test_empty_list(self):
        m = EditableProfileModel()
        assert m.remove_list_item("medical_conditions", 0) is False

    def test_readd_goes_to_end(self, model):
        model.remove_list_item("skin_issues", 0)
        model.add_list_item("skin_issues", "acne")
        assert model.profile.skin_issues == ["redness", "acne"]


class TestSetScalar:
    def test_notes(self, model):
        model.set_scalar("notes", "New notes")
        assert model.profile.notes == "New notes"

    def test_date_from_string(self, model):
        model.set_scalar("date_of_birth", "2001-02-03")
        assert model.profile.date_of_birth == date(2001, 2, 3)

    def test_date_object(self, model):
        model.set_scalar("date_of_birth", date(1999, 1, 1))
        assert model.profile.date_of_birth == date(1999, 1, 1)

    def test_clear_date(self, model):
        model.set_scalar("date_of_birth", date(1999, 1, 1))
        model.set_scalar("date_of_birth", None)
        assert model.profile.date_of_birth is None

    def test_unparseable_date_keeps_stored_value(self, model):
        model.set_scalar("date_of_birth", date(1990, 4, 12))
        model.mark_clean()
        with pytest.raises(ValueError):
            model.set_scalar("date_of_birth", "12/04/1990")
        assert model.profile.date_of_birth == date(1990, 4, 12)
        assert model.is_dirty is False

    def test_blank_date_string_clears(self, model):
        model.set_scalar("date_of_birth", date(1999, 1, 1))
        model.set_scalar("date_of_birth", "  ")
        assert model.profile.date_of_birth is None

    def test_skin_type_from_string(self, model):
        model.set_scalar("skin_type", "sensitive")
        assert model.profile.skin_type == SkinType.SENSITIVE

    def test_skin_type_unset(self, model):
        model.set_scalar("skin_type", SkinType.DRY)
        model.set_scalar("skin_type", "")
        assert model.profile.skin_type is None

    def test_bad_skin_type(self, model):
        with pytest.raises(ValueError):
            model.set_scalar("skin_type", "scaly")

    def test_notes_must_be_string(self, model):
        with pytest.raises(TypeError):
            model.set_scalar("notes", 5)

    def test_unknown_field(self, model):
        with pytest.raises(ValueError):
            model.set_scalar("skin_issues", [])


class TestConcernPhoto:
    def test_sets_both(self, model):
        model.set_concern_photo("https://cdn/x.jpg", "x")
        assert model.profile.concern_photo == ConcernPhoto(url="https://cdn/x.jpg", asset_id="x")

    def test_replaces_both(self, model):
        model.set_concern_photo("u1", "a1")
        model.set_concern_photo("u2", "a2")
        assert model.profile.concern_photo.url == "u2"
        assert model.profile.concern_photo.asset_id == "a2"

    def test_photo_is_immutable(self, model):
        model.set_concern_photo("u1", "a1")
        with pytest.raises(AttributeError):
            model.profile.concern_photo.url = "u2"


class TestDirtiness:
    def test_clean_after_replace(self, model):
        model.replace(Profile(notes="loaded"))
        assert model.is_dirty is False

    def test_dirty_after_mutation(self, model):
        model.add_list_item("allergies", "nuts")
        assert model.is_dirty is True

    def test_reverting_is_clean(self, model):
        model.add_list_item("allergies", "nuts")
        model.remove_list_item("allergies", 1)
        assert model.is_dirty is False

    def test_mark_clean_with_saved_snapshot(self, model):
        saved = model.snapshot()
        model.add_list_item("allergies", "nuts")
        model.mark_clean(saved)
        assert model.is_dirty is True

    def test_replace_copies_profile(self, model):
        loaded = Profile(skin_issues=["acne"])
        model.replace(loaded)
        model.add_list_item("skin_issues", "redness")
        assert loaded.skin_issues == ["acne"]

    def test_snapshot_is_independent(self, model):
        snap = model.snapshot()
        model.add_list_item("skin_issues", "dryness")
        assert snap.skin_issues == ["acne", "redness"]

    def test_revision_increments(self, model):
        start = model.revision
        model.set_scalar("notes", "x")
        model.add_list_item("allergies", "nuts")
        model.set_concern_photo("u", "a")
        assert model.revision == start + 3
