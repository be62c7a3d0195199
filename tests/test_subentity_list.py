"""Tests for the sub-record list editor."""

import random

import pytest

from department_submissions.exceptions import PreconditionError
from department_submissions.forms import SubentityList
from schemas.subentities import Author, TeamMember


class TestSubentityListCreation:
    """Tests for a new list."""

    def test_starts_with_one_default_row(self):
        """A new list holds exactly one row of defaults."""
        members = SubentityList(TeamMember)

        assert len(members) == 1
        assert members[0].role == "Team Member"
        assert members[0].full_name == ""
        assert not members.can_remove

    def test_accepts_initial_rows(self):
        """Existing rows are kept in order."""
        rows = [Author(given_name="Ram"), Author(given_name="Sita")]
        authors = SubentityList(Author, rows)

        assert [a.given_name for a in authors] == ["Ram", "Sita"]


class TestAppend:
    """Tests for append."""

    def test_appends_default_row(self):
        """append() adds a default row at the end."""
        members = SubentityList(TeamMember)
        members.update(0, "full_name", "Sita")

        added = members.append()

        assert len(members) == 2
        assert members[1] is added
        assert added.full_name == ""
        assert members[0].full_name == "Sita"

    def test_appends_copy_of_template_with_new_key(self):
        """A template is copied, never shared, and gets its own key."""
        authors = SubentityList(Author)
        template = Author(given_name="Ram", country="Nepal")

        added = authors.append(template)

        assert added is not template
        assert added.key != template.key
        assert added.country == "Nepal"

    def test_no_upper_bound(self):
        """Any number of rows can be added."""
        authors = SubentityList(Author)
        for _ in range(50):
            authors.append()

        assert len(authors) == 51


class TestRemove:
    """Tests for remove."""

    def test_last_row_cannot_be_removed(self):
        """Removing the only row is refused and the list is unchanged."""
        members = SubentityList(TeamMember)
        only = members[0]

        with pytest.raises(PreconditionError):
            members.remove(0)

        assert len(members) == 1
        assert members[0] is only

    def test_remove_preserves_order(self):
        """The remaining rows keep their relative order."""
        authors = SubentityList(Author, [Author(given_name=n) for n in "ABCD"])

        authors.remove(1)

        assert [a.given_name for a in authors] == ["A", "C", "D"]

    def test_remove_by_key(self):
        """Rows can be removed by their stable key."""
        authors = SubentityList(Author, [Author(given_name=n) for n in "ABC"])
        key = authors[2].key

        authors.remove_key(key)

        assert [a.given_name for a in authors] == ["A", "B"]
        with pytest.raises(KeyError):
            authors.index_of(key)

    def test_keys_survive_removal(self):
        """Removing a row does not change other rows' identities."""
        authors = SubentityList(Author, [Author(given_name=n) for n in "ABC"])
        keys = [a.key for a in authors]

        authors.remove(0)

        assert [a.key for a in authors] == keys[1:]
        assert authors.index_of(keys[2]) == 1

    def test_out_of_range_raises_index_error(self):
        """Bad indexes are not silently ignored."""
        authors = SubentityList(Author)
        authors.append()

        with pytest.raises(IndexError):
            authors.remove(5)

    def test_length_never_drops_below_one(self):
        """Random append/remove sequences always leave at least one row."""
        rng = random.Random(42)
        members = SubentityList(TeamMember)

        for _ in range(500):
            if rng.random() < 0.4:
                members.append()
            else:
                index = rng.randrange(len(members))
                try:
                    members.remove(index)
                except PreconditionError:
                    assert len(members) == 1
            assert len(members) >= 1


class TestUpdate:
    """Tests for update."""

    def test_updates_in_place(self):
        """Only the addressed row changes and nothing is reordered."""
        authors = SubentityList(Author, [Author(given_name=n) for n in "AB"])
        first, second = authors[0], authors[1]

        authors.update(1, "family_name", "Shrestha")

        assert authors[0] is first
        assert authors[1] is second
        assert second.family_name == "Shrestha"
        assert first.family_name == ""

    @pytest.mark.parametrize("field", ["key", "roll_number", "nickname"])
    def test_rejects_unknown_or_key_fields(self, field):
        """Only the record's own data fields can be edited."""
        authors = SubentityList(Author)

        with pytest.raises(ValueError):
            authors.update(0, field, "x")

    def test_reset_returns_to_single_default_row(self):
        """reset() discards every row."""
        authors = SubentityList(Author, [Author(given_name=n) for n in "ABC"])

        authors.reset()

        assert len(authors) == 1
        assert authors[0].given_name == ""
