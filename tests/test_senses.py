"""Tests for sense enumeration."""

from fakes import FakeDatabase
from senserelate.wsd.base import Sense, SenseStatus, Token
from senserelate.wsd.senses import enumerate_senses


class TestEnumerateSenses:
    """Test enumerate_senses function."""

    def setup_method(self):
        self.db = FakeDatabase(
            {"cat": {"n": 2, "v": 1}, "be": {"v": 2}, "ghost": {"n": 0}},
            morphology={"is": ["be"]},
        )

    def test_all_forms_concatenated(self):
        """Senses of every form come in form order, then sense order."""
        lookup = enumerate_senses(self.db, Token("cat"))
        assert lookup.status is SenseStatus.FOUND
        assert lookup.senses == (
            Sense("cat", "n", 1),
            Sense("cat", "n", 2),
            Sense("cat", "v", 1),
        )

    def test_pos_restricts(self):
        """A token POS restricts the forms looked up."""
        lookup = enumerate_senses(self.db, Token("cat", "v"))
        assert lookup.senses == (Sense("cat", "v", 1),)

    def test_morphology(self):
        """Inflected words are looked up through their base forms."""
        lookup = enumerate_senses(self.db, Token("is", "v"))
        assert [str(s) for s in lookup.senses] == ["be#v#1", "be#v#2"]

    def test_unknown(self):
        """A word with no forms is UNKNOWN."""
        assert enumerate_senses(self.db, Token("zzyzx")).status is SenseStatus.UNKNOWN

    def test_empty(self):
        """Forms without senses give EMPTY, which has no senses."""
        lookup = enumerate_senses(self.db, Token("ghost"))
        assert lookup.status is SenseStatus.EMPTY
        assert not lookup.has_senses

    def test_stopped_not_looked_up(self):
        """Stopped tokens are never sent to the database."""
        lookup = enumerate_senses(self.db, Token("cat", stopped=True))
        assert lookup.status is SenseStatus.STOPPED
        assert self.db.valid_forms_calls == []

    def test_empty_token(self):
        """An empty token is UNKNOWN."""
        assert enumerate_senses(self.db, Token("")).status is SenseStatus.UNKNOWN
