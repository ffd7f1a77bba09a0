"""Tests for the Penn Treebank tag mapping."""

import pytest

from senserelate.constants import (
    CONTRACTIONS,
    PENN_TO_WORDNET,
    VERB,
    WORDNET_POS,
    map_penn_tag,
)
from senserelate.constants.penn_tags import _PENN_TAG_ENTRIES, _build_tag_map


class TestTagTable:
    """Test that the tag table is consistent."""

    def test_every_tag_appears_once(self):
        """Every supported tag should appear exactly once in the table."""
        tags = [tag for tag, _ in _PENN_TAG_ENTRIES]
        assert len(tags) == len(set(tags))
        assert len(PENN_TO_WORDNET) == len(tags)

    def test_duplicates_rejected(self):
        """Building a map with a repeated tag should fail."""
        with pytest.raises(ValueError, match="Duplicate"):
            _build_tag_map((("NN", "n"), ("NN", "v")))

    def test_core_tagset_covered(self):
        """The open-class Penn tags should all be present."""
        for tag in ["NN", "NNS", "NNP", "NNPS", "VB", "VBD", "VBG", "VBN", "VBP", "VBZ",
                    "JJ", "JJR", "JJS", "RB", "RBR", "RBS"]:
            assert tag in PENN_TO_WORDNET


class TestMapPennTag:
    """Test map_penn_tag function."""

    @pytest.mark.parametrize(
        "tag,expected",
        [("NN", "n"), ("NNS", "n"), ("VBZ", "v"), ("MD", "v"), ("JJ", "a"), ("RB", "r")],
    )
    def test_open_class(self, tag, expected):
        """Open-class tags map to WordNet POS."""
        assert map_penn_tag(tag) == expected

    @pytest.mark.parametrize("tag", ["DT", "PRP$", "IN", "FW", ".", ",", "POS", "UNKNOWN"])
    def test_everything_else_is_none(self, tag):
        """Closed class, no-info, punctuation and unknown tags give None."""
        assert map_penn_tag(tag) is None

    def test_results_are_wordnet_pos(self):
        """Every non-None result should be a WordNet POS letter."""
        for tag in PENN_TO_WORDNET:
            result = map_penn_tag(tag)
            assert result is None or result in WORDNET_POS


class TestContractions:
    """Test the contraction table."""

    def test_verb_contractions(self):
        """Verb clitics expand to verbs."""
        for clitic in ["'re", "'d", "'ll", "'ve", "'m"]:
            expansion, pos = CONTRACTIONS[clitic]
            assert expansion
            assert pos == VERB

    def test_dropped_contractions(self):
        """'em expands to nothing."""
        assert CONTRACTIONS["'em"][0] == ""
