"""Tests for context preprocessing (tags, contractions, compounds, stoplist)."""

import re

import pytest

from senserelate.wsd.base import Token
from senserelate.wsd.preprocess import (
    compile_stoplist,
    compoundify,
    convert_contraction,
    convert_tag,
    is_stop,
    parse_untagged,
    preprocess,
    split_tag,
)


class TestSplitTag:
    """Test split_tag function."""

    def test_tagged_word(self):
        """Should split word and tag."""
        assert split_tag("cats/NNS") == ("cats", "NNS")

    def test_untagged_word(self):
        """Should return None tag for a word without slash."""
        assert split_tag("cats") == ("cats", None)

    def test_last_slash_separates(self):
        """Should split on the last slash."""
        assert split_tag("and/or/CC") == ("and/or", "CC")

    def test_leading_slash(self):
        """Should return an empty word for '/TAG'."""
        assert split_tag("/NN") == ("", "NN")


class TestConvertTag:
    """Test convert_tag function."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("cats/NNS", Token("cats", "n")),
            ("running/VBG", Token("running", "v")),
            ("wise/JJ", Token("wise", "a")),
            ("quickly/RB", Token("quickly", "r")),
        ],
    )
    def test_open_class_tags(self, raw, expected):
        """Should map open-class tags to WordNet POS."""
        assert convert_tag(raw) == expected

    @pytest.mark.parametrize("raw", ["the/DT", "my/PRP$", "of/IN", "./.", "foo/XYZ"])
    def test_no_pos_for_other_tags(self, raw):
        """Closed-class, punctuation and unknown tags leave no POS."""
        token = convert_tag(raw)
        assert token.pos is None
        assert token.text == raw.rsplit("/", 1)[0]

    def test_untagged_word_in_tagged_text(self):
        """Should keep a word without tag as is."""
        assert convert_tag("cats") == Token("cats")

    def test_leading_slash_gives_empty_token(self):
        """Should return an empty token for '/NN'."""
        assert convert_tag("/NN") == Token("")


class TestConvertContraction:
    """Test contraction expansion."""

    @pytest.mark.parametrize(
        "word,expected",
        [
            ("'re", "are"),
            ("'d", "had"),
            ("'ll", "will"),
            ("'ve", "have"),
            ("'m", "am"),
        ],
    )
    def test_verb_contractions(self, word, expected):
        """Should expand verb clitics to verbs."""
        assert convert_contraction(word, "VBP") == Token(expected, "v")

    def test_s_as_verb(self):
        """'s tagged as a verb is 'is'."""
        assert convert_contraction("'s", "VBZ") == Token("is", "v")

    def test_s_as_possessive(self):
        """'s tagged as possessive is dropped."""
        assert convert_contraction("'s", "POS") == Token("")

    def test_not(self):
        """'t expands to 'not' without POS."""
        assert convert_contraction("'t", "RB") == Token("not")

    def test_em(self):
        """'em is dropped."""
        assert convert_contraction("'em", "PRP") == Token("")

    def test_unknown_contraction_keeps_word(self):
        """Unknown clitics keep their word."""
        token = convert_contraction("'tis", "NN")
        assert token.text == "'tis"

    def test_via_convert_tag(self):
        """convert_tag should route clitics through the contraction table."""
        assert convert_tag("'re/VBP") == Token("are", "v")


class TestParseUntagged:
    """Test parse_untagged function."""

    def test_plain_word(self):
        """Should keep plain words without POS."""
        assert parse_untagged("cat") == Token("cat")

    def test_explicit_pos(self):
        """Should honour word#pos annotations."""
        assert parse_untagged("cat#n") == Token("cat", "n", surface="cat#n")

    def test_fallback_keeps_annotation(self):
        """The annotated word is what comes back when nothing is resolved."""
        assert parse_untagged("cat#n").fallback == "cat#n"
        assert parse_untagged("cat").fallback == "cat"

    def test_invalid_pos_kept(self):
        """Should not treat an unknown POS letter as an annotation."""
        assert parse_untagged("c#x") == Token("c#x")


class TestCompoundify:
    """Test compoundify function."""

    def test_two_word_compound(self):
        """Should join a known two-word compound."""
        result = compoundify(["I", "like", "ice", "cream"], {"ice_cream"})
        assert result == [("I", (0,)), ("like", (1,)), ("ice_cream", (2, 3))]

    def test_longest_match_first(self):
        """Should prefer the longest compound."""
        result = compoundify(["new", "york", "city", "hall"], {"new_york", "new_york_city"})
        assert result[0] == ("new_york_city", (0, 1, 2))
        assert result[1] == ("hall", (3,))

    def test_tagged_words_lowercased(self):
        """Should match compounds on lowercased, tag-stripped words."""
        result = compoundify(["Ice/NN", "Cream/NN", "melts/VBZ"], {"ice_cream"})
        assert result == [("ice_cream", (0, 1)), ("melts/VBZ", (2,))]

    def test_no_compounds(self):
        """Should keep every word when nothing matches."""
        words = ["the", "cat", "sat"]
        result = compoundify(words, {"ice_cream"})
        assert [w for w, _ in result] == words

    def test_last_word_not_duplicated(self):
        """The last word is appended only when no compound consumed it."""
        result = compoundify(["eat", "ice", "cream"], {"ice_cream"})
        assert result == [("eat", (0,)), ("ice_cream", (1, 2))]

    def test_last_word_equal_to_compound_tail(self):
        """A last word spelled like a compound's tail is still kept."""
        result = compoundify(["ice", "cream", "cream"], {"ice_cream"})
        assert result == [("ice_cream", (0, 1)), ("cream", (2,))]

    def test_single_word(self):
        """Should handle one-word sentences."""
        assert compoundify(["cat"], {"ice_cream"}) == [("cat", (0,))]


class TestStoplist:
    """Test stoplist compilation and matching."""

    def test_slashes_stripped(self):
        """Should accept /regex/ entries."""
        stoplist = compile_stoplist(["/^the$/"])
        assert is_stop("the", stoplist)
        assert not is_stop("theme", stoplist)

    def test_search_semantics(self):
        """Should match anywhere in the word."""
        stoplist = compile_stoplist(["ing"])
        assert is_stop("running", stoplist)

    def test_blank_entries_ignored(self):
        """Should skip blank entries."""
        assert compile_stoplist(["", "   "]) == []

    def test_invalid_regex(self):
        """Should raise re.error on an invalid pattern."""
        with pytest.raises(re.error):
            compile_stoplist(["/(unclosed/"])


class TestPreprocess:
    """Test the preprocess pipeline."""

    def test_untagged_identity(self):
        """Without compounds or stoplist untagged words pass as they are."""
        words = ["The", "cat", "sat"]
        tokens = preprocess(words, tagged=False)
        assert [t.text for t in tokens] == words
        assert all(t.pos is None and not t.stopped for t in tokens)
        assert [t.span for t in tokens] == [(0,), (1,), (2,)]

    def test_empty_compounds_and_stoplist_only_map_tags(self):
        """Empty compound list and stoplist leave only tag mapping."""
        words = ["my/PRP$", "cat/NN", "is/VBZ"]
        tokens = preprocess(words, tagged=True, compounds=set(), stoplist=[])
        assert [(t.text, t.pos) for t in tokens] == [("my", None), ("cat", "n"), ("is", "v")]
        assert not any(t.stopped for t in tokens)

    def test_stoplist_marks_tokens(self):
        """Stoplisted words keep their position but are marked stopped."""
        tokens = preprocess(
            ["the/DT", "cat/NN"], tagged=True, stoplist=compile_stoplist(["/^the$/"])
        )
        assert tokens[0].stopped
        assert tokens[0].text == "the"
        assert not tokens[1].stopped

    def test_stoplist_ignores_tag(self):
        """The stoplist sees the word without its tag."""
        tokens = preprocess(["cat/NN"], tagged=True, stoplist=compile_stoplist(["NN"]))
        assert not tokens[0].stopped

    def test_compound_span(self):
        """A compound token spans all of its input positions."""
        tokens = preprocess(["I", "like", "ice", "cream"], tagged=False, compounds={"ice_cream"})
        assert [t.text for t in tokens] == ["I", "like", "ice_cream"]
        assert tokens[-1].span == (2, 3)
        assert tokens[-1].pos is None

    def test_empty_context(self):
        """Should return no tokens for an empty sentence."""
        assert preprocess([], tagged=True, compounds={"ice_cream"}) == []
