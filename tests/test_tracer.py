"""Tests for the trace buffer."""

from senserelate.wsd.base import Sense, Token
from senserelate.wsd.scoring import ScoreTable
from senserelate.wsd.tracer import Tracer, format_score

TOKENS = [Token("my"), Token("cat", "n"), Token("be", "v")]
SENSES = (Sense("cat", "n", 1), Sense("cat", "n", 2))


def _table(totals, contributions=None):
    return ScoreTable(SENSES, list(totals), list(contributions or [1] * len(totals)))


class TestFormatScore:
    """Test format_score function."""

    def test_whole_numbers(self):
        """Whole numbers print without decimals."""
        assert format_score(3.0) == "3"

    def test_fractions(self):
        """Fractions keep their digits."""
        assert format_score(0.25) == "0.25"


class TestTracer:
    """Test Tracer class."""

    def test_disabled_records_nothing(self):
        """Level 0 records nothing."""
        tracer = Tracer(0)
        tracer.window(TOKENS, 0, 1, 2)
        tracer.scores(TOKENS[1], _table([1.0, 0.0]))
        tracer.winner(1.0)
        tracer.measure(["lesk(a, b) = 1"])
        assert tracer.drain() == ""

    def test_window_marks_target(self):
        """Bit 1 shows the window with the target marked."""
        tracer = Tracer(1)
        tracer.window(TOKENS, 0, 1, 2)
        assert tracer.drain() == "Context: my <target>cat#n</target> be#v\n"

    def test_window_subrange(self):
        """Only the words inside the window are shown."""
        tracer = Tracer(1)
        tracer.window(TOKENS, 1, 2, 2)
        assert tracer.drain() == "Context: cat#n <target>be#v</target>\n"

    def test_winner(self):
        """Bit 2 shows the winning score."""
        tracer = Tracer(2)
        tracer.winner(4.0)
        tracer.winner(None)
        assert tracer.drain() == "  Winning score: 4\n  Winning score: -1\n"

    def test_scores(self):
        """Bit 4 shows the score of every scored sense."""
        tracer = Tracer(4)
        tracer.scores(TOKENS[1], _table([2.5, 0.0]))
        assert tracer.drain() == "  Scores for cat#n\n    cat#n#1: 2.5\n    cat#n#2: 0\n"

    def test_scores_skip_unscored_senses(self):
        """Senses no context word contributed to are left out."""
        tracer = Tracer(4)
        tracer.scores(TOKENS[1], _table([0.0, 1.5], [0, 2]))
        assert tracer.drain() == "  Scores for cat#n\n    cat#n#2: 1.5\n"

    def test_scores_and_winner_both_kept(self):
        """With bits 2 and 4 both outputs are written."""
        tracer = Tracer(6)
        tracer.scores(TOKENS[1], _table([2.0, 1.0]))
        tracer.winner(2.0)
        lines = tracer.drain().splitlines()
        assert lines[0] == "  Scores for cat#n"
        assert lines[-1] == "  Winning score: 2"

    def test_measure_skips_empty(self):
        """Bit 8 records measure traces, skipping empty ones."""
        tracer = Tracer(8)
        tracer.measure(["fake(a, b) = 1", "", "fake(a, c) = 0"])
        assert tracer.drain() == "fake(a, b) = 1\nfake(a, c) = 0\n"

    def test_drain_clears(self):
        """Draining returns everything once."""
        tracer = Tracer(2)
        tracer.winner(1.0)
        assert tracer.drain()
        assert tracer.drain() == ""

    def test_enabled(self):
        """Levels are bitmasks."""
        tracer = Tracer(5)
        assert tracer.enabled(1)
        assert not tracer.enabled(2)
        assert tracer.enabled(4)
        assert not tracer.enabled(8)
