"""Trace buffer for the disambiguation engine.

The trace level is a bitmask (see ``senserelate.constants``):

- 1: the context window of every target word
- 2: the winning score of every target word
- 4: the score of every scored sense of every target word
- 8: the relatedness measure's own diagnostics for every pair it scores

Levels add up: 3 shows windows and winning scores. When both 2 and 4 are
set, the full score table and the winning score line are both written.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from senserelate.constants import TRACE_MEASURE, TRACE_SCORES, TRACE_WINDOW, TRACE_WINNER
from senserelate.wsd.base import Token
from senserelate.wsd.scoring import ScoreTable


def format_score(score: float) -> str:
    """Render a score without a trailing ".0" on whole numbers."""
    return f"{score:g}"


class Tracer:
    """Append-only trace text, drained by the caller between sentences."""

    def __init__(self, level: int = 0) -> None:
        self.level = int(level or 0)
        self._lines: list[str] = []

    def enabled(self, bit: int) -> bool:
        return bool(self.level & bit)

    def window(self, tokens: Sequence[Token], lower: int, target: int, upper: int) -> None:
        if not self.enabled(TRACE_WINDOW):
            return
        words = [str(token) for token in tokens[lower : upper + 1]]
        words[target - lower] = f"<target>{words[target - lower]}</target>"
        self._lines.append("Context: " + " ".join(words))

    def scores(self, token: Token, table: ScoreTable) -> None:
        """Record the totals of the senses a context word contributed to."""
        if not self.enabled(TRACE_SCORES):
            return
        self._lines.append(f"  Scores for {token}")
        for i, (sense, total) in enumerate(zip(table.senses, table.totals)):
            if not table.eligible(i):
                continue
            self._lines.append(f"    {sense}: {format_score(total)}")

    def winner(self, best: float | None) -> None:
        if not self.enabled(TRACE_WINNER):
            return
        shown = format_score(best) if best is not None else "-1"
        self._lines.append(f"  Winning score: {shown}")

    def measure(self, traces: Iterable[str]) -> None:
        if not self.enabled(TRACE_MEASURE):
            return
        self._lines.extend(trace for trace in traces if trace)

    def drain(self) -> str:
        """Return everything traced since the last drain and clear the buffer.

        The returned text ends with a newline unless it is empty.
        """
        text = "".join(f"{line}\n" for line in self._lines)
        self._lines = []
        return text
