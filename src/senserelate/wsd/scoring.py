"""Sense scoring, part-of-speech coercion and winner selection.

For a target word, every sense is scored against the words of its context
window: for each context word the best relatedness over that word's senses
is taken, and the bests above the pairwise threshold are summed. The
winner is the sense with the highest sum that reaches the context
threshold.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from senserelate.constants import NOUN, SENSE_SEPARATOR, VERB
from senserelate.wsd.base import (
    LexicalDatabase,
    RelatednessMeasure,
    Sense,
    SenseLookup,
    Token,
)

logger = logging.getLogger(__name__)

# Coercion applies to noun and verb targets only
COERCIBLE_POS = frozenset({NOUN, VERB})


@dataclass
class ScoreTable:
    """Accumulated scores of the senses of one target word.

    Attributes:
        senses: Senses of the target, in enumeration order
        totals: Running sum per sense
        contributions: Number of context words that added to each sum
    """

    senses: tuple[Sense, ...]
    totals: list[float] = field(default_factory=list)
    contributions: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.totals:
            self.totals = [0.0] * len(self.senses)
        if not self.contributions:
            self.contributions = [0] * len(self.senses)

    def add(self, index: int, score: float) -> None:
        self.totals[index] += score
        self.contributions[index] += 1

    def eligible(self, index: int) -> bool:
        """A sense is eligible once at least one context word scored it."""
        return self.contributions[index] > 0


# =============================================================================
# POS COERCION
# =============================================================================


def needs_coercion(target_pos: str, senses: Sequence[Sense]) -> bool:
    """Check whether a context word must be coerced to the target's POS.

    Only noun and verb targets are coerced, and only when none of the
    context word's senses already has the target's part of speech.
    """
    if target_pos not in COERCIBLE_POS:
        return False
    return all(sense.pos != target_pos for sense in senses)


def coerce_pos(database: LexicalDatabase, word: str, target_pos: str) -> list[Sense]:
    """Find senses of a word in another part of speech.

    1. A base form of the bare word in ``target_pos`` wins outright; its
       senses are returned ("running" as a noun -> running#n).
    2. Otherwise senses derivationally related to any base form are
       collected and those in ``target_pos`` returned ("destroy" as a
       noun -> destruction#n#1, ...).

    Args:
        database: Lexical database
        word: Surface word of the context token (any "#pos" annotation is stripped)
        target_pos: Part of speech to coerce to

    Returns:
        Candidate senses, empty if the word cannot be coerced
    """
    bare = word.split(SENSE_SEPARATOR, 1)[0]
    forms = database.valid_forms(bare)
    if not forms:
        return []

    for form in forms:
        if form.pos == target_pos:
            return database.query_senses(form)

    candidates: list[Sense] = []
    for form in forms:
        candidates.extend(s for s in database.query_derivational(form) if s.pos == target_pos)
    return list(dict.fromkeys(candidates))


# =============================================================================
# SCORING
# =============================================================================


def score_target(
    target: int,
    window: tuple[int, int],
    lookups: Sequence[SenseLookup],
    tokens: Sequence[Token],
    measure: RelatednessMeasure,
    pair_threshold: float,
    *,
    database: LexicalDatabase | None = None,
    coerce: bool = False,
    traces: list[str] | None = None,
) -> ScoreTable:
    """Score every sense of a target word against its context window.

    Args:
        target: Index of the target token
        window: (lower, upper) inclusive bounds from build_window
        lookups: Sense lookups of the whole sentence
        tokens: Tokens of the whole sentence
        measure: Relatedness measure
        pair_threshold: A context word adds its best score only if the
                        score is strictly greater than this
        database: Lexical database, required when ``coerce`` is on
        coerce: Coerce context words to the part of speech of noun and
                verb target senses
        traces: If given, collects the measure's trace string of every call

    Returns:
        ScoreTable over the target's senses
    """
    target_lookup = lookups[target]
    if not target_lookup.has_senses:
        raise ValueError(f"Target {tokens[target]} has no senses to score")
    if coerce and database is None:
        raise ValueError("POS coercion needs a lexical database")

    table = ScoreTable(target_lookup.senses)
    lower, upper = window
    coerced: dict[tuple[int, str], list[Sense]] = {}

    for i, target_sense in enumerate(target_lookup.senses):
        for c in range(lower, upper + 1):
            if c == target or not lookups[c].has_senses:
                continue

            candidates: Sequence[Sense] = lookups[c].senses
            if coerce and needs_coercion(target_sense.pos, candidates):
                key = (c, target_sense.pos)
                if key not in coerced:
                    coerced[key] = coerce_pos(database, tokens[c].text, target_sense.pos)
                candidates = coerced[key]

            best = _best_relatedness(measure, target_sense, candidates, traces)
            if best is not None and best > pair_threshold:
                table.add(i, best)

    return table


def _best_relatedness(
    measure: RelatednessMeasure,
    target_sense: Sense,
    candidates: Sequence[Sense],
    traces: list[str] | None,
) -> float | None:
    best: float | None = None
    for candidate in candidates:
        score = measure.relatedness(target_sense, candidate)
        if traces is not None:
            traces.append(measure.trace_string())
        if score is None:
            logger.debug("Skipping pair: %s", measure.get_error())
            continue
        if best is None or score > best:
            best = score
    return best


# =============================================================================
# WINNER
# =============================================================================


def select_winner(
    table: ScoreTable,
    context_threshold: float,
    fallback: str,
) -> tuple[Sense | str, float | None]:
    """Pick the best scoring sense of a target word.

    A sense qualifies if a context word contributed to it and its total is
    at least ``context_threshold``. The highest total wins; on a tie the
    sense enumerated first wins.

    Returns:
        (winning sense, its total), or (fallback, None) if nothing qualifies
    """
    winner: Sense | None = None
    best: float | None = None
    for i, sense in enumerate(table.senses):
        if not table.eligible(i):
            continue
        total = table.totals[i]
        if total < context_threshold:
            continue
        if best is None or total > best:
            winner, best = sense, total

    if winner is None:
        return fallback, None
    return winner, best
