"""The SenseRelate disambiguation engine.

Disambiguates every word of a sentence by maximizing semantic relatedness
to its neighbours (Pedersen, Banerjee & Patwardhan):

1. Preprocess the sentence (compounds, stoplist, tags)
2. Look up the senses of every token
3. For each target word, build a context window of sense-bearing words,
   score each sense of the target against the window and keep the best

One engine holds all of its configuration plus the trace buffer and the
optional output file; it is meant to be used from a single thread.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from senserelate.constants import (
    COMPOUND_JOINER,
    CONTEXT_SCORE_DEFAULT,
    ENCODING_UTF8,
    MEASURE_DEFAULT,
    OUTFILE_LINE_FORMAT,
    PAIR_SCORE_DEFAULT,
    SCHEME_NORMAL,
    SCHEME_SENSE1,
    SCHEMES,
    TRACE_LEVEL_DEFAULT,
    TRACE_MEASURE,
    WINDOW_DEFAULT,
)
from senserelate.wsd.base import (
    ConfigurationError,
    LexicalDatabase,
    RelatednessMeasure,
    Sense,
    Token,
    UnknownParameterError,
)
from senserelate.wsd.measures import get_measure
from senserelate.wsd.preprocess import compile_stoplist, preprocess
from senserelate.wsd.schemes import choose_first_sense, choose_random_sense
from senserelate.wsd.scoring import score_target, select_winner
from senserelate.wsd.senses import enumerate_senses
from senserelate.wsd.tracer import Tracer
from senserelate.wsd.window import build_window

logger = logging.getLogger(__name__)

# Keyword options accepted by SenseRelate.from_options
ENGINE_OPTIONS = frozenset(
    {
        "wordnet",
        "measure",
        "config",
        "compounds",
        "stoplist",
        "outfile",
        "pair_score",
        "context_score",
        "trace",
        "forcepos",
        "seed",
    }
)


class SenseRelate:
    """Word sense disambiguation by semantic relatedness.

    Attributes:
        database: Lexical database senses come from
        measure: Relatedness measure used by the normal scheme
        compounds: Known compound words, or None to skip compounding
        stoplist: Compiled stoplist patterns, or None to skip stoplisting
        pair_score: Default pairwise threshold
        context_score: Default context score threshold
        forcepos: Coerce context words to the target's part of speech
        outfile: File receiving one formatted line per input word

    Example:
        >>> from senserelate.wsd import SenseRelate, WordNetDatabase
        >>> wsd = SenseRelate(WordNetDatabase(), "lesk", trace=1)
        >>> results = wsd.disambiguate(["my/PRP$", "cat/NN", "is/VBZ", "wise/JJ"], tagged=True)
        >>> trace = wsd.drain_trace()
    """

    def __init__(
        self,
        wordnet: LexicalDatabase | None,
        measure: str | RelatednessMeasure | None = MEASURE_DEFAULT,
        *,
        config: Path | str | None = None,
        compounds: Iterable[str] | None = None,
        stoplist: Iterable[str | re.Pattern] | None = None,
        outfile: Path | str | None = None,
        pair_score: float = PAIR_SCORE_DEFAULT,
        context_score: float = CONTEXT_SCORE_DEFAULT,
        trace: int = TRACE_LEVEL_DEFAULT,
        forcepos: bool = False,
        seed: int | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            wordnet: Lexical database (e.g. WordNetDatabase)
            measure: Measure name from the registry ("lesk", "path", ...)
                     or a ready RelatednessMeasure instance
            config: Config file for a measure given by name
            compounds: Compound words ("ice_cream"); enables compounding
            stoplist: Regular expressions; matching words are not disambiguated
            outfile: Output file; truncated now, appended to on every call
            pair_score: Minimum pairwise score (exclusive)
            context_score: Minimum total score of a winning sense (inclusive)
            trace: Trace level bitmask (1, 2, 4, 8)
            forcepos: Do part-of-speech coercion
            seed: Seed for the random choices of the sense1 and random schemes

        Raises:
            ConfigurationError: If the database or measure is missing or invalid
        """
        if wordnet is None:
            raise ConfigurationError("No lexical database supplied")
        if not measure:
            raise ConfigurationError("No relatedness measure supplied")

        self.database = wordnet
        self.tracer = Tracer(trace)

        if isinstance(measure, RelatednessMeasure):
            self.measure = measure
        else:
            self.measure = get_measure(measure, wordnet, config)
        self.measure.trace = self.tracer.enabled(TRACE_MEASURE)

        self.compounds = _normalize_compounds(compounds) if compounds is not None else None
        try:
            self.stoplist = compile_stoplist(stoplist) if stoplist is not None else None
        except re.error as exc:
            raise ConfigurationError(f"Invalid stoplist pattern: {exc}") from exc

        self.pair_score = float(pair_score)
        self.context_score = float(context_score)
        self.forcepos = bool(forcepos)
        self.rng = random.Random(seed)

        self.outfile = Path(outfile) if outfile else None
        if self.outfile is not None and self.outfile.exists():
            self.outfile.unlink()

        logger.info(
            "SenseRelate ready (measure=%s, pair_score=%g, context_score=%g, trace=%d, forcepos=%s)",
            self.measure.name,
            self.pair_score,
            self.context_score,
            self.tracer.level,
            self.forcepos,
        )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> SenseRelate:
        """Build an engine from a mapping of option names to values.

        Raises:
            UnknownParameterError: If an option name is not recognized
        """
        unknown = sorted(set(options) - ENGINE_OPTIONS)
        if unknown:
            raise UnknownParameterError(f"Unknown parameter(s): {', '.join(unknown)}")
        options = dict(options)
        return cls(options.pop("wordnet", None), **options)

    @property
    def trace_level(self) -> int:
        return self.tracer.level

    # =========================================================================
    # DISAMBIGUATION
    # =========================================================================

    def disambiguate(
        self,
        context: Sequence[str],
        window: int = WINDOW_DEFAULT,
        tagged: bool = False,
        scheme: str = SCHEME_NORMAL,
        pair_score: float | None = None,
        context_score: float | None = None,
    ) -> list[str]:
        """Disambiguate every word of one sentence.

        A word that cannot be disambiguated (unknown to the database,
        stoplisted, or no sense reaching the context threshold) is returned
        as given, without its tag if the text is tagged.

        Args:
            context: Words of the sentence, "word/TAG" if tagged
            window: Number of sense-bearing words on each side of the target
            tagged: True if words carry Penn Treebank tags
            scheme: "normal", "sense1" or "random"
            pair_score: Override of the engine's pairwise threshold
            context_score: Override of the engine's context threshold

        Returns:
            One result per input word, in order: "word#pos#sense" or the
            surface word

        Raises:
            UnknownParameterError: If the scheme is not recognized
        """
        context = list(context)
        results = self.disambiguate_senses(
            context,
            window=window,
            tagged=tagged,
            scheme=scheme,
            pair_score=pair_score,
            context_score=context_score,
        )

        self.write_results(context, results)
        return [str(result) for result in results]

    def disambiguate_senses(
        self,
        context: Sequence[str],
        window: int = WINDOW_DEFAULT,
        tagged: bool = False,
        scheme: str = SCHEME_NORMAL,
        pair_score: float | None = None,
        context_score: float | None = None,
    ) -> list[Sense | str]:
        """Like disambiguate(), but returns Sense objects for resolved words.

        Does not write to the output file; see write_results().
        """
        if scheme not in SCHEMES:
            raise UnknownParameterError(
                f"Unknown scheme {scheme!r}; choose one of: {', '.join(SCHEMES)}"
            )

        context = list(context)
        tokens = preprocess(context, tagged, self.compounds, self.stoplist)
        logger.debug("Disambiguating %d tokens with scheme %s", len(tokens), scheme)

        if scheme == SCHEME_NORMAL:
            results = self._do_normal(
                tokens,
                window,
                self.pair_score if pair_score is None else pair_score,
                self.context_score if context_score is None else context_score,
            )
        elif scheme == SCHEME_SENSE1:
            results = [
                choose_first_sense(self.database, t, self.rng) or t.fallback for t in tokens
            ]
        else:
            results = [
                choose_random_sense(self.database, t, self.rng) or t.fallback for t in tokens
            ]

        return _align_to_input(tokens, results, len(context))

    def drain_trace(self) -> str:
        """Return the trace text accumulated since the last call and clear it."""
        return self.tracer.drain()

    # =========================================================================
    # NORMAL SCHEME
    # =========================================================================

    def _do_normal(
        self,
        tokens: list[Token],
        window: int,
        pair_score: float,
        context_score: float,
    ) -> list[Sense | str]:
        lookups = [enumerate_senses(self.database, token) for token in tokens]
        results: list[Sense | str] = []

        for target, token in enumerate(tokens):
            if not lookups[target].has_senses:
                results.append(token.fallback)
                continue

            lower, upper = build_window(target, window, lookups)
            self.tracer.window(tokens, lower, target, upper)

            traces: list[str] | None = [] if self.measure.trace else None
            table = score_target(
                target,
                (lower, upper),
                lookups,
                tokens,
                self.measure,
                pair_score,
                database=self.database,
                coerce=self.forcepos,
                traces=traces,
            )
            winner, best = select_winner(table, context_score, token.fallback)

            self.tracer.scores(token, table)
            self.tracer.winner(best)
            self.tracer.measure(traces or [])
            results.append(winner)

        return results

    # =========================================================================
    # OUTPUT FILE
    # =========================================================================

    def write_results(self, context: Sequence[str], results: Sequence[Sense | str]) -> None:
        """Append one sentence's results to the output file, if there is one."""
        if self.outfile is None:
            return
        with open(self.outfile, "a", encoding=ENCODING_UTF8) as f:
            for original, result in zip(context, results):
                f.write(format_outfile_line(original, result))


def format_outfile_line(original: str, result: Sense | str) -> str:
    """Format one output file line: original word, word, pos, sense number."""
    if isinstance(result, Sense):
        return OUTFILE_LINE_FORMAT.format(
            orig=original, word=result.word, pos=f"{result.pos:>3}", sense=f"{result.index:>3}"
        )
    return OUTFILE_LINE_FORMAT.format(orig=original, word=result, pos="", sense="")


def _normalize_compounds(compounds: Iterable[str]) -> frozenset[str]:
    return frozenset(
        COMPOUND_JOINER.join(entry.strip().lower().split())
        for entry in compounds
        if entry and entry.strip()
    )


def _align_to_input(
    tokens: Sequence[Token], results: Sequence[Sense | str], length: int
) -> list[Sense | str]:
    """Map per-token results back onto input positions.

    A compound covers several input words; each of them gets the
    compound's result, so the output always has one entry per input word.
    """
    aligned: list[Sense | str] = [""] * length
    for token, result in zip(tokens, results):
        for position in token.span:
            aligned[position] = result
    return aligned
