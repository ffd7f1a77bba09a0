"""Semantic relatedness measures over WordNet.

Every measure scores a pair of senses through the synsets the WordNet
database resolves them to:

- lesk: extended gloss overlap (works across parts of speech)
- path, wup, lch: taxonomy path based similarity (same part of speech only)
- res, lin, jcn: information content based similarity (nouns and verbs)
- random: uniform random scores, a baseline

Measures are looked up by name in a fixed registry (``MEASURES``);
``get_measure`` builds one from a name and an optional config file.
"""

from __future__ import annotations

import logging
import random
from abc import abstractmethod
from functools import lru_cache
from pathlib import Path

from nltk.corpus import wordnet_ic
from nltk.corpus.reader.wordnet import Synset, WordNetError

from senserelate.constants import ENCODING_UTF8, is_function_word
from senserelate.wsd.base import ConfigurationError, LexicalDatabase, RelatednessMeasure, Sense
from senserelate.wsd.wordnet_utils import LESK_RELATION_PAIRS, gloss_words, related_synsets

logger = logging.getLogger(__name__)

CONFIG_SEPARATOR = "::"
DEFAULT_INFOCONTENT = "ic-semcor.dat"

# =============================================================================
# CONFIG FILES
# =============================================================================


def load_measure_config(path: Path | str) -> dict[str, str]:
    """Read a measure config file.

    The first non-blank line may name the measure; every other line is an
    ``option::value`` pair. Lines starting with ``#`` are comments.

    Args:
        path: Path to the config file

    Returns:
        Mapping of option name to (string) value

    Raises:
        ConfigurationError: If the file cannot be read or a line is malformed
    """
    path = Path(path)
    try:
        lines = path.read_text(encoding=ENCODING_UTF8).splitlines()
    except OSError as exc:
        raise ConfigurationError(f"Cannot read measure config {path}: {exc}") from exc

    options: dict[str, str] = {}
    seen_header = False
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        # A qualified measure name ("WordNet::Similarity::lesk") is a header too
        is_pair = line.count(CONFIG_SEPARATOR) == 1 and not line.endswith(CONFIG_SEPARATOR)
        if not is_pair:
            if not seen_header and not options:
                seen_header = True
                continue
            raise ConfigurationError(f"{path}:{lineno}: expected option::value, got {line!r}")
        key, _, value = line.partition(CONFIG_SEPARATOR)
        options[key.strip()] = value.strip()
    return options


def _as_bool(value: str) -> bool:
    return value.strip().lower() not in {"", "0", "false", "no", "off"}


# =============================================================================
# BASE
# =============================================================================


class WordNetMeasure(RelatednessMeasure):
    """Base class for measures that score WordNet synsets.

    Subclasses implement ``_score`` on two synsets and may raise
    WordNetError or return None when a pair cannot be scored.
    """

    # Options a config file may set for this measure
    OPTIONS: frozenset[str] = frozenset()

    def __init__(self, database: LexicalDatabase, config: Path | str | None = None) -> None:
        super().__init__()
        if not hasattr(database, "synset"):
            raise ConfigurationError(
                f"{type(self).__name__} needs a database that resolves senses to WordNet synsets"
            )
        self.database = database
        self.config = Path(config) if config is not None else None
        self.options = load_measure_config(config) if config is not None else {}

        unknown = set(self.options) - self.OPTIONS
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s) for measure {self.name}: {', '.join(sorted(unknown))}"
            )

    def relatedness(self, sense_a: Sense, sense_b: Sense) -> float | None:
        self._trace_string = ""
        synset_a = self.database.synset(sense_a)
        synset_b = self.database.synset(sense_b)

        missing = [str(s) for s, syn in ((sense_a, synset_a), (sense_b, synset_b)) if syn is None]
        if missing:
            return self._fail(sense_a, sense_b, f"not in WordNet: {', '.join(missing)}")

        try:
            score = self._score(synset_a, synset_b)
        except WordNetError as exc:
            return self._fail(sense_a, sense_b, str(exc))

        if score is None:
            return self._fail(sense_a, sense_b, "no relation found")

        if self.trace:
            self._trace_string = f"{self.name}({sense_a}, {sense_b}) = {score:g}"
        return float(score)

    def _fail(self, sense_a: Sense, sense_b: Sense, reason: str) -> None:
        self.error = f"{self.name}: cannot score {sense_a} and {sense_b} ({reason})"
        if self.trace:
            self._trace_string = f"{self.name}({sense_a}, {sense_b}) failed: {reason}"
        return None

    @abstractmethod
    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        """Score two synsets; None if they are not related."""


# =============================================================================
# PATH BASED
# =============================================================================


class _PathBasedMeasure(WordNetMeasure):
    OPTIONS = frozenset({"simulate_root"})

    def __init__(self, database: LexicalDatabase, config: Path | str | None = None) -> None:
        super().__init__(database, config)
        self.simulate_root = _as_bool(self.options.get("simulate_root", "1"))


class PathMeasure(_PathBasedMeasure):
    """Inverse of the shortest is-a path length between two synsets."""

    @property
    def name(self) -> str:
        return "path"

    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        return synset_a.path_similarity(synset_b, simulate_root=self.simulate_root)


class WupMeasure(_PathBasedMeasure):
    """Wu & Palmer: depth of the least common subsumer relative to both synsets."""

    @property
    def name(self) -> str:
        return "wup"

    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        return synset_a.wup_similarity(synset_b, simulate_root=self.simulate_root)


class LchMeasure(_PathBasedMeasure):
    """Leacock & Chodorow: -log(path length / 2 * taxonomy depth)."""

    @property
    def name(self) -> str:
        return "lch"

    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        return synset_a.lch_similarity(synset_b, simulate_root=self.simulate_root)


# =============================================================================
# INFORMATION CONTENT
# =============================================================================


class _InfoContentMeasure(WordNetMeasure):
    OPTIONS = frozenset({"infocontent"})

    def __init__(self, database: LexicalDatabase, config: Path | str | None = None) -> None:
        super().__init__(database, config)
        ic_file = self.options.get("infocontent", DEFAULT_INFOCONTENT)
        try:
            self.ic = wordnet_ic.ic(ic_file)
        except (LookupError, OSError) as exc:
            raise ConfigurationError(
                f"Cannot load information content {ic_file!r}; "
                "run nltk.download('wordnet_ic')"
            ) from exc
        logger.info("Measure %s uses information content %s", self.name, ic_file)


class ResMeasure(_InfoContentMeasure):
    """Resnik: information content of the least common subsumer."""

    @property
    def name(self) -> str:
        return "res"

    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        return synset_a.res_similarity(synset_b, self.ic)


class LinMeasure(_InfoContentMeasure):
    """Lin: shared information content scaled by the synsets' own content."""

    @property
    def name(self) -> str:
        return "lin"

    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        return synset_a.lin_similarity(synset_b, self.ic)


class JcnMeasure(_InfoContentMeasure):
    """Jiang & Conrath: inverse of the information content distance."""

    @property
    def name(self) -> str:
        return "jcn"

    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        return synset_a.jcn_similarity(synset_b, self.ic)


# =============================================================================
# GLOSS OVERLAP
# =============================================================================


def _longest_common_run(a: list, b: list) -> tuple[int, int, int]:
    """Find the longest common contiguous run of two word lists.

    None entries never match (they mark used words and gloss boundaries).

    Returns:
        (length, start in a, start in b); length 0 if nothing is shared
    """
    best = (0, 0, 0)
    previous = [0] * (len(b) + 1)
    for i in range(1, len(a) + 1):
        current = [0] * (len(b) + 1)
        word = a[i - 1]
        if word is not None:
            for j in range(1, len(b) + 1):
                if b[j - 1] == word:
                    current[j] = previous[j - 1] + 1
                    if current[j] > best[0]:
                        best = (current[j], i - current[j], j - current[j])
        previous = current
    return best


def phrasal_overlap(words_a: list, words_b: list) -> tuple[int, list[str]]:
    """Score the overlap of two glosses.

    Each maximal shared phrase of n words scores n**2, so "domestic cat"
    counts for 4 where "domestic" and "cat" separately count for 2. Phrases
    made only of function words score nothing.

    Returns:
        (score, matched phrases in the order they were found)
    """
    a = list(words_a)
    b = list(words_b)
    score = 0
    phrases: list[str] = []
    while True:
        length, start_a, start_b = _longest_common_run(a, b)
        if length == 0:
            break
        phrase = a[start_a : start_a + length]
        for k in range(length):
            a[start_a + k] = None
            b[start_b + k] = None
        if all(is_function_word(word) for word in phrase):
            continue
        score += length * length
        phrases.append(" ".join(phrase))
    return score, phrases


@lru_cache(maxsize=16384)
def _relation_gloss(synset: Synset, relation: str, with_examples: bool) -> tuple:
    words: list = []
    for related in related_synsets(synset, relation):
        if words:
            words.append(None)
        words.extend(gloss_words(related, with_examples=with_examples))
    return tuple(words)


class LeskMeasure(WordNetMeasure):
    """Extended gloss overlap (Banerjee & Pedersen).

    Sums the phrasal overlaps of the glosses of both synsets and of the
    synsets related to them (hypernyms, hyponyms, meronyms, ...). Unlike
    the taxonomy measures it can relate a noun to a verb or an adjective.
    """

    OPTIONS = frozenset({"examples"})

    def __init__(self, database: LexicalDatabase, config: Path | str | None = None) -> None:
        super().__init__(database, config)
        self.with_examples = _as_bool(self.options.get("examples", "1"))
        self._details: list[str] = []

    @property
    def name(self) -> str:
        return "lesk"

    def _score(self, synset_a: Synset, synset_b: Synset) -> float | None:
        total = 0
        details: list[str] = []
        for rel_a, rel_b in LESK_RELATION_PAIRS:
            gloss_a = _relation_gloss(synset_a, rel_a, self.with_examples)
            gloss_b = _relation_gloss(synset_b, rel_b, self.with_examples)
            if not gloss_a or not gloss_b:
                continue
            score, phrases = phrasal_overlap(list(gloss_a), list(gloss_b))
            if score:
                total += score
                details.append(f"{rel_a}-{rel_b}: {' | '.join(phrases)} ({score})")
        self._details = details
        return total

    def relatedness(self, sense_a: Sense, sense_b: Sense) -> float | None:
        self._details = []
        score = super().relatedness(sense_a, sense_b)
        if self.trace and score is not None and self._details:
            self._trace_string += "\n" + "\n".join(f"  {line}" for line in self._details)
        return score


# =============================================================================
# BASELINE
# =============================================================================


class RandomMeasure(RelatednessMeasure):
    """Random relatedness in [0, 1); the baseline every measure should beat."""

    OPTIONS = frozenset({"seed"})

    def __init__(self, database: LexicalDatabase, config: Path | str | None = None) -> None:
        super().__init__()
        self.database = database
        options = load_measure_config(config) if config is not None else {}
        unknown = set(options) - self.OPTIONS
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s) for measure random: {', '.join(sorted(unknown))}"
            )
        seed = options.get("seed")
        try:
            self._rng = random.Random(int(seed) if seed is not None else None)
        except ValueError as exc:
            raise ConfigurationError(f"Invalid seed for measure random: {seed!r}") from exc

    @property
    def name(self) -> str:
        return "random"

    def relatedness(self, sense_a: Sense, sense_b: Sense) -> float | None:
        score = self._rng.random()
        self._trace_string = f"random({sense_a}, {sense_b}) = {score:g}" if self.trace else ""
        return score


# =============================================================================
# REGISTRY
# =============================================================================

MEASURES: dict[str, type[RelatednessMeasure]] = {
    "lesk": LeskMeasure,
    "path": PathMeasure,
    "wup": WupMeasure,
    "lch": LchMeasure,
    "res": ResMeasure,
    "lin": LinMeasure,
    "jcn": JcnMeasure,
    "random": RandomMeasure,
}


def get_measure(
    name: str,
    database: LexicalDatabase,
    config: Path | str | None = None,
) -> RelatednessMeasure:
    """Build a measure by name.

    Args:
        name: Registry name ("lesk", "path", ...). A qualified name such as
              "WordNet::Similarity::lesk" resolves to its last component.
        database: Lexical database the measure resolves senses with
        config: Optional measure config file

    Raises:
        ConfigurationError: If the name is unknown or the measure cannot be built
    """
    if not name:
        raise ConfigurationError("No relatedness measure supplied")

    key = name.rsplit(CONFIG_SEPARATOR, 1)[-1].strip().lower()
    try:
        measure_cls = MEASURES[key]
    except KeyError:
        raise ConfigurationError(
            f"Unknown relatedness measure {name!r}; choose one of: {', '.join(MEASURES)}"
        ) from None

    measure = measure_cls(database, config)
    logger.info("Using relatedness measure %s", measure.name)
    return measure
