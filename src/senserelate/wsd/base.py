"""Base classes and types for Word Sense Disambiguation.

This module defines the data model shared by every stage of the engine
(tokens, word forms, senses, sense lookups) and the two abstract
collaborators the engine consumes:

- LexicalDatabase: morphology, sense enumeration, frequencies and
  derivational relations (WordNetDatabase is the shipped implementation)
- RelatednessMeasure: pairwise semantic relatedness of two senses
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from senserelate.constants import SENSE_SEPARATOR

# =============================================================================
# ERRORS
# =============================================================================


class ConfigurationError(ValueError):
    """Raised when the engine or a measure cannot be constructed."""


class UnknownParameterError(ValueError):
    """Raised when a caller passes an option name or scheme we do not know."""


# =============================================================================
# DATA MODEL
# =============================================================================


@dataclass(frozen=True)
class WordForm:
    """A base form of a word in one part of speech (e.g. ``cat#n``)."""

    word: str
    pos: str

    def __str__(self) -> str:
        return f"{self.word}{SENSE_SEPARATOR}{self.pos}"

    @classmethod
    def parse(cls, text: str) -> WordForm:
        """Parse a ``word#pos`` string."""
        word, sep, pos = text.partition(SENSE_SEPARATOR)
        if not sep or not word or not pos:
            raise ValueError(f"Not a word#pos form: {text!r}")
        return cls(word, pos)


@dataclass(frozen=True)
class Sense:
    """One dictionary meaning of a word form.

    Attributes:
        word: The base form the sense belongs to
        pos: WordNet part of speech ('n', 'v', 'a', 'r')
        index: 1-based sense number, ordered by frequency in the database
    """

    word: str
    pos: str
    index: int

    def __str__(self) -> str:
        return SENSE_SEPARATOR.join((self.word, self.pos, str(self.index)))

    @property
    def form(self) -> WordForm:
        return WordForm(self.word, self.pos)

    @classmethod
    def parse(cls, text: str) -> Sense:
        """Parse a ``word#pos#index`` string.

        Examples:
            >>> Sense.parse("cat#n#4")
            Sense(word='cat', pos='n', index=4)
        """
        parts = text.split(SENSE_SEPARATOR)
        if len(parts) != 3 or not parts[0] or not parts[1] or not parts[2].isdigit():
            raise ValueError(f"Not a word#pos#sense string: {text!r}")
        return cls(parts[0], parts[1], int(parts[2]))


@dataclass
class Token:
    """A normalized word of the sentence being disambiguated.

    Attributes:
        text: The word without any tag
        pos: WordNet part of speech from the tagger, if any
        stopped: True if the word matched the stoplist
        span: Input positions this token was built from (several for compounds)
        surface: The word as given, returned when it cannot be disambiguated;
                 empty means the same as text
    """

    text: str
    pos: str | None = None
    stopped: bool = False
    span: tuple[int, ...] = field(default_factory=tuple)
    surface: str = ""

    @property
    def fallback(self) -> str:
        return self.surface or self.text

    def __str__(self) -> str:
        if self.pos:
            return f"{self.text}{SENSE_SEPARATOR}{self.pos}"
        return self.text


class SenseStatus(Enum):
    """Outcome of looking a token up in the lexical database."""

    FOUND = "found"
    UNKNOWN = "unknown"  # no morphological form in the database
    EMPTY = "empty"  # forms exist but none of them has a sense
    STOPPED = "stopped"  # token matched the stoplist and was not looked up


@dataclass(frozen=True)
class SenseLookup:
    """Senses of one token, or the reason there are none."""

    status: SenseStatus
    senses: tuple[Sense, ...] = ()

    @property
    def has_senses(self) -> bool:
        return self.status is SenseStatus.FOUND

    @classmethod
    def found(cls, senses: list[Sense] | tuple[Sense, ...]) -> SenseLookup:
        if not senses:
            return cls(SenseStatus.EMPTY)
        return cls(SenseStatus.FOUND, tuple(senses))


UNKNOWN = SenseLookup(SenseStatus.UNKNOWN)
STOPPED = SenseLookup(SenseStatus.STOPPED)


# =============================================================================
# COLLABORATORS
# =============================================================================


class LexicalDatabase(ABC):
    """Abstract interface of the dictionary the engine queries.

    Usage:
        db = WordNetDatabase()
        for form in db.valid_forms("cats"):
            senses = db.query_senses(form)
    """

    @abstractmethod
    def valid_forms(self, word: str, pos: str | None = None) -> list[WordForm]:
        """Return the base forms of an inflected or derived word.

        Args:
            word: Surface word (e.g. "cats", "is", "ice_cream")
            pos: Optional part of speech restricting the result

        Returns:
            Forms in database order, empty list if the word is unknown
        """
        pass

    @abstractmethod
    def query_senses(self, form: WordForm) -> list[Sense]:
        """Return every sense of a form, most frequent first."""
        pass

    @abstractmethod
    def frequency(self, sense: Sense) -> int:
        """Return the corpus frequency of a sense (higher = more common)."""
        pass

    @abstractmethod
    def query_derivational(self, form: WordForm) -> list[Sense]:
        """Return senses derivationally related to any sense of the form."""
        pass


class RelatednessMeasure(ABC):
    """Abstract base class for semantic relatedness measures.

    A measure scores a pair of senses. A pair it cannot score (different
    parts of speech for a similarity measure, missing synsets, ...) yields
    None and leaves a message in ``error``; the engine skips such pairs.

    When ``trace`` is on, every call records a diagnostic line readable
    through ``trace_string()``.
    """

    def __init__(self) -> None:
        self.trace = False
        self.error: str | None = None
        self._trace_string = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this measure for logging/display."""
        pass

    @abstractmethod
    def relatedness(self, sense_a: Sense, sense_b: Sense) -> float | None:
        """Score two senses, or return None if the pair cannot be scored."""
        pass

    def trace_string(self) -> str:
        """Return the diagnostic text of the last call (empty unless tracing)."""
        return self._trace_string

    def get_error(self) -> str | None:
        """Return the last error message and clear it."""
        error, self.error = self.error, None
        return error
