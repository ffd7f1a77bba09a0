"""WordNet implementation of the lexical database interface.

Backed by ``nltk.corpus.wordnet``:
1. valid_forms: WordNet morphology (exception lists + detachment rules)
2. query_senses: the synsets of a base form in sense-number order
3. frequency: SemCor tag counts of the lemma in a synset
4. query_derivational: derivationally related lemmas ("deri" pointers)
"""

from __future__ import annotations

import logging

from nltk.corpus import wordnet as wn
from nltk.corpus.reader.wordnet import Synset

from senserelate.constants import ADJ, ADV, NOUN, VERB
from senserelate.wsd.base import ConfigurationError, LexicalDatabase, Sense, WordForm
from senserelate.wsd.wordnet_utils import (
    base_forms,
    normalize_lemma,
    normalize_wordnet_pos,
    synsets_for_form,
)

logger = logging.getLogger(__name__)

# Order in which parts of speech are searched when a word has no tag
POS_SEARCH_ORDER: tuple[str, ...] = (NOUN, VERB, ADJ, ADV)


class WordNetDatabase(LexicalDatabase):
    """Lexical database backed by NLTK's WordNet reader.

    Example:
        >>> db = WordNetDatabase()
        >>> [str(f) for f in db.valid_forms("cats", "n")]
        ['cat#n']
        >>> str(db.query_senses(WordForm("cat", "n"))[0])
        'cat#n#1'
    """

    def __init__(self) -> None:
        try:
            version = wn.get_version()
        except LookupError as exc:
            raise ConfigurationError(
                "WordNet corpus is not installed; run nltk.download('wordnet')"
            ) from exc
        logger.info("Loaded WordNet %s", version)

    @property
    def version(self) -> str:
        return wn.get_version()

    def valid_forms(self, word: str, pos: str | None = None) -> list[WordForm]:
        if not word or not word.strip():
            return []

        search = (pos,) if pos else POS_SEARCH_ORDER
        forms: list[WordForm] = []
        for p in search:
            forms.extend(WordForm(base, p) for base in base_forms(word, p))
        return forms

    def query_senses(self, form: WordForm) -> list[Sense]:
        synsets = synsets_for_form(normalize_lemma(form.word), form.pos)
        return [Sense(form.word, form.pos, i) for i in range(1, len(synsets) + 1)]

    def frequency(self, sense: Sense) -> int:
        synset = self.synset(sense)
        if synset is None:
            return 0
        word = normalize_lemma(sense.word)
        return sum(lemma.count() for lemma in synset.lemmas() if lemma.name().lower() == word)

    def query_derivational(self, form: WordForm) -> list[Sense]:
        word = normalize_lemma(form.word)
        related: dict[Sense, None] = {}

        for synset in synsets_for_form(word, form.pos):
            for lemma in synset.lemmas():
                if lemma.name().lower() != word:
                    continue
                for derived in lemma.derivationally_related_forms():
                    sense = self._lemma_to_sense(derived)
                    if sense is not None:
                        related[sense] = None

        return list(related)

    def synset(self, sense: Sense) -> Synset | None:
        """Get the WordNet synset of a sense, None if it does not exist."""
        synsets = synsets_for_form(normalize_lemma(sense.word), sense.pos)
        if 1 <= sense.index <= len(synsets):
            return synsets[sense.index - 1]
        return None

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _lemma_to_sense(self, lemma) -> Sense | None:
        word = lemma.name().lower()
        pos = normalize_wordnet_pos(lemma.synset().pos())
        synsets = synsets_for_form(word, pos)
        try:
            index = synsets.index(lemma.synset()) + 1
        except ValueError:
            return None
        return Sense(word, pos, index)
