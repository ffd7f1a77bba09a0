"""WordNet utilities for Word Sense Disambiguation.

This module provides functions for:
- Normalizing lemmas and WordNet POS tags
- Getting the synsets of a base form in sense-number order
- Building gloss signatures (definition + examples) for overlap measures
- Collecting synsets reachable through the relations the lesk measure uses
"""

from __future__ import annotations

import re
from functools import lru_cache

from nltk.corpus import wordnet as wn
from nltk.corpus.reader.wordnet import Synset

from senserelate.constants import ADJ, SATELLITE_ADJ, WORDNET_POS

# =============================================================================
# NORMALIZATION
# =============================================================================

_GLOSS_TOKEN_RE = re.compile(r"[a-z0-9]+(?:[-'][a-z0-9]+)*")


def normalize_lemma(lemma: str) -> str:
    """Lowercase a lemma and join multi-word expressions with underscores.

    Examples:
        >>> normalize_lemma("Ice Cream")
        'ice_cream'
    """
    return lemma.lower().strip().replace(" ", "_")


def normalize_wordnet_pos(pos: str) -> str:
    """Fold WordNet's satellite adjective tag into the adjective tag.

    Examples:
        >>> normalize_wordnet_pos("s")
        'a'
        >>> normalize_wordnet_pos("n")
        'n'
    """
    return ADJ if pos == SATELLITE_ADJ else pos


# =============================================================================
# SYNSET FUNCTIONS
# =============================================================================


@lru_cache(maxsize=65536)
def synsets_for_form(word: str, pos: str) -> tuple[Synset, ...]:
    """Get the synsets of a base form, ordered by sense number.

    ``wn.synsets`` runs morphology on its argument, so "ax" also returns
    the synsets of "axis". Only synsets that contain the form itself as a
    lemma are kept; their order is WordNet's sense order for that lemma.

    Args:
        word: Base form (lowercase, underscores for spaces)
        pos: WordNet POS ('n', 'v', 'a', 'r')

    Returns:
        Tuple of synsets, empty if the form is unknown
    """
    if not word or pos not in WORDNET_POS:
        return ()
    return tuple(
        synset
        for synset in wn.synsets(word, pos=pos)
        if any(lemma.name().lower() == word for lemma in synset.lemmas())
    )


def base_forms(word: str, pos: str) -> list[str]:
    """Get the base forms of an inflected word in one part of speech.

    Examples:
        >>> base_forms("cats", "n")
        ['cat']
        >>> base_forms("is", "v")
        ['be']
    """
    if not word or not word.strip():
        return []
    # _morphy returns every base form WordNet knows (exceptions included),
    # wn.morphy only the first one. _morphy(form, pos) is private API; it has
    # kept this signature across nltk 3.x and pyproject caps nltk below 4.
    return list(dict.fromkeys(wn._morphy(normalize_lemma(word), pos)))


def get_definition(synset: Synset) -> str:
    """Get definition for a synset.

    Falls back to lemma names if definition is empty.
    """
    definition = synset.definition()
    if definition and definition.strip():
        return definition.strip()

    lemma_names = synset.lemma_names()
    if lemma_names:
        return ", ".join(lemma_names)

    return synset.name()


def gloss_words(synset: Synset, with_examples: bool = True) -> list[str]:
    """Tokenize the gloss of a synset into lowercase words.

    Args:
        synset: WordNet Synset object
        with_examples: Append the usage examples to the definition

    Returns:
        Gloss words in order (order matters for phrasal overlaps)
    """
    text = get_definition(synset)
    if with_examples:
        text = " ".join([text, *synset.examples()])
    return _GLOSS_TOKEN_RE.findall(text.lower())


# =============================================================================
# RELATIONS
# =============================================================================

# Relation pairs whose glosses the extended lesk measure compares.
# ("hype", "glos") compares the hypernyms of the first sense with the gloss
# of the second one.
LESK_RELATION_PAIRS: tuple[tuple[str, str], ...] = (
    ("glos", "glos"),
    ("hype", "hype"),
    ("hypo", "hypo"),
    ("glos", "hype"),
    ("hype", "glos"),
    ("glos", "hypo"),
    ("hypo", "glos"),
    ("mero", "mero"),
    ("holo", "holo"),
    ("glos", "mero"),
    ("mero", "glos"),
    ("glos", "holo"),
    ("holo", "glos"),
    ("also", "also"),
    ("glos", "also"),
    ("also", "glos"),
    ("attr", "attr"),
    ("sim", "sim"),
    ("glos", "sim"),
    ("sim", "glos"),
)


def related_synsets(synset: Synset, relation: str) -> list[Synset]:
    """Get the synsets linked to a synset by a lesk relation.

    "glos" is the synset itself; "hype"/"hypo" are hypernyms/hyponyms,
    "mero"/"holo" meronyms/holonyms (part, member and substance).
    """
    if relation == "glos":
        return [synset]
    if relation == "hype":
        return synset.hypernyms() + synset.instance_hypernyms()
    if relation == "hypo":
        return synset.hyponyms() + synset.instance_hyponyms()
    if relation == "mero":
        return synset.part_meronyms() + synset.member_meronyms() + synset.substance_meronyms()
    if relation == "holo":
        return synset.part_holonyms() + synset.member_holonyms() + synset.substance_holonyms()
    if relation == "also":
        return synset.also_sees()
    if relation == "attr":
        return synset.attributes()
    if relation == "sim":
        return synset.similar_tos()
    raise ValueError(f"Unknown relation: {relation}")
