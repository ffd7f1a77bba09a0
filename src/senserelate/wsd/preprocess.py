"""Context preprocessing: compounding, stoplisting and tag mapping.

Turns the raw words of one sentence into Token objects:
1. Compounding joins runs of words found in the compound list
   ("ice cream" -> "ice_cream")
2. Stoplisting marks words matching any stoplist pattern
3. Tag mapping converts "word/TAG" into a word plus WordNet POS
   and expands contractions ("'re/VBP" -> "are" as a verb)
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Sequence

from senserelate.constants import (
    COMPOUND_JOINER,
    CONTRACTIONS,
    SENSE_SEPARATOR,
    TAG_SEPARATOR,
    VERB,
    WORDNET_POS,
    map_penn_tag,
)
from senserelate.wsd.base import Token

# =============================================================================
# TAG MAPPING
# =============================================================================


def split_tag(raw: str) -> tuple[str, str | None]:
    """Split ``word/TAG`` into its word and tag.

    The last slash separates the tag, so "and/or/CC" is the word "and/or".

    Examples:
        >>> split_tag("cats/NNS")
        ('cats', 'NNS')
        >>> split_tag("cats")
        ('cats', None)
    """
    word, sep, tag = raw.rpartition(TAG_SEPARATOR)
    if not sep:
        return raw, None
    return word, tag


def convert_contraction(word: str, tag: str) -> Token:
    """Expand a clitic such as "'re" or "'ll" into a full word.

    "'s" is "is" only when tagged as a verb; as a possessive it is dropped
    (an empty token). Unknown clitics keep their word.
    """
    if word == "'s":
        return Token("is", VERB) if tag.startswith("V") else Token("")
    if word in CONTRACTIONS:
        expansion, pos = CONTRACTIONS[word]
        return Token(expansion, pos if expansion else None)
    return Token(word, map_penn_tag(tag))


def convert_tag(raw: str) -> Token:
    """Convert one tagged word into a Token.

    - "cats/NNS" -> cats with POS 'n'
    - "the/DT" -> the, no POS (closed class, punctuation, unknown tags)
    - "cats" -> cats, no POS (untagged word in tagged text)
    - "/NN" -> empty token
    """
    word, tag = split_tag(raw)
    if tag is None:
        return Token(raw)
    if not word:
        return Token("")
    if word.startswith("'"):
        return convert_contraction(word, tag)
    return Token(word, map_penn_tag(tag))


def parse_untagged(raw: str) -> Token:
    """Read a word of untagged text, honouring an explicit ``word#pos``.

    The hinted word keeps its hint as surface form, so it comes back as
    given ("cat#n") when it cannot be disambiguated.
    """
    word, sep, pos = raw.rpartition(SENSE_SEPARATOR)
    if sep and word and pos in WORDNET_POS:
        return Token(word, pos, surface=raw)
    return Token(raw)


# =============================================================================
# COMPOUNDING
# =============================================================================


def compoundify(raw_words: Sequence[str], compounds: Collection[str]) -> list[tuple[str, tuple[int, ...]]]:
    """Join runs of words that form a known compound.

    Scans greedily from each position, trying the longest run first down to
    two words. A matched run becomes one lowercase, underscore-joined word
    without a tag; otherwise the word is kept as it was.

    Args:
        raw_words: Words of the sentence, possibly tagged ("ice/NN")
        compounds: Known compounds, lowercase and underscore-joined

    Returns:
        (word, input positions) pairs in sentence order

    Examples:
        >>> compoundify(["I", "like", "ice", "cream"], {"ice_cream"})
        [('I', (0,)), ('like', (1,)), ('ice_cream', (2, 3))]
    """
    words = [split_tag(raw)[0].lower() for raw in raw_words]
    last = len(words) - 1
    result: list[tuple[str, tuple[int, ...]]] = []

    i = 0
    while i < last:
        for j in range(last, i, -1):
            candidate = COMPOUND_JOINER.join(words[i : j + 1])
            if candidate in compounds:
                result.append((candidate, tuple(range(i, j + 1))))
                i = j + 1
                break
        else:
            result.append((raw_words[i], (i,)))
            i += 1

    # The last word is left over unless a compound swallowed it
    if i == last:
        result.append((raw_words[last], (last,)))

    return result


# =============================================================================
# STOPLIST
# =============================================================================


def compile_stoplist(patterns: Iterable[str | re.Pattern]) -> list[re.Pattern]:
    """Compile stoplist entries.

    Entries may be plain regular expressions or written between slashes
    ("/^the$/"). Raises re.error on an invalid expression.
    """
    compiled = []
    for pattern in patterns:
        if isinstance(pattern, re.Pattern):
            compiled.append(pattern)
            continue
        text = pattern.strip()
        if len(text) >= 2 and text.startswith("/") and text.endswith("/"):
            text = text[1:-1]
        if text:
            compiled.append(re.compile(text))
    return compiled


def is_stop(word: str, stoplist: Iterable[re.Pattern]) -> bool:
    """Check whether a word matches any stoplist pattern (search, not match)."""
    return any(pattern.search(word) for pattern in stoplist)


# =============================================================================
# PIPELINE
# =============================================================================


def preprocess(
    context: Sequence[str],
    tagged: bool,
    compounds: Collection[str] | None = None,
    stoplist: Sequence[re.Pattern] | None = None,
) -> list[Token]:
    """Normalize the words of one sentence.

    Args:
        context: Raw words of the sentence
        tagged: True if words carry Penn Treebank tags ("cat/NN")
        compounds: Known compounds; compounding is skipped when None or empty
        stoplist: Compiled stoplist; stoplisting is skipped when None or empty

    Returns:
        One Token per (possibly compounded) word, in sentence order; every
        Token records the input positions it covers in ``span``
    """
    if compounds and context:
        items = compoundify(context, compounds)
    else:
        items = [(raw, (i,)) for i, raw in enumerate(context)]

    tokens = []
    for raw, span in items:
        token = convert_tag(raw) if tagged else parse_untagged(raw)
        token.span = span
        if stoplist and is_stop(split_tag(raw)[0] if tagged else token.text, stoplist):
            token.stopped = True
        tokens.append(token)
    return tokens
