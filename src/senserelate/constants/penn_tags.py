"""Penn Treebank tag constants and their mapping to WordNet parts of speech.

Tagged input arrives as ``word/TAG``. Open-class tags map to one of the four
WordNet parts of speech; everything else (closed-class words, foreign words,
punctuation) maps to a marker that leaves the word without a part of speech.

Reference: https://www.ling.upenn.edu/courses/Fall_2003/ling001/penn_treebank_pos.html
"""

# =============================================================================
# Coarse categories
# =============================================================================

NOUN = "n"
VERB = "v"
ADJ = "a"
ADV = "r"
CLOSED = "c"  # closed-class words (determiners, pronouns, prepositions, ...)
NOINFO = "f"  # tags that say nothing useful about the word (foreign words)
PUNCT = None  # punctuation and symbols

WORDNET_POS: frozenset[str] = frozenset({NOUN, VERB, ADJ, ADV})

# WordNet marks satellite adjectives with "s"; they are adjectives for our purposes
SATELLITE_ADJ = "s"

# =============================================================================
# Penn Treebank tagset
# =============================================================================

_PENN_TAG_ENTRIES: tuple[tuple[str, str | None], ...] = (
    # adjectives (cardinal numbers are adjectives in WordNet: "two", "hundred")
    ("JJ", ADJ),
    ("JJR", ADJ),
    ("JJS", ADJ),
    ("CD", ADJ),
    # adverbs and particles
    ("RB", ADV),
    ("RBR", ADV),
    ("RBS", ADV),
    ("RP", ADV),
    # nouns
    ("NN", NOUN),
    ("NNS", NOUN),
    ("NNP", NOUN),
    ("NNPS", NOUN),
    # verbs (modals included)
    ("VB", VERB),
    ("VBD", VERB),
    ("VBG", VERB),
    ("VBN", VERB),
    ("VBP", VERB),
    ("VBZ", VERB),
    ("MD", VERB),
    # closed class
    ("WRB", CLOSED),
    ("CC", CLOSED),
    ("IN", CLOSED),
    ("DT", CLOSED),
    ("PDT", CLOSED),
    ("PRP", CLOSED),
    ("PRP$", CLOSED),
    ("WDT", CLOSED),
    ("WP", CLOSED),
    ("WP$", CLOSED),
    ("EX", CLOSED),
    ("TO", CLOSED),
    ("UH", CLOSED),
    # no information
    ("FW", NOINFO),
    # punctuation and symbols
    ("POS", PUNCT),
    (".", PUNCT),
    (":", PUNCT),
    (",", PUNCT),
    ("_", PUNCT),
    ("$", PUNCT),
    ("(", PUNCT),
    (")", PUNCT),
    ('"', PUNCT),
    ("SYM", PUNCT),
    ("LS", PUNCT),
)


def _build_tag_map(entries: tuple[tuple[str, str | None], ...]) -> dict[str, str | None]:
    """Build the tag mapping, refusing duplicate tags."""
    tag_map: dict[str, str | None] = {}
    for tag, category in entries:
        if tag in tag_map:
            raise ValueError(f"Duplicate Penn tag in mapping: {tag!r}")
        tag_map[tag] = category
    return tag_map


PENN_TO_WORDNET: dict[str, str | None] = _build_tag_map(_PENN_TAG_ENTRIES)


def map_penn_tag(tag: str) -> str | None:
    """Map a Penn Treebank tag to a WordNet POS letter.

    Returns:
        'n', 'v', 'a' or 'r' for open-class tags, None for everything else
        (closed class, no-info, punctuation and unknown tags).

    Examples:
        >>> map_penn_tag("NNS")
        'n'
        >>> map_penn_tag("DT") is None
        True
    """
    category = PENN_TO_WORDNET.get(tag)
    return category if category in WORDNET_POS else None


# =============================================================================
# Contractions
# =============================================================================

# Clitic -> (expansion, pos). An empty expansion drops the word.
# "'s" is handled separately: it is "is" only when tagged as a verb.
CONTRACTIONS: dict[str, tuple[str, str | None]] = {
    "'re": ("are", VERB),
    "'d": ("had", VERB),  # could also be "would"
    "'ll": ("will", VERB),
    "'ve": ("have", VERB),
    "'m": ("am", VERB),
    "'t": ("not", None),
    "'em": ("", None),
}
