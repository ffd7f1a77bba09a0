"""Function words ignored when comparing WordNet glosses.

A gloss overlap made up only of these words ("of the", "in a") says nothing
about how related two senses are, so the lesk measure discards it.
"""

FUNCTION_WORDS: frozenset[str] = frozenset(
    {
        # articles and determiners
        "a", "an", "the", "this", "that", "these", "those", "some", "any",
        "each", "every", "no", "all", "both", "either", "neither", "another",
        "other", "such", "what", "which", "whose",
        # pronouns
        "i", "me", "my", "we", "us", "our", "you", "your", "he", "him", "his",
        "she", "her", "it", "its", "they", "them", "their", "one", "who",
        "whom", "oneself", "someone", "something",
        # prepositions (ADP)
        "about", "above", "across", "after", "against", "along", "among",
        "around", "as", "at", "before", "behind", "below", "beneath",
        "beside", "between", "beyond", "by", "down", "during", "except",
        "for", "from", "in", "inside", "into", "like", "near", "of", "off",
        "on", "onto", "out", "outside", "over", "past", "per", "since",
        "through", "throughout", "till", "to", "toward", "towards", "under",
        "underneath", "until", "unto", "up", "upon", "via", "with", "within",
        "without",
        # conjunctions (CCONJ/SCONJ)
        "and", "or", "but", "nor", "so", "yet", "if", "because", "although",
        "though", "unless", "whether", "while", "when", "where", "than",
        "how", "why",
        # auxiliaries and modals
        "be", "is", "am", "are", "was", "were", "been", "being", "have",
        "has", "had", "do", "does", "did", "can", "could", "may", "might",
        "must", "shall", "should", "will", "would",
        # particles
        "not", "also", "very", "more", "most", "only", "etc",
    }
)


def is_function_word(word: str) -> bool:
    """Check whether a gloss word is a function word."""
    return word.lower() in FUNCTION_WORDS
