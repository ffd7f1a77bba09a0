"""Project-wide constants."""

from senserelate.constants.defaults import (
    COMPOUND_JOINER,
    CONTEXT_SCORE_DEFAULT,
    ENCODING_UTF8,
    MEASURE_DEFAULT,
    OUTFILE_LINE_FORMAT,
    PAIR_SCORE_DEFAULT,
    SCHEME_DEFAULT,
    SCHEME_NORMAL,
    SCHEME_RANDOM,
    SCHEME_SENSE1,
    SCHEMES,
    SENSE_SEPARATOR,
    TAG_SEPARATOR,
    TAGGED_RATIO_THRESHOLD,
    TAGGED_SAMPLE_WORDS,
    TRACE_LEVEL_DEFAULT,
    TRACE_MEASURE,
    TRACE_SCORES,
    TRACE_WINDOW,
    TRACE_WINNER,
    WINDOW_DEFAULT,
)
from senserelate.constants.function_words import FUNCTION_WORDS, is_function_word
from senserelate.constants.penn_tags import (
    ADJ,
    ADV,
    CLOSED,
    CONTRACTIONS,
    NOINFO,
    NOUN,
    PENN_TO_WORDNET,
    SATELLITE_ADJ,
    VERB,
    WORDNET_POS,
    map_penn_tag,
)

__all__ = [
    # defaults
    "COMPOUND_JOINER",
    "CONTEXT_SCORE_DEFAULT",
    "ENCODING_UTF8",
    "MEASURE_DEFAULT",
    "OUTFILE_LINE_FORMAT",
    "PAIR_SCORE_DEFAULT",
    "SCHEME_DEFAULT",
    "SCHEME_NORMAL",
    "SCHEME_RANDOM",
    "SCHEME_SENSE1",
    "SCHEMES",
    "SENSE_SEPARATOR",
    "TAG_SEPARATOR",
    "TAGGED_RATIO_THRESHOLD",
    "TAGGED_SAMPLE_WORDS",
    "TRACE_LEVEL_DEFAULT",
    "TRACE_MEASURE",
    "TRACE_SCORES",
    "TRACE_WINDOW",
    "TRACE_WINNER",
    "WINDOW_DEFAULT",
    # function words
    "FUNCTION_WORDS",
    "is_function_word",
    # tags
    "ADJ",
    "ADV",
    "CLOSED",
    "CONTRACTIONS",
    "NOINFO",
    "NOUN",
    "PENN_TO_WORDNET",
    "SATELLITE_ADJ",
    "VERB",
    "WORDNET_POS",
    "map_penn_tag",
]
