"""Word Sense Disambiguation (WSD) module.

This module disambiguates words by maximizing semantic relatedness between
each word's senses and the senses of its neighbours, using WordNet as the
lexical database.

Main components:
- SenseRelate: The disambiguation engine
- LexicalDatabase / WordNetDatabase: Dictionary interface and its WordNet adapter
- RelatednessMeasure / get_measure: Pairwise relatedness measures (lesk, path, ...)
- Preprocessing, window, scoring and tracing stages used by the engine
- sentence_rows / rows_to_frame: one row per word, for CSV export
"""

from senserelate.wsd.annotate import rows_to_frame, sentence_rows
from senserelate.wsd.base import (
    STOPPED,
    UNKNOWN,
    ConfigurationError,
    LexicalDatabase,
    RelatednessMeasure,
    Sense,
    SenseLookup,
    SenseStatus,
    Token,
    UnknownParameterError,
    WordForm,
)
from senserelate.wsd.engine import ENGINE_OPTIONS, SenseRelate, format_outfile_line
from senserelate.wsd.measures import (
    MEASURES,
    JcnMeasure,
    LchMeasure,
    LeskMeasure,
    LinMeasure,
    PathMeasure,
    RandomMeasure,
    ResMeasure,
    WordNetMeasure,
    WupMeasure,
    get_measure,
    load_measure_config,
    phrasal_overlap,
)
from senserelate.wsd.preprocess import (
    compile_stoplist,
    compoundify,
    convert_contraction,
    convert_tag,
    is_stop,
    parse_untagged,
    preprocess,
    split_tag,
)
from senserelate.wsd.schemes import choose_first_sense, choose_random_sense
from senserelate.wsd.scoring import (
    ScoreTable,
    coerce_pos,
    needs_coercion,
    score_target,
    select_winner,
)
from senserelate.wsd.senses import enumerate_senses
from senserelate.wsd.tracer import Tracer, format_score
from senserelate.wsd.window import build_window
from senserelate.wsd.wordnet_backend import WordNetDatabase

__all__ = [
    # Base
    "ConfigurationError",
    "UnknownParameterError",
    "LexicalDatabase",
    "RelatednessMeasure",
    "Sense",
    "SenseLookup",
    "SenseStatus",
    "Token",
    "WordForm",
    "STOPPED",
    "UNKNOWN",
    # Engine
    "ENGINE_OPTIONS",
    "SenseRelate",
    "format_outfile_line",
    # Database
    "WordNetDatabase",
    # Measures
    "MEASURES",
    "WordNetMeasure",
    "LeskMeasure",
    "PathMeasure",
    "WupMeasure",
    "LchMeasure",
    "ResMeasure",
    "LinMeasure",
    "JcnMeasure",
    "RandomMeasure",
    "get_measure",
    "load_measure_config",
    "phrasal_overlap",
    # Preprocessing
    "compile_stoplist",
    "compoundify",
    "convert_contraction",
    "convert_tag",
    "is_stop",
    "parse_untagged",
    "preprocess",
    "split_tag",
    # Stages
    "enumerate_senses",
    "build_window",
    "ScoreTable",
    "coerce_pos",
    "needs_coercion",
    "score_target",
    "select_winner",
    "choose_first_sense",
    "choose_random_sense",
    "Tracer",
    "format_score",
    # DataFrames
    "sentence_rows",
    "rows_to_frame",
]
