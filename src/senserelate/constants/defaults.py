"""Default values for the disambiguation engine and the command-line tool."""

# File encoding
ENCODING_UTF8 = "utf-8"

# Disambiguation defaults
WINDOW_DEFAULT = 3
PAIR_SCORE_DEFAULT = 0.0
CONTEXT_SCORE_DEFAULT = 0.0
TRACE_LEVEL_DEFAULT = 0
MEASURE_DEFAULT = "lesk"

# Disambiguation schemes
SCHEME_NORMAL = "normal"
SCHEME_SENSE1 = "sense1"
SCHEME_RANDOM = "random"
SCHEMES = (SCHEME_NORMAL, SCHEME_SENSE1, SCHEME_RANDOM)
SCHEME_DEFAULT = SCHEME_NORMAL

# Trace level bits (can be added together)
TRACE_WINDOW = 1  # context window for each target word
TRACE_WINNER = 2  # winning score for each target word
TRACE_SCORES = 4  # score of every target sense
TRACE_MEASURE = 8  # diagnostic strings from the relatedness measure

# Tagged-input detection: inspect roughly the first 20 words and call the
# file tagged when more than 70% of them carry a "/TAG" suffix.
TAGGED_SAMPLE_WORDS = 20
TAGGED_RATIO_THRESHOLD = 0.7

# Separators in the word#pos#sense display format
SENSE_SEPARATOR = "#"
TAG_SEPARATOR = "/"
COMPOUND_JOINER = "_"

# Output file line layout: original word, disambiguated word, pos, sense
OUTFILE_LINE_FORMAT = "{orig:>25} {word:>24}{pos}{sense}\n"
