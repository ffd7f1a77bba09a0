"""DataFrame column name constants."""

# Annotation columns (one row per input word)
SENTENCE_ID = "sentence_id"
POSITION = "position"
ORIGINAL = "original"
WORD = "word"
POS = "pos"
SENSE_INDEX = "sense_index"
OUTPUT = "output"

ANNOTATION_COLUMNS = [SENTENCE_ID, POSITION, ORIGINAL, WORD, POS, SENSE_INDEX, OUTPUT]
