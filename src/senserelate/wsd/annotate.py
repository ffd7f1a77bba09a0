"""Tabular output of disambiguation results.

Lays engine results out as one row per input word, for the CLI's
``--table`` CSV export.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

from senserelate.constants.columns import (
    ANNOTATION_COLUMNS,
    ORIGINAL,
    OUTPUT,
    POS,
    POSITION,
    SENSE_INDEX,
    SENTENCE_ID,
    WORD,
)
from senserelate.wsd.base import Sense


def sentence_rows(
    sentence_id: int, sentence: Sequence[str], results: Sequence[Sense | str]
) -> list[dict[str, Any]]:
    """Build annotation rows for one disambiguated sentence.

    Args:
        sentence_id: Index of the sentence in the text
        sentence: Input words of the sentence
        results: Engine results, one per input word

    Returns:
        One dict per word, keyed by the annotation column names
    """
    rows = []
    for position, (original, result) in enumerate(zip(sentence, results)):
        if isinstance(result, Sense):
            word, pos, sense_index = result.word, result.pos, result.index
        else:
            word, pos, sense_index = result, None, None
        rows.append(
            {
                SENTENCE_ID: sentence_id,
                POSITION: position,
                ORIGINAL: original,
                WORD: word,
                POS: pos,
                SENSE_INDEX: sense_index,
                OUTPUT: str(result),
            }
        )
    return rows


def rows_to_frame(rows: list[dict[str, Any]]) -> pd.DataFrame:
    """Turn annotation rows into a DataFrame with the annotation columns."""
    df = pd.DataFrame(rows, columns=ANNOTATION_COLUMNS)
    df[SENSE_INDEX] = df[SENSE_INDEX].astype("Int64")
    return df
