"""Text input utilities: load context files, word lists and split sentences."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from senserelate.constants import (
    ENCODING_UTF8,
    TAGGED_RATIO_THRESHOLD,
    TAGGED_SAMPLE_WORDS,
)
from senserelate.wsd.base import ConfigurationError

logger = logging.getLogger(__name__)

# Abbreviations that (almost) never end a sentence
KNOWN_ABBREVIATIONS = ("prof", "Prof", "ph", "d", "Ph", "D", "dr", "Dr", "mr", "Mr", "mrs", "Mrs", "ms", "Ms", "vs")

# Abbreviations that end a sentence unless a lowercase word follows
SOMETIMES_ABBREVIATIONS = ("etc", "jr", "Jr")

BOUNDARY_MARKER = "<pbound/>"

_TAGGED_WORD_RE = re.compile(r"/\S")


class TextLoadError(Exception):
    """Raised when text cannot be loaded from a file."""


def load_text_from_file(file_path: Path, encoding: str = ENCODING_UTF8) -> str:
    """Load raw text from a file.

    Args:
        file_path: Path to the text file.
        encoding: File encoding (default UTF-8).

    Returns:
        The file contents as a string.

    Raises:
        FileNotFoundError: If the file does not exist.
        TextLoadError: For empty files or decoding errors.
    """

    if not file_path.exists():
        raise FileNotFoundError(file_path)

    try:
        text = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise TextLoadError(f"Failed to decode file {file_path} with encoding {encoding}") from exc

    if not text:
        raise TextLoadError(f"File {file_path} is empty")

    return text


def is_tagged(text: str) -> bool:
    """Guess whether text is part-of-speech tagged ("cat/NN").

    Looks at the first words of the text and considers it tagged if more
    than 70% of them carry a tag.
    """
    words: list[str] = []
    for line in text.splitlines():
        words.extend(line.split())
        if len(words) > TAGGED_SAMPLE_WORDS:
            break

    if not words:
        return False

    tagged_count = sum(1 for word in words if _TAGGED_WORD_RE.search(word))
    return tagged_count / len(words) > TAGGED_RATIO_THRESHOLD


def split_sentences(text: str) -> list[str]:
    """Split raw text into sentences.

    Heuristic from Manning & Schütze (1999, pp. 134-135): every ".", "?"
    and "!" is a putative boundary, moved past a closing quote, and then
    withdrawn after known abbreviations ("Dr.", "vs."), after "etc."/"jr."
    followed by a lowercase word, and after "?"/"!" followed by a lowercase
    word. The punctuation at a real boundary is dropped.

    Examples:
        >>> split_sentences("The cat sat. Did it run? Yes!")
        ['The cat sat', 'Did it run', 'Yes']
    """
    if not text:
        return []

    text = text.replace("\n", " ")
    marker = re.escape(BOUNDARY_MARKER)

    text = re.sub(r"([.?!])", rf"\1{BOUNDARY_MARKER}", text)

    # Move the boundary after closing quotes
    text = text.replace(f'{BOUNDARY_MARKER}"', f'"{BOUNDARY_MARKER}')
    text = text.replace(f"{BOUNDARY_MARKER}'", f"'{BOUNDARY_MARKER}")

    for abbr in KNOWN_ABBREVIATIONS:
        text = re.sub(rf"\b{abbr}(\W*){marker}", rf"{abbr}\1 ", text)

    for abbr in SOMETIMES_ABBREVIATIONS:
        text = re.sub(rf"{abbr}(\W*){marker}\s*([a-z])", rf"{abbr}\1 \2", text)

    text = re.sub(rf"([!?])\s*{marker}\s*([a-z])", r"\1 \2", text)

    sentences = [part.strip() for part in re.split(rf"[.?!]{marker}", text)]
    return [sentence.replace(BOUNDARY_MARKER, "") for sentence in sentences if sentence]


def read_contexts(file_path: Path, boundary: bool | None = None) -> tuple[list[list[str]], bool]:
    """Read a context file into sentences of words.

    Args:
        file_path: Context file
        boundary: Detect sentence boundaries (True) or take one sentence per
                  line (False); None detects them unless the text is tagged

    Returns:
        (sentences, tagged) where each sentence is a list of words

    Raises:
        FileNotFoundError: If the file does not exist
        TextLoadError: For empty files or decoding errors
    """
    text = load_text_from_file(file_path)
    tagged = is_tagged(text)
    if boundary is None:
        boundary = not tagged

    chunks = split_sentences(text) if boundary else text.splitlines()
    sentences = [chunk.split() for chunk in chunks]
    sentences = [words for words in sentences if words]

    logger.info(
        "Read %d sentences from %s (tagged=%s, boundary=%s)",
        len(sentences),
        file_path,
        tagged,
        boundary,
    )
    return sentences, tagged


def _read_word_list(file_path: Path, kind: str) -> list[str]:
    try:
        text = file_path.read_text(encoding=ENCODING_UTF8)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read {kind} file {file_path}: {exc}") from exc
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_compounds(file_path: Path) -> set[str]:
    """Load a compound word list, one compound per line ("ice_cream").

    Raises:
        ConfigurationError: If the file cannot be read
    """
    compounds = {word.lower() for word in _read_word_list(file_path, "compound")}
    logger.info("Loaded %d compounds from %s", len(compounds), file_path)
    return compounds


def load_stoplist(file_path: Path) -> list[str]:
    """Load stoplist patterns, one regular expression per line ("/^the$/").

    Raises:
        ConfigurationError: If the file cannot be read
    """
    patterns = _read_word_list(file_path, "stoplist")
    logger.info("Loaded %d stoplist patterns from %s", len(patterns), file_path)
    return patterns
