"""Context-free disambiguation schemes.

These schemes ignore the surrounding words:
- sense1: the most frequent sense of the word
- random: any sense of the word, uniformly at random (a baseline)
"""

from __future__ import annotations

import random

from senserelate.wsd.base import LexicalDatabase, Sense, Token


def choose_first_sense(database: LexicalDatabase, token: Token, rng: random.Random) -> Sense | None:
    """Pick the most frequent sense of a token.

    Takes the first (most frequent) sense of every base form of the word
    and keeps the one the database counts most often. Forms tied on
    frequency are chosen between at random.

    Returns:
        The chosen sense, or None if the token has no senses
    """
    if token.stopped or not token.text:
        return None

    best: list[Sense] = []
    best_freq = 0
    for form in database.valid_forms(token.text, token.pos):
        senses = database.query_senses(form)
        if not senses:
            continue
        first = senses[0]
        freq = database.frequency(first)
        if not best or freq > best_freq:
            best, best_freq = [first], freq
        elif freq == best_freq:
            best.append(first)

    if not best:
        return None
    return best[0] if len(best) == 1 else rng.choice(best)


def choose_random_sense(database: LexicalDatabase, token: Token, rng: random.Random) -> Sense | None:
    """Pick any sense of any base form of a token, uniformly at random."""
    if token.stopped or not token.text:
        return None

    senses: list[Sense] = []
    for form in database.valid_forms(token.text, token.pos):
        senses.extend(database.query_senses(form))

    return rng.choice(senses) if senses else None
