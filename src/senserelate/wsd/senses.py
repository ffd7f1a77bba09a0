"""Sense enumeration for normalized tokens."""

from __future__ import annotations

from senserelate.wsd.base import STOPPED, UNKNOWN, LexicalDatabase, Sense, SenseLookup, Token


def enumerate_senses(database: LexicalDatabase, token: Token) -> SenseLookup:
    """Collect every sense of every base form of a token.

    Senses are ordered per form (in the order the database returned the
    forms), then by sense number. A token without a part of speech is
    looked up in all parts of speech.

    Returns:
        SenseLookup with status FOUND, UNKNOWN (no forms), EMPTY (forms but
        no senses) or STOPPED (token on the stoplist, not looked up)
    """
    if token.stopped:
        return STOPPED
    if not token.text:
        return UNKNOWN

    forms = database.valid_forms(token.text, token.pos)
    if not forms:
        return UNKNOWN

    senses: list[Sense] = []
    for form in forms:
        senses.extend(database.query_senses(form))
    return SenseLookup.found(senses)
