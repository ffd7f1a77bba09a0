"""Context window construction."""

from __future__ import annotations

from collections.abc import Sequence

from senserelate.wsd.base import SenseLookup


def build_window(target: int, radius: int, lookups: Sequence[SenseLookup]) -> tuple[int, int]:
    """Compute the context window around a target word.

    The window starts as ``radius`` words on each side of the target,
    clipped to the sentence. Each side then grows by one position for
    every word inside it that has no senses (unknown, stopped, ...), so it
    tries to hold ``radius`` informative words rather than ``radius``
    tokens. Neither side ever leaves the sentence.

    Args:
        target: Index of the target word
        radius: Number of words wanted on each side
        lookups: Sense lookups of the whole sentence

    Returns:
        (lower, upper) inclusive bounds, always containing ``target``

    Examples:
        >>> from senserelate.wsd.base import UNKNOWN, SenseLookup, Sense
        >>> known = SenseLookup.found([Sense("cat", "n", 1)])
        >>> build_window(2, 1, [known, known, known, UNKNOWN, known])
        (1, 4)
    """
    last = len(lookups) - 1
    radius = max(radius, 0)
    lower = max(0, target - radius)
    upper = min(last, target + radius)

    i = target - 1
    while i >= lower and lower > 0:
        if not lookups[i].has_senses:
            lower -= 1
        i -= 1

    j = target + 1
    while j <= upper and upper < last:
        if not lookups[j].has_senses:
            upper += 1
        j += 1

    return lower, upper
