"""Runtime settings loaded from the environment.

Values come from environment variables (a ``.env`` file in the working
directory is loaded first) and fall back to the defaults in
``senserelate.constants``:

- SENSERELATE_MEASURE: relatedness measure name
- SENSERELATE_WINDOW: window radius
- SENSERELATE_PAIR_SCORE: pairwise threshold
- SENSERELATE_CONTEXT_SCORE: context score threshold
- SENSERELATE_TRACE: trace level bitmask
- SENSERELATE_SCHEME: disambiguation scheme
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

from senserelate.constants import (
    CONTEXT_SCORE_DEFAULT,
    MEASURE_DEFAULT,
    PAIR_SCORE_DEFAULT,
    SCHEME_DEFAULT,
    SCHEMES,
    TRACE_LEVEL_DEFAULT,
    WINDOW_DEFAULT,
)
from senserelate.wsd.base import ConfigurationError

ENV_PREFIX = "SENSERELATE_"


@dataclass
class Settings:
    """Engine defaults after environment overrides."""

    measure: str = MEASURE_DEFAULT
    window: int = WINDOW_DEFAULT
    pair_score: float = PAIR_SCORE_DEFAULT
    context_score: float = CONTEXT_SCORE_DEFAULT
    trace: int = TRACE_LEVEL_DEFAULT
    scheme: str = SCHEME_DEFAULT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Variables to read; defaults to os.environ after
                     loading a ``.env`` file

        Raises:
            ConfigurationError: If a variable has an invalid value
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        settings = cls(
            measure=environ.get(f"{ENV_PREFIX}MEASURE", MEASURE_DEFAULT),
            window=_parse(environ, "WINDOW", int, WINDOW_DEFAULT),
            pair_score=_parse(environ, "PAIR_SCORE", float, PAIR_SCORE_DEFAULT),
            context_score=_parse(environ, "CONTEXT_SCORE", float, CONTEXT_SCORE_DEFAULT),
            trace=_parse(environ, "TRACE", int, TRACE_LEVEL_DEFAULT),
            scheme=environ.get(f"{ENV_PREFIX}SCHEME", SCHEME_DEFAULT),
        )

        if settings.scheme not in SCHEMES:
            raise ConfigurationError(
                f"{ENV_PREFIX}SCHEME must be one of {', '.join(SCHEMES)}, got {settings.scheme!r}"
            )
        if settings.window < 0:
            raise ConfigurationError(f"{ENV_PREFIX}WINDOW must not be negative")
        return settings


def _parse(environ: Mapping[str, str], name: str, convert, default):
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"Invalid value for {ENV_PREFIX}{name}: {raw!r}") from exc
