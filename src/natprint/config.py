"""Defaults for the command-line tools, overridable from the environment.

Environment:
    NATPRINT_BASE       Base used when --base is not given (default: 10)
    NATPRINT_STRATEGY   lr, lr2, modulo or modulo2 (default: modulo2)
    NATPRINT_TYPE       Number type name, e.g. int32, uint64 (default: int32)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .core.alphabet import MAX_BASE, validate_base
from .core.number_types import INT32, NumberType, lookup_number_type
from .printers.registry import Strategy

DEFAULT_BASE = 10
DEFAULT_STRATEGY = Strategy.MODULO_PAIRS
DEFAULT_TYPE = "int32"


@dataclass(frozen=True)
class Settings:
    base: int = DEFAULT_BASE
    strategy: Strategy = DEFAULT_STRATEGY
    number_type: NumberType = INT32


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from environ (os.environ by default)."""
    env = os.environ if environ is None else environ

    raw_base = env.get("NATPRINT_BASE", str(DEFAULT_BASE))
    try:
        base = int(raw_base)
    except ValueError:
        raise ValueError(f"NATPRINT_BASE must be an integer, got {raw_base!r}") from None
    validate_base(base, MAX_BASE)

    raw_strategy = env.get("NATPRINT_STRATEGY", DEFAULT_STRATEGY.value)
    try:
        strategy = Strategy(raw_strategy.strip().lower())
    except ValueError:
        choices = ", ".join(s.value for s in Strategy)
        raise ValueError(
            f"NATPRINT_STRATEGY must be one of {choices}, got {raw_strategy!r}"
        ) from None

    number_type = lookup_number_type(env.get("NATPRINT_TYPE", DEFAULT_TYPE))
    return Settings(base=base, strategy=strategy, number_type=number_type)
