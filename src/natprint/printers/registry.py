"""Strategy names and a factory for the four printers."""
from __future__ import annotations

from enum import Enum

from ..core.alphabet import MAX_BASE
from ..core.number_types import INT32, NumberType
from .base import NaturalPrinter
from .lr import LRPairPrinter, LRPrinter
from .modulo import ModuloPairPrinter, ModuloPrinter


class Strategy(Enum):
    LR = "lr"
    LR_PAIRS = "lr2"
    MODULO = "modulo"
    MODULO_PAIRS = "modulo2"

    @property
    def uses_power_cache(self) -> bool:
        return self in (Strategy.LR, Strategy.LR_PAIRS)

    @property
    def pairs(self) -> bool:
        return self in (Strategy.LR_PAIRS, Strategy.MODULO_PAIRS)


PRINTER_CLASSES: dict[Strategy, type[NaturalPrinter]] = {
    Strategy.LR: LRPrinter,
    Strategy.LR_PAIRS: LRPairPrinter,
    Strategy.MODULO: ModuloPrinter,
    Strategy.MODULO_PAIRS: ModuloPairPrinter,
}


def make_printer(strategy: Strategy | str, base: int = 10,
                 alphabet: str | None = None, *,
                 number_type: NumberType = INT32,
                 max_base: int = MAX_BASE) -> NaturalPrinter:
    """Create a printer for a strategy given as enum member or its key."""
    cls = PRINTER_CLASSES[Strategy(strategy)]
    return cls(base, alphabet, number_type=number_type, max_base=max_base)


def all_printers(base: int = 10, alphabet: str | None = None, *,
                 number_type: NumberType = INT32,
                 max_base: int = MAX_BASE) -> dict[Strategy, NaturalPrinter]:
    """One printer per strategy, all configured alike."""
    return {
        s: make_printer(s, base, alphabet, number_type=number_type, max_base=max_base)
        for s in Strategy
    }
