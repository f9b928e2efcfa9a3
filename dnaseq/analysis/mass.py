"""Molecular mass of a raw DNA string using a fixed per-symbol table."""

import math
from dataclasses import dataclass, field
from types import MappingProxyType

# Toy masses per nucleotide; not biologically accurate.
NUCLEOTIDE_MASS = MappingProxyType({
    "A": 135.128,
    "C": 111.103,
    "G": 151.128,
    "T": 125.107,
})

# Every non-nucleotide character weighs the same, independently of its neighbours.
JUNK_MASS = 100.000


@dataclass
class MassResult:
    total: float
    per_nucleotide: dict[str, float] = field(default_factory=dict)

    def fraction(self, symbols) -> float:
        """Share of the total mass contributed by ``symbols``."""
        if not self.total:
            return 0.0
        return sum(self.per_nucleotide.get(s, 0.0) for s in symbols) / self.total


def round_half_up(value: float, digits: int = 1) -> float:
    """Round to ``digits`` decimals with ties going up (``round`` would go to even)."""
    scale = 10.0 ** digits
    return math.floor(value * scale + 0.5) / scale


def compute_mass(seq: str) -> MassResult:
    """
    Sum the mass of every character in ``seq``, junk included.

    The total is rounded to one decimal place. ``per_nucleotide`` only has
    entries for nucleotides that actually occur.
    """
    total = 0.0
    per_nucleotide: dict[str, float] = {}
    for c in seq:
        nt_mass = NUCLEOTIDE_MASS.get(c)
        if nt_mass is None:
            total += JUNK_MASS
            continue
        total += nt_mass
        per_nucleotide[c] = per_nucleotide.get(c, 0.0) + nt_mass

    return MassResult(total=round_half_up(total), per_nucleotide=per_nucleotide)
