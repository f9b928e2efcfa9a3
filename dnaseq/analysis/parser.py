"""Split raw DNA strings into codons, skipping junk characters."""

from pathlib import Path
from typing import Iterator

NUCLEOTIDES = frozenset("ACGT")
CODON_LENGTH = 3


def is_nucleotide(char: str) -> bool:
    return char in NUCLEOTIDES


def strip_junk(seq: str) -> str:
    """Return ``seq`` with every non-ACGT character removed."""
    return "".join(c for c in seq if c in NUCLEOTIDES)


def iter_codons(seq: str) -> Iterator[str]:
    """
    Yield codons in sequence order.

    Nucleotides are grouped in threes as they appear; junk never breaks a
    group. A trailing group of one or two nucleotides raises ValueError.
    """
    current = []
    for c in seq:
        if c not in NUCLEOTIDES:
            continue
        current.append(c)
        if len(current) == CODON_LENGTH:
            yield "".join(current)
            current = []

    if current:
        raise ValueError(f"Unfinished codon: {''.join(current)!r}")


def first_codon(seq: str) -> str | None:
    """First complete codon reading left to right, or None."""
    current = ""
    for c in seq:
        if c in NUCLEOTIDES:
            current += c
            if len(current) == CODON_LENGTH:
                return current
    return None


def last_codon(seq: str) -> str | None:
    """First complete codon reading right to left, or None."""
    current = ""
    for c in reversed(seq):
        if c in NUCLEOTIDES:
            current = c + current
            if len(current) == CODON_LENGTH:
                return current
    return None


def is_valid_codon(codon: str) -> bool:
    """True if ``codon`` is exactly three nucleotides."""
    if not isinstance(codon, str) or len(codon) != CODON_LENGTH:
        return False
    return all(c in NUCLEOTIDES for c in codon)


def is_valid_enzyme(enzyme: str) -> bool:
    """True if ``enzyme`` is a non-empty, junk-free run of whole codons."""
    if not isinstance(enzyme, str) or not enzyme:
        return False
    if len(enzyme) % CODON_LENGTH != 0:
        return False
    return all(c in NUCLEOTIDES for c in enzyme)


def load_fasta(path: str | Path) -> str:
    """Load a sequence from a FASTA file, stripping headers and whitespace.

    Case is kept as written, so lowercase letters are junk.
    """
    lines = Path(path).read_text().strip().splitlines()
    seq_lines = [line.strip() for line in lines if not line.startswith(">")]
    return "".join(seq_lines)
