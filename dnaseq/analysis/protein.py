"""Heuristic protein check: start codon, stop codon, size and CG mass share."""

from .mass import MassResult
from .parser import first_codon, last_codon

START_CODONS = frozenset({"ATG"})
STOP_CODONS = frozenset({"TAA", "TAG", "TGA"})
PROTEIN_NUCLEOTIDES = frozenset("CG")
PROTEIN_MASS_THRESHOLD = 0.3
MIN_PROTEIN_CODONS = 5


def protein_checks(seq: str, codon_set: set[str], mass: MassResult) -> dict[str, bool]:
    """Evaluate every protein criterion without short-circuiting.

    Used by the report to explain why a sequence was (not) classified
    as a protein.
    """
    return {
        "min_codons": len(codon_set) >= MIN_PROTEIN_CODONS,
        "start_codon": first_codon(seq) in START_CODONS,
        "stop_codon": last_codon(seq) in STOP_CODONS,
        "cg_mass": mass.fraction(PROTEIN_NUCLEOTIDES) >= PROTEIN_MASS_THRESHOLD,
    }


def classify_protein(seq: str, codon_set: set[str], mass: MassResult) -> bool:
    """
    Return True if ``seq`` looks like a protein-coding sequence.

    All of the following must hold:
      - at least 5 distinct codons
      - the first codon (junk skipped) is ATG
      - the last codon (junk skipped) is TAA, TAG or TGA
      - C and G contribute at least 30% of the total mass
    """
    if len(codon_set) < MIN_PROTEIN_CODONS:
        return False
    if first_codon(seq) not in START_CODONS:
        return False
    if last_codon(seq) not in STOP_CODONS:
        return False
    return mass.fraction(PROTEIN_NUCLEOTIDES) >= PROTEIN_MASS_THRESHOLD
