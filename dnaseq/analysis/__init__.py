"""Sequence analysis helpers: parsing, mass, protein heuristic, mutations."""

from .parser import is_valid_codon, is_valid_enzyme, iter_codons, load_fasta, strip_junk
from .mass import compute_mass
from .protein import classify_protein
from .mutations import cut_and_splice, substitute_codon

__all__ = [
    "is_valid_codon",
    "is_valid_enzyme",
    "iter_codons",
    "load_fasta",
    "strip_junk",
    "compute_mass",
    "classify_protein",
    "cut_and_splice",
    "substitute_codon",
]
