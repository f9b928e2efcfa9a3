"""DNA sequence analysis: mass, codons, protein heuristic, mutation and cut-and-splice."""

from .sequence import DNASequence, ValidationError

__all__ = ["DNASequence", "ValidationError"]
