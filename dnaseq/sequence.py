"""DNA sequence model: validation, mass, codon set, protein check and mutation."""

import logging
from collections import Counter

from dnaseq.analysis.mass import MassResult, compute_mass
from dnaseq.analysis.mutations import cut_and_splice, substitute_codon
from dnaseq.analysis.parser import NUCLEOTIDES, is_valid_codon, is_valid_enzyme, iter_codons
from dnaseq.analysis.protein import classify_protein

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when a sequence or a cut-and-splice request is malformed."""


class DNASequence:
    """A raw nucleotide string plus everything derived from it.

    Any character other than A, C, G or T is junk: it is skipped when
    grouping codons but still weighs :data:`~dnaseq.analysis.mass.JUNK_MASS`.

    Two sequences are equal when their raw strings (junk included) are equal.

    ``mutate_codon`` changes the instance in place; ``cut_and_splice``
    returns a new one.
    """

    def __init__(self, sequence: str):
        self._sequence = ""
        self._codons: set[str] = set()
        self._mass = MassResult(total=0.0)
        self._counts = dict.fromkeys(sorted(NUCLEOTIDES), 0)
        self._protein = False
        self._analyse(sequence)

    def _analyse(self, sequence: str) -> None:
        """Validate ``sequence`` and rebuild every derived field from it.

        A string made only of junk is accepted as a sequence with no codons.
        """
        if not sequence:
            raise ValidationError("Empty or null sequence")
        try:
            codons = set(iter_codons(sequence))
        except ValueError as exc:
            raise ValidationError("Unfinished codon") from exc

        counts = dict.fromkeys(sorted(NUCLEOTIDES), 0)
        counts.update(Counter(c for c in sequence if c in NUCLEOTIDES))
        mass = compute_mass(sequence)

        self._sequence = sequence
        self._codons = codons
        self._counts = counts
        self._mass = mass
        self._protein = classify_protein(sequence, codons, mass)

    @property
    def sequence(self) -> str:
        """The raw sequence, junk included."""
        return self._sequence

    @property
    def codon_set(self) -> set[str]:
        """A fresh copy of the distinct codons in the sequence."""
        return set(self._codons)

    @property
    def total_mass(self) -> float:
        return self._mass.total

    @property
    def mass(self) -> MassResult:
        """A copy of the mass breakdown: rounded total plus per-nucleotide sums."""
        return MassResult(total=self._mass.total, per_nucleotide=dict(self._mass.per_nucleotide))

    @property
    def per_nucleotide_mass(self) -> dict[str, float]:
        return dict(self._mass.per_nucleotide)

    @property
    def nucleotide_counts(self) -> dict[str, int]:
        return dict(self._counts)

    @property
    def is_protein(self) -> bool:
        return self._protein

    def nucleotide_count(self, nucleotide: str) -> int:
        """Number of times ``nucleotide`` (one of A, C, G, T) occurs."""
        if nucleotide not in self._counts:
            raise ValueError(f"Not a nucleotide: {nucleotide!r}")
        return self._counts[nucleotide]

    def mutate_codon(self, old_codon: str, new_codon: str) -> None:
        """
        Replace every ``old_codon`` with ``new_codon``, dropping junk.

        Invalid codons, identical codons, or an ``old_codon`` that never
        occurs leave the sequence untouched (junk included). Nothing is
        raised in those cases.
        """
        if old_codon == new_codon:
            return
        if not is_valid_codon(old_codon) or not is_valid_codon(new_codon):
            logger.debug("Ignoring mutation %r -> %r: invalid codon", old_codon, new_codon)
            return

        mutated, replaced = substitute_codon(self._sequence, old_codon, new_codon)
        if not replaced:
            return
        logger.debug("Replaced %d x %s with %s", replaced, old_codon, new_codon)
        self._analyse(mutated)

    def cut_and_splice(
        self,
        enzyme: str,
        splice_position: int,
        splicee: str,
        legacy: bool = True,
    ) -> "DNASequence":
        """
        Build a new sequence by inserting ``splicee`` at every ``enzyme`` site.

        Args:
            enzyme: Restriction site; whole codons, no junk.
            splice_position: Cut offset inside the site, 0 < pos < len(enzyme).
            splicee: Inserted codons; no junk.
            legacy: See :func:`dnaseq.analysis.mutations.cut_and_splice`.

        Raises:
            ValidationError: On a bad enzyme, splicee or position, or if the
                assembled sequence is itself invalid.
        """
        if not is_valid_enzyme(enzyme) or not is_valid_enzyme(splicee):
            raise ValidationError("Invalid enzymes")
        if not 0 < splice_position < len(enzyme):
            raise ValidationError("Invalid splice position")

        spliced = cut_and_splice(self._sequence, enzyme, splice_position, splicee, legacy=legacy)
        return DNASequence(spliced)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DNASequence):
            return NotImplemented
        return self._sequence == other._sequence

    # Mutable: mutate_codon rewrites the sequence in place.
    __hash__ = None

    def __len__(self) -> int:
        return len(self._sequence)

    def __repr__(self) -> str:
        return (
            f"DNASequence("
            f"{len(self._sequence)}nt, "
            f"codons={len(self._codons)}, "
            f"mass={self._mass.total}, "
            f"protein={self._protein})"
        )

    def __str__(self) -> str:
        return self._sequence
