"""Codon substitution and restriction-enzyme cut-and-splice on raw DNA strings.

Both operators drop junk from their output. Inputs are assumed to be
validated by the caller (see :class:`dnaseq.sequence.DNASequence`).
"""

import logging

from .parser import CODON_LENGTH, iter_codons, strip_junk

logger = logging.getLogger(__name__)


def substitute_codon(seq: str, old_codon: str, new_codon: str) -> tuple[str, int]:
    """
    Replace every in-frame occurrence of ``old_codon`` with ``new_codon``.

    Returns the rebuilt junk-free sequence and the number of replacements.
    Callers should keep the original string when the count is zero, since
    the rebuilt one has lost its junk even though nothing was mutated.
    """
    codons = []
    replaced = 0
    for codon in iter_codons(seq):
        if codon == old_codon:
            codons.append(new_codon)
            replaced += 1
        else:
            codons.append(codon)
    return "".join(codons), replaced


def _first_mismatch(text: str, start: int, enzyme: str) -> int | None:
    for j, nt in enumerate(enzyme):
        if text[start + j] != nt:
            return j
    return None


def cut_and_splice(
    seq: str,
    enzyme: str,
    splice_position: int,
    splicee: str,
    legacy: bool = True,
) -> str:
    """
    Cut ``seq`` at every site of ``enzyme`` and insert ``splicee``.

    The scan walks the junk-free sequence codon by codon. At a site the
    output gets the first ``splice_position`` nucleotides of the site, then
    ``splicee``, then the rest.

    Args:
        seq: Raw sequence, junk allowed.
        enzyme: Restriction site, whole codons, no junk.
        splice_position: Cut offset inside the site, 0 < pos < len(enzyme).
        splicee: Codons inserted at the cut.
        legacy: Keep the historical scan. Sites are compared against the raw
            (junk-containing) string at junk-free offsets, a match copies the
            whole remainder of the sequence, and the final ``len(enzyme)``
            nucleotides are never scanned or copied. With ``legacy=False``
            sites are matched in the junk-free string, only the site itself is
            copied, and the unscanned tail is kept.

    Returns: The assembled junk-free sequence (may end mid-codon).
    """
    stripped = strip_junk(seq)
    if legacy:
        return _cut_and_splice_legacy(seq, stripped, enzyme, splice_position, splicee)
    return _cut_and_splice_clean(stripped, enzyme, splice_position, splicee)


def _cut_and_splice_legacy(seq: str, stripped: str, enzyme: str, splice_position: int, splicee: str) -> str:
    parts = []
    i = 0
    while i < len(stripped) - len(enzyme):
        if _first_mismatch(seq, i, enzyme) is not None:
            parts.append(stripped[i:i + CODON_LENGTH])
            i += CODON_LENGTH
            continue
        logger.debug("Enzyme %s matched at offset %d", enzyme, i)
        parts.append(stripped[i:i + splice_position])
        parts.append(splicee)
        parts.append(stripped[i + splice_position:])
        i += len(enzyme)
    return "".join(parts)


def _cut_and_splice_clean(stripped: str, enzyme: str, splice_position: int, splicee: str) -> str:
    parts = []
    i = 0
    while i + len(enzyme) <= len(stripped):
        if _first_mismatch(stripped, i, enzyme) is not None:
            parts.append(stripped[i:i + CODON_LENGTH])
            i += CODON_LENGTH
            continue
        logger.debug("Enzyme %s matched at offset %d", enzyme, i)
        parts.append(stripped[i:i + splice_position])
        parts.append(splicee)
        parts.append(stripped[i + splice_position:i + len(enzyme)])
        i += len(enzyme)
    parts.append(stripped[i:])
    return "".join(parts)
