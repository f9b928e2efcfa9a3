"""Collect the derived properties of a sequence into a report."""

import json

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from dnaseq.analysis.parser import CODON_LENGTH, first_codon, last_codon, strip_junk
from dnaseq.analysis.protein import PROTEIN_NUCLEOTIDES, protein_checks
from dnaseq.sequence import DNASequence

_STATUS_STYLE = {True: "[green]PASS[/green]", False: "[red]FAIL[/red]"}


def score_sequence(seq: str | DNASequence) -> dict:
    """
    Analyse a sequence and return a JSON-serialisable report.

    Args:
        seq: Raw sequence string or an existing DNASequence.

    Raises:
        ValidationError: If ``seq`` is a string that is not a valid sequence.
    """
    dna = seq if isinstance(seq, DNASequence) else DNASequence(seq)
    raw = dna.sequence
    nucleotides = strip_junk(raw)
    codons = dna.codon_set
    mass = dna.mass

    return {
        "sequence_info": {
            "sequence": raw,
            "total_length": len(raw),
            "nucleotide_length": len(nucleotides),
            "junk_count": len(raw) - len(nucleotides),
            "num_codons": len(nucleotides) // CODON_LENGTH,
            "distinct_codons": len(codons),
        },
        "mass": {
            "total": dna.total_mass,
            "per_nucleotide": {nt: round(m, 3) for nt, m in sorted(dna.per_nucleotide_mass.items())},
            "cg_fraction": round(mass.fraction(PROTEIN_NUCLEOTIDES), 4),
        },
        "nucleotide_counts": dna.nucleotide_counts,
        "codons": {
            "set": sorted(codons),
            "first": first_codon(raw),
            "last": last_codon(raw),
        },
        "protein": {
            "is_protein": dna.is_protein,
            "checks": protein_checks(raw, codons, mass),
        },
    }


def report_to_json(report: dict) -> str:
    return json.dumps(report, indent=2)


def print_report(console: Console, report: dict, label: str | None = None) -> None:
    """Render a report as rich tables."""
    info = report["sequence_info"]
    mass = report["mass"]
    protein = report["protein"]

    title = f"DNA sequence report - {label}" if label else "DNA sequence report"
    console.print(Panel(info["sequence"], title=title, expand=False))

    overview = Table(show_header=False, box=None)
    overview.add_column(style="bold")
    overview.add_column()
    overview.add_row("Length", f"{info['total_length']} ({info['junk_count']} junk)")
    overview.add_row("Codons", f"{info['num_codons']} ({info['distinct_codons']} distinct)")
    overview.add_row("Total mass", f"{mass['total']:.1f}")
    overview.add_row("CG mass fraction", f"{mass['cg_fraction']:.3f}")
    overview.add_row("Protein", "[bold green]yes[/bold green]" if protein["is_protein"] else "[bold red]no[/bold red]")
    console.print(overview)

    nucleotides = Table(title="Nucleotides")
    nucleotides.add_column("Nucleotide")
    nucleotides.add_column("Count", justify="right")
    nucleotides.add_column("Mass", justify="right")
    for nt, count in report["nucleotide_counts"].items():
        nucleotides.add_row(nt, str(count), f"{mass['per_nucleotide'].get(nt, 0.0):.3f}")
    console.print(nucleotides)

    checks = Table(title="Protein checks")
    checks.add_column("Check")
    checks.add_column("Status")
    for name, passed in protein["checks"].items():
        checks.add_row(name, _STATUS_STYLE[passed])
    console.print(checks)

    codons = report["codons"]
    if codons["set"]:
        console.print(f"Codon set: {', '.join(codons['set'])}")
