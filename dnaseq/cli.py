import rich_click as click
from rich.console import Console

from dnaseq.analysis.parser import load_fasta
from dnaseq.report import print_report, report_to_json, score_sequence
from dnaseq.sequence import DNASequence, ValidationError

console = Console()

_output_option = click.option(
    "--output", "output_fmt", type=click.Choice(["summary", "json"]), default="summary", show_default=True, help="Output format."
)
_fasta_option = click.option(
    "--fasta", is_flag=True, default=False, help="Treat SEQUENCE as the path to a FASTA file. Headers and whitespace are dropped; case is kept, so lowercase letters are junk."
)


def _load(sequence: str, fasta: bool) -> DNASequence:
    """Build a DNASequence from the command line, exiting with status 1 on bad input."""
    try:
        raw = load_fasta(sequence) if fasta else sequence
        return DNASequence(raw)
    except (OSError, ValidationError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise SystemExit(1)


def _emit(dna: DNASequence, output_fmt: str, label: str | None = None) -> None:
    report = score_sequence(dna)
    if output_fmt == "json":
        console.print_json(report_to_json(report))
    else:
        print_report(console, report, label=label)


@click.group()
def main() -> None:
    """Analyse, mutate and cut-and-splice DNA sequences."""


@main.command()
@click.argument("sequence")
@_fasta_option
@_output_option
def analyze(sequence: str, fasta: bool, output_fmt: str) -> None:
    """Report mass, codons and protein status for SEQUENCE."""
    _emit(_load(sequence, fasta), output_fmt)


@main.command()
@click.argument("sequence")
@click.argument("old_codon")
@click.argument("new_codon")
@_fasta_option
@_output_option
def mutate(sequence: str, old_codon: str, new_codon: str, fasta: bool, output_fmt: str) -> None:
    """Replace every OLD_CODON in SEQUENCE with NEW_CODON.

    Invalid codons, or an OLD_CODON that never occurs, leave the sequence unchanged.
    """
    dna = _load(sequence, fasta)
    before = dna.sequence
    dna.mutate_codon(old_codon, new_codon)
    if dna.sequence == before and output_fmt != "json":
        console.print("[yellow]No codon replaced; sequence unchanged.[/yellow]")
    _emit(dna, output_fmt, label=f"{old_codon} -> {new_codon}")


@main.command()
@click.argument("sequence")
@click.argument("enzyme")
@click.argument("position", type=int)
@click.argument("splicee")
@click.option(
    "--legacy/--corrected",
    default=True,
    show_default=True,
    help="Legacy scan reproduces historical outputs; corrected matches sites in the junk-free sequence and keeps the tail.",
)
@_fasta_option
@_output_option
def splice(sequence: str, enzyme: str, position: int, splicee: str, legacy: bool, fasta: bool, output_fmt: str) -> None:
    """Cut SEQUENCE at every ENZYME site and insert SPLICEE at POSITION within the site."""
    dna = _load(sequence, fasta)
    try:
        spliced = dna.cut_and_splice(enzyme, position, splicee, legacy=legacy)
    except ValidationError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise SystemExit(1)
    _emit(spliced, output_fmt, label=f"{enzyme} @ {position}")


if __name__ == "__main__":
    main()
