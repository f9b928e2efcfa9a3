"""Tests for the sequence report."""
import json

import pytest
from rich.console import Console

from dnaseq.report import print_report, report_to_json, score_sequence
from dnaseq.sequence import DNASequence, ValidationError


@pytest.fixture
def report():
    return score_sequence("AT*GCCCGGGCGCTAA")


def test_sequence_info(report):
    assert report["sequence_info"] == {
        "sequence": "AT*GCCCGGGCGCTAA",
        "total_length": 16,
        "nucleotide_length": 15,
        "junk_count": 1,
        "num_codons": 5,
        "distinct_codons": 5,
    }


def test_mass_section(report):
    assert report["mass"]["total"] == DNASequence("AT*GCCCGGGCGCTAA").total_mass
    assert set(report["mass"]["per_nucleotide"]) == {"A", "C", "G", "T"}
    assert 0.3 < report["mass"]["cg_fraction"] < 1.0


def test_codons_section(report):
    assert report["codons"] == {
        "set": ["ATG", "CCC", "CGC", "GGG", "TAA"],
        "first": "ATG",
        "last": "TAA",
    }


def test_protein_section(report):
    assert report["protein"]["is_protein"] is True
    assert all(report["protein"]["checks"].values())


def test_accepts_existing_sequence():
    dna = DNASequence("AAAGGTTACTGA")
    assert score_sequence(dna)["nucleotide_counts"] == {"A": 5, "C": 1, "G": 3, "T": 3}


def test_invalid_sequence_raises():
    with pytest.raises(ValidationError):
        score_sequence("ATGC")


def test_report_to_json_is_loadable(report):
    assert json.loads(report_to_json(report)) == report


def test_print_report_renders(report):
    console = Console(record=True, width=120)
    print_report(console, report, label="example")
    text = console.export_text()
    assert "example" in text
    assert "Protein checks" in text
    assert "ATG, CCC, CGC, GGG, TAA" in text


def test_cg_fraction_uses_model_mass():
    dna = DNASequence("ATGCCCGGGCGCTAA")
    assert score_sequence(dna)["mass"]["cg_fraction"] == round(dna.mass.fraction("CG"), 4)


def test_analysis_modules_do_not_depend_on_model():
    from dnaseq.analysis import mass, mutations, parser, protein

    for module in (mass, mutations, parser, protein):
        assert not hasattr(module, "DNASequence")
