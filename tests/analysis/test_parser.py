"""Tests for junk stripping, codon extraction and codon/enzyme validity."""
import pytest

from dnaseq.analysis.parser import (
    first_codon,
    is_valid_codon,
    is_valid_enzyme,
    iter_codons,
    last_codon,
    load_fasta,
    strip_junk,
)


# ── strip_junk / iter_codons ─────────────────────────────────────────────────

def test_strip_junk():
    assert strip_junk("A+T-G x") == "ATG"


def test_strip_junk_is_case_sensitive():
    assert strip_junk("atgATG") == "ATG"


def test_iter_codons_skips_junk():
    assert list(iter_codons("AT+GC*CA")) == ["ATG", "CCA"]


def test_iter_codons_keeps_duplicates_in_order():
    assert list(iter_codons("AAACCCAAA")) == ["AAA", "CCC", "AAA"]


def test_iter_codons_junk_only():
    assert list(iter_codons("+-*")) == []


def test_iter_codons_unfinished_raises():
    with pytest.raises(ValueError, match="Unfinished codon"):
        list(iter_codons("ATGC"))


# ── first_codon / last_codon ─────────────────────────────────────────────────

def test_first_codon_skips_junk():
    assert first_codon("-A+TGCCC") == "ATG"


def test_last_codon_skips_junk():
    assert last_codon("ATGCCCT+A-A!") == "TAA"


def test_first_and_last_codon_too_short():
    assert first_codon("A+T") is None
    assert last_codon("A+T") is None


# ── validity ─────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("codon,expected", [
    ("ATG", True),
    ("TTT", True),
    ("AT", False),
    ("ATGC", False),
    ("A+G", False),
    ("atg", False),
    ("", False),
    (None, False),
])
def test_is_valid_codon(codon, expected):
    assert is_valid_codon(codon) is expected


@pytest.mark.parametrize("enzyme,expected", [
    ("GGGCAT", True),
    ("ATG", True),
    ("GGGCA", False),
    ("GG+CAT", False),
    ("", False),
    (None, False),
])
def test_is_valid_enzyme(enzyme, expected):
    assert is_valid_enzyme(enzyme) is expected


# ── load_fasta ───────────────────────────────────────────────────────────────

def test_load_fasta_strips_headers_and_whitespace(tmp_path):
    path = tmp_path / "seq.fa"
    path.write_text(">example sequence\nATGCCC\n  GGGTAA  \n")
    assert load_fasta(path) == "ATGCCCGGGTAA"


def test_load_fasta_keeps_lowercase_as_junk(tmp_path):
    path = tmp_path / "seq.fa"
    path.write_text(">lower\natg\n")
    raw = load_fasta(path)
    assert raw == "atg"
    assert strip_junk(raw) == ""
