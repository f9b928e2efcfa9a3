"""Tests for mass computation and half-up rounding."""
import pytest

from dnaseq.analysis.mass import JUNK_MASS, NUCLEOTIDE_MASS, MassResult, compute_mass, round_half_up


def test_mass_table_is_read_only():
    with pytest.raises(TypeError):
        NUCLEOTIDE_MASS["A"] = 1.0


def test_total_is_rounded_to_one_decimal():
    assert compute_mass("ATG").total == pytest.approx(411.4)


@pytest.mark.parametrize("junk", ["*", "**", "x-!"])
def test_each_junk_character_adds_fixed_mass(junk):
    assert compute_mass("A" + junk + "TG").total == pytest.approx(411.4 + JUNK_MASS * len(junk))


def test_per_nucleotide_mass_excludes_junk():
    result = compute_mass("AA+C")
    assert set(result.per_nucleotide) == {"A", "C"}
    assert result.per_nucleotide["A"] == pytest.approx(2 * 135.128)
    assert result.per_nucleotide["C"] == pytest.approx(111.103)


def test_round_half_up_differs_from_round():
    assert round_half_up(0.25) == pytest.approx(0.3)
    assert round_half_up(0.75) == pytest.approx(0.8)
    assert round_half_up(0.24) == pytest.approx(0.2)


def test_fraction_treats_missing_symbols_as_zero():
    result = MassResult(total=200.0, per_nucleotide={"C": 60.0})
    assert result.fraction("CG") == pytest.approx(0.3)


def test_fraction_of_zero_total():
    assert MassResult(total=0.0).fraction("CG") == 0.0
