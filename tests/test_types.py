"""Tests for Molecule, ElementFrequency and ParseResult."""

import dataclasses

import pytest

from chemformula import (
    ElementFrequency,
    Molecule,
    ParseResult,
    PERIODIC_TABLE,
    parse,
)
from chemformula.exceptions import (
    ComponentCaseError,
    ErrorKind,
    FormulaTypeError,
    NullFormulaError,
)


class TestElementFrequency:
    """Test ElementFrequency."""

    def test_mass(self):
        freq = ElementFrequency(PERIODIC_TABLE["O"], 3)
        assert freq.mass == pytest.approx(47.9982)

    def test_immutable(self):
        freq = ElementFrequency(PERIODIC_TABLE["O"], 3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            freq.frequency = 4


class TestMolecule:
    """Test Molecule properties and methods."""

    def test_mass_is_sum_of_contributions(self):
        mol = parse("Al2(SO4)3")
        expected = sum(
            f.frequency * f.element.atomic_mass
            for f in mol.element_frequencies.values()
        )
        assert mol.mass == pytest.approx(expected)

    def test_mass_ignores_entry_order(self):
        entries = parse("K4(FeC6N6)").element_frequencies
        forward = Molecule("K4(FeC6N6)", dict(entries))
        backward = Molecule("K4(FeC6N6)", dict(reversed(list(entries.items()))))
        assert forward.mass == backward.mass

    def test_frequencies_are_read_only(self):
        mol = parse("H2O")
        with pytest.raises(TypeError):
            mol.element_frequencies["H"] = ElementFrequency(PERIODIC_TABLE["H"], 3)

    def test_source_dict_is_copied(self):
        source = {"H": ElementFrequency(PERIODIC_TABLE["H"], 2)}
        mol = Molecule("H2", source)
        source["O"] = ElementFrequency(PERIODIC_TABLE["O"], 1)
        assert list(mol) == ["H"]

    def test_immutable(self):
        mol = parse("H2O")
        with pytest.raises(dataclasses.FrozenInstanceError):
            mol.mass = 0.0

    def test_str(self):
        assert str(parse("Ca(OH)2")) == "Ca(OH)2"

    def test_len_iter_contains(self):
        mol = parse("CaCO3")
        assert len(mol) == 3
        assert list(mol) == ["Ca", "C", "O"]
        assert "Ca" in mol
        assert "H" not in mol

    def test_count(self):
        mol = parse("Al2(SO4)3")
        assert mol.count("O") == 12
        assert mol.count("H") == 0

    def test_name_is_not_compared(self):
        water = parse("H2O", name="Water")
        assert water == parse("H2O")
        assert hash(water) == hash(parse("H2O"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            water.name = "Ice"

    def test_equal_and_hashable(self):
        assert parse("H2O") == parse("H2O")
        assert hash(parse("H2O")) == hash(parse("H2O"))
        assert parse("H2O") != parse("OH2")


class TestParseResult:
    """Test the ParseResult container."""

    def test_needs_exactly_one(self):
        with pytest.raises(ValueError):
            ParseResult()
        with pytest.raises(ValueError):
            ParseResult(molecule=parse("H"), error=NullFormulaError())

    def test_ok(self):
        assert ParseResult(molecule=parse("H")).ok
        assert not ParseResult(error=ComponentCaseError("h")).ok

    def test_unwrap(self):
        mol = parse("H")
        assert ParseResult(molecule=mol).unwrap() is mol
        with pytest.raises(ComponentCaseError):
            ParseResult(error=ComponentCaseError("h")).unwrap()


class TestExceptions:
    """Test the exception hierarchy."""

    def test_wrong_type_is_type_error(self):
        err = FormulaTypeError(b"H2O")
        assert isinstance(err, TypeError)
        assert err.message == "Formula should be a str, not bytes!"

    def test_null_is_type_error(self):
        assert isinstance(NullFormulaError(), TypeError)
        assert NullFormulaError().kind is ErrorKind.NULL_INPUT

    def test_error_kind_str(self):
        assert str(ErrorKind.NESTED_BRACKET) == "nested_bracket"

    def test_component_error_has_no_caret(self):
        err = ComponentCaseError("lowerCase")
        assert str(err) == "Component: lowerCase must start with an uppercase letter!"
        assert err.position is None
