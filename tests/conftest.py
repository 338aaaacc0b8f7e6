"""Test configuration and fixtures for chemformula tests."""

import pytest

# RDKit is used as reference for element data and molecular weights
from rdkit import Chem
from rdkit.Chem import Descriptors, rdMolDescriptors

from chemformula import Element, ElementCollection


def rdkit_formula(smiles: str) -> str:
    """Get RDKit's molecular formula (Hill order) for a SMILES string.
    
    Args:
        smiles: Input SMILES string.
        
    Returns:
        Molecular formula such as "C2H6O".
    """
    mol = Chem.MolFromSmiles(smiles)
    if mol is None:
        raise ValueError(f"RDKit could not parse: {smiles}")
    return rdMolDescriptors.CalcMolFormula(mol)


def rdkit_atom_counts(smiles: str) -> dict[str, int]:
    """Count atoms per element, including implicit hydrogens."""
    mol = Chem.AddHs(Chem.MolFromSmiles(smiles))
    counts: dict[str, int] = {}
    for atom in mol.GetAtoms():
        counts[atom.GetSymbol()] = counts.get(atom.GetSymbol(), 0) + 1
    return counts


def rdkit_mol_weight(smiles: str) -> float:
    """Get RDKit's average molecular weight for a SMILES string."""
    return Descriptors.MolWt(Chem.MolFromSmiles(smiles))


@pytest.fixture
def rdkit_periodic_table():
    """RDKit's periodic table."""
    return Chem.GetPeriodicTable()


@pytest.fixture
def reference_smiles() -> list[str]:
    """Neutral molecules whose formulas RDKit can produce."""
    return [
        # Ethanol
        "CCO",
        # Glycine
        "NCC(=O)O",
        # Aspirin
        "CC(=O)OC1=CC=CC=C1C(=O)O",
        # Caffeine
        "CN1C=NC2=C1C(=O)N(C(=O)N2C)C",
        # Ibuprofen
        "CC(C)Cc1ccc(cc1)C(C)C(=O)O",
        # Chloroform
        "ClC(Cl)Cl",
        # Dimethyl sulfoxide
        "CS(=O)C",
        # Benzene
        "c1ccccc1",
    ]


@pytest.fixture
def valid_formulas() -> list[str]:
    """Well-formed formulas."""
    return [
        "H",
        "He",
        "H2O",
        "CaCO3",
        "H2NCH2COOH",
        "Al2(SO4)3",
        "Ca(OH)2",
        "(NH4)2SO4",
        "Mg3(PO4)2",
        "C6H12O6",
        "K4(FeC6N6)",
    ]


@pytest.fixture
def invalid_formulas() -> list[str | None]:
    """Formulas that fail to parse, one per error kind."""
    return [
        None,
        "",
        " ",
        "   ",
        "((Nested)Parentheses)Inside",
        "Formula(With(Nested)Parentheses)Inside)",
        "FormulaWithUnmatchedClosingBracket)",
        "FormulaWithInvalidCharacter!",
        "(lowerCase)ComponentStart",
        "(1Number)ComponentStart",
        "Xx2O",
    ]


@pytest.fixture
def tiny_table() -> ElementCollection:
    """A small custom element collection."""
    return ElementCollection([
        Element(1, "Hydrogen", "H", 1.0),
        Element(8, "Oxygen", "O", 16.0),
        Element(999, "Unobtainium", "Uo", 100.0),
    ])
