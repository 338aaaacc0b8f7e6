"""
Chemformula - Pure Python chemical formula parser.

A zero-dependency library for turning chemical formulas into element
counts and molecular masses.

    >>> from chemformula import parse
    >>> mol = parse("Al2(SO4)3")
    >>> round(mol.mass, 4)
    342.1509

Modules:
    chemformula.elements   - Element data and the periodic table
    chemformula.parser     - Formula scanning and parsing
    chemformula.types      - Molecule and parse results
    chemformula.exceptions - Error kinds and exceptions
"""

import logging

__version__ = "0.1.0"

# Core types
from chemformula.types import ElementFrequency, Molecule, ParseResult

# Parsing
from chemformula.parser import parse, try_parse, parse_result, FormulaParser

# Exceptions
from chemformula.exceptions import (
    ChemError,
    ErrorKind,
    ParseError,
    NullFormulaError,
    FormulaTypeError,
    EmptyFormulaError,
    NestedBracketError,
    UnmatchedBracketError,
    InvalidCharacterError,
    ComponentCaseError,
    UnknownSymbolError,
    ZeroCountError,
)

# Element data
from chemformula.elements import Element, ElementCollection, ElementLookup, PERIODIC_TABLE

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "ElementFrequency", "Molecule", "ParseResult",
    # Parsing
    "parse", "try_parse", "parse_result", "FormulaParser",
    # Exceptions
    "ChemError", "ErrorKind", "ParseError",
    "NullFormulaError", "FormulaTypeError", "EmptyFormulaError",
    "NestedBracketError", "UnmatchedBracketError", "InvalidCharacterError",
    "ComponentCaseError", "UnknownSymbolError", "ZeroCountError",
    # Elements
    "Element", "ElementCollection", "ElementLookup", "PERIODIC_TABLE",
]
