"""
Core data types for parsed formulas.

This module defines the immutable results of a parse: ElementFrequency,
Molecule, and the ParseResult wrapper that carries either a molecule or
the error that stopped the parse.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping

from .elements import Element
from .exceptions import ChemError


@dataclass(frozen=True, slots=True)
class ElementFrequency:
    """Total occurrences of one element across a formula.
    
    Attributes:
        element: The element.
        frequency: Number of atoms of this element (at least 1).
    """
    
    element: Element
    frequency: int
    
    @property
    def mass(self) -> float:
        """Mass contribution of this element."""
        return self.frequency * self.element.atomic_mass


@dataclass(frozen=True, slots=True)
class Molecule:
    """A parsed chemical formula.
    
    Attributes:
        chemical_formula: The formula exactly as given to the parser.
        element_frequencies: Read-only mapping of symbol to ElementFrequency,
            ordered by first occurrence in the formula.
        name: Optional name of the molecule, e.g. "Water". Not used in
            equality or hashing.
        mass: Molecular mass, the sum of frequency * atomic mass.
    
    Example:
        >>> from chemformula import parse
        >>> mol = parse("H2O")
        >>> [(s, f.frequency) for s, f in mol.element_frequencies.items()]
        [('H', 2), ('O', 1)]
    """
    
    chemical_formula: str
    element_frequencies: Mapping[str, ElementFrequency] = field(hash=False)
    name: str | None = field(default=None, compare=False)
    mass: float = field(init=False)
    
    def __post_init__(self) -> None:
        frequencies = MappingProxyType(dict(self.element_frequencies))
        object.__setattr__(self, "element_frequencies", frequencies)
        object.__setattr__(self, "mass", math.fsum(f.mass for f in frequencies.values()))
    
    def count(self, symbol: str) -> int:
        """Number of atoms of an element, 0 if absent."""
        entry = self.element_frequencies.get(symbol)
        return entry.frequency if entry else 0
    
    def __str__(self) -> str:
        return self.chemical_formula
    
    def __len__(self) -> int:
        return len(self.element_frequencies)
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.element_frequencies)
    
    def __contains__(self, symbol: object) -> bool:
        return symbol in self.element_frequencies


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of a parse: exactly one of molecule or error is set."""
    
    molecule: Molecule | None = None
    error: ChemError | None = None
    
    def __post_init__(self) -> None:
        if (self.molecule is None) == (self.error is None):
            raise ValueError("ParseResult needs exactly one of molecule or error")
    
    @property
    def ok(self) -> bool:
        return self.error is None
    
    def unwrap(self) -> Molecule:
        """Return the molecule, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.molecule
