"""
Chemical formula parser.

This module converts formula strings such as ``"Al2(SO4)3"`` into Molecule
objects. Parsing runs in two passes over the input:

    - The component scanner splits the formula into components, one per
      run of letters and digits outside brackets or inside one bracket
      pair, each with the multiplier that follows its closing bracket.
    - The component analyzer splits each component into element symbols
      and their local counts.

Both passes are generators, so components are analyzed as soon as they
are scanned and the first problem in reading order is the one reported.
Failures are yielded as ParseError values rather than raised; the
aggregator returns them in a ParseResult and only ``parse()`` raises.

Grammar:
    formula     := component*
    component   := bracketed | symbolGroup
    bracketed   := '(' symbolGroup ')' digits?
    symbolGroup := (Uppercase Lowercase* digits?)+

Nested brackets are not supported.
"""

from __future__ import annotations

import logging
from typing import Iterator, NamedTuple

from chemformula.elements import PERIODIC_TABLE, Element, ElementLookup
from chemformula.exceptions import (
    ChemError,
    ComponentCaseError,
    EmptyFormulaError,
    FormulaTypeError,
    InvalidCharacterError,
    NestedBracketError,
    NullFormulaError,
    ParseError,
    UnknownSymbolError,
    UnmatchedBracketError,
    ZeroCountError,
)
from chemformula.types import ElementFrequency, Molecule, ParseResult

logger = logging.getLogger(__name__)


class Component(NamedTuple):
    """A run of symbols and the multiplier applied to all of them."""
    
    text: str
    multiplier: int


def read_multiplier(text: str, cursor: int) -> tuple[int, int]:
    """Read the run of decimal digits starting at cursor.
    
    Args:
        text: String to read from.
        cursor: Index of the first character to examine.
    
    Returns:
        Tuple of (multiplier, cursor after the last digit). If text[cursor]
        is not a digit, returns (1, cursor).
    
    Example:
        >>> read_multiplier("SO42", 2)
        (42, 4)
        >>> read_multiplier("SO", 1)
        (1, 1)
    """
    end = cursor
    while end < len(text) and text[end].isdecimal():
        end += 1
    if end == cursor:
        return 1, cursor
    return int(text[cursor:end]), end


def scan_components(formula: str) -> Iterator[Component | ParseError]:
    """Split a formula into components.
    
    Yields components left to right. On invalid input a ParseError is
    yielded as the last item. An opening bracket that is never closed does
    not fail: everything after it becomes one trailing component.
    
    Args:
        formula: Non-empty formula string.
    
    Yields:
        Component objects, or a single terminal ParseError.
    """
    buffer: list[str] = []
    in_brackets = False
    open_position = 0
    i = 0
    
    while i < len(formula):
        char = formula[i]
        
        if char.isalpha() or char.isdecimal():
            buffer.append(char)
            i += 1
        
        elif char == "(":
            if in_brackets:
                yield NestedBracketError(formula, i + 1)
                return
            if buffer:
                yield Component("".join(buffer), 1)
                buffer = []
            in_brackets = True
            open_position = i + 1
            i += 1
        
        elif char == ")":
            if not in_brackets:
                yield UnmatchedBracketError(formula, i + 1)
                return
            in_brackets = False
            multiplier, i = read_multiplier(formula, i + 1)
            yield Component("".join(buffer), multiplier)
            buffer = []
        
        else:
            yield InvalidCharacterError(formula, i + 1)
            return
    
    if in_brackets:
        logger.warning(
            "Formula %s has an unclosed bracket at position %d; "
            "treating the rest as one component",
            formula, open_position,
        )
    
    if buffer:
        yield Component("".join(buffer), 1)


def analyze_component(text: str) -> Iterator[tuple[str, int] | ParseError]:
    """Split a component into (symbol, local count) pairs.
    
    An uppercase letter starts a new symbol, lowercase letters extend it,
    and a digit run ends it with that count. Symbols without digits count 1.
    
    Args:
        text: Component text from scan_components().
    
    Yields:
        (symbol, count) tuples, or a single ComponentCaseError if the text
        does not start with an uppercase letter.
    """
    if not text:
        return
    
    first = text[0]
    if not (first.isalpha() and first.isupper()):
        yield ComponentCaseError(text)
        return
    
    symbol = first
    i = 1
    while i < len(text):
        char = text[i]
        if char.isupper():
            if symbol:
                yield symbol, 1
            symbol = char
            i += 1
        elif char.isdecimal():
            count, i = read_multiplier(text, i)
            yield symbol, count
            symbol = ""
        else:
            symbol += char
            i += 1
    
    if symbol:
        yield symbol, 1


class FormulaParser:
    """Chemical formula parser bound to an element lookup.
    
    The parser keeps no state between calls, so one instance can be shared
    between threads as long as the lookup is not modified.
    
    Example:
        >>> parser = FormulaParser()
        >>> mol = parser.parse("CaCO3")
        >>> round(mol.mass, 4)
        100.0869
    
    For convenience, use the module-level `parse()` function:
        >>> from chemformula import parse
        >>> mol = parse("CaCO3")
    """
    
    __slots__ = ("_elements",)
    
    def __init__(self, elements: ElementLookup = PERIODIC_TABLE) -> None:
        """Initialize parser with an element lookup.
        
        Args:
            elements: Symbol -> Element lookup (default: the periodic table).
        """
        self._elements = elements
    
    @property
    def elements(self) -> ElementLookup:
        return self._elements
    
    def parse_result(self, formula: str | None, name: str | None = None) -> ParseResult:
        """Parse a formula without raising.
        
        Args:
            formula: Formula to parse.
            name: Optional name stored on the Molecule.
        
        Returns:
            ParseResult with either the Molecule or the ChemError that
            stopped the parse.
        """
        if formula is None:
            return ParseResult(error=NullFormulaError())
        if not isinstance(formula, str):
            return ParseResult(error=FormulaTypeError(formula))
        if not formula.strip():
            return ParseResult(error=EmptyFormulaError(formula))
        
        counts: dict[str, int] = {}
        resolved: dict[str, Element] = {}
        
        for component in scan_components(formula):
            if isinstance(component, ChemError):
                return ParseResult(error=component)
            
            logger.debug("Component %s x%d", component.text, component.multiplier)
            for pair in analyze_component(component.text):
                if isinstance(pair, ChemError):
                    return ParseResult(error=pair)
                
                symbol, count = pair
                contribution = component.multiplier * count
                if contribution == 0:
                    return ParseResult(error=ZeroCountError(symbol, component.text))
                if symbol in counts:
                    counts[symbol] += contribution
                    continue
                
                try:
                    resolved[symbol] = self._elements[symbol]
                except KeyError:
                    return ParseResult(error=UnknownSymbolError(symbol))
                counts[symbol] = contribution
        
        frequencies = {
            symbol: ElementFrequency(resolved[symbol], count)
            for symbol, count in counts.items()
        }
        logger.debug("Parsed %s: %s", formula, counts)
        return ParseResult(molecule=Molecule(formula, frequencies, name))
    
    def parse(self, formula: str | None, name: str | None = None) -> Molecule:
        """Parse a formula into a Molecule.
        
        Args:
            formula: Formula to parse.
            name: Optional name stored on the Molecule.
        
        Returns:
            Parsed Molecule object.
        
        Raises:
            NullFormulaError: If formula is None.
            FormulaTypeError: If formula is not a string.
            EmptyFormulaError: If formula is empty or all whitespace.
            ParseError: If the formula is malformed, names an unknown element,
                or gives an element a count of zero.
        """
        return self.parse_result(formula, name).unwrap()
    
    def try_parse(self, formula: str | None) -> tuple[bool, Molecule | None]:
        """Parse a formula, reporting failure instead of raising.
        
        Returns:
            (True, molecule) on success, (False, None) on any parse error.
        """
        result = self.parse_result(formula)
        if not result.ok:
            logger.debug("Could not parse %r: %s", formula, result.error)
            return False, None
        return True, result.molecule


def parse(
    formula: str | None,
    elements: ElementLookup = PERIODIC_TABLE,
    name: str | None = None,
) -> Molecule:
    """Parse a chemical formula into a Molecule.
    
    This is a convenience function that creates a FormulaParser and
    calls parse().
    
    Args:
        formula: Formula to parse, e.g. "Al2(SO4)3".
        elements: Symbol -> Element lookup (default: the periodic table).
        name: Optional name stored on the Molecule.
    
    Returns:
        Parsed Molecule object.
    
    Raises:
        NullFormulaError: If formula is None.
        FormulaTypeError: If formula is not a string.
        EmptyFormulaError: If formula is empty or all whitespace.
        ParseError: If the formula is malformed, names an unknown element,
            or gives an element a count of zero.
    
    Example:
        >>> mol = parse("Al2(SO4)3")
        >>> {s: f.frequency for s, f in mol.element_frequencies.items()}
        {'Al': 2, 'S': 3, 'O': 12}
    """
    return FormulaParser(elements).parse(formula, name)


def try_parse(
    formula: str | None,
    elements: ElementLookup = PERIODIC_TABLE,
) -> tuple[bool, Molecule | None]:
    """Parse a chemical formula without raising.
    
    Returns:
        (True, molecule) on success, (False, None) on any parse error.
    """
    return FormulaParser(elements).try_parse(formula)


def parse_result(
    formula: str | None,
    elements: ElementLookup = PERIODIC_TABLE,
    name: str | None = None,
) -> ParseResult:
    """Parse a chemical formula into a ParseResult."""
    return FormulaParser(elements).parse_result(formula, name)
