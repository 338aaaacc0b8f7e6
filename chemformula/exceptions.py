"""
Custom exceptions for the chemformula library.

Every failure of a formula parse is a ``ChemError`` tagged with an
``ErrorKind``, so callers can branch on ``err.kind`` or catch the concrete
subclass.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Kinds of formula parse failure."""

    NULL_INPUT = "null_input"
    INVALID_TYPE = "invalid_type"
    EMPTY_INPUT = "empty_input"
    NESTED_BRACKET = "nested_bracket"
    UNMATCHED_CLOSE_BRACKET = "unmatched_close_bracket"
    INVALID_CHARACTER = "invalid_character"
    COMPONENT_CASE = "component_case"
    UNKNOWN_SYMBOL = "unknown_symbol"
    ZERO_COUNT = "zero_count"

    def __str__(self) -> str:
        return self.value


class ChemError(Exception):
    """Base exception for all chemistry-related errors."""

    kind: ErrorKind | None = None


class NullFormulaError(ChemError, TypeError):
    """The formula was ``None``."""

    kind = ErrorKind.NULL_INPUT

    def __init__(self) -> None:
        self.message = "Formula should not be None!"
        super().__init__(self.message)


class FormulaTypeError(ChemError, TypeError):
    """The formula was neither a string nor ``None``."""

    kind = ErrorKind.INVALID_TYPE

    def __init__(self, formula: object) -> None:
        self.message = f"Formula should be a str, not {type(formula).__name__}!"
        self.formula = formula
        super().__init__(self.message)


class EmptyFormulaError(ChemError, ValueError):
    """The formula was empty or contained only whitespace."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, formula: str) -> None:
        self.message = "Formula should not be empty or all whitespace!"
        self.formula = formula
        super().__init__(self.message)


class ParseError(ChemError):
    """Error during formula parsing.
    
    Attributes:
        message: Description of what went wrong.
        formula: The original formula being parsed.
        position: 1-based character position of the error in the formula.
    """
    
    def __init__(
        self,
        message: str,
        formula: str | None = None,
        position: int | None = None,
    ) -> None:
        self.message = message
        self.formula = formula
        self.position = position
        
        # Caret under the offending character
        parts = [message]
        if formula is not None and position is not None:
            parts.append(f"\n  {formula}")
            parts.append(f"\n  {' ' * (position - 1)}^")
        
        super().__init__("".join(parts))


class NestedBracketError(ParseError):
    """An opening bracket appeared inside a bracketed group."""

    kind = ErrorKind.NESTED_BRACKET

    def __init__(self, formula: str, position: int) -> None:
        super().__init__(
            f"Formula: {formula} contains an unexpected opening bracket at "
            f"position {position}! Nested parentheses are not supported.",
            formula,
            position,
        )


class UnmatchedBracketError(ParseError):
    """A closing bracket appeared with no open group."""

    kind = ErrorKind.UNMATCHED_CLOSE_BRACKET

    def __init__(self, formula: str, position: int) -> None:
        super().__init__(
            f"Formula: {formula} contains an unexpected closing bracket at "
            f"position {position}!",
            formula,
            position,
        )


class InvalidCharacterError(ParseError):
    """A character outside letters, digits and brackets.
    
    Attributes:
        character: The rejected character.
    """

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, formula: str, position: int) -> None:
        self.character = formula[position - 1]
        super().__init__(
            f"Formula: {formula} contains an invalid character at position {position}!",
            formula,
            position,
        )


class ComponentCaseError(ParseError):
    """A component did not start with an uppercase letter.
    
    Attributes:
        component: Text of the offending component.
    """

    kind = ErrorKind.COMPONENT_CASE

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(f"Component: {component} must start with an uppercase letter!")


class UnknownSymbolError(ParseError):
    """A parsed symbol is missing from the element lookup.
    
    Attributes:
        symbol: The unrecognized element symbol.
    """

    kind = ErrorKind.UNKNOWN_SYMBOL

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unknown element symbol: {symbol}")


class ZeroCountError(ParseError):
    """A symbol or bracketed group was given a count of zero.
    
    Attributes:
        symbol: The element whose count came out as zero.
        component: Text of the component it appeared in.
    """

    kind = ErrorKind.ZERO_COUNT

    def __init__(self, symbol: str, component: str) -> None:
        self.symbol = symbol
        self.component = component
        super().__init__(f"Component: {component} gives element {symbol} a count of zero!")
