"""
Chemical elements and the periodic table.

This module provides element data and the lookup collections the formula
parser resolves symbols against.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Iterator, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class Element:
    """Immutable element data.
    
    Attributes:
        atomic_number: Atomic number (proton count).
        name: Full (English) element name.
        symbol: Element symbol (e.g., "C", "Cl"), case-sensitive.
        atomic_mass: Standard atomic mass in g/mol.
    """
    
    atomic_number: int
    name: str
    symbol: str
    atomic_mass: float
    
    def __str__(self) -> str:
        return f"{self.atomic_number} {self.name} ({self.symbol})"
    
    @classmethod
    def from_symbol(cls, symbol: str) -> "Element | None":
        """Look up element by symbol in the periodic table (case-sensitive)."""
        return PERIODIC_TABLE.get(symbol)
    
    @classmethod
    def from_atomic_number(cls, num: int) -> "Element | None":
        """Look up element by atomic number in the periodic table."""
        try:
            return PERIODIC_TABLE.by_atomic_number(num)
        except KeyError:
            return None


@runtime_checkable
class ElementLookup(Protocol):
    """Protocol for symbol -> element lookups used by the parser.
    
    Implementations raise ``KeyError`` for unknown symbols. A plain
    ``dict[str, Element]`` satisfies it.
    """
    
    def __getitem__(self, symbol: str) -> Element:
        ...


class ElementCollection:
    """Ordered collection of elements indexed by symbol and atomic number.
    
    Symbols and atomic numbers must be unique within a collection. Once
    frozen, the collection is read-only and safe to share between threads.
    
    Example:
        >>> table = ElementCollection([Element(1, "Hydrogen", "H", 1.00794)])
        >>> table["H"].atomic_mass
        1.00794
    """
    
    __slots__ = ("_elements", "_by_symbol", "_by_number", "_frozen")
    
    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._elements: list[Element] = []
        self._by_symbol: dict[str, Element] = {}
        self._by_number: dict[int, Element] = {}
        self._frozen = False
        for element in elements:
            self.add(element)
    
    @property
    def frozen(self) -> bool:
        """Whether the collection rejects modification."""
        return self._frozen
    
    def freeze(self) -> "ElementCollection":
        """Make the collection read-only and return it."""
        self._frozen = True
        return self
    
    def _check_mutable(self) -> None:
        if self._frozen:
            raise TypeError("ElementCollection is frozen")
    
    def add(self, element: Element) -> None:
        """Add an element.
        
        Raises:
            TypeError: If the collection is frozen.
            ValueError: If the symbol or atomic number is already present.
        """
        self._check_mutable()
        if element.symbol in self._by_symbol:
            raise ValueError(f"Duplicate element symbol: {element.symbol}")
        if element.atomic_number in self._by_number:
            raise ValueError(f"Duplicate atomic number: {element.atomic_number}")
        self._elements.append(element)
        self._by_symbol[element.symbol] = element
        self._by_number[element.atomic_number] = element
    
    def remove(self, element: Element) -> bool:
        """Remove an element, returning False if it was not present."""
        self._check_mutable()
        if element not in self._elements:
            return False
        self._elements.remove(element)
        del self._by_symbol[element.symbol]
        del self._by_number[element.atomic_number]
        return True
    
    def clear(self) -> None:
        """Remove all elements."""
        self._check_mutable()
        self._elements.clear()
        self._by_symbol.clear()
        self._by_number.clear()
    
    def __getitem__(self, symbol: str) -> Element:
        """Look up an element by symbol.
        
        Raises:
            KeyError: If no element has this symbol.
        """
        return self._by_symbol[symbol]
    
    def get(self, symbol: str, default: Element | None = None) -> Element | None:
        """Look up an element by symbol, returning default if absent."""
        return self._by_symbol.get(symbol, default)
    
    def by_atomic_number(self, atomic_number: int) -> Element:
        """Look up an element by atomic number.
        
        Raises:
            KeyError: If no element has this atomic number.
        """
        return self._by_number[atomic_number]
    
    def by_name(self, name: str) -> Element:
        """Look up an element by name, ignoring case.
        
        Raises:
            KeyError: If no element has this name.
        """
        wanted = name.casefold()
        for element in self._elements:
            if element.name.casefold() == wanted:
                return element
        raise KeyError(name)
    
    def by_atomic_mass(self, atomic_mass: float) -> Element:
        """Look up the single element with exactly this atomic mass.
        
        Raises:
            KeyError: If no element has this mass.
            ValueError: If several elements share this mass.
        """
        matches = [e for e in self._elements if e.atomic_mass == atomic_mass]
        if not matches:
            raise KeyError(atomic_mass)
        if len(matches) > 1:
            symbols = ", ".join(e.symbol for e in matches)
            raise ValueError(f"Atomic mass {atomic_mass} is shared by: {symbols}")
        return matches[0]
    
    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_symbol
        return item in self._elements
    
    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)
    
    def __len__(self) -> int:
        return len(self._elements)
    
    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"ElementCollection({len(self._elements)} elements{state})"


# Standard atomic masses for the 118 known elements
_ELEMENTS_DATA: Final[list[tuple[int, str, str, float]]] = [
    # (atomic_number, symbol, name, atomic_mass)
    (1, "H", "Hydrogen", 1.00794),
    (2, "He", "Helium", 4.002602),
    (3, "Li", "Lithium", 6.941),
    (4, "Be", "Beryllium", 9.012182),
    (5, "B", "Boron", 10.811),
    (6, "C", "Carbon", 12.0107),
    (7, "N", "Nitrogen", 14.0067),
    (8, "O", "Oxygen", 15.9994),
    (9, "F", "Fluorine", 18.9984032),
    (10, "Ne", "Neon", 20.1797),
    (11, "Na", "Sodium", 22.98976928),
    (12, "Mg", "Magnesium", 24.305),
    (13, "Al", "Aluminium", 26.9815386),
    (14, "Si", "Silicon", 28.0855),
    (15, "P", "Phosphorus", 30.973762),
    (16, "S", "Sulfur", 32.065),
    (17, "Cl", "Chlorine", 35.453),
    (18, "Ar", "Argon", 39.948),
    (19, "K", "Potassium", 39.0983),
    (20, "Ca", "Calcium", 40.078),
    (21, "Sc", "Scandium", 44.955912),
    (22, "Ti", "Titanium", 47.867),
    (23, "V", "Vanadium", 50.9415),
    (24, "Cr", "Chromium", 51.9961),
    (25, "Mn", "Manganese", 54.938045),
    (26, "Fe", "Iron", 55.845),
    (27, "Co", "Cobalt", 58.933195),
    (28, "Ni", "Nickel", 58.6934),
    (29, "Cu", "Copper", 63.546),
    (30, "Zn", "Zinc", 65.409),
    (31, "Ga", "Gallium", 69.723),
    (32, "Ge", "Germanium", 72.64),
    (33, "As", "Arsenic", 74.9216),
    (34, "Se", "Selenium", 78.96),
    (35, "Br", "Bromine", 79.904),
    (36, "Kr", "Krypton", 83.798),
    (37, "Rb", "Rubidium", 85.4678),
    (38, "Sr", "Strontium", 87.62),
    (39, "Y", "Yttrium", 88.90585),
    (40, "Zr", "Zirconium", 91.224),
    (41, "Nb", "Niobium", 92.90638),
    (42, "Mo", "Molybdenum", 95.94),
    (43, "Tc", "Technetium", 98.9063),
    (44, "Ru", "Ruthenium", 101.07),
    (45, "Rh", "Rhodium", 102.9055),
    (46, "Pd", "Palladium", 106.42),
    (47, "Ag", "Silver", 107.8682),
    (48, "Cd", "Cadmium", 112.411),
    (49, "In", "Indium", 114.818),
    (50, "Sn", "Tin", 118.71),
    (51, "Sb", "Antimony", 121.76),
    (52, "Te", "Tellurium", 127.6),
    (53, "I", "Iodine", 126.90447),
    (54, "Xe", "Xenon", 131.293),
    (55, "Cs", "Caesium", 132.9054519),
    (56, "Ba", "Barium", 137.327),
    (57, "La", "Lanthanum", 138.90547),
    (58, "Ce", "Cerium", 140.116),
    (59, "Pr", "Praseodymium", 140.90765),
    (60, "Nd", "Neodymium", 144.242),
    (61, "Pm", "Promethium", 146.9151),
    (62, "Sm", "Samarium", 150.36),
    (63, "Eu", "Europium", 151.964),
    (64, "Gd", "Gadolinium", 157.25),
    (65, "Tb", "Terbium", 158.92535),
    (66, "Dy", "Dysprosium", 162.5),
    (67, "Ho", "Holmium", 164.93032),
    (68, "Er", "Erbium", 167.259),
    (69, "Tm", "Thulium", 168.93421),
    (70, "Yb", "Ytterbium", 173.04),
    (71, "Lu", "Lutetium", 174.967),
    (72, "Hf", "Hafnium", 178.49),
    (73, "Ta", "Tantalum", 180.9479),
    (74, "W", "Tungsten", 183.84),
    (75, "Re", "Rhenium", 186.207),
    (76, "Os", "Osmium", 190.23),
    (77, "Ir", "Iridium", 192.217),
    (78, "Pt", "Platinum", 195.084),
    (79, "Au", "Gold", 196.966569),
    (80, "Hg", "Mercury", 200.59),
    (81, "Tl", "Thallium", 204.3833),
    (82, "Pb", "Lead", 207.2),
    (83, "Bi", "Bismuth", 208.9804),
    (84, "Po", "Polonium", 208.9824),
    (85, "At", "Astatine", 209.9871),
    (86, "Rn", "Radon", 222.0176),
    (87, "Fr", "Francium", 223.0197),
    (88, "Ra", "Radium", 226.0254),
    (89, "Ac", "Actinium", 227.0278),
    (90, "Th", "Thorium", 232.03806),
    (91, "Pa", "Protactinium", 231.03588),
    (92, "U", "Uranium", 238.02891),
    (93, "Np", "Neptunium", 237.0482),
    (94, "Pu", "Plutonium", 244.0642),
    (95, "Am", "Americium", 243.0614),
    (96, "Cm", "Curium", 247.0703),
    (97, "Bk", "Berkelium", 247.0703),
    (98, "Cf", "Californium", 251.0796),
    (99, "Es", "Einsteinium", 252.0829),
    (100, "Fm", "Fermium", 257.0951),
    (101, "Md", "Mendelevium", 258.0986),
    (102, "No", "Nobelium", 259.1009),
    (103, "Lr", "Lawrencium", 260.1053),
    (104, "Rf", "Rutherfordium", 261.1087),
    (105, "Db", "Dubnium", 262.1138),
    (106, "Sg", "Seaborgium", 263.1182),
    (107, "Bh", "Bohrium", 262.1229),
    (108, "Hs", "Hassium", 265.0),
    (109, "Mt", "Meitnerium", 266.0),
    (110, "Ds", "Darmstadtium", 269.0),
    (111, "Rg", "Roentgenium", 272.0),
    (112, "Cn", "Copernicium", 285.0),
    (113, "Nh", "Nihonium", 286.0),
    (114, "Fl", "Flerovium", 289.0),
    (115, "Mc", "Moscovium", 290.0),
    (116, "Lv", "Livermorium", 293.0),
    (117, "Ts", "Tennessine", 294.0),
    (118, "Og", "Oganesson", 294.0),
]

# Frozen at import so parses can share it without locking
PERIODIC_TABLE: Final[ElementCollection] = ElementCollection(
    Element(num, name, sym, mass)
    for num, sym, name, mass in _ELEMENTS_DATA
).freeze()
