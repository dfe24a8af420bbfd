"""
Passion level enumeration and its symbol/ordinal codec.

Clients and storage use the ordinal (0-3); the symbolic names are what
people type and read. Conversion happens at the write boundary
(symbol -> ordinal) and wherever a readable label is wanted.
"""

# Standard library imports
from enum import IntEnum
from typing import Any, Dict, Union


class PassionLevelError(ValueError):
    """Raised for a symbol or ordinal outside the four passion levels."""


class PassionLevel(IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    VERY_HIGH = 3

    @property
    def symbol(self) -> str:
        return _LEVEL_TO_SYMBOL[self]


_SYMBOL_TO_LEVEL: Dict[str, PassionLevel] = {
    "low": PassionLevel.LOW,
    "medium": PassionLevel.MEDIUM,
    "high": PassionLevel.HIGH,
    "very-high": PassionLevel.VERY_HIGH,
}
_LEVEL_TO_SYMBOL: Dict[PassionLevel, str] = {
    level: symbol for symbol, level in _SYMBOL_TO_LEVEL.items()
}

SYMBOLS = tuple(_SYMBOL_TO_LEVEL)


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a passion level
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_passion_level_ordinal(value: Any) -> bool:
    """True for 0, 1, 2, 3 (integral floats included)."""
    if not _is_number(value):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return int(value) in _LEVEL_TO_SYMBOL


def is_passion_level_symbol(value: Any) -> bool:
    return isinstance(value, str) and value in _SYMBOL_TO_LEVEL


def to_ordinal(symbol: str) -> int:
    """
    Convert a symbolic passion level to its ordinal.
    
    Args:
        symbol: One of ``low``, ``medium``, ``high``, ``very-high``
        
    Returns:
        Ordinal 0-3
        
    Raises:
        PassionLevelError: If the symbol is not a passion level
    """
    if not is_passion_level_symbol(symbol):
        raise PassionLevelError(f"Unknown passion level: {symbol!r}")
    return int(_SYMBOL_TO_LEVEL[symbol])


def to_symbol(value: Any) -> Union[str, Any]:
    """
    Convert an ordinal passion level to its symbol.
    
    Non-numeric input is returned unchanged, so already-symbolic values
    pass straight through.
    
    Raises:
        PassionLevelError: If a numeric value is not one of 0-3
    """
    if not _is_number(value):
        return value
    if not is_passion_level_ordinal(value):
        raise PassionLevelError(f"Passion level out of range: {value!r}")
    return PassionLevel(int(value)).symbol
