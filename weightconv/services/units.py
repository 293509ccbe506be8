"""
Unit registry for the weight converter.

Four fixed units, each expressed in grams (the base unit).
"""

from enum import Enum
from types import MappingProxyType
from typing import List, Union

from .errors import UnrecognizedUnit


class Unit(str, Enum):
    # Values are the wire tokens accepted on /convert
    GRAM = "gram"
    KILOGRAM = "kilo"
    TON = "ton"
    POUND = "lb"


# Unit -> grams per one unit
# 1 lb = 453.59237 g exactly (international avoirdupois pound)
GRAMS_PER_UNIT = MappingProxyType({
    Unit.GRAM: 1.0,
    Unit.KILOGRAM: 1000.0,
    Unit.TON: 1_000_000.0,
    Unit.POUND: 453.59237,
})

_BY_TOKEN = MappingProxyType({u.value: u for u in Unit})


def supported_tokens() -> List[str]:
    """Accepted wire tokens, in declaration order."""
    return [u.value for u in Unit]


def parse_unit(token: Union[str, Unit]) -> Unit:
    """Map a case-sensitive wire token to a Unit.

    An already resolved Unit is passed through untouched.
    """
    if isinstance(token, Unit):
        return token
    # dict lookup with a non-hashable token would raise TypeError
    if isinstance(token, str) and token in _BY_TOKEN:
        return _BY_TOKEN[token]
    raise UnrecognizedUnit(token, accepted=supported_tokens())


def factor(unit: Unit) -> float:
    """Grams in one `unit`."""
    return GRAMS_PER_UNIT[unit]
