"""
Conversion service.

Validates a conversion request and converts the quantity between two
weight units through the gram-based registry.
"""

import logging
import math
import re
from typing import Any, Union

from .errors import ConversionError, InvalidQuantity, UnrecognizedUnit
from .units import Unit, factor, parse_unit

logger = logging.getLogger(__name__)

# JSON number grammar: no underscores, padding, hex or leading "+"
_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")

__all__ = [
    "ConversionError",
    "ConversionResult",
    "InvalidQuantity",
    "UnrecognizedUnit",
    "convert",
    "execute",
]


class ConversionResult:
    def __init__(self, value: float, from_unit: Unit, to_unit: Unit):
        self.value = value
        self.from_unit = from_unit
        self.to_unit = to_unit


def _coerce_quantity(quantity: Any) -> float:
    """Return `quantity` as a finite float or raise InvalidQuantity."""
    if quantity is None:
        raise InvalidQuantity(quantity, "quantity is required")
    # bool is an int subclass, but true/false is not an amount
    if isinstance(quantity, bool):
        raise InvalidQuantity(quantity, "must be a number")

    if isinstance(quantity, (int, float)):
        try:
            value = float(quantity)
        except OverflowError:
            raise InvalidQuantity(quantity, "must be a finite number") from None
    elif isinstance(quantity, str):
        if not _NUMBER_RE.fullmatch(quantity):
            raise InvalidQuantity(quantity, "must be a number")
        value = float(quantity)
    else:
        raise InvalidQuantity(quantity, "must be a number")

    if not math.isfinite(value):
        raise InvalidQuantity(quantity, "must be a finite number")
    return value


def convert(
    from_unit: Union[str, Unit],
    to_unit: Union[str, Unit],
    quantity: Any,
) -> ConversionResult:
    """
    Convert `quantity` expressed in `from_unit` into `to_unit`.

    Units may be raw wire tokens ("gram", "kilo", "ton", "lb") or Unit
    members. Raises InvalidQuantity or UnrecognizedUnit.
    """
    # 1. Quantity first: a NaN with a bad unit reports the quantity
    value = _coerce_quantity(quantity)

    # 2. Units
    src = parse_unit(from_unit)
    dst = parse_unit(to_unit)

    # 3. Arithmetic
    # quantity * factor(src) / factor(dst), with the ratio of the two
    # constants formed first. The ratio is exactly 1.0 for src == dst, so a
    # unit converted to itself returns the quantity unchanged; multiplying
    # first breaks that for lb (q * 453.59237 / 453.59237 != q for some q).
    # Other pairs may differ from the multiply-first order by 1 ULP
    # (e.g. gram -> ton against q / 1e6), well inside 1e-9 relative.
    result = value * (factor(src) / factor(dst))
    if not math.isfinite(result):
        raise InvalidQuantity(quantity, f"out of range when converted to {dst.value!r}")

    logger.debug(f"Converted {value} {src.value} -> {result} {dst.value}")
    return ConversionResult(result, src, dst)


def execute(request) -> ConversionResult:
    """Run `convert` on any object with from_unit, to_unit and quantity."""
    return convert(
        getattr(request, "from_unit", None),
        getattr(request, "to_unit", None),
        getattr(request, "quantity", None),
    )
