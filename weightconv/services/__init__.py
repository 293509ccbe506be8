from .errors import ConversionError, InvalidQuantity, UnrecognizedUnit
from .units import Unit, factor, parse_unit, supported_tokens
from .conversion import ConversionResult, convert, execute

__all__ = ["ConversionError", "InvalidQuantity", "UnrecognizedUnit", "Unit", "factor", "parse_unit", "supported_tokens", "ConversionResult", "convert", "execute"]
