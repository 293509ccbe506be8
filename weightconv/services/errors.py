"""Errors raised by the conversion core.

The HTTP layer maps every ConversionError to a 400 response using `code`.
"""


class ConversionError(Exception):
    """Base exception for requests that cannot be converted."""
    code = "conversion_error"


class UnrecognizedUnit(ConversionError):
    """Unit token is not one of the accepted wire tokens."""
    code = "unrecognized_unit"

    def __init__(self, token, accepted=None):
        self.token = token
        self.accepted = list(accepted or [])
        message = f"Cannot process unit {token!r}"
        if self.accepted:
            message += ", use either " + ", ".join(f"'{t}'" for t in self.accepted)
        super().__init__(message)


class InvalidQuantity(ConversionError):
    """Quantity is missing, non-numeric or not finite."""
    code = "invalid_quantity"

    def __init__(self, value, reason: str = "must be a finite number"):
        self.value = value
        super().__init__(f"Invalid quantity {value!r}: {reason}")
