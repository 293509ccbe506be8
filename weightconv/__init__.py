"""Weight Converter API: gram, kilo, ton and lb conversions over HTTP."""

__version__ = "0.1.0"
