"""
Deserializers for line-oriented input.

Provides the line iteration driver, fixed-width slice converters and the
product line deserializer.
"""

from .base_deserializer import ErrorPolicy, LineBasedDeserializer
from .converters import CONVERTERS, parse_flags, parse_integer, parse_trimmed_text, slice_field
from .errors import (
    ConflictingPriceError,
    FlagFormatError,
    InvalidForXError,
    LineRejectedError,
    MissingPriceError,
    NumberFormatError,
    ParseError,
    TooShortError,
)
from .product_deserializer import ProductRecordDeserializer

__all__ = [
    "ErrorPolicy",
    "LineBasedDeserializer",
    "ProductRecordDeserializer",
    "CONVERTERS",
    "slice_field",
    "parse_integer",
    "parse_flags",
    "parse_trimmed_text",
    "ParseError",
    "TooShortError",
    "NumberFormatError",
    "FlagFormatError",
    "ConflictingPriceError",
    "InvalidForXError",
    "MissingPriceError",
    "LineRejectedError",
]
