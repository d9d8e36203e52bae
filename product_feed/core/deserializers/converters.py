"""
Slice converters for fixed-width input.

Each converter turns the text of one slice into the value type declared by
its field. The converter is picked from CONVERTERS by the field's value
type unless one is passed explicitly.
"""

import re
from typing import Any, Callable, Optional

from product_feed.core.fields import Field

from .errors import FlagFormatError, NumberFormatError

Converter = Callable[[str, Field[Any]], Any]

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

FLAG_VALUES = {"Y": True, "N": False}


def parse_integer(raw: str, field: Field[Any]) -> int:
    """
    Convert a slice to int.

    Only an optional sign followed by ASCII digits is accepted; padding,
    underscores and other digit scripts are rejected.

    Raises:
        NumberFormatError: If the slice is not an integer
    """
    if not INTEGER_PATTERN.fullmatch(raw):
        raise NumberFormatError(field.name, raw)
    return int(raw)


def parse_flags(raw: str, field: Field[Any]) -> tuple[bool, ...]:
    """
    Convert a slice of 'Y'/'N' characters to a tuple of booleans.

    Raises:
        FlagFormatError: On any other character, with its 1-based position
    """
    flags = []
    for position, character in enumerate(raw, start=1):
        if character not in FLAG_VALUES:
            raise FlagFormatError(field.name, position, character)
        flags.append(FLAG_VALUES[character])
    return tuple(flags)


def parse_trimmed_text(raw: str, field: Field[Any]) -> str:
    """Strip surrounding whitespace."""
    return raw.strip()


CONVERTERS: dict[type, Converter] = {
    int: parse_integer,
    tuple: parse_flags,
    str: parse_trimmed_text,
}


def slice_field(
    data: str,
    start: int,
    end: int,
    field: Field[Any],
    converter: Optional[Converter] = None,
) -> tuple[Field[Any], Any]:
    """
    Slice ``data[start:end]`` and convert it for ``field``.

    Args:
        data: The input line
        start: Offset of the first character (0-based)
        end: Offset one past the last character
        field: Raw field the slice belongs to
        converter: Conversion to apply; defaults to CONVERTERS[field.value_type]

    Returns:
        ``(field, value)`` pair suitable for building a record's raw values

    Raises:
        ValueError: If no converter is registered for the field's type
    """
    if converter is None:
        converter = CONVERTERS.get(field.value_type)
        if converter is None:
            raise ValueError(f"No converter registered for {field.name} ({field.value_type.__name__})")
    return field, converter(data[start:end], field)
