"""
Errors raised while deserializing one input line.

All of them are line-local: the line iteration driver catches ParseError,
reports the line and moves on (or stops, under the fail-fast policy).
"""

from typing import Optional


class ParseError(ValueError):
    """Raised when an input line cannot be turned into a record."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.field_name = field_name
        self.message = message
        super().__init__(message)


class TooShortError(ParseError):
    """Raised when a line is shorter than the fixed-width layout."""

    def __init__(self, min_length: int, actual_length: int):
        self.min_length = min_length
        self.actual_length = actual_length
        super().__init__(
            f"Input line too short; expected at least {min_length} characters, got {actual_length}"
        )


class NumberFormatError(ParseError):
    """Raised when a numeric slice is not an integer."""

    def __init__(self, field_name: str, raw_value: str):
        self.raw_value = raw_value
        super().__init__(f"Couldn't parse number for {field_name} from '{raw_value}'", field_name)


class FlagFormatError(ParseError):
    """Raised when a flag character is neither 'Y' nor 'N'."""

    def __init__(self, field_name: str, position: int, character: str):
        self.position = position
        self.character = character
        super().__init__(
            f"Couldn't parse flag {position} of {field_name} from '{character}'; expected 'Y' or 'N'",
            field_name,
        )


class ConflictingPriceError(ParseError):
    """Raised when a price group has both a singular and a split price."""

    def __init__(self, group: str, singular_field: str, split_field: str):
        self.group = group
        super().__init__(f"Only one of {singular_field} or {split_field} may be specified", split_field)


class InvalidForXError(ParseError):
    """Raised when a split price comes with a non-positive for-X count."""

    def __init__(self, group: str, field_name: str, for_x: int):
        self.group = group
        self.for_x = for_x
        super().__init__(f"{field_name} must be positive for a split price, got {for_x}", field_name)


class MissingPriceError(ParseError):
    """Raised when a required price group has neither a singular nor a split price."""

    def __init__(self, group: str, singular_field: str, split_field: str):
        self.group = group
        super().__init__(f"{group} price is required; one of {singular_field} or {split_field} must be specified")


class LineRejectedError(ValueError):
    """Raised under the fail-fast policy for the first line that fails to parse."""

    def __init__(self, line_number: int, source_name: str, cause: ParseError):
        self.line_number = line_number
        self.source_name = source_name
        self.cause = cause
        location = f"{source_name}:{line_number}" if source_name else str(line_number)
        super().__init__(f"{location}: {cause}")
