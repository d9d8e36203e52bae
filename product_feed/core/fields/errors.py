"""
Errors raised by the field model.

These indicate a defect in a catalog's formulas or in how a record's raw
values were assembled. They are not expected from well-formed input.
"""

from typing import Sequence


class FieldError(Exception):
    """Base class for field model errors."""


class MissingFieldError(FieldError, LookupError):
    """Raised when a raw field has no value in a record."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"No raw value for field '{field_name}'")


class CircularDependencyError(FieldError, RuntimeError):
    """Raised when resolving a derived field revisits a field already being resolved."""

    def __init__(self, chain: Sequence[str]):
        self.chain = tuple(chain)
        super().__init__(
            f"Circular dependency chain while computing {self.chain[-1]}; "
            f"visited {' -> '.join(self.chain)}"
        )


class DuplicateFieldError(FieldError, ValueError):
    """Raised when a catalog registers two fields with the same name."""

    def __init__(self, record_name: str, field_name: str):
        self.record_name = record_name
        self.field_name = field_name
        super().__init__(f"{record_name} already declares a field named '{field_name}'")
