"""
Field-based record model.

Provides typed field descriptors, derived fields with cycle detection,
immutable records and the record module (catalog) base class.
"""

from .errors import CircularDependencyError, DuplicateFieldError, FieldError, MissingFieldError
from .field import DerivedField, Field, ResolutionContext
from .record import Record, RecordModule

__all__ = [
    "Field",
    "DerivedField",
    "ResolutionContext",
    "Record",
    "RecordModule",
    "FieldError",
    "MissingFieldError",
    "CircularDependencyError",
    "DuplicateFieldError",
]
