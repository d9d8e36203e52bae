"""
Records and record modules.

A Record holds the raw values of one decoded input line. A RecordModule is
the catalog for one record shape: it declares the raw and derived fields in
order and builds records bound to itself.
"""

from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, TypeVar

from .errors import DuplicateFieldError
from .field import DerivedField, Field, ResolutionContext

T = TypeVar("T")


class Record:
    """
    Immutable mapping from raw field descriptor to value.

    Raw values are not checked against the module's declarations when the
    record is built; a missing raw value only surfaces when that field (or
    a derived field depending on it) is read.

    Attributes:
        raw_values: Read-only view of the raw field values
        module: RecordModule this record was built by (optional)
    """

    __slots__ = ("_raw_values", "_module")

    def __init__(self, raw_values: Mapping[Field[Any], Any], module: Optional["RecordModule"] = None):
        self._raw_values = MappingProxyType(dict(raw_values))
        self._module = module

    @property
    def raw_values(self) -> Mapping[Field[Any], Any]:
        return self._raw_values

    @property
    def module(self) -> Optional["RecordModule"]:
        return self._module

    def get(self, field: Field[T]) -> T:
        """
        Read a raw or derived field.

        Args:
            field: Field descriptor to read

        Returns:
            The field's value

        Raises:
            MissingFieldError: If a raw field needed for the value is absent
            CircularDependencyError: If the field's formulas form a cycle
        """
        return field.resolve(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return dict(self._raw_values) == dict(other._raw_values)

    def __hash__(self) -> int:
        return hash(frozenset(self._raw_values.items()))

    def __repr__(self) -> str:
        name = self._module.record_name if self._module else "Record"
        values = ", ".join(f"{f.name}={v!r}" for f, v in self._raw_values.items())
        return f"{name}({values})"


class RecordModule:
    """
    Catalog of the fields making up one record shape.

    Subclasses declare their fields in ``__init__`` with ``raw()`` and
    ``derived()``; the module keeps them in declaration order. Modules are
    meant to be instantiated once and shared.
    """

    record_name: str = "Record"

    def __init__(self, record_name: Optional[str] = None):
        if record_name:
            self.record_name = record_name
        self._fields: list[Field[Any]] = []
        self._by_name: dict[str, Field[Any]] = {}

    def raw(self, name: str, value_type: type) -> Field[Any]:
        """Declare a raw field."""
        return self._register(Field(name, value_type))

    def derived(
        self,
        name: str,
        value_type: type,
        formula: Callable[[ResolutionContext], Any],
    ) -> DerivedField[Any]:
        """Declare a field computed by ``formula`` from other fields."""
        return self._register(DerivedField(name, value_type, formula))

    def _register(self, field):
        if field.name in self._by_name:
            raise DuplicateFieldError(self.record_name, field.name)
        self._fields.append(field)
        self._by_name[field.name] = field
        return field

    @property
    def all_fields(self) -> tuple[Field[Any], ...]:
        return tuple(self._fields)

    @property
    def raw_fields(self) -> tuple[Field[Any], ...]:
        return tuple(f for f in self._fields if not f.is_derived)

    @property
    def derived_fields(self) -> tuple[Field[Any], ...]:
        return tuple(f for f in self._fields if f.is_derived)

    def field(self, name: str) -> Field[Any]:
        """
        Look up a declared field by name.

        Raises:
            KeyError: If no field with that name is declared
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"{self.record_name} has no field named '{name}'") from None

    def record(self, raw_values: Mapping[Field[Any], Any]) -> Record:
        """Build a record of this shape from its raw values."""
        return Record(raw_values, module=self)

    def describe(self, record: Record) -> str:
        """
        Render a record as an indented listing of raw then derived fields.

        Every field is resolved, so a defective record raises here.
        """
        name_width = max(len(f.name) for f in self._fields) + 2
        lines = [f"{self.record_name}:", "  Raw Fields:"]
        lines.extend(self._describe_field(record, f, name_width) for f in self.raw_fields)
        lines.append("  Derived Fields:")
        lines.extend(self._describe_field(record, f, name_width) for f in self.derived_fields)
        return "\n".join(lines) + "\n"

    @staticmethod
    def _describe_field(record: Record, field: Field[Any], name_width: int) -> str:
        value = record.get(field)
        return f"    {field.name + ':':<{name_width}}{_display_value(value)}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(record_name={self.record_name!r}, fields={len(self._fields)})"


def _display_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, tuple):
        return ", ".join(_display_value(v) for v in value)
    return str(value)
