"""
Field descriptors and the derivation engine.

A Field is a named, typed handle for one slot of a record. Raw fields read
their value straight from the record; derived fields compute it from other
fields through a formula. Resolution tracks the chain of fields currently
being computed so that a circular formula fails loudly instead of recursing
forever.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from .errors import CircularDependencyError, MissingFieldError

if TYPE_CHECKING:
    from .record import Record

T = TypeVar("T")


@dataclass(frozen=True)
class Field(Generic[T]):
    """
    Raw field descriptor.

    Two descriptors with the same name and value type are equal and can be
    used interchangeably to read a record.

    Each level of a derived-to-derived chain costs two Python frames (the
    formula and ResolutionContext.get), so chains are bounded by the
    interpreter's recursion limit: about 450 levels at the default limit of
    1000. Deeper chains raise RecursionError.

    Attributes:
        name: Display name of the field (e.g., "Product Id")
        value_type: Declared Python type of the field's value
    """

    name: str
    value_type: type

    @property
    def is_derived(self) -> bool:
        return False

    def compute(self, context: "ResolutionContext") -> T:
        """
        Compute the value of this field within a resolution.

        Raw fields look themselves up in the record's raw values.

        Raises:
            MissingFieldError: If the record holds no value for this field
        """
        raw_values = context.record.raw_values
        if self not in raw_values:
            raise MissingFieldError(self.name)
        return raw_values[self]

    def resolve(self, record: "Record", chain: tuple["Field[Any]", ...] = ()) -> T:
        """
        Resolve this field against a record.

        Args:
            record: Record to read from
            chain: Fields already being resolved further up the call stack

        Returns:
            The field's value

        Raises:
            CircularDependencyError: If this field is already in the chain
        """
        return ResolutionContext(record, chain).get(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DerivedField(Field[T]):
    """
    Field whose value is computed on every access from other fields.

    The formula receives a ResolutionContext and reads its inputs through
    ``context.get(...)`` so that the resolution chain is carried along.
    """

    formula: Callable[["ResolutionContext"], T] = dataclass_field(compare=False, repr=False)

    def __post_init__(self):
        if not callable(self.formula):
            raise ValueError(f"Derived field '{self.name}' requires a callable formula")

    @property
    def is_derived(self) -> bool:
        return True

    def compute(self, context: "ResolutionContext") -> T:
        return self.formula(context)


class ResolutionContext:
    """
    View of a record handed to formulas during one top-level query.

    The chain lives only as long as the query; nothing is written back to
    the record.
    """

    __slots__ = ("record", "chain")

    def __init__(self, record: "Record", chain: tuple[Field[Any], ...]):
        self.record = record
        self.chain = chain

    def get(self, field: Field[T]) -> T:
        """Resolve another field with the current chain."""
        chain = self.chain
        if field in chain:
            raise CircularDependencyError([f.name for f in chain] + [field.name])
        if field.is_derived:
            # formula called directly: one frame here, one in the formula
            return field.formula(ResolutionContext(self.record, chain + (field,)))
        return field.compute(self)

    def __repr__(self) -> str:
        return f"ResolutionContext(chain={' -> '.join(f.name for f in self.chain)})"
