"""Immutable array type carrying the block-based iteration methods.

``BlockArray`` is a ``tuple`` subclass, so it is ordered, indexable, hashable
when its elements are, and cannot change length or content. The iteration
operations of :mod:`blockwise.functional.iteration` are exposed as methods and
every collection-valued result is a new ``BlockArray``:

    >>> from blockwise import BlockArray
    >>> numbers = BlockArray.of(1, 2, 3, 4, 5)
    >>> numbers.select(lambda n: n % 2).map(lambda n: n * 10)
    BlockArray([10, 30, 50])
    >>> numbers.reduce(0, lambda total, n: total + n)
    15
"""

from typing import Any, Generic, Iterable, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from blockwise.core.types import (
    Accumulator,
    PairPredicate,
    Predicate,
    T,
    Transform,
    Visitor,
)
from blockwise.functional import iteration

__all__ = ["BlockArray"]


class BlockArray(tuple, Generic[T]):
    """Ordered, immutable sequence with block-based iteration methods.

    Construct it from any iterable (``BlockArray([1, 2])``) or from
    positional elements (``BlockArray.of(1, 2)``). Slicing and concatenation
    return ``BlockArray`` instances.
    """

    def __new__(cls, elements: Iterable[T] = ()):
        return super().__new__(cls, elements)

    @classmethod
    def of(cls, *elements: T) -> "BlockArray[T]":
        return cls(elements)

    def __getitem__(self, key):
        result = super().__getitem__(key)
        if isinstance(key, slice):
            return type(self)(result)
        return result

    def __add__(self, other: Iterable[T]) -> "BlockArray[T]":
        if not isinstance(other, Iterable) or isinstance(other, (str, bytes)):
            return NotImplemented
        return type(self)((*self, *other))

    def __radd__(self, other: Iterable[T]) -> "BlockArray[T]":
        if not isinstance(other, Iterable) or isinstance(other, (str, bytes)):
            return NotImplemented
        return type(self)((*other, *self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # --- Block operations ---
    def each(self, visitor: Visitor) -> None:
        """Call ``visitor`` with each element, in order."""
        iteration.each(self, visitor)

    def match(self, predicate: Predicate, default: Any = None) -> Any:
        """Return the first element passing ``predicate``, else ``default``."""
        return iteration.match(self, predicate, default)

    def select(self, predicate: Predicate) -> "BlockArray[T]":
        """Return the elements passing ``predicate``; empty if none do."""
        return iteration.select(self, predicate)

    def reject(self, predicate: Predicate) -> "BlockArray[T]":
        """Return the elements failing ``predicate``; empty if all pass.

        Useful for removing elements:

            >>> computers.reject(lambda computer: computer.is_ugly)
        """
        return iteration.reject(self, predicate)

    def map(self, transform: Transform) -> "BlockArray":
        """Return ``transform(element)`` for every element.

        The transform must not return ``None``; return ``NULL`` for elements
        with no result.
        """
        return iteration.map(self, transform)

    def reduce(self, initial: Any, accumulator: Accumulator) -> Any:
        """Fold left to right with ``accumulator(total, element)``."""
        return iteration.reduce(self, initial, accumulator)

    def any(self, predicate: Predicate) -> bool:
        return iteration.any(self, predicate)

    def all(self, predicate: Predicate) -> bool:
        return iteration.all(self, predicate)

    def none(self, predicate: Predicate) -> bool:
        return iteration.none(self, predicate)

    def corresponds(self, other: Iterable, predicate: PairPredicate) -> bool:
        """True if ``other`` has the same length and every aligned pair passes."""
        return iteration.corresponds(self, other, predicate)

    # --- Pydantic integration ---
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        items_schema = (
            handler.generate_schema(args[0]) if args else core_schema.any_schema()
        )
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.list_schema(items_schema),
            serialization=core_schema.plain_serializer_function_ser_schema(list),
        )
