"""Reusable type definitions for blockwise.

This module provides the block shapes accepted by the iteration operations,
the ``NULL`` placeholder, and the argument validators shared by every
operation.

Type Aliases:
    Visitor: A single-argument block called for its side effects.
    Predicate: A single-argument block whose truth value selects elements.
    Transform: A single-argument block producing one output per element.
    Accumulator: A two-argument block folding a running value with an element.
    PairPredicate: A two-argument block comparing aligned elements.
"""

from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from blockwise.core.errors import NullArgumentError

__all__ = [
    "T",
    "U",
    "A",
    "Visitor",
    "Predicate",
    "Transform",
    "Accumulator",
    "PairPredicate",
    "NullType",
    "NULL",
    "validate_block",
    "validate_sequence",
]

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")

Visitor = Callable[[T], Any]
Predicate = Callable[[T], bool]
Transform = Callable[[T], U]
Accumulator = Callable[[A, T], A]
PairPredicate = Callable[[T, U], bool]


class NullType:
    """Explicit "no result" placeholder a transform may return.

    There is exactly one instance, ``NULL``. It is falsy and compares equal
    only to itself.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (NullType, ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


NULL = NullType()


def validate_block(block: Any, name: str = "block") -> Callable:
    """Validator to ensure a block was supplied and can be called.

    Args:
        block: The caller-supplied function.
        name: Parameter name used in the error message.
    Returns:
        Callable: The block unchanged if validation passes.
    Raises:
        NullArgumentError: If ``block`` is None.
        TypeError: If ``block`` is not callable.
    """
    if block is None:
        raise NullArgumentError(name)
    if not callable(block):
        raise TypeError(f"'{name}' must be callable, got {type(block).__name__}.")
    return block


def validate_sequence(sequence: Any, name: str = "sequence") -> Iterable:
    """Validator to ensure a sequence was supplied and can be iterated."""
    if sequence is None:
        raise NullArgumentError(name)
    if not isinstance(sequence, Iterable):
        raise TypeError(
            f"'{name}' must be an iterable collection, got {type(sequence).__name__}."
        )
    return sequence
