"""Block-based iteration over ordered collections.

Smalltalk-style helpers that replace explicit loops with a caller-supplied
block: visit every element (``each``), find the first passing element
(``match``), filter (``select``/``reject``), transform (``map``) and fold
(``reduce``), plus the ``any``/``all``/``none``/``corresponds`` tests.

Every function takes the collection as its first argument and works on any
ordered Python collection; results are rebuilt as the same kind of collection
(see :mod:`blockwise.functional.containers`).

Contract shared by all functions:
    - ``None`` for the collection or a block raises ``NullArgumentError``
      before any block runs.
    - Blocks run synchronously, in collection order, on the calling thread.
    - Exceptions raised by a block propagate unchanged.
    - The input collection is never modified. Modifying it from inside a
      block is undefined behaviour.

Examples:
    >>> from blockwise.functional import iteration as it
    >>> it.match([3, 7, 2, 9], lambda n: n % 2 == 0)
    2
    >>> it.select([1, 2, 3, 4, 5], lambda n: n % 2)
    [1, 3, 5]
    >>> it.reduce([1, 2, 3, 4], 0, lambda acc, n: acc + n)
    10
"""

from typing import Any, List, Tuple

from blockwise.core import config
from blockwise.core.errors import InvalidTransformResultError
from blockwise.core.types import (
    NULL,
    Accumulator,
    PairPredicate,
    Predicate,
    Transform,
    Visitor,
    validate_block,
    validate_sequence,
)
from blockwise.functional.containers import elements, rebuild
from blockwise.logger.logger import logger

__all__ = [
    "each",
    "match",
    "select",
    "reject",
    "map",
    "reduce",
    "any",
    "all",
    "none",
    "corresponds",
]


def each(sequence: Any, visitor: Visitor) -> None:
    """Call ``visitor`` once with each element, in order.

    Args:
        sequence: Collection to iterate.
        visitor: Single-argument block; its return value is ignored.
    """
    validate_sequence(sequence)
    validate_block(visitor, "visitor")

    count = 0
    for element in elements(sequence):
        visitor(element)
        count += 1
    config.trace(f"each visited {count} elements")


def match(sequence: Any, predicate: Predicate, default: Any = None) -> Any:
    """Return the first element for which ``predicate`` is truthy.

    Iteration stops at the first passing element. Ties are broken by position.

    Args:
        sequence: Collection to search.
        predicate: Single-argument block.
        default: Returned when no element passes. Pass a sentinel here when
            ``None`` itself may be a legitimate match.

    Returns:
        The first passing element, or ``default``.
    """
    validate_sequence(sequence)
    validate_block(predicate, "predicate")

    for index, element in enumerate(elements(sequence)):
        if predicate(element):
            config.trace(f"match found an element at index {index}")
            return element
    config.trace("match found no element")
    return default


def _partition(
    sequence: Any, predicate: Predicate
) -> Tuple[List[Any], List[int], List[Any], List[int]]:
    # Single pass so the predicate runs once per element
    passed, passed_at, failed, failed_at = [], [], [], []
    for index, element in enumerate(elements(sequence)):
        if predicate(element):
            passed.append(element)
            passed_at.append(index)
        else:
            failed.append(element)
            failed_at.append(index)
    return passed, passed_at, failed, failed_at


def select(sequence: Any, predicate: Predicate) -> Any:
    """Return a new collection of the elements for which ``predicate`` is truthy.

    Order is preserved. When nothing passes the result is an empty collection,
    never ``None``, so it can be chained into further operations.
    """
    validate_sequence(sequence)
    validate_block(predicate, "predicate")

    passed, passed_at, failed, _ = _partition(sequence, predicate)
    config.trace(f"select kept {len(passed)} of {len(passed) + len(failed)} elements")
    return rebuild(sequence, passed, passed_at)


def reject(sequence: Any, predicate: Predicate) -> Any:
    """Return a new collection of the elements for which ``predicate`` is falsy.

    The exact complement of :func:`select`: for the same predicate every
    element ends up in exactly one of the two results.

    Example:
        >>> reject(["tidy", "ugly", "neat"], lambda word: word == "ugly")
        ['tidy', 'neat']
    """
    validate_sequence(sequence)
    validate_block(predicate, "predicate")

    passed, _, failed, failed_at = _partition(sequence, predicate)
    config.trace(f"reject kept {len(failed)} of {len(passed) + len(failed)} elements")
    return rebuild(sequence, failed, failed_at)


def map(sequence: Any, transform: Transform) -> Any:
    """Return a new collection holding ``transform(element)`` for every element.

    The result has the same length and order as the input. A transform that
    has nothing to produce for an element must return ``NULL``; returning
    ``None`` is a caller error.

    Args:
        sequence: Collection to transform.
        transform: Single-argument block returning the new value.

    Returns:
        A collection of the transformed values.

    Raises:
        InvalidTransformResultError: If ``transform`` returns ``None`` while
            ``settings.strict_map`` is on. With it off, ``NULL`` is stored in
            that slot and a warning is logged.
    """
    validate_sequence(sequence)
    validate_block(transform, "transform")

    strict = config.settings.strict_map
    items = []
    for index, element in enumerate(elements(sequence)):
        result = transform(element)
        if result is None:
            if strict:
                raise InvalidTransformResultError(index, element)
            logger.warning(f"map transform returned None at index {index}, stored NULL")
            result = NULL
        items.append(result)

    config.trace(f"map transformed {len(items)} elements")
    return rebuild(sequence, items)


def reduce(sequence: Any, initial: Any, accumulator: Accumulator) -> Any:
    """Fold the collection from left to right.

    ``accumulator(total, element)`` is called for each element, starting with
    ``total = initial``; each return value becomes the next ``total``. The
    running value may be of any type, e.g. concatenating strings:

        >>> reduce(["a", "b", "c"], "", lambda total, s: total + s)
        'abc'

    or summing their lengths into a number:

        >>> reduce(["a", "bb"], 0, lambda total, s: total + len(s))
        3

    Args:
        sequence: Collection to fold.
        initial: Starting value; may be ``None``.
        accumulator: Two-argument block taking the running value and the next
            element.

    Returns:
        The final running value, or ``initial`` for an empty collection.
    """
    validate_sequence(sequence)
    validate_block(accumulator, "accumulator")

    total = initial
    count = 0
    for element in elements(sequence):
        total = accumulator(total, element)
        count += 1
    config.trace(f"reduce folded {count} elements")
    return total


def any(sequence: Any, predicate: Predicate) -> bool:
    """Return True if at least one element passes ``predicate``."""
    validate_sequence(sequence)
    validate_block(predicate, "predicate")

    for index, element in enumerate(elements(sequence)):
        if predicate(element):
            config.trace(f"any passed at index {index}")
            return True
    config.trace("any found no passing element")
    return False


def all(sequence: Any, predicate: Predicate) -> bool:
    """Return True if every element passes ``predicate`` (True when empty)."""
    validate_sequence(sequence)
    validate_block(predicate, "predicate")

    for index, element in enumerate(elements(sequence)):
        if not predicate(element):
            config.trace(f"all failed at index {index}")
            return False
    config.trace("all elements passed")
    return True


def none(sequence: Any, predicate: Predicate) -> bool:
    """Return True if no element passes ``predicate``."""
    validate_sequence(sequence)
    validate_block(predicate, "predicate")

    for index, element in enumerate(elements(sequence)):
        if predicate(element):
            config.trace(f"none failed at index {index}")
            return False
    config.trace("none found no passing element")
    return True


def corresponds(sequence: Any, other: Any, predicate: PairPredicate) -> bool:
    """Compare two collections element by element.

    Args:
        sequence: First collection.
        other: Second collection.
        predicate: Two-argument block called with aligned elements.

    Returns:
        True if both collections have the same length and ``predicate`` passes
        for every aligned pair. Stops at the first failing pair.
    """
    validate_sequence(sequence)
    validate_sequence(other, "other")
    validate_block(predicate, "predicate")

    left = list(elements(sequence))
    right = list(elements(other))
    if len(left) != len(right):
        config.trace(f"corresponds saw lengths {len(left)} and {len(right)}")
        return False

    for index, (first, second) in enumerate(zip(left, right)):
        if not predicate(first, second):
            config.trace(f"corresponds failed at index {index}")
            return False
    config.trace(f"corresponds matched {len(left)} pairs")
    return True
