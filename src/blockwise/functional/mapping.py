"""Block-based iteration over keyed collections.

The dictionary counterparts of :mod:`blockwise.functional.iteration`. Blocks
receive ``(key, value)``; items are visited in the mapping's iteration order
(insertion order for ``dict``). Filtering and transforming return a new
``dict``; the input mapping is never modified.
"""

from collections.abc import Mapping
from typing import Any, Callable

from blockwise.core import config
from blockwise.core.errors import InvalidTransformResultError, NullArgumentError
from blockwise.core.types import NULL, validate_block
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
]


def _validate_mapping(mapping: Any) -> Mapping:
    if mapping is None:
        raise NullArgumentError("mapping")
    if not isinstance(mapping, Mapping):
        raise TypeError(f"'mapping' must be a Mapping, got {type(mapping).__name__}.")
    return mapping


def each(mapping: Mapping, visitor: Callable[[Any, Any], Any]) -> None:
    """Call ``visitor(key, value)`` for every item."""
    _validate_mapping(mapping)
    validate_block(visitor, "visitor")

    for key, value in mapping.items():
        visitor(key, value)
    config.trace(f"mapping each visited {len(mapping)} items")


def match(
    mapping: Mapping, predicate: Callable[[Any, Any], bool], default: Any = None
) -> Any:
    """Return the value of the first item whose ``predicate(key, value)`` passes.

    Returns ``default`` when no item passes.
    """
    _validate_mapping(mapping)
    validate_block(predicate, "predicate")

    for key, value in mapping.items():
        if predicate(key, value):
            config.trace(f"mapping match found key {key!r}")
            return value
    config.trace("mapping match found no item")
    return default


def select(mapping: Mapping, predicate: Callable[[Any, Any], bool]) -> dict:
    """Return a new dict of the items whose ``predicate(key, value)`` passes."""
    _validate_mapping(mapping)
    validate_block(predicate, "predicate")

    result = {key: value for key, value in mapping.items() if predicate(key, value)}
    config.trace(f"mapping select kept {len(result)} of {len(mapping)} items")
    return result


def reject(mapping: Mapping, predicate: Callable[[Any, Any], bool]) -> dict:
    """Return a new dict of the items whose ``predicate(key, value)`` fails."""
    _validate_mapping(mapping)
    validate_block(predicate, "predicate")

    result = {
        key: value for key, value in mapping.items() if not predicate(key, value)
    }
    config.trace(f"mapping reject kept {len(result)} of {len(mapping)} items")
    return result


def map(mapping: Mapping, transform: Callable[[Any, Any], Any]) -> dict:
    """Return a new dict with the same keys and ``transform(key, value)`` values.

    Raises:
        InvalidTransformResultError: If ``transform`` returns ``None`` while
            ``settings.strict_map`` is on. With it off, ``NULL`` is stored.
    """
    _validate_mapping(mapping)
    validate_block(transform, "transform")

    strict = config.settings.strict_map
    result = {}
    for key, value in mapping.items():
        new_value = transform(key, value)
        if new_value is None:
            if strict:
                raise InvalidTransformResultError(key, value)
            logger.warning(f"map transform returned None for key {key!r}, stored NULL")
            new_value = NULL
        result[key] = new_value
    config.trace(f"mapping map transformed {len(result)} items")
    return result


def reduce(
    mapping: Mapping, initial: Any, accumulator: Callable[[Any, Any, Any], Any]
) -> Any:
    """Fold the items with ``accumulator(total, key, value)``, starting at ``initial``."""
    _validate_mapping(mapping)
    validate_block(accumulator, "accumulator")

    total = initial
    for key, value in mapping.items():
        total = accumulator(total, key, value)
    config.trace(f"mapping reduce folded {len(mapping)} items")
    return total


def any(mapping: Mapping, predicate: Callable[[Any, Any], bool]) -> bool:
    _validate_mapping(mapping)
    validate_block(predicate, "predicate")

    for key, value in mapping.items():
        if predicate(key, value):
            config.trace(f"mapping any passed at key {key!r}")
            return True
    config.trace("mapping any found no passing item")
    return False


def all(mapping: Mapping, predicate: Callable[[Any, Any], bool]) -> bool:
    _validate_mapping(mapping)
    validate_block(predicate, "predicate")

    for key, value in mapping.items():
        if not predicate(key, value):
            config.trace(f"mapping all failed at key {key!r}")
            return False
    config.trace("mapping all items passed")
    return True


def none(mapping: Mapping, predicate: Callable[[Any, Any], bool]) -> bool:
    _validate_mapping(mapping)
    validate_block(predicate, "predicate")

    for key, value in mapping.items():
        if predicate(key, value):
            config.trace(f"mapping none failed at key {key!r}")
            return False
    config.trace("mapping none found no passing item")
    return True
