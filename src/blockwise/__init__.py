"""blockwise: block-based iteration helpers for Python collections."""

from blockwise.core import (
    NULL,
    BlockArray,
    BlockwiseError,
    InvalidTransformResultError,
    NullArgumentError,
    NullType,
    Settings,
)
from blockwise.functional import iteration, mapping
from blockwise.functional.iteration import (
    each,
    match,
    select,
    reject,
    reduce,
    corresponds,
)

__all__ = [
    "BlockArray",
    "BlockwiseError",
    "NullArgumentError",
    "InvalidTransformResultError",
    "NULL",
    "NullType",
    "Settings",
    "iteration",
    "mapping",
    "each",
    "match",
    "select",
    "reject",
    "reduce",
    "corresponds",
]
