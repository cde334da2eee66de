"""Core types, settings and errors for blockwise."""

from blockwise.core.errors import (
    BlockwiseError,
    NullArgumentError,
    InvalidTransformResultError,
)
from blockwise.core.types import NULL, NullType
from blockwise.core.config import Settings, settings
from blockwise.core.block_array import BlockArray

__all__ = [
    "BlockArray",
    "BlockwiseError",
    "NullArgumentError",
    "InvalidTransformResultError",
    "NULL",
    "NullType",
    "Settings",
    "settings",
]
