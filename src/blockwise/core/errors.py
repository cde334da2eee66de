"""Exceptions raised by the blockwise operations."""

from typing import Any

__all__ = [
    "BlockwiseError",
    "NullArgumentError",
    "InvalidTransformResultError",
]


class BlockwiseError(Exception):
    """Base class for every error raised by blockwise itself."""


class NullArgumentError(BlockwiseError, ValueError):
    """A required argument (the sequence or a block) was ``None``.

    Raised before any element is visited, so no block has run when this
    propagates.

    Attributes:
        argument: Name of the offending parameter.
    """

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None.")


class InvalidTransformResultError(BlockwiseError, ValueError):
    """A ``map`` transform returned ``None`` instead of a value or ``NULL``.

    Attributes:
        index: Position (or key, for mappings) of the element being transformed.
        element: The element passed to the transform.
    """

    def __init__(self, index: Any, element: Any):
        self.index = index
        self.element = element
        super().__init__(
            f"Transform returned None for element {element!r} at {index!r}; "
            "return NULL to mark an element with no result."
        )
