"""Container helpers shared by the iteration operations.

The iteration functions accept any ordered collection. They walk it through
:func:`elements` and build their results through :func:`rebuild`, which
returns a collection of the same kind as the input wherever that kind can be
constructed from a list of items:

    - ``list``, ``range``, iterators and anything unrecognised -> ``list``
    - ``tuple`` and tuple subclasses such as ``BlockArray`` -> same type
      (named tuples and other fixed-shape tuples fall back to ``tuple``)
    - ``set``, ``frozenset`` and ``collections.deque`` -> same type
    - ``str`` -> ``str``
    - 1-D ``numpy.ndarray`` -> ``ndarray``
    - ``pandas.Series`` -> ``Series`` keeping its name and index labels

Transformed results (``map``) must keep one item per input element, so
``str``, ``set`` and ``frozenset`` inputs give a ``list`` there: joining
strings or hashing into a set would merge or drop items.

Filtering results keep the dtype of the input array or series; transformed
results let numpy and pandas infer one, falling back to ``dtype=object`` when
inference would convert the items.
"""

from collections import deque
from typing import Any, Iterator, List, Optional, Sequence

import numpy as np
import pandas as pd

__all__ = ["elements", "rebuild"]


def elements(sequence: Any) -> Iterator[Any]:
    """Return an iterator over the elements of ``sequence`` in order.

    ``pandas.Series`` yields its values, not its index labels. Arrays with more
    than one dimension are rejected: iterating them would hand rows, not
    elements, to the blocks.

    Raises:
        ValueError: If ``sequence`` is an ``ndarray`` with ``ndim != 1``.
    """
    if isinstance(sequence, pd.Series):
        return iter(sequence.tolist())
    if isinstance(sequence, np.ndarray):
        if sequence.ndim != 1:
            raise ValueError(
                f"Only 1-D arrays are supported, got an array with ndim={sequence.ndim}."
            )
        return iter(sequence.tolist())
    return iter(sequence)


def rebuild(
    template: Any, items: List[Any], positions: Optional[Sequence[int]] = None
) -> Any:
    """Build a new collection like ``template`` holding ``items``.

    Args:
        template: The collection the items were read from.
        items: The items of the new collection, in order.
        positions: Positions in ``template`` the items were taken from, for
            filtering results. ``None`` means ``items`` are transformed values,
            one per element of ``template``.

    Returns:
        A new collection; ``template`` is never modified.
    """
    if isinstance(template, pd.Series):
        if positions is not None:
            return template.iloc[list(positions)].copy()
        return pd.Series(items, index=template.index, name=template.name)

    if isinstance(template, np.ndarray):
        if positions is not None:
            return template[np.asarray(positions, dtype=np.intp)].copy()
        return _to_array(items)

    if isinstance(template, (str, set, frozenset)) and positions is None:
        return list(items)

    if isinstance(template, str):
        return "".join(items)

    if isinstance(template, tuple):
        return _rebuild_tuple(template, items)

    if isinstance(template, (set, frozenset, deque)):
        return type(template)(items)

    return list(items)


def _rebuild_tuple(template: tuple, items: List[Any]) -> tuple:
    if type(template) is tuple or hasattr(template, "_fields"):
        return tuple(items)
    try:
        return type(template)(items)
    except TypeError:
        # Struct sequences such as os.stat_result need a fixed item count
        return tuple(items)


def _converts_items(array: np.ndarray, items: List[Any]) -> bool:
    if array.dtype.kind == "U":
        return not all(isinstance(item, str) for item in items)
    if array.dtype.kind == "S":
        return not all(isinstance(item, bytes) for item in items)
    return False


def _to_array(items: List[Any]) -> np.ndarray:
    # Ragged, nested or mixed str/number results must stay one item per slot
    try:
        array = np.array(items)
    except ValueError:
        array = None

    if array is None or array.ndim != 1 or _converts_items(array, items):
        array = np.empty(len(items), dtype=object)
        for i, item in enumerate(items):
            array[i] = item
    return array
