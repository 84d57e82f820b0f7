"""Coercion between caller grids and the arrays used by the labeling kernels."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np

from .constants import LABEL_DTYPE
from .exceptions import InvalidArgumentError

__all__ = [
    "BoolGridLike",
    "freeze",
    "new_label_grid",
    "to_bool_grid",
]


@runtime_checkable
class BoolGridLike(Protocol):
    """Read-only binary image exposing its size and per-cell access."""

    def get_height(self) -> int: ...

    def get_width(self) -> int: ...

    def get(self, row: int, col: int) -> Any: ...


def to_bool_grid(image) -> np.ndarray:
    """Convert an image to a C-contiguous 2D boolean array.

    Parameters
    ----------
    image : array_like or BoolGridLike
        Binary image. Non-zero values are foreground. Objects implementing
        ``get_height()``, ``get_width()`` and ``get(row, col)`` are read cell by
        cell.

    Returns
    -------
    ndarray
        Boolean array of shape ``(height, width)``. The caller's buffer is never
        modified.
    """
    if isinstance(image, BoolGridLike) and not isinstance(image, np.ndarray):
        height = int(image.get_height())
        width = int(image.get_width())
        if height < 0 or width < 0:
            raise InvalidArgumentError(f"Grid dimensions must be non-negative, got {height}x{width}.")
        cells = (bool(image.get(row, col)) for row in range(height) for col in range(width))
        return np.fromiter(cells, dtype=bool, count=height * width).reshape(height, width)

    try:
        arr = np.asarray(image)
    except ValueError as exc:
        raise InvalidArgumentError("Grid rows must all have the same length.") from exc
    if arr.ndim != 2:
        raise InvalidArgumentError(f"Expected a 2D grid, got an array with {arr.ndim} dimension(s).")
    if arr.dtype != np.bool_:
        arr = arr != 0
    return np.ascontiguousarray(arr, dtype=bool)


def new_label_grid(shape) -> np.ndarray:
    """Allocate a zero-filled label grid."""
    return np.zeros(shape, dtype=LABEL_DTYPE)


def freeze(labels: np.ndarray) -> np.ndarray:
    """Mark a label grid read-only before handing it to the caller."""
    labels.flags.writeable = False
    return labels
