"""Adjacency patterns for connected-component labeling."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from pixlabel.core.constants import BACKGROUND_GLYPH, FOREGROUND_GLYPH
from pixlabel.core.exceptions import BugEncounteredError, EmptyNeighborhoodError, InvalidArgumentError

__all__ = [
    "Neighbor",
    "Neighborhood",
    "merge_neighborhoods",
]


class Neighbor(NamedTuple):
    """Offset of a neighbor cell relative to the kernel centre.

    Attributes
    ----------
    dy : int
        Row offset, positive downwards.
    dx : int
        Column offset, positive to the right.
    """

    dy: int
    dx: int

    @property
    def y(self) -> int:
        """Row offset."""
        return self.dy

    @property
    def x(self) -> int:
        """Column offset."""
        return self.dx


class Neighborhood:
    """Immutable odd-sized boolean kernel and the neighbor offsets it defines.

    The true cells of the kernel, read in row-major order, become
    :class:`Neighbor` offsets relative to the kernel centre. A kernel with no
    true cell is legal but defines no neighbors, which labeling rejects.

    Parameters
    ----------
    kernel : array_like of bool
        2D kernel with odd height and odd width. Non-zero values are active.

    Raises
    ------
    InvalidArgumentError
        If the kernel is not a rectangular 2D array with odd dimensions.

    Examples
    --------
    >>> nbr = Neighborhood([[0, 1, 0], [1, 1, 1], [0, 1, 0]])
    >>> nbr.neighbors[0]
    Neighbor(dy=-1, dx=0)
    >>> nbr.n_neighbors
    5
    """

    __slots__ = ("_kernel", "_neighbors", "_offsets")

    def __init__(self, kernel):
        try:
            arr = np.asarray(kernel)
        except ValueError as exc:
            raise InvalidArgumentError("Neighborhood kernel rows must all have the same length.") from exc

        if arr.ndim != 2 or arr.dtype == object:
            raise InvalidArgumentError(
                "Neighborhood kernel must be a rectangular 2D array; rows must all have the same length."
            )

        height, width = arr.shape
        if height % 2 == 0 or width % 2 == 0:
            raise InvalidArgumentError(f"Neighborhood kernel dimensions must be odd, got {height}x{width}.")

        arr = np.array(arr != 0 if arr.dtype != np.bool_ else arr, dtype=bool)
        arr.flags.writeable = False
        self._kernel = arr

        rows, cols = np.nonzero(arr)
        cy, cx = (height - 1) // 2, (width - 1) // 2
        self._neighbors = tuple(Neighbor(int(r) - cy, int(c) - cx) for r, c in zip(rows, cols, strict=True))

        offsets = np.column_stack([rows - cy, cols - cx]).astype(np.int64)
        offsets.flags.writeable = False
        self._offsets = offsets

    @property
    def neighbors(self) -> tuple[Neighbor, ...]:
        """All neighbors in row-major kernel order; empty if the kernel is all false."""
        return self._neighbors

    @property
    def offsets(self) -> np.ndarray:
        """Read-only ``(n_neighbors, 2)`` int64 array of ``(dy, dx)`` rows."""
        return self._offsets

    @property
    def has_neighbors(self) -> bool:
        return len(self._neighbors) > 0

    @property
    def n_neighbors(self) -> int:
        return len(self._neighbors)

    @property
    def kernel(self) -> np.ndarray:
        """Read-only view of the boolean kernel."""
        return self._kernel

    @property
    def shape(self) -> tuple[int, int]:
        return self._kernel.shape

    @property
    def height(self) -> int:
        return self._kernel.shape[0]

    @property
    def width(self) -> int:
        return self._kernel.shape[1]

    @property
    def center(self) -> tuple[int, int]:
        """Kernel index ``(row, col)`` of the centre cell."""
        return (self.height - 1) // 2, (self.width - 1) // 2

    def is_neighbor(self, row: int, col: int) -> bool:
        """Return whether kernel cell ``(row, col)`` is active.

        Indices address the kernel itself, not offsets from its centre.
        """
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Kernel index ({row}, {col}) is outside a {self.height}x{self.width} kernel.")
        return bool(self._kernel[row, col])

    def complement(self) -> Neighborhood:
        """Return the neighborhood whose kernel is the logical NOT of this one."""
        return _build(~self._kernel)

    def merge(self, other: Neighborhood) -> Neighborhood:
        """Union of this neighborhood and ``other``; see :func:`merge_neighborhoods`."""
        return merge_neighborhoods(self, other)

    def to_array(self, dtype=bool) -> np.ndarray:
        """Return a writable copy of the kernel."""
        return self._kernel.astype(dtype, copy=True)

    def __invert__(self) -> Neighborhood:
        return self.complement()

    def __or__(self, other):
        if not isinstance(other, Neighborhood):
            return NotImplemented
        return merge_neighborhoods(self, other)

    def __eq__(self, other):
        if not isinstance(other, Neighborhood):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._kernel, other._kernel))

    def __hash__(self):
        return hash((self.shape, self._kernel.tobytes()))

    def __repr__(self):
        rows = [
            "".join(FOREGROUND_GLYPH if cell else BACKGROUND_GLYPH for cell in kernel_row)
            for kernel_row in self._kernel
        ]
        body = "\n".join(f"  {row}" for row in rows)
        return f"Neighborhood({self.height}x{self.width}, n_neighbors={self.n_neighbors})\n{body}"

    # Named shapes

    @classmethod
    def square(cls, n: int) -> Neighborhood:
        """All cells of an ``n`` x ``n`` kernel."""
        _check_size(n, "n")
        return _build(np.ones((n, n), dtype=bool))

    @classmethod
    def horizontal(cls, n: int) -> Neighborhood:
        """A ``1`` x ``n`` strip."""
        _check_size(n, "n")
        return _build(np.ones((1, n), dtype=bool))

    @classmethod
    def vertical(cls, n: int) -> Neighborhood:
        """An ``n`` x ``1`` strip."""
        _check_size(n, "n")
        return _build(np.ones((n, 1), dtype=bool))

    @classmethod
    def cross(cls, n: int, m: int) -> Neighborhood:
        """Centre row and centre column of an ``n`` x ``m`` kernel."""
        _check_size(n, "n")
        _check_size(m, "m")
        kernel = np.zeros((n, m), dtype=bool)
        kernel[:, (m - 1) // 2] = True
        kernel[(n - 1) // 2, :] = True
        return _build(kernel)

    @classmethod
    def saltire(cls, n: int) -> Neighborhood:
        """Both diagonals of an ``n`` x ``n`` kernel."""
        _check_size(n, "n")
        kernel = np.eye(n, dtype=bool) | np.fliplr(np.eye(n, dtype=bool))
        return _build(kernel)

    @classmethod
    def four_connected(cls) -> Neighborhood:
        """The 3x3 cross: centre plus north, south, east and west."""
        return cls.cross(3, 3)

    @classmethod
    def eight_connected(cls) -> Neighborhood:
        """The full 3x3 square."""
        return cls.square(3)

    @classmethod
    def circular(cls, diameter: int) -> Neighborhood:
        """Cells within Euclidean distance ``(diameter - 1) / 2`` of the centre."""
        _check_size(diameter, "diameter")
        radius = (diameter - 1) // 2
        yy, xx = np.mgrid[-radius : radius + 1, -radius : radius + 1]
        return _build(np.hypot(yy, xx) <= radius)


def merge_neighborhoods(first: Neighborhood, second: Neighborhood) -> Neighborhood:
    """Merge two neighborhoods into the smallest kernel holding both.

    Both kernels are centred in a kernel of the larger height and the larger
    width, and a cell is active when it is active in either input.

    Parameters
    ----------
    first, second : Neighborhood
        Neighborhoods to merge. Both must define at least one neighbor.

    Returns
    -------
    Neighborhood
        The merged neighborhood.

    Raises
    ------
    EmptyNeighborhoodError
        If either input defines no neighbor.
    """
    if not first.has_neighbors or not second.has_neighbors:
        raise EmptyNeighborhoodError("Cannot merge a neighborhood that defines no neighbor.")

    height = max(first.height, second.height)
    width = max(first.width, second.width)
    kernel = np.zeros((height, width), dtype=bool)

    for nbr in (first, second):
        y0 = (height - nbr.height) // 2
        x0 = (width - nbr.width) // 2
        kernel[y0 : y0 + nbr.height, x0 : x0 + nbr.width] |= nbr.kernel

    return _build(kernel)


def _check_size(value, name):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1 or value % 2 == 0:
        raise InvalidArgumentError(f"{name}={value!r} is not valid. Must be a positive odd integer.")


def _build(kernel):
    """Construct from a kernel this module assembled; failures are defects."""
    try:
        return Neighborhood(kernel)
    except InvalidArgumentError as exc:
        raise BugEncounteredError(f"Internally built kernel of shape {np.shape(kernel)} was rejected.") from exc
