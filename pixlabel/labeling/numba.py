"""Numba-accelerated labeling loops.

Every kernel takes a C-contiguous boolean ``image``, an int64 ``labels`` grid of
the same shape that it mutates in place, and where relevant an ``(n, 2)`` int64
array of ``(dy, dx)`` offsets. The pure Python versions are always defined and
are used when numba is missing or the ``"python"`` backend is active.
"""

import numpy as np

from pixlabel.core.backend import HAS_NUMBA, get_backend, nb

__all__ = [
    "HAS_NUMBA",
    "relax_eight",
    "relax_four",
    "relax_generic",
    "seed_generic",
    "seed_rows",
    "union_find",
]


def _seed_generic_impl(image, offsets, labels):
    height, width = image.shape
    n_offsets = offsets.shape[0]
    next_label = 1

    for i in range(height):
        for j in range(width):
            if not image[i, j]:
                continue
            current = 0
            for k in range(n_offsets):
                y = i + offsets[k, 0]
                x = j + offsets[k, 1]
                if 0 <= y < height and 0 <= x < width and image[y, x]:
                    neighbor = labels[y, x]
                    if neighbor != 0 and (current == 0 or neighbor < current):
                        current = neighbor
            if current == 0:
                current = next_label
                next_label += 1
            labels[i, j] = current

    return next_label - 1


def _relax_generic_impl(image, offsets, labels, max_sweeps):
    height, width = image.shape
    n_offsets = offsets.shape[0]
    sweeps = 0

    while True:
        changed = False
        sweeps += 1
        for i in range(height):
            for j in range(width):
                if not image[i, j]:
                    continue
                smallest = labels[i, j]
                for k in range(n_offsets):
                    y = i + offsets[k, 0]
                    x = j + offsets[k, 1]
                    if 0 <= y < height and 0 <= x < width and image[y, x] and labels[y, x] < smallest:
                        smallest = labels[y, x]

                if labels[i, j] != smallest:
                    labels[i, j] = smallest
                    changed = True
                for k in range(n_offsets):
                    y = i + offsets[k, 0]
                    x = j + offsets[k, 1]
                    if 0 <= y < height and 0 <= x < width and image[y, x] and labels[y, x] != smallest:
                        labels[y, x] = smallest
                        changed = True

        if not changed:
            return sweeps
        if 0 < max_sweeps <= sweeps:
            return -1


def _seed_rows_impl(image, labels):
    height, width = image.shape
    next_label = 1

    for i in range(height):
        for j in range(width):
            if not image[i, j]:
                continue
            if j > 0 and image[i, j - 1]:
                labels[i, j] = labels[i, j - 1]
            else:
                labels[i, j] = next_label
                next_label += 1

    return next_label - 1


def _relax_four_impl(image, labels, max_sweeps):
    height, width = image.shape
    sweeps = 0

    while True:
        changed = False
        sweeps += 1

        # top
        for j in range(width):
            for i in range(1, height):
                if image[i, j] and image[i - 1, j] and labels[i, j] != labels[i - 1, j]:
                    smallest = min(labels[i, j], labels[i - 1, j])
                    labels[i, j] = smallest
                    labels[i - 1, j] = smallest
                    changed = True

        # left
        for i in range(height):
            for j in range(1, width):
                if image[i, j] and image[i, j - 1] and labels[i, j] != labels[i, j - 1]:
                    smallest = min(labels[i, j], labels[i, j - 1])
                    labels[i, j] = smallest
                    labels[i, j - 1] = smallest
                    changed = True

        if not changed:
            return sweeps
        if 0 < max_sweeps <= sweeps:
            return -1


def _relax_eight_impl(image, labels, max_sweeps):
    height, width = image.shape
    sweeps = 0

    while True:
        changed = False
        sweeps += 1

        # top
        for j in range(width):
            for i in range(1, height):
                if image[i, j] and image[i - 1, j] and labels[i, j] != labels[i - 1, j]:
                    smallest = min(labels[i, j], labels[i - 1, j])
                    labels[i, j] = smallest
                    labels[i - 1, j] = smallest
                    changed = True

        # top-left
        for j in range(1, width):
            for i in range(1, height):
                if image[i, j] and image[i - 1, j - 1] and labels[i, j] != labels[i - 1, j - 1]:
                    smallest = min(labels[i, j], labels[i - 1, j - 1])
                    labels[i, j] = smallest
                    labels[i - 1, j - 1] = smallest
                    changed = True

        # top-right
        for j in range(width - 1):
            for i in range(1, height):
                if image[i, j] and image[i - 1, j + 1] and labels[i, j] != labels[i - 1, j + 1]:
                    smallest = min(labels[i, j], labels[i - 1, j + 1])
                    labels[i, j] = smallest
                    labels[i - 1, j + 1] = smallest
                    changed = True

        # left
        for i in range(height):
            for j in range(1, width):
                if image[i, j] and image[i, j - 1] and labels[i, j] != labels[i, j - 1]:
                    smallest = min(labels[i, j], labels[i, j - 1])
                    labels[i, j] = smallest
                    labels[i, j - 1] = smallest
                    changed = True

        if not changed:
            return sweeps
        if 0 < max_sweeps <= sweeps:
            return -1


def _union_find_impl(image, offsets, labels):
    height, width = image.shape
    n_offsets = offsets.shape[0]

    # One provisional label per foreground cell, so parent[label] is a forest over cells.
    next_label = 1
    for i in range(height):
        for j in range(width):
            if image[i, j]:
                labels[i, j] = next_label
                next_label += 1

    parent = np.arange(next_label, dtype=np.int64)
    rank = np.zeros(next_label, dtype=np.int64)

    for i in range(height):
        for j in range(width):
            if not image[i, j]:
                continue
            for k in range(n_offsets):
                y = i + offsets[k, 0]
                x = j + offsets[k, 1]
                if not (0 <= y < height and 0 <= x < width and image[y, x]):
                    continue

                a = labels[i, j]
                while parent[a] != a:
                    parent[a] = parent[parent[a]]
                    a = parent[a]
                b = labels[y, x]
                while parent[b] != b:
                    parent[b] = parent[parent[b]]
                    b = parent[b]
                if a == b:
                    continue

                if rank[a] < rank[b]:
                    parent[a] = b
                elif rank[a] > rank[b]:
                    parent[b] = a
                else:
                    parent[b] = a
                    rank[a] += 1

    for i in range(height):
        for j in range(width):
            if image[i, j]:
                root = labels[i, j]
                while parent[root] != root:
                    root = parent[root]
                labels[i, j] = root

    return next_label - 1


_PYTHON_KERNELS = {
    "seed_generic": _seed_generic_impl,
    "relax_generic": _relax_generic_impl,
    "seed_rows": _seed_rows_impl,
    "relax_four": _relax_four_impl,
    "relax_eight": _relax_eight_impl,
    "union_find": _union_find_impl,
}

_NUMBA_KERNELS = {}

if HAS_NUMBA:
    _NUMBA_KERNELS = {name: nb.njit(cache=True)(impl) for name, impl in _PYTHON_KERNELS.items()}


def _kernel(name):
    """Return the kernel ``name`` for the active backend."""
    if get_backend() == "numba" and HAS_NUMBA:
        return _NUMBA_KERNELS[name]
    return _PYTHON_KERNELS[name]


def _prepare(image, labels, offsets=None):
    image = np.ascontiguousarray(image, dtype=np.bool_)
    if labels.shape != image.shape or labels.dtype != np.int64 or not labels.flags.c_contiguous:
        raise ValueError("labels must be a C-contiguous int64 array with the same shape as image.")
    if offsets is None:
        return image
    return image, np.ascontiguousarray(offsets, dtype=np.int64).reshape(-1, 2)


def seed_generic(image, offsets, labels):
    """Assign provisional labels in one row-major sweep.

    Each foreground cell takes the smallest label already present among its
    in-bounds foreground neighbors, or a fresh label when there is none.

    Parameters
    ----------
    image : ndarray
        Boolean image of shape ``(height, width)``.
    offsets : ndarray
        Neighbor offsets as ``(dy, dx)`` rows.
    labels : ndarray
        Zero-filled int64 grid, written in place.

    Returns
    -------
    int
        Number of fresh labels handed out.
    """
    image, offsets = _prepare(image, labels, offsets)
    return int(_kernel("seed_generic")(image, offsets, labels))


def relax_generic(image, offsets, labels, max_sweeps=0):
    """Propagate minimum labels over the offsets until no sweep changes anything.

    Offsets act in both directions: a cell pulls the minimum of itself and its
    neighbors and pushes that minimum back to every neighbor.

    Parameters
    ----------
    image : ndarray
        Boolean image of shape ``(height, width)``.
    offsets : ndarray
        Neighbor offsets as ``(dy, dx)`` rows.
    labels : ndarray
        Seeded int64 grid, updated in place.
    max_sweeps : int, default=0
        Maximum number of sweeps; ``0`` means unbounded.

    Returns
    -------
    int
        Sweeps performed, including the final sweep that changed nothing, or
        ``-1`` if ``max_sweeps`` was reached first.
    """
    image, offsets = _prepare(image, labels, offsets)
    return int(_kernel("relax_generic")(image, offsets, labels, int(max_sweeps)))


def seed_rows(image, labels):
    """Assign provisional labels joining each foreground cell to its left neighbor.

    Returns
    -------
    int
        Number of fresh labels handed out.
    """
    image = _prepare(image, labels)
    return int(_kernel("seed_rows")(image, labels))


def relax_four(image, labels, max_sweeps=0):
    """Run top and left pair sweeps until labels stop changing.

    Returns
    -------
    int
        Sweeps performed, or ``-1`` if ``max_sweeps`` was reached first.
    """
    image = _prepare(image, labels)
    return int(_kernel("relax_four")(image, labels, int(max_sweeps)))


def relax_eight(image, labels, max_sweeps=0):
    """Run top, top-left, top-right and left pair sweeps until labels stop changing.

    Returns
    -------
    int
        Sweeps performed, or ``-1`` if ``max_sweeps`` was reached first.
    """
    image = _prepare(image, labels)
    return int(_kernel("relax_eight")(image, labels, int(max_sweeps)))


def union_find(image, offsets, labels):
    """Label components with a disjoint-set forest.

    Uses union by rank and path halving. Every foreground cell is joined with
    each in-bounds foreground cell reached through an offset, then rewritten to
    its set root.

    Returns
    -------
    int
        Number of provisional labels, one per foreground cell.
    """
    image, offsets = _prepare(image, labels, offsets)
    return int(_kernel("union_find")(image, offsets, labels))
