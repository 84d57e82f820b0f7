"""Connected-component labeling over an arbitrary neighborhood."""

from __future__ import annotations

import logging

from pixlabel.core.exceptions import ConvergenceError, EmptyNeighborhoodError
from pixlabel.core.grid import freeze, new_label_grid, to_bool_grid
from pixlabel.structure.neighborhood import Neighborhood

from .compact import compact_labels
from .numba import relax_generic, seed_generic

__all__ = ["label_generic"]

logger = logging.getLogger(__name__)


def label_generic(image, neighborhood: Neighborhood):
    """Label the connected components of a binary image.

    Two foreground cells share a label exactly when a chain of foreground
    cells joins them, each step of the chain being one of the neighborhood's
    offsets taken in either direction. Labels are compact: background is 0
    and the components are numbered ``1..K`` in row-major order of first
    appearance.

    Parameters
    ----------
    image : array_like or BoolGridLike
        Binary image of shape ``(height, width)``. Non-zero is foreground.
    neighborhood : Neighborhood
        Adjacency pattern. Must define at least one neighbor.

    Returns
    -------
    ndarray
        Read-only int64 label grid with the shape of ``image``.

    Raises
    ------
    EmptyNeighborhoodError
        If ``neighborhood`` defines no neighbor.
    InvalidArgumentError
        If ``image`` is not two dimensional.

    Examples
    --------
    >>> from pixlabel.structure import Neighborhood
    >>> label_generic([[1, 0, 1]], Neighborhood.horizontal(5))
    array([[1, 0, 1]])
    """
    labels, _, _ = _label_relaxation(image, neighborhood, max_sweeps=None)
    return labels


def _label_relaxation(image, neighborhood, max_sweeps):
    """Seed, relax and compact; returns ``(labels, n_components, n_sweeps)``."""
    if not neighborhood.has_neighbors:
        raise EmptyNeighborhoodError()

    grid = to_bool_grid(image)
    labels = new_label_grid(grid.shape)
    logger.debug("Labeling %dx%d grid over %d neighbor offsets", *grid.shape, neighborhood.n_neighbors)

    n_seeds = seed_generic(grid, neighborhood.offsets, labels)
    logger.debug("Seeding pass assigned %d provisional labels", n_seeds)

    sweeps = relax_generic(grid, neighborhood.offsets, labels, max_sweeps or 0)
    if sweeps < 0:
        raise ConvergenceError(max_sweeps)
    logger.debug("Relaxation converged after %d sweeps", sweeps)

    n_components = compact_labels(labels)
    return freeze(labels), n_components, sweeps
