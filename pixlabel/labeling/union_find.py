"""Disjoint-set labeling, an alternative to label relaxation."""

from __future__ import annotations

import logging

from pixlabel.core.exceptions import EmptyNeighborhoodError
from pixlabel.core.grid import freeze, new_label_grid, to_bool_grid
from pixlabel.structure.neighborhood import Neighborhood

from .compact import compact_labels
from .numba import union_find

__all__ = ["label_union_find"]

logger = logging.getLogger(__name__)


def label_union_find(image, neighborhood: Neighborhood):
    """Label connected components with a union-find forest.

    Produces exactly the partition and the numbering of
    :func:`~pixlabel.labeling.generic.label_generic`, in a single pass over
    the image plus one root lookup per cell, with no repeated sweeps.

    Parameters
    ----------
    image : array_like or BoolGridLike
        Binary image of shape ``(height, width)``. Non-zero is foreground.
    neighborhood : Neighborhood
        Adjacency pattern, used symmetrically. Must define at least one neighbor.

    Returns
    -------
    labels : ndarray
        Read-only int64 label grid.
    n_components : int
        Number of connected components.
    """
    if not neighborhood.has_neighbors:
        raise EmptyNeighborhoodError()

    grid = to_bool_grid(image)
    labels = new_label_grid(grid.shape)
    logger.debug("Union-find labeling of %dx%d grid over %d offsets", *grid.shape, neighborhood.n_neighbors)

    n_provisional = union_find(grid, neighborhood.offsets, labels)
    n_components = compact_labels(labels)
    logger.debug("Merged %d provisional labels into %d components", n_provisional, n_components)

    return freeze(labels), n_components
